"""
bitvector: Fixed-Dimensionality Bit Vectors

A small library implementing an immutable bit vector value type with a
GF(2)-style algebra (XOR combination, negation, scalar gating) and a numeric
numpy projection, alongside a real-valued vector satisfying the same
FeatureVector protocol.
"""

__version__ = "0.1.0"

# Import core components for easy access
from .bit import Bit
from .bit_vector import BitVector
from .double_vector import DoubleVector
from .feature_vector import FeatureVector, Parameterizable
from .error_handling import BitVectorError, InvalidDimensionError, IndexOutOfRangeError
from .vector_operations import (
    combine_vectors, vectors_to_matrix, hamming_distance,
    calculate_similarity, generate_bit_vector
)
from .config_parser import parse_input_config, validate_config, process_config_file, BitVectorParameters
from .logging_utils import initialize_logger
