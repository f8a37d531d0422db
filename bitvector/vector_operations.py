"""
Vector Operations Module

Pure functional algorithms written against the FeatureVector protocol, plus
bit-vector specific helpers: Hamming distance/similarity and deterministic
generation from text.
"""

import hashlib
import logging
from typing import List, Optional, Sequence

import numpy as np

from .bit_vector import BitVector
from .error_handling import InvalidDimensionError
from .feature_vector import FeatureVector

logger = logging.getLogger(__name__)

def combine_vectors(vectors: Sequence[FeatureVector]) -> FeatureVector:
    """
    Fold a sequence of vectors together with ``combine``.

    Args:
        vectors (Sequence[FeatureVector]): Vectors to combine, left to right.

    Returns:
        FeatureVector: ``vectors[0].combine(vectors[1]).combine(...)``

    Raises:
        ValueError: If ``vectors`` is empty.
    """
    if not vectors:
        raise ValueError("Cannot combine an empty list of vectors")

    result = vectors[0].copy()
    for vector in vectors[1:]:
        result = result.combine(vector)
    return result

def vectors_to_matrix(vectors: Sequence[FeatureVector]) -> np.ndarray:
    """
    Stack the numeric views of vectors into a matrix, one row per vector.

    Args:
        vectors (Sequence[FeatureVector]): Vectors of equal dimensionality.

    Returns:
        np.ndarray: float64 array of shape ``(len(vectors), dimensionality)``.

    Raises:
        InvalidDimensionError: If the dimensionalities differ.
    """
    if not vectors:
        return np.zeros((0, 0), dtype=np.float64)

    dimensionality = vectors[0].dimensionality()
    for vector in vectors[1:]:
        if vector.dimensionality() != dimensionality:
            raise InvalidDimensionError(
                f"All vectors must have the same dimensionality: {dimensionality} vs {vector.dimensionality()}",
                dimensionality=vector.dimensionality(),
                required=dimensionality,
            )

    return np.vstack([vector.get_vector() for vector in vectors])

def hamming_distance(vector_a: BitVector, vector_b: BitVector) -> int:
    """
    Count the positions at which two bit vectors differ.

    Raises:
        InvalidDimensionError: If the dimensionalities differ.
    """
    if vector_a.dimensionality() != vector_b.dimensionality():
        raise InvalidDimensionError(
            f"Vectors must have same dimensionality: {vector_a.dimensionality()} vs {vector_b.dimensionality()}",
            dimensionality=vector_b.dimensionality(),
            required=vector_a.dimensionality(),
        )
    return int(np.count_nonzero(vector_a.get_vector() != vector_b.get_vector()))

def calculate_similarity(vector_a: BitVector, vector_b: BitVector) -> float:
    """
    Hamming similarity between two bit vectors.

    Args:
        vector_a (BitVector): First vector
        vector_b (BitVector): Second vector

    Returns:
        float: ``1 - distance / dimensionality``, between 0 and 1. Two empty
            vectors are identical.
    """
    distance = hamming_distance(vector_a, vector_b)
    if vector_a.dimensionality() == 0:
        return 1.0
    return 1.0 - distance / vector_a.dimensionality()

def generate_bit_vector(text: str, dimensionality: int, seed: Optional[int] = None) -> BitVector:
    """
    Generate a deterministic bit vector from text.

    Args:
        text (str): Text the vector is derived from; also used as identifier.
        dimensionality (int): Length of the vector
        seed (int, optional): Random seed overriding the text-derived one

    Returns:
        BitVector: Roughly half of the bits set, identical for identical inputs.
    """
    if dimensionality < 0:
        raise InvalidDimensionError(f"Dimensionality must be non-negative, got {dimensionality}")

    if seed is None:
        seed = int(hashlib.md5(text.encode()).hexdigest(), 16) % (2**32)

    rng = np.random.default_rng(seed)
    flags: List[bool] = rng.integers(0, 2, dimensionality).astype(bool).tolist()
    logger.debug("Generated bit vector for %r with dimensionality %d", text, dimensionality)
    return BitVector.from_bit_array(flags, identifier=text)
