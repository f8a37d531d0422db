"""
Load the vectors declared in a configuration file, combine them and print
their numeric projection.

Usage: python examples/example.py [config.json] [-dim N -bits i,j,...]
"""

import os
import sys

from bitvector import (
    BitVectorParameters, combine_vectors, calculate_similarity,
    initialize_logger, process_config_file, vectors_to_matrix
)
from bitvector.logging_utils import log_vector_operation

DEFAULT_CONFIG = os.path.join(os.path.dirname(__file__), "configs", "example_vectors.json")


def main(args):
    parameters = BitVectorParameters()
    remaining = parameters.set_parameters(args)
    config_path = remaining[0] if remaining else DEFAULT_CONFIG

    processed = process_config_file(config_path)
    logging_options = processed["logging_options"]
    logger = initialize_logger(logging_options.get("log_path"), logging_options["log_level"])

    vectors = processed["vectors"]
    if parameters.dimensionality is not None:
        vectors["cli"] = parameters.build(identifier="cli")

    combined = combine_vectors(list(vectors.values()))
    if logging_options["include_vector_operations"]:
        log_vector_operation(logger, "combine", vectors, {"result": combined})

    print(f"Combined: {combined!r} set bits {combined.set_bits()}")
    names = list(vectors)
    for first, second in zip(names, names[1:]):
        if vectors[first].dimensionality() == vectors[second].dimensionality():
            print(f"similarity({first}, {second}) = {calculate_similarity(vectors[first], vectors[second]):.3f}")
    print(vectors_to_matrix([v for v in vectors.values() if v.dimensionality() == combined.dimensionality()]))


if __name__ == "__main__":
    main(sys.argv[1:])
