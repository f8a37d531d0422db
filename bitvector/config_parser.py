"""
Configuration Parser for bitvector.

This module handles parsing, validation, and extraction of vector declarations
from a JSON configuration file, and provides an option-list parameterizer that
builds a BitVector from command-line style arguments.
"""

import json
import os
import logging
from typing import Any, Dict, List, Optional, Sequence

from jsonschema import validate, ValidationError

from .bit_vector import BitVector
from .error_handling import success, error, is_error, get_value, get_error, map_success

# Set up logging
logger = logging.getLogger(__name__)

# Configuration schema for validation
CONFIG_SCHEMA = {
    "type": "object",
    "required": ["vectors"],
    "properties": {
        "vectors": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id"],
                "oneOf": [
                    {"required": ["dimensionality", "bits"]},
                    {"required": ["values"]}
                ],
                "properties": {
                    "id": {"type": "string"},
                    "dimensionality": {"type": "integer", "minimum": 0},
                    "bits": {
                        "type": "array",
                        "items": {"type": "integer", "minimum": 0}
                    },
                    "values": {
                        "type": "array",
                        "items": {"type": ["boolean", "integer"], "minimum": 0, "maximum": 1}
                    }
                }
            }
        },
        "logging": {
            "type": "object",
            "properties": {
                "log_level": {"type": "string", "enum": ["debug", "info", "warning", "error"]},
                "log_path": {"type": "string"},
                "include_vector_operations": {"type": "boolean"}
            }
        }
    }
}

def parse_input_config(input_path: str):
    """
    Parse input JSON configuration file.

    Args:
        input_path (str): Path to the JSON configuration file.

    Returns:
        Result: ``(config, None)`` on success, ``(None, message)`` otherwise.
    """
    if not os.path.exists(input_path):
        return error(f"Configuration file not found: {input_path}")

    try:
        with open(input_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        return error(f"Invalid JSON in configuration file: {str(e)}")

    logger.info(f"Successfully parsed configuration file: {input_path}")
    return success(config)

def validate_config(config_dict: Dict[str, Any]):
    """
    Validate configuration dictionary and provide defaults for missing values.

    Args:
        config_dict (dict): Raw configuration dictionary from parsed JSON.

    Returns:
        Result: The validated configuration with defaults applied, or an error
            message describing the schema violation.
    """
    try:
        validate(instance=config_dict, schema=CONFIG_SCHEMA)
    except ValidationError as e:
        logger.error(f"Configuration validation error: {e.message}")
        return error(f"Invalid configuration: {e.message}")

    config_dict.setdefault("logging", {})
    config_dict["logging"].setdefault("log_level", "info")
    config_dict["logging"].setdefault("include_vector_operations", False)

    logger.info("Configuration validated and defaults applied")
    return success(config_dict)

def extract_logging_options(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract logging-related options from configuration.

    Args:
        config_dict (dict): Validated configuration dictionary.

    Returns:
        dict: Logging options such as level, path and operation logging flag.
    """
    if "logging" not in config_dict:
        logger.warning("No logging options found in configuration")
        return {}

    logging_options = config_dict["logging"].copy()
    logger.debug(f"Extracted logging options: {logging_options}")
    return logging_options

def extract_vectors(config_dict: Dict[str, Any]) -> Dict[str, BitVector]:
    """
    Build the bit vectors declared in a validated configuration.

    Entries with ``values`` use the bit-array form; entries with ``bits`` and
    ``dimensionality`` wrap the listed set indices.

    Args:
        config_dict (dict): Validated configuration dictionary.

    Returns:
        dict: Mapping of vector id to BitVector, in declaration order.

    Raises:
        ValueError: If an id is declared twice.
        InvalidDimensionError: If declared bits do not fit the dimensionality.
    """
    vectors = {}
    for entry in config_dict.get("vectors", []):
        vector_id = entry["id"]
        if vector_id in vectors:
            raise ValueError(f"Duplicate vector id in configuration: {vector_id}")

        if "values" in entry:
            vector = BitVector.from_bit_array(entry["values"], identifier=vector_id)
        else:
            vector = BitVector.from_bit_set(entry["bits"], entry["dimensionality"], identifier=vector_id)

        vectors[vector_id] = vector

    logger.info(f"Extracted {len(vectors)} vectors from configuration")
    return vectors

def process_config_file(input_path: str) -> Dict[str, Any]:
    """
    Process configuration file from parsing to validation and extraction.

    Args:
        input_path (str): Path to the configuration file.

    Returns:
        dict: Built vectors, logging options and the validated raw config.

    Raises:
        ValueError: If the file is missing, not JSON, or fails validation.
    """
    raw_config_result = parse_input_config(input_path)
    if is_error(raw_config_result):
        raise ValueError(get_error(raw_config_result))

    validated_config_result = validate_config(get_value(raw_config_result))
    vectors_result = map_success(validated_config_result, extract_vectors)
    if is_error(vectors_result):
        raise ValueError(get_error(vectors_result))

    validated_config = get_value(validated_config_result)
    processed_config = {
        "vectors": get_value(vectors_result),
        "logging_options": extract_logging_options(validated_config),
        "raw_config": validated_config
    }

    logger.info("Configuration processing complete")
    return processed_config


class BitVectorParameters:
    """
    Builds a BitVector from an option list such as ``-dim 8 -bits 1,3``.

    Unknown options are left in the returned remainder for other
    parameterizable components to consume.
    """

    DIM_OPTION = "-dim"
    BITS_OPTION = "-bits"

    def __init__(self):
        self.dimensionality: Optional[int] = None
        self.bits: List[int] = []

    def description(self) -> str:
        return (
            f"{self.__class__.__name__}: declares a bit vector.\n"
            f"  {self.DIM_OPTION} <int>          dimensionality of the vector (>= 0, required)\n"
            f"  {self.BITS_OPTION} <i,j,...>     comma separated 0-based indices of set bits (default: none)\n"
        )

    def set_parameters(self, args: Sequence[str]) -> List[str]:
        """
        Consume the options this class understands.

        Args:
            args (Sequence[str]): Option list.

        Returns:
            list: Unused arguments in their original order.

        Raises:
            ValueError: If an option lacks its value or the value is malformed.
        """
        remaining = []
        position = 0
        while position < len(args):
            option = args[position]
            if option not in (self.DIM_OPTION, self.BITS_OPTION):
                remaining.append(option)
                position += 1
                continue

            if position + 1 >= len(args):
                raise ValueError(f"Missing value for option {option}\n{self.description()}")
            value = args[position + 1]

            if option == self.DIM_OPTION:
                self.dimensionality = self._parse_dimensionality(value)
            else:
                self.bits = self._parse_bits(value)
            position += 2

        return remaining

    def build(self, identifier: Any = None) -> BitVector:
        """
        Create the configured BitVector.

        Raises:
            ValueError: If no dimensionality was set.
            InvalidDimensionError: If the bits do not fit the dimensionality.
        """
        if self.dimensionality is None:
            raise ValueError(f"Parameter {self.DIM_OPTION} is required\n{self.description()}")
        return BitVector.from_bit_set(self.bits, self.dimensionality, identifier=identifier)

    def _parse_dimensionality(self, value: str) -> int:
        try:
            dimensionality = int(value)
        except ValueError:
            raise ValueError(f"Illegal value for {self.DIM_OPTION}: {value!r} is not an integer") from None
        if dimensionality < 0:
            raise ValueError(f"Illegal value for {self.DIM_OPTION}: {dimensionality} is negative")
        return dimensionality

    def _parse_bits(self, value: str) -> List[int]:
        if not value.strip():
            return []
        try:
            bits = [int(part) for part in value.split(",")]
        except ValueError:
            raise ValueError(f"Illegal value for {self.BITS_OPTION}: {value!r} is not a list of integers") from None
        negative = [index for index in bits if index < 0]
        if negative:
            raise ValueError(f"Illegal value for {self.BITS_OPTION}: negative indices {negative}")
        return bits
