"""
Test configuration parser module
"""

import json
import pytest
from bitvector.bit_vector import BitVector
from bitvector.config_parser import (
    parse_input_config, validate_config, extract_vectors, extract_logging_options,
    process_config_file, BitVectorParameters
)
from bitvector.error_handling import InvalidDimensionError, is_error, is_success, get_value
from bitvector.feature_vector import Parameterizable

@pytest.fixture
def config_dict():
    return {
        "vectors": [
            {"id": "a", "dimensionality": 4, "bits": [0, 3]},
            {"id": "b", "values": [True, False, 1]}
        ]
    }

def write_config(tmp_path, config):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config))
    return str(path)

def test_parse_input_config(tmp_path, config_dict):
    """Test reading a JSON configuration file"""
    result = parse_input_config(write_config(tmp_path, config_dict))
    assert is_success(result)
    assert get_value(result) == config_dict

    assert is_error(parse_input_config(str(tmp_path / "missing.json")))

    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    assert is_error(parse_input_config(str(broken)))

def test_validate_config_defaults(config_dict):
    """Test validation applies logging defaults"""
    result = validate_config(config_dict)
    assert is_success(result)

    validated = get_value(result)
    assert validated["logging"]["log_level"] == "info"
    assert validated["logging"]["include_vector_operations"] is False
    assert extract_logging_options(validated)["log_level"] == "info"

@pytest.mark.parametrize("config", [
    {},
    {"vectors": [{"dimensionality": 3, "bits": [1]}]},
    {"vectors": [{"id": "a", "bits": [1]}]},
    {"vectors": [{"id": "a", "dimensionality": -1, "bits": []}]},
    {"vectors": [{"id": "a", "values": [2]}]},
    {"vectors": [{"id": "a", "values": [1], "dimensionality": 1, "bits": []}]},
    {"vectors": [], "logging": {"log_level": "verbose"}},
])
def test_validate_config_rejects(config):
    """Test schema violations are returned as errors"""
    assert is_error(validate_config(config))

def test_extract_vectors(config_dict):
    """Test building declared vectors"""
    vectors = extract_vectors(get_value(validate_config(config_dict)))

    assert list(vectors) == ["a", "b"]
    assert vectors["a"] == BitVector.from_bit_set({0, 3}, 4)
    assert vectors["a"].identifier == "a"
    assert vectors["b"].set_bits() == [0, 2]
    assert vectors["b"].dimensionality() == 3

def test_extract_vectors_errors():
    """Test inconsistent declarations raise"""
    with pytest.raises(InvalidDimensionError):
        extract_vectors({"vectors": [{"id": "a", "dimensionality": 2, "bits": [5]}]})

    with pytest.raises(ValueError):
        extract_vectors({"vectors": [{"id": "a", "values": [1]}, {"id": "a", "values": [0]}]})

def test_process_config_file(tmp_path, config_dict):
    """Test the full configuration pipeline"""
    processed = process_config_file(write_config(tmp_path, config_dict))

    assert set(processed["vectors"]) == {"a", "b"}
    assert processed["logging_options"]["log_level"] == "info"
    assert processed["raw_config"]["vectors"] == config_dict["vectors"]

    with pytest.raises(ValueError):
        process_config_file(write_config(tmp_path, {"vectors": "nope"}))

    with pytest.raises(ValueError):
        process_config_file(str(tmp_path / "missing.json"))

def test_parameters_consume_known_options():
    """Test option parsing returns the unused remainder"""
    parameters = BitVectorParameters()
    assert isinstance(parameters, Parameterizable)

    remaining = parameters.set_parameters(["-verbose", "-dim", "5", "-k", "3", "-bits", "0,4"])
    assert remaining == ["-verbose", "-k", "3"]
    assert parameters.dimensionality == 5
    assert parameters.bits == [0, 4]

    vector = parameters.build(identifier="cli")
    assert vector == BitVector.from_bit_set({0, 4}, 5)
    assert vector.identifier == "cli"

def test_parameters_empty_bits():
    """Test an empty bit list declares a null vector"""
    parameters = BitVectorParameters()
    assert parameters.set_parameters(["-dim", "3", "-bits", ""]) == []
    assert parameters.build().set_bits() == []

@pytest.mark.parametrize("args", [
    ["-dim"],
    ["-dim", "three"],
    ["-dim", "-2"],
    ["-bits", "1,x"],
    ["-bits", "1,-1"],
])
def test_parameters_malformed(args):
    """Test malformed options raise descriptive errors"""
    with pytest.raises(ValueError):
        BitVectorParameters().set_parameters(args)

def test_parameters_build_errors():
    """Test building requires a fitting dimensionality"""
    with pytest.raises(ValueError, match="-dim"):
        BitVectorParameters().build()

    parameters = BitVectorParameters()
    parameters.set_parameters(["-dim", "2", "-bits", "7"])
    with pytest.raises(InvalidDimensionError):
        parameters.build()

def test_description_names_options():
    """Test the self-description lists the options"""
    description = BitVectorParameters().description()
    assert "-dim" in description
    assert "-bits" in description
