"""
Test logging utilities module
"""

import json
import logging
import numpy as np
from bitvector.bit import Bit
from bitvector.bit_vector import BitVector
from bitvector.double_vector import DoubleVector
from bitvector.logging_utils import (
    BitVectorJSONEncoder, initialize_logger, log_vector_operation, timer
)

def test_json_encoder():
    """Test encoding of vectors and numpy values"""
    encoded = json.loads(json.dumps({
        "bit": Bit(1),
        "bits": BitVector.from_bit_set({1, 2}, 4, identifier="v"),
        "reals": DoubleVector([0.5, 1.0]),
        "small": np.array([1.0, 0.0]),
        "scalar": np.float64(2.5),
        "indices": {3, 1},
    }, cls=BitVectorJSONEncoder))

    assert encoded["bit"] == 1
    assert encoded["bits"] == {"dimensionality": 4, "set_bits": [1, 2], "identifier": "v"}
    assert encoded["reals"]["values"] == [0.5, 1.0]
    assert encoded["small"] == [1.0, 0.0]
    assert encoded["scalar"] == 2.5
    assert encoded["indices"] == [1, 3]

    large = json.loads(json.dumps(np.zeros(20), cls=BitVectorJSONEncoder))
    assert large.startswith("ndarray(shape=(20,)")

def test_initialize_logger(tmp_path):
    """Test logger setup with file and console handlers"""
    logger = initialize_logger(str(tmp_path / "logs"), "debug")

    assert logger.name == "bitvector.main"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert any((tmp_path / "logs").iterdir())

    # Re-initializing replaces handlers instead of stacking them
    logger = initialize_logger(None, "warning")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1

def test_log_vector_operation(caplog):
    """Test vector operations are logged as JSON at debug level"""
    logger = logging.getLogger("bitvector.test_operations")
    a = BitVector.from_bit_array([1, 0, 1])
    b = BitVector.from_bit_array([1, 1, 0])

    caplog.set_level(logging.DEBUG, logger="bitvector.test_operations")
    message = log_vector_operation(logger, "combine", {"a": a, "b": b}, {"result": a.combine(b)})

    entry = json.loads(message)
    assert entry["operation_type"] == "combine"
    assert entry["inputs"]["a"]["set_bits"] == [0, 2]
    assert entry["outputs"]["result"]["set_bits"] == [1, 2]
    assert message in caplog.text

    caplog.set_level(logging.INFO, logger="bitvector.test_operations")
    assert log_vector_operation(logger, "negate", {"a": a}, {"result": a.negate()}) is None

def test_timer(caplog):
    """Test the timing decorator logs and passes results through"""
    logger = logging.getLogger("bitvector.test_timer")
    caplog.set_level(logging.INFO, logger="bitvector.test_timer")

    @timer(logger, "negate")
    def negate(vector):
        return vector.negate()

    result = negate(BitVector.from_bit_array([1, 0]))
    assert result.set_bits() == [1]
    assert negate.__name__ == "negate"
    assert "Performance - negate" in caplog.text
