"""
Test double vector module
"""

import numpy as np
import pytest
from bitvector.bit_vector import BitVector
from bitvector.double_vector import DoubleVector
from bitvector.error_handling import IndexOutOfRangeError, InvalidDimensionError
from bitvector.feature_vector import FeatureVector

def test_accessors():
    """Test dimensionality and value access"""
    vector = DoubleVector([1.5, -2.0, 3.25])

    assert vector.dimensionality() == 3
    assert vector.get_value(1) == 1.5
    assert vector.get_value(3) == 3.25
    assert vector.get_values() == [1.5, -2.0, 3.25]
    assert np.array_equal(vector.get_vector(), np.array([1.5, -2.0, 3.25]))

    with pytest.raises(IndexOutOfRangeError):
        vector.get_value(0)
    with pytest.raises(IndexOutOfRangeError):
        vector.get_value(4)

def test_immutable():
    """Test that the numeric view cannot alter the vector"""
    vector = DoubleVector([1.0, 2.0])
    view = vector.get_vector()
    view[0] = 99.0
    assert vector.get_value(1) == 1.0

def test_algebra():
    """Test real-valued scaling, negation and combination"""
    a = DoubleVector([1.0, 2.0, 3.0])
    b = DoubleVector([0.5, 0.5, -1.0])

    assert a.scale(2.0) == DoubleVector([2.0, 4.0, 6.0])
    assert a.scale(0) == a.null_vector()
    assert a.negate() == DoubleVector([-1.0, -2.0, -3.0])
    assert a.combine(b) == DoubleVector([1.5, 2.5, 2.0])
    assert a.combine(a.negate()) == a.null_vector()

    with pytest.raises(InvalidDimensionError):
        a.combine(DoubleVector([1.0]))

def test_copy_and_identifier():
    """Test copies carry the identity token"""
    vector = DoubleVector([1.0], identifier=42)
    duplicate = vector.copy()

    assert duplicate == vector
    assert duplicate.identifier == 42
    assert vector.negate().identifier is None

def test_not_one_dimensional():
    """Test that nested values are rejected"""
    with pytest.raises(InvalidDimensionError):
        DoubleVector([[1.0, 2.0], [3.0, 4.0]])

def test_independent_protocol_implementations():
    """Test both vector kinds satisfy the protocol without a shared base"""
    double_vector = DoubleVector([0.0, 1.0])
    bit_vector = BitVector.from_bit_array([0, 1])

    assert isinstance(double_vector, FeatureVector)
    assert isinstance(bit_vector, FeatureVector)
    assert not isinstance(double_vector, BitVector)
    assert np.array_equal(double_vector.get_vector(), bit_vector.get_vector())

def test_hash_consistent_with_signed_zero():
    """Test vectors equal despite -0.0 entries hash alike"""
    vector = DoubleVector([1.0, 0.0])
    null = vector.null_vector()
    negated = null.negate()

    assert negated == null
    assert hash(negated) == hash(null)
    assert len({null, negated}) == 1
