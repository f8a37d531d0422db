"""
Double Vector Module

Real-valued counterpart of BitVector. It satisfies the same FeatureVector
protocol with ordinary real arithmetic: scaling multiplies, combination adds.
"""

from typing import Hashable, List, Optional, Sequence

import numpy as np

from .error_handling import IndexOutOfRangeError, InvalidDimensionError


class DoubleVector:
    """Immutable vector of float64 values backed by a numpy array."""

    __slots__ = ("_values", "identifier")

    def __init__(self, values: Sequence[float], identifier: Optional[Hashable] = None):
        array = np.array(values, dtype=np.float64)
        if array.ndim != 1:
            raise InvalidDimensionError(f"Values must be one-dimensional, got shape {array.shape}")
        array.setflags(write=False)
        self._values = array
        self.identifier = identifier

    def dimensionality(self) -> int:
        return self._values.shape[0]

    def get_value(self, dimension: int) -> float:
        """
        Return the value of a 1-based dimension.

        Raises:
            IndexOutOfRangeError: If ``dimension`` is outside ``[1, dimensionality]``.
        """
        if dimension < 1 or dimension > self.dimensionality():
            raise IndexOutOfRangeError(dimension, self.dimensionality())
        return float(self._values[dimension - 1])

    def get_values(self) -> List[float]:
        return self._values.tolist()

    def get_vector(self) -> np.ndarray:
        return self._values.copy()

    def scale(self, k: float) -> "DoubleVector":
        return DoubleVector(self._values * k)

    def negate(self) -> "DoubleVector":
        return DoubleVector(-self._values)

    def null_vector(self) -> "DoubleVector":
        return DoubleVector(np.zeros_like(self._values))

    def combine(self, other: "DoubleVector") -> "DoubleVector":
        """
        Element-wise sum of both vectors.

        Raises:
            InvalidDimensionError: If the dimensionalities differ.
        """
        if other.dimensionality() != self.dimensionality():
            raise InvalidDimensionError(
                f"Incompatible dimensionality: {self.dimensionality()} - {other.dimensionality()}",
                dimensionality=other.dimensionality(),
                required=self.dimensionality(),
            )
        return DoubleVector(self._values + other.get_vector())

    def copy(self) -> "DoubleVector":
        return DoubleVector(self._values, identifier=self.identifier)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DoubleVector):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    def __hash__(self) -> int:
        # -0.0 and 0.0 compare equal, so they must hash alike
        return hash((self._values + 0.0).tobytes())

    def __repr__(self) -> str:
        return f"DoubleVector({self._values.tolist()})"
