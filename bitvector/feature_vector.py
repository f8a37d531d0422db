"""
Feature Vector Protocols

Structural interfaces shared by the vector types of this package. Vector kinds
do not inherit from a common base; each one satisfies ``FeatureVector`` on its
own so that generic algorithms in ``vector_operations`` can treat them alike.
"""

from typing import List, Protocol, Sequence, TypeVar, runtime_checkable

import numpy as np

V = TypeVar('V')


@runtime_checkable
class FeatureVector(Protocol[V]):
    """
    A fixed-dimensionality vector over element type ``V``.

    Dimensions are addressed 1-based through ``get_value``. Algebraic
    operations never mutate the receiver.
    """

    def dimensionality(self) -> int:
        ...

    def get_value(self, dimension: int) -> V:
        ...

    def get_values(self) -> List[V]:
        ...

    def get_vector(self) -> np.ndarray:
        """Numeric float64 view, one entry per dimension."""
        ...

    def scale(self, k: float) -> "FeatureVector[V]":
        ...

    def negate(self) -> "FeatureVector[V]":
        ...

    def null_vector(self) -> "FeatureVector[V]":
        ...

    def combine(self, other: "FeatureVector[V]") -> "FeatureVector[V]":
        ...

    def copy(self) -> "FeatureVector[V]":
        ...


@runtime_checkable
class Parameterizable(Protocol):
    """
    Objects configurable from a command-line style option list.

    ``set_parameters`` consumes the options it understands and returns the
    remaining ones in their original order. Malformed input raises
    ``ValueError`` with a message naming the offending option.
    """

    def description(self) -> str:
        ...

    def set_parameters(self, args: Sequence[str]) -> List[str]:
        ...
