"""
Bit Vector Module

BitVector is an immutable, fixed-dimensionality vector of bits. Storage is a
Python int used as a dense bit set: bit ``i`` of the integer holds vector
position ``i``. The algebra is GF(2)-style: combination is XOR, negation flips
every declared position, and scaling only distinguishes zero from nonzero.
"""

import logging
import operator
from typing import Any, Hashable, Iterable, Iterator, List, Optional, Sequence, Union

import numpy as np

from .bit import Bit
from .error_handling import IndexOutOfRangeError, InvalidDimensionError

logger = logging.getLogger(__name__)

BitSet = Union[int, Iterable[int]]


def _indices_to_mask(indices: Iterable[int]) -> int:
    mask = 0
    for index in indices:
        index = int(index)
        if index < 0:
            raise ValueError(f"Bit indices must be non-negative, got {index}")
        mask |= 1 << index
    return mask


def _unpack(bits: int, dimensionality: int) -> np.ndarray:
    """Unpack the low ``dimensionality`` bits of ``bits`` into a uint8 array."""
    if dimensionality == 0:
        return np.zeros(0, dtype=np.uint8)
    masked = bits & ((1 << dimensionality) - 1)
    raw = np.frombuffer(masked.to_bytes((dimensionality + 7) // 8, "little"), dtype=np.uint8)
    return np.unpackbits(raw, bitorder="little")[:dimensionality]


class BitVector:
    """
    A bit vector wrapping a bit set of declared dimensionality.

    Two indexing conventions coexist. ``get_value`` takes a 1-based dimension
    but reads the storage bit at that same number, so ``get_value(d)`` returns
    bit ``d`` rather than bit ``d - 1``. Every other accessor is 0-based.

    The optional ``identifier`` is an opaque identity token. It is carried by
    ``copy()`` and ignored by equality.
    """

    __slots__ = ("_bits", "_dimensionality", "identifier")

    def __init__(self, bits: BitSet, dimensionality: int, identifier: Optional[Hashable] = None):
        """
        Wrap a bit set with an explicit dimensionality.

        Args:
            bits (int | Iterable[int]): Bit mask, or the indices of the set bits.
            dimensionality (int): Declared length of the vector.
            identifier (Hashable, optional): Identity token travelling with the vector.

        Raises:
            InvalidDimensionError: If the highest set bit does not fit in
                ``dimensionality``.
            ValueError: If an index in ``bits`` is negative.
        """
        mask = int(bits) if isinstance(bits, (int, np.integer)) else _indices_to_mask(bits)
        if mask < 0:
            raise ValueError("Bit mask must be non-negative")
        if dimensionality < 0 or dimensionality < mask.bit_length():
            raise InvalidDimensionError(
                f"Specified dimensionality {dimensionality} is too low for "
                f"bit set of length {mask.bit_length()}",
                dimensionality=dimensionality,
                required=mask.bit_length(),
            )
        self._bits = mask
        self._dimensionality = dimensionality
        self.identifier = identifier

    @classmethod
    def from_bit_set(cls, bits: BitSet, dimensionality: int,
                     identifier: Optional[Hashable] = None) -> "BitVector":
        """Construct from a bit set and an explicit dimensionality. See ``__init__``."""
        return cls(bits, dimensionality, identifier)

    @classmethod
    def from_bit_array(cls, values: Sequence[Any], identifier: Optional[Hashable] = None) -> "BitVector":
        """
        Construct from an ordered sequence of bit values.

        Args:
            values (Sequence): Elements interpreted by truthiness (``Bit``, bool, 0/1).
            identifier (Hashable, optional): Identity token.

        Returns:
            BitVector: Vector with dimensionality ``len(values)``.
        """
        flags = np.fromiter((bool(v) for v in values), dtype=bool, count=len(values))
        mask = int.from_bytes(np.packbits(flags, bitorder="little").tobytes(), "little")
        return cls(mask, len(flags), identifier)

    @classmethod
    def _from_storage(cls, bits: int, dimensionality: int) -> "BitVector":
        # Skips the fit check: XOR growth may leave bits past the dimensionality.
        vector = cls.__new__(cls)
        vector._bits = bits
        vector._dimensionality = dimensionality
        vector.identifier = None
        return vector

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def dimensionality(self) -> int:
        return self._dimensionality

    def get_value(self, dimension: int) -> Bit:
        """
        Return the bit for a 1-based dimension.

        The storage bit read is ``dimension`` itself, not ``dimension - 1``.

        Raises:
            IndexOutOfRangeError: If ``dimension`` is outside ``[1, dimensionality]``.
        """
        dimension = operator.index(dimension)
        if dimension < 1 or dimension > self._dimensionality:
            raise IndexOutOfRangeError(dimension, self._dimensionality)
        return Bit((self._bits >> dimension) & 1)

    def get_values(self) -> List[Bit]:
        return [Bit(flag) for flag in _unpack(self._bits, self._dimensionality)]

    def get_vector(self) -> np.ndarray:
        """
        Project the bits onto a real vector.

        Returns:
            np.ndarray: float64 array of length dimensionality holding 1.0 for
                set bits and 0.0 otherwise.
        """
        return _unpack(self._bits, self._dimensionality).astype(np.float64)

    def is_set(self, index: int) -> bool:
        """
        Test the 0-based storage bit ``index``.

        No bounds check is applied. Indices past the storage read False and a
        negative index raises the interpreter's negative shift error.
        """
        return bool((self._bits >> operator.index(index)) & 1)

    def are_set(self, indices: Sequence[int]) -> bool:
        """
        Test whether the lowest ``len(indices)`` bits are all set.

        Only the length of ``indices`` is used; its contents are ignored.
        """
        low = (1 << len(indices)) - 1
        return (self._bits & low) == low

    def iter_set_bits(self) -> Iterator[int]:
        """Lazily yield the indices of set bits in ascending order."""
        remaining = self._bits
        while remaining:
            lowest = remaining & -remaining
            yield lowest.bit_length() - 1
            remaining ^= lowest

    def set_bits(self) -> List[int]:
        return list(self.iter_set_bits())

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def negate(self) -> "BitVector":
        """Flip every bit in ``[0, dimensionality)``."""
        flipped = self._bits ^ ((1 << self._dimensionality) - 1)
        return BitVector._from_storage(flipped, self._dimensionality)

    def null_vector(self) -> "BitVector":
        return BitVector(0, self._dimensionality)

    def scale(self, k: float) -> "BitVector":
        """
        Return a copy of this vector if ``k`` is nonzero, the null vector otherwise.
        """
        if k == 0:
            return self.null_vector()
        return self.copy()

    def combine(self, other: Any) -> "BitVector":
        """
        XOR this vector into ``other``.

        ``other`` is rebuilt from its ``get_values()`` and this vector's raw
        bits are XORed in, so the result takes ``other``'s dimensionality.
        Bits of this vector beyond that dimensionality stay in the result's
        storage.

        Args:
            other (FeatureVector): A vector whose values are interpreted as bits.

        Returns:
            BitVector: The symmetric difference of both bit patterns.
        """
        base = BitVector.from_bit_array(other.get_values())
        if base._dimensionality != self._dimensionality:
            logger.debug(
                "Combining bit vectors of dimensionality %d and %d, result follows %d",
                self._dimensionality, base._dimensionality, base._dimensionality,
            )
        return BitVector._from_storage(base._bits ^ self._bits, base._dimensionality)

    def copy(self) -> "BitVector":
        duplicate = BitVector._from_storage(self._bits, self._dimensionality)
        duplicate.identifier = self.identifier
        return duplicate

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._dimensionality == other._dimensionality and self._bits == other._bits

    def __hash__(self) -> int:
        return hash((self._dimensionality, self._bits))

    def __repr__(self) -> str:
        pattern = "".join(str(int(flag)) for flag in _unpack(self._bits, self._dimensionality))
        return f"BitVector('{pattern}', dimensionality={self._dimensionality})"
