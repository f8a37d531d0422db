"""
Error Handling Module for bitvector

Defines the exceptions raised by the vector types and a Result type pattern
used by the configuration layer, where loading failures are returned as values
instead of raised.
"""

from typing import Any, Callable, Optional, Tuple, TypeVar, Union

T = TypeVar('T')
E = TypeVar('E')
R = TypeVar('R')

# Result type for functions that might fail
Result = Union[Tuple[T, None], Tuple[None, E]]


class BitVectorError(ValueError):
    """Base class for errors raised by feature vector types."""


class InvalidDimensionError(BitVectorError):
    """
    Raised when a dimensionality cannot hold the given contents.

    Typical causes are a bit set whose highest set index is not below the
    requested dimensionality, or operands of differing dimensionality where
    equal ones are required.
    """

    def __init__(self, message: str, dimensionality: Optional[int] = None, required: Optional[int] = None):
        super().__init__(message)
        self.dimensionality = dimensionality
        self.required = required


class IndexOutOfRangeError(BitVectorError):
    """Raised by the 1-based dimension accessor outside ``[1, dimensionality]``."""

    def __init__(self, dimension: int, dimensionality: int):
        super().__init__(f"illegal dimension: {dimension} (dimensionality {dimensionality})")
        self.dimension = dimension
        self.dimensionality = dimensionality


def success(value: T) -> Result[T, Any]:
    """Create a success result."""
    return (value, None)

def error(err: E) -> Result[Any, E]:
    """Create an error result."""
    return (None, err)

def is_success(result: Result[T, E]) -> bool:
    """Check if a result is successful."""
    return result[1] is None

def is_error(result: Result[T, E]) -> bool:
    """Check if a result is an error."""
    return result[1] is not None

def get_value(result: Result[T, E]) -> T:
    """
    Get the value from a successful result.

    Args:
        result: A Result tuple

    Returns:
        The success value

    Raises:
        ValueError: If the result is an error
    """
    if is_error(result):
        raise ValueError(f"Cannot get value from error result: {result[1]}")
    return result[0]

def get_error(result: Result[T, E]) -> E:
    """
    Get the error from an error result.

    Raises:
        ValueError: If the result is a success
    """
    if is_success(result):
        raise ValueError("Cannot get error from success result")
    return result[1]

def map_success(result: Result[T, E], fn: Callable[[T], R]) -> Result[R, E]:
    """
    Apply a function to the value if the result is successful.

    Args:
        result: A Result tuple
        fn: Function to apply to success value

    Returns:
        A new Result with the transformed value or the original error
    """
    if is_success(result):
        return success(fn(get_value(result)))
    return result
