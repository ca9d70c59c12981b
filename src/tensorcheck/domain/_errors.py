"""
Precondition errors for tensorcheck.

This module defines the exceptions raised when a tensor operation or a
comparison is invoked with arguments that violate its contract: an invalid
shape, an axis outside the tensor's rank, an index with the wrong rank or an
out-of-range component, or two tensors of different shape handed to the
comparator.

All of them derive from `TensorPreconditionError` (itself a `ValueError`), so
callers may catch the whole family at once. These errors are raised eagerly;
no operation ever reads outside the backing buffer.

Tolerance violations found by the comparator are *not* errors in this sense.
They are counted and reported, never raised.
"""

from __future__ import annotations

from typing import Sequence


class TensorPreconditionError(ValueError):
    """
    Base class for all tensor precondition failures.

    Raised when an operation receives arguments it is not defined for. The
    operation is aborted and the tensor is left unchanged.
    """


class InvalidShapeError(TensorPreconditionError):
    """
    Raised when a shape contains a non-positive or non-integer extent.

    Attributes
    ----------
    shape : tuple
        The offending shape, as supplied by the caller.
    """

    def __init__(self, shape: Sequence[object], reason: str) -> None:
        """
        Initialize the InvalidShapeError.

        Parameters
        ----------
        shape : Sequence[object]
            The rejected shape.
        reason : str
            Short explanation of which entry is invalid.
        """
        super().__init__(f"Invalid shape {tuple(shape)!r}: {reason}.")
        self.shape = tuple(shape)


class AxisOutOfRangeError(TensorPreconditionError):
    """
    Raised when an axis does not land in the valid range after normalization.

    Attributes
    ----------
    axis : int
        The axis as supplied by the caller (before normalization).
    rank : int
        Rank of the tensor the axis was resolved against.
    """

    def __init__(self, axis: int, rank: int) -> None:
        super().__init__(f"Axis {axis} is out of range for a tensor of rank {rank}.")
        self.axis = axis
        self.rank = rank


class AxisRangeError(TensorPreconditionError):
    """
    Raised when an axis range is empty in the wrong direction (start > end).

    Attributes
    ----------
    start : int
        Normalized start axis.
    end : int
        Normalized end axis.
    rank : int
        Rank of the tensor.
    """

    def __init__(self, start: int, end: int, rank: int) -> None:
        super().__init__(
            f"Invalid axis range [{start}, {end}) for a tensor of rank {rank}."
        )
        self.start = start
        self.end = end
        self.rank = rank


class RankMismatchError(TensorPreconditionError):
    """
    Raised when an index does not have one coordinate per tensor axis.

    Attributes
    ----------
    expected : int
        Rank of the tensor.
    actual : int
        Length of the supplied index.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Rank mismatch: index has {actual} coordinate(s), tensor has rank {expected}."
        )
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(TensorPreconditionError):
    """
    Raised when an index component lies outside its axis extent.

    Attributes
    ----------
    index : tuple[int, ...]
        The full index supplied by the caller.
    shape : tuple[int, ...]
        Shape of the tensor being addressed.
    axis : int
        First axis whose coordinate is out of range.
    """

    def __init__(
        self, index: Sequence[int], shape: Sequence[int], axis: int
    ) -> None:
        super().__init__(
            f"Index {tuple(index)} is out of range for shape {tuple(shape)} "
            f"(axis {axis})."
        )
        self.index = tuple(index)
        self.shape = tuple(shape)
        self.axis = axis


class ShapeMismatchError(TensorPreconditionError):
    """
    Raised when two tensors that must share a shape do not.

    The comparator raises this before visiting any coordinate.

    Attributes
    ----------
    shape_a : tuple[int, ...]
        Shape of the first operand.
    shape_b : tuple[int, ...]
        Shape of the second operand.
    """

    def __init__(self, shape_a: Sequence[int], shape_b: Sequence[int]) -> None:
        super().__init__(f"Shape mismatch: {tuple(shape_a)} vs {tuple(shape_b)}.")
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)
