"""
Tensor shape and indexing arithmetic mixin.

This module defines `TensorShapeAndIndexingMixin`, which implements the
shape-derived arithmetic of the test tensor: axis normalization, per-axis and
ranged extents, and the row-major mapping from a multi-dimensional index to a
flat buffer offset.

Design notes
------------
- This mixin is intended to be inherited by the concrete `Tensor` class.
- It only reads `self._shape` and `self._size`; it never touches storage.
- Every invalid argument raises a `TensorPreconditionError` subclass. There
  is no unchecked fast path.
"""

from __future__ import annotations

import operator
from typing import Optional, Sequence

from ...domain._errors import (
    AxisOutOfRangeError,
    AxisRangeError,
    IndexOutOfRangeError,
    InvalidShapeError,
    RankMismatchError,
)
from ...domain._tensor import Shape


class TensorShapeAndIndexingMixin:
    """
    Shape and offset arithmetic for the concrete Tensor implementation.

    Notes
    -----
    - Methods assume the host class provides `._shape` (a tuple of positive
      ints) and `._size` (the cached product of `._shape`).
    - Axes follow Python's negative-index convention: ``-1`` is the innermost
      axis.
    """

    @staticmethod
    def _normalize_shape(shape: Sequence[int]) -> Shape:
        """
        Validate a user-supplied shape and convert it to a tuple of ints.

        Parameters
        ----------
        shape : Sequence[int]
            Per-axis extents, outermost first. Lists, tuples and NumPy integer
            sequences are accepted.

        Returns
        -------
        tuple[int, ...]
            The validated shape.

        Raises
        ------
        InvalidShapeError
            If `shape` is not a sequence, or any entry is a bool, a
            non-integer, or not strictly positive.
        """
        try:
            dims = list(shape)
        except TypeError:
            raise InvalidShapeError((shape,), "shape must be a sequence of ints")

        out = []
        for axis, d in enumerate(dims):
            if isinstance(d, bool):
                raise InvalidShapeError(dims, f"axis {axis} is a bool")
            try:
                n = operator.index(d)
            except TypeError:
                raise InvalidShapeError(dims, f"axis {axis} is not an integer")
            if n <= 0:
                raise InvalidShapeError(dims, f"axis {axis} must be positive")
            out.append(n)
        return tuple(out)

    @staticmethod
    def _product(dims: Sequence[int]) -> int:
        size = 1
        for d in dims:
            size *= d
        return size

    # ----------------------------
    # Shape metadata
    # ----------------------------
    @property
    def shape(self) -> Shape:
        """
        Return the tensor shape.

        Returns
        -------
        tuple[int, ...]
            Per-axis extents, outermost first.
        """
        return self._shape

    @property
    def rank(self) -> int:
        """Return the number of axes."""
        return len(self._shape)

    @property
    def size(self) -> int:
        """
        Return the total number of elements.

        Notes
        -----
        This is cached at construction/reshape time and equals
        ``range_size(0)`` for any tensor with a shape. A default-constructed
        empty tensor has rank 0 and size 0.
        """
        return self._size

    # ----------------------------
    # Axis arithmetic
    # ----------------------------
    def normalize_axis(self, axis: int, *, allow_end: bool = False) -> int:
        """
        Resolve a possibly negative axis against this tensor's rank.

        Parameters
        ----------
        axis : int
            Axis index. Negative values count from the end, so ``-1`` maps to
            ``rank - 1``.
        allow_end : bool, optional
            If True, ``rank`` itself is a valid result. Used for exclusive
            range bounds. Defaults to False.

        Returns
        -------
        int
            The normalized axis in ``[0, rank)`` (or ``[0, rank]`` with
            `allow_end`).

        Raises
        ------
        AxisOutOfRangeError
            If the normalized axis falls outside the valid range.
        """
        if isinstance(axis, bool):
            raise AxisOutOfRangeError(axis, self.rank)
        try:
            a = operator.index(axis)
        except TypeError:
            raise AxisOutOfRangeError(axis, self.rank)

        rank = self.rank
        if a < 0:
            a += rank
        upper = rank + 1 if allow_end else rank
        if a < 0 or a >= upper:
            raise AxisOutOfRangeError(axis, rank)
        return a

    def axis(self, axis: int) -> int:
        """
        Return the extent of a single axis.

        Parameters
        ----------
        axis : int
            Axis index; negative values count from the end.

        Returns
        -------
        int
            ``shape[normalize_axis(axis)]``.
        """
        return self._shape[self.normalize_axis(axis)]

    def range_size(self, start_axis: int, end_axis: Optional[int] = None) -> int:
        """
        Return the product of extents over the half-open axis range.

        Parameters
        ----------
        start_axis : int
            First axis of the range (inclusive). Negative values allowed.
        end_axis : Optional[int], optional
            Last axis of the range (exclusive). Negative values allowed;
            ``None`` means ``rank``.

        Returns
        -------
        int
            ``prod(shape[start:end])``; the empty product is 1.

        Raises
        ------
        AxisOutOfRangeError
            If either bound lies outside ``[0, rank]`` after normalization.
        AxisRangeError
            If ``start > end`` after normalization.
        """
        rank = self.rank
        start = self.normalize_axis(start_axis, allow_end=True)
        end = rank if end_axis is None else self.normalize_axis(end_axis, allow_end=True)
        if start > end:
            raise AxisRangeError(start, end, rank)
        return self._product(self._shape[start:end])

    # ----------------------------
    # Offsets
    # ----------------------------
    def offset(self, index: Sequence[int]) -> int:
        """
        Map a multi-dimensional index to its flat buffer offset.

        The offset is accumulated left to right in row-major order::

            offset = 0
            for axis in range(rank):
                offset = offset * shape[axis] + index[axis]

        which is a bijection between valid indices and ``[0, size)``.

        Parameters
        ----------
        index : Sequence[int]
            One coordinate per axis.

        Returns
        -------
        int
            Flat buffer position of `index`.

        Raises
        ------
        RankMismatchError
            If ``len(index) != rank``.
        IndexOutOfRangeError
            If any coordinate is negative, non-integer, or not less than
            its axis extent, or if the tensor holds no elements.
        """
        coords = tuple(index)
        shape = self._shape
        if len(coords) != len(shape):
            raise RankMismatchError(len(shape), len(coords))
        # default-constructed tensor: rank 0 but nothing to address
        if self._size == 0:
            raise IndexOutOfRangeError(coords, shape, 0)

        offset = 0
        for axis, (i, extent) in enumerate(zip(coords, shape)):
            if isinstance(i, bool):
                raise IndexOutOfRangeError(coords, shape, axis)
            try:
                i = operator.index(i)
            except TypeError:
                raise IndexOutOfRangeError(coords, shape, axis)
            if i < 0 or i >= extent:
                raise IndexOutOfRangeError(coords, shape, axis)
            offset = offset * extent + i
        return offset
