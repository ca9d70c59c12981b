"""
Concrete test tensor (NumPy backend).

This module provides `Tensor`, a multi-dimensional array generic over a NumPy
element dtype and backed by one flat, exclusively owned ``numpy.ndarray``
buffer. It satisfies the domain-level `ITensor` protocol and is what test
code fills with computed and reference values before handing both to
`tensorcheck.infrastructure.compare.compare`.

Design notes
------------
- Shape arithmetic (axes, ranges, offsets) lives in
  `TensorShapeAndIndexingMixin`; the truncated dump lives in
  `TensorDebugPrintMixin`. This file owns storage and lifecycle only.
- The buffer is 1-D. ``size`` is the logical element count and ``capacity``
  the buffer length; ``capacity >= size`` always, with equality except after
  an `extend` to a smaller shape.
- Views returned by `data` / `data_at` alias the buffer and become stale once
  `reshape` or a growing `extend` reallocates it.
- This is not an array-math library: there are no arithmetic operators and
  no broadcasting.
"""

from __future__ import annotations

import operator
from typing import Any, ClassVar, Optional, Sequence, Union

import numpy as np

from ...domain._tensor import ITensor, Index
from ._debug_print import TensorDebugPrintMixin
from ._shape_and_indexing import TensorShapeAndIndexingMixin

DTypeLike = Union[np.dtype, type, str]
IndexLike = Union[int, Sequence[int]]


class Tensor(TensorShapeAndIndexingMixin, TensorDebugPrintMixin, ITensor):
    """
    Multi-dimensional array over one contiguous, owned buffer.

    Parameters
    ----------
    shape : Optional[Sequence[int]], optional
        Per-axis extents, outermost first. ``None`` (the default) creates an
        empty tensor of rank 0 and size 0. An explicit ``()`` creates a
        rank-0 scalar holding one element.
    value : Any, optional
        Fill value for every element. Defaults to the dtype's zero.
    dtype : DTypeLike, optional
        NumPy element dtype. Defaults to ``float32``.

    Raises
    ------
    InvalidShapeError
        If `shape` has a non-positive or non-integer extent.

    Notes
    -----
    - Subclasses may pin the element type through `FIXED_DTYPE`; passing a
      different dtype then raises `TypeError`.
    - Allocation failures (`MemoryError`) propagate to the caller.
    """

    FIXED_DTYPE: ClassVar[Optional[np.dtype]] = None
    DEFAULT_DTYPE: ClassVar[np.dtype] = np.dtype(np.float32)

    def __init__(
        self,
        shape: Optional[Sequence[int]] = None,
        value: Any = None,
        *,
        dtype: Optional[DTypeLike] = None,
    ) -> None:
        self._dtype = self._resolve_dtype(dtype)
        if shape is None:
            self._shape: tuple[int, ...] = ()
            self._size: int = 0
            self._buffer: np.ndarray = np.empty(0, dtype=self._dtype)
            return

        self._shape = self._normalize_shape(shape)
        self._size = self._product(self._shape)
        self._buffer = self._allocate(self._size, value)

    @classmethod
    def _resolve_dtype(cls, dtype: Optional[DTypeLike]) -> np.dtype:
        if cls.FIXED_DTYPE is not None:
            if dtype is not None and np.dtype(dtype) != cls.FIXED_DTYPE:
                raise TypeError(
                    f"{cls.__name__} holds {cls.FIXED_DTYPE} elements; "
                    f"got dtype={np.dtype(dtype)}"
                )
            return cls.FIXED_DTYPE
        return np.dtype(dtype) if dtype is not None else cls.DEFAULT_DTYPE

    def _allocate(self, size: int, value: Any) -> np.ndarray:
        if value is None:
            return np.zeros(size, dtype=self._dtype)
        return np.full(size, value, dtype=self._dtype)

    @classmethod
    def from_numpy(
        cls, arr: Any, *, dtype: Optional[DTypeLike] = None
    ) -> "Tensor":
        """
        Build a tensor holding a copy of an array's contents.

        Parameters
        ----------
        arr : array-like
            Source values. Its shape becomes the tensor shape.
        dtype : Optional[DTypeLike], optional
            Element dtype. Defaults to the array's own dtype (or the pinned
            dtype of a subclass).

        Returns
        -------
        Tensor
            A new tensor of the same shape.

        Raises
        ------
        InvalidShapeError
            If `arr` has a zero-length axis.
        """
        src = np.asarray(arr)
        if dtype is None and cls.FIXED_DTYPE is None:
            dtype = src.dtype
        out = cls(src.shape, dtype=dtype)
        out._buffer[:] = src.reshape(-1)
        return out

    # ----------------------------
    # Metadata
    # ----------------------------
    @property
    def dtype(self) -> np.dtype:
        """
        Return the element dtype.

        Returns
        -------
        np.dtype
            NumPy dtype of every element of the buffer.
        """
        return self._dtype

    @property
    def capacity(self) -> int:
        """Return the length of the backing buffer (``>= size``)."""
        return int(self._buffer.shape[0])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shape={self._shape}, dtype={self._dtype}, "
            f"capacity={self.capacity})"
        )

    # ----------------------------
    # Lifecycle
    # ----------------------------
    def reshape(self, shape: Sequence[int], value: Any = None) -> None:
        """
        Replace the shape and reset every element.

        This is destructive: the buffer is reallocated to exactly the new
        total size and filled with `value`, regardless of any overlap with the
        previous shape.

        Parameters
        ----------
        shape : Sequence[int]
            New per-axis extents.
        value : Any, optional
            Fill value. Defaults to the dtype's zero.

        Raises
        ------
        InvalidShapeError
            If `shape` is invalid. The tensor is left unchanged.
        """
        new_shape = self._normalize_shape(shape)
        new_size = self._product(new_shape)
        buffer = self._allocate(new_size, value)

        self._shape = new_shape
        self._size = new_size
        self._buffer = buffer

    def extend(self, shape: Sequence[int]) -> None:
        """
        Replace the shape, growing the buffer only when it is too small.

        Parameters
        ----------
        shape : Sequence[int]
            New per-axis extents.

        Raises
        ------
        InvalidShapeError
            If `shape` is invalid. The tensor is left unchanged.

        Notes
        -----
        - If the new size exceeds `capacity`, the buffer grows to exactly the
          new size. Existing buffer contents keep their flat offsets; the new
          tail is zero-filled.
        - The buffer never shrinks, and no element is moved or rewritten.
          Values are therefore preserved per *flat offset*, not per
          coordinate.
        """
        new_shape = self._normalize_shape(shape)
        new_size = self._product(new_shape)

        if new_size > self.capacity:
            grown = np.zeros(new_size, dtype=self._dtype)
            grown[: self.capacity] = self._buffer
            self._buffer = grown

        self._shape = new_shape
        self._size = new_size

    def fill(self, value: Any) -> None:
        """
        Set every logical element to `value` in-place.

        Notes
        -----
        Buffer positions past `size` (spare capacity) are not touched.
        """
        self._buffer[: self._size] = value

    # ----------------------------
    # Raw access
    # ----------------------------
    @property
    def data(self) -> np.ndarray:
        """
        Return a writable flat view of the logical elements.

        Returns
        -------
        np.ndarray
            1-D view of the first `size` buffer elements.
        """
        return self._buffer[: self._size]

    def data_at(self, index: Optional[IndexLike] = None) -> np.ndarray:
        """
        Return a writable view of the buffer starting at `index`.

        Parameters
        ----------
        index : Optional[IndexLike], optional
            Coordinate to start at. ``None`` starts at the buffer head.

        Returns
        -------
        np.ndarray
            1-D view from ``offset(index)`` to the end of the buffer.
        """
        if index is None:
            return self._buffer[:]
        return self._buffer[self.offset(self._as_index(index)) :]

    def to_numpy(self) -> np.ndarray:
        """
        Return a copy of the logical contents shaped like the tensor.

        Returns
        -------
        np.ndarray
            Array of shape `shape`; a default-constructed empty tensor returns
            a 0-length 1-D array.
        """
        if self._size == 0:
            return np.empty(0, dtype=self._dtype)
        return self._buffer[: self._size].reshape(self._shape).copy()

    @staticmethod
    def _as_index(index: IndexLike) -> Index:
        if isinstance(index, (int, np.integer)) and not isinstance(index, bool):
            return (operator.index(index),)
        return tuple(index)

    def __getitem__(self, index: IndexLike) -> Any:
        return self._buffer[self.offset(self._as_index(index))]

    def __setitem__(self, index: IndexLike, value: Any) -> None:
        self._buffer[self.offset(self._as_index(index))] = value


class Tensor32f(Tensor):
    """Tensor with ``float32`` elements; the comparator's usual operand."""

    FIXED_DTYPE: ClassVar[Optional[np.dtype]] = np.dtype(np.float32)


__all__ = [
    Tensor.__name__,
    Tensor32f.__name__,
]
