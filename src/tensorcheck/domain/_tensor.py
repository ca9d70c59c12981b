"""
Tensor interface definitions.

This module defines the domain-level interface for the test tensor using
structural typing. The interface captures the shape arithmetic and raw
storage access that the comparator and the debug printer rely on, without
importing any numerical backend.

Notes
-----
The protocol mirrors the public surface of the NumPy-backed `Tensor` in
`tensorcheck.infrastructure.tensor`. Code that only needs to walk
coordinates and read elements (e.g. the comparator) should type against
`ITensor` rather than the concrete class.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, Tuple, runtime_checkable

Shape = Tuple[int, ...]
"""Ordered per-axis extents, outermost axis first."""

Index = Tuple[int, ...]
"""Ordered per-axis coordinates, one per axis of a tensor."""


@runtime_checkable
class ITensor(Protocol):
    """
    Tensor interface.

    An `ITensor` is a multi-dimensional array backed by one contiguous flat
    buffer and addressed through row-major offset arithmetic.

    Notes
    -----
    - `size` is the logical element count and always equals the product of
      `shape`; `capacity` is the length of the backing buffer and may be
      larger after `extend`.
    - Every index-taking method raises a `TensorPreconditionError` subclass
      on an invalid index instead of reading out of bounds.
    """

    # ---------------------------------------------------------------------
    # Shape metadata
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> Shape:
        """Return the tensor shape."""
        ...

    @property
    def rank(self) -> int:
        """Return the number of axes."""
        ...

    @property
    def size(self) -> int:
        """Return the cached total element count."""
        ...

    @property
    def capacity(self) -> int:
        """Return the length of the backing buffer."""
        ...

    @property
    def dtype(self) -> Any:
        """Return the element type descriptor."""
        ...

    # ---------------------------------------------------------------------
    # Axis / offset arithmetic
    # ---------------------------------------------------------------------
    def normalize_axis(self, axis: int, *, allow_end: bool = False) -> int:
        """
        Resolve a possibly negative axis to a non-negative one.

        Parameters
        ----------
        axis : int
            Axis index; negative values count from the end.
        allow_end : bool, optional
            If True, `rank` itself is accepted (exclusive range bound).

        Returns
        -------
        int
            Normalized axis.
        """
        ...

    def axis(self, axis: int) -> int:
        """Return the extent of `axis` (negative axes allowed)."""
        ...

    def range_size(self, start_axis: int, end_axis: Optional[int] = None) -> int:
        """Return the product of extents over ``[start_axis, end_axis)``."""
        ...

    def offset(self, index: Sequence[int]) -> int:
        """Return the flat buffer position of `index` (row-major)."""
        ...

    # ---------------------------------------------------------------------
    # Element access
    # ---------------------------------------------------------------------
    def __getitem__(self, index: Sequence[int]) -> Any:
        """Read the element at `index`."""
        ...

    def __setitem__(self, index: Sequence[int], value: Any) -> None:
        """Write the element at `index`."""
        ...

    def data_at(self, index: Optional[Sequence[int]] = None) -> Any:
        """Return a writable view of the buffer starting at `index`."""
        ...
