"""
NumPy-backed test tensor.

The concrete `Tensor` is assembled from two mixins:

- `TensorShapeAndIndexingMixin`: axis normalization, ranged extents and
  row-major offsets.
- `TensorDebugPrintMixin`: truncated multi-dimensional dump, formatted via an
  explicit `PrintFormat`.

Public API
----------
- ``Tensor``, ``Tensor32f``
- ``PrintFormat``
"""

from ._debug_print import PrintFormat, TensorDebugPrintMixin
from ._shape_and_indexing import TensorShapeAndIndexingMixin
from ._tensor import Tensor, Tensor32f

__all__ = [
    Tensor.__name__,
    Tensor32f.__name__,
    PrintFormat.__name__,
    TensorShapeAndIndexingMixin.__name__,
    TensorDebugPrintMixin.__name__,
]
