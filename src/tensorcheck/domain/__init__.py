"""
Backend-agnostic contracts for tensorcheck.

This package holds the interfaces and value types shared by the tensor
container and the comparator: the `ITensor` protocol, the `DifferenceType`
policy enum, the `LogSink` protocol and the precondition error taxonomy.
Nothing here imports NumPy.
"""

from ._difference import DifferenceType
from ._errors import (
    AxisOutOfRangeError,
    AxisRangeError,
    IndexOutOfRangeError,
    InvalidShapeError,
    RankMismatchError,
    ShapeMismatchError,
    TensorPreconditionError,
)
from ._log_sink import LogSink
from ._tensor import Index, ITensor, Shape

__all__ = [
    DifferenceType.__name__,
    ITensor.__name__,
    LogSink.__name__,
    "Index",
    "Shape",
    TensorPreconditionError.__name__,
    InvalidShapeError.__name__,
    AxisOutOfRangeError.__name__,
    AxisRangeError.__name__,
    RankMismatchError.__name__,
    IndexOutOfRangeError.__name__,
    ShapeMismatchError.__name__,
]
