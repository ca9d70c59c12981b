"""
tensorcheck: multi-dimensional test tensors and tolerance-based comparison.

Typical use inside a numeric test::

    from tensorcheck import Tensor32f, DifferenceType, compare

    actual = Tensor32f([2, 3])
    expected = Tensor32f([2, 3], 1.0)
    ...
    passed, errors = compare(
        actual, expected, 1e-4, True, 32, DifferenceType.ANY, "conv2d fp32"
    )
"""

from .domain import (
    AxisOutOfRangeError,
    AxisRangeError,
    DifferenceType,
    IndexOutOfRangeError,
    InvalidShapeError,
    ITensor,
    LogSink,
    RankMismatchError,
    ShapeMismatchError,
    TensorPreconditionError,
)
from .infrastructure._logging import LoggingSink, get_logger, setup_logging
from .infrastructure.compare import (
    CompareConfig,
    CompareResult,
    DifferencePolicy,
    compare,
    element_differences,
    working_dtype,
)
from .infrastructure.tensor import PrintFormat, Tensor, Tensor32f

__version__ = "1.0.0"

__all__ = [
    "Tensor",
    "Tensor32f",
    "PrintFormat",
    "ITensor",
    "compare",
    "CompareResult",
    "CompareConfig",
    "DifferenceType",
    "DifferencePolicy",
    "element_differences",
    "working_dtype",
    "LogSink",
    "LoggingSink",
    "get_logger",
    "setup_logging",
    "TensorPreconditionError",
    "InvalidShapeError",
    "AxisOutOfRangeError",
    "AxisRangeError",
    "RankMismatchError",
    "IndexOutOfRangeError",
    "ShapeMismatchError",
]
