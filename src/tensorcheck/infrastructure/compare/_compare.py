"""
Tolerance-based element-wise comparison of two equally shaped tensors.

`compare` walks every coordinate of two tensors depth first, one axis at a
time from outermost to innermost, classifies each element pair with a
`DifferencePolicy`, and returns a `CompareResult` ``(passed, error_count)``.

Error accounting
----------------
- Each flagged pair increments the error count. With ``print_errors`` set,
  a diagnostic line with the full coordinate, both values and both
  differences is appended to a report; the first error also writes a header
  carrying ``description``.
- Iteration at every axis stops once the count reaches ``error_count_max``.
  The returned count is therefore a lower bound on the true number of
  mismatches whenever the cap is hit. The stop notice is written only when
  coordinates were actually skipped.
- Floating operands are judged in their common float dtype, with the
  threshold cast to it; integer operands are widened to float64.
- The report is delivered to the log sink exactly once, after traversal,
  and only if something failed and ``print_errors`` is set.
"""

from __future__ import annotations

import logging
import numbers
import operator
from dataclasses import dataclass, field
from typing import Any, List, NamedTuple, Optional, Union

import numpy as np

from ...domain._difference import DifferenceType
from ...domain._errors import ShapeMismatchError
from ...domain._log_sink import LogSink
from ...domain._tensor import ITensor
from .._logging import LoggingSink, get_logger
from ..tensor._debug_print import PrintFormat
from ._policies import DifferencePolicy, element_differences, working_dtype

logger = get_logger("compare")

REPORT_FORMAT = PrintFormat(precision=6)
"""Value formatting used in failure reports."""


class CompareResult(NamedTuple):
    """
    Outcome of one `compare` call.

    Attributes
    ----------
    passed : bool
        True when no element pair was flagged.
    error_count : int
        Number of flagged pairs seen before traversal ended.
    """

    passed: bool
    error_count: int


@dataclass
class _CompareState:
    dtype: np.dtype
    error_count: int = 0
    stopped: bool = False
    message: List[str] = field(default_factory=list)


def as_error_count_max(value: Any) -> int:
    """
    Validate an error cap and return it as a plain ``int``.

    Any integer type (including NumPy integers) is accepted; bools, floats
    and values below 1 raise `ValueError`.
    """
    if isinstance(value, bool):
        raise ValueError(f"error_count_max must be an int, got {value!r}")
    try:
        count = operator.index(value)
    except TypeError:
        raise ValueError(f"error_count_max must be an int, got {value!r}") from None
    if count < 1:
        raise ValueError(f"error_count_max must be >= 1, got {count}")
    return count


def compare(
    a: ITensor,
    b: ITensor,
    difference_max: float,
    print_errors: bool,
    error_count_max: int,
    difference_type: Union[DifferenceType, str],
    description: str = "",
    *,
    sink: Optional[LogSink] = None,
) -> CompareResult:
    """
    Compare two tensors element by element under a tolerance policy.

    Parameters
    ----------
    a : ITensor
        Actual (computed) values.
    b : ITensor
        Expected (reference) values. Must have the same shape as `a`.
    difference_max : float
        Tolerance threshold, shared by the absolute and relative tests. It is
        cast to the working dtype of the pair (see `working_dtype`).
    print_errors : bool
        If True, build a report of flagged pairs and send it to `sink`.
    error_count_max : int
        Error count at which traversal stops early. Must be >= 1.
    difference_type : Union[DifferenceType, str]
        Policy combining absolute and relative differences.
    description : str, optional
        Label written in the report header.
    sink : Optional[LogSink], optional
        Receiver of the report. Defaults to a `LoggingSink` over the
        ``tensorcheck.compare`` logger.

    Returns
    -------
    CompareResult
        ``(passed, error_count)``; unpacks like a tuple.

    Raises
    ------
    ShapeMismatchError
        If the tensors do not share a shape (checked before any element is
        read).
    ValueError
        If `difference_max` is negative or `error_count_max` is below 1, or
        `difference_type` names no policy.
    """
    if tuple(a.shape) != tuple(b.shape) or a.size != b.size:
        raise ShapeMismatchError(a.shape, b.shape)
    if not isinstance(difference_max, numbers.Real) or difference_max < 0:
        raise ValueError(f"difference_max must be >= 0, got {difference_max!r}")
    error_count_max = as_error_count_max(error_count_max)

    policy = DifferencePolicy(difference_type)
    state = _CompareState(working_dtype(a.dtype, b.dtype))

    if a.size > 0:
        # float overflow in a - b saturates to inf, which is still flagged
        with np.errstate(over="ignore", invalid="ignore"):
            _compare_axis(
                a,
                b,
                policy,
                state.dtype.type(difference_max),
                bool(print_errors),
                error_count_max,
                description,
                [0] * len(a.shape),
                0,
                state,
            )

    if print_errors and state.error_count > 0:
        (sink if sink is not None else LoggingSink(logger))(
            logging.ERROR, "".join(state.message)
        )
    return CompareResult(state.error_count == 0, state.error_count)


def _compare_axis(
    a: ITensor,
    b: ITensor,
    policy: DifferencePolicy,
    difference_max: Any,
    print_errors: bool,
    error_count_max: int,
    description: str,
    index: List[int],
    order: int,
    state: _CompareState,
) -> None:
    if order == len(index):
        _compare_element(a, b, policy, difference_max, print_errors, description, index, state)
        return

    for i in range(a.shape[order]):
        if state.error_count >= error_count_max:
            _stop(print_errors, description, index, state)
            break
        index[order] = i
        _compare_axis(
            a, b, policy, difference_max, print_errors, error_count_max,
            description, index, order + 1, state,
        )


def _stop(print_errors: bool, description: str, index: List[int], state: _CompareState) -> None:
    # enclosing levels break as well; the notice is written once
    if state.stopped:
        return
    state.stopped = True
    if print_errors:
        state.message.append("Stop comparison.\n")
    logger.debug(
        "Comparison %r stopped after %d error(s) at %s",
        description,
        state.error_count,
        list(index),
    )


def _compare_element(
    a: ITensor,
    b: ITensor,
    policy: DifferencePolicy,
    difference_max: Any,
    print_errors: bool,
    description: str,
    index: List[int],
    state: _CompareState,
) -> None:
    va = a[index]
    vb = b[index]
    absolute, relative = element_differences(va, vb, state.dtype)
    if not policy(absolute, relative, difference_max):
        return

    state.error_count += 1
    if print_errors:
        if state.error_count == 1:
            state.message.append(f"\nFail comparison: {description}\n")
        fmt = REPORT_FORMAT.format
        state.message.append(
            f"Error at [{', '.join(str(i) for i in index)}] : "
            f"{fmt(va)} != {fmt(vb)}; "
            f"(absolute = {fmt(absolute)}, relative = {fmt(relative)})!\n"
        )
