"""
Logging sink contract for comparison diagnostics.

The comparator never writes to a logger directly. It hands its accumulated
multi-line report to a `LogSink`: any callable accepting a severity level
(the integer levels of the standard `logging` module) and a formatted
message. The infrastructure layer provides a sink bound to a
`logging.Logger`; tests typically pass a list-backed recorder instead.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    """
    Duck-typed receiver of formatted diagnostics.

    Notes
    -----
    - Delivery is FIFO per call; the return value is ignored.
    - The comparator calls a sink at most once per `compare()` invocation.
    """

    def __call__(self, level: int, message: str) -> None: ...
