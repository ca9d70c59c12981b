"""
Logging setup and the default comparison log sink.

tensorcheck logs through the standard `logging` module under the
``"tensorcheck"`` logger hierarchy. Library code never configures handlers;
a test harness that wants output on stdout calls `setup_logging()` once.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

LOGGER_NAME = "tensorcheck"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return the package logger or one of its children.

    Parameters
    ----------
    name : Optional[str], optional
        Child suffix (e.g. ``"compare"``). ``None`` returns the root
        ``"tensorcheck"`` logger.
    """
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


class StdoutHandler(logging.StreamHandler):
    """`StreamHandler` on stdout installed by `setup_logging`."""

    def __init__(self) -> None:
        super().__init__(sys.stdout)
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure the ``tensorcheck`` logger to write to stdout.

    Attaches one `StdoutHandler` using the format
    "timestamp - logger name - level - message". Calling this again only
    updates the level; it never stacks a second handler.

    Parameters
    ----------
    level : Union[int, str], optional
        Logging level. Defaults to ``logging.INFO``.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    logger = get_logger()
    logger.setLevel(level)
    if not any(isinstance(h, StdoutHandler) for h in logger.handlers):
        logger.addHandler(StdoutHandler())
    return logger


class LoggingSink:
    """
    `LogSink` that forwards comparison reports to a `logging.Logger`.

    Parameters
    ----------
    logger : Optional[logging.Logger], optional
        Target logger. Defaults to ``tensorcheck.compare``.
    """

    __slots__ = ("logger",)

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger if logger is not None else get_logger("compare")

    def __call__(self, level: int, message: str) -> None:
        self.logger.log(level, message)

    def __repr__(self) -> str:
        return f"LoggingSink(logger={self.logger.name!r})"
