"""
Reusable comparison settings.

`CompareConfig` bundles the tolerance arguments of `compare` so a test suite
can define them once (in code or in a TOML file) and apply them to many
tensor pairs.
"""

from __future__ import annotations

import numbers
import os
import tomllib
from dataclasses import dataclass
from typing import Optional, Union

from ...domain._difference import DifferenceType
from ...domain._log_sink import LogSink
from ...domain._tensor import ITensor
from ._compare import CompareResult, as_error_count_max, compare


@dataclass
class CompareConfig:
    """Tolerance settings for `compare`."""

    difference_max: float
    print_errors: bool = True
    error_count_max: int = 32
    difference_type: Union[DifferenceType, str] = DifferenceType.ANY
    description: str = ""

    def __post_init__(self):
        """Validate fields and coerce a string `difference_type` to the enum."""
        self.difference_type = DifferenceType.parse(self.difference_type)
        if isinstance(self.difference_max, bool) or not isinstance(
            self.difference_max, numbers.Real
        ):
            raise ValueError(f"difference_max must be a number, got {self.difference_max!r}")
        if self.difference_max < 0:
            raise ValueError(f"difference_max must be >= 0, got {self.difference_max}")
        self.error_count_max = as_error_count_max(self.error_count_max)

    @classmethod
    def load(cls, config_path: str, section: str = "compare") -> "CompareConfig":
        """
        Load comparison settings from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file.
        section : str, optional
            Name of the table holding the settings. Defaults to "compare".

        Returns
        -------
        CompareConfig
            Instance populated from the table.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        KeyError
            If the file has no `section` table.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        if section not in data:
            raise KeyError(f"Missing [{section}] table in {config_path}")
        return cls(**data[section])

    def compare(
        self,
        a: ITensor,
        b: ITensor,
        *,
        description: Optional[str] = None,
        sink: Optional[LogSink] = None,
    ) -> CompareResult:
        """
        Run `compare` on two tensors with these settings.

        Parameters
        ----------
        a, b : ITensor
            Actual and expected tensors.
        description : Optional[str], optional
            Overrides the configured description for this call.
        sink : Optional[LogSink], optional
            Report receiver; defaults to the package logger.
        """
        return compare(
            a,
            b,
            self.difference_max,
            self.print_errors,
            self.error_count_max,
            self.difference_type,
            self.description if description is None else description,
            sink=sink,
        )
