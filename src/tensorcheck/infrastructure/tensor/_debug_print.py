"""
Truncated multi-dimensional pretty-printer for test tensors.

This module defines `PrintFormat`, an explicit number-formatting
configuration, and `TensorDebugPrintMixin`, which dumps a tensor's shape and
contents to any text stream.

Output layout
-------------
- A header line: ``name { d0 d1 ... } ``.
- A depth-first, axis-by-axis dump. Along the innermost axis at most
  ``first`` leading and ``last`` trailing coordinates are printed, with a
  ``...`` marker between them, when the axis is longer than
  ``first + last``. Each shallower axis uses ``first - 1`` / ``last - 1``
  (never below 1), which bounds the output for high-rank tensors.
- The innermost separator is a tab; every shallower axis appends one more
  newline, so each dimension boundary gets more vertical whitespace.

Number formatting is passed in through `PrintFormat` and never changes any
shared stream state.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, List, Optional, TextIO


@dataclass(frozen=True)
class PrintFormat:
    """
    Number formatting used by the debug printer and comparison reports.

    Attributes
    ----------
    precision : int
        Fractional digits (fixed-point) or significant digits (general).
    fixed : bool
        If True, floats are printed in fixed-point notation.

    Notes
    -----
    Integer and boolean elements are always printed as plain integers.
    """

    precision: int = 4
    fixed: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError(f"precision must be an int, got {self.precision!r}")
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")

    def format(self, value: Any) -> str:
        """
        Format a single scalar element.

        Parameters
        ----------
        value : Any
            Python or NumPy scalar.

        Returns
        -------
        str
            The formatted text.
        """
        kind = getattr(getattr(value, "dtype", None), "kind", None)
        if kind in ("b", "i", "u") or isinstance(value, (bool, int)):
            return str(int(value))
        if kind == "c" or isinstance(value, complex):
            return str(value)
        spec = "f" if self.fixed else "g"
        return f"{float(value):.{self.precision}{spec}}"


class TensorDebugPrintMixin:
    """
    Debug dump of a tensor's contents.

    Notes
    -----
    Assumes the host class provides `.shape`, `.rank`, `.size` and element
    reads via ``self[index]``.
    """

    def debug_print(
        self,
        stream: TextIO,
        name: str,
        first: int = 5,
        last: int = 2,
        fmt: Optional[PrintFormat] = None,
    ) -> None:
        """
        Write the shape header and a truncated dump of the contents.

        Parameters
        ----------
        stream : TextIO
            Any object with a ``write(str)`` method.
        name : str
            Label printed in the header.
        first : int, optional
            Leading coordinates printed along the innermost axis. Defaults to 5.
        last : int, optional
            Trailing coordinates printed along the innermost axis. Defaults to 2.
        fmt : Optional[PrintFormat], optional
            Number formatting. Defaults to fixed-point with 4 fractional digits.

        Notes
        -----
        A tensor with no elements prints only its header.
        """
        if first < 0 or last < 0:
            raise ValueError(f"first/last must be >= 0, got first={first}, last={last}")
        fmt = fmt or PrintFormat()

        shape = self.shape
        stream.write(name + " { " + "".join(f"{d} " for d in shape) + "} \n")

        if self.size == 0:
            return

        n = len(shape)
        firsts: List[int] = [0] * n
        lasts: List[int] = [0] * n
        separators: List[str] = [""] * n
        for i in range(n - 1, -1, -1):
            if i == n - 1:
                firsts[i] = first
                lasts[i] = last
                separators[i] = "\t"
            else:
                firsts[i] = max(firsts[i + 1] - 1, 1)
                lasts[i] = max(lasts[i + 1] - 1, 1)
                separators[i] = separators[i + 1] + "\n"

        self._debug_print_axis(stream, firsts, lasts, separators, [0] * n, 0, fmt)
        if n <= 1:
            stream.write("\n")

    def debug_string(
        self,
        name: str,
        first: int = 5,
        last: int = 2,
        fmt: Optional[PrintFormat] = None,
    ) -> str:
        """Return the `debug_print` output as a string."""
        buf = io.StringIO()
        self.debug_print(buf, name, first, last, fmt)
        return buf.getvalue()

    def _debug_print_axis(
        self,
        stream: TextIO,
        firsts: List[int],
        lasts: List[int],
        separators: List[str],
        index: List[int],
        order: int,
        fmt: PrintFormat,
    ) -> None:
        if order == len(index):
            stream.write(fmt.format(self[index]))
            return

        extent = self.shape[order]
        sep = separators[order]
        if firsts[order] + lasts[order] < extent:
            head = range(0, firsts[order])
            tail = range(extent - lasts[order], extent)
        else:
            head = range(0, extent)
            tail = None

        for i in head:
            index[order] = i
            self._debug_print_axis(stream, firsts, lasts, separators, index, order + 1, fmt)
            stream.write(sep)
        if tail is not None:
            stream.write("..." + sep)
            for i in tail:
                index[order] = i
                self._debug_print_axis(stream, firsts, lasts, separators, index, order + 1, fmt)
                stream.write(sep)
