"""
Difference policies for element-wise tensor comparison.

This module defines `DifferenceType`, the enumeration of rules that decide how
an element pair's absolute and relative differences combine into a pass/fail
verdict. The enum is backend-agnostic; the concrete classifiers live in the
infrastructure layer and are looked up by enum member.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class DifferenceType(Enum):
    """
    Enumeration of supported difference policies.

    Given a threshold ``t``, an absolute difference ``abs`` and a relative
    difference ``rel``, an element pair is an error when:

    Attributes
    ----------
    ABSOLUTE : DifferenceType
        ``abs > t``.
    RELATIVE : DifferenceType
        ``rel > t``.
    BOTH : DifferenceType
        ``abs > t and rel > t``.
    ANY : DifferenceType
        ``abs > t or rel > t``.
    """

    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    BOTH = "both"
    ANY = "any"

    @classmethod
    def parse(cls, value: Union["DifferenceType", str]) -> "DifferenceType":
        """
        Coerce a member or its (case-insensitive) string value to a member.

        Parameters
        ----------
        value : Union[DifferenceType, str]
            Enum member, or one of "absolute", "relative", "both", "any".

        Returns
        -------
        DifferenceType
            The matching enum member.

        Raises
        ------
        ValueError
            If `value` names no policy.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(m.value for m in cls)
        raise ValueError(
            f"Unsupported difference type: {value!r}. Expected one of: {choices}"
        )
