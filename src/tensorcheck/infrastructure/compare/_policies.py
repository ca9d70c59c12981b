"""
Difference-policy registry and per-element difference math.

This module defines the concrete `DifferencePolicy` used by the comparator to
classify an element pair as an error, plus `element_differences`, which
computes the absolute and relative difference of one pair.

Design
------
- Classifiers are registered per `DifferenceType` via a decorator-based
  registry, the same way weight initializers are registered by name.
- A classifier is a pure predicate ``(absolute, relative, threshold) -> bool``
  returning True when the pair is an error.
- The dispatcher resolves a classifier once at construction and is then
  called per element.

Usage example
-------------
Applying a policy:

    policy = DifferencePolicy(DifferenceType.ANY)
    work = working_dtype(np.float32, np.float32)
    absolute, relative = element_differences(1.0, 2.0, work)
    is_error = policy(absolute, relative, work.type(0.5))
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, TypeVar, Union

import numpy as np

from ...domain._difference import DifferenceType

Classifier = Callable[[float, float, float], bool]
C = TypeVar("C", bound=Classifier)


def working_dtype(dtype_a: Any, dtype_b: Any) -> np.dtype:
    """
    Return the dtype element differences are computed in.

    Floating operands keep their common float type, so a pair is judged at
    the precision it is stored in. Everything else (integers, bools) widens
    to float64, where subtraction cannot wrap around.
    """
    common = np.result_type(dtype_a, dtype_b)
    if np.issubdtype(common, np.floating):
        return common
    return np.dtype(np.float64)


def element_differences(
    va: Any, vb: Any, dtype: Optional[np.dtype] = None
) -> Tuple[Any, Any]:
    """
    Compute the absolute and relative difference of one element pair.

    Parameters
    ----------
    va, vb : Any
        Python or NumPy scalars.
    dtype : Optional[np.dtype], optional
        Float dtype to compute in (see `working_dtype`). Defaults to float64.

    Returns
    -------
    Tuple[Any, Any]
        ``(|va - vb|, |va - vb| / max(|va|, |vb|))`` as scalars of `dtype`.

    Notes
    -----
    - When both values are exactly zero the relative difference is defined as
      0.0 instead of ``0/0``.
    - NaN inputs produce NaN differences, which no policy flags, since every
      comparison against NaN is False.
    """
    cast = np.dtype(np.float64 if dtype is None else dtype).type
    a = cast(va)
    b = cast(vb)
    absolute = abs(a - b)
    scale = max(abs(a), abs(b))
    relative = absolute / scale if scale != 0 else cast(0)
    return absolute, relative


class DifferencePolicy:
    """
    Registry-backed classifier of element-pair differences.

    Usage
    -----
    Register:
        @DifferencePolicy.register_policy(DifferenceType.ABSOLUTE)
        def absolute(absolute, relative, threshold): ...

    Dispatch:
        policy = DifferencePolicy("absolute")
        policy(absolute, relative, threshold)
    """

    POLICIES: ClassVar[Dict[DifferenceType, Classifier]] = {}

    def __init__(self, difference_type: Union[DifferenceType, str]) -> None:
        self.difference_type = DifferenceType.parse(difference_type)
        try:
            self._classifier: Classifier = self.POLICIES[self.difference_type]
        except KeyError as e:
            available = ", ".join(t.value for t in self.available()) or "<none>"
            raise ValueError(
                f"No classifier registered for {self.difference_type!r}. "
                f"Available: {available}"
            ) from e

    @classmethod
    def register_policy(
        cls, difference_type: DifferenceType, *, overwrite: bool = False
    ) -> Callable[[C], C]:
        """
        Decorator to register the classifier for `difference_type`.

        Parameters
        ----------
        difference_type:
            Policy the decorated predicate implements.
        overwrite:
            If False (default), raises if a classifier is already registered.
        """
        if not isinstance(difference_type, DifferenceType):
            raise ValueError(
                f"difference_type must be a DifferenceType, got {difference_type!r}"
            )

        def decorator(func: C) -> C:
            if not overwrite and difference_type in cls.POLICIES:
                raise ValueError(f"Policy already registered: {difference_type!r}")
            cls.POLICIES[difference_type] = func
            return func

        return decorator

    @classmethod
    def available(cls) -> tuple[DifferenceType, ...]:
        """Return the policies that have a registered classifier."""
        return tuple(t for t in DifferenceType if t in cls.POLICIES)

    def __call__(self, absolute: float, relative: float, threshold: float) -> bool:
        return self._classifier(absolute, relative, threshold)

    def __repr__(self) -> str:
        return f"DifferencePolicy({self.difference_type.value!r})"


@DifferencePolicy.register_policy(DifferenceType.ABSOLUTE)
def absolute_policy(absolute: float, relative: float, threshold: float) -> bool:
    return absolute > threshold


@DifferencePolicy.register_policy(DifferenceType.RELATIVE)
def relative_policy(absolute: float, relative: float, threshold: float) -> bool:
    return relative > threshold


@DifferencePolicy.register_policy(DifferenceType.BOTH)
def both_policy(absolute: float, relative: float, threshold: float) -> bool:
    """Error only when the pair is off both absolutely and relatively."""
    return absolute > threshold and relative > threshold


@DifferencePolicy.register_policy(DifferenceType.ANY)
def any_policy(absolute: float, relative: float, threshold: float) -> bool:
    """Error when the pair is off either absolutely or relatively."""
    return absolute > threshold or relative > threshold
