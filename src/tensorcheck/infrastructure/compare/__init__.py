"""
Tolerance-based tensor comparison.

Importing this package registers the built-in difference classifiers
(absolute, relative, both, any) with `DifferencePolicy` as a side effect of
importing `_policies`.

Public API
----------
- ``compare``, ``CompareResult``
- ``CompareConfig``
- ``DifferencePolicy``, ``element_differences``, ``working_dtype``
"""

from ._policies import DifferencePolicy, element_differences, working_dtype
from ._compare import CompareResult, compare
from ._config import CompareConfig

__all__ = [
    compare.__name__,
    CompareResult.__name__,
    CompareConfig.__name__,
    DifferencePolicy.__name__,
    element_differences.__name__,
    working_dtype.__name__,
]
