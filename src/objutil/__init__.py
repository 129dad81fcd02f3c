"""
Object Inspection Utilities

Small, stateless helpers for inspecting arbitrary values:
    - Falling back to a default when a value is None or empty
    - Exact-type checks for bool and 32-bit int
    - Array detection

ARCHITECTURAL GUARANTEE:
------------------------
Every function in this package is pure.
No state, no I/O, no configuration.

The notion of "empty" lives in one place (objutil.validator)
and is reused everywhere else.
"""

from .validator import is_null_or_empty, is_not_null_or_empty
from .object_util import (
    NullArgumentError,
    default_if_null,
    default_if_null_or_empty,
    is_array,
    is_boolean,
    is_integer,
)

__version__ = "0.1.0"

__all__ = [
    "NullArgumentError",
    "default_if_null",
    "default_if_null_or_empty",
    "is_array",
    "is_boolean",
    "is_integer",
    "is_not_null_or_empty",
    "is_null_or_empty",
]
