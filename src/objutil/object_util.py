"""
Object Inspection Helpers

Stateless free functions over values of any type.

This module is the whole public surface of the utility.
There is no class to instantiate; callers import the functions.

Type checks here are EXACT:
    is_boolean(1)      -> False   (int is not bool)
    is_integer(True)   -> False   (bool subclasses int, but is not int)

IMPORTANT:
    is_array(None) raises NullArgumentError.
    The other predicates return False for None.
    Callers depend on this asymmetry; keep it.
"""

import array
from typing import Any, Optional, TypeVar

from objutil.validator import is_not_null_or_empty

T = TypeVar("T")

# 32-bit signed range accepted by is_integer
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

# list/tuple are object arrays; array.array, bytes, bytearray and memoryview hold primitives
ARRAY_TYPES = (list, tuple, array.array, bytes, bytearray, memoryview)


class NullArgumentError(ValueError):
    """Raised when a required argument is None."""
    pass


def default_if_null_or_empty(value: Optional[T], default_value: Optional[T]) -> Optional[T]:
    """
    Return `default_value` if `value` is None or empty, else `value`.

    Unlike default_if_null, emptiness (not just None) triggers the
    fallback. See objutil.validator for what counts as empty.

    Examples:
        default_if_null_or_empty(None, None)   -> None
        default_if_null_or_empty(None, "")     -> ""
        default_if_null_or_empty(None, "zz")   -> "zz"
        default_if_null_or_empty("", "zz")     -> "zz"
        default_if_null_or_empty("abc", "zz")  -> "abc"
        default_if_null_or_empty(True, False)  -> True
    """
    return value if is_not_null_or_empty(value) else default_value


def default_if_null(value: Optional[T], default_value: Optional[T]) -> Optional[T]:
    """Return `default_value` only if `value` is None; empty values pass through."""
    return default_value if value is None else value


def is_boolean(value: Any) -> bool:
    """True if `value` is a bool. None -> False."""
    return type(value) is bool


def is_integer(value: Any) -> bool:
    """
    True if `value` is a 32-bit signed int.

    Python has a single unbounded int type, so values outside
    [INT_MIN, INT_MAX] are treated as a wider integer type and rejected.
    bool and float never match. None -> False.
    """
    return type(value) is int and INT_MIN <= value <= INT_MAX


def is_array(value: Any) -> bool:
    """
    True if `value` is an array (see ARRAY_TYPES).

    Primitive-element arrays count, empty or not:
        is_array(array.array("i"))  -> True
        is_array(b"")               -> True
        is_array(memoryview(b"ab")) -> True

    Strings are not arrays:
        is_array("abc")             -> False

    Raises:
        NullArgumentError: If value is None
    """
    if value is None:
        raise NullArgumentError("object can't be null!")
    return type(value) in ARRAY_TYPES
