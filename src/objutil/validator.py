"""
Emptiness Predicate

Decides whether a value is None or semantically empty.

Empty means:
    - None
    - A string that is empty or whitespace only
      (str.strip() semantics: any Unicode whitespace, including
      U+00A0 no-break space, counts)
    - Any sized container with no elements
      (list, tuple, dict, set, array.array, bytes, range, ...)

NOT empty:
    - Numbers, including 0
    - False
    - Iterators and generators (they cannot be inspected without
      being consumed)
    - Any other object without __len__
    - Sized objects whose __len__ cannot answer (e.g. a range too
      long for len(), or a type whose __len__ raises TypeError)

ARCHITECTURAL RULE:
    Every null-or-empty check in objutil goes through this module.
    Do not inline `if not value` checks elsewhere; they treat
    0 and False as empty, which is wrong here.
"""

from collections.abc import Sized
from typing import Any


def is_null_or_empty(value: Any) -> bool:
    """
    Return True if `value` is None or empty.

    Examples:
        is_null_or_empty(None)      -> True
        is_null_or_empty("")        -> True
        is_null_or_empty("   ")     -> True
        is_null_or_empty([])        -> True
        is_null_or_empty({})        -> True
        is_null_or_empty(0)         -> False
        is_null_or_empty(False)     -> False
        is_null_or_empty("abc")     -> False
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, Sized):
        try:
            return len(value) == 0
        except (OverflowError, TypeError):
            return False
    return False


def is_not_null_or_empty(value: Any) -> bool:
    """Negation of is_null_or_empty."""
    return not is_null_or_empty(value)
