#!/usr/bin/env python3
"""
Demo: Inspect a table of sample values.

Shows how each helper classifies common Python values.
"""

import array

from objutil import (
    NullArgumentError,
    default_if_null_or_empty,
    is_array,
    is_boolean,
    is_integer,
    is_null_or_empty,
)


SAMPLES = [
    None,
    "",
    "   ",
    "abc",
    0,
    1,
    2 ** 40,
    1.0,
    True,
    [],
    [1, 2, 3],
    (),
    {},
    array.array("i"),
    b"",
]


def main():
    print("=" * 80)
    print("OBJECT INSPECTION DEMO")
    print("=" * 80)
    print(f"{'value':<22}{'empty':<8}{'bool':<8}{'int':<8}{'array':<8}default")
    print("-" * 80)

    for value in SAMPLES:
        try:
            array_flag = str(is_array(value))
        except NullArgumentError:
            array_flag = "error"
        print(
            f"{value!r:<22}"
            f"{str(is_null_or_empty(value)):<8}"
            f"{str(is_boolean(value)):<8}"
            f"{str(is_integer(value)):<8}"
            f"{array_flag:<8}"
            f"{default_if_null_or_empty(value, 'zz')!r}"
        )

    print("=" * 80)


if __name__ == "__main__":
    main()
