"""Conversions between integers and digit lists in arbitrary bases."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

__all__ = ["int_to_base", "int_to_base_fractional", "convert_base", "bit_length"]


def int_to_base(number: int, base: int) -> list[int]:
    """Return the digits of ``number`` in ``base``, most significant first.

    Zero and negative numbers yield ``[0]``.
    """
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    digits: list[int] = []
    while number > 0:
        number, remainder = divmod(number, base)
        digits.append(remainder)
    digits.reverse()
    return digits or [0]


def int_to_base_fractional(number: int, base: float) -> list[float]:
    """Expand ``number`` in a base with one decimal place, such as 1.7.

    Each digit is a multiple of 0.1 smaller than ``base``; the digits are
    returned most significant first.  Zero yields ``[0.0]`` and a negative
    number yields an empty list.
    """
    divisor = int(math.floor(base * 10.0))
    if divisor <= 0:
        raise ValueError(f"base must be at least 0.1, got {base}")
    if number == 0:
        return [0.0]
    digits: list[float] = []
    while number > 0:
        digits.append(((number * 10) % divisor) / 10.0)
        number = (number * 10) // divisor
    digits.reverse()
    return digits


def convert_base(digits: Sequence[int] | Iterable[int], base_in: int, base_out: int) -> list[int]:
    """Re-express a digit list given in ``base_in`` as digits in ``base_out``."""
    value = 0
    for digit in digits:
        value = value * base_in + digit
    return int_to_base(value, base_out)


def bit_length(n: int) -> int:
    """Return the number of binary digits of ``n``, counting zero as one digit."""
    return max(1, n.bit_length())