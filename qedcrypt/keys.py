"""Key derivation from a bit string."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from qedcrypt.baseconv import convert_base, int_to_base, int_to_base_fractional

__all__ = ["Key", "get_key_m_cube"]

_KEY_CHUNK = 5
_DEFAULT_G = 250
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MASK = 2**64 - 1


def _bits_to_i64(bits: Sequence[bool]) -> int:
    """Accumulate bits with a trailing shift, wrapping like a signed 64-bit integer."""
    value = 0
    for bit in bits:
        value = ((value + (1 if bit else 0)) << 1) & _U64_MASK
    return value - 2**64 if value > _I64_MAX else value


def _float_to_i64(x: float) -> int:
    """Truncate a float to a saturated signed 64-bit integer."""
    if math.isnan(x):
        return 0
    if math.isinf(x):
        return _I64_MAX if x > 0 else _I64_MIN
    return max(_I64_MIN, min(_I64_MAX, int(x)))


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _group_value(head_has_bits: bool, bits: list[bool]) -> float:
    if head_has_bits:
        return float(_bits_to_i64(bits))
    raw = _bits_to_i64(bits)
    if raw < 0:
        raise ValueError(f"cannot read key segment as a fraction: 0.{raw}")
    return float(f"0.{raw}")


def _segments(bits: Sequence[bool]) -> list[list[bool]]:
    count = len(bits) // _KEY_CHUNK
    segments = [list(bits[i * _KEY_CHUNK:(i + 1) * _KEY_CHUNK]) for i in range(count)]
    if len(bits) % _KEY_CHUNK:
        if count == 0:
            raise ValueError(f"key needs at least {_KEY_CHUNK} bits, got {len(bits)}")
        segments.append(list(bits[count * _KEY_CHUNK - 1:]))
    if not segments:
        raise ValueError("no key was provided")
    if len(segments[-1]) == 1:
        segments[-1].append(False)
    return segments


def _read_values(segments: list[list[bool]]) -> list[float]:
    """Read runs of segments sharing the same leading flag as numbers."""
    values: list[float] = []
    index = 0
    while index < len(segments):
        for flag in (False, True):
            if index >= len(segments) or segments[index][0] != flag:
                continue
            tail = segments[index][1:]
            has_bits = any(tail)
            collected = tail if has_bits else [False]
            index += 1
            while index < len(segments) and segments[index][0] == flag:
                collected.extend(segments[index][1:])
                index += 1
            values.append(_group_value(has_bits, collected))
    return values


@dataclass
class Key:
    """Key material derived from a bit string."""

    normal: list[int]
    start: int
    mix: float
    cube: int

    @classmethod
    def from_bits(cls, bits: Sequence[bool], l: int, chunk: int) -> Key:
        """Derive a key from ``bits`` for a text of ``l`` units split in ``chunk``s."""
        if chunk <= 0:
            raise ValueError(f"chunk must be positive, got {chunk}")
        bits = [bool(b) for b in bits]
        values = _read_values(_segments(bits))
        mix = sum(values)

        if len(values) == 1:
            half = len(bits) // 2
            values = [
                float(_bits_to_i64(bits[:half])),
                float(_bits_to_i64(bits[half - 1:])),
            ]

        normal = [_float_to_i64(_round_half_away(v)) for v in values[1:]]
        if len(values) == 2:
            normal.append(_float_to_i64(math.floor(values[1])) + 1)

        ceiling = math.ceil(l / chunk)
        if mix >= 1.0:
            mix = float(math.floor(math.fmod(mix, ceiling)))
        else:
            mix = float(math.floor(mix * ceiling))

        first = values[0]
        if first >= 1.0:
            start = _float_to_i64(math.floor(math.fmod(first, ceiling)))
        else:
            start = _float_to_i64(math.floor(first * ceiling))
        if start == 0:
            start = ceiling - 1

        return cls(normal=normal, start=start, mix=mix, cube=get_key_m_cube(normal, start))


def _join_digits(digits: Sequence[int]) -> int:
    if not digits:
        raise ValueError("cannot build a number from an empty digit list")
    text = "".join(str(d) for d in digits)
    try:
        return int(text)
    except ValueError as exc:
        raise ValueError(f"cannot read {text!r} as a number") from exc


def _pair_sums(digits: Sequence[int]) -> list[int]:
    return [a + b for a, b in zip(digits[0::2], digits[1::2])]


def get_key_m_cube(key_normal: Sequence[int], key_start: int, g: int | None = None) -> int:
    """Derive the cube scrambling key from the normal key and its start offset."""
    g = _DEFAULT_G if g is None else g
    normal = list(key_normal)

    if sum(normal) - 10 > key_start:
        while key_start > 0:
            if key_start > normal[0]:
                key_start -= normal.pop(0)
            else:
                normal[0] -= key_start
                key_start = 0

    if sum(normal) <= 1:
        raise ValueError("sum of the normal key must exceed 1")

    digits = list(normal)
    while len(digits) < g:
        expansion = int_to_base_fractional(_join_digits(digits), 1.7)
        text = "".join(str(int(math.floor(x * 10.0))) for x in expansion)
        digits = [int(ch) for ch in text]

    limit = int(g * 1.75)
    while len(digits) > limit:
        digits = convert_base(_pair_sums(convert_base(digits, 10, 5)), 9, 10)

    digits = int_to_base(_join_digits(digits), 5)
    digits = convert_base(_pair_sums(digits), 9, 10)
    return _join_digits(digits)