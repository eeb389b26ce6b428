"""A cube of integer cells that is scrambled by turning its layers."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import TypeVar

from qedcrypt.baseconv import bit_length, int_to_base

__all__ = ["rotate_grid", "Axis", "Cube", "cube_big", "cube_int_to_moves"]

T = TypeVar("T")

_FACE_COUNT = 6


def rotate_grid(grid: Sequence[Sequence[T]], rotations: int) -> list[list[T]]:
    """Return ``grid`` turned clockwise a quarter turn ``rotations`` times.

    Negative counts turn the other way.  A non-rectangular grid raises
    ``ValueError``.
    """
    rows = [list(row) for row in grid]
    if not rows:
        return rows
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError(f"cannot rotate a non-rectangular grid: {rows!r}")
    for _ in range(rotations % 4):
        rows = [list(column) for column in zip(*reversed(rows))]
    return rows


class Axis(enum.Enum):
    """An axis a layer of the cube can turn around."""

    X = 0
    Y = 1
    Z = 2

    @classmethod
    def from_int(cls, value: int) -> Axis:
        """Map any integer onto an axis by its remainder modulo three."""
        return cls(value % 3)


# For each axis: the quarter turns that line up each face's rows, and the
# four faces whose rows travel around the axis.
_LAYOUT: dict[Axis, tuple[tuple[int, ...], tuple[int, ...]]] = {
    Axis.X: ((0, 0, 0, 2), (0, 2, 5, 4)),
    Axis.Y: ((1, 0, 3, 2), (0, 3, 5, 1)),
    Axis.Z: ((1, 1, 1, 1), (4, 3, 2, 1)),
}

# The face turned along with the first and with the last layer of an axis.
_END_FACES: dict[Axis, tuple[int, int]] = {
    Axis.X: (1, 3),
    Axis.Y: (2, 4),
    Axis.Z: (0, 5),
}


class Cube:
    """Six square faces of cells with ``dimensions`` rows and columns each."""

    def __init__(self, dimensions: int) -> None:
        if dimensions < 1:
            raise ValueError(f"dimensions must be positive, got {dimensions}")
        self.dimensions = dimensions
        self.faces: list[list[list[int]]] = [[] for _ in range(_FACE_COUNT)]

    def rotate(self, axis: Axis, plane: int, rotation: int) -> None:
        """Turn layer ``plane`` around ``axis`` by ``rotation`` quarter turns."""
        turns = (-rotation) % 4 if axis is Axis.Z else rotation % 4
        for _ in range(turns):
            self._turn(axis, plane)

    def _turn(self, axis: Axis, plane: int) -> None:
        if not 0 <= plane < self.dimensions:
            raise ValueError(
                f"plane must lie in 0..{self.dimensions - 1}, got {plane}"
            )
        if any(len(face) != self.dimensions for face in self.faces):
            raise ValueError("the cube holds no data; load it first")

        rotations, ring = _LAYOUT[axis]
        alignment = [0] * _FACE_COUNT
        for face, turns in zip(ring, rotations):
            alignment[face] = turns

        aligned = [
            rotate_grid(face, turns + 1) for face, turns in zip(self.faces, alignment)
        ]

        carried = list(aligned[ring[-1]][plane])
        for face in ring:
            carried, aligned[face][plane] = list(aligned[face][plane]), carried

        self.faces = [
            rotate_grid(face, 3 - turns) for face, turns in zip(aligned, alignment)
        ]

        first, last = _END_FACES[axis]
        if plane == 0:
            self.faces[first] = rotate_grid(self.faces[first], 1)
        elif plane + 1 == self.dimensions:
            self.faces[last] = rotate_grid(self.faces[last], 1)

    def load(self, value: int, field_bits: int) -> None:
        """Fill every cell with ``field_bits`` bits taken from ``value``."""
        if field_bits < 1:
            raise ValueError(f"field_bits must be positive, got {field_bits}")
        d = self.dimensions
        capacity = d * d * _FACE_COUNT * field_bits
        if capacity > bit_length(value):
            raise ValueError("Can not write provided text to cube: Text is too short.")
        mask = (1 << field_bits) - 1
        self.faces = [
            [
                [
                    (value >> (capacity - (p * d * d + x * d + y) * field_bits)) & mask
                    for y in range(d)
                ]
                for x in range(d)
            ]
            for p in range(_FACE_COUNT)
        ]

    def dump(self, field_bits: int) -> int:
        """Pack the cells back into one integer, ``field_bits`` bits each."""
        value = 0
        for face in self.faces:
            for row in face:
                for cell in row:
                    value = (value + cell) << field_bits
        return value


def cube_int_to_moves(
    key_m_cube: int, dimensions: int, encryption: bool
) -> list[tuple[Axis, int]]:
    """Turn a key into the sequence of (axis, plane) layer moves it encodes."""
    moves = [
        (Axis.from_int(digit), digit // 3)
        for digit in int_to_base(key_m_cube, dimensions * 3)
    ]
    if not encryption:
        moves.reverse()
    return moves


def cube_big(
    text: int,
    key_m_cube: int,
    dimensions: int,
    field_bits: int,
    encryption: bool,
) -> int:
    """Scramble (or unscramble) the low bits of ``text`` on a cube."""
    lshift = dimensions * dimensions * _FACE_COUNT * field_bits
    formatted = text & ((1 << lshift) - 1)

    cube = Cube(dimensions)
    cube.load(formatted, field_bits)

    rotation = 1 if encryption else 3
    for axis, plane in cube_int_to_moves(key_m_cube, dimensions, encryption):
        cube.rotate(axis, plane, rotation)

    return ((text >> lshift) << lshift) + cube.dump(field_bits)