import copy

import pytest

from qedcrypt.baseconv import int_to_base
from qedcrypt.cube import (
    Axis,
    Cube,
    cube_big,
    cube_int_to_moves,
    rotate_grid,
)

END_FACES = {Axis.X: (1, 3), Axis.Y: (2, 4), Axis.Z: (0, 5)}


def _loaded_cube():
    cube = Cube(3)
    cube.load(int.from_bytes(bytes(range(1, 56)), "big"), 8)
    return cube


def _cells(cube):
    return [cell for face in cube.faces for row in face for cell in row]


def _chunks(value, bits, count):
    mask = (1 << bits) - 1
    return [(value >> (bits * i)) & mask for i in range(count)]


def test_rotate_grid_quarter_turn():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert rotate_grid(grid, 1) == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


@pytest.mark.parametrize("turns", [0, 4, 8, -4])
def test_rotate_grid_full_turns_are_identity(turns):
    grid = [[1, 2], [3, 4]]
    assert rotate_grid(grid, turns) == grid


def test_rotate_grid_negative_equals_three():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert rotate_grid(grid, -1) == rotate_grid(grid, 3)


def test_rotate_grid_does_not_mutate_input():
    grid = [[1, 2], [3, 4]]
    rotate_grid(grid, 1)
    assert grid == [[1, 2], [3, 4]]


def test_rotate_grid_empty():
    assert rotate_grid([], 3) == []


def test_rotate_grid_rejects_ragged():
    with pytest.raises(ValueError):
        rotate_grid([[1, 2], [3]], 1)


@pytest.mark.parametrize("value", [-7, -1, 0, 1, 2, 5, 100])
def test_axis_from_int_is_periodic(value):
    assert Axis.from_int(value) == Axis.from_int(value + 3)
    assert Axis.from_int(value) == Axis(value % 3)


def test_axis_from_int_small_values():
    assert [Axis.from_int(i) for i in range(3)] == [Axis.X, Axis.Y, Axis.Z]


def test_load_places_cells_in_order():
    cube = _loaded_cube()
    assert _cells(cube) == list(range(1, 55))
    assert len(cube.faces) == 6
    assert all(len(face) == 3 and all(len(row) == 3 for row in face) for face in cube.faces)


def test_dump_after_load_clears_lowest_field():
    value = (1 << 439) | 0x0123456789ABCDEF0123456789ABCDEF
    cube = Cube(3)
    cube.load(value, 8)
    assert cube.dump(8) == value & ~0xFF


def test_load_rejects_short_value():
    with pytest.raises(ValueError):
        Cube(2).load(1, 4)


def test_cube_rejects_zero_dimensions():
    with pytest.raises(ValueError):
        Cube(0)


@pytest.mark.parametrize("axis", list(Axis))
@pytest.mark.parametrize("plane", [0, 1, 2])
def test_rotate_then_inverse_restores(axis, plane):
    cube = _loaded_cube()
    original = copy.deepcopy(cube.faces)
    cube.rotate(axis, plane, 1)
    cube.rotate(axis, plane, 3)
    assert cube.faces == original


@pytest.mark.parametrize("axis", list(Axis))
@pytest.mark.parametrize("plane", [0, 1, 2])
def test_four_quarter_turns_restore(axis, plane):
    cube = _loaded_cube()
    original = copy.deepcopy(cube.faces)
    for _ in range(4):
        cube.rotate(axis, plane, 1)
    assert cube.faces == original


@pytest.mark.parametrize("axis", list(Axis))
@pytest.mark.parametrize("plane", [0, 1, 2])
def test_rotation_permutes_cells(axis, plane):
    cube = _loaded_cube()
    original = copy.deepcopy(cube.faces)
    cube.rotate(axis, plane, 1)
    assert sorted(_cells(cube)) == list(range(1, 55))
    assert cube.faces != original


@pytest.mark.parametrize("axis", list(Axis))
def test_half_turn_twice_restores(axis):
    cube = _loaded_cube()
    original = copy.deepcopy(cube.faces)
    cube.rotate(axis, 1, 2)
    cube.rotate(axis, 1, 2)
    assert cube.faces == original


@pytest.mark.parametrize("axis", list(Axis))
def test_middle_plane_leaves_end_faces(axis):
    cube = _loaded_cube()
    original = copy.deepcopy(cube.faces)
    cube.rotate(axis, 1, 1)
    for face in END_FACES[axis]:
        assert cube.faces[face] == original[face]


@pytest.mark.parametrize("axis", list(Axis))
def test_outer_plane_turns_end_face_in_place(axis):
    cube = _loaded_cube()
    original = copy.deepcopy(cube.faces)
    cube.rotate(axis, 0, 1)
    first, _ = END_FACES[axis]
    turned = [cell for row in cube.faces[first] for cell in row]
    before = [cell for row in original[first] for cell in row]
    assert sorted(turned) == sorted(before)


def test_rotate_rejects_plane_out_of_range():
    cube = _loaded_cube()
    with pytest.raises(ValueError):
        cube.rotate(Axis.X, 3, 1)


def test_rotate_rejects_unloaded_cube():
    with pytest.raises(ValueError):
        Cube(2).rotate(Axis.Y, 0, 1)


@pytest.mark.parametrize("key", [0, 5, 259, 123456789, 10**40 + 17])
@pytest.mark.parametrize("dimensions", [2, 3, 20])
def test_moves_invariants(key, dimensions):
    forward = cube_int_to_moves(key, dimensions, True)
    backward = cube_int_to_moves(key, dimensions, False)
    assert backward == list(reversed(forward))
    assert len(forward) == len(int_to_base(key, dimensions * 3))
    assert all(0 <= plane < dimensions for _, plane in forward)


def test_cube_big_identity_moves():
    # 259 is 1111 in base 6: four quarter turns of the same layer.
    text = (0xABC << 96) | (1 << 95) | 0x123456789ABCDEF
    assert cube_big(text, 259, 2, 4, True) == text & ~0xF
    assert cube_big(text, 259, 2, 4, False) == text & ~0xF


@pytest.mark.parametrize("encryption", [True, False])
def test_cube_big_permutes_fields(encryption):
    upper = 0x5A0
    low = (1 << 95) | 0x0F1E2D3C4B5A69788796A5B4
    text = (upper << 96) | low
    result = cube_big(text, 123456789, 2, 4, encryption)
    assert result >> 100 == upper >> 4
    dumped = result & ((1 << 100) - 1)
    assert sorted(_chunks(dumped >> 4, 4, 24)) == sorted([0] + _chunks(low >> 4, 4, 23))


def test_cube_big_rejects_short_text():
    with pytest.raises(ValueError):
        cube_big(1, 259, 2, 4, True)