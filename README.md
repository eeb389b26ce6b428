# qedcrypt

Building blocks of a cube-based scrambling cipher. Plain Python integers
carry the data. A number is cut into fields and laid out on the six faces of
an N×N×N cube. A sequence of layer turns, derived from a key, then shuffles
the fields.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `qedcrypt.baseconv`

Digit helpers for arbitrary-precision integers.

```python
from qedcrypt.baseconv import int_to_base, convert_base, bit_length

int_to_base(10, 2)           # [1, 0, 1, 0]
int_to_base(0, 7)            # [0]
convert_base([1, 0], 10, 2)  # [1, 0, 1, 0]
bit_length(5)                # 3
```

* `int_to_base(number, base)` returns the digits, most significant first.
  Zero and negative numbers give `[0]`. A base below 2 raises `ValueError`.
* `int_to_base_fractional(number, base)` expands a number in a base with one
  decimal place, such as 1.7. It returns the digits as floats that are
  multiples of 0.1.
* `convert_base(digits, base_in, base_out)` re-expresses a digit list in
  another base.
* `bit_length(n)` counts binary digits and treats zero as having one.

### `qedcrypt.keys`

* `Key.from_bits(bits, l, chunk)` splits a key, given as a sequence of bits,
  into a dataclass with these fields:
  * `normal`: the normal key digits.
  * `start`: the start offset.
  * `mix`: the mix value.
  * `cube`: the cube key.

  It raises `ValueError` in these cases:
  * the key is too short;
  * `chunk` is not positive.
* `get_key_m_cube(key_normal, key_start, g=None)` derives the large integer
  that drives the cube moves from a list of key digits. `g` sets the target
  digit count and defaults to 250. It raises `ValueError` when the digits sum
  to 1 or less.

### `qedcrypt.cube`

* `rotate_grid(grid, rotations)` turns a rectangular list of lists clockwise
  by quarter turns. Negative counts turn it the other way. A ragged grid
  raises `ValueError`.
* `Axis` names the three axes `X`, `Y` and `Z`. `Axis.from_int(value)` maps
  any integer onto one of them by its remainder modulo three.
* `Cube(dimensions)` holds six square faces of integer cells:
  * `Cube.load(value, field_bits)` writes an integer onto the faces,
    `field_bits` bits per cell. It raises `ValueError` when the value has
    fewer bits than the cube holds.
  * `Cube.rotate(axis, plane, rotation)` turns one layer by quarter turns.
  * `Cube.dump(field_bits)` packs the cells back into one integer.
* `cube_int_to_moves(key_m_cube, dimensions, encryption)` expands a cube key
  into a list of `(axis, plane)` moves. The list is reversed when
  `encryption` is false.
* `cube_big(text, key_m_cube, dimensions, field_bits, encryption)` loads the
  low `dimensions² × 6 × field_bits` bits of `text` onto a cube. It applies
  the key's moves, a quarter turn each, and those turns go the opposite way
  when `encryption` is false. It then adds the dumped cube to the untouched
  high bits of `text`.

### `qedcrypt.constants`

* `KEY_M_CUBE_2_INITIAL_STR` holds the fixed starting value of the second
  cube key as a string of decimal digits.
* `KEY_M_CUBE_2_INITIAL` holds the same value as an integer.
* `QUICK_ROTATE` holds eighteen cell orderings of a 6×6×6 cube. Each ordering
  is a permutation of the 1-based positions 1 to `CUBE_CELLS` (216). The
  tables are checked when the module is imported.

## Command line

```
qedcrypt
```

This command takes no options apart from `--help`. It prints three lines:

1. a greeting;
2. the byte length of a full 1728-bit cube key, which is `216`;
3. the result of shifting 5 right by two bits and back again, which is `4`.

## What it does not do

The package has no function or command that encrypts or decrypts a message
from start to end. Nothing here applies `QUICK_ROTATE` or
`KEY_M_CUBE_2_INITIAL`: they are provided as data only. `Key.from_bits` and
`cube_big` are separate steps, and the caller must combine them.