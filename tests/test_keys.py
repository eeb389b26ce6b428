import pytest

from qedcrypt.keys import Key, get_key_m_cube

BITS_MIXED = [1, 0, 1, 1, 0, 0, 1, 1, 0, 1, 1, 1, 0, 0, 1, 0, 0, 0, 1, 1]
BITS_FRACTION = [0, 0, 0, 0, 0, 1, 0, 1, 0, 0]
BITS_SINGLE_RUN = [1, 1, 0, 0, 0, 1, 0, 0, 0, 0]


def test_get_key_m_cube_rejects_small_sum():
    with pytest.raises(ValueError):
        get_key_m_cube([1], 0)


def test_get_key_m_cube_rejects_unreadable_digits():
    with pytest.raises(ValueError):
        get_key_m_cube([5, -1, 3], 0)


def test_start_subtracted_from_first_element():
    assert get_key_m_cube([5, 20], 3) == get_key_m_cube([2, 20], 0)


def test_start_consumes_whole_elements():
    assert get_key_m_cube([5, 20], 7) == get_key_m_cube([18], 0)


def test_start_ignored_when_key_too_small():
    assert get_key_m_cube([5, 6], 100) == get_key_m_cube([5, 6], 0)


def test_default_g_is_250():
    assert get_key_m_cube([26, 18, 6], 12) == get_key_m_cube([26, 18, 6], 12, 250)


def test_get_key_m_cube_does_not_mutate_input():
    normal = [26, 18, 6]
    get_key_m_cube(normal, 12)
    assert normal == [26, 18, 6]


@pytest.mark.parametrize("g", [1, 10, 50])
def test_get_key_m_cube_is_deterministic_and_non_negative(g):
    first = get_key_m_cube([3, 14, 15, 92], 2, g)
    assert first >= 0
    assert first == get_key_m_cube([3, 14, 15, 92], 2, g)


def test_from_bits_rejects_empty():
    with pytest.raises(ValueError):
        Key.from_bits([], 100, 10)


def test_from_bits_rejects_too_short():
    with pytest.raises(ValueError):
        Key.from_bits([1, 0, 1], 100, 10)


def test_from_bits_rejects_zero_chunk():
    with pytest.raises(ValueError):
        Key.from_bits(BITS_MIXED, 100, 0)


def test_from_bits_reads_runs():
    key = Key.from_bits(BITS_MIXED, 1000, 10)
    assert key.normal == [26, 18, 6]
    assert key.start == 12
    assert 0 <= key.mix < 100
    assert key.cube == get_key_m_cube(key.normal, key.start)


def test_from_bits_fraction_run_sets_default_start():
    key = Key.from_bits(BITS_FRACTION, 100, 10)
    assert key.start == 9
    assert key.normal[-1] == key.normal[-2] + 1
    assert key.cube == get_key_m_cube(key.normal, key.start)


def test_from_bits_single_run_splits_bits():
    key = Key.from_bits(BITS_SINGLE_RUN, 100, 10)
    assert len(key.normal) == 2
    assert key.normal[1] == key.normal[0] + 1
    assert key.cube == get_key_m_cube(key.normal, key.start)


@pytest.mark.parametrize(
    "bits",
    [BITS_MIXED, BITS_FRACTION, BITS_SINGLE_RUN, BITS_MIXED[:7], BITS_MIXED[:13]],
)
@pytest.mark.parametrize("length,chunk", [(100, 10), (2400, 1), (55, 4)])
def test_from_bits_start_and_mix_in_range(bits, length, chunk):
    key = Key.from_bits(bits, length, chunk)
    ceiling = -(-length // chunk)
    assert 1 <= key.start <= ceiling - 1
    assert 0 <= key.mix < ceiling


def test_from_bits_accepts_bool_values():
    as_bools = [bool(b) for b in BITS_MIXED]
    assert Key.from_bits(as_bools, 1000, 10) == Key.from_bits(BITS_MIXED, 1000, 10)