import pytest

from missile_commander import rng


def test_get_stays_within_inclusive_range():
    values = {rng.get(0, 5) for _ in range(2000)}
    assert values <= set(range(6))


def test_get_reaches_both_endpoints():
    values = {rng.get(0, 3) for _ in range(2000)}
    assert 0 in values and 3 in values


def test_get_single_value_range():
    assert rng.get(42, 42) == 42


def test_get_accepts_negative_bounds():
    assert all(-10 <= rng.get(-10, -1) <= -1 for _ in range(200))


def test_get_rejects_reversed_range():
    with pytest.raises(ValueError):
        rng.get(5, 1)


def test_make_generator_yields_independent_streams():
    a = rng.make_generator()
    b = rng.make_generator()
    seq_a = [a.getrandbits(32) for _ in range(8)]
    seq_b = [b.getrandbits(32) for _ in range(8)]
    assert seq_a != seq_b


def test_make_generator_produces_inclusive_ints():
    gen = rng.make_generator()
    assert all(1 <= gen.randint(1, 6) <= 6 for _ in range(200))