import math
from dataclasses import dataclass

import pytest

from missile_commander.geometry import (
    GREEN,
    RED,
    Color,
    Vector2,
    clamp,
    move_towards,
    point_in_circle,
    point_in_rect,
    vectors_equal,
)


@dataclass
class Box:
    x: float
    y: float
    width: float
    height: float


def test_vector_defaults_to_origin():
    assert Vector2() == Vector2(0.0, 0.0)


def test_vector_add_sub_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(10.0, 4.0)
    assert (a + b) - b == a


def test_vector_scale_scales_length():
    v = Vector2(3.0, 4.0)
    assert math.isclose((v * 2).length(), 2 * v.length())
    assert 2 * v == v * 2


def test_color_default_alpha_is_opaque():
    assert Color(1, 2, 3).a == 255


def test_named_colours():
    assert RED.as_tuple() == (230, 41, 55, 255)
    assert GREEN.as_tuple() == (0, 228, 48, 255)


def test_color_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_move_towards_reaches_target_when_close():
    target = Vector2(3.0, 4.0)
    assert move_towards(Vector2(), target, 100.0) == target


def test_move_towards_same_point_returns_target():
    p = Vector2(7.0, 7.0)
    assert move_towards(p, p, 0.0) == p


def test_move_towards_steps_by_max_distance():
    start = Vector2(10.0, 20.0)
    target = Vector2(110.0, 70.0)
    step = move_towards(start, target, 5.0)
    assert math.isclose((step - start).length(), 5.0)
    remaining = (target - start).length() - 5.0
    assert math.isclose((target - step).length(), remaining)


def test_move_towards_zero_distance_stays_put():
    start = Vector2(1.0, 1.0)
    assert move_towards(start, Vector2(50.0, 50.0), 0.0) == start


def test_vectors_equal_tolerates_tiny_difference():
    assert vectors_equal(Vector2(100.0, 100.0), Vector2(100.0 + 1e-7, 100.0))


def test_vectors_equal_detects_difference():
    assert not vectors_equal(Vector2(1.0, 1.0), Vector2(1.0, 1.1))


@pytest.mark.parametrize(
    "value, low, high, expected",
    [(-5.0, 0.0, 100.0, 0.0), (50.0, 0.0, 100.0, 50.0), (150.0, 0.0, 100.0, 100.0)],
)
def test_clamp(value, low, high, expected):
    assert clamp(value, low, high) == expected


def test_point_in_rect_edges():
    box = Box(10.0, 10.0, 20.0, 20.0)
    assert point_in_rect(Vector2(10.0, 10.0), box)
    assert point_in_rect(Vector2(20.0, 25.0), box)
    assert not point_in_rect(Vector2(30.0, 15.0), box)
    assert not point_in_rect(Vector2(15.0, 30.0), box)
    assert not point_in_rect(Vector2(9.0, 15.0), box)


def test_point_in_circle_boundary_inclusive():
    center = Vector2(0.0, 0.0)
    assert point_in_circle(Vector2(3.0, 4.0), center, 5.0)
    assert not point_in_circle(Vector2(3.0, 4.1), center, 5.0)
    assert point_in_circle(center, center, 0.0)