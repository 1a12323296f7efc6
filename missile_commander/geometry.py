"""Plain 2D value types and the small geometric helpers the game relies on."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

EPSILON = 0.000001


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D point or direction."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector2:
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


RED = Color(230, 41, 55)
GREEN = Color(0, 228, 48)
GRAY = Color(130, 130, 130)
LIGHTGRAY = Color(200, 200, 200)
RAYWHITE = Color(245, 245, 245)


class _RectLike(Protocol):
    x: float
    y: float
    width: float
    height: float


def move_towards(current: Vector2, target: Vector2, max_distance: float) -> Vector2:
    """Step from ``current`` towards ``target`` by at most ``max_distance``."""
    dx = target.x - current.x
    dy = target.y - current.y
    squared = dx * dx + dy * dy
    if squared == 0 or (max_distance >= 0 and squared <= max_distance * max_distance):
        return target
    dist = math.sqrt(squared)
    return Vector2(
        current.x + dx / dist * max_distance,
        current.y + dy / dist * max_distance,
    )


def _close(p: float, q: float) -> bool:
    return abs(p - q) <= EPSILON * max(1.0, abs(p), abs(q))


def vectors_equal(a: Vector2, b: Vector2) -> bool:
    """True when both components agree within a relative tolerance."""
    return _close(a.x, b.x) and _close(a.y, b.y)


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to the closed range ``[low, high]``."""
    result = low if value < low else value
    return high if result > high else result


def point_in_rect(point: Vector2, rect: _RectLike) -> bool:
    """True when the point lies inside the rectangle (right/bottom edges excluded)."""
    return (
        rect.x <= point.x < rect.x + rect.width
        and rect.y <= point.y < rect.y + rect.height
    )


def point_in_circle(point: Vector2, center: Vector2, radius: float) -> bool:
    """True when the point lies inside or on the circle."""
    dx = center.x - point.x
    dy = center.y - point.y
    return dx * dx + dy * dy <= radius * radius