"""Game objects: circles, explosions, lines, missiles and buildings."""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import GRAY, RED, Color, Vector2


@dataclass
class Circle2D:
    """A filled circle."""

    position: Vector2 = field(default_factory=Vector2)
    radius: float = 0.0
    tint: Color = RED


@dataclass
class Explosion(Circle2D):
    """A circle that grows and then shrinks; ``grow`` is added to the radius each frame."""

    grow: float = 1.0


@dataclass
class Line2D:
    """A straight segment between two points."""

    start_pos: Vector2 = field(default_factory=Vector2)
    end_pos: Vector2 = field(default_factory=Vector2)
    tint: Color = RED


@dataclass
class Missile(Line2D):
    """A line whose end moves towards a target with increasing step distance."""

    distance: float = 0.0
    speed: float = 0.0
    target_pos: Vector2 = field(default_factory=Vector2)

    def update_distance(self, distance: float) -> None:
        """Add ``distance`` to the current step distance."""
        self.distance += distance


@dataclass
class Rectangle2D:
    """An axis-aligned filled rectangle."""

    width: float = 0.0
    height: float = 0.0
    x: float = 0.0
    y: float = 0.0
    tint: Color = GRAY

    @property
    def position(self) -> Vector2:
        """Top-left corner."""
        return Vector2(self.x, self.y)

    @position.setter
    def position(self, value: Vector2) -> None:
        self.x = value.x
        self.y = value.y