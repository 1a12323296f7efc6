"""Game state and the per-frame rules: movement, explosions, collisions and spawning."""

from __future__ import annotations

from typing import Callable, Optional

from . import rng
from .entities import Explosion, Missile, Rectangle2D
from .geometry import (
    GRAY,
    GREEN,
    LIGHTGRAY,
    RED,
    Color,
    Vector2,
    clamp,
    move_towards,
    point_in_circle,
    point_in_rect,
    vectors_equal,
)

RandomSource = Callable[[int, int], int]

MISSILE_MIN_DISTANCE = 0.0
MISSILE_MAX_DISTANCE = 100.0

EXPLOSION_START_RADIUS = 5.0
EXPLOSION_MIN_RADIUS = 5.0
EXPLOSION_MAX_RADIUS = 20.0

PLAYER_MISSILE_SPEED = 1.0
PLAYER_LAUNCH_OFFSET = 50.0
ENEMY_MISSILE_SPEED = 0.01

# At 60 frames per second this is two seconds between enemy launches.
ENEMY_SPAWN_FRAMES = 120

BIG_BUILDING_SIZE = 80.0
BIG_BUILDING_COUNT = 3
BIG_INNER_PADDING = 100.0
BIG_OUTER_PADDING = 20.0

SMALL_BUILDING_SIZE = 40.0
SMALL_BUILDING_COUNT = 3
SMALL_INNER_PADDING = 0.0
SMALL_OUTER_PADDING = 145.0
SMALL_BUILDING_SPAN = 240.0
SMALL_RIGHT_SHIFT = 3.35


def update_missiles(missiles: list[Missile]) -> None:
    """Advance every missile towards its target and accelerate it."""
    for missile in missiles:
        missile.end_pos = move_towards(missile.end_pos, missile.target_pos, missile.distance)
        missile.update_distance(missile.speed)
        missile.distance = clamp(missile.distance, MISSILE_MIN_DISTANCE, MISSILE_MAX_DISTANCE)


def update_explosions(explosions: list[Explosion]) -> None:
    """Grow explosions up to the maximum radius, shrink them, and drop the spent ones."""
    survivors = []
    for explosion in explosions:
        if explosion.radius >= EXPLOSION_MAX_RADIUS:
            explosion.grow = -1.0
        if explosion.radius < EXPLOSION_MIN_RADIUS:
            continue
        explosion.radius += explosion.grow
        survivors.append(explosion)
    explosions[:] = survivors


def make_player_missile(screen_height: float, target: Vector2) -> Missile:
    """A green missile launched from the fixed player battery towards ``target``."""
    start = Vector2(PLAYER_LAUNCH_OFFSET, float(screen_height) - PLAYER_LAUNCH_OFFSET)
    return Missile(
        start_pos=start,
        end_pos=start,
        tint=GREEN,
        speed=PLAYER_MISSILE_SPEED,
        target_pos=target,
    )


def make_enemy_missile(
    screen_width: int, screen_height: float, rand: Optional[RandomSource] = None
) -> Missile:
    """A red missile falling from a random point on the top edge to a random point on the ground."""
    rand = rand or rng.get
    start = Vector2(float(rand(0, screen_width)), 0.0)
    target = Vector2(float(rand(0, screen_width)), float(screen_height))
    return Missile(
        start_pos=start,
        end_pos=start,
        tint=RED,
        speed=ENEMY_MISSILE_SPEED,
        target_pos=target,
    )


def place_buildings(
    count: int,
    building_width: float,
    building_height: float,
    color: Color,
    width: float,
    inner_padding: float,
    outer_padding: float,
    screen_height: float,
) -> list[Rectangle2D]:
    """Lay ``count`` buildings side by side on the ground across ``width``."""
    gap = (width - building_width) / count
    return [
        Rectangle2D(
            width=building_width,
            height=building_height,
            x=(gap + inner_padding) * i + outer_padding,
            y=float(screen_height) - building_height,
            tint=color,
        )
        for i in range(int(count))
    ]


def setup_big_buildings(screen_width: float, screen_height: float) -> list[Rectangle2D]:
    """The row of large buildings spread over the whole screen width."""
    return place_buildings(
        BIG_BUILDING_COUNT,
        BIG_BUILDING_SIZE,
        BIG_BUILDING_SIZE,
        GRAY,
        float(screen_width),
        BIG_INNER_PADDING,
        BIG_OUTER_PADDING,
        screen_height,
    )


def setup_small_buildings(screen_height: float) -> list[Rectangle2D]:
    """Two groups of small buildings placed in the gaps between the big ones."""
    left = place_buildings(
        SMALL_BUILDING_COUNT,
        SMALL_BUILDING_SIZE,
        SMALL_BUILDING_SIZE,
        LIGHTGRAY,
        SMALL_BUILDING_SPAN,
        SMALL_INNER_PADDING,
        SMALL_OUTER_PADDING,
        screen_height,
    )
    right = place_buildings(
        SMALL_BUILDING_COUNT,
        SMALL_BUILDING_SIZE,
        SMALL_BUILDING_SIZE,
        LIGHTGRAY,
        SMALL_BUILDING_SPAN,
        SMALL_INNER_PADDING,
        SMALL_OUTER_PADDING * SMALL_RIGHT_SHIFT,
        screen_height,
    )
    return left + right


def tallest_building(buildings: list[Rectangle2D]) -> Optional[float]:
    """Height of the tallest building, or ``None`` when there are none."""
    if not buildings:
        return None
    return max(0.0, *(building.height for building in buildings))


def apply_collisions(
    missiles: list[Missile],
    buildings: list[Rectangle2D],
    explosions: list[Explosion],
    threshold: float,
) -> None:
    """Resolve arrivals and hits, removing missiles and buildings as needed.

    A player missile that reaches its target leaves an explosion behind.
    Below ``threshold`` enemy missiles destroy the first building they touch;
    above it any missile touching an explosion is destroyed.
    """
    if not missiles:
        return
    survivors = []
    for missile in missiles:
        end = missile.end_pos
        if vectors_equal(end, missile.target_pos):
            if missile.tint == GREEN:
                explosions.insert(0, Explosion(position=end, radius=EXPLOSION_START_RADIUS))
            continue
        if threshold < end.y:
            if missile.tint == RED:
                hit = next(
                    (i for i, building in enumerate(buildings) if point_in_rect(end, building)),
                    None,
                )
                if hit is not None:
                    del buildings[hit]
                    continue
        elif any(point_in_circle(end, e.position, e.radius) for e in explosions):
            continue
        survivors.append(missile)
    missiles[:] = survivors


class World:
    """Everything on screen, advanced one frame at a time."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        rand: Optional[RandomSource] = None,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self._rand = rand or rng.get
        self.missiles: list[Missile] = []
        self.explosions: list[Explosion] = []
        self.buildings: list[Rectangle2D] = setup_big_buildings(screen_width, screen_height)
        tallest = tallest_building(self.buildings)
        if tallest is None:
            raise RuntimeError("no buildings were placed")
        # Missiles above this height cannot touch any building.
        self.threshold = float(screen_height) - tallest
        self.buildings.extend(setup_small_buildings(screen_height))
        self.frame_counter = 0

    @property
    def over(self) -> bool:
        """True once every building has been destroyed."""
        return not self.buildings

    def step(self, click_position: Optional[Vector2] = None) -> bool:
        """Advance one frame; return False when the game has ended."""
        if self.over:
            return False
        apply_collisions(self.missiles, self.buildings, self.explosions, self.threshold)

        if click_position is not None:
            self.missiles.insert(0, make_player_missile(self.screen_height, click_position))

        self.frame_counter += 1
        if self.frame_counter == ENEMY_SPAWN_FRAMES:
            self.missiles.insert(
                0, make_enemy_missile(self.screen_width, self.screen_height, self._rand)
            )
            self.frame_counter = 0

        update_missiles(self.missiles)
        update_explosions(self.explosions)
        return True