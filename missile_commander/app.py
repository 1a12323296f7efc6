"""Window, input handling and rendering for the game."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .geometry import RAYWHITE, RED, Vector2  # noqa: E402
from .world import World  # noqa: E402

TITLE = "Missile Commander"
MISSILE_HEAD_RADIUS = 5.0
FPS_COLOR = (0, 158, 47)


def draw(surface: pygame.Surface, world: World) -> None:
    """Render missiles, buildings and explosions onto ``surface``."""
    surface.fill(RAYWHITE.as_tuple())
    for missile in world.missiles:
        pygame.draw.line(
            surface, missile.tint.as_tuple(), missile.start_pos.as_tuple(), missile.end_pos.as_tuple()
        )
        pygame.draw.circle(surface, RED.as_tuple(), missile.end_pos.as_tuple(), MISSILE_HEAD_RADIUS)
    for building in world.buildings:
        pygame.draw.rect(
            surface,
            building.tint.as_tuple(),
            (building.x, building.y, building.width, building.height),
        )
    for explosion in world.explosions:
        pygame.draw.circle(
            surface, explosion.tint.as_tuple(), explosion.position.as_tuple(), explosion.radius
        )


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="missile-commander", description="Defend the city.")
    parser.add_argument("--width", type=int, default=800, help="window width in pixels")
    parser.add_argument("--height", type=int, default=450, help="window height in pixels")
    parser.add_argument("--fps", type=int, default=60, help="target frames per second")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game until the window is closed or every building is destroyed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        font = pygame.font.Font(None, 20)
        world = World(args.width, args.height)

        running = True
        while running:
            click = None
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    click = Vector2(float(event.pos[0]), float(event.pos[1]))
            if not running or not world.step(click):
                break

            draw(screen, world)
            fps_text = font.render(f"{clock.get_fps():.0f} FPS", True, FPS_COLOR)
            screen.blit(fps_text, (0, 0))
            pygame.display.flip()
            clock.tick(args.fps)
    finally:
        pygame.quit()
    return 0