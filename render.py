import logging
import random
from typing import Optional, Sequence, Tuple

import pygame
from pygame import Surface, Vector2

from entities import Ship
from geometry import transform_points
from settings import BACKGROUND, BLINK_HALF_PERIOD, DANGER, SHIP_THRUST_COLOR, VECTOR, WHITE
from simulation import GameStatus, Snapshot

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


def get_font(size: int) -> Optional[pygame.font.Font]:
    try:
        if not pygame.font.get_init():
            pygame.font.init()
        return pygame.font.SysFont('Arial', size)
    except pygame.error as exc:
        logger.warning("Fonts unavailable, HUD text disabled: %s", exc)
        return None


def faded_color(color: Color, fade: float) -> Color:
    """Blend color toward the black background by fade in [0, 1]."""
    fade = min(max(fade, 0.0), 1.0)
    return tuple(int(c * fade) for c in color)


def glow_color(color: Color) -> Color:
    return faded_color(color, 0.4)


def ship_visible(ship: Ship, tick: int) -> bool:
    """Invulnerable ships blink, hidden on every other BLINK_HALF_PERIOD window."""
    if not ship.is_invulnerable(tick):
        return True
    return (tick // BLINK_HALF_PERIOD) % 2 == 1


def ship_outline(radius: float) -> Sequence[Vector2]:
    return (
        Vector2(radius, 0),
        Vector2(-radius, radius * 0.7),
        Vector2(-radius * 0.6, 0),
        Vector2(-radius, -radius * 0.7),
    )


def draw_vector_path(surface: Surface, points, color: Color, closed: bool = True) -> None:
    if len(points) < 2:
        return
    pygame.draw.lines(surface, glow_color(color), closed, points, 4)
    pygame.draw.lines(surface, color, closed, points, 2)


def draw_ship(surface: Surface, ship: Ship, tick: int) -> None:
    if not ship.body.alive or not ship_visible(ship, tick):
        return
    body = ship.body
    draw_vector_path(surface, transform_points(ship_outline(body.radius), body.pos, body.angle), VECTOR)

    if ship.thrusting:
        flame = (Vector2(-body.radius * 0.6, 0), Vector2(-body.radius * 1.5 - random.random() * 10, 0))
        draw_vector_path(surface, transform_points(flame, body.pos, body.angle), SHIP_THRUST_COLOR, closed=False)


def draw_frame(surface: Surface, snapshot: Snapshot) -> None:
    surface.fill(BACKGROUND)

    if snapshot.ship:
        draw_ship(surface, snapshot.ship, snapshot.tick)

    for asteroid in snapshot.asteroids:
        body = asteroid.body
        draw_vector_path(surface, transform_points(asteroid.silhouette, body.pos, body.angle), VECTOR)

    for bullet in snapshot.bullets:
        pos = bullet.body.pos
        pygame.draw.circle(surface, VECTOR, (int(pos.x), int(pos.y)), int(bullet.body.radius))

    for particle in snapshot.particles:
        pos = particle.body.pos
        radius = max(1, int(particle.body.radius))
        pygame.draw.circle(surface, faded_color(particle.color, particle.fade), (int(pos.x), int(pos.y)), radius)

    if snapshot.status is GameStatus.MENU:
        draw_menu(surface)
    else:
        draw_ui(surface, snapshot)
        if snapshot.status is GameStatus.GAME_OVER:
            draw_game_over(surface, snapshot)


def draw_text(surface: Surface, text: str, size: int, color: Color, **position) -> None:
    font = get_font(size)
    if font is None:
        return
    rendered = font.render(text, True, color)
    surface.blit(rendered, rendered.get_rect(**position))


def draw_ship_icon(surface: Surface, pos: Vector2) -> None:
    points = [Vector2(0, -10), Vector2(7, 7), Vector2(-7, 7)]
    pygame.draw.polygon(surface, VECTOR, [(p.x + pos.x, p.y + pos.y) for p in points], 2)


def draw_ui(surface: Surface, snapshot: Snapshot) -> None:
    width = surface.get_width()
    draw_text(surface, f"SCORE: {snapshot.score}", 24, VECTOR, topleft=(10, 10))
    draw_text(surface, f"LEVEL {snapshot.level}", 16, VECTOR, topleft=(10, 40))

    for i in range(max(0, snapshot.lives)):
        draw_ship_icon(surface, Vector2(width - (i + 1) * 30, 20))

    if snapshot.show_level_banner and snapshot.status is GameStatus.PLAYING:
        draw_text(surface, f"LEVEL {snapshot.level}", 48, VECTOR,
                  center=(width / 2, surface.get_height() / 2))


def draw_menu(surface: Surface) -> None:
    center_x = surface.get_width() / 2
    y = surface.get_height() / 4
    draw_text(surface, "ASTEROIDS", 72, VECTOR, center=(center_x, y))
    draw_text(surface, "Press ENTER to start", 24, WHITE, center=(center_x, y + 80))

    y += 160
    for line in ("CONTROLS", "Up : THRUST", "Left/Right : ROTATE", "Space : FIRE"):
        draw_text(surface, line, 18, faded_color(VECTOR, 0.6), center=(center_x, y))
        y += 28


def draw_game_over(surface: Surface, snapshot: Snapshot) -> None:
    center_x = surface.get_width() / 2
    y = surface.get_height() / 3
    draw_text(surface, "GAME OVER", 48, DANGER, center=(center_x, y))
    draw_text(surface, f"FINAL SCORE: {snapshot.score}", 24, VECTOR, center=(center_x, y + 60))
    draw_text(surface, f"LEVEL REACHED: {snapshot.level}", 18, VECTOR, center=(center_x, y + 95))
    draw_text(surface, "Press ENTER to try again", 24, WHITE, center=(center_x, y + 150))
