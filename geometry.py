import math
import random
from typing import Tuple

from pygame import Vector2

from settings import ASTEROID_VERTICES_MIN, ASTEROID_VERTICES_MAX, ASTEROID_JITTER


def distance(p1: Vector2, p2: Vector2) -> float:
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def circles_overlap(c1: Vector2, r1: float, c2: Vector2, r2: float) -> bool:
    """Two circles overlap when their centers are strictly closer than r1 + r2."""
    return distance(c1, c2) < r1 + r2


def random_range(rng: random.Random, low: float, high: float) -> float:
    return rng.random() * (high - low) + low


def heading(angle: float) -> Vector2:
    """Unit vector pointing along angle (radians, screen coordinates)."""
    return Vector2(math.cos(angle), math.sin(angle))


def wrap_position(pos: Vector2, width: float, height: float, margin: float = 0) -> None:
    """Wrap pos in place to the opposite edge once it leaves the screen by more than margin."""
    if pos.x < -margin:
        pos.x = width + margin
    elif pos.x > width + margin:
        pos.x = -margin
    if pos.y < -margin:
        pos.y = height + margin
    elif pos.y > height + margin:
        pos.y = -margin


def generate_silhouette(rng: random.Random, radius: float) -> Tuple[Vector2, ...]:
    """Jagged closed polygon around the origin.

    Vertices are evenly spaced in angle, each pushed in or out by a random
    factor so the outline looks like rock rather than a circle.
    """
    count = int(random_range(rng, ASTEROID_VERTICES_MIN, ASTEROID_VERTICES_MAX))
    points = []
    for i in range(count):
        angle = (i / count) * 2 * math.pi
        r = radius * rng.uniform(*ASTEROID_JITTER)
        points.append(Vector2(math.cos(angle) * r, math.sin(angle) * r))
    return tuple(points)


def transform_points(points, pos: Vector2, angle: float):
    """Rotate local points by angle and translate them to pos."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    transformed = []
    for point in points:
        x = point.x * cos_a - point.y * sin_a
        y = point.x * sin_a + point.y * cos_a
        transformed.append((x + pos.x, y + pos.y))
    return transformed
