"""Entity records.

Every entity carries a ``Body`` with the shared kinematic fields. Integration
and collision code work on bodies; the kind-specific records only add the
fields their own rules need.
"""
import random
import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple

from pygame import Vector2

from geometry import generate_silhouette, heading, random_range
from settings import (
    ASTEROID_SPEED_BASE,
    BULLET_LIFETIME,
    BULLET_RADIUS,
    POINTS_LARGE,
    POINTS_MEDIUM,
    POINTS_SMALL,
    SHIP_HEADING_UP,
    SHIP_SIZE,
)


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Body:
    pos: Vector2
    velocity: Vector2 = field(default_factory=Vector2)
    angle: float = 0.0
    radius: float = 1.0
    alive: bool = True
    id: str = field(default_factory=new_id)

    def integrate(self) -> None:
        self.pos += self.velocity


class AsteroidSize(IntEnum):
    SMALL = 1
    MEDIUM = 2
    LARGE = 3

    @property
    def radius(self) -> int:
        return ASTEROID_RADII[self]

    @property
    def points(self) -> int:
        return ASTEROID_POINTS[self]

    def smaller(self) -> "AsteroidSize":
        if self is AsteroidSize.SMALL:
            raise ValueError("small asteroids do not split")
        return AsteroidSize(self - 1)


ASTEROID_RADII = {
    AsteroidSize.LARGE: 40,
    AsteroidSize.MEDIUM: 20,
    AsteroidSize.SMALL: 10,
}

ASTEROID_POINTS = {
    AsteroidSize.LARGE: POINTS_LARGE,
    AsteroidSize.MEDIUM: POINTS_MEDIUM,
    AsteroidSize.SMALL: POINTS_SMALL,
}


@dataclass
class Ship:
    body: Body
    thrusting: bool = False
    invulnerable_until: int = -1
    last_shot_at: float = float("-inf")

    @classmethod
    def spawn(cls, pos: Vector2, invulnerable_until: int = -1) -> "Ship":
        body = Body(Vector2(pos), Vector2(0, 0), SHIP_HEADING_UP, SHIP_SIZE)
        return cls(body, invulnerable_until=invulnerable_until)

    def is_invulnerable(self, now: int) -> bool:
        return now <= self.invulnerable_until


@dataclass
class Bullet:
    body: Body
    time_left: int = BULLET_LIFETIME

    @classmethod
    def fire(cls, pos: Vector2, angle: float, speed: float) -> "Bullet":
        return cls(Body(Vector2(pos), heading(angle) * speed, angle, BULLET_RADIUS))


@dataclass
class Asteroid:
    body: Body
    size: AsteroidSize
    silhouette: Tuple[Vector2, ...]

    @classmethod
    def create(cls, rng: random.Random, pos: Vector2, size: AsteroidSize) -> "Asteroid":
        radius = size.radius
        # Smaller asteroids drift faster
        velocity = Vector2(
            random_range(rng, -ASTEROID_SPEED_BASE, ASTEROID_SPEED_BASE) * (4 - size),
            random_range(rng, -ASTEROID_SPEED_BASE, ASTEROID_SPEED_BASE) * (4 - size),
        )
        return cls(Body(Vector2(pos), velocity, 0.0, radius), size, generate_silhouette(rng, radius))


@dataclass
class Particle:
    body: Body
    life: int
    max_life: int
    color: Tuple[int, int, int]

    @property
    def fade(self) -> float:
        return max(0.0, self.life / self.max_life)
