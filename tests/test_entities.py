import math
import random

import pytest
from pygame import Vector2

from entities import Asteroid, AsteroidSize, Body, Bullet, Particle, Ship
from settings import ASTEROID_SPEED_BASE, BULLET_LIFETIME, SHIP_SIZE


class TestAsteroidSize:
    def test_radii(self):
        assert AsteroidSize.LARGE.radius == 40
        assert AsteroidSize.MEDIUM.radius == 20
        assert AsteroidSize.SMALL.radius == 10

    def test_points(self):
        assert AsteroidSize.LARGE.points == 20
        assert AsteroidSize.MEDIUM.points == 50
        assert AsteroidSize.SMALL.points == 100

    def test_split_order(self):
        assert AsteroidSize.LARGE.smaller() is AsteroidSize.MEDIUM
        assert AsteroidSize.MEDIUM.smaller() is AsteroidSize.SMALL

    def test_small_does_not_split(self):
        with pytest.raises(ValueError):
            AsteroidSize.SMALL.smaller()


class TestAsteroid:
    @pytest.mark.parametrize("size", list(AsteroidSize))
    def test_speed_scales_with_size(self, size):
        rng = random.Random(42)
        limit = ASTEROID_SPEED_BASE * (4 - size)
        for _ in range(50):
            asteroid = Asteroid.create(rng, Vector2(10, 20), size)
            assert abs(asteroid.body.velocity.x) <= limit
            assert abs(asteroid.body.velocity.y) <= limit

    def test_create_copies_position_and_builds_silhouette(self):
        pos = Vector2(10, 20)
        asteroid = Asteroid.create(random.Random(1), pos, AsteroidSize.MEDIUM)
        pos.x = 999
        assert asteroid.body.pos == Vector2(10, 20)
        assert asteroid.body.radius == 20
        assert asteroid.body.angle == 0
        assert 8 <= len(asteroid.silhouette) <= 11
        assert isinstance(asteroid.silhouette, tuple)


class TestShip:
    def test_spawn_faces_up_at_rest(self):
        ship = Ship.spawn(Vector2(400, 300))
        assert ship.body.pos == Vector2(400, 300)
        assert ship.body.velocity == Vector2(0, 0)
        assert ship.body.angle == pytest.approx(-math.pi / 2)
        assert ship.body.radius == SHIP_SIZE
        assert ship.last_shot_at == float("-inf")

    def test_invulnerable_up_to_and_including_deadline(self):
        ship = Ship.spawn(Vector2(0, 0), invulnerable_until=10)
        assert ship.is_invulnerable(10)
        assert not ship.is_invulnerable(11)

    def test_fresh_ship_is_vulnerable(self):
        assert not Ship.spawn(Vector2(0, 0)).is_invulnerable(0)


def test_bullet_flies_along_heading():
    bullet = Bullet.fire(Vector2(5, 5), 0.0, 7)
    assert bullet.body.velocity.x == pytest.approx(7)
    assert bullet.body.velocity.y == pytest.approx(0)
    assert bullet.time_left == BULLET_LIFETIME


def test_bodies_get_unique_ids():
    ids = {Body(Vector2(0, 0)).id for _ in range(100)}
    assert len(ids) == 100


def test_body_integrate_adds_velocity():
    body = Body(Vector2(1, 1), Vector2(2, -3))
    body.integrate()
    assert body.pos == Vector2(3, -2)


def test_particle_fade():
    particle = Particle(Body(Vector2(0, 0)), life=15, max_life=30, color=(255, 0, 0))
    assert particle.fade == pytest.approx(0.5)
    particle.life = -1
    assert particle.fade == 0.0
