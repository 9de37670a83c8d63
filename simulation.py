"""Per-tick simulation of ship, bullets, asteroids and particles.

``Simulation`` is the only code that mutates game state. Renderers and the
audio player read a ``Snapshot`` or the returned ``GameEvent`` list and never
write back.

The clock is the tick counter ``GameSession.tick``. Fire cooldown, bullet
lifetime, invulnerability and the respawn delay are all measured in ticks so
they stay in step regardless of the host frame rate.
"""
import logging
import math
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from pygame import Vector2

from controls import Controls
from entities import Asteroid, AsteroidSize, Body, Bullet, Particle, Ship
from geometry import circles_overlap, heading, wrap_position
from settings import (
    ASTEROID_DEBRIS,
    BULLET_COOLDOWN,
    BULLET_SPEED,
    DANGER,
    INVULNERABILITY_TIME,
    LEVEL_BANNER_TIME,
    PARTICLE_LIFE,
    RESPAWN_DELAY,
    SAFE_ZONE_HALF_SIZE,
    SHIP_DEBRIS,
    SHIP_FRICTION,
    SHIP_THRUST,
    SHIP_THRUST_COLOR,
    SHIP_TURN_SPEED,
    STARTING_LIVES,
    THRUST_PARTICLE_LIFE,
    VECTOR,
)

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class EventKind(Enum):
    SHOT = auto()
    THRUST = auto()
    EXPLOSION = auto()
    ASTEROID_DESTROYED = auto()
    SHIP_DESTROYED = auto()
    SHIP_RESPAWNED = auto()
    LEVEL_STARTED = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    position: Optional[Tuple[float, float]] = None
    size: Optional[str] = None
    points: int = 0


@dataclass
class GameSession:
    width: float
    height: float
    score: int = 0
    lives: int = STARTING_LIVES
    level: int = 1
    status: GameStatus = GameStatus.MENU
    tick: int = 0
    respawn_at: Optional[int] = None
    level_banner_until: int = -1

    @property
    def center(self) -> Vector2:
        return Vector2(self.width / 2, self.height / 2)


@dataclass
class World:
    session: GameSession
    ship: Optional[Ship] = None
    bullets: List[Bullet] = field(default_factory=list)
    asteroids: List[Asteroid] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame for the renderer and the HUD."""
    width: float
    height: float
    tick: int
    score: int
    lives: int
    level: int
    status: GameStatus
    show_level_banner: bool
    ship: Optional[Ship]
    bullets: Tuple[Bullet, ...]
    asteroids: Tuple[Asteroid, ...]
    particles: Tuple[Particle, ...]


class Simulation:
    def __init__(self, width: float, height: float, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.world = World(GameSession(width, height))

    @property
    def session(self) -> GameSession:
        return self.world.session

    # --- session control -------------------------------------------------

    def start_or_restart(self) -> None:
        """Reset score, lives and level and begin level 1."""
        width, height = self.session.width, self.session.height
        session = GameSession(width, height, status=GameStatus.PLAYING)
        self.world = World(session, ship=Ship.spawn(session.center))
        self.spawn_asteroids(session.level)
        session.level_banner_until = session.tick + LEVEL_BANNER_TIME
        logger.info("Game started on %dx%d screen", width, height)

    def resize(self, width: float, height: float) -> None:
        self.session.width = width
        self.session.height = height
        logger.info("Screen resized to %dx%d", width, height)

    def cancel_respawn(self) -> None:
        self.session.respawn_at = None

    def snapshot(self) -> Snapshot:
        session = self.session
        return Snapshot(
            width=session.width,
            height=session.height,
            tick=session.tick,
            score=session.score,
            lives=session.lives,
            level=session.level,
            status=session.status,
            show_level_banner=session.tick < session.level_banner_until,
            ship=self.world.ship,
            bullets=tuple(self.world.bullets),
            asteroids=tuple(self.world.asteroids),
            particles=tuple(self.world.particles),
        )

    # --- spawning --------------------------------------------------------

    def safe_zone(self) -> Tuple[float, float]:
        """Half extents of the spawn-free square around the screen center.

        Screens too small to leave any room outside the full square get one
        half the screen size instead.
        """
        session = self.session
        if session.width / 2 > SAFE_ZONE_HALF_SIZE or session.height / 2 > SAFE_ZONE_HALF_SIZE:
            return SAFE_ZONE_HALF_SIZE, SAFE_ZONE_HALF_SIZE
        return session.width / 4, session.height / 4

    def spawn_asteroids(self, level: int) -> None:
        """Add 2 + level large asteroids outside the square around the screen center."""
        session = self.session
        center = session.center
        half_w, half_h = self.safe_zone()
        for _ in range(2 + level):
            while True:
                x = self.rng.random() * session.width
                y = self.rng.random() * session.height
                if not (abs(x - center.x) < half_w and abs(y - center.y) < half_h):
                    break
            self.world.asteroids.append(Asteroid.create(self.rng, Vector2(x, y), AsteroidSize.LARGE))

    def create_particles(self, pos: Vector2, color, count: int) -> None:
        for _ in range(count):
            angle = self.rng.random() * math.pi * 2
            speed = self.rng.random() * 3
            body = Body(Vector2(pos), heading(angle) * speed, 0.0, 1)
            self.world.particles.append(Particle(body, PARTICLE_LIFE, PARTICLE_LIFE, color))

    def respawn_ship(self, events: List[GameEvent]) -> None:
        session = self.session
        if session.lives > 0:
            now = session.tick
            self.world.ship = Ship.spawn(session.center, invulnerable_until=now + INVULNERABILITY_TIME)
            events.append(GameEvent(EventKind.SHIP_RESPAWNED, (session.center.x, session.center.y)))
            logger.debug("Ship respawned at tick %d, %d lives left", now, session.lives)
        else:
            self.game_over(events)

    def game_over(self, events: List[GameEvent]) -> None:
        session = self.session
        session.status = GameStatus.GAME_OVER
        session.respawn_at = None
        events.append(GameEvent(EventKind.GAME_OVER, points=session.score))
        logger.info("Game over: score %d, level %d", session.score, session.level)

    # --- tick ------------------------------------------------------------

    def advance(self, controls: Controls) -> List[GameEvent]:
        """Run one tick and return the events it produced."""
        session = self.session
        if session.status is not GameStatus.PLAYING:
            return []

        events: List[GameEvent] = []
        now = session.tick

        if session.respawn_at is not None and now >= session.respawn_at:
            session.respawn_at = None
            self.respawn_ship(events)
            if session.status is not GameStatus.PLAYING:
                return events

        ship = self.world.ship
        if ship and ship.body.alive:
            self.update_ship(ship, controls, events)
            if controls.fire and now - ship.last_shot_at > BULLET_COOLDOWN:
                self.fire(ship, events)

        self.update_bullets()
        self.update_asteroids()
        self.update_particles()

        self.handle_bullet_hits(events)
        self.handle_ship_hits(events)
        self.collect_dead()

        if not self.world.asteroids:
            session.level += 1
            self.spawn_asteroids(session.level)
            session.level_banner_until = now + LEVEL_BANNER_TIME
            events.append(GameEvent(EventKind.LEVEL_STARTED, points=session.level))
            logger.info("Level %d started", session.level)

        session.tick += 1
        return events

    def update_ship(self, ship: Ship, controls: Controls, events: List[GameEvent]) -> None:
        body = ship.body
        if controls.left:
            body.angle -= SHIP_TURN_SPEED
        if controls.right:
            body.angle += SHIP_TURN_SPEED

        ship.thrusting = controls.thrust
        if ship.thrusting:
            direction = heading(body.angle)
            body.velocity += direction * SHIP_THRUST
            if self.rng.random() > 0.5:
                jitter = Vector2(self.rng.random() - 0.5, self.rng.random() - 0.5)
                exhaust = Body(body.pos - direction * body.radius, -direction * 2 + jitter, 0.0, 1)
                self.world.particles.append(
                    Particle(exhaust, THRUST_PARTICLE_LIFE, THRUST_PARTICLE_LIFE, SHIP_THRUST_COLOR))
            if self.rng.random() > 0.8:
                events.append(GameEvent(EventKind.THRUST))

        body.integrate()
        body.velocity *= SHIP_FRICTION
        wrap_position(body.pos, self.session.width, self.session.height)

    def fire(self, ship: Ship, events: List[GameEvent]) -> None:
        body = ship.body
        nose = body.pos + heading(body.angle) * body.radius
        self.world.bullets.append(Bullet.fire(nose, body.angle, BULLET_SPEED))
        ship.last_shot_at = self.session.tick
        events.append(GameEvent(EventKind.SHOT, (nose.x, nose.y)))

    def update_bullets(self) -> None:
        width, height = self.session.width, self.session.height
        for bullet in self.world.bullets:
            bullet.body.integrate()
            bullet.time_left -= 1
            if bullet.time_left <= 0:
                bullet.body.alive = False
            wrap_position(bullet.body.pos, width, height)

    def update_asteroids(self) -> None:
        width, height = self.session.width, self.session.height
        for asteroid in self.world.asteroids:
            asteroid.body.integrate()
            wrap_position(asteroid.body.pos, width, height, asteroid.body.radius)

    def update_particles(self) -> None:
        for particle in self.world.particles:
            particle.body.integrate()
            particle.life -= 1
            if particle.life <= 0:
                particle.body.alive = False

    def handle_bullet_hits(self, events: List[GameEvent]) -> None:
        fragments: List[Asteroid] = []
        for bullet in self.world.bullets:
            if not bullet.body.alive:
                continue
            for asteroid in self.world.asteroids:
                if not asteroid.body.alive:
                    continue
                if circles_overlap(bullet.body.pos, bullet.body.radius, asteroid.body.pos, asteroid.body.radius):
                    bullet.body.alive = False
                    asteroid.body.alive = False
                    fragments.extend(self.destroy_asteroid(asteroid, events))
                    break
        self.world.asteroids.extend(fragments)

    def destroy_asteroid(self, asteroid: Asteroid, events: List[GameEvent]) -> List[Asteroid]:
        pos = asteroid.body.pos
        points = asteroid.size.points
        self.session.score += points
        events.append(GameEvent(EventKind.EXPLOSION, (pos.x, pos.y), "small"))
        events.append(GameEvent(EventKind.ASTEROID_DESTROYED, (pos.x, pos.y), asteroid.size.name.lower(), points))
        self.create_particles(pos, VECTOR, ASTEROID_DEBRIS)

        if asteroid.size is AsteroidSize.SMALL:
            return []
        child_size = asteroid.size.smaller()
        return [Asteroid.create(self.rng, pos, child_size) for _ in range(2)]

    def handle_ship_hits(self, events: List[GameEvent]) -> None:
        ship = self.world.ship
        session = self.session
        if not ship or not ship.body.alive or ship.is_invulnerable(session.tick):
            return

        for asteroid in self.world.asteroids:
            if not asteroid.body.alive:
                continue
            if circles_overlap(ship.body.pos, ship.body.radius, asteroid.body.pos, asteroid.body.radius):
                ship.body.alive = False
                session.lives = max(0, session.lives - 1)
                pos = ship.body.pos
                self.create_particles(pos, DANGER, SHIP_DEBRIS)
                events.append(GameEvent(EventKind.EXPLOSION, (pos.x, pos.y), "large"))
                events.append(GameEvent(EventKind.SHIP_DESTROYED, (pos.x, pos.y)))
                logger.debug("Ship destroyed at tick %d, %d lives left", session.tick, session.lives)

                if session.lives > 0:
                    session.respawn_at = session.tick + RESPAWN_DELAY
                else:
                    self.game_over(events)
                break

    def collect_dead(self) -> None:
        world = self.world
        world.bullets = [b for b in world.bullets if b.body.alive]
        world.asteroids = [a for a in world.asteroids if a.body.alive]
        world.particles = [p for p in world.particles if p.body.alive]
        if world.ship and not world.ship.body.alive:
            world.ship = None
