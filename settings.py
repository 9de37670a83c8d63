"""Game constants. All durations are in simulation ticks at FPS."""
import math

# Screen
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
ASPECT_RATIO = DEFAULT_WIDTH / DEFAULT_HEIGHT
FPS = 60
CAPTION = "Asteroids"

# Ship
SHIP_SIZE = 20
SHIP_THRUST = 0.15
SHIP_TURN_SPEED = 0.08  # radians per tick
SHIP_FRICTION = 0.99
SHIP_HEADING_UP = -math.pi / 2

# Bullets
BULLET_SPEED = 7
BULLET_RADIUS = 2
BULLET_LIFETIME = 60
BULLET_COOLDOWN = 15

# Asteroids
ASTEROID_SPEED_BASE = 1.5
ASTEROID_VERTICES_MIN = 8
ASTEROID_VERTICES_MAX = 12
ASTEROID_JITTER = (0.8, 1.2)
SAFE_ZONE_HALF_SIZE = 200

# Particles
PARTICLE_LIFE = 30
THRUST_PARTICLE_LIFE = 10
ASTEROID_DEBRIS = 10
SHIP_DEBRIS = 30

# Session
STARTING_LIVES = 3
INVULNERABILITY_TIME = 180
RESPAWN_DELAY = 60
LEVEL_BANNER_TIME = 120
BLINK_HALF_PERIOD = 6  # ~100ms at 60 FPS

# Points
POINTS_LARGE = 20
POINTS_MEDIUM = 50
POINTS_SMALL = 100

# Colors
BACKGROUND = (0, 0, 0)
VECTOR = (0, 255, 0)
SHIP_THRUST_COLOR = (255, 153, 0)
DANGER = (255, 51, 51)
WHITE = (255, 255, 255)

# Audio
SAMPLE_RATE = 44100
MASTER_VOLUME = 0.3
