import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import random

import pytest

from simulation import Simulation


@pytest.fixture
def rng():
    """Seeded random source so spawns and particles repeat between runs."""
    return random.Random(1234)


@pytest.fixture
def sim(rng):
    """An 800x600 simulation with a game in progress."""
    simulation = Simulation(800, 600, rng)
    simulation.start_or_restart()
    return simulation
