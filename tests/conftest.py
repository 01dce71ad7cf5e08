"""Shared fixtures for the simulation tests. NO UI DEPENDENCIES."""
import random

import pytest

from lawn.world import World


@pytest.fixture
def world():
    """A fresh world with a seeded RNG and no log file."""
    return World(rng=random.Random(1234))


@pytest.fixture
def quiet_world(world):
    """World whose timed zombie spawns and sky suns never come due."""
    world.spawner.spawn_interval = float("inf")
    world.spawner.passive_sun_interval = float("inf")
    return world
