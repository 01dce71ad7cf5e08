from __future__ import annotations

import random

from .constants import (
    GRID_ROWS, GRID_COLS,
    ZOMBIE_SPAWN_INTERVAL_START_MS, ZOMBIE_SPAWN_INTERVAL_MIN_MS, ZOMBIE_SPAWN_INTERVAL_DECAY,
    ZOMBIE_SPAWN_WEIGHTS, PASSIVE_SUN_INTERVAL_MS,
)
from .models import ZombieKind


class Spawner:
    """
    Decides when zombies and passive sun arrive, and what/where they are.

    Notes
    - Timers accumulate frame deltas (ms), so cadence is independent of frame rate.
    - Difficulty ramps by shrinking the zombie interval geometrically after
      every spawn, down to ``ZOMBIE_SPAWN_INTERVAL_MIN_MS``.
    - The world owns the entity lists; the spawner only answers questions.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.spawn_timer = 0.0
        self.spawn_interval: float = ZOMBIE_SPAWN_INTERVAL_START_MS
        self.passive_sun_timer = 0.0
        self.passive_sun_interval: float = PASSIVE_SUN_INTERVAL_MS
        self.spawned = 0

    def tick_zombies(self, dt: float) -> bool:
        """
        Advance the zombie timer.

        Returns
        -------
        bool
            True when a zombie is due this tick. The interval shrinks as a
            side effect.
        """
        self.spawn_timer += dt
        if self.spawn_timer < self.spawn_interval:
            return False
        self.spawn_timer = 0.0
        self.spawned += 1
        self.spawn_interval = max(
            ZOMBIE_SPAWN_INTERVAL_MIN_MS,
            self.spawn_interval * ZOMBIE_SPAWN_INTERVAL_DECAY,
        )
        return True

    def tick_passive_sun(self, dt: float) -> bool:
        """Advance the sky-sun timer; True when a sun should drop."""
        self.passive_sun_timer += dt
        if self.passive_sun_timer < self.passive_sun_interval:
            return False
        self.passive_sun_timer = 0.0
        return True

    def choose_zombie_kind(self) -> ZombieKind:
        """
        Weighted pick using cumulative bands over [0, 1).

        With the default weights that is 70% classic, 20% cone, 10% bucket.
        """
        r = self.rng.random()
        cumulative = 0.0
        for kind, weight in ZOMBIE_SPAWN_WEIGHTS:
            cumulative += weight
            if r < cumulative:
                return kind
        # Float rounding can leave the top band a hair short of 1.0
        return ZOMBIE_SPAWN_WEIGHTS[-1][0]

    def choose_row(self) -> int:
        return self.rng.randrange(GRID_ROWS)

    def choose_sun_column(self) -> int:
        return self.rng.randrange(GRID_COLS)
