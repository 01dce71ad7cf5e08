from __future__ import annotations

"""Zombie entity: walking a lane, feeding on plants, and being defeated.

A zombie enters from the right edge of its row and walks left. When a living
plant in its row is within half a cell it stops and bites it until the plant
dies, then walks on. Reaching the left edge ends the game. Health at or below
zero defeats it for good; the corpse lingers briefly so the renderer can show
it, then the world purges it.
"""

from typing import TYPE_CHECKING

from .constants import (
    ZOMBIE_STATS, ZOMBIE_BITE_DPS, ZOMBIE_REACH, ZOMBIE_ENTRY_X, ZOMBIE_Y_OFFSET,
    ZOMBIE_CORPSE_MS,
)
from .grid import world_from_grid
from .models import ZombieKind, ZombieState

if TYPE_CHECKING:
    from .plant import Plant
    from .world import World


class Zombie:
    """
    One hostile walker in a single lane.

    Lifecycle:
    - APPROACHING: moves left at ``speed`` px/s, looks for a plant in reach.
    - FEEDING:     stands still, bites its target at ``ZOMBIE_BITE_DPS``.
    - DEFEATED:    terminal; no movement or damage, corpse timer only.
    """

    def __init__(self, kind: ZombieKind, row: int) -> None:
        stats = ZOMBIE_STATS[kind]
        self.kind = kind
        self.row = row
        self.max_health = stats.max_health
        self.health: float = stats.max_health
        self.speed = stats.speed
        self.x: float = ZOMBIE_ENTRY_X
        self.y: float = world_from_grid(0, row).y + ZOMBIE_Y_OFFSET
        self.state = ZombieState.APPROACHING
        self.target: Plant | None = None
        self.corpse_ms = 0.0

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def defeated(self) -> bool:
        return self.state is ZombieState.DEFEATED

    @property
    def expired(self) -> bool:
        """True once the corpse has lingered long enough to be removed."""
        return self.defeated and self.corpse_ms >= ZOMBIE_CORPSE_MS

    # ------------------------------- Update & State ----------------------------------

    def take_damage(self, amount: float) -> None:
        self.health -= amount
        if self.health <= 0:
            self.state = ZombieState.DEFEATED
            self.target = None

    def update(self, dt: float, world: World) -> None:
        if self.defeated:
            self.corpse_ms += dt
            return

        if self.state is not ZombieState.FEEDING:
            plant = world.find_plant_in_reach(self.row, self.x, ZOMBIE_REACH)
            if plant is not None:
                self.state = ZombieState.FEEDING
                self.target = plant

        if self.state is ZombieState.FEEDING:
            if self.target is None or not self.target.alive or not world.has_plant(self.target):
                self.state = ZombieState.APPROACHING
                self.target = None
            else:
                self.target.take_damage(ZOMBIE_BITE_DPS * (dt / 1000))

        # Falls through on the same tick the target died
        if self.state is ZombieState.APPROACHING:
            self.x -= self.speed * (dt / 1000)
            if self.x < 0:
                world.trigger_game_over()

    # ------------------------------- Presentation ------------------------------------

    @property
    def health_ratio(self) -> float:
        return max(0.0, self.health / self.max_health)

    @property
    def corpse_fade(self) -> float:
        if not self.defeated:
            return 1.0
        return max(0.0, 1.0 - self.corpse_ms / ZOMBIE_CORPSE_MS)

    def __repr__(self) -> str:
        return f"Zombie({self.kind.value}, row={self.row}, x={self.x:.1f}, {self.state.value})"
