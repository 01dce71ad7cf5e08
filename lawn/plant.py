from __future__ import annotations

"""Plant entity: sun production, pea shooting, and soaking up bites.

A plant occupies one lawn cell for as long as it has health. Sunflowers and
peashooters run their own timers and ask the world to spawn suns or peas;
wallnuts only absorb damage. No drawing happens here; ``ui.LawnRenderer``
reads the flash timers and health band.
"""

from typing import TYPE_CHECKING

from .constants import (
    PLANT_STATS,
    SUNFLOWER_SUN_INTERVAL_MS, SUNFLOWER_FLASH_MS, SUNFLOWER_SUN_OFFSET,
    PEASHOOTER_SHOT_INTERVAL_MS, PEASHOOTER_FLASH_MS, PEASHOOTER_PEA_OFFSET,
    HEALTH_BAND_DAMAGED, HEALTH_BAND_CRITICAL,
)
from .grid import world_from_grid
from .models import HealthBand, PlantKind, Point

if TYPE_CHECKING:
    from .world import World


class Plant:
    """
    A player-placed defender on the lawn.

    Lifecycle:
    - ALIVE: health > 0, runs its kind's timers every update.
    - DEAD:  health <= 0, inert; the world purges it on the next tick and the
             cell can be planted again.
    """

    def __init__(self, kind: PlantKind, row: int, col: int) -> None:
        stats = PLANT_STATS[kind]
        self.kind = kind
        self.row = row
        self.col = col
        self.max_health = stats.max_health
        self.health: float = stats.max_health
        self.sun_timer = 0.0
        self.shot_timer = 0.0
        self.sun_flash = 0.0
        self.shoot_flash = 0.0

    @property
    def alive(self) -> bool:
        return self.health > 0

    @property
    def position(self) -> Point:
        return world_from_grid(self.col, self.row)

    # ------------------------------- Update & State ----------------------------------

    def take_damage(self, amount: float) -> None:
        self.health -= amount

    def update(self, dt: float, world: World) -> None:
        if not self.alive:
            return

        if self.sun_flash > 0:
            self.sun_flash -= dt
        if self.shoot_flash > 0:
            self.shoot_flash -= dt

        if self.kind is PlantKind.SUNFLOWER:
            self._update_sunflower(dt, world)
        elif self.kind is PlantKind.PEASHOOTER:
            self._update_peashooter(dt, world)

    def _update_sunflower(self, dt: float, world: World) -> None:
        self.sun_timer += dt
        if self.sun_timer >= SUNFLOWER_SUN_INTERVAL_MS:
            self.sun_timer = 0.0
            pos = self.position
            dx, dy = SUNFLOWER_SUN_OFFSET
            world.spawn_sun(pos.x + dx, pos.y + dy)
            self.sun_flash = SUNFLOWER_FLASH_MS

    def _update_peashooter(self, dt: float, world: World) -> None:
        # Empty lane: hold fire and keep the timer where it is
        if not world.has_zombie_in_row(self.row):
            return
        self.shot_timer += dt
        if self.shot_timer >= PEASHOOTER_SHOT_INTERVAL_MS:
            self.shot_timer = 0.0
            pos = self.position
            dx, dy = PEASHOOTER_PEA_OFFSET
            world.spawn_pea(pos.x + dx, pos.y + dy, self.row)
            self.shoot_flash = PEASHOOTER_FLASH_MS

    # ------------------------------- Presentation ------------------------------------

    @property
    def health_ratio(self) -> float:
        return max(0.0, self.health / self.max_health)

    @property
    def health_band(self) -> HealthBand:
        """Wallnut artwork swaps at two thresholds; any plant can report it."""
        ratio = self.health_ratio
        if ratio > HEALTH_BAND_DAMAGED:
            return HealthBand.UNDAMAGED
        if ratio > HEALTH_BAND_CRITICAL:
            return HealthBand.DAMAGED
        return HealthBand.CRITICAL

    @property
    def is_flashing(self) -> bool:
        return self.sun_flash > 0 or self.shoot_flash > 0

    def __repr__(self) -> str:
        return f"Plant({self.kind.value}, row={self.row}, col={self.col}, health={self.health:.0f})"
