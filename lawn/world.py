"""
World: the lawn session that owns every live entity and runs the simulation.

NO UI DEPENDENCIES. The pygame front end (``main.py``/``ui.py``) drives it by
calling ``advance(dt)`` once per frame and forwarding player actions to
``select_plant_kind`` and ``act_at``; the renderer then reads the entity lists.

Usage:
    world = World()
    world.select_plant_kind(PlantKind.SUNFLOWER)
    world.place_plant_at(2, 0)
    while world.running:
        world.advance(16)
"""
from __future__ import annotations

import random
from typing import Iterable

from .constants import PLANT_STATS, SUN_START, SUN_VALUE, PASSIVE_SUN_Y
from .grid import grid_from_world, in_bounds, world_from_grid
from .logger import GameLogger
from .models import PlantKind, ZombieKind
from .pea import Pea, PeaSplash
from .plant import Plant
from .spawner import Spawner
from .sun import Sun
from .zombie import Zombie


class World:
    """
    The session aggregate.

    Entities never reach into the lists directly; they go through the spawn
    and query methods below. Each list keeps insertion order, which is also
    the tie-break order for collisions.
    """

    def __init__(self, rng: random.Random | None = None, logger: GameLogger | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.logger = logger
        self.spawner = Spawner(self.rng)

        self.plants: list[Plant] = []
        self.zombies: list[Zombie] = []
        self.peas: list[Pea] = []
        self.suns: list[Sun] = []
        self.splashes: list[PeaSplash] = []

        self.sun_points = SUN_START
        self.selected_kind: PlantKind | None = None
        self.running = True
        self.elapsed_ms = 0.0

    # =========================================================================
    # PLAYER ACTIONS
    # =========================================================================

    def select_plant_kind(self, kind: PlantKind | str | None) -> None:
        """
        Choose the seed used by the next placement.

        Accepts a PlantKind or its name ("sunflower", ...). Unknown names
        raise ValueError; None clears the selection.
        """
        self.selected_kind = None if kind is None else PlantKind(kind)

    def can_afford(self, kind: PlantKind) -> bool:
        return self.sun_points >= PLANT_STATS[kind].cost

    def place_plant_at(self, row: int, col: int) -> bool:
        """Plant the selected seed in (row, col). Returns False and changes nothing on failure."""
        if not self.running or not in_bounds(row, col):
            return False
        if self.plant_at(row, col) is not None:
            return False

        kind = self.selected_kind
        if kind is None:
            return False
        cost = PLANT_STATS[kind].cost
        if self.sun_points < cost:
            return False

        self.sun_points -= cost
        self.plants.append(Plant(kind, row, col))
        if self.logger:
            self.logger.log_plant(kind.value, row, col, self.sun_points)
        return True

    def collect_sun_at(self, x: float, y: float) -> bool:
        """Collect the first live sun under (x, y). Returns True if one was collected."""
        if not self.running:
            return False
        for sun in self.suns:
            if sun.contains_point(x, y):
                sun.mark_collected()
                self.sun_points += SUN_VALUE
                if self.logger:
                    self.logger.log_sun_collected(SUN_VALUE, self.sun_points)
                return True
        return False

    def act_at(self, x: float, y: float) -> bool:
        """
        Handle a click on the playfield: suns take priority over planting.

        Returns
        -------
        bool
            True if the click collected a sun or placed a plant.
        """
        if not self.running:
            return False

        if self.collect_sun_at(x, y):
            if self.logger:
                self.logger.log_click((x, y), True, "Sun collected")
            return True

        cell = grid_from_world(x, y)
        placed = cell is not None and self.place_plant_at(*cell)
        if self.logger:
            if placed:
                self.logger.log_click((x, y), True, f"Planted {self.selected_kind.value} at {cell}")
            else:
                self.logger.log_click((x, y), False, "No target hit")
        return placed

    # =========================================================================
    # SPAWN REQUESTS
    # =========================================================================

    def spawn_sun(self, x: float, y: float) -> None:
        self.suns.append(Sun(x, y))

    def spawn_pea(self, x: float, y: float, row: int) -> None:
        self.peas.append(Pea(x, y, row))

    def spawn_splash(self, x: float, y: float) -> None:
        self.splashes.append(PeaSplash(x, y))

    def spawn_zombie(self, kind: ZombieKind | None = None, row: int | None = None) -> Zombie:
        """Put a zombie at the right edge; random lane and weighted kind unless given."""
        if row is None:
            row = self.spawner.choose_row()
        if kind is None:
            kind = self.spawner.choose_zombie_kind()
        zombie = Zombie(kind, row)
        self.zombies.append(zombie)
        return zombie

    def trigger_game_over(self) -> None:
        if not self.running:
            return
        self.running = False
        if self.logger:
            self.logger.log_game_over(self.elapsed_ms)

    # =========================================================================
    # QUERIES (used by entities during their updates)
    # =========================================================================

    def plant_at(self, row: int, col: int) -> Plant | None:
        """Living plant in the cell, or None."""
        for plant in self.plants:
            if plant.row == row and plant.col == col and plant.alive:
                return plant
        return None

    def has_plant(self, plant: Plant) -> bool:
        return any(p is plant for p in self.plants)

    def has_zombie_in_row(self, row: int) -> bool:
        return any(z.row == row and z.alive for z in self.zombies)

    def find_plant_in_reach(self, row: int, x: float, reach: float) -> Plant | None:
        """First living plant in the lane whose center is strictly within ``reach`` of x."""
        for plant in self.plants:
            if plant.row != row or not plant.alive:
                continue
            if abs(x - world_from_grid(plant.col, plant.row).x) < reach:
                return plant
        return None

    def find_zombie_near(self, row: int, x: float, radius: float) -> Zombie | None:
        """First live, undefeated zombie in the lane strictly within ``radius`` of x."""
        for zombie in self.zombies:
            if zombie.row != row or not zombie.alive or zombie.defeated:
                continue
            if abs(x - zombie.x) < radius:
                return zombie
        return None

    @property
    def is_over(self) -> bool:
        return not self.running

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def advance(self, dt: float) -> None:
        """
        Step the simulation by dt milliseconds.

        Order: plants, zombies, peas, suns, splashes, then spawning. Every
        list is snapshotted before the first pass, so anything spawned during
        this call (a pea from a peashooter, a splash from a pea) first updates
        on the next call. Dead entities are pruned after their own pass.
        """
        if not self.running:
            return
        dt = max(0.0, dt)
        self.elapsed_ms += dt

        plants = list(self.plants)
        zombies = list(self.zombies)
        peas = list(self.peas)
        suns = list(self.suns)
        splashes = list(self.splashes)

        self._update_all(plants, dt, self)
        self.plants = [p for p in self.plants if p.alive]

        self._update_all(zombies, dt, self)
        self.zombies = [z for z in self.zombies if not z.expired]
        if not self.running:
            return

        self._update_all(peas, dt, self)
        self.peas = [p for p in self.peas if p.alive]

        self._update_all(suns, dt)
        self.suns = [s for s in self.suns if s.alive]

        self._update_all(splashes, dt)
        self.splashes = [s for s in self.splashes if s.alive]

        self._update_spawns(dt)

    def _update_all(self, entities: Iterable, dt: float, *args) -> None:
        for entity in entities:
            if not self.running:
                break
            entity.update(dt, *args)

    def _update_spawns(self, dt: float) -> None:
        if self.spawner.tick_zombies(dt):
            zombie = self.spawn_zombie()
            if self.logger:
                self.logger.log_zombie_spawn(zombie.kind.value, zombie.row, self.spawner.spawn_interval)

        if self.spawner.tick_passive_sun(dt):
            col = self.spawner.choose_sun_column()
            pos = world_from_grid(col, 0)
            self.spawn_sun(pos.x, PASSIVE_SUN_Y)
