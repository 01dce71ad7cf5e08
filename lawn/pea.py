from __future__ import annotations

"""Peas fired by peashooters and the splash left where they land."""

from typing import TYPE_CHECKING

from .constants import (
    PEA_SPEED, PEA_DAMAGE, PEA_STRIKE_RADIUS, PEA_EXIT_X,
    SPLASH_LIFETIME_MS, SPLASH_OFFSET,
)

if TYPE_CHECKING:
    from .world import World


class Pea:
    """
    A projectile travelling right along one lane.

    Dies when it leaves the playfield or when it strikes the first live zombie
    in its row within ``PEA_STRIKE_RADIUS``. A pea strikes at most once.
    """

    def __init__(self, x: float, y: float, row: int) -> None:
        self.x = x
        self.y = y
        self.row = row
        self.speed = PEA_SPEED
        self.alive = True

    def update(self, dt: float, world: World) -> None:
        if not self.alive:
            return

        self.x += self.speed * (dt / 1000)
        # Leaving the field still allows one last strike on this tick
        if self.x > PEA_EXIT_X:
            self.alive = False

        zombie = world.find_zombie_near(self.row, self.x, PEA_STRIKE_RADIUS)
        if zombie is not None:
            self.alive = False
            zombie.take_damage(PEA_DAMAGE)
            dx, dy = SPLASH_OFFSET
            world.spawn_splash(self.x + dx, self.y + dy)

    def __repr__(self) -> str:
        return f"Pea(row={self.row}, x={self.x:.1f}, alive={self.alive})"


class PeaSplash:
    """Short-lived impact mark. Purely visual."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.life: float = SPLASH_LIFETIME_MS

    @property
    def alive(self) -> bool:
        return self.life > 0

    @property
    def fade(self) -> float:
        return max(self.life / SPLASH_LIFETIME_MS, 0.0)

    def update(self, dt: float) -> None:
        self.life -= dt
