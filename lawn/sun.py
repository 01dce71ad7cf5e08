from __future__ import annotations

"""Sun pickup that pays out sun points on click.

Sits where it was dropped until it is collected or its lifetime runs out.
Simple square hitbox around its center.
"""

from .constants import SUN_LIFETIME_MS, SUN_HALF_EXTENT
from .grid import point_in_rect
from .models import Rect


class Sun:
    """
    A collectible sun.

    Lifecycle:
    - ACTIVE: counts down ``life`` each update.
    - GONE:   collected by the player or expired; the world prunes it.
    """

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.alive = True
        self.life: float = SUN_LIFETIME_MS

    def update(self, dt: float) -> None:
        """Count down the lifetime and expire at zero."""
        self.life -= dt
        if self.life <= 0:
            self.alive = False

    def mark_collected(self) -> None:
        self.alive = False

    @property
    def rect(self) -> Rect:
        return Rect.centered(self.x, self.y, SUN_HALF_EXTENT)

    def contains_point(self, x: float, y: float) -> bool:
        """Check if a point is within the sun's clickable area."""
        if not self.alive:
            return False
        return point_in_rect(x, y, self.rect)

    @property
    def fade_ratio(self) -> float:
        return max(0.0, self.life / SUN_LIFETIME_MS)
