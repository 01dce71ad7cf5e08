"""Lightweight data models used across the game."""

from dataclasses import dataclass
from enum import Enum


class PlantKind(Enum):
    """Plants the player can place. Values match the seed names in the HUD."""
    SUNFLOWER = "sunflower"
    PEASHOOTER = "peashooter"
    WALLNUT = "wallnut"


class ZombieKind(Enum):
    CLASSIC = "classic"
    CONE = "cone"
    BUCKET = "bucket"


class ZombieState(Enum):
    """
    Zombie behaviour states.

    APPROACHING walks left, FEEDING bites a plant in reach, DEFEATED is
    terminal.
    """
    APPROACHING = "approaching"
    FEEDING = "feeding"
    DEFEATED = "defeated"


class HealthBand(Enum):
    UNDAMAGED = "undamaged"
    DAMAGED = "damaged"
    CRITICAL = "critical"


@dataclass(frozen=True)
class PlantStats:
    """
    Per-kind plant tuning.

    Attributes
    ----------
    cost : int
        Sun spent to place the plant.
    max_health : int
        Starting health.
    """
    cost: int
    max_health: int


@dataclass(frozen=True)
class ZombieStats:
    """
    Per-kind zombie tuning.

    Attributes
    ----------
    max_health : int
        Starting health.
    speed : float
        Walking speed in pixels per second.
    """
    max_health: int
    speed: float


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with its top-left corner at (x, y)."""
    x: float
    y: float
    w: float
    h: float

    @classmethod
    def centered(cls, cx: float, cy: float, half_extent: float) -> "Rect":
        return cls(cx - half_extent, cy - half_extent, half_extent * 2, half_extent * 2)
