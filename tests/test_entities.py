"""
Tests for individual entities: Plant, Zombie, Pea, PeaSplash, Sun.

Entities are driven directly with a real World as their context so each
behaviour can be checked in isolation from the full advance() pass.
"""
import pytest

from lawn.constants import (
    PLANT_STATS, SUNFLOWER_SUN_INTERVAL_MS, PEASHOOTER_SHOT_INTERVAL_MS,
    ZOMBIE_ENTRY_X, SUN_LIFETIME_MS, SPLASH_LIFETIME_MS, PEA_DAMAGE,
)
from lawn.grid import world_from_grid
from lawn.models import HealthBand, PlantKind, ZombieKind, ZombieState
from lawn.pea import Pea, PeaSplash
from lawn.plant import Plant
from lawn.sun import Sun
from lawn.zombie import Zombie


def add_plant(world, kind, row, col):
    plant = Plant(kind, row, col)
    world.plants.append(plant)
    return plant


class TestSunflower:
    """Tests for sun production."""

    def test_produces_sun_on_interval(self, world):
        """A sun appears above the flower once the interval elapses."""
        flower = add_plant(world, PlantKind.SUNFLOWER, 2, 0)

        flower.update(SUNFLOWER_SUN_INTERVAL_MS - 1, world)
        assert world.suns == []

        flower.update(1, world)
        assert len(world.suns) == 1
        pos = flower.position
        assert world.suns[0].x == pos.x
        assert world.suns[0].y == pos.y - 30
        assert flower.sun_timer == 0
        assert flower.is_flashing

    def test_flash_wears_off(self, world):
        """Flash timer counts down on later updates."""
        flower = add_plant(world, PlantKind.SUNFLOWER, 2, 0)
        flower.update(SUNFLOWER_SUN_INTERVAL_MS, world)

        flower.update(400, world)
        assert not flower.is_flashing

    def test_dead_plant_does_nothing(self, world):
        """A dead sunflower never produces."""
        flower = add_plant(world, PlantKind.SUNFLOWER, 2, 0)
        flower.take_damage(1000)

        flower.update(SUNFLOWER_SUN_INTERVAL_MS * 2, world)
        assert world.suns == []
        assert flower.sun_timer == 0


class TestPeashooter:
    """Tests for lane-gated shooting."""

    def test_holds_fire_on_empty_lane(self, world):
        """No zombie in the row: timer does not advance, no pea."""
        shooter = add_plant(world, PlantKind.PEASHOOTER, 1, 0)
        world.spawn_zombie(ZombieKind.CLASSIC, row=3)

        shooter.update(PEASHOOTER_SHOT_INTERVAL_MS * 3, world)
        assert world.peas == []
        assert shooter.shot_timer == 0

    def test_fires_when_zombie_in_row(self, world):
        """A pea leaves from just in front of the plant, tagged with its row."""
        shooter = add_plant(world, PlantKind.PEASHOOTER, 1, 0)
        world.spawn_zombie(ZombieKind.CLASSIC, row=1)

        shooter.update(PEASHOOTER_SHOT_INTERVAL_MS, world)
        assert len(world.peas) == 1
        pea = world.peas[0]
        pos = shooter.position
        assert (pea.x, pea.y, pea.row) == (pos.x + 20, pos.y - 10, 1)
        assert shooter.shoot_flash == 200

    def test_defeated_zombie_does_not_count(self, world):
        """A defeated zombie leaves the lane empty."""
        shooter = add_plant(world, PlantKind.PEASHOOTER, 1, 0)
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=1)
        zombie.take_damage(1000)

        shooter.update(PEASHOOTER_SHOT_INTERVAL_MS, world)
        assert world.peas == []


class TestPlantHealth:
    """Tests for damage and health banding."""

    def test_damage_can_go_negative(self):
        plant = Plant(PlantKind.WALLNUT, 0, 0)
        plant.take_damage(5000)
        assert plant.health == 1200 - 5000
        assert not plant.alive
        assert plant.health_ratio == 0

    def test_wallnut_bands(self):
        """Bands switch at two thirds and one third of max health."""
        nut = Plant(PlantKind.WALLNUT, 0, 0)
        assert nut.health_band is HealthBand.UNDAMAGED

        nut.health = 0.5 * nut.max_health
        assert nut.health_band is HealthBand.DAMAGED

        nut.health = 0.2 * nut.max_health
        assert nut.health_band is HealthBand.CRITICAL

    def test_wallnut_has_no_timers(self, world):
        nut = add_plant(world, PlantKind.WALLNUT, 0, 0)
        world.spawn_zombie(ZombieKind.CLASSIC, row=0)
        nut.update(60000, world)
        assert world.peas == [] and world.suns == []
        assert nut.health == PLANT_STATS[PlantKind.WALLNUT].max_health


class TestZombieMovement:
    """Tests for walking and the lose condition."""

    def test_spawns_at_right_edge(self):
        zombie = Zombie(ZombieKind.CONE, 2)
        assert zombie.x == ZOMBIE_ENTRY_X
        assert zombie.y == world_from_grid(0, 2).y - 10
        assert zombie.health == 400
        assert zombie.state is ZombieState.APPROACHING

    def test_walks_left(self, world):
        """Speed is pixels per second, dt in milliseconds."""
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=0)
        zombie.update(1000, world)
        assert zombie.x == pytest.approx(ZOMBIE_ENTRY_X - 20)

    def test_crossing_left_edge_ends_game(self, world):
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=0)
        zombie.x = 0.1

        zombie.update(1000, world)
        assert not world.running


class TestZombieFeeding:
    """Tests for the feeding state machine."""

    def test_starts_feeding_on_plant_in_reach(self, world):
        """Stops walking and bites at 20 hp per second."""
        plant = add_plant(world, PlantKind.WALLNUT, 2, 8)
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=2)
        zombie.x = plant.position.x + 10

        zombie.update(1000, world)

        assert zombie.state is ZombieState.FEEDING
        assert zombie.target is plant
        assert zombie.x == plant.position.x + 10
        assert plant.health == pytest.approx(1200 - 20)

    def test_ignores_plants_in_other_rows(self, world):
        plant = add_plant(world, PlantKind.WALLNUT, 1, 8)
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=2)
        zombie.x = plant.position.x

        zombie.update(1000, world)
        assert zombie.state is ZombieState.APPROACHING
        assert plant.health == 1200

    def test_reach_is_strict(self, world):
        """Exactly half a cell away is out of reach."""
        plant = add_plant(world, PlantKind.WALLNUT, 2, 8)
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=2)
        zombie.x = plant.position.x + 35.5

        zombie.update(0, world)
        assert zombie.state is ZombieState.APPROACHING

    def test_only_damages_target(self, world):
        """A second plant nearby is untouched while the target lives."""
        target = add_plant(world, PlantKind.WALLNUT, 2, 8)
        other = add_plant(world, PlantKind.WALLNUT, 2, 7)
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=2)
        zombie.x = target.position.x

        for _ in range(5):
            zombie.update(1000, world)

        assert target.health == pytest.approx(1200 - 100)
        assert other.health == 1200

    def test_reverts_when_target_dies(self, world):
        """Dead target: back to approaching and walking on the same update."""
        plant = add_plant(world, PlantKind.SUNFLOWER, 2, 8)
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=2)
        zombie.x = plant.position.x
        zombie.update(0, world)
        assert zombie.state is ZombieState.FEEDING

        plant.take_damage(plant.health)
        start_x = zombie.x
        zombie.update(1000, world)

        assert zombie.state is ZombieState.APPROACHING
        assert zombie.target is None
        assert zombie.x == pytest.approx(start_x - 20)

    def test_reverts_when_target_removed(self, world):
        """A target no longer on the lawn is dropped."""
        plant = add_plant(world, PlantKind.WALLNUT, 2, 8)
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=2)
        zombie.x = plant.position.x
        zombie.update(0, world)

        world.plants.remove(plant)
        zombie.update(100, world)
        assert zombie.state is ZombieState.APPROACHING
        assert plant.health == 1200


class TestZombieDefeat:
    """Tests for taking hits and the terminal DEFEATED state."""

    def test_four_hits_defeat_classic(self):
        """200 hp survives 150 damage and falls to the fourth hit."""
        zombie = Zombie(ZombieKind.CLASSIC, 0)
        zombie.take_damage(50)
        zombie.take_damage(50)
        zombie.take_damage(50)
        assert zombie.alive
        assert zombie.health == 50
        assert zombie.state is ZombieState.APPROACHING

        zombie.take_damage(50)
        assert not zombie.alive
        assert zombie.state is ZombieState.DEFEATED

    def test_defeated_never_moves_or_bites(self, world):
        plant = add_plant(world, PlantKind.WALLNUT, 0, 8)
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=0)
        zombie.x = plant.position.x
        zombie.update(1000, world)
        assert zombie.state is ZombieState.FEEDING

        zombie.take_damage(500)
        health_before = plant.health
        for _ in range(10):
            zombie.update(1000, world)

        assert zombie.state is ZombieState.DEFEATED
        assert zombie.target is None
        assert zombie.x == plant.position.x
        assert plant.health == health_before

    def test_defeated_at_edge_does_not_end_game(self, world):
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=0)
        zombie.x = 0.1
        zombie.take_damage(1000)

        zombie.update(5000, world)
        assert world.running

    def test_corpse_expires(self):
        zombie = Zombie(ZombieKind.CLASSIC, 0)
        zombie.take_damage(1000)
        assert not zombie.expired
        zombie.corpse_ms = 1000
        assert zombie.expired
        assert zombie.corpse_fade == 0


class TestPea:
    """Tests for projectile flight and single strikes."""

    def test_flies_right(self, world):
        pea = Pea(200, 300, 1)
        pea.update(1000, world)
        assert pea.x == pytest.approx(500)
        assert pea.alive

    def test_leaves_playfield(self, world):
        pea = Pea(1005, 300, 1)
        pea.update(100, world)
        assert not pea.alive

    def test_hits_zombie_in_radius(self, world):
        """Hit deals fixed damage and leaves a splash at the impact point."""
        zombie = world.spawn_zombie(ZombieKind.CLASSIC, row=1)
        zombie.x = 500
        pea = Pea(480, 300, 1)

        pea.update(16, world)

        assert not pea.alive
        assert zombie.health == 200 - PEA_DAMAGE
        assert len(world.splashes) == 1
        assert world.splashes[0].x == pytest.approx(pea.x)
        assert world.splashes[0].y == 290

    def test_first_zombie_in_order_wins(self, world):
        """Two zombies in range: only the earlier spawn is hit."""
        first = world.spawn_zombie(ZombieKind.CLASSIC, row=1)
        second = world.spawn_zombie(ZombieKind.CLASSIC, row=1)
        first.x = 505
        second.x = 500
        pea = Pea(500, 300, 1)

        pea.update(0, world)
        assert first.health == 150
        assert second.health == 200

    def test_single_hit_per_lifetime(self, world):
        zombie = world.spawn_zombie(ZombieKind.BUCKET, row=1)
        zombie.x = 500
        pea = Pea(500, 300, 1)

        for _ in range(5):
            pea.update(0, world)
        assert zombie.health == 800 - PEA_DAMAGE
        assert len(world.splashes) == 1

    def test_skips_other_rows_and_defeated(self, world):
        other_row = world.spawn_zombie(ZombieKind.CLASSIC, row=2)
        other_row.x = 500
        corpse = world.spawn_zombie(ZombieKind.CLASSIC, row=1)
        corpse.x = 500
        corpse.take_damage(200)
        pea = Pea(500, 300, 1)

        pea.update(0, world)
        assert pea.alive
        assert other_row.health == 200


class TestPeaSplash:
    """Tests for the impact effect."""

    def test_fades_and_expires(self):
        splash = PeaSplash(10, 10)
        assert splash.alive
        assert splash.fade == 1.0

        splash.update(SPLASH_LIFETIME_MS / 2)
        assert splash.fade == pytest.approx(0.5)

        splash.update(SPLASH_LIFETIME_MS / 2)
        assert not splash.alive
        assert splash.fade == 0


class TestSun:
    """Tests for the collectible."""

    def test_expires_after_lifetime(self):
        sun = Sun(300, 300)
        sun.update(SUN_LIFETIME_MS - 1)
        assert sun.alive
        sun.update(2)
        assert not sun.alive

    def test_expires_in_one_long_update(self):
        sun = Sun(300, 300)
        sun.update(SUN_LIFETIME_MS + 0.5)
        assert not sun.alive

    def test_hitbox_is_fifty_pixel_square(self):
        sun = Sun(300, 300)
        assert sun.contains_point(300, 300)
        assert sun.contains_point(325, 275)
        assert not sun.contains_point(326, 300)

    def test_collected_sun_is_not_clickable(self):
        sun = Sun(300, 300)
        sun.mark_collected()
        assert not sun.contains_point(300, 300)
