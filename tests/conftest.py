"""
Basic test fixtures for the fleet battle test suite.

Provides ship and fleet builders plus a seeded random source so battle tests
are reproducible.
"""

import sys
import os

import numpy as np
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from fleet_battle.core.data import ShipClass, WeaponType
from fleet_battle.core.events.event_manager import EventManager
from fleet_battle.game.entities import Fleet, Ship, Weapon


class TestDataBuilder:
    """Builders for test ships and fleets."""

    __test__ = False

    @staticmethod
    def ship(
        name: str = "Test",
        hull: int = 100,
        shield: int = 50,
        speed: int = 100,
        damage: int = 20,
        ship_class: ShipClass = ShipClass.CRUISER,
        weapon_type: WeaponType = WeaponType.LASER_CANNON,
    ) -> Ship:
        """Create a full-strength ship."""
        return Ship(
            name=name,
            hull=hull,
            max_hull=hull,
            shield=shield,
            max_shield=shield,
            speed=speed,
            weapon=Weapon(weapon_type, damage),
            ship_class=ship_class,
        )

    @staticmethod
    def fleet(*ships: Ship, name: str = "") -> Fleet:
        return Fleet(ships, name=name)


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def rng():
    """Create a seeded random source."""
    return np.random.default_rng(12345)


@pytest.fixture
def make_ship():
    """Factory fixture for ships with overridable stats."""
    return TestDataBuilder.ship


@pytest.fixture
def scenario_a_fleets():
    """One fast shielded ship against one slower unshielded ship."""
    ship_a = TestDataBuilder.ship("Swift", hull=10, shield=5, speed=10, damage=8, ship_class=ShipClass.FIGHTER)
    ship_b = TestDataBuilder.ship("Brute", hull=10, shield=0, speed=5, damage=8)
    return TestDataBuilder.fleet(ship_a), TestDataBuilder.fleet(ship_b)


@pytest.fixture
def player_fleet():
    """A mixed three-ship fleet."""
    return TestDataBuilder.fleet(
        TestDataBuilder.ship("Alpha", hull=60, shield=30, speed=180, damage=25, ship_class=ShipClass.FIGHTER),
        TestDataBuilder.ship("Titan", hull=120, shield=100, speed=80, damage=50),
        TestDataBuilder.ship("Thunder", hull=150, shield=60, speed=50, damage=80, ship_class=ShipClass.BOMBER),
        name="Player Fleet",
    )


@pytest.fixture
def enemy_fleet():
    """A three-ship fleet with middling stats."""
    return TestDataBuilder.fleet(
        TestDataBuilder.ship("Ravager-1", hull=90, shield=40, speed=120, damage=35),
        TestDataBuilder.ship("Viper-2", hull=70, shield=60, speed=90, damage=45),
        TestDataBuilder.ship("Fang-3", hull=110, shield=20, speed=60, damage=30),
        name="Enemy Fleet",
    )
