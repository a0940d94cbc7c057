"""Centralized battle enums and display names.

This module contains the enums shared by the entities, the combat engine and
the event system, providing a single source of truth for ship classes, weapon
types and fleet sides.
"""

from enum import Enum, auto


class Side(Enum):
    """The two sides of a battle, in the order they are passed to the engine."""
    PLAYER = 0
    ENEMY = 1

    @property
    def opponent(self) -> "Side":
        return Side.ENEMY if self is Side.PLAYER else Side.PLAYER


class ShipClass(Enum):
    """Ship archetypes. Display-only: combat never reads the class."""
    FIGHTER = auto()
    CRUISER = auto()
    BOMBER = auto()


class WeaponType(Enum):
    """Weapon kinds. Carried for presentation, no effect on damage."""
    LASER_CANNON = auto()
    PLASMA_TURRET = auto()
    MISSILE_RACK = auto()
    TORPEDO_BAY = auto()
    ION_BEAM = auto()


SIDE_TAGS = {
    Side.PLAYER: "[PLAYER]",
    Side.ENEMY: "[ENEMY]",
}

SHIP_CLASS_NAMES = {
    ShipClass.FIGHTER: "Fighter",
    ShipClass.CRUISER: "Cruiser",
    ShipClass.BOMBER: "Bomber",
}

WEAPON_TYPE_NAMES = {
    WeaponType.LASER_CANNON: "Laser Cannon",
    WeaponType.PLASMA_TURRET: "Plasma Turret",
    WeaponType.MISSILE_RACK: "Missile Rack",
    WeaponType.TORPEDO_BAY: "Torpedo Bay",
    WeaponType.ION_BEAM: "Ion Beam",
}
