"""Core data definitions.

This package contains the enums and display tables shared across the engine:
- game_enums.py: Sides, ship classes and weapon types
"""

from .game_enums import Side, ShipClass, WeaponType, SIDE_TAGS, SHIP_CLASS_NAMES, WEAPON_TYPE_NAMES

__all__ = [
    "Side",
    "ShipClass",
    "WeaponType",
    "SIDE_TAGS",
    "SHIP_CLASS_NAMES",
    "WEAPON_TYPE_NAMES",
]
