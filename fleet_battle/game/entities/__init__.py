"""Battle entities.

This package contains the ship data model and the tables used to create ships:
- ship.py: Ship and Weapon
- fleet.py: Fleet roster and FleetSummary
- ship_templates.py: Ship class templates and generator ranges loaded from YAML
"""

from .ship import Ship, Weapon
from .fleet import Fleet, FleetSummary
from .ship_templates import (
    ShipTemplate,
    GeneratorRanges,
    SHIP_TEMPLATES,
    get_template,
    create_ship,
    load_ship_templates,
    load_generator_ranges,
)

__all__ = [
    "Ship",
    "Weapon",
    "Fleet",
    "FleetSummary",
    "ShipTemplate",
    "GeneratorRanges",
    "SHIP_TEMPLATES",
    "get_template",
    "create_ship",
    "load_ship_templates",
    "load_generator_ranges",
]
