"""Ship class templates and fleet generation ranges.

Ship classes differ only in their default stats, so instead of a class per
archetype there is one ``Ship`` type plus this lookup table. Templates and the
random fleet ranges are loaded from a YAML file and converted to data
structures the shipyard and the fleet generator consume.
"""

import os
from dataclasses import dataclass
from typing import Any, Optional

import yaml

from ...core.data import ShipClass, WeaponType
from .ship import Ship, Weapon


DEFAULT_DATA_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    "assets", "data", "ships", "ship_templates.yaml"
)


@dataclass(frozen=True)
class ShipTemplate:
    """Initial values for a ship of one class."""
    ship_class: ShipClass
    name: str
    hull: int
    shield: int
    speed: int
    color: str
    weapon_type: WeaponType
    damage: int

    def create(self, name: Optional[str] = None) -> Ship:
        """Build a fresh ship at full hull and shield."""
        return Ship(
            name=name if name is not None else self.name,
            hull=self.hull,
            max_hull=self.hull,
            shield=self.shield,
            max_shield=self.shield,
            speed=self.speed,
            weapon=Weapon(self.weapon_type, self.damage),
            ship_class=self.ship_class,
            color=self.color,
        )


@dataclass(frozen=True)
class GeneratorRanges:
    """Half-open ``(low, high)`` stat ranges and cosmetic pools for random fleets."""
    hull: tuple[int, int]
    shield: tuple[int, int]
    speed: tuple[int, int]
    damage: tuple[int, int]
    names: tuple[str, ...]
    colors: tuple[str, ...]


def _read_yaml(path: str) -> dict[str, Any]:
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Ship data file not found: {path}")

    if not isinstance(data, dict):
        raise ValueError(f"Ship data file {path} must contain a mapping")
    return data


def load_ship_templates(path: Optional[str] = None) -> dict[ShipClass, ShipTemplate]:
    """Load ship templates from YAML.

    Args:
        path: YAML file to read (defaults to the bundled ship data)

    Returns:
        Dictionary mapping ShipClass enums to ShipTemplate objects

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If a template is missing a required key
        ValueError: If a class or weapon name is unknown
    """
    yaml_path = path or DEFAULT_DATA_PATH
    data = _read_yaml(yaml_path)

    try:
        templates = {}
        for class_name, template_data in data["ship_templates"].items():
            ship_class = _enum_member(ShipClass, class_name, yaml_path)
            weapon_data = template_data["weapon"]
            templates[ship_class] = ShipTemplate(
                ship_class=ship_class,
                name=str(template_data["name"]),
                hull=int(template_data["hull"]),
                shield=int(template_data["shield"]),
                speed=int(template_data["speed"]),
                color=str(template_data.get("color", "Gold")),
                weapon_type=_enum_member(WeaponType, weapon_data["type"], yaml_path),
                damage=int(weapon_data["damage"]),
            )
    except KeyError as e:
        raise KeyError(f"Invalid template structure in {yaml_path}: {e}")

    return templates


def _enum_member(enum_cls, name: str, yaml_path: str):
    try:
        return enum_cls[name]
    except KeyError:
        raise ValueError(f"Invalid {enum_cls.__name__} name in {yaml_path}: {name!r}")


def _parse_range(data: dict[str, Any], key: str, yaml_path: str) -> tuple[int, int]:
    low, high = (int(v) for v in data[key])
    if low < 0 or high <= low:
        raise ValueError(f"Invalid {key} range [{low}, {high}) in {yaml_path}")
    return low, high


def load_generator_ranges(path: Optional[str] = None) -> GeneratorRanges:
    """Load the random fleet ranges from YAML.

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If the fleet_generator section or one of its keys is missing
        ValueError: If a range is empty or negative, or a pool is empty
    """
    yaml_path = path or DEFAULT_DATA_PATH
    data = _read_yaml(yaml_path)

    try:
        section = data["fleet_generator"]
        ranges = GeneratorRanges(
            hull=_parse_range(section, "hull", yaml_path),
            shield=_parse_range(section, "shield", yaml_path),
            speed=_parse_range(section, "speed", yaml_path),
            damage=_parse_range(section, "damage", yaml_path),
            names=tuple(str(n) for n in section["names"]),
            colors=tuple(str(c) for c in section["colors"]),
        )
    except KeyError as e:
        raise KeyError(f"Invalid fleet_generator structure in {yaml_path}: {e}")

    if not ranges.names or not ranges.colors:
        raise ValueError(f"Name and color pools in {yaml_path} must not be empty")
    return ranges


# Load templates from the bundled YAML file
SHIP_TEMPLATES: dict[ShipClass, ShipTemplate] = load_ship_templates()


def get_template(ship_class: ShipClass) -> ShipTemplate:
    """Get the template for a ship class.

    Raises:
        KeyError: If ship_class is not recognized
    """
    if ship_class not in SHIP_TEMPLATES:
        raise KeyError(f"No template found for ship class: {ship_class}")

    return SHIP_TEMPLATES[ship_class]


def create_ship(ship_class: ShipClass, name: Optional[str] = None) -> Ship:
    """Create a full-strength ship from its class template."""
    return get_template(ship_class).create(name)
