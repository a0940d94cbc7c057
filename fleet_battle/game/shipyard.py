"""
Shipyard: builds player ships from per-class prototypes.

The shipyard keeps one prototype ship per class, starting from the class
template. Prototypes can be customized; every ship built afterwards is an
independent copy of the current prototype.
"""
from typing import Iterable, Optional

from ..core.data import ShipClass, WeaponType
from .entities.fleet import Fleet
from .entities.ship import Ship, Weapon
from .entities.ship_templates import SHIP_TEMPLATES, ShipTemplate


class Shipyard:
    """Prototype registry for player ship construction."""

    def __init__(self, templates: Optional[dict[ShipClass, ShipTemplate]] = None):
        templates = templates if templates is not None else SHIP_TEMPLATES
        self._prototypes: dict[ShipClass, Ship] = {
            ship_class: template.create() for ship_class, template in templates.items()
        }

    @property
    def ship_classes(self) -> list[ShipClass]:
        return list(self._prototypes)

    def get_prototype(self, ship_class: ShipClass) -> Ship:
        """Return the live prototype for a class (mutations affect future builds).

        Raises:
            KeyError: If there is no prototype for ship_class
        """
        if ship_class not in self._prototypes:
            raise KeyError(f"No prototype registered for ship class: {ship_class}")
        return self._prototypes[ship_class]

    def customize_prototype(
        self,
        ship_class: ShipClass,
        *,
        name: str,
        hull: int,
        shield: int,
        speed: int,
        weapon_type: WeaponType,
        damage: int,
        color: Optional[str] = None,
    ) -> Ship:
        """Replace a prototype's stats; current and maximum values are set together.

        Returns:
            The updated prototype
        """
        prototype = self.get_prototype(ship_class)

        prototype.name = name
        prototype.hull = prototype.max_hull = hull
        prototype.shield = prototype.max_shield = shield
        prototype.speed = speed
        prototype.weapon = Weapon(weapon_type, damage)
        if color is not None:
            prototype.color = color

        return prototype

    def build_ship(self, ship_class: ShipClass) -> Ship:
        """Build a new ship as an independent copy of the class prototype."""
        return self.get_prototype(ship_class).copy()

    def build_fleet(self, ship_classes: Iterable[ShipClass], name: str = "") -> Fleet:
        """Build one ship per entry of ``ship_classes``, in order."""
        return Fleet((self.build_ship(ship_class) for ship_class in ship_classes), name=name)
