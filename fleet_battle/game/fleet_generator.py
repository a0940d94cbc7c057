"""
Random fleet generation.

Builds opposing fleets with independently rolled stats. Numeric ranges and the
name and color pools come from the ship data file so they can be tuned
without code changes.
"""
from typing import Optional

import numpy as np

from ..core.data import ShipClass, WeaponType
from .entities.fleet import Fleet
from .entities.ship import Ship, Weapon
from .entities.ship_templates import GeneratorRanges, load_generator_ranges


class FleetGenerator:
    """Produces fleets of randomly rolled ships."""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        ranges: Optional[GeneratorRanges] = None,
    ):
        """Initialize the generator.

        Args:
            rng: Random source to draw from (shared with a battle engine if given)
            seed: Seed for a new random source when ``rng`` is not given
            ranges: Stat ranges and pools (defaults to the bundled ship data)
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.ranges = ranges if ranges is not None else load_generator_ranges()

        self._ship_classes = list(ShipClass)
        self._weapon_types = list(WeaponType)

    def _pick(self, items):
        return items[int(self.rng.integers(len(items)))]

    def _roll(self, bounds: tuple[int, int]) -> int:
        low, high = bounds
        return int(self.rng.integers(low, high))

    def generate_ship(self, index: int) -> Ship:
        """Roll a single full-strength ship.

        Args:
            index: Zero-based position in the fleet, used for the name suffix
        """
        ship_class = self._pick(self._ship_classes)
        name = f"{self._pick(self.ranges.names)}-{index + 1}"
        color = self._pick(self.ranges.colors)

        hull = self._roll(self.ranges.hull)
        shield = self._roll(self.ranges.shield)
        speed = self._roll(self.ranges.speed)
        weapon_type = self._pick(self._weapon_types)
        damage = self._roll(self.ranges.damage)

        return Ship(
            name=name,
            hull=hull,
            max_hull=hull,
            shield=shield,
            max_shield=shield,
            speed=speed,
            weapon=Weapon(weapon_type, damage),
            ship_class=ship_class,
            color=color,
        )

    def generate(self, size: int, name: str = "") -> Fleet:
        """Generate a fleet of ``size`` ships.

        Raises:
            ValueError: If size is negative
        """
        if size < 0:
            raise ValueError(f"Fleet size must be non-negative, got {size}")

        return Fleet((self.generate_ship(i) for i in range(size)), name=name)
