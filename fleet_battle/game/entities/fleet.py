"""Fleet: the ordered roster of ships on one side of a battle.

Membership is by identity. The battle engine is the only code that removes
ships while a battle runs; between battles the owner may add, repair or copy.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

import numpy as np

from .ship import Ship


@dataclass(frozen=True)
class FleetSummary:
    """Aggregate strength of a fleet at one point in time."""
    ship_count: int
    total_hull: int
    total_max_hull: int
    total_shield: int
    total_max_shield: int
    mean_speed: float
    total_damage: int

    @property
    def integrity(self) -> float:
        """Current hull+shield as a fraction of the maximum (0.0 for an empty fleet)."""
        maximum = self.total_max_hull + self.total_max_shield
        if maximum <= 0:
            return 0.0
        return (self.total_hull + self.total_shield) / maximum


class Fleet:
    """Ordered collection of live ships."""

    def __init__(self, ships: Optional[Iterable[Ship]] = None, name: str = ""):
        self.name = name
        self._ships: list[Ship] = list(ships) if ships is not None else []

    def __len__(self) -> int:
        return len(self._ships)

    def __bool__(self) -> bool:
        return bool(self._ships)

    def __iter__(self) -> Iterator[Ship]:
        return iter(self._ships)

    def __getitem__(self, index: int) -> Ship:
        return self._ships[index]

    def __contains__(self, ship: object) -> bool:
        return any(member is ship for member in self._ships)

    def __repr__(self) -> str:
        return f"Fleet(name={self.name!r}, ships={len(self._ships)})"

    @property
    def ships(self) -> list[Ship]:
        """A snapshot list of the current members."""
        return list(self._ships)

    def add(self, ship: Ship) -> None:
        self._ships.append(ship)

    def remove(self, ship: Ship) -> bool:
        """Remove ``ship`` (by identity).

        Returns:
            True if the ship was a member and has been removed
        """
        for index, member in enumerate(self._ships):
            if member is ship:
                del self._ships[index]
                return True
        return False

    def clear(self) -> None:
        self._ships.clear()

    def copy(self) -> "Fleet":
        """Deep copy: every ship (and its weapon) is duplicated."""
        return Fleet((ship.copy() for ship in self._ships), name=self.name)

    def repair_all(self) -> int:
        """Repair every ship.

        Returns:
            Number of ships that were damaged before the repair
        """
        repaired = 0
        for ship in self._ships:
            if ship.is_damaged:
                repaired += 1
            ship.repair()
        return repaired

    def summary(self) -> FleetSummary:
        """Compute aggregate stats for display and reports."""
        if not self._ships:
            return FleetSummary(0, 0, 0, 0, 0, 0.0, 0)

        stats = np.array(
            [
                (s.hull, s.max_hull, s.shield, s.max_shield, s.speed, s.weapon.damage)
                for s in self._ships
            ],
            dtype=np.int64,
        )
        # Destroyed-but-not-yet-removed ships never count negative hull
        hulls = np.maximum(stats[:, 0], 0)

        return FleetSummary(
            ship_count=len(self._ships),
            total_hull=int(hulls.sum()),
            total_max_hull=int(stats[:, 1].sum()),
            total_shield=int(stats[:, 2].sum()),
            total_max_shield=int(stats[:, 3].sum()),
            mean_speed=float(stats[:, 4].mean()),
            total_damage=int(stats[:, 5].sum()),
        )
