"""Ship and weapon data model.

A ship is plain mutable state: durability (hull, shield), initiative (speed)
and one weapon with a flat damage value. The only behaviour it owns is
repairing itself and copying itself by value; all combat mutation happens in
the battle engine.

Ships compare by identity. Two ships with identical stats are still two
different ships, which keeps fleet membership and event targeting exact.
"""

from dataclasses import dataclass, replace

from ...core.data import ShipClass, WeaponType, SHIP_CLASS_NAMES, WEAPON_TYPE_NAMES


@dataclass
class Weapon:
    """A ship's weapon. ``weapon_type`` is cosmetic; ``damage`` is subtracted per attack."""
    weapon_type: WeaponType
    damage: int

    @property
    def name(self) -> str:
        return WEAPON_TYPE_NAMES[self.weapon_type]

    def __str__(self) -> str:
        return f"{self.name} (Damage:{self.damage})"


@dataclass(eq=False)
class Ship:
    """A single combatant.

    Invariants maintained by the engine:
    - ``0 <= shield <= max_shield`` at all times
    - ``0 <= hull <= max_hull`` except within the attack that destroys the ship,
      where hull may go negative before the ship is removed from its fleet

    Examples:
        ship = Ship("Alpha", hull=60, max_hull=60, shield=30, max_shield=30,
                    speed=180, weapon=Weapon(WeaponType.LASER_CANNON, 25))
        clone = ship.copy()          # independent weapon
        ship.repair()                # back to full hull and shield
    """
    name: str
    hull: int
    max_hull: int
    shield: int
    max_shield: int
    speed: int
    weapon: Weapon
    ship_class: ShipClass = ShipClass.CRUISER
    color: str = "Gold"

    @property
    def class_name(self) -> str:
        """Human-readable class tag ("Fighter", "Cruiser", "Bomber")."""
        return SHIP_CLASS_NAMES[self.ship_class]

    @property
    def is_destroyed(self) -> bool:
        return self.hull <= 0

    @property
    def is_damaged(self) -> bool:
        return self.hull < self.max_hull or self.shield < self.max_shield

    def repair(self) -> None:
        """Restore hull and shield to their maximums."""
        self.hull = self.max_hull
        self.shield = self.max_shield

    def copy(self) -> "Ship":
        """Return a structural copy that shares no mutable state with this ship."""
        return replace(self, weapon=replace(self.weapon))

    def get_info(self) -> str:
        """One-line description used in fleet listings.

        Format: Class "Name" | Hull:XX Shield:XX Speed:XX | Weapon (Damage:XX)
        """
        return (
            f"{self.class_name} \"{self.name}\" | Hull:{self.hull} Shield:{self.shield} "
            f"Speed:{self.speed} | {self.weapon}"
        )
