"""
Combat resolution for a single attack.

This module applies a weapon's damage to a target ship, separate from turn
ordering, targeting and event emission which live in the battle engine.
"""
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.ship import Ship


@dataclass(frozen=True)
class CombatResult:
    """Result of one attack against one ship."""
    shield_damage: int
    hull_damage: int
    destroyed: bool

    @property
    def total_damage(self) -> int:
        return self.shield_damage + self.hull_damage


def apply_damage(target: "Ship", damage: int) -> CombatResult:
    """Apply damage to a ship, shield first.

    The shield absorbs up to its current value; the remainder is subtracted
    from the hull, which may go negative. The shield never drops below zero.

    Args:
        target: Ship receiving the damage (mutated in place)
        damage: Non-negative damage amount

    Returns:
        How the damage was split and whether the ship was destroyed
    """
    shield_damage = min(target.shield, damage)
    target.shield -= shield_damage

    hull_damage = damage - shield_damage
    target.hull -= hull_damage

    return CombatResult(
        shield_damage=shield_damage,
        hull_damage=hull_damage,
        destroyed=target.hull <= 0,
    )


def resolve_attack(attacker: "Ship", target: "Ship") -> CombatResult:
    """Fire the attacker's weapon at the target."""
    return apply_damage(target, attacker.weapon.damage)
