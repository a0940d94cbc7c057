"""
Battle outcome and after-action report.

Derives the result of a battle either from the fleets themselves or from a
recorded battle log, so a saved or replayed log can be summarized without the
ships that fought it.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Iterable, Optional

from ...core.data import Side
from ...core.events import (
    BattleDrawn,
    BattleEvent,
    BattleNotStarted,
    BattleStalled,
    FleetVictorious,
    RoundStarted,
    ShipAttacked,
    ShipDestroyed,
    SurvivorsReported,
)

if TYPE_CHECKING:
    from ..entities.fleet import Fleet


class BattleOutcome(Enum):
    """How a battle ended."""
    SIDE_A_VICTORY = auto()
    SIDE_B_VICTORY = auto()
    DRAW = auto()
    STALEMATE = auto()      # Round limit reached
    NOT_STARTED = auto()    # One or both fleets were empty
    IN_PROGRESS = auto()    # Log ends before an outcome (abandoned battle)


def determine_outcome(fleet_a: "Fleet", fleet_b: "Fleet") -> BattleOutcome:
    """Classify the current state of two fleets.

    Returns IN_PROGRESS while both fleets still have ships.
    """
    if fleet_a and fleet_b:
        return BattleOutcome.IN_PROGRESS
    if fleet_a:
        return BattleOutcome.SIDE_A_VICTORY
    if fleet_b:
        return BattleOutcome.SIDE_B_VICTORY
    return BattleOutcome.DRAW


def _per_side() -> dict[Side, int]:
    return {Side.PLAYER: 0, Side.ENEMY: 0}


@dataclass
class BattleReport:
    """Aggregated statistics of one battle log.

    Per-side dictionaries are keyed by the side that *did* the thing, except
    ``ships_lost`` which is keyed by the side that lost the ship.
    """
    outcome: BattleOutcome
    rounds_fought: int = 0
    winner: Optional[Side] = None
    survivors: int = 0
    attacks: dict[Side, int] = field(default_factory=_per_side)
    damage_dealt: dict[Side, int] = field(default_factory=_per_side)
    ships_lost: dict[Side, int] = field(default_factory=_per_side)

    @property
    def total_damage(self) -> int:
        return sum(self.damage_dealt.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "outcome": self.outcome.name,
            "rounds_fought": self.rounds_fought,
            "winner": self.winner.name if self.winner is not None else None,
            "survivors": self.survivors,
            "attacks": {side.name: count for side, count in self.attacks.items()},
            "damage_dealt": {side.name: total for side, total in self.damage_dealt.items()},
            "ships_lost": {side.name: count for side, count in self.ships_lost.items()},
        }

    def format_lines(self, side_a_label: str = "Player", side_b_label: str = "Enemy") -> list[str]:
        """Human-readable summary, one line per entry."""
        labels = {Side.PLAYER: side_a_label, Side.ENEMY: side_b_label}
        lines = [f"Outcome: {self.outcome.name.replace('_', ' ').title()}"]
        if self.winner is not None:
            lines.append(f"Winner: {labels[self.winner]} ({self.survivors} ships remaining)")
        lines.append(f"Rounds fought: {self.rounds_fought}")
        for side in (Side.PLAYER, Side.ENEMY):
            lines.append(
                f"{labels[side]}: {self.attacks[side]} attacks, "
                f"{self.damage_dealt[side]} damage dealt, {self.ships_lost[side]} ships lost"
            )
        return lines


def summarize_battle(events: Iterable[BattleEvent]) -> BattleReport:
    """Build a report from a battle log."""
    report = BattleReport(outcome=BattleOutcome.IN_PROGRESS)

    for event in events:
        if isinstance(event, BattleNotStarted):
            report.outcome = BattleOutcome.NOT_STARTED
        elif isinstance(event, RoundStarted):
            report.rounds_fought = max(report.rounds_fought, event.round_number)
        elif isinstance(event, ShipAttacked):
            report.attacks[event.side] += 1
            report.damage_dealt[event.side] += event.damage
        elif isinstance(event, ShipDestroyed):
            report.ships_lost[event.side] += 1
        elif isinstance(event, FleetVictorious):
            report.winner = event.side
            report.outcome = (
                BattleOutcome.SIDE_A_VICTORY if event.side == Side.PLAYER else BattleOutcome.SIDE_B_VICTORY
            )
        elif isinstance(event, SurvivorsReported):
            report.survivors = event.survivors
        elif isinstance(event, BattleDrawn):
            report.outcome = BattleOutcome.DRAW
        elif isinstance(event, BattleStalled):
            report.outcome = BattleOutcome.STALEMATE

    return report
