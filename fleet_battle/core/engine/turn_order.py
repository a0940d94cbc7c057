"""Initiative ordering for one battle round.

Every ship of both fleets acts once per round, fastest first. Ships with equal
speed are ordered by a random key drawn once per ship when the round's order is
built, so the order is a proper total order and the same key is used for every
comparison involving that ship.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Mapping, Optional

import numpy as np

from ..data import Side, SIDE_TAGS

if TYPE_CHECKING:
    from ...game.entities.ship import Ship


@dataclass(frozen=True)
class TurnEntry:
    """A ship's slot in the round's turn order."""
    ship: "Ship"
    side: Side
    tie_break: float


def build_turn_order(
    fleet_a: Iterable["Ship"],
    fleet_b: Iterable["Ship"],
    rng: np.random.Generator,
) -> list[TurnEntry]:
    """Merge both fleets into the order ships act in this round.

    Primary: speed, descending.
    Secondary: per-ship random key, ascending.

    Args:
        fleet_a: Ships of the first side (tagged Side.PLAYER)
        fleet_b: Ships of the second side (tagged Side.ENEMY)
        rng: Random source; exactly one key is drawn per ship

    Returns:
        Turn entries in acting order
    """
    tagged = [(ship, Side.PLAYER) for ship in fleet_a]
    tagged.extend((ship, Side.ENEMY) for ship in fleet_b)
    if not tagged:
        return []

    speeds = np.fromiter((ship.speed for ship, _ in tagged), dtype=np.int64, count=len(tagged))
    keys = np.asarray(rng.random(len(tagged)), dtype=np.float64)

    # lexsort sorts by the last key first
    order = np.lexsort((keys, -speeds))

    return [
        TurnEntry(ship=tagged[i][0], side=tagged[i][1], tie_break=float(keys[i]))
        for i in order
    ]


def describe_turn_order(entries: list[TurnEntry], tags: Optional[Mapping[Side, str]] = None) -> str:
    """Compact one-line rendering for debug logs.

    ``tags`` maps each side to its prefix (defaults to SIDE_TAGS).
    """
    if not entries:
        return "(none)"
    tags = SIDE_TAGS if tags is None else tags
    return ", ".join(
        f"{tags[entry.side]} {entry.ship.name}(SPD={entry.ship.speed})" for entry in entries
    )
