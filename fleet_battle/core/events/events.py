"""Battle events and bus-level messages.

This module defines every event the battle engine emits, plus the logging
events that travel on the same bus.

Event Design Principles:
- Events are immutable dataclasses
- All events carry the round number they were emitted in (0 = before/after battle)
- A battle event never holds a strong reference to a ship; the attack target
  is kept through a weak reference so a log can outlive the fleets
- Whether an event announces the battle outcome is a property of its class
"""

import weakref
from abc import ABC
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, ClassVar, Optional

from ..data import Side

if TYPE_CHECKING:
    from ...game.entities.ship import Ship
    from ...game.managers.log_manager import LogLevel


class EventType(Enum):
    """Types of events that subscribers can listen for."""
    # Battle lifecycle
    BATTLE_NOT_STARTED = auto()
    BATTLE_STARTED = auto()
    FLEET_STRENGTH_REPORTED = auto()
    SEPARATOR = auto()
    ROUND_STARTED = auto()
    BATTLE_ENDED = auto()

    # Combat
    SHIP_ATTACKED = auto()
    SHIP_DESTROYED = auto()
    SHIP_STATUS_REPORTED = auto()

    # Outcome
    FLEET_VICTORIOUS = auto()
    SURVIVORS_REPORTED = auto()
    BATTLE_DRAWN = auto()
    BATTLE_STALLED = auto()

    # Logging
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()
    LOG_SAVE_REQUESTED = auto()


BATTLE_EVENT_TYPES = frozenset({
    EventType.BATTLE_NOT_STARTED,
    EventType.BATTLE_STARTED,
    EventType.FLEET_STRENGTH_REPORTED,
    EventType.SEPARATOR,
    EventType.ROUND_STARTED,
    EventType.BATTLE_ENDED,
    EventType.SHIP_ATTACKED,
    EventType.SHIP_DESTROYED,
    EventType.SHIP_STATUS_REPORTED,
    EventType.FLEET_VICTORIOUS,
    EventType.SURVIVORS_REPORTED,
    EventType.BATTLE_DRAWN,
    EventType.BATTLE_STALLED,
})


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for everything published on the event bus."""
    round_number: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class BattleEvent(GameEvent):
    """One notable occurrence during a battle, as a line of the battle log."""
    message: str

    is_victory: ClassVar[bool] = False

    @property
    def target(self) -> Optional["Ship"]:
        """The ship this event highlights, if any and still alive in memory."""
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type.name,
            "round_number": self.round_number,
            "message": self.message,
            "is_victory": self.is_victory,
        }


@dataclass(frozen=True)
class BattleNotStarted(BattleEvent):
    """Emitted instead of a battle when either fleet is empty."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_NOT_STARTED)


@dataclass(frozen=True)
class BattleStarted(BattleEvent):
    """Opening marker of a battle."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_STARTED)


@dataclass(frozen=True)
class FleetStrengthReported(BattleEvent):
    """Starting ship count of one side."""
    side: Side
    ship_count: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.FLEET_STRENGTH_REPORTED)


@dataclass(frozen=True)
class Separator(BattleEvent):
    """Blank line closing the opening block or a round."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.SEPARATOR)


@dataclass(frozen=True)
class RoundStarted(BattleEvent):
    """Marker emitted at the start of every round."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ROUND_STARTED)


@dataclass(frozen=True)
class ShipAttacked(BattleEvent):
    """A ship fired on an enemy ship.

    ``damage`` is the total dealt (shield and hull portions combined).
    """
    side: Side  # attacker's side
    attacker_name: str
    target_name: str
    damage: int
    shield_damage: int
    hull_damage: int
    target_ref: Optional["weakref.ReferenceType[Ship]"] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.SHIP_ATTACKED)

    @property
    def target(self) -> Optional["Ship"]:
        if self.target_ref is None:
            return None
        return self.target_ref()

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "side": self.side.name,
            "attacker": self.attacker_name,
            "target": self.target_name,
            "damage": self.damage,
            "shield_damage": self.shield_damage,
            "hull_damage": self.hull_damage,
        })
        return data


@dataclass(frozen=True)
class ShipDestroyed(BattleEvent):
    """A ship's hull dropped to zero or below; it leaves its fleet."""
    side: Side  # side of the destroyed ship
    ship_name: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.SHIP_DESTROYED)


@dataclass(frozen=True)
class ShipStatusReported(BattleEvent):
    """Remaining hull and shield of a ship that survived an attack."""
    side: Side
    ship_name: str
    hull: int
    shield: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.SHIP_STATUS_REPORTED)


@dataclass(frozen=True)
class BattleEnded(BattleEvent):
    """Closing marker, emitted before the outcome."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_ENDED)


@dataclass(frozen=True)
class FleetVictorious(BattleEvent):
    """One side destroyed the other."""
    side: Side

    is_victory: ClassVar[bool] = True

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.FLEET_VICTORIOUS)


@dataclass(frozen=True)
class SurvivorsReported(BattleEvent):
    """Number of ships the winning side kept."""
    side: Side
    survivors: int

    is_victory: ClassVar[bool] = True

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.SURVIVORS_REPORTED)


@dataclass(frozen=True)
class BattleDrawn(BattleEvent):
    """Both fleets were destroyed."""

    is_victory: ClassVar[bool] = True

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_DRAWN)


@dataclass(frozen=True)
class BattleStalled(BattleEvent):
    """Both fleets still fight but the battle cannot progress (no damage possible or round limit)."""
    rounds_fought: int

    is_victory: ClassVar[bool] = True

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.BATTLE_STALLED)


# Logging Events
@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event emitted when a log message is created."""
    message: str
    category: str
    level: "LogLevel"
    source: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(GameEvent):
    """Event emitted for debug-specific messages."""
    message: str
    source: str
    context: Optional[dict] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)


@dataclass(frozen=True)
class LogSaveRequested(GameEvent):
    """Event emitted when the log should be written to a file."""
    log_dir: str = "logs"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_SAVE_REQUESTED)
