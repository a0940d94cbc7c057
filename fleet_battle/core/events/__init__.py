"""Event system for publisher-subscriber communication.

This package contains the battle event model and the bus that delivers it:
- event_manager.py: Publisher-subscriber event routing
- events.py: Battle events and logging events
"""

from .event_manager import EventManager, QueuedEvent
from .events import (
    GameEvent,
    EventType,
    BATTLE_EVENT_TYPES,
    BattleEvent,
    BattleNotStarted,
    BattleStarted,
    FleetStrengthReported,
    Separator,
    RoundStarted,
    ShipAttacked,
    ShipDestroyed,
    ShipStatusReported,
    BattleEnded,
    FleetVictorious,
    SurvivorsReported,
    BattleDrawn,
    BattleStalled,
    LogMessage,
    DebugMessage,
    LogSaveRequested,
)

__all__ = [
    "EventManager",
    "QueuedEvent",
    "GameEvent",
    "EventType",
    "BATTLE_EVENT_TYPES",
    "BattleEvent",
    "BattleNotStarted",
    "BattleStarted",
    "FleetStrengthReported",
    "Separator",
    "RoundStarted",
    "ShipAttacked",
    "ShipDestroyed",
    "ShipStatusReported",
    "BattleEnded",
    "FleetVictorious",
    "SurvivorsReported",
    "BattleDrawn",
    "BattleStalled",
    "LogMessage",
    "DebugMessage",
    "LogSaveRequested",
]
