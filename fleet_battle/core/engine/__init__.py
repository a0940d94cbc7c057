"""Core engine building blocks.

This package contains the pieces the battle engine is assembled from:
- turn_order.py: Initiative ordering with per-round tie-break keys
- battle_config.py: Engine configuration
"""

from .turn_order import TurnEntry, build_turn_order, describe_turn_order
from .battle_config import BattleConfig

__all__ = [
    "TurnEntry",
    "build_turn_order",
    "describe_turn_order",
    "BattleConfig",
]
