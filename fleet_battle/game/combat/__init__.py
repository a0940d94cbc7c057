"""Combat system.

This package contains the battle logic:
- combat_resolver.py: Damage application for a single attack
- battle_engine.py: Round loop, targeting and event emission
- battle_report.py: Outcome classification and after-action statistics
"""

from .combat_resolver import CombatResult, apply_damage, resolve_attack
from .battle_report import BattleOutcome, BattleReport, determine_outcome, summarize_battle
from .battle_engine import BattleEngine

__all__ = [
    "CombatResult",
    "apply_damage",
    "resolve_attack",
    "BattleOutcome",
    "BattleReport",
    "determine_outcome",
    "summarize_battle",
    "BattleEngine",
]
