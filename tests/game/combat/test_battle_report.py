"""
Unit tests for outcome classification and battle reports.
"""
import pytest

from fleet_battle.core.data import Side
from fleet_battle.core.engine import BattleConfig
from fleet_battle.game.combat import (
    BattleEngine,
    BattleOutcome,
    BattleReport,
    determine_outcome,
    summarize_battle,
)
from fleet_battle.game.entities import Fleet


class TestDetermineOutcome:
    """Test outcome classification from fleet state."""

    @pytest.mark.parametrize("a_alive, b_alive, expected", [
        (True, False, BattleOutcome.SIDE_A_VICTORY),
        (False, True, BattleOutcome.SIDE_B_VICTORY),
        (False, False, BattleOutcome.DRAW),
        (True, True, BattleOutcome.IN_PROGRESS),
    ])
    def test_outcomes(self, make_ship, a_alive, b_alive, expected):
        fleet_a = Fleet([make_ship()] if a_alive else [])
        fleet_b = Fleet([make_ship()] if b_alive else [])

        assert determine_outcome(fleet_a, fleet_b) == expected


class TestSummarizeBattle:
    """Test reports built from recorded battle logs."""

    def test_scenario_a_report(self, scenario_a_fleets):
        events = BattleEngine(seed=1).run_battle(*scenario_a_fleets)

        report = summarize_battle(events)

        assert report.outcome == BattleOutcome.SIDE_A_VICTORY
        assert report.winner == Side.PLAYER
        assert report.rounds_fought == 2
        assert report.survivors == 1
        assert report.attacks == {Side.PLAYER: 2, Side.ENEMY: 1}
        assert report.damage_dealt == {Side.PLAYER: 16, Side.ENEMY: 8}
        assert report.ships_lost == {Side.PLAYER: 0, Side.ENEMY: 1}
        assert report.total_damage == 24

    def test_not_started(self, make_ship):
        events = BattleEngine(seed=1).run_battle(Fleet(), Fleet([make_ship()]))

        report = summarize_battle(events)

        assert report.outcome == BattleOutcome.NOT_STARTED
        assert report.rounds_fought == 0
        assert report.winner is None

    def test_stalemate(self, make_ship):
        engine = BattleEngine(seed=1, config=BattleConfig(max_rounds=4))
        events = engine.run_battle(Fleet([make_ship(damage=1)]), Fleet([make_ship(damage=1)]))

        report = summarize_battle(events)

        assert report.outcome == BattleOutcome.STALEMATE
        assert report.rounds_fought == 4
        assert report.total_damage == 8

    def test_draw(self):
        report = summarize_battle(BattleEngine(seed=1)._conclude(Fleet(), Fleet()))

        assert report.outcome == BattleOutcome.DRAW
        assert report.winner is None

    def test_abandoned_battle(self, scenario_a_fleets):
        battle = BattleEngine(seed=1).iter_battle(*scenario_a_fleets)
        partial = [next(battle) for _ in range(7)]
        battle.close()

        assert summarize_battle(partial).outcome == BattleOutcome.IN_PROGRESS

    def test_empty_log(self):
        assert summarize_battle([]).outcome == BattleOutcome.IN_PROGRESS


class TestBattleReport:
    """Test report export and formatting."""

    @pytest.fixture
    def report(self):
        return BattleReport(
            outcome=BattleOutcome.SIDE_B_VICTORY,
            rounds_fought=3,
            winner=Side.ENEMY,
            survivors=2,
            attacks={Side.PLAYER: 4, Side.ENEMY: 5},
            damage_dealt={Side.PLAYER: 120, Side.ENEMY: 200},
            ships_lost={Side.PLAYER: 2, Side.ENEMY: 1},
        )

    def test_to_dict(self, report):
        assert report.to_dict() == {
            "outcome": "SIDE_B_VICTORY",
            "rounds_fought": 3,
            "winner": "ENEMY",
            "survivors": 2,
            "attacks": {"PLAYER": 4, "ENEMY": 5},
            "damage_dealt": {"PLAYER": 120, "ENEMY": 200},
            "ships_lost": {"PLAYER": 2, "ENEMY": 1},
        }

    def test_format_lines(self, report):
        lines = report.format_lines()

        assert lines == [
            "Outcome: Side B Victory",
            "Winner: Enemy (2 ships remaining)",
            "Rounds fought: 3",
            "Player: 4 attacks, 120 damage dealt, 2 ships lost",
            "Enemy: 5 attacks, 200 damage dealt, 1 ships lost",
        ]

    def test_format_lines_custom_labels(self, report):
        assert report.format_lines("Blue", "Red")[1] == "Winner: Red (2 ships remaining)"

    def test_format_lines_without_winner(self):
        lines = BattleReport(outcome=BattleOutcome.DRAW).format_lines()

        assert lines[0] == "Outcome: Draw"
        assert not any(line.startswith("Winner") for line in lines)
