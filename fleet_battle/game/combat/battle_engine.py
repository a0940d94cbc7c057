"""
Turn-based fleet battle engine.

Runs an automatic battle between two fleets. Every round each surviving ship
acts once in initiative order and fires at a random ship of the opposing
fleet; damage drains shields first, then hull. Destroyed ships are removed
from their fleet, damage persists on the survivors, and every notable step is
reported as a BattleEvent.

The battle is a lazy event stream: the simulation only advances when the
consumer pulls the next event, so pacing, animation and cancellation belong
to the consumer. ``run_battle`` and ``run_battle_async`` are thin drains over
``iter_battle``.
"""
import inspect
import weakref
from contextlib import closing
from itertools import chain
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Generator, Iterator, Optional, Union

import numpy as np

from ...core.data import Side
from ...core.engine import BattleConfig, build_turn_order, describe_turn_order
from ...core.events import (
    BattleDrawn,
    BattleEnded,
    BattleEvent,
    BattleNotStarted,
    BattleStalled,
    BattleStarted,
    DebugMessage,
    FleetStrengthReported,
    FleetVictorious,
    LogMessage,
    RoundStarted,
    Separator,
    ShipAttacked,
    ShipDestroyed,
    ShipStatusReported,
    SurvivorsReported,
)
from ..fleet_generator import FleetGenerator
from ..managers.log_manager import LogLevel
from .battle_report import BattleOutcome, determine_outcome
from .combat_resolver import resolve_attack

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ..entities.fleet import Fleet


EventCallback = Callable[[BattleEvent], None]
AsyncEventCallback = Callable[[BattleEvent], Union[None, Awaitable[Any]]]


class BattleEngine:
    """Resolves battles between two fleets."""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        config: Optional[BattleConfig] = None,
        event_manager: Optional["EventManager"] = None,
    ):
        """Initialize the engine.

        Args:
            rng: Random source for target selection and turn-order tie-breaks
            seed: Seed for a new random source when ``rng`` is not given
            config: Engine settings (defaults to BattleConfig())
            event_manager: Optional bus every battle event is published on
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.config = config if config is not None else BattleConfig()
        self.event_manager = event_manager

        # Events of the most recent (or still running) battle
        self.battle_log: list[BattleEvent] = []

        self._fleet_generator: Optional[FleetGenerator] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def iter_battle(self, fleet_a: "Fleet", fleet_b: "Fleet") -> Iterator[BattleEvent]:
        """Run a battle lazily, yielding each event as it happens.

        Both fleets are mutated in place. Closing the iterator early abandons
        the battle and leaves the fleets in their partial state.

        Args:
            fleet_a: First fleet (reported as the player's side)
            fleet_b: Second fleet (reported as the enemy side)

        Returns:
            An iterator of battle events in emission order
        """
        self.battle_log = []
        return self._stream(fleet_a, fleet_b)

    def _stream(self, fleet_a: "Fleet", fleet_b: "Fleet") -> Iterator[BattleEvent]:
        with closing(self._simulate(fleet_a, fleet_b)) as events:
            for event in events:
                self.battle_log.append(event)
                if self.event_manager is not None:
                    self.event_manager.publish_immediate(event, source="BattleEngine")
                yield event

    def run_battle(
        self,
        fleet_a: "Fleet",
        fleet_b: "Fleet",
        on_event: Optional[EventCallback] = None,
    ) -> list[BattleEvent]:
        """Run a battle to completion.

        Args:
            fleet_a: First fleet
            fleet_b: Second fleet
            on_event: Called once per event; the battle resumes when it returns

        Returns:
            The complete, ordered battle log
        """
        events = []
        for event in self.iter_battle(fleet_a, fleet_b):
            events.append(event)
            if on_event is not None:
                on_event(event)
        return events

    async def run_battle_async(
        self,
        fleet_a: "Fleet",
        fleet_b: "Fleet",
        on_event: Optional[AsyncEventCallback] = None,
    ) -> list[BattleEvent]:
        """Run a battle, awaiting the callback between events.

        ``on_event`` may be a plain function or return an awaitable (for
        example a coroutine that sleeps to pace an animation).
        """
        events = []
        for event in self.iter_battle(fleet_a, fleet_b):
            events.append(event)
            if on_event is not None:
                result = on_event(event)
                if inspect.isawaitable(result):
                    await result
        return events

    def generate_enemy_fleet(self, size: int) -> "Fleet":
        """Generate a random opposing fleet using the engine's random source."""
        if self._fleet_generator is None:
            self._fleet_generator = FleetGenerator(rng=self.rng)
        return self._fleet_generator.generate(size, name=f"{self.config.side_b_label} Fleet")

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def _label(self, side: Side) -> str:
        return self.config.side_a_label if side == Side.PLAYER else self.config.side_b_label

    def _tag(self, side: Side) -> str:
        return f"[{self._label(side).upper()}]"

    def _tags(self) -> dict[Side, str]:
        return {side: self._tag(side) for side in Side}

    def _simulate(self, fleet_a: "Fleet", fleet_b: "Fleet") -> Generator[BattleEvent, None, None]:
        if not fleet_a or not fleet_b:
            self._emit_log(
                f"Battle aborted: {self._label(Side.PLAYER)} ships={len(fleet_a)}, "
                f"{self._label(Side.ENEMY)} ships={len(fleet_b)}",
                level=LogLevel.WARNING,
            )
            yield BattleNotStarted(0, "Cannot start battle: one or both fleets are empty!")
            return

        fleets = {Side.PLAYER: fleet_a, Side.ENEMY: fleet_b}

        yield BattleStarted(0, "=== BATTLE START ===")
        for side, fleet in fleets.items():
            yield FleetStrengthReported(
                0, f"{self._label(side)} Fleet: {len(fleet)} ships", side=side, ship_count=len(fleet)
            )
        yield Separator(0, "")

        round_number = 1
        while fleet_a and fleet_b:
            if not self._can_deal_damage(fleet_a, fleet_b):
                self._emit_log("No ship can deal damage", level=LogLevel.WARNING)
                yield BattleEnded(0, "=== BATTLE END ===")
                yield BattleStalled(0, "STALEMATE! No ship can deal damage", rounds_fought=round_number - 1)
                return

            max_rounds = self.config.max_rounds
            if max_rounds is not None and round_number > max_rounds:
                self._emit_log(f"Round limit of {max_rounds} reached", level=LogLevel.WARNING)
                yield BattleEnded(0, "=== BATTLE END ===")
                yield BattleStalled(0, "STALEMATE! Round limit reached", rounds_fought=max_rounds)
                return

            yield RoundStarted(round_number, f"--- Round {round_number} ---")
            yield from self._fight_round(round_number, fleets)
            yield Separator(round_number, "")

            round_number += 1

        yield from self._conclude(fleet_a, fleet_b)
        self._emit_log(f"Battle concluded: {determine_outcome(fleet_a, fleet_b).name}")

    @staticmethod
    def _can_deal_damage(fleet_a: "Fleet", fleet_b: "Fleet") -> bool:
        return any(ship.weapon.damage > 0 for ship in chain(fleet_a, fleet_b))

    def _fight_round(self, round_number: int, fleets: dict[Side, "Fleet"]) -> Iterator[BattleEvent]:
        """Let every ship that is still alive act once, fastest first."""
        turn_order = build_turn_order(fleets[Side.PLAYER], fleets[Side.ENEMY], self.rng)
        self._emit_debug(
            f"Round {round_number} turn order: {describe_turn_order(turn_order, self._tags())}",
            round_number,
            context={"ships": len(turn_order)},
        )

        for entry in turn_order:
            attacker = entry.ship
            if attacker not in fleets[entry.side]:
                continue  # destroyed earlier this round

            opposing = fleets[entry.side.opponent]
            if not opposing:
                break

            target = opposing[int(self.rng.integers(len(opposing)))]
            result = resolve_attack(attacker, target)

            attacker_tag = self._tag(entry.side)
            target_tag = self._tag(entry.side.opponent)
            yield ShipAttacked(
                round_number,
                f"{attacker_tag} {attacker.name} ({attacker.class_name}) attacks "
                f"{target_tag} {target.name} for {result.total_damage} damage!",
                side=entry.side,
                attacker_name=attacker.name,
                target_name=target.name,
                damage=result.total_damage,
                shield_damage=result.shield_damage,
                hull_damage=result.hull_damage,
                target_ref=weakref.ref(target),
            )

            if result.destroyed:
                # Removal must happen even if the consumer closes the stream here
                try:
                    yield ShipDestroyed(
                        round_number,
                        f"  >> {target_tag} {target.name} DESTROYED!",
                        side=entry.side.opponent,
                        ship_name=target.name,
                    )
                finally:
                    opposing.remove(target)
                if not opposing:
                    break
            else:
                yield ShipStatusReported(
                    round_number,
                    f"  >> {target.name} remaining: Hull {target.hull}, Shield {target.shield}",
                    side=entry.side.opponent,
                    ship_name=target.name,
                    hull=target.hull,
                    shield=target.shield,
                )

    def _conclude(self, fleet_a: "Fleet", fleet_b: "Fleet") -> list[BattleEvent]:
        """Build the closing events for fleets that are no longer both alive."""
        events: list[BattleEvent] = [BattleEnded(0, "=== BATTLE END ===")]
        outcome = determine_outcome(fleet_a, fleet_b)

        if outcome == BattleOutcome.SIDE_A_VICTORY:
            label = self._label(Side.PLAYER)
            events.append(FleetVictorious(0, f"VICTORY! {label} fleet wins!", side=Side.PLAYER))
            events.append(SurvivorsReported(
                0, f"Surviving ships: {len(fleet_a)}", side=Side.PLAYER, survivors=len(fleet_a)
            ))
        elif outcome == BattleOutcome.SIDE_B_VICTORY:
            label = self._label(Side.ENEMY)
            events.append(FleetVictorious(0, f"DEFEAT! {label} fleet wins!", side=Side.ENEMY))
            events.append(SurvivorsReported(
                0, f"{label} survivors: {len(fleet_b)}", side=Side.ENEMY, survivors=len(fleet_b)
            ))
        else:
            events.append(BattleDrawn(0, "DRAW! Both fleets destroyed!"))

        return events

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def _emit_log(self, message: str, category: str = "BATTLE", level: LogLevel = LogLevel.INFO) -> None:
        """Publish a log message on the bus, if there is one."""
        if self.event_manager is None:
            return
        self.event_manager.publish_immediate(
            LogMessage(0, message=message, category=category, level=level, source="BattleEngine"),
            source="BattleEngine",
        )

    def _emit_debug(self, message: str, round_number: int = 0, context: Optional[dict] = None) -> None:
        if self.event_manager is None:
            return
        self.event_manager.publish_immediate(
            DebugMessage(round_number, message=message, source="BattleEngine", context=context),
            source="BattleEngine",
        )
