#!/usr/bin/env python3

import argparse
import time

from fleet_battle.core.data import ShipClass
from fleet_battle.core.engine import BattleConfig
from fleet_battle.core.events import BattleEvent, EventManager, LogSaveRequested
from fleet_battle.game.combat import BattleEngine, summarize_battle
from fleet_battle.game.entities import Fleet
from fleet_battle.game.managers import LogManager
from fleet_battle.game.shipyard import Shipyard


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fleet battle simulator demo")
    parser.add_argument("--size", type=int, default=5, help="Number of ships per fleet")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible battle")
    parser.add_argument("--delay", type=float, default=0.0, help="Seconds to pause after each battle event")
    parser.add_argument("--config", default=None, help="YAML file with a 'battle' section")
    parser.add_argument("--save-log", action="store_true", help="Write the battle log to logs/")
    parser.add_argument("--log-dir", default="logs", help="Directory for saved logs")
    parser.add_argument("--debug", action="store_true", help="Show debug messages in the log summary")
    return parser.parse_args()


def build_player_fleet(shipyard: Shipyard, size: int) -> Fleet:
    classes = shipyard.ship_classes or list(ShipClass)
    fleet = shipyard.build_fleet((classes[i % len(classes)] for i in range(size)), name="Player Fleet")
    for index, ship in enumerate(fleet):
        ship.name = f"{ship.name}-{index + 1}"
    return fleet


def print_fleet(title: str, fleet: Fleet) -> None:
    print(f"=== {title} ({len(fleet)} ships) ===")
    for ship in fleet:
        print(f"  {ship.get_info()}")
    print()


def main():
    args = parse_args()

    config = BattleConfig.from_yaml(args.config) if args.config else BattleConfig()

    event_manager = EventManager()
    log_manager = LogManager(event_manager)
    if args.debug:
        log_manager.toggle_debug()

    shipyard = Shipyard()
    engine = BattleEngine(seed=args.seed, config=config, event_manager=event_manager)

    player_fleet = build_player_fleet(shipyard, args.size)
    enemy_fleet = engine.generate_enemy_fleet(len(player_fleet))
    starting_ships = len(player_fleet)

    print_fleet(f"{config.side_a_label} Fleet", player_fleet)
    print_fleet(f"{config.side_b_label} Fleet", enemy_fleet)

    def show(event: BattleEvent) -> None:
        print(event.message)
        if args.delay > 0:
            time.sleep(args.delay)

    events = engine.run_battle(player_fleet, enemy_fleet, on_event=show)

    report = summarize_battle(events)
    print()
    for line in report.format_lines(config.side_a_label, config.side_b_label):
        print(line)

    lost = starting_ships - len(player_fleet)
    print(f"Losses: {lost} of {starting_ships} ships")

    repaired = player_fleet.repair_all()
    log_manager.fleet(f"Repaired {repaired} damaged ships; {len(player_fleet)} ready for the next battle")
    print(f"Repaired {repaired} ships")

    if args.save_log:
        event_manager.publish(LogSaveRequested(0, log_dir=args.log_dir), source="main")
        event_manager.process_events()

    if args.debug:
        print()
        for message in log_manager.get_messages(count=20):
            print(message.format(include_timestamp=True))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nBattle interrupted by user")
