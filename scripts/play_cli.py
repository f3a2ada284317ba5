from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from catan_board.config import GameConfig
from catan_board.engine import intersections
from catan_board.engine.game_state import GameState, initial_game_state
from catan_board.engine.layout import STANDARD_TILES
from catan_board.engine.rules import (
    TRADE_RATE,
    build_city,
    build_road,
    build_settlement,
    trade_with_bank,
    trade_with_player,
)
from catan_board.engine.types import PRODUCING_RESOURCES, DevCardType, ResourceType

HELP_TEXT = """
Commands:
  help                         Show this help text
  state                        Show current game state summary
  tiles                        List tiles (coord, resource, number, structures)
  intersection <id>            Show an intersection, its neighbors and resources
  edges                        List every edge and its owner
  roll [value]                 Roll dice (or force a value)
  build_settlement <id>        Build settlement
  build_city <id>              Upgrade a settlement to a city
  build_road <id1> <id2>       Build road between two intersections
  cards                        Show your development cards and the bank
  buy_card [type]              Buy a development card (random unless a type is named)
  play_card knight             Play a knight
  play_card monopoly <res>     Take every <res> card from the other players
  play_card year_of_plenty <res1> <res2>
                               Take two resources from the bank
  play_card road_building <a> <b> [<c> <d>]
                               Build up to two free roads
  trade_bank <give> <receive>  Trade 4 of one resource for 1 of another
  trade <player> <give> <n> <receive> <m>
                               Trade n of <give> for m of <receive> with a player
  end                          End turn
  quit                         Exit
""".strip()


def _resource_str(resources) -> str:
    return ", ".join(f"{res.value}:{resources[res]}" for res in PRODUCING_RESOURCES)


def _print_state(state: GameState) -> None:
    print(f"Turn {state.turn_index} | {state.player.name}")
    if state.last_roll is not None:
        print(f"Last roll: {state.last_roll}")
    if state.winner is not None:
        print(f"Winner: {state.players[state.winner].name}")
    for player in state.players.values():
        print(
            f"{player.name} | VP {player.victory_points} | "
            f"Roads {len(player.roads)} | Settlements {sorted(player.settlements)} | "
            f"Cities {sorted(player.cities)} | Resources: {_resource_str(player.resources)}"
        )


def _print_tiles(state: GameState) -> None:
    board = state.board
    for coord, _, _ in STANDARD_TILES:
        structures = board.structures_on_tile(coord)
        print(f"Tile {coord} | {board.tile_string(coord)}")
        for iid, owner in structures["settlements"]:
            print(f"    Settlement by P{owner} on intersection {iid}")
        for iid, owner in structures["cities"]:
            print(f"    City by P{owner} on intersection {iid}")
        for (a, b), owner in structures["roads"]:
            print(f"    Road by P{owner} between {a} and {b}")


def _print_intersection(state: GameState, intersection_id: int) -> None:
    board = state.board
    node = intersections.get_intersection(intersection_id)
    resources = board.get_resource_types_around_intersection(intersection_id)
    print(f"Intersection {intersection_id} {node}")
    print(f"  Neighbors: {board.neighbors(intersection_id)}")
    print(f"  Resources: {', '.join(r.value for r in resources) or 'none'}")
    owners = board.settlement_owners(intersection_id)
    if owners:
        print(f"  Settlement by {', '.join(f'P{p}' for p in sorted(owners))}")
    city = board.city_owner(intersection_id)
    if city is not None:
        print(f"  City by P{city}")


def _print_edges(state: GameState) -> None:
    roads = state.board.get_roads()
    for edge in state.board.all_edges():
        a, b = edge.ids
        owner = roads.get(edge)
        if owner is None:
            print(f"({a}-{b}) | empty")
        else:
            print(f"({a}-{b}) | P{owner}")


def _print_cards(state: GameState) -> None:
    player = state.player
    held = ", ".join(
        f"{kind.value}:{player.dev_card_count(kind)}"
        for kind in DevCardType
        if player.dev_card_count(kind)
    )
    print(f"Playable: {held or 'none'}")
    if player.new_dev_cards:
        print(f"Bought this turn: {', '.join(card.value for card in player.new_dev_cards)}")
    print(f"Knights played: {player.knights_played}")
    print(f"Cards left in bank: {state.card_bank.total()}")


def _play_card(state: GameState, args: List[str]) -> None:
    kind = DevCardType(args[0])
    if kind == DevCardType.MONOPOLY:
        state.play_development_card(kind, resource=ResourceType(args[1]))
    elif kind == DevCardType.YEAR_OF_PLENTY:
        state.play_development_card(
            kind, resources=(ResourceType(args[1]), ResourceType(args[2]))
        )
    elif kind == DevCardType.ROAD_BUILDING:
        ids = [int(value) for value in args[1:]]
        roads = [(ids[i], ids[i + 1]) for i in range(0, len(ids) - 1, 2)]
        state.play_development_card(kind, roads=roads)
    else:
        state.play_development_card(kind)


def _print_awards(state: GameState) -> None:
    if state.last_roll == 7:
        print("Rolled 7: no production")
        for pid, dropped in sorted(state.last_discards.items()):
            parts = ", ".join(f"{amount} {res.value}" for res, amount in dropped.items())
            print(f"{state.players[pid].name} discards {parts}")
        return
    if not state.last_awards:
        print("No resources produced")
        return
    for pid, bundle in sorted(state.last_awards.items()):
        parts = ", ".join(f"{amount} {res.value}" for res, amount in bundle.items())
        print(f"{state.players[pid].name} receives {parts}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Catan on the console")
    parser.add_argument("--seed", type=int, default=None, help="Seed for dice rolls")
    parser.add_argument("--names", nargs="*", default=None, help="Player names")
    parser.add_argument(
        "--target", type=int, default=10, help="Victory points needed to win"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = GameConfig(seed=args.seed, victory_points_to_win=args.target)
    state = initial_game_state(config, names=args.names)
    print("Catan CLI - type 'help' for commands")

    while state.winner is None:
        prompt = f"P{state.current_player}> "
        try:
            raw = input(prompt).strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting")
            return 0
        if not raw:
            continue
        parts = raw.split()
        cmd = parts[0].lower()
        player = state.player

        try:
            if cmd == "help":
                print(HELP_TEXT)
            elif cmd == "state":
                _print_state(state)
            elif cmd == "tiles":
                _print_tiles(state)
            elif cmd == "intersection":
                _print_intersection(state, int(parts[1]))
            elif cmd == "edges":
                _print_edges(state)
            elif cmd == "roll":
                if state.last_roll is not None:
                    print("Already rolled this turn")
                    continue
                value = int(parts[1]) if len(parts) > 1 else None
                print(f"Rolled {state.roll(value)}")
                _print_awards(state)
            elif cmd == "build_settlement":
                build_settlement(state.board, player, int(parts[1]))
                print(f"{player.name} built a settlement at {parts[1]}")
            elif cmd == "build_city":
                build_city(state.board, player, int(parts[1]))
                print(f"{player.name} built a city at {parts[1]}")
            elif cmd == "build_road":
                edge = build_road(state.board, player, (int(parts[1]), int(parts[2])))
                print(f"{player.name} built a road between {edge.ids[0]} and {edge.ids[1]}")
            elif cmd == "cards":
                _print_cards(state)
            elif cmd == "buy_card":
                kind = DevCardType(parts[1]) if len(parts) > 1 else None
                card = state.buy_development_card(kind)
                print(f"{player.name} bought a {card.value} card")
            elif cmd == "play_card":
                _play_card(state, parts[1:])
                print(f"{player.name} played {parts[1]}")
            elif cmd == "trade_bank":
                give, receive = ResourceType(parts[1]), ResourceType(parts[2])
                trade_with_bank(player, give, receive)
                print(f"{player.name} traded {TRADE_RATE} {give.value} for 1 {receive.value}")
            elif cmd == "trade":
                other = state.players[int(parts[1])]
                give = {ResourceType(parts[2]): int(parts[3])}
                receive = {ResourceType(parts[4]): int(parts[5])}
                trade_with_player(player, other, give, receive)
                print(f"{player.name} traded with {other.name}")
            elif cmd in {"end", "pass"}:
                state.end_turn()
            elif cmd == "quit":
                return 0
            else:
                print("Unknown command. Type 'help'.")
        except Exception as exc:
            print(f"Error: {exc}")

        if state.check_winner() is not None:
            print(f"{state.players[state.winner].name} wins!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
