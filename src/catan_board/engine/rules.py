from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

import numpy as np

from . import intersections
from .board import Board
from .cards import CardBank
from .player import PlayerState, ResourceBank
from .types import PRODUCING_RESOURCES, DevCardType, Edge, ResourceType


class BuildKind(str, Enum):
    ROAD = "road"
    SETTLEMENT = "settlement"
    CITY = "city"


COSTS: Dict[BuildKind, ResourceBank] = {
    BuildKind.ROAD: {
        ResourceType.BRICK: 1,
        ResourceType.WOOD: 1,
    },
    BuildKind.SETTLEMENT: {
        ResourceType.BRICK: 1,
        ResourceType.WOOD: 1,
        ResourceType.WOOL: 1,
        ResourceType.GRAIN: 1,
    },
    BuildKind.CITY: {
        ResourceType.ORE: 3,
        ResourceType.GRAIN: 2,
    },
}

Target = Union[int, Edge, Tuple[int, int]]


@dataclass(frozen=True)
class RuleViolation:
    reason: str


def _as_edge(target: Target) -> Optional[Edge]:
    if isinstance(target, Edge):
        return target
    if isinstance(target, tuple) and len(target) == 2:
        return Edge.between(*target)
    return None


def validate_build(
    board: Board, player: PlayerState, kind: BuildKind, target: Target
) -> List[RuleViolation]:
    violations: List[RuleViolation] = []

    if kind == BuildKind.ROAD:
        edge = _as_edge(target)
        if edge is None:
            violations.append(RuleViolation(reason="edge_not_found"))
        elif edge in board.roads:
            violations.append(RuleViolation(reason="edge_occupied"))
        elif not board.are_intersections_adjacent(*edge.ids):
            violations.append(RuleViolation(reason="edge_not_found"))
        elif not board.can_place_road(edge, player.player_id):
            violations.append(RuleViolation(reason="road_not_connected"))
    elif kind == BuildKind.SETTLEMENT:
        vertex_id = target if isinstance(target, int) else None
        if vertex_id is None or not intersections.is_valid_id(vertex_id):
            violations.append(RuleViolation(reason="intersection_not_found"))
        elif not board.is_intersection_connected_to_player_road(vertex_id, player.player_id):
            violations.append(RuleViolation(reason="settlement_not_connected"))
        elif not board.can_place_settlement(vertex_id, player.player_id):
            violations.append(RuleViolation(reason="invalid_settlement_location"))
    elif kind == BuildKind.CITY:
        if not isinstance(target, int) or not board.can_upgrade_settlement_to_city(
            target, player.player_id
        ):
            violations.append(RuleViolation(reason="city_requires_settlement"))
    else:
        violations.append(RuleViolation(reason="unsupported_build"))

    if kind in COSTS and not player.can_afford(COSTS[kind]):
        violations.append(RuleViolation(reason="insufficient_resources"))

    return violations


def _raise_if_illegal(violations: List[RuleViolation]) -> None:
    if violations:
        reasons = ", ".join(v.reason for v in violations)
        raise ValueError(f"Illegal action: {reasons}")


def build_road(board: Board, player: PlayerState, target: Target) -> Edge:
    _raise_if_illegal(validate_build(board, player, BuildKind.ROAD, target))
    edge = _as_edge(target)
    board.place_road(edge, player.player_id)
    player.pay(COSTS[BuildKind.ROAD])
    player.roads.add(edge.ids)
    return edge


def build_settlement(board: Board, player: PlayerState, intersection_id: int) -> None:
    _raise_if_illegal(validate_build(board, player, BuildKind.SETTLEMENT, intersection_id))
    board.place_settlement(intersection_id, player.player_id)
    player.pay(COSTS[BuildKind.SETTLEMENT])
    player.settlements.add(intersection_id)
    player.victory_points += 1


def build_city(board: Board, player: PlayerState, intersection_id: int) -> None:
    _raise_if_illegal(validate_build(board, player, BuildKind.CITY, intersection_id))
    board.upgrade_settlement_to_city(intersection_id, player.player_id)
    player.pay(COSTS[BuildKind.CITY])
    player.settlements.discard(intersection_id)
    player.cities.add(intersection_id)
    player.victory_points += 1


def place_initial_settlement(board: Board, player: PlayerState, intersection_id: int) -> None:
    board.place_initial_settlement(intersection_id, player.player_id)
    player.settlements.add(intersection_id)
    player.victory_points += 1


def place_initial_road(board: Board, player: PlayerState, target: Target) -> Edge:
    edge = _as_edge(target)
    if edge is None:
        raise ValueError(f"Not a road: {target!r}")
    board.place_initial_road(edge, player.player_id)
    player.roads.add(edge.ids)
    return edge


DISCARD_LIMIT = 7


def discard_half(player: PlayerState, rng: np.random.Generator) -> ResourceBank:
    """Drop half (rounded down) of a hand holding more than seven cards.

    The cards are picked at random. Returns what was dropped.
    """
    total = player.total_resources()
    if total <= DISCARD_LIMIT:
        return {}
    hand = [res for res in PRODUCING_RESOURCES for _ in range(player.resource_count(res))]
    dropped: ResourceBank = {}
    for index in rng.choice(len(hand), size=total // 2, replace=False):
        res = hand[int(index)]
        dropped[res] = dropped.get(res, 0) + 1
    player.pay(dropped)
    return dropped


def starting_resources(board: Board, player: PlayerState) -> Set[ResourceType]:
    """Give one card of each resource type found around the player's settlements."""
    unique: Set[ResourceType] = set()
    for intersection_id in player.get_settlements():
        unique.update(board.get_resource_types_around_intersection(intersection_id))
    for resource in unique:
        player.add_resource(resource, 1)
    return unique


# Development cards

DEV_CARD_COST: ResourceBank = {
    ResourceType.ORE: 1,
    ResourceType.GRAIN: 1,
    ResourceType.WOOL: 1,
}

LARGEST_ARMY_MIN_KNIGHTS = 3
LARGEST_ARMY_POINTS = 2


def validate_buy_dev_card(
    player: PlayerState, bank: CardBank, kind: Optional[DevCardType] = None
) -> List[RuleViolation]:
    violations: List[RuleViolation] = []
    if not player.can_afford(DEV_CARD_COST):
        violations.append(RuleViolation(reason="insufficient_resources"))
    if not bank.is_available(kind):
        reason = "dev_deck_empty" if kind is None else "card_unavailable"
        violations.append(RuleViolation(reason=reason))
    return violations


def buy_development_card(
    player: PlayerState,
    bank: CardBank,
    rng: np.random.Generator,
    kind: Optional[DevCardType] = None,
) -> DevCardType:
    """Pay for a card and hand it over; ``kind`` picks a type instead of drawing."""
    _raise_if_illegal(validate_buy_dev_card(player, bank, kind))
    player.pay(DEV_CARD_COST)
    card = bank.draw(rng) if kind is None else bank.take(kind)
    player.receive_dev_card(card)
    return card


def _road_building_violations(
    board: Board, player: PlayerState, roads: Sequence[Target]
) -> List[RuleViolation]:
    if not 1 <= len(roads) <= 2:
        return [RuleViolation(reason="invalid_road_count")]
    placed: List[Edge] = []
    for target in roads:
        edge = _as_edge(target)
        if edge is None or not board.are_intersections_adjacent(*edge.ids):
            return [RuleViolation(reason="edge_not_found")]
        if edge in board.roads or edge in placed:
            return [RuleViolation(reason="edge_occupied")]
        # The second road may hang off the first one.
        touches_new_road = any(set(edge.ids) & set(other.ids) for other in placed)
        if not (touches_new_road or board.can_place_road(edge, player.player_id)):
            return [RuleViolation(reason="road_not_connected")]
        placed.append(edge)
    return []


def validate_play_dev_card(
    board: Board,
    player: PlayerState,
    kind: DevCardType,
    *,
    resource: Optional[ResourceType] = None,
    resources: Sequence[ResourceType] = (),
    roads: Sequence[Target] = (),
) -> List[RuleViolation]:
    if player.played_dev_card_this_turn:
        return [RuleViolation(reason="already_played_dev_card")]
    if kind == DevCardType.VICTORY_POINT:
        return [RuleViolation(reason="cannot_play_victory_point")]
    if player.dev_card_count(kind) <= 0:
        if kind in player.new_dev_cards:
            return [RuleViolation(reason="cannot_play_card_bought_this_turn")]
        return [RuleViolation(reason="player_doesnt_have_card")]

    if kind == DevCardType.MONOPOLY:
        if resource is None or resource == ResourceType.NONE:
            return [RuleViolation(reason="invalid_resource")]
    elif kind == DevCardType.YEAR_OF_PLENTY:
        if len(resources) != 2 or ResourceType.NONE in resources:
            return [RuleViolation(reason="invalid_resource")]
    elif kind == DevCardType.ROAD_BUILDING:
        return _road_building_violations(board, player, roads)
    return []


def update_largest_army(players: Iterable[PlayerState]) -> Optional[int]:
    """Move the largest army bonus to whoever has played the most knights.

    A holder keeps the bonus on a tie. Returns the holder's player ID.
    """
    players = list(players)
    holder = next((p for p in players if p.has_largest_army), None)
    leader = max(players, key=lambda p: p.knights_played, default=None)
    if leader is None or leader.knights_played < LARGEST_ARMY_MIN_KNIGHTS:
        return holder.player_id if holder else None
    if holder is not None and leader.knights_played <= holder.knights_played:
        return holder.player_id
    if holder is not None:
        holder.has_largest_army = False
        holder.victory_points -= LARGEST_ARMY_POINTS
    leader.has_largest_army = True
    leader.victory_points += LARGEST_ARMY_POINTS
    return leader.player_id


def play_development_card(
    board: Board,
    player: PlayerState,
    players: Iterable[PlayerState],
    kind: DevCardType,
    *,
    resource: Optional[ResourceType] = None,
    resources: Sequence[ResourceType] = (),
    roads: Sequence[Target] = (),
) -> None:
    players = list(players)
    _raise_if_illegal(
        validate_play_dev_card(
            board, player, kind, resource=resource, resources=resources, roads=roads
        )
    )
    player.discard_dev_card(kind)
    player.played_dev_card_this_turn = True

    if kind == DevCardType.KNIGHT:
        player.knights_played += 1
        update_largest_army(players)
    elif kind == DevCardType.MONOPOLY:
        for other in players:
            if other.player_id == player.player_id:
                continue
            taken = other.resource_count(resource)
            if taken:
                other.use_resources(resource, taken)
                player.add_resource(resource, taken)
    elif kind == DevCardType.YEAR_OF_PLENTY:
        for picked in resources:
            player.add_resource(picked, 1)
    elif kind == DevCardType.ROAD_BUILDING:
        for target in roads:
            place_initial_road(board, player, target)


# Trading

TRADE_RATE = 4


def validate_bank_trade(
    player: PlayerState, give: ResourceType, receive: ResourceType, rate: int = TRADE_RATE
) -> List[RuleViolation]:
    if give == receive or ResourceType.NONE in (give, receive):
        return [RuleViolation(reason="invalid_trade_pair")]
    if rate <= 0:
        return [RuleViolation(reason="invalid_trade_rate")]
    if player.resource_count(give) < rate:
        return [RuleViolation(reason="insufficient_resources")]
    return []


def trade_with_bank(
    player: PlayerState, give: ResourceType, receive: ResourceType, rate: int = TRADE_RATE
) -> None:
    _raise_if_illegal(validate_bank_trade(player, give, receive, rate))
    player.use_resources(give, rate)
    player.add_resource(receive, 1)


def _valid_bundle(bundle: ResourceBank) -> bool:
    return all(res != ResourceType.NONE and amount >= 0 for res, amount in bundle.items())


def validate_player_trade(
    player: PlayerState, other: PlayerState, give: ResourceBank, receive: ResourceBank
) -> List[RuleViolation]:
    if other.player_id == player.player_id:
        return [RuleViolation(reason="invalid_trade_target")]
    if not (_valid_bundle(give) and _valid_bundle(receive)) or not any(
        list(give.values()) + list(receive.values())
    ):
        return [RuleViolation(reason="invalid_trade_resource")]
    violations: List[RuleViolation] = []
    if not player.can_afford(give):
        violations.append(RuleViolation(reason="insufficient_resources"))
    if not other.can_afford(receive):
        violations.append(RuleViolation(reason="counterparty_insufficient_resources"))
    return violations


def trade_with_player(
    player: PlayerState, other: PlayerState, give: ResourceBank, receive: ResourceBank
) -> None:
    """Swap ``give`` from ``player`` for ``receive`` from ``other`` in one step."""
    _raise_if_illegal(validate_player_trade(player, other, give, receive))
    player.pay(give)
    other.pay(receive)
    for res, amount in give.items():
        if amount:
            other.add_resource(res, amount)
    for res, amount in receive.items():
        if amount:
            player.add_resource(res, amount)
