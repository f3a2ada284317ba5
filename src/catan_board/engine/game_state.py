from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..config import GameConfig
from ..utils.repro import seed_everything
from .board import Award, Board
from .cards import CardBank
from .player import PlayerState, ResourceBank
from .rules import (
    buy_development_card,
    discard_half,
    place_initial_road,
    place_initial_settlement,
    play_development_card,
    starting_resources,
)
from .types import DevCardType

# (settlements, roads) per player for the beginner layout.
BEGINNER_PLACEMENTS: List[Tuple[Tuple[int, int], Tuple[Tuple[int, int], Tuple[int, int]]]] = [
    ((41, 45), ((41, 42), (35, 45))),
    ((14, 43), ((13, 14), (43, 44))),
    ((20, 36), ((19, 20), (25, 36))),
]


def roll_dice(rng: np.random.Generator) -> int:
    return int(rng.integers(1, 7)) + int(rng.integers(1, 7))


@dataclass
class GameState:
    board: Board
    players: Dict[int, PlayerState]
    config: GameConfig
    rng: np.random.Generator
    current_player: int = 0
    turn_index: int = 0
    last_roll: int | None = None
    last_awards: Award = field(default_factory=dict)
    last_discards: Dict[int, ResourceBank] = field(default_factory=dict)
    winner: int | None = None
    card_bank: CardBank = field(default_factory=CardBank)

    @property
    def player(self) -> PlayerState:
        return self.players[self.current_player]

    def roll(self, value: Optional[int] = None) -> int:
        roll = roll_dice(self.rng) if value is None else int(value)
        if not 2 <= roll <= 12:
            raise ValueError(f"Dice roll out of range: {roll}")
        self.last_roll = roll
        self.last_discards = {}
        if roll == 7:
            self.last_awards = {}
            for pid, player in self.players.items():
                dropped = discard_half(player, self.rng)
                if dropped:
                    self.last_discards[pid] = dropped
        else:
            self.last_awards = self.board.distribute_resources_based_on_dice_roll(
                roll, self.players.values()
            )
        return roll

    def end_turn(self) -> None:
        self.check_winner()
        self.current_player = (self.current_player + 1) % len(self.players)
        self.turn_index += 1
        self.last_roll = None
        self.last_awards = {}
        self.last_discards = {}
        self.player.start_turn()

    def buy_development_card(self, kind: Optional[DevCardType] = None) -> DevCardType:
        return buy_development_card(self.player, self.card_bank, self.rng, kind)

    def play_development_card(self, kind: DevCardType, **options) -> None:
        play_development_card(self.board, self.player, self.players.values(), kind, **options)

    def check_winner(self) -> int | None:
        if self.winner is not None:
            return self.winner
        count = len(self.players)
        # The player whose turn it is wins a simultaneous finish.
        for offset in range(count):
            pid = (self.current_player + offset) % count
            if self.players[pid].victory_points >= self.config.victory_points_to_win:
                self.winner = pid
                break
        return self.winner


def apply_beginner_setup(board: Board, players: Dict[int, PlayerState]) -> None:
    for pid, (settlements, _) in enumerate(BEGINNER_PLACEMENTS):
        player = players[pid]
        for intersection_id in settlements:
            place_initial_settlement(board, player, intersection_id)
    for player in players.values():
        starting_resources(board, player)
    for pid, (_, roads) in enumerate(BEGINNER_PLACEMENTS):
        for road in roads:
            place_initial_road(board, players[pid], road)


def initial_game_state(
    config: GameConfig | None = None, names: Optional[List[str]] = None
) -> GameState:
    if config is None:
        config = GameConfig()
    if config.seed is not None:
        rng = seed_everything(config.seed)
    else:
        rng = np.random.default_rng()

    players: Dict[int, PlayerState] = {}
    for pid in range(config.num_players):
        name = names[pid] if names and pid < len(names) else ""
        players[pid] = PlayerState(player_id=pid, name=name)

    board = Board()
    if config.beginner_setup:
        apply_beginner_setup(board, players)

    return GameState(board=board, players=players, config=config, rng=rng)
