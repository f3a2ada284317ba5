"""Board engine for a Catan-style game."""

from .board import Board
from .cards import CardBank
from .game_state import GameState, initial_game_state
from .intersections import get_all_intersections, get_intersection
from .player import PlayerState
from .types import DevCardType, Edge, Intersection, OutOfRangeError, ResourceType, Tile, Vertex

__all__ = [
    "Board",
    "CardBank",
    "DevCardType",
    "Edge",
    "GameState",
    "Intersection",
    "OutOfRangeError",
    "PlayerState",
    "ResourceType",
    "Tile",
    "Vertex",
    "get_all_intersections",
    "get_intersection",
    "initial_game_state",
]
