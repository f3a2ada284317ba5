import numpy as np
import pytest

from catan_board.config import GameConfig
from catan_board.engine.cards import CARD_QUANTITIES, CardBank
from catan_board.engine.game_state import initial_game_state
from catan_board.engine.rules import (
    DEV_CARD_COST,
    RuleViolation,
    place_initial_settlement,
    validate_buy_dev_card,
    validate_play_dev_card,
)
from catan_board.engine.types import DevCardType, ResourceType


def _empty_game():
    return initial_game_state(GameConfig(seed=11, beginner_setup=False))


def _fund_card(player, times=1):
    for resource, amount in DEV_CARD_COST.items():
        player.add_resource(resource, amount * times)


def test_buy_dev_card():
    """Buying pays the cost, shrinks the bank and holds the card for a turn."""
    state = _empty_game()
    player = state.player
    _fund_card(player)

    card = state.buy_development_card(DevCardType.KNIGHT)

    assert card == DevCardType.KNIGHT
    assert player.total_resources() == 0
    assert state.card_bank.remaining(DevCardType.KNIGHT) == 13
    assert player.new_dev_cards == [DevCardType.KNIGHT]
    assert player.dev_card_count(DevCardType.KNIGHT) == 0


def test_buy_requires_resources():
    state = _empty_game()
    assert validate_buy_dev_card(state.player, state.card_bank) == [
        RuleViolation(reason="insufficient_resources")
    ]
    with pytest.raises(ValueError, match="insufficient_resources"):
        state.buy_development_card()
    assert state.card_bank.total() == sum(CARD_QUANTITIES.values())


def test_buy_from_exhausted_type_or_empty_bank():
    state = _empty_game()
    _fund_card(state.player)
    state.card_bank.counts[DevCardType.MONOPOLY] = 0
    assert validate_buy_dev_card(state.player, state.card_bank, DevCardType.MONOPOLY) == [
        RuleViolation(reason="card_unavailable")
    ]

    state.card_bank.counts = {kind: 0 for kind in DevCardType}
    assert validate_buy_dev_card(state.player, state.card_bank) == [
        RuleViolation(reason="dev_deck_empty")
    ]
    with pytest.raises(ValueError, match="dev_deck_empty"):
        state.buy_development_card()
    assert state.player.total_resources() == 3


def test_victory_point_card_scores_immediately():
    state = _empty_game()
    player = state.player
    _fund_card(player)

    state.buy_development_card(DevCardType.VICTORY_POINT)

    assert player.victory_points == 1
    assert player.dev_card_count(DevCardType.VICTORY_POINT) == 1
    assert validate_play_dev_card(state.board, player, DevCardType.VICTORY_POINT) == [
        RuleViolation(reason="cannot_play_victory_point")
    ]


def test_cannot_play_card_bought_this_turn():
    state = _empty_game()
    _fund_card(state.player)
    state.buy_development_card(DevCardType.KNIGHT)

    with pytest.raises(ValueError, match="cannot_play_card_bought_this_turn"):
        state.play_development_card(DevCardType.KNIGHT)


def test_cards_become_playable_next_turn():
    state = _empty_game()
    buyer = state.player
    _fund_card(buyer)
    state.buy_development_card(DevCardType.KNIGHT)

    for _ in range(len(state.players)):
        state.end_turn()

    assert state.player is buyer
    assert buyer.new_dev_cards == []
    assert buyer.dev_card_count(DevCardType.KNIGHT) == 1
    state.play_development_card(DevCardType.KNIGHT)
    assert buyer.knights_played == 1


def test_random_draws_follow_the_seed():
    first = CardBank()
    second = CardBank()
    rng_a = np.random.default_rng(3)
    rng_b = np.random.default_rng(3)

    draws_a = [first.draw(rng_a) for _ in range(24)]
    draws_b = [second.draw(rng_b) for _ in range(24)]

    assert draws_a == draws_b
    assert sorted(draws_a) == sorted(
        kind for kind, count in CARD_QUANTITIES.items() for _ in range(count)
    )
    assert first.total() == 0
    with pytest.raises(ValueError):
        first.draw(rng_a)


def test_play_without_card():
    state = _empty_game()
    with pytest.raises(ValueError, match="player_doesnt_have_card"):
        state.play_development_card(DevCardType.MONOPOLY, resource=ResourceType.ORE)


def test_monopoly_card():
    state = _empty_game()
    state.players[0].resources[ResourceType.BRICK] = 1
    state.players[1].resources[ResourceType.BRICK] = 3
    state.players[2].resources[ResourceType.BRICK] = 2
    state.players[0].dev_cards[DevCardType.MONOPOLY] = 1

    state.play_development_card(DevCardType.MONOPOLY, resource=ResourceType.BRICK)

    assert state.players[0].resource_count(ResourceType.BRICK) == 6
    assert state.players[1].resource_count(ResourceType.BRICK) == 0
    assert state.players[2].resource_count(ResourceType.BRICK) == 0
    assert state.players[0].dev_card_count(DevCardType.MONOPOLY) == 0


def test_year_of_plenty_card():
    state = _empty_game()
    player = state.player
    player.dev_cards[DevCardType.YEAR_OF_PLENTY] = 1

    with pytest.raises(ValueError, match="invalid_resource"):
        state.play_development_card(DevCardType.YEAR_OF_PLENTY, resources=(ResourceType.ORE,))

    state.play_development_card(
        DevCardType.YEAR_OF_PLENTY, resources=(ResourceType.ORE, ResourceType.WOOL)
    )
    assert player.resource_count(ResourceType.ORE) == 1
    assert player.resource_count(ResourceType.WOOL) == 1


def test_road_building_card():
    state = _empty_game()
    player = state.player
    place_initial_settlement(state.board, player, 1)
    player.dev_cards[DevCardType.ROAD_BUILDING] = 1

    state.play_development_card(DevCardType.ROAD_BUILDING, roads=[(1, 9), (9, 10)])

    assert state.board.is_road_present(1, 9)
    assert state.board.is_road_present(9, 10)
    assert player.roads == {(1, 9), (9, 10)}
    assert player.total_resources() == 0


def test_road_building_rejects_disconnected_roads():
    state = _empty_game()
    player = state.player
    place_initial_settlement(state.board, player, 1)
    player.dev_cards[DevCardType.ROAD_BUILDING] = 1

    with pytest.raises(ValueError, match="road_not_connected"):
        state.play_development_card(DevCardType.ROAD_BUILDING, roads=[(1, 9), (21, 22)])
    assert state.board.get_roads() == {}
    assert player.dev_card_count(DevCardType.ROAD_BUILDING) == 1
    assert not player.played_dev_card_this_turn


def test_one_dev_card_per_turn_limit():
    state = _empty_game()
    player = state.player
    player.dev_cards[DevCardType.KNIGHT] = 1
    player.dev_cards[DevCardType.MONOPOLY] = 1

    state.play_development_card(DevCardType.KNIGHT)

    assert player.played_dev_card_this_turn
    with pytest.raises(ValueError, match="already_played_dev_card"):
        state.play_development_card(DevCardType.MONOPOLY, resource=ResourceType.ORE)
    assert player.dev_card_count(DevCardType.MONOPOLY) == 1


def test_largest_army_needs_three_knights():
    state = _empty_game()
    player = state.player
    player.knights_played = 1
    player.dev_cards[DevCardType.KNIGHT] = 1

    state.play_development_card(DevCardType.KNIGHT)
    assert not player.has_largest_army
    assert player.victory_points == 0

    player.played_dev_card_this_turn = False
    player.dev_cards[DevCardType.KNIGHT] = 1
    state.play_development_card(DevCardType.KNIGHT)
    assert player.has_largest_army
    assert player.victory_points == 2


def test_largest_army_transfer():
    state = _empty_game()
    holder = state.players[0]
    holder.knights_played = 3
    holder.has_largest_army = True
    holder.victory_points = 2

    state.current_player = 1
    challenger = state.player
    challenger.knights_played = 2
    challenger.dev_cards[DevCardType.KNIGHT] = 2

    # A tie leaves the bonus where it is.
    state.play_development_card(DevCardType.KNIGHT)
    assert holder.has_largest_army
    assert holder.victory_points == 2
    assert challenger.victory_points == 0

    challenger.played_dev_card_this_turn = False
    state.play_development_card(DevCardType.KNIGHT)
    assert challenger.knights_played == 4
    assert challenger.has_largest_army
    assert challenger.victory_points == 2
    assert not holder.has_largest_army
    assert holder.victory_points == 0


def test_victory_with_dev_cards():
    state = initial_game_state(GameConfig(seed=8, beginner_setup=False, victory_points_to_win=3))
    player = state.player
    player.victory_points = 2
    _fund_card(player)

    state.buy_development_card(DevCardType.VICTORY_POINT)

    assert state.check_winner() == player.player_id
