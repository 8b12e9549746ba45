"""Tests for seating, dealing, bidding and trick recording.

These tests verify:
- Seat rotation and the trick winner leading next
- Round limits and dealing bounds
- Bid options for the last bidder
- Round and game state transitions
"""

import logging
import random

import pytest

from wizard.config import settings

from wizard.exceptions import DealError, EmptyTrickError, UnknownPlayerError
from wizard.models.card import FOOL, WIZARD, Card
from wizard.models.enums import CardColor, GameState
from wizard.models.game import Game
from wizard.models.player import Player
from wizard.models.round import Round


def make_game(count: int = 4, seed: int = 42) -> Game:
    game = Game(rng=random.Random(seed))
    for i in range(count):
        game.add_player(Player(name=f"Player{i}"))
    return game


def names(game: Game) -> list[str]:
    return [p.name for p in game.players]


# =============================================================================
# SEATING
# =============================================================================


class TestSeating:
    """Test player seating and rotation."""

    def test_add_player_rejects_duplicates(self):
        game = make_game(3)
        assert not game.add_player(Player(name="Player0"))
        assert len(game.players) == 3

    def test_add_player_rejects_full_table(self):
        game = make_game(6)
        assert not game.add_player(Player(name="Extra"))

    def test_can_start(self):
        assert not make_game(2).can_start()
        assert make_game(3).can_start()
        assert make_game(6).can_start()

    def test_shift_rotates_right(self):
        game = make_game(3)
        game.shift()
        assert names(game) == ["Player2", "Player0", "Player1"]

    def test_shift_till(self):
        game = make_game(4)
        game.shift_till(game.players[2])
        assert names(game) == ["Player2", "Player3", "Player0", "Player1"]

    def test_shift_till_unknown_player(self):
        game = make_game(3)
        with pytest.raises(UnknownPlayerError):
            game.shift_till(Player(name="Stranger"))

    def test_shift_empty_table(self):
        game = Game()
        game.shift()
        assert game.players == []

    @pytest.mark.parametrize("name", ["", "X"])
    def test_add_player_rejects_short_names(self, name):
        game = make_game(3)
        assert not game.add_player(Player(name=name))
        assert len(game.players) == 3

    def test_rejected_seat_is_logged(self, caplog):
        game = make_game(3)
        with caplog.at_level(logging.WARNING, logger="wizard.models.game"):
            game.add_player(Player(name="Player0"))
        assert "reason=name_taken" in caplog.records[-1].getMessage()

    def test_table_limits_are_fields(self):
        game = Game(min_players=2, max_players=3)
        for i in range(3):
            assert game.add_player(Player(name=f"Player{i}"))
        assert not game.add_player(Player(name="Player3"))
        assert game.can_start()

    def test_table_limits_default_to_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "min_players", 4)
        monkeypatch.setattr(settings, "max_players", 8)
        game = make_game(8)
        assert game.max_players == 8
        assert len(game.players) == 8
        assert not make_game(3).can_start()


# =============================================================================
# DEALING
# =============================================================================


class TestDealing:
    """Test round limits and card assignment."""

    @pytest.mark.parametrize(("count", "limit"), [(3, 20), (4, 15), (5, 12), (6, 10)])
    def test_round_limit(self, count, limit):
        assert make_game(count).round_limit() == limit

    def test_round_limit_without_players(self):
        with pytest.raises(DealError):
            Game().round_limit()

    def test_assign_cards(self):
        game = make_game(4)
        game.assign_cards(5)
        hands = [p.hand for p in game.players]
        assert all(len(hand) == 5 for hand in hands)
        assert len(game.deck.cards) == 40

    def test_assign_cards_replaces_hands(self):
        game = make_game(3)
        game.assign_cards(2)
        game.assign_cards(3)
        assert all(len(p.hand) == 3 for p in game.players)

    @pytest.mark.parametrize("amount", [0, 16, -1])
    def test_assign_cards_out_of_bounds(self, amount):
        game = make_game(4)
        with pytest.raises(DealError):
            game.assign_cards(amount)

    def test_full_deal_uses_whole_deck(self):
        game = make_game(4)
        game.assign_cards(15)
        assert sum(len(p.hand) for p in game.players) == 60
        assert game.reveal_trump() is None

    def test_reveal_trump_from_number_card(self):
        game = make_game(3)
        game.deck.cards = [Card.number_card(4, CardColor.RED)]
        assert game.reveal_trump() == CardColor.RED

    @pytest.mark.parametrize("card", [WIZARD, FOOL])
    def test_reveal_trump_special_card(self, card):
        game = make_game(3)
        game.deck.cards = [card]
        assert game.reveal_trump() is None


# =============================================================================
# BIDDING
# =============================================================================


class TestBidOptions:
    """Test bid options."""

    def test_not_last_gets_everything(self):
        assert Game.bid_options(3, 2, is_last=False) == [0, 1, 2, 3]

    def test_last_cannot_even_out(self):
        assert Game.bid_options(3, 2, is_last=True) == [0, 2, 3]

    def test_last_when_overbid(self):
        assert Game.bid_options(2, 5, is_last=True) == [0, 1, 2]

    def test_first_round_last_bidder(self):
        assert Game.bid_options(1, 0, is_last=True) == [0]


# =============================================================================
# ROUNDS AND TRICKS
# =============================================================================


class TestRoundFlow:
    """Test round progression and trick recording."""

    def test_start_new_round(self):
        game = make_game(4)
        round_obj = game.start_new_round(CardColor.GREEN)

        assert round_obj.number == 1
        assert round_obj.trump == CardColor.GREEN
        assert game.state == GameState.BIDDING
        assert all(len(p.hand) == 1 for p in game.players)
        assert round_obj.dealt_cards == {p.name: p.hand for p in game.players}
        assert game.players[0].name == game.seating[round_obj.starter_player_index]

    def test_starter_rotates_each_round(self):
        game = make_game(4)
        first = game.start_new_round()
        second = game.start_new_round()
        assert second.starter_player_index == (first.starter_player_index + 1) % 4
        assert game.players[0].name == game.seating[second.starter_player_index]
        assert all(len(p.hand) == 2 for p in game.players)

    def test_place_bids_moves_to_picking(self):
        game = make_game(3)
        game.start_new_round()
        for player in game.players:
            game.place_bid(player, 0)
        assert game.state == GameState.PICKING
        assert game.get_current_round().total_bids() == 0

    def test_play_trick_credits_winner_and_rotates(self):
        game = make_game(3)
        game.start_new_round(CardColor.RED)
        leader, second, third = game.players
        leader.hand = [Card.number_card(5, CardColor.BLUE)]
        second.hand = [Card.number_card(2, CardColor.RED)]
        third.hand = [Card.number_card(13, CardColor.BLUE)]

        winner = game.play_trick([(p.hand[0], p) for p in list(game.players)])

        assert winner is second
        assert second.tricks_won == 1
        assert game.players[0] is second
        assert all(p.hand == [] for p in game.players)
        current = game.get_current_round()
        assert current.get_tricks_won(second.name) == 1
        assert current.is_complete()

    def test_play_trick_empty_raises(self):
        game = make_game(3)
        game.start_new_round()
        with pytest.raises(EmptyTrickError):
            game.play_trick([])

    def test_play_trick_without_round(self):
        game = make_game(3)
        with pytest.raises(RuntimeError):
            game.play_trick([(FOOL, game.players[0])])

    def test_game_ends_after_last_round(self):
        game = make_game(6)
        game.current_round_number = game.round_limit() - 1
        game.rounds.append(Round(number=game.current_round_number, starter_player_index=0))
        game.seating = names(game)
        game.start_new_round()
        for _ in range(game.round_limit()):
            plays = [(p.hand[0], p) for p in list(game.players)]
            game.play_trick(plays)
        assert game.is_game_complete()
        assert game.state == GameState.ENDED

    def test_start_round_past_limit_leaves_game_unchanged(self):
        game = make_game(6)
        for _ in range(game.round_limit()):
            game.start_new_round()
        before = (game.current_round_number, game.state, len(game.rounds), [len(p.hand) for p in game.players])

        with pytest.raises(DealError):
            game.start_new_round()

        after = (game.current_round_number, game.state, len(game.rounds), [len(p.hand) for p in game.players])
        assert after == before == (10, GameState.BIDDING, 10, [10] * 6)

    def test_leaderboard(self):
        game = make_game(3)
        game.start_new_round()
        plays = [(p.hand[0], p) for p in list(game.players)]
        winner = game.play_trick(plays)
        board = game.get_leaderboard()
        assert board[0] == {"name": winner.name, "tricks": 1}
        assert sum(entry["tricks"] for entry in board) == 1


class TestRound:
    """Test Round bookkeeping."""

    def test_current_trick(self, p1):
        round_obj = Round(number=2, starter_player_index=0, trump=CardColor.BLUE)
        assert round_obj.get_current_trick() is None

        trick = round_obj.start_trick()
        assert trick.trump == CardColor.BLUE
        assert round_obj.get_current_trick() is trick

        trick.add_card(p1, FOOL)
        trick.determine_winner()
        assert round_obj.get_current_trick() is None
        assert not round_obj.is_complete()

    def test_bids(self):
        round_obj = Round(number=3, starter_player_index=1)
        round_obj.add_bid("Max", 2)
        assert round_obj.has_player_bid("Max")
        assert not round_obj.all_bids_placed(3)
        assert str(round_obj) == "Round 3 (trump none): 1 bids, 0 tricks"


class TestPlayer:
    """Test Player round bookkeeping."""

    def test_reset_round(self):
        player = Player(name="Max", hand=[FOOL], bid=1, tricks_won=1)
        assert player.bid_correct()
        player.reset_round()
        assert player.hand == []
        assert not player.made_bid()
        assert player.tricks_won == 0

    def test_hand_operations(self):
        player = Player(name="Max")
        player.add_card(WIZARD)
        player.add_card(WIZARD)
        assert player.has_card(WIZARD)
        player.remove_card(WIZARD)
        assert player.hand == [WIZARD]
        player.remove_card(FOOL)
        assert player.hand == [WIZARD]
        assert str(Player(name="Bot1", is_bot=True)) == "Bot1 (Bot)"
