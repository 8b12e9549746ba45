"""Game model for seating, dealing and recording tricks."""

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from wizard.config import settings
from wizard.constants import DECK_SIZE, MIN_NAME_LENGTH
from wizard.exceptions import DealError, UnknownPlayerError
from wizard.models.card import Card
from wizard.models.deck import Deck
from wizard.models.enums import CardColor, GameState
from wizard.models.player import Player
from wizard.models.round import Round
from wizard.services.log_service import LogService

log_service = LogService(__name__)


@dataclass
class Game:
    """Represents a complete Wizard game.

    Players sit in ``players`` order; the first seat leads the next trick.
    A game runs ``round_limit()`` rounds and round N deals N cards each.

    Attributes:
        players: Players in seating order, leader first
        rounds: Completed and current rounds
        current_round_number: Current round (0 before the first deal)
        state: Current game state
        rng: Random source for shuffling and the first starter
        deck: The deck of cards
        seating: Player names in join order, fixed at the first deal
        min_players: Fewest players needed to start
        max_players: Most players allowed at the table

    """

    players: list[Player] = field(default_factory=list)
    rounds: list[Round] = field(default_factory=list)
    current_round_number: int = 0
    state: GameState = GameState.PENDING
    rng: random.Random = field(default_factory=random.Random)
    deck: Deck | None = None
    seating: list[str] = field(default_factory=list)
    min_players: int = field(default_factory=lambda: settings.min_players)
    max_players: int = field(default_factory=lambda: settings.max_players)

    def __post_init__(self) -> None:
        """Share the game's random source with its deck."""
        if self.deck is None:
            self.deck = Deck(self.rng)

    def add_player(self, player: Player) -> bool:
        """Seat a player.

        Returns False when the table is full, the name is too short or the
        name is taken.
        """
        reason = None
        if len(self.players) >= self.max_players:
            reason = "table_full"
        elif len(player.name) < MIN_NAME_LENGTH:
            reason = "name_too_short"
        elif any(p.name == player.name for p in self.players):
            reason = "name_taken"
        if reason is not None:
            log_service.warning({"event": "seat_rejected", "player": player.name, "reason": reason})
            return False
        self.players.append(player)
        return True

    def get_player(self, name: str) -> Player | None:
        """Get a player by name."""
        for player in self.players:
            if player.name == name:
                return player
        return None

    def can_start(self) -> bool:
        """Check if game has enough players to start."""
        return self.min_players <= len(self.players) <= self.max_players

    def shift(self) -> None:
        """Rotate the seating one place to the right; the last seat leads next."""
        if self.players:
            self.players.insert(0, self.players.pop())

    def shift_till(self, player: Player) -> None:
        """Rotate the seating until ``player`` sits first.

        Raises:
            UnknownPlayerError: If the player is not seated

        """
        if self.get_player(player.name) is None:
            msg = f"Player {player.name!r} is not seated in this game"
            raise UnknownPlayerError(msg)
        while self.players[0].name != player.name:
            self.shift()

    def round_limit(self) -> int:
        """Number of rounds for the current table: the deck split evenly."""
        if not self.players:
            msg = "No players seated"
            raise DealError(msg)
        return DECK_SIZE // len(self.players)

    def assign_cards(self, amount: int) -> None:
        """Deal ``amount`` fresh cards to every player from a shuffled deck.

        Raises:
            DealError: If ``amount`` is outside 1..round_limit()

        """
        limit = self.round_limit()
        if not 1 <= amount <= limit:
            msg = f"Cannot deal {amount} cards each; allowed is 1 to {limit} for {len(self.players)} players"
            raise DealError(msg)

        self.deck.shuffle()
        hands = self.deck.deal(len(self.players), amount)
        for player, hand in zip(self.players, hands, strict=True):
            player.hand = hand

    def reveal_trump(self) -> CardColor | None:
        """Turn the top undealt card to fix the trump color.

        A number card sets its color as trump. A Fool, a Wizard or an empty
        deck (last round) leaves the round without trump.
        """
        if not self.deck.cards:
            return None
        top = self.deck.cards[0]
        return top.color if top.is_number() else None

    @staticmethod
    def bid_options(max_bid: int, current_total: int, is_last: bool) -> list[int]:
        """Bids a player may announce.

        Any bid from 0 to ``max_bid``; the last bidder may not pick the bid
        that makes all bids add up to ``max_bid``.
        """
        options = list(range(max_bid + 1))
        if is_last:
            forbidden = max_bid - current_total
            options = [bid for bid in options if bid != forbidden]
        return options

    def get_current_round(self) -> Round | None:
        """Get the current round."""
        if self.rounds:
            return self.rounds[-1]
        return None

    def start_new_round(self, trump: CardColor | None = None, *, reveal: bool = False) -> Round:
        """Start the next round: reset players, deal, and fix the trump.

        Args:
            trump: Trump color chosen by the caller
            reveal: Ignore ``trump`` and turn the top undealt card instead

        Raises:
            DealError: If every round has been played already; the game is
                left unchanged

        """
        number = self.current_round_number + 1
        limit = self.round_limit()
        if number > limit:
            msg = f"Cannot start round {number}; {len(self.players)} players play {limit} rounds"
            raise DealError(msg)

        self.current_round_number = number
        self.state = GameState.DEALING

        # First round: random starter. Subsequent rounds: rotate from round 1 starter
        if number == 1:
            self.seating = [player.name for player in self.players]
            starter_index = self.rng.randrange(len(self.seating))
        else:
            round1_starter = self.rounds[0].starter_player_index
            starter_index = (round1_starter + number - 1) % len(self.seating)
        starter = self.get_player(self.seating[starter_index])

        for player in self.players:
            player.reset_round()
        self.assign_cards(number)

        round_obj = Round(
            number=number,
            starter_player_index=starter_index,
            trump=self.reveal_trump() if reveal else trump,
        )
        for player in self.players:
            round_obj.dealt_cards[player.name] = player.hand.copy()
        self.rounds.append(round_obj)

        self.shift_till(starter)
        self.state = GameState.BIDDING
        log_service.info(
            {
                "event": "round_started",
                "round": round_obj.number,
                "trump": round_obj.trump.display_name if round_obj.trump else "none",
                "starter": self.players[0].name,
            }
        )
        return round_obj

    def place_bid(self, player: Player, bid: int) -> None:
        """Record a player's bid for the current round."""
        current_round = self._require_round()
        player.bid = bid
        current_round.add_bid(player.name, bid)
        if current_round.all_bids_placed(len(self.players)):
            self.state = GameState.PICKING

    def play_trick(self, plays: Sequence[tuple[Card, Player]]) -> Player:
        """Record a trick played in seating order and credit its winner.

        Cards leave their owners' hands; the winner leads the next trick.

        Raises:
            EmptyTrickError: If ``plays`` is empty

        """
        current_round = self._require_round()
        trick = current_round.start_trick()
        for card, player in plays:
            player.remove_card(card)
            trick.add_card(player, card)

        winner = trick.determine_winner()
        winner.tricks_won += 1
        self.shift_till(winner)

        log_service.info(
            {
                "event": "trick_won",
                "round": current_round.number,
                "trick": trick.number,
                "winner": winner.name,
                "cards": ", ".join(str(card) for card in trick.cards()),
            }
        )

        if current_round.is_complete() and self.is_game_complete():
            self.state = GameState.ENDED
        return winner

    def is_game_complete(self) -> bool:
        """Check if all rounds have been played."""
        return self.current_round_number >= self.round_limit()

    def get_leaderboard(self) -> list[dict[str, int | str]]:
        """Total tricks won per player across all rounds, most first."""
        totals = {
            player.name: sum(r.get_tricks_won(player.name) for r in self.rounds) for player in self.players
        }
        return [
            {"name": name, "tricks": tricks}
            for name, tricks in sorted(totals.items(), key=lambda item: item[1], reverse=True)
        ]

    def _require_round(self) -> Round:
        current_round = self.get_current_round()
        if current_round is None:
            msg = "No round has been started"
            raise RuntimeError(msg)
        return current_round

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"Game: {len(self.players)} players, "
            f"Round {self.current_round_number}, State: {self.state.value}"
        )
