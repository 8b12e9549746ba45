"""Rule-based bot that bids on hand strength and plays toward its bid."""

import logging

from wizard.bots.base_bot import BaseBot
from wizard.models.card import Card, value
from wizard.models.enums import CardColor
from wizard.models.game import Game

logger = logging.getLogger(__name__)

HIGH_CARD_THRESHOLD = 11  # Number cards at or above this usually take a trick


class RuleBasedBot(BaseBot):
    """Bot following simple heuristics.

    Bidding counts Wizards, trump cards and high cards. While short of its
    bid the bot plays its strongest card, otherwise its weakest.
    """

    def make_bid(self, game: Game, options: list[int], hand: list[Card]) -> int:
        """Estimate tricks from hand strength and pick the closest allowed bid."""
        current_round = game.get_current_round()
        trump = current_round.trump if current_round else None

        estimate = sum(1 for card in hand if self._is_strong(card, trump))
        bid = min(options, key=lambda option: (abs(option - estimate), option))
        logger.debug("Bot %s estimates %d tricks, bids %d", self.player_name, estimate, bid)
        return bid

    def pick_card(self, game: Game, hand: list[Card], cards_in_trick: list[Card]) -> Card:
        """Play high while short of the bid, low once it is met."""
        if not hand:
            msg = "No cards to play"
            raise ValueError(msg)

        current_round = game.get_current_round()
        trump = current_round.trump if current_round else None
        player = game.get_player(self.player_name)
        wants_tricks = player is not None and player.bid is not None and player.tricks_won < player.bid

        playable = self._playable_cards(hand, cards_in_trick)
        ranked = sorted(playable, key=lambda card: self._strength(card, trump))
        return ranked[-1] if wants_tricks else ranked[0]

    @staticmethod
    def _strength(card: Card, trump: CardColor | None) -> int:
        """Rough playing strength; trump numbers rank above other numbers."""
        if card.is_number() and card.has_color(trump):
            return value(card) + 13
        if card.is_wizard():
            return 2 * value(card)
        return value(card)

    @staticmethod
    def _is_strong(card: Card, trump: CardColor | None) -> bool:
        if card.is_wizard():
            return True
        if card.is_fool():
            return False
        return card.has_color(trump) or value(card) >= HIGH_CARD_THRESHOLD
