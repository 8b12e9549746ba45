"""Random bot that makes random moves."""

from wizard.bots.base_bot import BaseBot
from wizard.models.card import Card
from wizard.models.game import Game


class RandomBot(BaseBot):
    """Bot that makes random decisions.

    This serves as a baseline for evaluating other bot strategies
    and provides a simple opponent for testing.
    """

    def make_bid(self, _game: Game, options: list[int], _hand: list[Card]) -> int:
        """Pick a random allowed bid."""
        return self.rng.choice(options)

    def pick_card(self, _game: Game, hand: list[Card], cards_in_trick: list[Card]) -> Card:
        """Pick a random card, following the forced color when possible."""
        if not hand:
            msg = "No cards to play"
            raise ValueError(msg)
        return self.rng.choice(self._playable_cards(hand, cards_in_trick))
