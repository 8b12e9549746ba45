"""Base class for all bot strategies."""

import random
from abc import ABC, abstractmethod

from wizard.models.card import Card, filter_cards, prio_color
from wizard.models.game import Game


class BaseBot(ABC):
    """Abstract base class for bot strategies.

    Bots stand in for the prompts a human would answer: which bid to
    announce and which card to play.
    """

    def __init__(self, player_name: str, rng: random.Random | None = None) -> None:
        """Initialize the bot.

        Args:
            player_name: Name of the player this bot controls
            rng: Random source for the bot's choices

        """
        self.player_name = player_name
        self.rng = rng or random.Random()  # noqa: S311

    @abstractmethod
    def make_bid(self, game: Game, options: list[int], hand: list[Card]) -> int:
        """Pick one of the allowed bids for the current round."""

    @abstractmethod
    def pick_card(self, game: Game, hand: list[Card], cards_in_trick: list[Card]) -> Card:
        """Pick a card to play in the current trick.

        Args:
            game: Current game state
            hand: Bot's remaining cards
            cards_in_trick: Cards already played in this trick

        Returns:
            Card to play

        """

    def _playable_cards(self, hand: list[Card], cards_in_trick: list[Card]) -> list[Card]:
        """Cards that follow the forced color, or the whole hand if none do.

        Wizards and Fools always count as following.
        """
        forced = prio_color(cards_in_trick)
        if forced is None:
            return hand.copy()
        following = filter_cards(hand, forced)
        if any(card.is_number() for card in following):
            return following
        return hand.copy()

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.__class__.__name__} ({self.player_name})"
