"""Deck model for shuffling and dealing cards."""

import random

from wizard.exceptions import DealError
from wizard.models.card import Card, all_cards


class Deck:
    """
    Represents a deck of Wizard cards.

    The deck contains 60 cards total:
    - 13 numbered cards in each of Blue, Green, Red and Yellow
    - 4 Wizards
    - 4 Fools

    Shuffling draws from the injected ``rng`` so tests can pass a seeded
    ``random.Random``.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize an empty deck."""
        self.cards: list[Card] = []
        self.rng = rng or random.Random()  # noqa: S311

    def fill(self) -> None:
        """Fill the deck with all 60 cards in sorted order."""
        self.cards = all_cards()

    def shuffle(self) -> None:
        """Fill and shuffle the deck."""
        self.fill()
        self.rng.shuffle(self.cards)

    def deal(self, num_players: int, cards_per_player: int) -> list[list[Card]]:
        """
        Deal cards to players.

        Args:
            num_players: Number of players to deal to
            cards_per_player: Number of cards per player

        Returns:
            List of hands, where each hand is a list of Cards

        Raises:
            DealError: If the deck holds too few cards for the request
        """
        if not self.cards:
            self.shuffle()

        needed = num_players * cards_per_player
        if needed > len(self.cards):
            msg = f"Cannot deal {needed} cards from a deck of {len(self.cards)}"
            raise DealError(msg)

        hands: list[list[Card]] = []
        index = 0

        for _ in range(num_players):
            hand = self.cards[index : index + cards_per_player]
            hands.append(hand)
            index += cards_per_player

        # Dealt cards leave the deck
        self.cards = self.cards[index:]
        return hands

    def reset(self) -> None:
        """Reset the deck."""
        self.cards = []
