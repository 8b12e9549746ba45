"""Player model."""

from dataclasses import dataclass, field

from wizard.models.card import Card


@dataclass
class Player:
    """Represents a player in the game.

    Attributes:
        name: Player's display name, unique within a game
        hand: Current cards in hand
        bid: Tricks the player announced for this round (None if not yet bid)
        tricks_won: Number of tricks won this round
        is_bot: Whether this is an AI player

    """

    name: str
    hand: list[Card] = field(default_factory=list)
    bid: int | None = None
    tricks_won: int = 0
    is_bot: bool = False

    def reset_round(self) -> None:
        """Reset player state for a new round."""
        self.hand = []
        self.bid = None
        self.tricks_won = 0

    def has_card(self, card: Card) -> bool:
        """Check if player has a card in their hand."""
        return card in self.hand

    def remove_card(self, card: Card) -> None:
        """Remove one copy of a card from player's hand."""
        if card in self.hand:
            self.hand.remove(card)

    def add_card(self, card: Card) -> None:
        """Add a card to player's hand."""
        self.hand.append(card)

    def made_bid(self) -> bool:
        """Check if player has made their bid."""
        return self.bid is not None

    def bid_correct(self) -> bool:
        """Check if player's bid matches tricks won."""
        return self.bid == self.tricks_won

    def __str__(self) -> str:
        """Return string representation."""
        bot_str = " (Bot)" if self.is_bot else ""
        return f"{self.name}{bot_str}"
