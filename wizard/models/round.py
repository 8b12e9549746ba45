"""Round model representing one round of the game."""

from dataclasses import dataclass, field

from wizard.models.card import Card
from wizard.models.enums import CardColor
from wizard.models.trick import Trick


@dataclass
class Round:
    """Represents a single round of Wizard.

    In round N, each player is dealt N cards and announces how many tricks
    they expect to win. The round consists of N tricks.

    Attributes:
        number: Round number, starting at 1
        starter_player_index: Seat of the player who starts bidding/playing
        trump: Trump color for the round (None when no trump)
        dealt_cards: Cards dealt to each player, keyed by player name
        bids: Each player's bid for this round
        tricks: Tricks played in this round

    """

    number: int
    starter_player_index: int
    trump: CardColor | None = None
    dealt_cards: dict[str, list[Card]] = field(default_factory=dict)
    bids: dict[str, int] = field(default_factory=dict)
    tricks: list[Trick] = field(default_factory=list)

    def has_player_bid(self, player_name: str) -> bool:
        """Check if a player has made their bid."""
        return player_name in self.bids

    def add_bid(self, player_name: str, bid: int) -> None:
        """Add a player's bid."""
        self.bids[player_name] = bid

    def total_bids(self) -> int:
        """Sum of all bids placed so far."""
        return sum(self.bids.values())

    def all_bids_placed(self, num_players: int) -> bool:
        """Check if all players have placed their bids."""
        return len(self.bids) >= num_players

    def start_trick(self) -> Trick:
        """Open the next trick of this round."""
        trick = Trick(number=len(self.tricks) + 1, trump=self.trump)
        self.tricks.append(trick)
        return trick

    def get_current_trick(self) -> Trick | None:
        """Get the current (undecided) trick, if any."""
        if not self.tricks:
            return None
        last_trick = self.tricks[-1]
        if last_trick.winner is None:
            return last_trick
        return None

    def get_tricks_won(self, player_name: str) -> int:
        """Count how many tricks a player has won."""
        return sum(
            1 for trick in self.tricks if trick.winner is not None and trick.winner.name == player_name
        )

    def is_complete(self) -> bool:
        """Check if the round is complete (all tricks decided)."""
        return len(self.tricks) == self.number and all(t.winner is not None for t in self.tricks)

    def __str__(self) -> str:
        """Return string representation."""
        trump = self.trump.display_name if self.trump else "none"
        return f"Round {self.number} (trump {trump}): {len(self.bids)} bids, {len(self.tricks)} tricks"
