"""Trick evaluation and the trick record kept by a round."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

from wizard.exceptions import EmptyTrickError
from wizard.models.card import Card, prio_color
from wizard.models.enums import CardColor
from wizard.models.player import Player

logger = logging.getLogger(__name__)

P = TypeVar("P")


class Verdict(Enum):
    """Outcome of one ranking rule comparing a new card to the current leader."""

    TAKE = "take"  # new card becomes the leader
    KEEP = "keep"  # current leader stays


def _color_rule(new: Card, old: Card, color: CardColor | None) -> Verdict | None:
    """Rank two number cards against a privileged color.

    A card of ``color`` beats one that is not; two cards of ``color`` compare
    by value. Returns None when neither card has the color (or there is no
    color), leaving the decision to the next rule.
    """
    if color is None:
        return None
    new_in = new.color == color
    old_in = old.color == color
    if new_in and old_in:
        return Verdict.TAKE if new.number > old.number else Verdict.KEEP
    if new_in:
        return Verdict.TAKE
    if old_in:
        return Verdict.KEEP
    return None


def _value_rule(new: Card, old: Card) -> Verdict:
    """Higher value wins; ties stay with the earlier card."""
    return Verdict.TAKE if new.number > old.number else Verdict.KEEP


def _number_rules(
    trump: CardColor | None, forced: CardColor | None
) -> tuple[Callable[[Card, Card], Verdict | None], ...]:
    """Build the ordered rule table for number-vs-number comparisons."""
    return (
        lambda new, old: _color_rule(new, old, trump),
        lambda new, old: _color_rule(new, old, forced),
        _value_rule,
    )


def evaluate_winner(plays: Sequence[tuple[Card, P]], trump_color: CardColor | None = None) -> P:
    """Determine who takes a trick.

    Args:
        plays: ``(card, player)`` pairs in the order they were played
        trump_color: Trump ("main") color of the round, if any

    Returns:
        The player attached to the winning card

    Raises:
        EmptyTrickError: If no card was played

    Rules, checked in this order for every play against the current leader:
        1. A Wizard takes the trick at once; later cards are never looked at.
        2. A Fool never takes the lead.
        3. A number card always beats a leading Fool.
        4. Between number cards: trump beats non-trump, then the forced color
           beats other colors, then the higher value wins. Ties never change
           the leader.

    """
    if not plays:
        msg = "Cannot determine the winner of an empty trick"
        raise EmptyTrickError(msg)

    forced_color = prio_color(card for card, _ in plays)
    rules = _number_rules(trump_color, forced_color)

    win_card, win_player = plays[0]
    for card, player in plays:
        if card.is_wizard():
            logger.debug("Wizard takes trick: player=%s", player)
            return player
        if card.is_fool():
            continue
        if win_card.is_fool():
            win_card, win_player = card, player
            continue
        for rule in rules:
            verdict = rule(card, win_card)
            if verdict is None:
                continue
            if verdict is Verdict.TAKE:
                win_card, win_player = card, player
            break

    logger.debug(
        "Trick evaluated: winner=%s card=%s trump=%s forced=%s",
        win_player,
        win_card,
        trump_color,
        forced_color,
    )
    return win_player


@dataclass
class PlayedCard:
    """Represents a card played by a player in a trick."""

    player: Player
    card: Card


@dataclass
class Trick:
    """Represents a single trick within a round.

    A trick consists of each player playing one card in turn order.

    Attributes:
        number: Trick number within the round (1-indexed)
        trump: Trump color of the round, if any
        plays: Cards played so far, in order
        winner: Player who won this trick, once determined

    """

    number: int
    trump: CardColor | None = None
    plays: list[PlayedCard] = field(default_factory=list)
    winner: Player | None = None

    def has_player_played(self, player: Player) -> bool:
        """Check if a player has already played a card in this trick."""
        return any(pc.player.name == player.name for pc in self.plays)

    def add_card(self, player: Player, card: Card) -> bool:
        """Add a played card to this trick.

        Returns:
            True if card was added, False if player already played.

        """
        if self.has_player_played(player):
            return False
        self.plays.append(PlayedCard(player, card))
        return True

    def cards(self) -> list[Card]:
        """Get all cards played in this trick."""
        return [pc.card for pc in self.plays]

    def forced_color(self) -> CardColor | None:
        """Get the color players are forced to follow, if established."""
        return prio_color(self.cards())

    def determine_winner(self) -> Player:
        """Evaluate and store the winner of this trick.

        Raises:
            EmptyTrickError: If no card was played yet

        """
        self.winner = evaluate_winner([(pc.card, pc.player) for pc in self.plays], self.trump)
        return self.winner

    def is_complete(self, num_players: int) -> bool:
        """Check if all players have played a card."""
        return len(self.plays) == num_players

    def __str__(self) -> str:
        """Return string representation of the trick."""
        if self.winner is not None:
            return f"Trick {self.number}: Winner {self.winner.name}"
        return f"Trick {self.number}: {len(self.plays)} cards played"
