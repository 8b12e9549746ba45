"""Game domain models."""

from wizard.models.card import FOOL, WIZARD, Card, all_cards, filter_cards, name, prio_color, value
from wizard.models.deck import Deck
from wizard.models.enums import CardColor, CardType, GameState
from wizard.models.game import Game
from wizard.models.player import Player
from wizard.models.round import Round
from wizard.models.trick import PlayedCard, Trick, evaluate_winner

__all__ = [
    "FOOL",
    "WIZARD",
    "Card",
    "CardColor",
    "CardType",
    "Deck",
    "Game",
    "GameState",
    "PlayedCard",
    "Player",
    "Round",
    "Trick",
    "all_cards",
    "evaluate_winner",
    "filter_cards",
    "name",
    "prio_color",
    "value",
]
