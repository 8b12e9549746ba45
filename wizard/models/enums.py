"""Enums for the game."""

from enum import Enum


class CardColor(str, Enum):
    """The four card colors. Colors carry no order of their own."""

    BLUE = "blue"
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"

    @property
    def display_name(self) -> str:
        """Return the capitalized color name, e.g. ``Blue``."""
        return self.value.title()


class CardType(str, Enum):
    """Card kinds in Wizard."""

    NUMBER = "number"
    WIZARD = "wizard"
    FOOL = "fool"


class GameState(str, Enum):
    """Game states during the lifecycle."""

    PENDING = "PENDING"
    DEALING = "DEALING"
    BIDDING = "BIDDING"
    PICKING = "PICKING"
    ENDED = "ENDED"
