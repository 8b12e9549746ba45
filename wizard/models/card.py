"""Card model and deck helpers."""

from collections.abc import Iterable
from dataclasses import dataclass

from wizard.constants import FOOL_VALUE, MAX_CARD_VALUE, MIN_CARD_VALUE, WIZARD_VALUE
from wizard.exceptions import InvalidCardError
from wizard.models.enums import CardColor, CardType

# Deck construction order; colors themselves are unordered for ranking.
COLORS: tuple[CardColor, ...] = (
    CardColor.BLUE,
    CardColor.GREEN,
    CardColor.RED,
    CardColor.YELLOW,
)


@dataclass(frozen=True)
class Card:
    """Represents a card in Wizard.

    A card is one of three shapes, selected by ``card_type``:

    - ``NUMBER``: ``number`` in 1-13 and a ``color``
    - ``WIZARD``: no number, no color; wins any trick it is played into
    - ``FOOL``: no number, no color; loses to every other card

    Cards are plain values: two ``Card.number_card(5, CardColor.RED)`` are
    equal and interchangeable.

    Attributes:
        card_type: Kind of card
        number: Face value for number cards, 0 otherwise
        color: Color for number cards, None otherwise

    """

    card_type: CardType
    number: int = 0
    color: CardColor | None = None

    def __post_init__(self) -> None:
        """Reject shapes that cannot exist in the deck."""
        if self.card_type == CardType.NUMBER:
            if self.color is None:
                msg = "Number cards need a color"
                raise InvalidCardError(msg)
            if not MIN_CARD_VALUE <= self.number <= MAX_CARD_VALUE:
                msg = f"Card value must be between {MIN_CARD_VALUE} and {MAX_CARD_VALUE}, got {self.number}"
                raise InvalidCardError(msg)
        elif self.number != 0 or self.color is not None:
            msg = f"{self.card_type.value.title()} cards have neither number nor color"
            raise InvalidCardError(msg)

    @classmethod
    def number_card(cls, number: int, color: CardColor) -> "Card":
        """Build a numbered card."""
        return cls(CardType.NUMBER, number, color)

    # Card type checking methods
    def is_number(self) -> bool:
        """Check if card is a numbered card."""
        return self.card_type == CardType.NUMBER

    def is_wizard(self) -> bool:
        """Check if card is a Wizard."""
        return self.card_type == CardType.WIZARD

    def is_fool(self) -> bool:
        """Check if card is a Fool."""
        return self.card_type == CardType.FOOL

    def has_color(self, color: CardColor | None) -> bool:
        """Check if card is a number card of the given color."""
        return color is not None and self.is_number() and self.color == color

    def value(self) -> int:
        """Return the card value: Fool 0, Wizard 14, number cards their number."""
        return value(self)

    def name(self) -> str:
        """Return the display name, e.g. ``Blue 5``."""
        return name(self)

    def __str__(self) -> str:
        """Return string representation of card."""
        return name(self)


WIZARD = Card(CardType.WIZARD)
FOOL = Card(CardType.FOOL)


def value(card: Card) -> int:
    """Return the value of ``card``.

    >>> value(Card.number_card(5, CardColor.RED))
    5
    >>> value(FOOL), value(WIZARD)
    (0, 14)
    """
    if card.card_type == CardType.FOOL:
        return FOOL_VALUE
    if card.card_type == CardType.WIZARD:
        return WIZARD_VALUE
    return card.number


def name(card: Card) -> str:
    """Return the display name of ``card``."""
    if card.card_type == CardType.FOOL:
        return "Fool"
    if card.card_type == CardType.WIZARD:
        return "Wizard"
    return f"{card.color.display_name} {card.number}"


def filter_cards(cards: Iterable[Card], color: CardColor) -> list[Card]:
    """Keep the cards of ``color`` plus every Wizard and Fool.

    The input is left untouched and the result keeps the input order.
    """
    return [card for card in cards if not card.is_number() or card.color == color]


# Public alias matching the rules vocabulary.
filter = filter_cards  # noqa: A001


def all_cards() -> list[Card]:
    """Return all 60 cards of the game, sorted.

    Per color: numbers 1-13 ascending, then a Fool, then a Wizard.
    """
    cards: list[Card] = []
    for color in COLORS:
        cards.extend(Card.number_card(num, color) for num in range(MIN_CARD_VALUE, MAX_CARD_VALUE + 1))
        cards.append(FOOL)
        cards.append(WIZARD)
    return cards


def prio_color(cards: Iterable[Card]) -> CardColor | None:
    """Return the color other players are forced to follow, if any.

    Fools are skipped. A Wizard before any number card means nobody is forced
    to follow a color. Otherwise the color of the first number card wins.
    """
    for card in cards:
        if card.is_fool():
            continue
        if card.is_wizard():
            return None
        return card.color
    return None
