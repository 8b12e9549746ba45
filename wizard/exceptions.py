"""Exceptions raised by the rules engine."""


class WizardError(Exception):
    """Base exception for rules engine errors."""


class InvalidCardError(WizardError, ValueError):
    """Raised when a card is built from an impossible value or color."""


class EmptyTrickError(WizardError, ValueError):
    """Raised when a trick winner is requested for a trick with no plays."""


class DealError(WizardError, ValueError):
    """Raised when cards cannot be dealt as requested."""


class UnknownPlayerError(WizardError, LookupError):
    """Raised when a player is not seated at the table."""
