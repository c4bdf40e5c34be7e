"""Exception hierarchy for deck, hand and dealing errors."""


class CardDeckError(Exception):
    """Base class for all carddeck errors."""


class CardParseError(CardDeckError, ValueError):
    """A card, rank or suit string could not be parsed in strict mode."""


class InsufficientCardsError(CardDeckError, IndexError):
    """More cards were requested than the deck holds."""


class InvalidHandDistributionError(CardDeckError):
    """The deck cannot be split evenly across the requested hands."""


class HandFullError(CardDeckError):
    """A card was added to a hand that is already at capacity."""
