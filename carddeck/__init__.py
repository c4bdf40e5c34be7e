"""Playing-card deck simulation: build, shuffle, deal, save and load decks."""

from carddeck.cards import Card, Deck, Rank, Suit, load_deck_from_file, new_deck
from carddeck.dealer import deal, deal_hands, deal_to_players
from carddeck.exceptions import (
    CardDeckError,
    CardParseError,
    HandFullError,
    InsufficientCardsError,
    InvalidHandDistributionError,
)
from carddeck.hand import Hand, Player

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "Player",
    "new_deck",
    "load_deck_from_file",
    "deal",
    "deal_hands",
    "deal_to_players",
    "CardDeckError",
    "CardParseError",
    "HandFullError",
    "InsufficientCardsError",
    "InvalidHandDistributionError",
]
