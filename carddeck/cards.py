"""Card and Deck classes - immutable card representations and the deck text format."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from random import Random
from typing import TYPE_CHECKING, Iterable, Iterator

from carddeck import storage
from carddeck.exceptions import CardParseError, InsufficientCardsError
from carddeck.logging_utils import get_logger
from config import config

if TYPE_CHECKING:
    from carddeck.hand import Hand

logger = get_logger(__name__)

CARD_SEPARATOR = ","
RANK_SUIT_SEPARATOR = " of "


class Suit(Enum):
    """Card suits, in full-deck construction order."""

    HEARTS = 1
    SPADES = 2
    DIAMONDS = 3
    CLUBS = 4

    def __str__(self) -> str:
        return self.name.title()

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> "Suit":
        """
        Parse a canonical suit name such as 'Hearts'.

        Strict mode accepts only the exact name and raises CardParseError
        otherwise. Lenient mode ignores surrounding whitespace and falls back
        to CLUBS for unknown names.
        """
        name = text if strict else text.strip()
        for suit in cls:
            if str(suit) == name:
                return suit
        if strict:
            raise CardParseError(f"Invalid suit: {text!r}")
        logger.warning("Unrecognized suit %r, using %s", text, DEFAULT_SUIT)
        return DEFAULT_SUIT


class Rank(Enum):
    """Card ranks. Ace is the only low card; 'One' is accepted as its alias."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.name.title()

    @classmethod
    def parse(cls, text: str, strict: bool = False) -> "Rank":
        """
        Parse a canonical rank name such as 'Queen'.

        Strict mode accepts only the exact name and raises CardParseError
        otherwise. Lenient mode ignores surrounding whitespace and falls back
        to ACE for unknown names.
        """
        name = text if strict else text.strip()
        if name in _RANK_ALIASES:
            return _RANK_ALIASES[name]
        for rank in cls:
            if str(rank) == name:
                return rank
        if strict:
            raise CardParseError(f"Invalid rank: {text!r}")
        logger.warning("Unrecognized rank %r, using %s", text, DEFAULT_RANK)
        return DEFAULT_RANK


DEFAULT_RANK = Rank.ACE
DEFAULT_SUIT = Suit.CLUBS

# Older deck files list a separate "One" rank.
_RANK_ALIASES = {"One": Rank.ACE}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{RANK_SUIT_SEPARATOR}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_string(cls, s: str, strict: bool = False) -> "Card":
        """
        Create a card from a string like 'Ace of Hearts'.

        Lenient mode reads the first two ' of ' fields and ignores any more.
        Strict mode requires exactly two.
        """
        fields = s.split(RANK_SUIT_SEPARATOR)
        if strict and len(fields) != 2:
            raise CardParseError(f"Invalid card string: {s!r}")
        if len(fields) < 2:
            logger.warning("Card string %r has no suit, using %s", s, DEFAULT_SUIT)
            return cls(Rank.parse(fields[0]), DEFAULT_SUIT)
        return cls(Rank.parse(fields[0], strict), Suit.parse(fields[1], strict))


_shared_rng: Random | None = None


def get_default_rng() -> Random:
    """Return the process-wide generator used by decks created without one."""
    global _shared_rng
    if _shared_rng is None:
        _shared_rng = Random(config.deck.seed)
    return _shared_rng


class Deck:
    """
    An ordered deck of cards.

    A card's position is its index; positions are always 0..n-1. A Deck is not
    safe for concurrent use: callers sharing one across threads must lock
    around every operation, shuffle included.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new full 52-card deck."""
        self._rng = rng or get_default_rng()
        self._cards: list[Card] = []
        self.reset()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """Build a deck holding exactly the given cards, in order."""
        deck = cls.__new__(cls)
        deck._rng = rng or get_default_rng()
        deck._cards = list(cards)
        return deck

    @classmethod
    def from_string(cls, text: str, strict: bool = False, rng: Random | None = None) -> "Deck":
        """
        Parse the comma-separated deck format.

        Args:
            text: Content like 'Ace of Hearts,King of Spades'
            strict: Raise CardParseError on malformed cards instead of
                substituting Ace / Clubs
            rng: Generator for the resulting deck

        Returns:
            A deck with the parsed cards at positions 0..n-1
        """
        text = text.strip()
        if not text:
            return cls.from_cards([], rng=rng)
        cards = [Card.from_string(token, strict) for token in text.split(CARD_SEPARATOR)]
        return cls.from_cards(cards, rng=rng)

    @classmethod
    def load_from_file(
        cls,
        path: str | Path,
        strict: bool | None = None,
        rng: Random | None = None,
    ) -> "Deck":
        """
        Read a deck saved with save_to_file. OSError propagates.

        In lenient mode bytes that are not UTF-8 become U+FFFD, so the card
        holding them falls back to Ace / Clubs. Strict mode raises
        CardParseError for them.
        """
        if strict is None:
            strict = config.deck.strict_parsing
        try:
            text = storage.read_text(path, errors="strict" if strict else "replace")
        except UnicodeDecodeError as e:
            raise CardParseError(f"Deck file {path} is not valid UTF-8: {e}") from e
        deck = cls.from_string(text, strict=strict, rng=rng)
        logger.debug("Loaded %d cards from %s", len(deck), path)
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in order (suits outer, ranks inner)."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        self._rng.shuffle(self._cards)
        logger.debug("Shuffled deck of %d cards", len(self._cards))

    def draw(self) -> Card:
        """Remove and return the card at position 0."""
        if not self._cards:
            raise InsufficientCardsError("Cannot draw from empty deck")
        return self._cards.pop(0)

    def deal(self, hand_size: int) -> tuple["Deck", "Deck"]:
        """Split off the first hand_size cards. See carddeck.dealer.deal."""
        from carddeck.dealer import deal

        return deal(self, hand_size)

    def deal_n(
        self,
        hand_count: int,
        exact: bool = True,
        capacity: int | None = None,
        shuffle: bool = True,
    ) -> list["Hand"]:
        """Deal round-robin into hand_count hands. See carddeck.dealer.deal_hands."""
        from carddeck.dealer import deal_hands

        return deal_hands(self, hand_count, exact=exact, capacity=capacity, shuffle=shuffle)

    def to_string(self) -> str:
        """Render as comma-separated card strings in position order."""
        return CARD_SEPARATOR.join(str(card) for card in self._cards)

    def save_to_file(self, path: str | Path) -> None:
        """Write to_string() as the whole content of path, overwriting it."""
        storage.write_text(path, self.to_string())
        logger.debug("Saved %d cards to %s", len(self._cards), path)

    @property
    def rng(self) -> Random:
        """Return the generator used for shuffling and seat selection."""
        return self._rng

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the cards in position order."""
        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, position: int) -> Card:
        return self._cards[position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"


def new_deck(rng: Random | None = None) -> Deck:
    """Create a full, unshuffled 52-card deck."""
    return Deck(rng=rng)


def load_deck_from_file(
    path: str | Path,
    strict: bool | None = None,
    rng: Random | None = None,
) -> Deck:
    """Load a deck from a file written by Deck.save_to_file."""
    return Deck.load_from_file(path, strict=strict, rng=rng)
