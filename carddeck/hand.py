"""Player hands."""

from dataclasses import dataclass, field
from typing import Iterator

from carddeck.cards import CARD_SEPARATOR, Card, Deck
from carddeck.exceptions import HandFullError

HAND_CAPACITY = 13  # one suit's worth


@dataclass(frozen=True)
class Player:
    """A seat at the table that a hand can be dealt to."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Hand:
    """A fixed-capacity, ordered set of cards held by one player."""

    cards: list[Card] = field(default_factory=list)
    capacity: int = HAND_CAPACITY
    owner: str | None = None

    def __post_init__(self) -> None:
        if self.capacity < 0:
            raise ValueError("Hand capacity cannot be negative")
        if len(self.cards) > self.capacity:
            raise HandFullError(
                f"{len(self.cards)} cards exceed hand capacity of {self.capacity}"
            )

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        if self.is_full:
            raise HandFullError(f"Hand already holds {self.capacity} cards")
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def is_full(self) -> bool:
        """Check if the hand is at capacity."""
        return len(self.cards) >= self.capacity

    def to_deck(self) -> Deck:
        """Copy the hand's cards into a deck, e.g. to save it."""
        return Deck.from_cards(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return CARD_SEPARATOR.join(str(card) for card in self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, owner={self.owner!r})"
