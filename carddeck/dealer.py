"""Dealing: splitting a deck into hands."""

from typing import Sequence

from carddeck.cards import Deck
from carddeck.exceptions import InsufficientCardsError, InvalidHandDistributionError
from carddeck.hand import HAND_CAPACITY, Hand, Player
from carddeck.logging_utils import get_logger

logger = get_logger(__name__)


def deal(deck: Deck, hand_size: int) -> tuple[Deck, Deck]:
    """
    Split a deck into a hand and the remaining deck.

    The first hand_size cards in position order form the hand. The source
    deck is not modified.

    Args:
        deck: Deck to split
        hand_size: Number of cards in the hand, 0 <= hand_size <= len(deck)

    Returns:
        (hand, remaining) decks sharing the source deck's generator

    Raises:
        ValueError: hand_size is negative
        InsufficientCardsError: hand_size is larger than the deck
    """
    if hand_size < 0:
        raise ValueError(f"Hand size cannot be negative: {hand_size}")
    if hand_size > len(deck):
        raise InsufficientCardsError(
            f"Cannot deal {hand_size} cards from deck of {len(deck)}"
        )

    cards = deck.cards
    hand = Deck.from_cards(cards[:hand_size], rng=deck.rng)
    remaining = Deck.from_cards(cards[hand_size:], rng=deck.rng)
    logger.debug("Dealt %d cards, %d remaining", len(hand), len(remaining))
    return hand, remaining


def deal_hands(
    deck: Deck,
    hand_count: int,
    exact: bool = True,
    capacity: int | None = None,
    shuffle: bool = True,
) -> list[Hand]:
    """
    Deal a deck round-robin into hand_count hands.

    The deck is shuffled first (unless shuffle is False), then card i goes to
    hand i mod hand_count until the deck runs out or every hand is full.
    Dealt cards are removed from the deck; anything left once all hands are
    full stays in it.

    Args:
        deck: Deck to deal from (modified in place)
        hand_count: Number of hands
        exact: Require every card to be dealt with equal-sized hands
        capacity: Maximum cards per hand (defaults to 13)
        shuffle: Shuffle the deck before dealing

    Raises:
        ValueError: hand_count is less than 1
        InvalidHandDistributionError: exact is set and the deck cannot be
            split into hand_count equal hands within capacity
    """
    if hand_count < 1:
        raise ValueError(f"Need at least one hand, got {hand_count}")
    if capacity is None:
        capacity = HAND_CAPACITY

    if exact:
        share, leftover = divmod(len(deck), hand_count)
        if leftover:
            raise InvalidHandDistributionError(
                f"{len(deck)} cards cannot be split evenly into {hand_count} hands"
            )
        if share > capacity:
            raise InvalidHandDistributionError(
                f"{len(deck)} cards into {hand_count} hands needs {share} per hand, "
                f"capacity is {capacity}"
            )

    if shuffle:
        deck.shuffle()

    hands = [Hand(capacity=capacity) for _ in range(hand_count)]
    for i in range(min(len(deck), hand_count * capacity)):
        hands[i % hand_count].add_card(deck.draw())

    logger.debug(
        "Dealt %d hands of %s cards, %d left in deck",
        hand_count,
        [len(hand) for hand in hands],
        len(deck),
    )
    return hands


def deal_to_players(
    deck: Deck,
    players: Sequence[Player | str],
    exact: bool = True,
    capacity: int | None = None,
    shuffle: bool = True,
) -> dict[str, Hand]:
    """
    Deal one hand per player and seat players at random.

    Hands are dealt with deal_hands; each player then takes a hand picked at
    random, without replacement, using the deck's generator.

    Returns:
        Mapping of player name to that player's hand, in the given player order
    """
    names = [str(player) for player in players]
    if len(set(names)) != len(names):
        raise ValueError(f"Player names must be unique: {names}")

    hands = deal_hands(deck, len(names), exact=exact, capacity=capacity, shuffle=shuffle)
    seats = deck.rng.sample(range(len(hands)), len(hands))

    dealt: dict[str, Hand] = {}
    for name, seat in zip(names, seats):
        hand = hands[seat]
        hand.owner = name
        dealt[name] = hand
    return dealt
