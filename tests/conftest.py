"""Pytest fixtures for carddeck tests."""

import pytest
from random import Random

from carddeck.cards import Card, Deck, Rank, Suit
from carddeck.hand import Hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A fresh, unshuffled 52-card deck."""
    return Deck(rng=rng)


@pytest.fixture
def shuffled_deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def full_hand():
    """A hand holding all thirteen hearts."""
    return Hand(cards=[Card(rank, Suit.HEARTS) for rank in Rank])
