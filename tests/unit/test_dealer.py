"""Tests for dealing."""

from collections import Counter

import pytest

from carddeck.cards import Card, Deck, Rank, Suit, new_deck
from carddeck.dealer import deal, deal_hands, deal_to_players
from carddeck.exceptions import InsufficientCardsError, InvalidHandDistributionError
from carddeck.hand import Player


class TestDeal:
    """Tests for the two-party deal."""

    def test_deal_splits_in_position_order(self, deck):
        """Test the hand is the first hand_size cards."""
        hand, remaining = deal(deck, 14)
        assert len(hand) == 14
        assert len(remaining) == 38
        assert list(hand) == list(deck)[:14]
        assert list(remaining) == list(deck)[14:]

    def test_deal_leaves_source_unchanged(self, shuffled_deck):
        """Test the source deck keeps all its cards."""
        before = list(shuffled_deck)
        deal(shuffled_deck, 5)
        assert list(shuffled_deck) == before

    def test_deal_method(self, deck):
        """Test Deck.deal delegates to the dealer."""
        hand, remaining = deck.deal(13)
        assert hand[0] == Card(Rank.ACE, Suit.HEARTS)
        assert remaining[0] == Card(Rank.ACE, Suit.SPADES)

    def test_deal_bounds(self, deck):
        """Test dealing none or all of the deck."""
        hand, remaining = deal(deck, 0)
        assert len(hand) == 0 and len(remaining) == 52

        hand, remaining = deal(deck, 52)
        assert len(hand) == 52 and len(remaining) == 0

    def test_deal_too_many_raises(self, deck):
        """Test asking for more cards than the deck holds."""
        with pytest.raises(InsufficientCardsError, match="53"):
            deal(deck, 53)

    def test_deal_negative_raises(self, deck):
        """Test a negative hand size is rejected."""
        with pytest.raises(ValueError):
            deal(deck, -1)

    def test_dealt_decks_share_generator(self, deck):
        """Test both halves keep the source deck's generator."""
        hand, remaining = deal(deck, 10)
        assert hand.rng is deck.rng
        assert remaining.rng is deck.rng


class TestDealHands:
    """Tests for the round-robin N-party deal."""

    def test_four_hands_of_thirteen(self, deck):
        """Test a full deck deals into four disjoint 13-card hands."""
        hands = deal_hands(deck, 4)

        assert [len(h) for h in hands] == [13, 13, 13, 13]
        dealt = [card for hand in hands for card in hand]
        assert len(set(dealt)) == 52
        assert set(dealt) == set(new_deck())
        assert len(deck) == 0

    def test_round_robin_order(self, deck):
        """Test card i goes to hand i mod N when not shuffled."""
        expected = list(deck)
        hands = deal_hands(deck, 4, shuffle=False)
        for i, hand in enumerate(hands):
            assert hand.cards == expected[i::4]

    def test_deal_n_method(self, deck):
        """Test Deck.deal_n delegates to the dealer."""
        hands = deck.deal_n(4)
        assert all(hand.is_full for hand in hands)

    def test_shuffles_before_dealing(self, rng):
        """Test the deck is shuffled first by default."""
        ordered = list(new_deck())
        hands = deal_hands(Deck(rng=rng), 4)
        assert hands[0].cards != ordered[0::4]

    def test_uneven_exact_raises(self, deck):
        """Test 52 cards cannot go exactly into 3 hands."""
        with pytest.raises(InvalidHandDistributionError):
            deal_hands(deck, 3)
        assert list(deck) == list(new_deck())

    def test_share_over_capacity_exact_raises(self, deck):
        """Test 26 cards per hand does not fit in 13-card hands."""
        with pytest.raises(InvalidHandDistributionError, match="capacity"):
            deal_hands(deck, 2)

    def test_not_exact_stops_at_capacity(self, deck):
        """Test hands fill to capacity and the rest stays in the deck."""
        hands = deal_hands(deck, 3, exact=False)
        assert [len(h) for h in hands] == [13, 13, 13]
        assert len(deck) == 13

    def test_not_exact_uneven_hands(self, deck):
        """Test leftover cards go to the first hands."""
        hands = deal_hands(deck, 5, exact=False)
        assert [len(h) for h in hands] == [11, 11, 10, 10, 10]
        assert len(deck) == 0

    def test_custom_capacity(self, deck):
        """Test a larger capacity allows two 26-card hands."""
        hands = deal_hands(deck, 2, capacity=26)
        assert [len(h) for h in hands] == [26, 26]

    def test_preserves_multiset(self, shuffled_deck):
        """Test dealt and undealt cards together equal the original deck."""
        before = Counter(shuffled_deck)
        hands = deal_hands(shuffled_deck, 3, exact=False)
        after = Counter(card for hand in hands for card in hand) + Counter(shuffled_deck)
        assert after == before

    def test_zero_hands_raises(self, deck):
        """Test at least one hand is required."""
        with pytest.raises(ValueError):
            deal_hands(deck, 0)

    def test_empty_deck(self, rng):
        """Test an empty deck deals empty hands."""
        hands = deal_hands(Deck.from_cards([], rng=rng), 4)
        assert [len(h) for h in hands] == [0, 0, 0, 0]


class TestDealToPlayers:
    """Tests for dealing to named players."""

    def test_each_player_gets_a_hand(self, deck):
        """Test four players each get 13 cards they own."""
        hands = deal_to_players(deck, ["North", "East", "South", "West"])

        assert list(hands) == ["North", "East", "South", "West"]
        for name, hand in hands.items():
            assert hand.owner == name
            assert len(hand) == 13
        assert len({card for hand in hands.values() for card in hand}) == 52

    def test_accepts_player_objects(self, deck):
        """Test Player instances are keyed by name."""
        hands = deal_to_players(deck, [Player("Alice"), Player("Bob")], capacity=26)
        assert set(hands) == {"Alice", "Bob"}

    def test_duplicate_names_raise(self, deck):
        """Test player names must be unique."""
        with pytest.raises(ValueError):
            deal_to_players(deck, ["Alice", "Alice"], capacity=26)

    def test_uneven_players_raise(self, deck):
        """Test exact dealing to three players fails."""
        with pytest.raises(InvalidHandDistributionError):
            deal_to_players(deck, ["A", "B", "C"])
