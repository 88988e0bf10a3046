"""Tests for choosing and ordering the cards to show."""
import pytest
from card_trick.core.card import Card, Rank, Suit
from card_trick.core.deck import Deck
from card_trick.errors import PreconditionViolation
from card_trick.trick.encoder import EncodedHand, encode, find_suit_pair
from card_trick.trick.permutation import permutation_rank


def cards(text):
    """Build cards from a string like 'Ac 5h Jd'."""
    return [Card.from_string(card_str) for card_str in text.split()]


@pytest.fixture
def sample_hand():
    """The demonstration hand."""
    return cards("Ac 5h Jd Qc Ks")


def test_encode_sample_hand(sample_hand):
    """Queen of clubs is hidden, counted two back from the ace."""
    encoded = encode(sample_hand)

    assert isinstance(encoded, EncodedHand)
    assert encoded.hidden == Card(Rank.QUEEN, Suit.CLUBS)
    assert encoded.reference == Card(Rank.ACE, Suit.CLUBS)
    assert encoded.offset == 2
    assert list(encoded.visible) == cards("Ac Jd Ks 5h")
    assert str(encoded) == "hidden Qc, shown Ac Jd Ks 5h"


def test_encode_keeps_every_card(sample_hand):
    """Hidden and visible cards together are the original hand."""
    encoded = encode(sample_hand)
    assert len(encoded.visible) == 4
    assert set(encoded.visible) | {encoded.hidden} == set(sample_hand)


def test_encode_accepts_any_sequence(sample_hand):
    """Test that tuples and generators work as well as lists."""
    assert encode(tuple(sample_hand)) == encode(sample_hand)
    assert encode(card for card in sample_hand) == encode(sample_hand)


@pytest.mark.parametrize("hand,hidden,visible,offset", [
    # Three clubs: the first two clubs in hand order are used
    ("5c 2c 9c 3h 4d", "2c", "5c 4d 9c 3h", 3),
    # Two pairs: hearts sort before spades
    ("Kh 3s 2h Qs 7d", "Kh", "2h 7d Qs 3s", 2),
    # Largest offset, ace as reference
    ("Ac 8c 2d 3h 4s", "8c", "Ac 4s 3h 2d", 6),
    # Smallest offset
    ("9s 2d Ts 3h 4c", "9s", "Ts 4c 2d 3h", 1),
    # All four suits, with the pair in diamonds
    ("7d 6c Jd 5h 4s", "7d", "Jd 5h 4s 6c", 4),
])
def test_encode_examples(hand, hidden, visible, offset):
    """Test hidden card choice and ordering for specific hands."""
    encoded = encode(cards(hand))
    assert encoded.hidden == Card.from_string(hidden)
    assert list(encoded.visible) == cards(visible)
    assert encoded.offset == offset
    assert permutation_rank(*encoded.visible[1:]) == offset


def test_find_suit_pair_uses_first_pair_in_suit_order():
    """Test the tie-break when several pairs share a suit."""
    hand = cards("Qs 3h 9s Th 2d")
    assert find_suit_pair(hand) == (Card.from_string("3h"), Card.from_string("Th"))


def test_find_suit_pair_without_pair():
    """Four different suits have no pair."""
    with pytest.raises(PreconditionViolation):
        find_suit_pair(cards("Ac 2d 3h 4s"))


def test_encode_random_hands():
    """Reference suit, offset range and card set hold for dealt hands."""
    for seed in range(500):
        deck = Deck.seeded(seed)
        deck.shuffle()
        hand = deck.deal_cards(5)

        encoded = encode(hand)
        assert encoded.reference.suit == encoded.hidden.suit
        assert 1 <= encoded.offset <= 6
        assert encoded.reference.rank.shift(-encoded.offset) == encoded.hidden.rank
        assert set(encoded.visible) | {encoded.hidden} == set(hand)


@pytest.mark.parametrize("hand", [
    "Ac 5h Jd Qc",           # Too few cards
    "Ac 5h Jd Qc Ks 2d",     # Too many cards
    "Ac 5h Jd Qc Ac",        # Duplicate card
    "",                      # Empty hand
])
def test_encode_invalid_hands(hand):
    """Test that malformed hands are rejected."""
    with pytest.raises(PreconditionViolation):
        encode(cards(hand))


def test_encode_rejects_non_cards():
    """Test that only Card instances are accepted."""
    with pytest.raises(PreconditionViolation):
        encode(["Ac", "5h", "Jd", "Qc", "Ks"])


def test_precondition_violation_is_value_error(sample_hand):
    """Callers catching ValueError also catch bad hands."""
    with pytest.raises(ValueError):
        encode(sample_hand[:3])
