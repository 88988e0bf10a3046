"""Tests for naming the hidden card."""
import pytest
from card_trick.core.card import Card, Rank, Suit
from card_trick.errors import PreconditionViolation
from card_trick.trick.decoder import decode
from card_trick.trick.encoder import encode


def cards(text):
    return [Card.from_string(card_str) for card_str in text.split()]


def test_decode_sample_order():
    """The shown cards of the sample hand name the queen of clubs."""
    assert decode(cards("Ac Jd Ks 5h")) == Card(Rank.QUEEN, Suit.CLUBS)


@pytest.mark.parametrize("visible,expected", [
    ("Ac 4s 3h 2d", "8c"),   # Offset 6 wraps past the ace
    ("Ts 4c 2d 3h", "9s"),   # Offset 1
    ("2h 7d Qs 3s", "Kh"),   # Wraps from two to king
    ("Jd 5h 4s 6c", "7d"),   # Offset 4
])
def test_decode_examples(visible, expected):
    """Test decoding specific card orders."""
    assert decode(cards(visible)) == Card.from_string(expected)


def test_decoded_suit_is_reference_suit():
    """The suit always comes from the first card."""
    for visible in ["Ah 2c 3c 4c", "As 2c 3c 4c", "Ad 4c 3c 2c"]:
        shown = cards(visible)
        assert decode(shown).suit == shown[0].suit


def test_reordered_cards_name_another_card():
    """Changing the order of the last three cards changes the guess."""
    hidden = encode(cards("Ac 5h Jd Qc Ks")).hidden
    assert decode(cards("Ac Jd 5h Ks")) == Card(Rank.KING, Suit.CLUBS)
    assert decode(cards("Ac Jd 5h Ks")) != hidden


@pytest.mark.parametrize("visible", [
    "Ac Jd Ks",            # Too few cards
    "Ac Jd Ks 5h 2c",      # Too many cards
    "Ac Jd Jd 5h",         # Duplicate card
])
def test_decode_invalid_input(visible):
    """Test that malformed card orders are rejected."""
    with pytest.raises(PreconditionViolation):
        decode(cards(visible))


def test_decode_rejects_non_cards():
    """Card names must be parsed before decoding."""
    with pytest.raises(PreconditionViolation):
        decode(["Ac", "Jd", "Ks", "5h"])
