"""Console text for cards and for a run of the trick."""
from typing import List, Sequence

from card_trick.core.card import Card
from card_trick.trick.encoder import EncodedHand

SUIT_NAMES = ["Club", "Diamond", "Heart", "Spade"]
RANK_NAMES = [
    "Ace", "Two", "Three", "Four", "Five", "Six", "Seven",
    "Eight", "Nine", "Ten", "Jack", "Queen", "King",
]


def card_name(card: Card) -> str:
    """Long name such as 'Queen of Clubs'."""
    return f"{RANK_NAMES[card.rank]} of {SUIT_NAMES[card.suit]}s"


def format_card(card: Card) -> str:
    """One line per card with suit and symbol in aligned columns."""
    return f"Suit: {SUIT_NAMES[card.suit]:>7},\tSymbol: {RANK_NAMES[card.rank]:>4}"


def trick_lines(hand: Sequence[Card], encoded: EncodedHand, guess: Card) -> List[str]:
    """Lines describing a full run of the trick on a hand."""
    lines = ["Cards given to Alice:"]
    lines.extend(format_card(card) for card in hand)
    lines.append("")
    lines.append("Hidden card by Alice:")
    lines.append(format_card(encoded.hidden))
    lines.append("")
    lines.append("Cards given back to Bob:")
    lines.extend(format_card(card) for card in encoded.visible)
    lines.append("")
    lines.append("Guessed card:")
    lines.append(format_card(guess))
    return lines
