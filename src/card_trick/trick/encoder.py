"""Choosing the hidden card and ordering the four cards handed over."""
import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from card_trick.core.card import CARDS_PER_SUIT, Card, distinct_cards
from card_trick.errors import PreconditionViolation
from card_trick.trick.permutation import arrange_for_rank

logger = logging.getLogger(__name__)

HAND_SIZE = 5
MAX_OFFSET = CARDS_PER_SUIT // 2


@dataclass(frozen=True)
class EncodedHand:
    """
    Result of encoding a five card hand.

    Attributes:
        hidden: The card taken out of the hand
        visible: The other four cards, reference card first
        offset: Steps back from the reference rank to the hidden rank (1-6)
    """
    hidden: Card
    visible: Tuple[Card, Card, Card, Card]
    offset: int

    @property
    def reference(self) -> Card:
        """The first visible card, which shares the hidden card's suit."""
        return self.visible[0]

    def __str__(self) -> str:
        return f"hidden {self.hidden}, shown {' '.join(str(c) for c in self.visible)}"


def find_suit_pair(cards: Sequence[Card]) -> Tuple[Card, Card]:
    """
    Find two cards of the same suit.

    Cards are stable-sorted by suit and the first index pair (i, j) sharing
    a suit is returned, in that order.

    Raises:
        PreconditionViolation: If every card has a different suit
    """
    by_suit = sorted(cards, key=lambda card: card.suit)
    for i in range(len(by_suit)):
        for j in range(i + 1, len(by_suit)):
            if by_suit[i].suit == by_suit[j].suit:
                return by_suit[i], by_suit[j]
    raise PreconditionViolation(
        f"No two cards share a suit in {' '.join(str(c) for c in cards)}"
    )


def encode(cards: Sequence[Card]) -> EncodedHand:
    """
    Pick the card to hide from a hand and order the remaining four.

    Two cards of the same suit are found, and the one whose rank lies at
    most six steps below the other (wrapping around) is hidden. The other
    one is shown first, and the order of the last three cards tells how
    many steps to count back from it.

    Args:
        cards: Five distinct cards

    Returns:
        EncodedHand with the hidden card and the four cards to show

    Raises:
        PreconditionViolation: If the hand is not five distinct cards
    """
    cards = distinct_cards(cards, HAND_SIZE, "hand")
    hidden, reference = find_suit_pair(cards)

    diff = (reference.rank - hidden.rank) % CARDS_PER_SUIT
    if diff > MAX_OFFSET:
        hidden, reference = reference, hidden
        diff = CARDS_PER_SUIT - diff

    rest = [card for card in cards if card != hidden and card != reference]
    visible = (reference,) + arrange_for_rank(rest, diff)

    logger.debug(f"Hiding {hidden}: reference {reference}, offset {diff}")
    return EncodedHand(hidden=hidden, visible=visible, offset=diff)
