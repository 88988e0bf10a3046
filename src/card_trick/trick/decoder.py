"""Naming the hidden card from the four cards handed over."""
import logging
from typing import Sequence

from card_trick.core.card import Card, distinct_cards
from card_trick.trick.permutation import permutation_rank

logger = logging.getLogger(__name__)

VISIBLE_SIZE = 4


def decode(cards: Sequence[Card]) -> Card:
    """
    Reconstruct the hidden card from four cards in encoded order.

    The suit is that of the first card. The order of the other three gives
    the number of steps to count back from the first card's rank.

    Raises:
        PreconditionViolation: If not given four distinct cards
    """
    cards = distinct_cards(cards, VISIBLE_SIZE, "decoded sequence")

    reference = cards[0]
    offset = permutation_rank(cards[1], cards[2], cards[3])
    guess = Card(rank=reference.rank.shift(-offset), suit=reference.suit)

    logger.debug(f"Reference {reference}, offset {offset}: guessing {guess}")
    return guess
