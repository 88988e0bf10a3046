"""Encoding of a number from 1 to 6 in the order of three cards."""
from typing import Dict, Optional, Sequence, Tuple

from card_trick.core.card import Card, less_than
from card_trick.errors import InternalInvariantViolation, PreconditionViolation

# Pattern of (first < second, second < third, first < third) -> rank
PATTERN_RANKS: Dict[Tuple[bool, bool, bool], int] = {
    (True, True, True): 1,
    (True, False, True): 2,
    (False, True, True): 3,
    (True, False, False): 4,
    (False, True, False): 5,
    (False, False, False): 6,
}

# Positions to swap after sorting the triple so that it scores the given rank
_RANK_SWAPS: Dict[int, Optional[Tuple[int, int]]] = {
    1: None,
    2: (1, 2),
    3: (0, 1),
    4: (0, 1),
    5: (1, 2),
    6: None,
}


def permutation_rank(card1: Card, card2: Card, card3: Card) -> int:
    """
    Identify which of the six orderings three cards are in.

    Only the relative order of the cards matters, so any two triples whose
    pairwise comparisons agree get the same rank.

    Returns:
        Rank from 1 (ascending) to 6 (descending)

    Raises:
        PreconditionViolation: If two of the cards are equal
        InternalInvariantViolation: If the comparisons are inconsistent
    """
    if card1 == card2 or card2 == card3 or card1 == card3:
        raise PreconditionViolation(
            f"Cannot rank the order of {card1} {card2} {card3}: cards must be distinct"
        )

    pattern = (
        less_than(card1, card2),
        less_than(card2, card3),
        less_than(card1, card3),
    )
    try:
        return PATTERN_RANKS[pattern]
    except KeyError:
        raise InternalInvariantViolation(
            f"Comparison pattern {pattern} for {card1} {card2} {card3} is not a total order"
        )


def arrange_for_rank(cards: Sequence[Card], rank: int) -> Tuple[Card, Card, Card]:
    """
    Order three cards so that permutation_rank() of the result is ``rank``.

    The cards are sorted ascending for ranks 1-3 and descending for 4-6,
    then one adjacent pair is swapped where the rank requires it.
    """
    if len(cards) != 3:
        raise PreconditionViolation(f"Expected 3 cards to arrange, got {len(cards)}")
    if rank not in _RANK_SWAPS:
        raise PreconditionViolation(f"Permutation rank must be between 1 and 6, got {rank}")

    arranged = sorted(cards, reverse=rank > 3)
    swap = _RANK_SWAPS[rank]
    if swap is not None:
        i, j = swap
        arranged[i], arranged[j] = arranged[j], arranged[i]
    return arranged[0], arranged[1], arranged[2]
