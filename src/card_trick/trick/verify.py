"""Round-trip checking of the trick over many hands."""
import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from card_trick.core.card import DECK_SIZE, Card
from card_trick.trick.decoder import decode
from card_trick.trick.encoder import HAND_SIZE, MAX_OFFSET, encode

logger = logging.getLogger(__name__)

# Number of distinct five card hands in a 52 card deck
TOTAL_HANDS = 2598960


@dataclass
class VerificationReport:
    """Outcome of checking a batch of hands."""
    checked: int = 0
    failures: List[Tuple[Tuple[Card, ...], str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def all_hands() -> Iterator[Tuple[Card, ...]]:
    """Every five card hand, in combination order of card codes."""
    deck = [Card.from_code(code) for code in range(DECK_SIZE)]
    return combinations(deck, HAND_SIZE)


def verify_hand(cards: Sequence[Card]) -> Optional[str]:
    """
    Encode and decode a hand.

    Returns:
        None if the hidden card is recovered, otherwise a description of
        what went wrong
    """
    encoded = encode(cards)
    if encoded.reference.suit != encoded.hidden.suit:
        return f"reference {encoded.reference} does not share the suit of {encoded.hidden}"
    if not 1 <= encoded.offset <= MAX_OFFSET:
        return f"offset {encoded.offset} out of range"
    guess = decode(encoded.visible)
    if guess != encoded.hidden:
        return f"guessed {guess} instead of {encoded.hidden}"
    return None


def verify_hands(hands: Iterable[Sequence[Card]],
                 progress_every: int = 0) -> VerificationReport:
    """
    Check every hand in ``hands``.

    Args:
        hands: Hands to check
        progress_every: Log progress after this many hands (0 disables)
    """
    report = VerificationReport()
    for hand in hands:
        problem = verify_hand(hand)
        if problem is not None:
            logger.error(f"Hand {' '.join(str(c) for c in hand)}: {problem}")
            report.failures.append((tuple(hand), problem))
        report.checked += 1
        if progress_every and report.checked % progress_every == 0:
            logger.info(f"Checked {report.checked} hands, {len(report.failures)} failures")

    logger.info(f"Verification finished: {report.checked} hands, {len(report.failures)} failures")
    return report
