"""Deck implementation."""
import random
from typing import List, Optional

from .card import Card, Rank, Suit


class Deck:
    """
    A standard 52 card deck.

    Attributes:
        cards: List of cards in the deck
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize a new deck.

        Args:
            rng: Random generator used for shuffling; the module-level
                 generator if not given
        """
        self.cards: List[Card] = [
            Card(rank=rank, suit=suit) for suit in Suit for rank in Rank
        ]
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def seeded(cls, seed: Optional[int]) -> 'Deck':
        """Create a deck whose shuffles are reproducible for a given seed."""
        return cls(random.Random(seed))

    def shuffle(self, times: int = 1) -> None:
        """
        Shuffle the deck.

        Args:
            times: Number of times to shuffle
        """
        for _ in range(times):
            self._rng.shuffle(self.cards)

    def deal_card(self) -> Optional[Card]:
        """
        Deal a single card from the top of the deck.

        Returns:
            Card or None if deck is empty
        """
        if not self.cards:
            return None
        return self.cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        Deal multiple cards from the top of the deck.

        Returns:
            List of cards (may be fewer than requested if deck runs out)
        """
        cards = []
        for _ in range(count):
            card = self.deal_card()
            if card is None:
                break
            cards.append(card)
        return cards

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)
