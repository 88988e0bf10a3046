"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Sequence

from card_trick.errors import InvalidCode, PreconditionViolation

CARDS_PER_SUIT = 13
DECK_SIZE = 4 * CARDS_PER_SUIT


class Suit(IntEnum):
    """Card suits, in the fixed order used for card codes."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        return 'cdhs'[self]

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Card ranks. Ace is low and ranks wrap around after King."""
    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    @property
    def symbol(self) -> str:
        return 'A23456789TJQK'[self]

    def shift(self, steps: int) -> 'Rank':
        """Rank reached after moving ``steps`` places, wrapping King to Ace."""
        return Rank((self + steps) % CARDS_PER_SUIT)

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable values. Ordering follows ``code``, which has no
    game meaning and only makes sorting deterministic.

    Attributes:
        rank: Card rank (A-K)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        # Accept plain integers and normalise them to the enums
        object.__setattr__(self, 'rank', Rank(self.rank))
        object.__setattr__(self, 'suit', Suit(self.suit))

    @property
    def code(self) -> int:
        """Position of the card in a suit-major ordering of the deck (0-51)."""
        return self.suit * CARDS_PER_SUIT + self.rank

    @classmethod
    def from_code(cls, code: int) -> 'Card':
        """
        Create a Card from its code.

        Raises:
            InvalidCode: If code is outside 0-51
        """
        if not 0 <= code < DECK_SIZE:
            raise InvalidCode(code)
        suit, rank = divmod(code, CARDS_PER_SUIT)
        return cls(rank=Rank(rank), suit=Suit(suit))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.code < other.code

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank.symbol}{self.suit.symbol}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = next(r for r in Rank if r.symbol == rank_str.upper())
            suit = next(s for s in Suit if s.symbol == suit_str.lower())
        except StopIteration:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)


def less_than(card1: Card, card2: Card) -> bool:
    """Total order over cards by code."""
    return card1.code < card2.code


def distinct_cards(cards: Sequence[Card], count: int, what: str) -> List[Card]:
    """
    Check that ``cards`` holds exactly ``count`` distinct Card instances.

    Args:
        cards: Cards to check
        count: Number of cards required
        what: Name of the group used in error messages, e.g. 'hand'

    Returns:
        The cards as a list

    Raises:
        PreconditionViolation: If the count, types or distinctness are wrong
    """
    cards = list(cards)
    if len(cards) != count:
        raise PreconditionViolation(f"A {what} must have {count} cards, got {len(cards)}")
    if not all(isinstance(card, Card) for card in cards):
        raise PreconditionViolation(f"A {what} may only contain Card instances")
    if len(set(cards)) != count:
        raise PreconditionViolation(
            f"Cards in a {what} must be distinct: {' '.join(str(c) for c in cards)}"
        )
    return cards
