"""Five card trick: hide one card of five and name it from the other four."""

from card_trick.core.card import Card, Rank, Suit
from card_trick.core.deck import Deck
from card_trick.errors import (
    CardTrickError,
    InternalInvariantViolation,
    InvalidCode,
    PreconditionViolation,
)
from card_trick.trick.decoder import decode
from card_trick.trick.encoder import EncodedHand, encode

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "CardTrickError",
    "InternalInvariantViolation",
    "InvalidCode",
    "PreconditionViolation",
    "EncodedHand",
    "encode",
    "decode",
]
