"""Exceptions raised by the card trick."""


class CardTrickError(Exception):
    """Base class for all card trick errors."""


class InvalidCode(CardTrickError, ValueError):
    """A card code outside the 0-51 range."""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Code must be an integer between 0 and 51 (inclusive), got {code}")


class PreconditionViolation(CardTrickError, ValueError):
    """Input that the encoder or decoder cannot work with."""


class InternalInvariantViolation(CardTrickError, RuntimeError):
    """A state the algorithm should never reach. Indicates a defect."""
