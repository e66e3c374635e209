"""Card trick exceptions."""


class TrickError(Exception):
    """Base class for card trick errors."""


class InvalidSwapError(TrickError, ValueError):
    """Swap size is negative or larger than the smaller of the red and black piles."""


class OddDeckError(TrickError):
    """Deal attempted on a deck with an odd number of cards."""


class InvariantViolationError(TrickError, AssertionError):
    """Red cards in the red pile no longer match black cards in the black pile."""
