"""Mind-boggling card trick engine - 100% UI-agnostic."""

from cardtrick.cards import Card, Color, Pile, Rank, Suit
from cardtrick.exceptions import (
    InvalidSwapError,
    InvariantViolationError,
    OddDeckError,
    TrickError,
)
from cardtrick.hand import BlackjackHand, compare_hands
from cardtrick.trick import CardTrick, EventType, TrickEvent, TrickState

__all__ = [
    "Card",
    "Color",
    "Pile",
    "Rank",
    "Suit",
    "TrickError",
    "InvalidSwapError",
    "OddDeckError",
    "InvariantViolationError",
    "BlackjackHand",
    "compare_hands",
    "CardTrick",
    "EventType",
    "TrickEvent",
    "TrickState",
]
