"""Trick engine and state management."""

from cardtrick.trick.events import TrickEvent, EventType
from cardtrick.trick.state import TrickState
from cardtrick.trick.engine import CardTrick

__all__ = [
    "TrickEvent",
    "EventType",
    "TrickState",
    "CardTrick",
]
