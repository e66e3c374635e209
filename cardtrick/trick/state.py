"""Trick state enumeration."""

from enum import Enum, auto


class TrickState(Enum):
    """
    Card trick state machine states.

    Flow: CONSTRUCTED → SHUFFLED → DEALT → SWAPPED
    """

    # Full deck, empty piles
    CONSTRUCTED = auto()

    # Deck shuffled, not yet dealt
    SHUFFLED = auto()

    # Deck dealt into discard, red and black piles
    DEALT = auto()

    # At least one swap done after dealing
    SWAPPED = auto()

    def __str__(self) -> str:
        return self.name.title()


# Valid state transitions
VALID_TRANSITIONS: dict[TrickState, list[TrickState]] = {
    TrickState.CONSTRUCTED: [TrickState.CONSTRUCTED, TrickState.SHUFFLED, TrickState.DEALT],
    TrickState.SHUFFLED: [TrickState.SHUFFLED, TrickState.DEALT],
    TrickState.DEALT: [TrickState.DEALT, TrickState.SWAPPED],
    TrickState.SWAPPED: [TrickState.SWAPPED],
}


def is_valid_transition(from_state: TrickState, to_state: TrickState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
