"""Card trick engine with state machine."""

from random import Random
from typing import Callable, Iterable

from transitions import Machine

from cardtrick.cards import Card, Color, Pile
from cardtrick.exceptions import InvalidSwapError, InvariantViolationError, OddDeckError
from cardtrick.trick.events import EventEmitter, EventType, TrickEvent
from cardtrick.trick.state import TrickState


class CardTrick:
    """
    The mind-boggling card trick.

    A deck is dealt in pairs: the first card of each pair (the selector) goes
    to the discard pile and decides whether the second goes to the red or the
    black pile. However the deck was shuffled, and however many cards are then
    swapped between the red and black piles, the number of red cards in the
    red pile equals the number of black cards in the black pile.

    The engine owns its four piles. Accessors hand out copies only.
    """

    # State machine states
    STATES = [s.name.lower() for s in TrickState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "cards_shuffled", "source": ["constructed", "shuffled"], "dest": "shuffled"},
        {"trigger": "cards_shuffled", "source": ["dealt", "swapped"], "dest": "="},
        {"trigger": "cards_dealt", "source": ["constructed", "shuffled"], "dest": "dealt"},
        {"trigger": "cards_dealt", "source": ["dealt", "swapped"], "dest": "="},
        # Nothing to swap before dealing, so swap(0) leaves the state alone
        {"trigger": "piles_swapped", "source": ["dealt", "swapped"], "dest": "swapped"},
        {"trigger": "piles_swapped", "source": ["constructed", "shuffled"], "dest": "="},
    ]

    def __init__(
        self,
        rng: Random | None = None,
        cards: Iterable[Card] | None = None,
    ) -> None:
        """
        Initialize a new trick.

        Args:
            rng: Random number generator for shuffling and random swaps
            cards: Deck to use instead of a standard 52-card deck, bottom first
        """
        self._rng = rng or Random()
        self._deck = Pile(cards) if cards is not None else Pile.standard_deck()
        self._discard = Pile()
        self._red = Pile()
        self._black = Pile()
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="constructed",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> TrickState:
        """Get current trick state as enum."""
        return TrickState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[TrickEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to trick events."""
        self.events.subscribe(handler, event_type)

    def shuffle(self) -> None:
        """
        Shuffle the deck, the red pile and the black pile, each on its own.

        The discard pile keeps its deal order.
        """
        self._deck.shuffle(self._rng)
        self._red.shuffle(self._rng)
        self._black.shuffle(self._rng)
        self.events.emit_new(
            EventType.PILES_SHUFFLED,
            deck=len(self._deck),
            red=len(self._red),
            black=len(self._black),
        )
        self.cards_shuffled()

    def deal(self) -> None:
        """
        Deal the whole deck in pairs.

        The selector of each pair goes to the discard pile. The card under it
        goes to the red pile when the selector is red, the black pile otherwise.

        Raises:
            OddDeckError: If the deck has an odd number of cards
        """
        if len(self._deck) % 2:
            raise OddDeckError(f"Cannot deal a deck of {len(self._deck)} cards in pairs")

        pairs = 0
        while self._deck:
            selector = self._deck.draw()
            card = self._deck.draw()
            pile_color = selector.color
            if pile_color is Color.RED:
                self._red.push(card)
            else:
                self._black.push(card)
            self._discard.push(selector)
            pairs += 1
            self.events.emit_new(
                EventType.CARD_DEALT,
                selector=str(selector),
                card=str(card),
                pile=pile_color.name,
            )

        self.events.emit_new(
            EventType.DEAL_COMPLETED,
            pairs=pairs,
            red=len(self._red),
            black=len(self._black),
        )
        self.cards_dealt()

    def swap(self, n: int | None = None) -> int:
        """
        Exchange the top n cards of the red pile with the top n of the black pile.

        Each block keeps its order and goes on top of the other pile.

        Args:
            n: Number of cards to exchange; drawn uniformly from
               0..min(len(red), len(black)) when omitted

        Returns:
            The number of cards exchanged

        Raises:
            InvalidSwapError: If n is negative or larger than either pile
        """
        limit = min(len(self._red), len(self._black))
        if n is None:
            n = self._rng.randint(0, limit)
        elif isinstance(n, bool) or not isinstance(n, int):
            raise InvalidSwapError(f"Swap size must be an integer, got {n!r}")
        elif not 0 <= n <= limit:
            raise InvalidSwapError(f"Swap size {n} outside 0..{limit}")

        red_block = self._red.take_top(n)
        black_block = self._black.take_top(n)
        self._red.extend(black_block)
        self._black.extend(red_block)

        self.events.emit_new(EventType.PILES_SWAPPED, count=n)
        self.piles_swapped()
        return n

    @property
    def deck(self) -> list[Card]:
        """Return a copy of the deck, bottom first (empty after dealing)."""
        return self._deck.snapshot()

    def pile(self, color: Color | None = None) -> list[Card]:
        """
        Return a copy of a pile, bottom first.

        Args:
            color: Red or black pile; None for the discard pile
        """
        return self._pile(color).snapshot()

    def count(self, card_color: Color, pile_color: Color | None = None) -> int:
        """
        Count the cards of a color in a pile.

        Args:
            card_color: Color of cards to count
            pile_color: Red or black pile; None for the discard pile
        """
        return self._pile(pile_color).count(card_color)

    def invariant_holds(self) -> bool:
        """Check that red cards in the red pile match black cards in the black pile."""
        return self.count(Color.RED, Color.RED) == self.count(Color.BLACK, Color.BLACK)

    def check_invariant(self) -> None:
        """Raise InvariantViolationError unless the invariant holds."""
        red = self.count(Color.RED, Color.RED)
        black = self.count(Color.BLACK, Color.BLACK)
        if red != black:
            raise InvariantViolationError(
                f"{red} red cards in red pile, {black} black cards in black pile"
            )

    def _pile(self, color: Color | None) -> Pile:
        if color is Color.RED:
            return self._red
        if color is Color.BLACK:
            return self._black
        return self._discard

    def __repr__(self) -> str:
        return (
            f"CardTrick(state={self.state.name}, deck={len(self._deck)}, "
            f"discard={len(self._discard)}, red={len(self._red)}, black={len(self._black)})"
        )
