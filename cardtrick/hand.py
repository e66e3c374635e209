"""Blackjack hand scoring and comparison."""

from dataclasses import dataclass, field
from typing import Iterator

from cardtrick.cards import Card, Rank


@dataclass(eq=False)
class BlackjackHand:
    """A blackjack hand that scores itself and compares by value."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def raw_value(self) -> int:
        """Sum of card values with aces counted as 1 and face cards as 10."""
        return sum(min(10, card.rank.value) for card in self.cards)

    @property
    def aces(self) -> int:
        """Return the number of aces in the hand."""
        return sum(1 for card in self.cards if card.rank is Rank.ACE)

    @property
    def value(self) -> int:
        """
        Calculate the comparison value of the hand.

        A bust scores 0. One ace is promoted to 11 when that does not bust.
        A two-card 21 scores 22 so that it beats any other 21.
        """
        raw = self.raw_value
        if raw > 21:
            return 0
        value = raw
        if raw <= 11 and self.aces > 0:
            value += 10
        if value == 21 and len(self.cards) == 2:
            value += 1
        return value

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (raw value > 21)."""
        return self.raw_value > 21

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural (21 with 2 cards)."""
        return self.value == 22

    def __lt__(self, other: "BlackjackHand") -> bool:
        return compare_hands(self, other) < 0

    def __le__(self, other: "BlackjackHand") -> bool:
        return compare_hands(self, other) <= 0

    def __gt__(self, other: "BlackjackHand") -> bool:
        return compare_hands(self, other) > 0

    def __ge__(self, other: "BlackjackHand") -> bool:
        return compare_hands(self, other) >= 0

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.is_busted:
            return f"{cards_str} (BUST)"
        if self.is_blackjack:
            return f"{cards_str} (BLACKJACK)"
        return f"{cards_str} ({self.value})"

    def __repr__(self) -> str:
        return f"BlackjackHand({self.cards!r}, value={self.value})"


def compare_hands(hand: BlackjackHand, other: BlackjackHand) -> int:
    """
    Compare two hands by value.

    Returns:
        A positive number if hand wins, negative if other wins, 0 for a tie
    """
    return hand.value - other.value
