"""Card, Suit, Rank, and Pile classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator


class Color(Enum):
    """Suit colors, in sort order."""

    BLACK = auto()
    RED = auto()

    def __str__(self) -> str:
        return self.name.title()


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return self.symbol

    @property
    def color(self) -> Color:
        """Return the color of this suit."""
        if self in (Suit.DIAMONDS, Suit.HEARTS):
            return Color.RED
        return Color.BLACK

    @property
    def symbol(self) -> str:
        """Return the single-letter display symbol."""
        return self.name[0]

    @property
    def glyph(self) -> str:
        """Return the Unicode suit symbol."""
        return {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }[self]


class Rank(Enum):
    """Card ranks, Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Return the display symbol ('A', '2'..'10', 'J', 'Q', 'K')."""
        if 1 < self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]


_SUIT_ORDER = {suit: i for i, suit in enumerate(Suit)}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key >= other.sort_key

    @property
    def sort_key(self) -> tuple[int, int]:
        """Ordering key: suit first, then rank."""
        return (_SUIT_ORDER[self.suit], self.rank.value)

    @property
    def color(self) -> Color:
        """Return the color of this card's suit."""
        return self.suit.color

    @property
    def glyph(self) -> str:
        """Return the card with a Unicode suit symbol, e.g. 'A♠'."""
        return f"{self.rank}{self.suit.glyph}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2C', 'AS', '10h', 'K♥'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {rank.symbol: rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {}
        for suit in Suit:
            suit_map[suit.symbol] = suit
            suit_map[suit.glyph] = suit

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


class Pile:
    """
    An ordered stack of cards.

    Cards are stored bottom first; the last card is the top of the pile.
    """

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        """Initialize a pile holding a copy of the given cards."""
        self._cards: list[Card] = list(cards)

    @classmethod
    def standard_deck(cls) -> "Pile":
        """Return a pile with all 52 cards, one per suit and rank, unshuffled."""
        return cls(Card(rank, suit) for suit in Suit for rank in Rank)

    def push(self, card: Card) -> None:
        """Put a card on top of the pile."""
        self._cards.append(card)

    def extend(self, cards: Iterable[Card]) -> None:
        """Put cards on top of the pile, in the given order."""
        self._cards.extend(cards)

    def draw(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise IndexError("Cannot draw from empty pile")
        return self._cards.pop()

    def take_top(self, n: int) -> list[Card]:
        """Remove and return the top n cards, keeping their pile order."""
        if not 0 <= n <= len(self._cards):
            raise IndexError(f"Cannot take {n} cards from a pile of {len(self._cards)}")
        split = len(self._cards) - n
        block = self._cards[split:]
        del self._cards[split:]
        return block

    def shuffle(self, rng: Random) -> None:
        """Shuffle the pile in place."""
        rng.shuffle(self._cards)

    def count(self, color: Color) -> int:
        """Return the number of cards of the given color."""
        return sum(1 for card in self._cards if card.color is color)

    def snapshot(self) -> list[Card]:
        """Return an independent copy of the cards, bottom first."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Pile({self._cards!r})"
