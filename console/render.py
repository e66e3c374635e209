"""Plain-text rendering of trick piles."""

from typing import Iterable

from cardtrick.cards import Card


def sort_by_color(cards: Iterable[Card]) -> list[Card]:
    """Group cards by color, black first, keeping pile order within a color."""
    return sorted(cards, key=lambda card: card.color.value)


def format_card(card: Card, glyphs: bool = False) -> str:
    """Render a card as '10H', or '10♥' with glyphs."""
    return card.glyph if glyphs else str(card)


def format_pile(label: str, cards: Iterable[Card], glyphs: bool = False) -> str:
    """Render a pile as '<Label> pile: [AS, 10H, KC]'."""
    body = ", ".join(format_card(card, glyphs) for card in cards)
    return f"{label} pile: [{body}]"
