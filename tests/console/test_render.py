"""Tests for pile rendering."""

from cardtrick.cards import Card, Color
from console.render import format_card, format_pile, sort_by_color


def cards(*names):
    return [Card.from_string(name) for name in names]


def test_format_pile():
    """Test the '<Label> pile: [...]' line."""
    assert format_pile("Red", cards("AS", "10H", "KC")) == "Red pile: [AS, 10H, KC]"


def test_format_empty_pile():
    """Test an empty pile renders as empty brackets."""
    assert format_pile("Black", []) == "Black pile: []"


def test_format_with_glyphs():
    """Test suit glyph rendering."""
    assert format_card(Card.from_string("10H"), glyphs=True) == "10♥"
    assert format_pile("Red", cards("AS", "2D"), glyphs=True) == "Red pile: [A♠, 2♦]"


def test_sort_by_color_groups_black_first():
    """Test sorting groups colors and keeps pile order within each color."""
    pile = cards("AH", "KS", "2D", "3C", "QH")
    result = sort_by_color(pile)
    assert result == cards("KS", "3C", "AH", "2D", "QH")
    assert [c.color for c in result] == [Color.BLACK] * 2 + [Color.RED] * 3
