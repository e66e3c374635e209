"""Pytest fixtures for card trick tests."""

import pytest
from random import Random

from cardtrick.cards import Card
from cardtrick.trick import CardTrick


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def trick(rng):
    """A new trick with a standard deck."""
    return CardTrick(rng=rng)


@pytest.fixture
def dealt_trick(trick):
    """A trick that has been shuffled and dealt."""
    trick.shuffle()
    trick.deal()
    return trick


@pytest.fixture
def four_card_trick():
    """A trick over a reduced deck that draws AS, AH, 2C, 2D in that order."""
    draw_order = [Card.from_string(s) for s in ("AS", "AH", "2C", "2D")]
    return CardTrick(rng=Random(0), cards=reversed(draw_order))
