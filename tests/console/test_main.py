"""Tests for the command-line driver."""

import logging
import re

import pytest
from unittest.mock import patch

from cardtrick.exceptions import InvariantViolationError
from console import main as cli

LINE = re.compile(r"^(Red|Black) pile: \[((10|[2-9AJQK])[CDHS](, (10|[2-9AJQK])[CDHS])*)?\]$")


def test_run_output_format():
    """Test run returns one line per pile in the expected format."""
    lines = cli.run(seed=42)
    assert len(lines) == 2
    assert lines[0].startswith("Red pile: [")
    assert lines[1].startswith("Black pile: [")
    for line in lines:
        assert LINE.match(line)


def test_run_is_reproducible():
    """Test the same seed and swap give the same output."""
    assert cli.run(seed=7, swap=3) == cli.run(seed=7, swap=3)


def test_run_piles_hold_26_cards():
    """Test the printed piles hold half the deck between them."""
    lines = cli.run(seed=3, swap=0)
    total = sum(len(line.split("[", 1)[1].rstrip("]").split(", ")) for line in lines if "[]" not in line)
    assert total == 26


def test_main_prints_piles(capsys):
    """Test main prints both piles and exits 0."""
    assert cli.main(["--seed", "42", "--swap", "0"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == cli.run(seed=42, swap=0)


def test_main_glyphs(capsys):
    """Test --glyphs switches to suit symbols."""
    assert cli.main(["--seed", "1", "--glyphs"]) == 0
    out = capsys.readouterr().out
    assert any(glyph in out for glyph in "♣♦♥♠")


def test_main_rejects_oversized_swap(capsys):
    """Test an impossible swap size is a usage error."""
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--seed", "42", "--swap", "27"])
    assert excinfo.value.code == 2
    assert "Swap size 27" in capsys.readouterr().err


def test_main_rejects_non_integer_swap():
    """Test argparse rejects a non-integer swap."""
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--swap", "many"])
    assert excinfo.value.code == 2


def test_main_reports_invariant_violation(caplog):
    """Test a broken invariant is logged and exits 1."""
    with patch.object(cli, "run", side_effect=InvariantViolationError("1 red, 0 black")):
        with caplog.at_level(logging.ERROR, logger=cli.__name__):
            assert cli.main(["--seed", "1"]) == 1
    assert "Invariant violated" in caplog.text


def test_invariant_check_can_be_disabled():
    """Test the invariant check is skipped when turned off."""
    with patch("cardtrick.trick.CardTrick.check_invariant") as check:
        cli.run(seed=5, check_invariant=False)
        check.assert_not_called()
        cli.run(seed=5, check_invariant=True)
        assert check.call_count == 2


def test_events_logged_at_debug(caplog):
    """Test trick events reach the debug log."""
    with caplog.at_level(logging.DEBUG, logger=cli.__name__):
        cli.run(seed=9)
    assert "CARD_DEALT" in caplog.text
    assert "PILES_SWAPPED" in caplog.text
    assert "After swap" in caplog.text
