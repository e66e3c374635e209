"""Command-line entry point: run the card trick and print the piles."""

import argparse
import logging
import sys
from random import Random

from cardtrick.cards import Color
from cardtrick.exceptions import InvalidSwapError, InvariantViolationError
from cardtrick.trick import CardTrick, TrickEvent
from config import config
from console.render import format_pile, sort_by_color

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def setup_logging(level: str = config.logging.level) -> None:
    """Call once at program start."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=config.logging.format,
        datefmt=config.logging.datefmt,
    )


def log_event(event: TrickEvent) -> None:
    """Trick event handler that writes every event to the debug log."""
    logger.debug("%s", event)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cardtrick",
        description="Shuffle, deal and swap a deck, then show that the red "
        "cards in the red pile match the black cards in the black pile.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random number generator")
    parser.add_argument(
        "--swap",
        type=int,
        default=None,
        metavar="N",
        help="number of cards to swap between the piles (random when omitted)",
    )
    parser.add_argument(
        "--glyphs",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="render suits as ♣ ♦ ♥ ♠",
    )
    parser.add_argument(
        "--check-invariant",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="verify the color count invariant after dealing and swapping",
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None)
    return parser


def _verify(trick: CardTrick, step: str, enabled: bool) -> None:
    if not enabled:
        return
    logger.info(
        "After %s: %d red in red pile, %d black in black pile",
        step,
        trick.count(Color.RED, Color.RED),
        trick.count(Color.BLACK, Color.BLACK),
    )
    trick.check_invariant()


def run(
    seed: int | None = None,
    swap: int | None = None,
    check_invariant: bool = True,
    glyphs: bool = False,
) -> list[str]:
    """
    Run the trick once and return the output lines.

    Raises:
        InvalidSwapError: If swap is outside 0..min(red, black) after dealing
        InvariantViolationError: If the color count invariant fails
    """
    trick = CardTrick(rng=Random(seed))
    trick.subscribe(log_event)

    trick.shuffle()
    trick.deal()
    _verify(trick, "deal", check_invariant)
    swapped = trick.swap(swap)
    logger.info("Swapped %d cards", swapped)
    _verify(trick, "swap", check_invariant)

    return [
        format_pile("Red", sort_by_color(trick.pile(Color.RED)), glyphs),
        format_pile("Black", sort_by_color(trick.pile(Color.BLACK)), glyphs),
    ]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level or config.logging.level)

    seed = args.seed if args.seed is not None else config.trick.seed
    check = args.check_invariant if args.check_invariant is not None else config.trick.check_invariant
    glyphs = args.glyphs if args.glyphs is not None else config.trick.glyphs

    try:
        lines = run(seed=seed, swap=args.swap, check_invariant=check, glyphs=glyphs)
    except InvalidSwapError as exc:
        parser.error(str(exc))
    except InvariantViolationError as exc:
        logger.error("Invariant violated: %s", exc)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
