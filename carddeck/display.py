"""Console formatting for decks and hands."""

import sys
from typing import Iterable, Iterator, TextIO

from carddeck.cards import Card

BANNER = "*" * 10
RULE = "*" * 20


def format_cards(cards: Iterable[Card]) -> Iterator[str]:
    """Yield one 'Card <position>: <card>' line per card."""
    for position, card in enumerate(cards):
        yield f"Card {position}: {card}"


def print_cards(
    cards: Iterable[Card],
    title: str | None = None,
    file: TextIO | None = None,
) -> None:
    """Print cards one per line, framed by a banner when a title is given."""
    out = file or sys.stdout
    if title:
        print(f"{BANNER}{title}{BANNER}", file=out)
    for line in format_cards(cards):
        print(line, file=out)
    if title:
        print(RULE, file=out)
