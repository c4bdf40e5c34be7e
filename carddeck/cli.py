"""Command line entry point: python -m carddeck."""

import argparse
from pathlib import Path
from random import Random

from carddeck.cards import load_deck_from_file, new_deck
from carddeck.dealer import deal, deal_to_players
from carddeck.display import print_cards
from carddeck.exceptions import CardDeckError
from carddeck.logging_utils import get_logger, setup_logging
from config import config

logger = get_logger(__name__)


def _show(args: argparse.Namespace, rng: Random | None) -> None:
    deck = new_deck(rng=rng)
    if args.shuffle:
        deck.shuffle()
    print_cards(deck, title="Full deck")
    if args.save:
        deck.save_to_file(args.save)


def _deal(args: argparse.Namespace, rng: Random | None) -> None:
    deck = new_deck(rng=rng)
    if args.shuffle:
        deck.shuffle()
    print_cards(deck, title="Full deck")

    hand, remaining = deal(deck, args.hand_size)
    print_cards(hand, title="Player 1 Hand")
    print_cards(remaining, title="Player 2 Hand")

    out_dir = Path(args.out_dir)
    hand.save_to_file(out_dir / "hand1.cards")
    remaining.save_to_file(out_dir / "hand2.cards")


def _deal_hands(args: argparse.Namespace, rng: Random | None) -> None:
    deck = new_deck(rng=rng)
    hands = deal_to_players(
        deck,
        args.players,
        exact=args.exact,
        capacity=config.deck.hand_capacity,
    )
    for name, hand in hands.items():
        print_cards(hand, title=f"{name} Hand")
    if len(deck):
        print_cards(deck, title="Undealt")


def _load(args: argparse.Namespace, rng: Random | None) -> None:
    deck = load_deck_from_file(args.file, strict=args.strict or None, rng=rng)
    print_cards(deck, title=str(args.file))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="carddeck", description="Build, shuffle, deal and save card decks")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: CARDDECK_SEED)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print a new deck")
    show.add_argument("--shuffle", action="store_true", help="Shuffle before printing")
    show.add_argument("--save", default=None, help="Also save the deck to this file")
    show.set_defaults(func=_show)

    deal_cmd = sub.add_parser("deal", help="Deal one hand and save it with the remainder")
    deal_cmd.add_argument("--hand-size", type=int, default=config.deck.hand_capacity)
    deal_cmd.add_argument("--shuffle", action="store_true", help="Shuffle before dealing")
    deal_cmd.add_argument("--out-dir", default=".", help="Directory for hand1.cards and hand2.cards")
    deal_cmd.set_defaults(func=_deal)

    hands_cmd = sub.add_parser("deal-hands", help="Shuffle and deal one hand per player")
    hands_cmd.add_argument(
        "--players",
        nargs="+",
        default=[f"Player {i + 1}" for i in range(config.deck.hand_count)],
    )
    hands_cmd.add_argument(
        "--no-exact",
        dest="exact",
        action="store_false",
        help="Allow uneven hands instead of failing",
    )
    hands_cmd.set_defaults(func=_deal_hands)

    load_cmd = sub.add_parser("load", help="Load and print a saved deck")
    load_cmd.add_argument("file", nargs="?", default=config.deck.default_file)
    load_cmd.add_argument("--strict", action="store_true", help="Fail on malformed cards")
    load_cmd.set_defaults(func=_load)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    rng = Random(args.seed) if args.seed is not None else None
    try:
        args.func(args, rng)
    except (OSError, ValueError, CardDeckError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
