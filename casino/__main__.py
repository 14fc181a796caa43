"""Console casino entry point."""

import argparse
from random import Random

from blackjack.cards import Deck
from casino.manager import GameManager
from casino.store import PlayerStore
from config import config, configure_logging


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play blackjack against the house.")
    parser.add_argument(
        "--db",
        default=config.store.db_path,
        help="player records file (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed the deck shuffle")
    args = parser.parse_args(argv)

    configure_logging()
    deck = Deck(rng=Random(args.seed)) if args.seed is not None else Deck()
    GameManager(PlayerStore(args.db), deck=deck).run()


if __name__ == "__main__":
    main()
