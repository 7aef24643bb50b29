import argparse
import logging
import random

from holdem.cards import ShuffledDeckSource
from holdem.table import Table

from .bots import baseline_strategy, passive_strategy
from .runner import PracticeSession

LOGGER = logging.getLogger("practice")


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Hold'em hands between in-process practice bots")
    parser.add_argument("--players", type=int, default=4)
    parser.add_argument("--hands", type=int, default=50)
    parser.add_argument("--starting-stack", type=int, default=100)
    parser.add_argument("--sb", type=int, default=1)
    parser.add_argument("--bb", type=int, default=2)
    parser.add_argument("--strategy", choices=["baseline", "passive"], default="baseline")
    parser.add_argument("--seed", type=int, default=None, help="Seed for shuffling and bot decisions")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    table = Table.open(
        args.players,
        ShuffledDeckSource(args.seed),
        starting_stack=args.starting_stack,
        sb=args.sb,
        bb=args.bb,
    )
    if table is None:
        parser.exit(2, f"Cannot seat {args.players} players\n")

    strategy = baseline_strategy if args.strategy == "baseline" else passive_strategy
    session = PracticeSession(table, strategy, random.Random(args.seed))
    summary = session.run(args.hands)
    LOGGER.info(
        "Played %s hands; wins=%s rejected=%s final stacks=%s",
        summary.hands_played,
        summary.wins,
        summary.rejected_actions,
        summary.final_stacks,
    )


if __name__ == "__main__":
    main()
