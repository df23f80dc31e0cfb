#!/usr/bin/env python3
"""Classify a batch of five-card hands and report the winners.

Each hand is one quoted string of five card tokens, or one line of a file.

Usage:
    python -m poker_hands.scripts.showdown "4S 5S 6S 8D 3C" "3S 4S 5D 6H JH"
    python -m poker_hands.scripts.showdown --file hands.txt --log-level DEBUG
"""

import argparse
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich import box

from poker_hands.ranking import EmptyInput, rank_hands
from poker_hands.rules import Hand, InvalidCardFormat

console = Console()
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


@dataclass
class ShowdownConfig:
    """Showdown run configuration."""

    hands: List[str] = field(default_factory=list)
    file: Optional[Path] = None
    log_level: str = "WARNING"

    def load_hands(self) -> List[str]:
        """Hands from the command line, followed by non-blank lines of ``file``."""
        hands = list(self.hands)
        if self.file is not None:
            for line in self.file.read_text().splitlines():
                if line.strip():
                    hands.append(line.strip())
        return hands


def build_table(ranked: List[Hand]) -> Table:
    """Render hands sorted best first, marking those tied with the first."""
    table = Table(title="Showdown", box=box.SIMPLE_HEAVY)
    table.add_column("Hand", style="bold")
    table.add_column("Category")
    table.add_column("Result")

    for hand in ranked:
        table.add_row(
            hand.source_text,
            hand.describe(),
            "[green]WIN[/green]" if hand == ranked[0] else "",
        )
    return table


def run(config: ShowdownConfig) -> int:
    """Run a showdown and print the report. Returns the process exit code."""
    try:
        hands = config.load_hands()
        ranked = rank_hands(hands)
    except (InvalidCardFormat, EmptyInput) as exc:
        logger.error("Invalid input: %s", exc)
        return EXIT_BAD_INPUT

    winners = [hand.source_text for hand in ranked if hand == ranked[0]]
    console.print(build_table(ranked))
    label = "Winner" if len(winners) == 1 else "Winners (tie)"
    console.print(f"{label}: " + ", ".join(winners))
    return EXIT_OK


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def parse_args(argv: Optional[List[str]] = None) -> ShowdownConfig:
    parser = argparse.ArgumentParser(description="Pick the winning poker hands from a batch")
    parser.add_argument("hands", nargs="*", help='Hands such as "4H 5H 2H 3H AH"')
    parser.add_argument("--file", type=Path, default=None, help="File with one hand per line")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    args = parser.parse_args(argv)
    if args.file is not None and not args.file.is_file():
        parser.error(f"cannot read hand file: {args.file}")
    return ShowdownConfig(hands=args.hands, file=args.file, log_level=args.log_level)


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    configure_logging(config.log_level)
    return run(config)


if __name__ == "__main__":
    raise SystemExit(main())
