"""
Command line entry point for the Kingdoms calculator.

Usage:
    python -m src.main match.yaml
    python -m src.main match.yaml --round 2 --output results/match.json --verbose
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .board import MatchConfig, parse_board, render_board, render_castle_report, render_scoreboard
from .scoring import Board, analyze_rounds


logger = logging.getLogger(__name__)


def load_config(config_path: str) -> MatchConfig:
    """Load a match configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return MatchConfig(**data)


def parse_rounds(config: MatchConfig) -> List[Board]:
    """Parse every round's board, raising ValueError listing all board errors."""
    boards: List[Board] = []
    problems: List[str] = []

    for i, spec in enumerate(config.rounds, start=1):
        board, errors = parse_board(spec, rows=config.rows, cols=config.cols)
        for error in errors:
            where = f" line {error.line}" if error.line is not None else ""
            where += f" cell {error.column}" if error.column is not None else ""
            problems.append(f"round {i}{where}: [{error.code}] {error.message}")
        if board is not None:
            boards.append(board)

    if problems:
        raise ValueError("Invalid board:\n  " + "\n  ".join(problems))

    return boards


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Score a Kingdoms match",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example match.yaml:
  names:
    RED: Alice
    BLUE: Bob
  rounds:
    - |
      [R1] +5  .   M  .  .
      .    D   .   .  .  .
      .    .  [B2] -3 .  .
      .    .   .   .  .  .
      .    .   .   .  .  .
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML match file"
    )
    parser.add_argument(
        "--round", "-r",
        type=int,
        help="Only show this round (1-based); the grand total still covers all rounds"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the full analysis as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(args.config)
        boards = parse_rounds(config)
    except Exception as e:
        print(f"Error loading match: {e}", file=sys.stderr)
        return 1

    logger.info(f"Loaded {len(boards)} round(s) of {config.rows}x{config.cols} from {args.config}")

    if args.round is not None and not 1 <= args.round <= len(boards):
        print(f"Error: round must be between 1 and {len(boards)}", file=sys.stderr)
        return 1

    match = analyze_rounds(boards)
    names = {color: config.display_name(color) for color in match.totals}

    for i, (board, analysis) in enumerate(zip(boards, match.rounds), start=1):
        if args.round is not None and i != args.round:
            continue
        logger.info(f"Round {i}: {sum(1 for _ in board.iter_castles())} castle(s)")

        print(f"=== Round {i} ===")
        print(render_board(board, analysis))
        print()
        report = render_castle_report(board, analysis)
        if report:
            print(report)
            print()
        print(render_scoreboard(analysis.scores, names))
        print()

    print("=== Total ===")
    print(render_scoreboard(match.totals, names))

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(match.model_dump(mode="json"), f, indent=2)
        logger.info(f"Results saved to: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
