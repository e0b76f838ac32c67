"""Run an interactive ranking session.

Asks comparison questions about the players in PLAYER_FILE, records the
answers to QUESTION_FILE and writes per-role scores to OUTPUT_FILE.

Usage:
    python -m src.rank_cli.run_session PLAYER_FILE QUESTION_FILE OUTPUT_FILE

At each question enter a skill factor (how many times better the first
player is than the second), or one of:
    s   skip this question
    n   skip the rest of this section (extra questions only)
    q   quit and write results
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from src.logging_config import setup_logging
from src.player_rank.player_rank import PlayerRank
from src.player_rank.players import Rank
from src.player_rank.session_rules import (
    AllQuestionsAsked,
    InvalidResponse,
    MinSetNotReached,
    NoActiveQuestion,
)
from src.player_rank.stages import AllQuestionsSkipped
from src.rank_cli.config import NEXT_SECTION_COMMAND, QUIT_COMMAND, SKIP_COMMAND
from src.rank_cli.file_io import (
    FileFormatError,
    parse_player_file,
    parse_question_file,
    write_question_file,
    write_rank_file,
)

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Determine relative player rankings through a series of questions "
            "comparing two players' abilities."
        )
    )
    parser.add_argument(
        "player_file", type=Path,
        help="CSV with a list of players and information about them",
    )
    parser.add_argument(
        "question_file", type=Path,
        help="CSV of answered comparisons. May or may not already exist",
    )
    parser.add_argument(
        "output_file", type=Path,
        help="CSV output file with relative rankings for each player",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log-level", default="INFO", help="Console log level")
    return parser


def validate_arguments(args: argparse.Namespace):
    """Check file paths before any question is asked.

    Raises:
        FileNotFoundError: If the player file or an output directory is missing.
        IsADirectoryError: If any path names a directory.
    """
    if not args.player_file.is_file():
        raise FileNotFoundError(f"Invalid file `{args.player_file}`")

    for path in (args.question_file, args.output_file):
        if path.is_dir():
            raise IsADirectoryError(f"Invalid file `{path}`: the path is a directory")
        if not path.parent.is_dir():
            raise FileNotFoundError(f"Directory not found for `{path}`")


def run_ranking(
    player_rank: PlayerRank,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> List[Rank]:
    """Ask questions until the user quits or none remain.

    Returns:
        The ranking computed from every answer given.
    """
    while True:
        question, status = player_rank.get_next_question()
        if status is not None:
            output_fn(f"Question status: {status}")

        if question is None:
            if isinstance(status, AllQuestionsSkipped):
                output_fn("Every replacement for that question has been skipped")
                continue
            output_fn("All possible combinations have been asked or skipped, you're done! :)")
            break

        output_fn(str(question))
        if not _collect_response(player_rank, input_fn, output_fn):
            break

    return player_rank.get_ranking()


def _collect_response(
    player_rank: PlayerRank, input_fn: InputFn, output_fn: OutputFn
) -> bool:
    """Read input until it is acted on. Returns False when the user quits."""
    while True:
        try:
            text = input_fn("> ").strip().lower()
        except EOFError:
            return False

        if text == QUIT_COMMAND:
            return False
        if text == SKIP_COMMAND:
            return True
        if text == NEXT_SECTION_COMMAND:
            try:
                player_rank.next_section()
            except MinSetNotReached:
                output_fn(
                    "Can't skip sections until the minimum question set has been reached"
                )
                continue
            except AllQuestionsAsked:
                output_fn("All questions have been asked! You gotta quit now")
                continue
            return True

        try:
            value = float(text)
        except ValueError:
            continue

        try:
            player_rank.give_response(value)
        except InvalidResponse:
            output_fn("Invalid response")
            continue
        except NoActiveQuestion as e:
            raise RuntimeError(
                "Internal logic error: gave a response with no active question"
            ) from e
        return True


def run(args: argparse.Namespace, input_fn: InputFn = input, output_fn: OutputFn = print):
    validate_arguments(args)

    players = parse_player_file(args.player_file)
    answers = parse_question_file(args.question_file)

    player_rank = PlayerRank(players, answers, seed=args.seed)
    ranks = run_ranking(player_rank, input_fn, output_fn)

    write_question_file(args.question_file, answers)
    write_rank_file(args.output_file, ranks)
    return ranks


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        run(args)
    except (FileNotFoundError, IsADirectoryError, FileFormatError, ValueError):
        logger.exception("Ranking session failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
