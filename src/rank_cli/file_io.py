"""CSV reading and writing for players, answered questions and ranks.

File layouts:
- players:   name, goalie, avail1, avail2
- questions: player1, pos1, player2, pos2, response
- ranks:     name, atk, def, goalie (blank for non-goalies)
"""

import logging
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from src.player_rank.players import Player, Rank
from src.player_rank.questions import AnsweredQuestion, Position, Question
from src.rank_cli.config import (
    FALSE_VALUES,
    PLAYER_COLUMNS,
    QUESTION_COLUMNS,
    RANK_COLUMNS,
    TRUE_VALUES,
)

logger = logging.getLogger(__name__)


class FileFormatError(Exception):
    """Raised when a CSV file has missing columns or unparseable values."""


def _parse_bool(value, column: str, row: int) -> bool:
    if pd.isna(value):
        return False
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise FileFormatError(f"Row {row}: invalid {column} value {value!r}")


def _parse_position(value, column: str, row: int) -> Position:
    position = Position.from_str(str(value).strip())
    if position is None:
        raise FileFormatError(f"Row {row}: invalid {column} value {value!r}")
    return position


def _require_columns(df: pd.DataFrame, columns: Sequence[str], path: Path):
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise FileFormatError(f"{path} is missing columns: {missing}")


def _read_csv(path: Path) -> pd.DataFrame:
    df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    df.columns = df.columns.str.strip().str.lower()
    return df


def parse_player_file(path: Path) -> List[Player]:
    """Read the player list.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        FileFormatError: On missing columns, blank names or bad flags.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Player file not found: {path}")

    df = _read_csv(path)
    _require_columns(df, ["name"], path)

    players = []
    for i, row in enumerate(df.itertuples(index=False), start=1):
        row = row._asdict()
        name = str(row["name"]).strip()
        if not name:
            raise FileFormatError(f"Row {i}: player name is blank")
        players.append(
            Player(
                name=name,
                goalie=_parse_bool(row.get("goalie"), "goalie", i),
                avail1=_parse_bool(row.get("avail1"), "avail1", i),
                avail2=_parse_bool(row.get("avail2"), "avail2", i),
            )
        )

    logger.info("Loaded %d players from %s", len(players), path)
    return players


def parse_question_file(path: Path) -> List[AnsweredQuestion]:
    """Read previously answered questions.

    A missing or header-only file is an empty answer log.
    """
    path = Path(path)
    if not path.exists() or path.stat().st_size == 0:
        logger.info("No existing answers at %s", path)
        return []

    df = _read_csv(path)
    _require_columns(df, QUESTION_COLUMNS, path)

    answers = []
    for i, row in enumerate(df.itertuples(index=False), start=1):
        try:
            response = float(row.response)
        except ValueError as e:
            raise FileFormatError(f"Row {i}: invalid response {row.response!r}") from e
        question = Question(
            player1=str(row.player1).strip(),
            pos1=_parse_position(row.pos1, "pos1", i),
            player2=str(row.player2).strip(),
            pos2=_parse_position(row.pos2, "pos2", i),
        )
        answers.append(AnsweredQuestion(question=question, response=response))

    logger.info("Loaded %d answered questions from %s", len(answers), path)
    return answers


def write_question_file(path: Path, answers: Sequence[AnsweredQuestion]) -> Path:
    path = Path(path)
    df = pd.DataFrame(
        [
            {
                "player1": a.question.player1,
                "pos1": a.question.pos1.to_str(),
                "player2": a.question.player2,
                "pos2": a.question.pos2.to_str(),
                "response": a.response,
            }
            for a in answers
        ],
        columns=QUESTION_COLUMNS,
    )
    df.to_csv(path, index=False)
    logger.info("Wrote %d answered questions to %s", len(df), path)
    return path


def write_rank_file(path: Path, ranks: Sequence[Rank]) -> Path:
    path = Path(path)
    df = pd.DataFrame(
        [
            {"name": r.name, "atk": r.atk, "def": r.def_, "goalie": r.goalie}
            for r in ranks
        ],
        columns=RANK_COLUMNS,
    )
    df.to_csv(path, index=False)
    logger.info("Wrote %d ranks to %s", len(df), path)
    return path
