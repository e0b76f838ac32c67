"""Tests for player, question and rank CSV files."""

import textwrap

import pandas as pd
import pytest

from src.player_rank.players import Player, Rank
from src.player_rank.questions import AnsweredQuestion, Position, Question
from src.rank_cli.file_io import (
    FileFormatError,
    parse_player_file,
    parse_question_file,
    write_question_file,
    write_rank_file,
)


def _write(path, text):
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Player files
# ---------------------------------------------------------------------------

class TestParsePlayerFile:
    def test_reads_players(self, tmp_path):
        path = _write(tmp_path / "players.csv", """
            name,goalie,avail1,avail2
            Jason,true,yes,0
            Max,false,no,1
        """)
        assert parse_player_file(path) == [
            Player("Jason", goalie=True, avail1=True, avail2=False),
            Player("Max", goalie=False, avail1=False, avail2=True),
        ]

    def test_optional_flag_columns(self, tmp_path):
        path = _write(tmp_path / "players.csv", """
            Name
            Jason
        """)
        assert parse_player_file(path) == [Player("Jason")]

    def test_blank_flags_are_false(self, tmp_path):
        path = _write(tmp_path / "players.csv", """
            name,goalie,avail1,avail2
            Jason,,,
        """)
        assert parse_player_file(path)[0].goalie is False

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_player_file(tmp_path / "nope.csv")

    def test_missing_name_column(self, tmp_path):
        path = _write(tmp_path / "players.csv", """
            player,goalie
            Jason,true
        """)
        with pytest.raises(FileFormatError, match="missing columns"):
            parse_player_file(path)

    def test_bad_flag(self, tmp_path):
        path = _write(tmp_path / "players.csv", """
            name,goalie
            Jason,sometimes
        """)
        with pytest.raises(FileFormatError, match="goalie"):
            parse_player_file(path)


# ---------------------------------------------------------------------------
# Question files
# ---------------------------------------------------------------------------

class TestQuestionFile:
    def test_missing_file_is_empty(self, tmp_path):
        assert parse_question_file(tmp_path / "questions.csv") == []

    def test_empty_file_is_empty(self, tmp_path):
        path = tmp_path / "questions.csv"
        path.touch()
        assert parse_question_file(path) == []

    def test_header_only_is_empty(self, tmp_path):
        path = _write(tmp_path / "questions.csv", """
            player1,pos1,player2,pos2,response
        """)
        assert parse_question_file(path) == []

    def test_reads_answers(self, tmp_path):
        path = _write(tmp_path / "questions.csv", """
            player1,pos1,player2,pos2,response
            Jason,Atk,Max,Def,1.2
        """)
        assert parse_question_file(path) == [
            AnsweredQuestion(Question("Jason", Position.ATTACK, "Max", Position.DEFENSE), 1.2)
        ]

    def test_bad_position(self, tmp_path):
        path = _write(tmp_path / "questions.csv", """
            player1,pos1,player2,pos2,response
            Jason,Wing,Max,Def,1.2
        """)
        with pytest.raises(FileFormatError, match="pos1"):
            parse_question_file(path)

    def test_written_answers_read_back(self, tmp_path):
        answers = [
            AnsweredQuestion(Question("A", Position.GOALIE, "B", Position.GOALIE), 0.5),
            AnsweredQuestion(Question("C", Position.ATTACK, "C", Position.DEFENSE), 2.0),
        ]
        path = write_question_file(tmp_path / "questions.csv", answers)
        assert parse_question_file(path) == answers


# ---------------------------------------------------------------------------
# Rank files
# ---------------------------------------------------------------------------

class TestWriteRankFile:
    def test_columns_and_blank_goalie(self, tmp_path):
        ranks = [
            Rank(name="Jason", atk=1.2, def_=1.5, goalie=2.2),
            Rank(name="Max", atk=0.8, def_=1.24, goalie=None),
        ]
        path = write_rank_file(tmp_path / "ranks.csv", ranks)
        df = pd.read_csv(path)
        assert list(df.columns) == ["name", "atk", "def", "goalie"]
        assert df.loc[0, "goalie"] == pytest.approx(2.2)
        assert pd.isna(df.loc[1, "goalie"])
