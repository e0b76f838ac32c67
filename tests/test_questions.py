"""Tests for question and player data models."""

import pytest

from src.player_rank.players import Player, PlayerPool
from src.player_rank.questions import Position, Question


def _q(p1, p2, pos=Position.ATTACK, pos2=None):
    return Question(player1=p1, pos1=pos, player2=p2, pos2=pos2 or pos)


# ── Position ─────────────────────────────────────────────────────────

class TestPosition:
    def test_round_trip_labels(self):
        for position in Position:
            assert Position.from_str(position.to_str()) is position

    def test_unknown_label(self):
        assert Position.from_str("Midfield") is None


# ── Question ─────────────────────────────────────────────────────────

class TestQuestion:
    def test_same_pair_ignores_order(self):
        assert _q("Alice", "Bob").same_pair(_q("Bob", "Alice"))

    def test_same_pair_respects_position(self):
        assert not _q("Alice", "Bob").same_pair(_q("Alice", "Bob", Position.DEFENSE))

    def test_equality_is_ordered(self):
        assert _q("Alice", "Bob") == _q("Alice", "Bob")
        assert _q("Alice", "Bob") != _q("Bob", "Alice")

    def test_self_rating(self):
        q = Question("Alice", Position.ATTACK, "Alice", Position.GOALIE)
        assert q.is_self_rating()
        assert q.role_pair() == {Position.ATTACK, Position.GOALIE}
        assert not _q("Alice", "Bob").is_self_rating()

    def test_involves(self):
        q = _q("Alice", "Bob")
        assert q.involves("Alice")
        assert q.involves("Bob")
        assert not q.involves("Charlotte")

    def test_str(self):
        assert str(_q("Samuel", "William")) == "Samuel Atk vs William Atk"


# ── PlayerPool ───────────────────────────────────────────────────────

class TestPlayerPool:
    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate player name"):
            PlayerPool([Player("Alice"), Player("Alice")])

    def test_eligibility_by_position(self):
        pool = PlayerPool([Player("Alice", goalie=True), Player("Bob"), Player("Cat")])
        assert pool.eligible_for(Position.ATTACK) == ["Alice", "Bob", "Cat"]
        assert pool.eligible_for(Position.GOALIE) == ["Alice"]

    def test_role_pairs_prefer_goalies(self):
        pool = PlayerPool([Player("Alice", goalie=True), Player("Bob")])
        assert pool.eligible_for_roles((Position.ATTACK, Position.GOALIE)) == ["Alice"]
        assert pool.eligible_for_roles((Position.ATTACK, Position.DEFENSE)) == [
            "Alice", "Bob",
        ]

    def test_role_pairs_fall_back_without_goalies(self):
        pool = PlayerPool([Player("Alice"), Player("Bob")])
        assert pool.eligible_for_roles((Position.ATTACK, Position.GOALIE)) == [
            "Alice", "Bob",
        ]

    def test_lookup(self):
        pool = PlayerPool([Player("Alice", goalie=True)])
        assert "Alice" in pool
        assert pool.get("Alice").goalie is True
        assert len(pool) == 1
