"""Shared fixtures for the player-rank test suite."""

import pytest

from src.player_rank.player_rank import PlayerRank
from src.player_rank.players import Player

NAMES = [
    "Alice", "Bob", "Charlotte", "David", "Emily", "Frank", "Grace",
    "Henry", "Isabella", "Jack", "Kate", "Liam", "Mia", "Noah",
    "Olivia", "Peter", "Quinn", "Rachel", "Samuel", "Taylor",
    "Ulysses", "Victoria", "William", "Xander", "Yasmine", "Zachary",
]


def make_players(count, goalies=0):
    """First ``count`` names; the first ``goalies`` of them can play goal."""
    assert count <= len(NAMES)
    return [
        Player(name=name, goalie=i < goalies)
        for i, name in enumerate(NAMES[:count])
    ]


def answer_all(ranker, response=1.0, limit=10_000):
    """Answer every question until the session is done.

    Returns the (question, status) pairs seen.
    """
    seen = []
    for _ in range(limit):
        question, status = ranker.get_next_question()
        seen.append((question, status))
        if question is None:
            break
        ranker.give_response(response)
    return seen


# ------------------------------------------------------------------
# Fixtures
# ------------------------------------------------------------------

@pytest.fixture
def players():
    return make_players(6, goalies=3)


@pytest.fixture
def ranker(players):
    return PlayerRank(players, [], seed=0)
