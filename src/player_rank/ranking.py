"""Per-role score aggregation from answered questions.

Each answer ``(p1, pos1) vs (p2, pos2) = r`` is read as "p1 at pos1 is r
times as skilled as p2 at pos2", which gives one linear equation in log
space::

    log s(p1, pos1) - log s(p2, pos2) = log r

The system is solved in the least-squares sense. ``numpy.linalg.lstsq``
returns the minimum-norm solution, so every connected group of
(player, position) nodes ends up with a geometric mean score of 1 and
nodes without any answers score exactly 1.
"""

import logging
import math
from typing import Dict, List, Sequence, Tuple

import numpy as np

from src.player_rank.config import RESPONSE_FLOOR
from src.player_rank.players import PlayerPool, Rank
from src.player_rank.questions import AnsweredQuestion, Position

logger = logging.getLogger(__name__)

Node = Tuple[str, Position]


class RankCalculator:
    """Turns an answer log into one Rank per player."""

    def __init__(self, pool: PlayerPool):
        self.pool = pool

    def calculate(self, answers: Sequence[AnsweredQuestion]) -> List[Rank]:
        scores = self.solve_scores(answers)

        ranks = []
        for player in self.pool.players:
            ranks.append(
                Rank(
                    name=player.name,
                    atk=scores.get((player.name, Position.ATTACK), 1.0),
                    def_=scores.get((player.name, Position.DEFENSE), 1.0),
                    goalie=(
                        scores.get((player.name, Position.GOALIE), 1.0)
                        if player.goalie
                        else None
                    ),
                )
            )
        return ranks

    def solve_scores(self, answers: Sequence[AnsweredQuestion]) -> Dict[Node, float]:
        """Relative score for every (player, position) node."""
        index: Dict[Node, int] = {}
        for name in self.pool.names:
            for position in Position:
                index[(name, position)] = len(index)

        rows = []
        targets = []
        for answer in answers:
            q = answer.question
            a = (q.player1, q.pos1)
            b = (q.player2, q.pos2)
            if a == b:
                continue
            for node in (a, b):
                if node not in index:
                    logger.warning("Answer references unknown player %r", node[0])
                    index[node] = len(index)
            rows.append((index[a], index[b]))
            targets.append(math.log(max(answer.response, RESPONSE_FLOOR)))

        if not rows:
            return {node: 1.0 for node in index}

        matrix = np.zeros((len(rows), len(index)))
        for i, (a, b) in enumerate(rows):
            matrix[i, a] += 1.0
            matrix[i, b] -= 1.0

        solution, _, rank, _ = np.linalg.lstsq(matrix, np.array(targets), rcond=None)
        logger.info(
            "Solved %d answers over %d nodes (rank %d)", len(rows), len(index), rank
        )

        return {node: float(np.exp(solution[i])) for node, i in index.items()}
