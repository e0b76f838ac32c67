"""Question selection once the minimum set is complete."""

import itertools
import logging
import random
from typing import List, Optional, Tuple

from src.player_rank.config import SELF_RATING_ROLE_PAIRS
from src.player_rank.players import PlayerPool
from src.player_rank.questions import Question
from src.player_rank.session_state import StageRecord
from src.player_rank.stages import ConnectionLevelReached, Stage

logger = logging.getLogger(__name__)


class RegularSelector:
    """Prefers questions about the least-compared players.

    Every legal question not yet answered or skipped at the stage is scored
    by the number of answered questions touching its players, halved. The
    lowest score wins; ties go to whichever candidate the shuffle put first.
    """

    def __init__(self, pool: PlayerPool, rng: random.Random):
        self.pool = pool
        self.rng = rng

    def candidates(self, stage: Stage, record: StageRecord) -> List[Question]:
        """Unasked questions for ``stage`` in random order."""
        if stage.is_position_stage:
            position = stage.position
            legal = [
                Question(player1=a, pos1=position, player2=b, pos2=position)
                for a, b in itertools.combinations(self.pool.eligible_for(position), 2)
            ]
        elif stage is Stage.SELF_RATING:
            legal = [
                Question(player1=name, pos1=pos1, player2=name, pos2=pos2)
                for pos1, pos2 in SELF_RATING_ROLE_PAIRS
                for name in self.pool.eligible_for_roles((pos1, pos2))
            ]
        else:
            return []

        remaining = [q for q in legal if not record.was_asked(q)]
        self.rng.shuffle(remaining)
        return remaining

    @staticmethod
    def connection_score(question: Question, record: StageRecord) -> int:
        return (
            record.connection_count(question.player1)
            + record.connection_count(question.player2)
        ) // 2

    def select(
        self, stage: Stage, record: StageRecord
    ) -> Tuple[Optional[Question], Optional[ConnectionLevelReached]]:
        """Pick the least-connected question for ``stage``.

        Returns:
            (question, status). ``question`` is None when the stage has no
            unasked questions left. ``status`` is set when the stage's
            minimum connection level changes.
        """
        best: Optional[Question] = None
        best_score = 0
        for question in self.candidates(stage, record):
            score = self.connection_score(question, record)
            if best is None or score < best_score:
                best, best_score = question, score

        if best is None:
            return None, None

        status = None
        if record.min_connection != best_score:
            record.min_connection = best_score
            status = ConnectionLevelReached(best_score)
            logger.debug(
                "Connection level %d reached for %s", best_score, stage.name
            )

        return best, status
