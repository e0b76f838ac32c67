"""Replacement questions for skips during the minimum-set phase.

Dropping a question from a stage's spanning set can split the players into
two components. The resolver grows both components from the skipped
question's endpoints over the remaining queued and answered questions,
then offers a random untried question that crosses between them.
"""

import logging
import random
from typing import List, Optional, Sequence, Set

from src.player_rank.players import PlayerPool
from src.player_rank.questions import Question
from src.player_rank.session_state import StageRecord
from src.player_rank.stages import Stage

logger = logging.getLogger(__name__)


class SkipResolution:
    """Outcome of resolving a skip."""

    def __init__(self, replacement: Optional[Question], exhausted: bool):
        self.replacement = replacement
        self.exhausted = exhausted

    @classmethod
    def replaced(cls, question: Question) -> "SkipResolution":
        return cls(question, exhausted=False)

    @classmethod
    def still_connected(cls) -> "SkipResolution":
        return cls(None, exhausted=False)

    @classmethod
    def no_replacement(cls) -> "SkipResolution":
        return cls(None, exhausted=True)


class SkipResolver:
    """Finds a substitute that keeps a stage's question graph connected."""

    def __init__(self, pool: PlayerPool, rng: random.Random):
        self.pool = pool
        self.rng = rng

    def resolve(
        self,
        stage: Stage,
        skipped: Question,
        record: StageRecord,
        queue: Sequence[Question],
    ) -> SkipResolution:
        """Record ``skipped`` and pick a replacement for it.

        Args:
            stage: Stage the skipped question belongs to.
            skipped: The declined question.
            record: Bookkeeping for ``stage``. The skip is appended here.
            queue: Questions still waiting to be asked at this stage.

        Returns:
            A SkipResolution. The caller queues ``replacement`` when set.
        """
        record.skipped.append(skipped)
        logger.debug("Skipped %s", skipped)

        if stage is Stage.SELF_RATING:
            replacement = self._self_rating_replacement(skipped, record, queue)
            if replacement is None:
                return SkipResolution.no_replacement()
            return SkipResolution.replaced(replacement)

        edges = [q for q in queue if not q.same_pair(skipped)]
        edges.extend(record.answered_questions())

        left = self._component(skipped.player1, edges)
        right = self._component(skipped.player2, edges)

        if left & right:
            logger.debug("%s and %s remain connected", skipped.player1, skipped.player2)
            return SkipResolution.still_connected()

        candidates = self._crossing_candidates(stage, left, right, record)
        if not candidates:
            return SkipResolution.no_replacement()

        replacement = self.rng.choice(candidates)
        logger.debug(
            "Replacing skipped question with %s (%d candidates)",
            replacement,
            len(candidates),
        )
        return SkipResolution.replaced(replacement)

    @staticmethod
    def _component(start: str, edges: List[Question]) -> Set[str]:
        """Players reachable from ``start`` over ``edges``."""
        component = {start}
        grown = True
        while grown:
            grown = False
            for edge in edges:
                a, b = edge.player1, edge.player2
                if a in component and b not in component:
                    component.add(b)
                    grown = True
                elif b in component and a not in component:
                    component.add(a)
                    grown = True
        return component

    def _crossing_candidates(
        self,
        stage: Stage,
        left: Set[str],
        right: Set[str],
        record: StageRecord,
    ) -> List[Question]:
        """Untried questions between the two components, in player order."""
        position = stage.position
        names = self.pool.names
        candidates = []
        for a in (n for n in names if n in left):
            for b in (n for n in names if n in right):
                question = Question(player1=a, pos1=position, player2=b, pos2=position)
                if not record.was_skipped(question):
                    candidates.append(question)
        return candidates

    def _self_rating_replacement(
        self,
        skipped: Question,
        record: StageRecord,
        queue: Sequence[Question],
    ) -> Optional[Question]:
        """Same role pair, asked of another player."""
        names = list(self.pool.eligible_for_roles(skipped.role_pair()))
        self.rng.shuffle(names)
        for name in names:
            question = Question(
                player1=name, pos1=skipped.pos1, player2=name, pos2=skipped.pos2
            )
            if record.was_asked(question):
                continue
            if any(q.same_pair(question) for q in queue):
                continue
            return question
        return None
