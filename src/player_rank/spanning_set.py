"""Minimum question set generation.

For each position stage the minimum set is a random Hamiltonian path
through the eligible players: ``n - 1`` questions that leave every player
in one connected component once answered. The self-rating stage instead
anchors one player's roles against each other.
"""

import logging
import random
from typing import List

from src.player_rank.config import ANCHOR_ROLE_PAIRS, MIN_PLAYERS
from src.player_rank.players import PlayerPool
from src.player_rank.questions import Position, Question
from src.player_rank.stages import Stage

logger = logging.getLogger(__name__)


class SpanningSetGenerator:
    """Builds the minimum set of questions needed for a stage."""

    def __init__(self, pool: PlayerPool, rng: random.Random):
        self.pool = pool
        self.rng = rng

    def generate(self, stage: Stage) -> List[Question]:
        """Questions to queue for ``stage``, already shuffled.

        Returns an empty list for DONE.
        """
        if stage.is_position_stage:
            return self.position_path(stage.position)
        if stage is Stage.SELF_RATING:
            return self.self_rating_anchors()
        return []

    def position_path(self, position: Position) -> List[Question]:
        """Random path over the players eligible for ``position``.

        Fewer than two eligible players yields no questions.
        """
        names = list(self.pool.eligible_for(position))
        if len(names) < 2:
            logger.info(
                "Only %d player(s) eligible for %s, no questions generated",
                len(names),
                position.to_str(),
            )
            return []

        self.rng.shuffle(names)
        questions = [
            Question(player1=a, pos1=position, player2=b, pos2=position)
            for a, b in zip(names, names[1:])
        ]
        self.rng.shuffle(questions)

        logger.debug(
            "Generated %d %s questions for %d players",
            len(questions),
            position.to_str(),
            len(names),
        )
        return questions

    def self_rating_anchors(self) -> List[Question]:
        """Attack-vs-Defense and Attack-vs-Goalie for one random player."""
        if len(self.pool) < MIN_PLAYERS:
            raise ValueError(
                f"Self-rating needs at least {MIN_PLAYERS} players "
                f"(have {len(self.pool)})"
            )

        candidates = self.pool.eligible_for_roles(Position)
        player = self.rng.choice(candidates)
        questions = [
            Question(player1=player, pos1=pos1, player2=player, pos2=pos2)
            for pos1, pos2 in ANCHOR_ROLE_PAIRS
        ]
        self.rng.shuffle(questions)

        logger.debug("Anchoring self-rating on %s", player)
        return questions
