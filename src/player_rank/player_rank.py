"""Session engine - decides which question to ask next and records answers."""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from src.player_rank.config import MIN_PLAYERS
from src.player_rank.players import Player, PlayerPool, Rank
from src.player_rank.questions import AnsweredQuestion, Question
from src.player_rank.ranking import RankCalculator
from src.player_rank.regular_selector import RegularSelector
from src.player_rank.session_rules import InvalidResponse, SessionRules
from src.player_rank.session_state import SessionState
from src.player_rank.skip_resolver import SkipResolver
from src.player_rank.spanning_set import SpanningSetGenerator
from src.player_rank.stages import (
    AllMandatoryQuestionsAnswered,
    AllQuestionsSkipped,
    QuestionStatus,
    Stage,
    StartingStage,
)

logger = logging.getLogger(__name__)

NextQuestion = Tuple[Optional[Question], Optional[QuestionStatus]]


class PlayerRank:
    """Main controller for a ranking session.

    Walks the stages twice: first building the minimum connected question
    set for every stage, then asking extra questions about the
    least-compared players. Coordinates SpanningSetGenerator, SkipResolver
    and RegularSelector (question choice), SessionRules (validation) and
    SessionState (bookkeeping).

    Typical use::

        ranker = PlayerRank(players, answers, seed=0)
        question, status = ranker.get_next_question()
        ranker.give_response(1.5)
        ...
        ranks = ranker.get_ranking()
    """

    def __init__(
        self,
        players: Sequence[Player],
        answers: Optional[List[AnsweredQuestion]] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Args:
            players: The caller's players. Names must be unique.
            answers: Caller-owned answer log, appended to as questions are
                answered. Must be empty.
            seed: Seed for the session's random generator.
            rng: Generator to use instead of seeding a new one.

        Raises:
            ValueError: If ``answers`` is non-empty, there are fewer than
                MIN_PLAYERS players, or player names repeat.
        """
        if answers is None:
            answers = []
        if answers:
            raise ValueError(
                f"Cannot start a session from a non-empty answer log "
                f"({len(answers)} answers given)"
            )

        self.pool = PlayerPool(players)
        if len(self.pool) < MIN_PLAYERS:
            raise ValueError(
                f"At least {MIN_PLAYERS} players are required (have {len(self.pool)})"
            )

        self.answers = answers
        self.rng = rng if rng is not None else random.Random(seed)
        self.state = SessionState()
        self.rules = SessionRules(self.state)
        self.generator = SpanningSetGenerator(self.pool, self.rng)
        self.resolver = SkipResolver(self.pool, self.rng)
        self.selector = RegularSelector(self.pool, self.rng)
        self.calculator = RankCalculator(self.pool)

        logger.info("Started ranking session with %d players", len(self.pool))

    @property
    def stage(self) -> Stage:
        return self.state.stage

    @property
    def minimum_set_reached(self) -> bool:
        return self.state.minimum_set_reached

    @property
    def current_question(self) -> Optional[Question]:
        return self.state.current_question

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_next_question(self) -> NextQuestion:
        """Return the next question and an optional status for the caller.

        A question still waiting for a response counts as skipped. If no
        replacement can keep the stage connected, returns
        ``(None, AllQuestionsSkipped())`` and stays in the current stage.
        ``(None, None)`` means every stage is done.
        """
        outstanding = self.state.current_question
        if outstanding is not None:
            self.state.current_question = None
            if not self._handle_skip(outstanding):
                return None, AllQuestionsSkipped()

        if self.state.minimum_set_reached:
            return self._next_regular_question()
        return self._next_minimum_set_question()

    def give_response(self, response: float) -> AnsweredQuestion:
        """Answer the outstanding question.

        Raises:
            NoActiveQuestion: If no question is outstanding.
            InvalidResponse: If ``response`` is negative, NaN or infinite.
                The question stays outstanding.
        """
        try:
            self.rules.validate_response(response)
        except InvalidResponse:
            logger.warning("Rejected response %r", response)
            raise

        answered = AnsweredQuestion(
            question=self.state.current_question, response=float(response)
        )
        self.state.record().answered.append(answered)
        self.answers.append(answered)
        self.state.current_question = None

        logger.debug("Answered %s with %s", answered.question, answered.response)
        return answered

    def next_section(self):
        """Move on to the next stage at the next get_next_question call.

        Raises:
            MinSetNotReached: During the minimum-set phase.
            AllQuestionsAsked: If every stage is already done.
        """
        self.rules.validate_next_section()
        self.state.question_queue.clear()
        self.state.advance_requested = True
        logger.info("Leaving stage %s early", self.state.stage.name)

    def get_ranking(self) -> List[Rank]:
        """Score every player from the answers recorded so far."""
        return self.calculator.calculate(self.answers)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _handle_skip(self, skipped: Question) -> bool:
        """Record a skip. Returns False when no replacement exists."""
        record = self.state.record()

        if self.state.minimum_set_reached:
            record.skipped.append(skipped)
            logger.debug("Skipped %s", skipped)
            return True

        resolution = self.resolver.resolve(
            self.state.stage, skipped, record, self.state.question_queue
        )
        if resolution.exhausted:
            logger.warning(
                "No replacement for skipped question %s in stage %s",
                skipped,
                self.state.stage.name,
            )
            return False

        if resolution.replacement is not None:
            self.state.question_queue.append(resolution.replacement)
        return True

    def _start_stage(self, stage: Stage) -> StartingStage:
        self.state.move_to(stage)
        self.state.question_queue = self.generator.generate(stage)
        logger.info(
            "Starting stage %s with %d questions",
            stage.name,
            len(self.state.question_queue),
        )
        return StartingStage(stage)

    def _next_minimum_set_question(self) -> NextQuestion:
        status: Optional[QuestionStatus] = None

        if not self.state.started:
            self.state.started = True
            status = self._start_stage(self.state.stage)

        while not self.state.question_queue:
            next_stage = self.state.stage.next()
            if next_stage is Stage.DONE:
                return self._finish_minimum_set()
            status = self._start_stage(next_stage)

        self.state.current_question = self.state.question_queue.pop()
        return self.state.current_question, status

    def _finish_minimum_set(self) -> NextQuestion:
        self.state.enter_regular_phase()
        first_stage = self.state.stage
        logger.info("All mandatory questions answered, starting extra questions")

        question, _ = self._next_regular_question()
        return question, AllMandatoryQuestionsAnswered(first_stage)

    def _advance_regular_stage(self) -> Optional[StartingStage]:
        next_stage = self.state.stage.next()
        self.state.move_to(next_stage)
        if next_stage is Stage.DONE:
            logger.info("All stages done")
            return None
        logger.info("Starting stage %s", next_stage.name)
        return StartingStage(next_stage)

    def _next_regular_question(self) -> NextQuestion:
        status: Optional[QuestionStatus] = None

        if self.state.advance_requested:
            self.state.advance_requested = False
            status = self._advance_regular_stage()

        while self.state.stage is not Stage.DONE:
            question, level = self.selector.select(self.state.stage, self.state.record())
            if question is not None:
                self.state.current_question = question
                return question, status or level
            status = self._advance_regular_stage()

        return None, None
