"""Session bookkeeping - single source of truth for a ranking session."""

from dataclasses import dataclass, field
from typing import List, Optional

from src.player_rank.questions import AnsweredQuestion, Question
from src.player_rank.stages import MinimumSetPhase, Phase, RegularPhase, Stage


@dataclass
class StageRecord:
    """Answered/skipped history and connectivity progress for one stage."""

    answered: List[AnsweredQuestion] = field(default_factory=list)
    skipped: List[Question] = field(default_factory=list)
    min_connection: Optional[int] = None

    def answered_questions(self) -> List[Question]:
        return [a.question for a in self.answered]

    def was_answered(self, question: Question) -> bool:
        return any(a.question.same_pair(question) for a in self.answered)

    def was_skipped(self, question: Question) -> bool:
        return any(q.same_pair(question) for q in self.skipped)

    def was_asked(self, question: Question) -> bool:
        """Answered or skipped, in either endpoint order."""
        return self.was_answered(question) or self.was_skipped(question)

    def connection_count(self, player: str) -> int:
        """Number of answered questions touching ``player``."""
        return sum(1 for a in self.answered if a.question.involves(player))


@dataclass
class SessionState:
    """Mutable state of one PlayerRank session."""

    phase: Phase = field(default_factory=lambda: MinimumSetPhase(Stage.first()))
    started: bool = False
    question_queue: List[Question] = field(default_factory=list)
    current_question: Optional[Question] = None
    # Set by next_section during the regular phase
    advance_requested: bool = False
    # One record per stage, indexed by Stage.value
    records: List[StageRecord] = field(
        default_factory=lambda: [StageRecord() for _ in Stage]
    )

    @property
    def stage(self) -> Stage:
        return self.phase.stage

    @property
    def minimum_set_reached(self) -> bool:
        return isinstance(self.phase, RegularPhase)

    def record(self, stage: Optional[Stage] = None) -> StageRecord:
        """Bookkeeping for ``stage`` (default: the current stage)."""
        if stage is None:
            stage = self.stage
        return self.records[stage.value]

    def move_to(self, stage: Stage):
        """Change stage while staying in the current phase."""
        self.phase = type(self.phase)(stage)

    def enter_regular_phase(self):
        self.phase = RegularPhase(Stage.first())
        self.question_queue.clear()
        self.advance_requested = False
