"""Stage ordering, session phases and caller-facing status values."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from src.player_rank.questions import Position


class Stage(Enum):
    """Stages of questioning, totally ordered by declaration."""

    ATTACK = 0
    DEFENSE = 1
    GOALIE = 2
    SELF_RATING = 3
    DONE = 4

    @classmethod
    def first(cls) -> "Stage":
        return cls.ATTACK

    def next(self) -> "Stage":
        """The following stage. DONE maps to itself."""
        if self is Stage.DONE:
            return Stage.DONE
        return Stage(self.value + 1)

    @property
    def position(self) -> Optional[Position]:
        """Position compared in a position stage, else None."""
        return _STAGE_POSITIONS.get(self)

    @property
    def is_position_stage(self) -> bool:
        return self in _STAGE_POSITIONS


_STAGE_POSITIONS = {
    Stage.ATTACK: Position.ATTACK,
    Stage.DEFENSE: Position.DEFENSE,
    Stage.GOALIE: Position.GOALIE,
}


@dataclass(frozen=True)
class MinimumSetPhase:
    """Building the minimum connected question set."""

    stage: Stage


@dataclass(frozen=True)
class RegularPhase:
    """Minimum set complete; asking extra questions."""

    stage: Stage


Phase = Union[MinimumSetPhase, RegularPhase]


# ── Status values returned by PlayerRank.get_next_question ──────────


@dataclass(frozen=True)
class StartingStage:
    stage: Stage


@dataclass(frozen=True)
class AllMandatoryQuestionsAnswered:
    # Carries the stage the regular phase starts in
    stage: Stage


@dataclass(frozen=True)
class ConnectionLevelReached:
    level: int


@dataclass(frozen=True)
class AllQuestionsSkipped:
    pass


QuestionStatus = Union[
    StartingStage,
    AllMandatoryQuestionsAnswered,
    ConnectionLevelReached,
    AllQuestionsSkipped,
]
