"""Protocol rule enforcement for a ranking session."""

import math

from src.player_rank.session_state import SessionState
from src.player_rank.stages import Stage


class PlayerRankError(Exception):
    """Base class for misuse of the question/response protocol."""

    pass


class NoActiveQuestion(PlayerRankError):
    """Raised when a response is given with no outstanding question."""

    pass


class InvalidResponse(PlayerRankError):
    """Raised when a response is not a finite, non-negative number."""

    pass


class MinSetNotReached(PlayerRankError):
    """Raised when skipping a section before the minimum set is complete."""

    pass


class AllQuestionsAsked(PlayerRankError):
    """Raised when skipping a section after every stage is done."""

    pass


class SessionRules:
    """Enforces the question/response protocol against session state.

    Each check raises a distinct PlayerRankError subclass so the caller
    can give a precise message. None of them mutate state.
    """

    def __init__(self, state: SessionState):
        self.state = state

    def validate_response(self, response: float):
        if self.state.current_question is None:
            raise NoActiveQuestion("No question is waiting for a response")

        try:
            value = float(response)
        except (TypeError, ValueError) as e:
            raise InvalidResponse(f"Response {response!r} is not a number") from e

        # copysign catches -0.0 as well as negative values
        if not math.isfinite(value) or math.copysign(1.0, value) < 0:
            raise InvalidResponse(
                f"Response must be finite and non-negative (got {response!r})"
            )

    def validate_next_section(self):
        if not self.state.minimum_set_reached:
            raise MinSetNotReached(
                "Can't skip sections until the minimum question set has been reached"
            )
        if self.state.stage is Stage.DONE:
            raise AllQuestionsAsked("All questions have been asked")
