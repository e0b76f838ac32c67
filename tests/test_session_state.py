"""Tests for per-stage bookkeeping and session state."""

from src.player_rank.questions import AnsweredQuestion, Position, Question
from src.player_rank.session_state import SessionState, StageRecord
from src.player_rank.stages import MinimumSetPhase, RegularPhase, Stage


def _q(p1, p2):
    return Question(player1=p1, pos1=Position.ATTACK, player2=p2, pos2=Position.ATTACK)


class TestStageRecord:
    def test_was_asked_covers_answers_and_skips(self):
        record = StageRecord()
        record.answered.append(AnsweredQuestion(_q("A", "B"), 1.0))
        record.skipped.append(_q("C", "D"))
        assert record.was_asked(_q("B", "A"))
        assert record.was_asked(_q("D", "C"))
        assert not record.was_asked(_q("A", "C"))

    def test_connection_count(self):
        record = StageRecord()
        record.answered.append(AnsweredQuestion(_q("A", "B"), 1.0))
        record.answered.append(AnsweredQuestion(_q("A", "C"), 2.0))
        assert record.connection_count("A") == 2
        assert record.connection_count("B") == 1
        assert record.connection_count("D") == 0


class TestSessionState:
    def test_initial_state(self):
        state = SessionState()
        assert state.phase == MinimumSetPhase(Stage.ATTACK)
        assert state.stage is Stage.ATTACK
        assert not state.minimum_set_reached
        assert state.current_question is None
        assert len(state.records) == len(Stage)

    def test_records_are_independent(self):
        state = SessionState()
        state.record(Stage.ATTACK).skipped.append(_q("A", "B"))
        assert state.record(Stage.DEFENSE).skipped == []

    def test_move_to_keeps_phase(self):
        state = SessionState()
        state.move_to(Stage.GOALIE)
        assert state.phase == MinimumSetPhase(Stage.GOALIE)

    def test_enter_regular_phase(self):
        state = SessionState()
        state.move_to(Stage.SELF_RATING)
        state.question_queue.append(_q("A", "B"))
        state.enter_regular_phase()
        assert state.phase == RegularPhase(Stage.ATTACK)
        assert state.minimum_set_reached
        assert state.question_queue == []
