from src.player_rank.player_rank import PlayerRank
from src.player_rank.players import Player, PlayerPool, Rank
from src.player_rank.questions import AnsweredQuestion, Position, Question
from src.player_rank.ranking import RankCalculator
from src.player_rank.session_rules import (
    AllQuestionsAsked,
    InvalidResponse,
    MinSetNotReached,
    NoActiveQuestion,
    PlayerRankError,
)
from src.player_rank.stages import (
    AllMandatoryQuestionsAnswered,
    AllQuestionsSkipped,
    ConnectionLevelReached,
    Stage,
    StartingStage,
)

__all__ = [
    "AllMandatoryQuestionsAnswered",
    "AllQuestionsAsked",
    "AllQuestionsSkipped",
    "AnsweredQuestion",
    "ConnectionLevelReached",
    "InvalidResponse",
    "MinSetNotReached",
    "NoActiveQuestion",
    "Player",
    "PlayerPool",
    "PlayerRank",
    "PlayerRankError",
    "Position",
    "Question",
    "Rank",
    "RankCalculator",
    "Stage",
    "StartingStage",
]
