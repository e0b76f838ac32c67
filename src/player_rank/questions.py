"""Question data models - the comparisons asked of the user."""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple


class Position(Enum):
    """A role a player can be rated in."""

    ATTACK = "Atk"
    DEFENSE = "Def"
    GOALIE = "Goalie"

    @classmethod
    def from_str(cls, value: str) -> Optional["Position"]:
        """Parse a position label, returning None for unrecognized text."""
        for position in cls:
            if position.value == value:
                return position
        return None

    def to_str(self) -> str:
        return self.value


@dataclass(frozen=True)
class Question:
    """A comparison of (player1, pos1) against (player2, pos2).

    Players are referenced by name, which is unique within a session.
    During position stages ``pos1 == pos2``; during self-rating
    ``player1 == player2`` and the positions differ.
    """

    player1: str
    pos1: Position
    player2: str
    pos2: Position

    def endpoints(self) -> FrozenSet[Tuple[str, Position]]:
        """Order-independent key, so A-vs-B matches B-vs-A."""
        return frozenset({(self.player1, self.pos1), (self.player2, self.pos2)})

    def same_pair(self, other: "Question") -> bool:
        return self.endpoints() == other.endpoints()

    def involves(self, player: str) -> bool:
        return player in (self.player1, self.player2)

    def role_pair(self) -> FrozenSet[Position]:
        return frozenset({self.pos1, self.pos2})

    def is_self_rating(self) -> bool:
        return self.player1 == self.player2 and self.pos1 != self.pos2

    def __str__(self) -> str:
        return (
            f"{self.player1} {self.pos1.to_str()} vs "
            f"{self.player2} {self.pos2.to_str()}"
        )


@dataclass(frozen=True)
class AnsweredQuestion:
    """A question plus the user's skill-factor response."""

    question: Question
    response: float
