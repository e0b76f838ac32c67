"""Player data models and role eligibility."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from src.player_rank.questions import Position


@dataclass(frozen=True)
class Player:
    """A player as supplied by the caller. Never mutated by the engine."""

    name: str
    goalie: bool = False
    avail1: bool = False
    avail2: bool = False


@dataclass
class Rank:
    """Relative per-role scores for one player."""

    name: str
    atk: float
    def_: float
    goalie: Optional[float] = None


class PlayerPool:
    """Read-only view over the caller's player list.

    Resolves names back to players and decides which players are eligible
    for each role.
    """

    def __init__(self, players: Sequence[Player]):
        self.players = list(players)
        self._by_name: Dict[str, Player] = {}
        for player in self.players:
            if player.name in self._by_name:
                raise ValueError(f"Duplicate player name: {player.name!r}")
            self._by_name[player.name] = player

    def __len__(self) -> int:
        return len(self.players)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Player:
        return self._by_name[name]

    @property
    def names(self) -> List[str]:
        return [p.name for p in self.players]

    @property
    def goalies(self) -> List[str]:
        return [p.name for p in self.players if p.goalie]

    def eligible_for(self, position: Position) -> List[str]:
        """Players that can be compared at a single position."""
        if position is Position.GOALIE:
            return self.goalies
        return self.names

    def eligible_for_roles(self, positions: Iterable[Position]) -> List[str]:
        """Players that can be compared against themself across roles.

        Falls back to every player when nobody is goalie-capable, so the
        goalie scale can still be anchored.
        """
        if Position.GOALIE in set(positions) and self.goalies:
            return self.goalies
        return self.names
