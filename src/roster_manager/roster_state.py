"""Roster state data models - single source of truth for both source rosters."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from src.roster_manager.config import TEAM_CATALOG
from src.team_generator.config import ROSTER_SIZE, SOURCE_A, SOURCE_B
from src.team_generator.models import CompositeRoster, Player


@dataclass
class TeamInfo:
    """Display metadata for the franchise a source roster represents."""

    id: str
    name: str
    primary_color: str
    secondary_color: str
    text_color: str

    def to_dict(self) -> Dict:
        return {
            "id": self.id,
            "name": self.name,
            "primary_color": self.primary_color,
            "secondary_color": self.secondary_color,
            "text_color": self.text_color,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "TeamInfo":
        return cls(
            id=data["id"],
            name=data["name"],
            primary_color=data["primary_color"],
            secondary_color=data["secondary_color"],
            text_color=data["text_color"],
        )

    @classmethod
    def lookup(cls, team_id: str) -> Optional["TeamInfo"]:
        """Find a franchise in the built-in catalog by id."""
        for entry in TEAM_CATALOG:
            if entry["id"] == team_id:
                return cls.from_dict(entry)
        return None


@dataclass
class SourceRoster:
    """One of the two user-built input rosters."""

    players: List[Player] = field(default_factory=list)
    team_info: Optional[TeamInfo] = None

    @property
    def display_name(self) -> Optional[str]:
        return self.team_info.name if self.team_info else None

    def add_player(self, player: Player):
        """Append a player to the end of the roster."""
        self.players.append(player)

    def remove_player(self, index: int) -> Player:
        """Remove and return the player at ``index``."""
        return self.players.pop(index)

    def clear(self):
        """Drop every player and the franchise selection."""
        self.players = []
        self.team_info = None

    def is_complete(self) -> bool:
        return len(self.players) == ROSTER_SIZE

    def get_role_count(self, role: str) -> int:
        """Get number of players holding ``role``."""
        return sum(1 for p in self.players if p.role == role)

    def has_player_named(self, name: str) -> bool:
        return any(p.name == name for p in self.players)


@dataclass
class RosterState:
    """Complete application state: both source rosters and the last batch."""

    team1: SourceRoster = field(default_factory=SourceRoster)
    team2: SourceRoster = field(default_factory=SourceRoster)
    generated_teams: List[CompositeRoster] = field(default_factory=list)

    def get_roster(self, source: str) -> SourceRoster:
        """Get the source roster for ``source`` ("team1" or "team2")."""
        if source == SOURCE_A:
            return self.team1
        if source == SOURCE_B:
            return self.team2
        raise ValueError(f"Unknown source team: {source!r}")

    def get_other_roster(self, source: str) -> SourceRoster:
        """Get the roster that is not ``source``."""
        self.get_roster(source)
        return self.get_roster(SOURCE_B if source == SOURCE_A else SOURCE_A)

    def is_ready(self) -> bool:
        """Whether both rosters are complete."""
        return self.team1.is_complete() and self.team2.is_complete()
