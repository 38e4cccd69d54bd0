"""Data models for the team generator."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional

from src.team_generator.config import ROLE_ORDER, ROSTER_SIZE


def team_key(players: Iterable["Player"]) -> str:
    """Sorted-name signature used to detect duplicate rosters.

    Only names take part, so like-named players from different sources
    produce the same key.
    """
    return "|".join(sorted(p.name for p in players))


@dataclass
class Player:
    """A single player as contributed by one source roster."""

    name: str
    role: str  # "WK", "Batter", "All-Rounder", "Bowler"
    original_source: Optional[str] = None  # "team1" or "team2"
    is_captain: bool = False
    is_vice_captain: bool = False

    def to_dict(self) -> Dict:
        """Convert to a JSON-serializable dict."""
        return {
            "name": self.name,
            "role": self.role,
            "original_source": self.original_source,
            "is_captain": self.is_captain,
            "is_vice_captain": self.is_vice_captain,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Player":
        """Rebuild a player from :meth:`to_dict` output.

        Raises:
            KeyError: If ``name`` or ``role`` is missing.
            ValueError: If ``name`` or ``role`` is not a string.
        """
        name = data["name"]
        role = data["role"]
        if not isinstance(name, str) or not isinstance(role, str):
            raise ValueError(f"Malformed player record: {data!r}")
        return cls(
            name=name,
            role=role,
            original_source=data.get("original_source"),
            is_captain=bool(data.get("is_captain", False)),
            is_vice_captain=bool(data.get("is_vice_captain", False)),
        )


@dataclass
class CompositeRoster:
    """A generated roster mixing players from both sources."""

    players: List[Player] = field(default_factory=list)

    @property
    def team_key(self) -> str:
        return team_key(self.players)

    @property
    def captain(self) -> Optional[Player]:
        return next((p for p in self.players if p.is_captain), None)

    @property
    def vice_captain(self) -> Optional[Player]:
        return next((p for p in self.players if p.is_vice_captain), None)

    def count_from(self, source: str) -> int:
        """Number of players contributed by ``source``."""
        return sum(1 for p in self.players if p.original_source == source)

    def role_counts(self) -> Dict[str, int]:
        """Player count per role, in display order."""
        counts = {role: 0 for role in ROLE_ORDER}
        for player in self.players:
            counts[player.role] = counts.get(player.role, 0) + 1
        return counts


@dataclass
class RoleDistribution:
    """Planned per-role split of a composite roster between the sources.

    ``a_counts`` is exact. ``b_minimums`` marks roles source B must cover
    because source A contributes none, and ``b_capacity`` bounds how many
    of each role source B is expected to supply.
    """

    total_a: int
    a_counts: Dict[str, int]
    b_minimums: Dict[str, int]
    b_capacity: Dict[str, int]

    @property
    def total_b(self) -> int:
        return ROSTER_SIZE - self.total_a

    @property
    def forced_b_roles(self) -> List[str]:
        """Roles source B must supply, in display order."""
        return [role for role in ROLE_ORDER if self.b_minimums.get(role, 0) > 0]


class GenerationStage(str, Enum):
    """Stages a single generation call moves through."""

    IDLE = "Idle"
    PLANNING = "Planning"
    STRUCTURED_SAMPLING = "StructuredSampling"
    FALLBACK_SAMPLING = "FallbackSampling"
    SHUFFLING_AND_CAPTAINCY = "Shuffling&Captaincy"
    DONE = "Done"
    FAILED = "Failed"


@dataclass
class GeneratedBatch:
    """Result of one generation call: the rosters plus how they were found."""

    rosters: List[CompositeRoster]
    structured_count: int = 0
    fallback_count: int = 0
    fallback_attempts: int = 0
    distributions_considered: int = 0

    def __len__(self) -> int:
        return len(self.rosters)

    def __iter__(self) -> Iterator[CompositeRoster]:
        return iter(self.rosters)

    def __getitem__(self, index: int) -> CompositeRoster:
        return self.rosters[index]
