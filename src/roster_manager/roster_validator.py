"""Roster readiness checks, summaries and display ordering."""

from typing import Dict, List, Sequence, Tuple

from src.roster_manager.roster_state import SourceRoster
from src.team_generator.config import ROLE_ORDER, ROSTER_SIZE, SOURCE_A, SOURCE_B
from src.team_generator.models import CompositeRoster, Player


class RosterValidator:
    """Validates source rosters and summarizes rosters for display."""

    ROLE_RANK = {role: i for i, role in enumerate(ROLE_ORDER)}

    def validate_for_generation(self, roster: SourceRoster) -> Tuple[bool, List[str]]:
        """
        Validate that a source roster can be used for generation.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        actual_count = len(roster.players)
        if actual_count < ROSTER_SIZE:
            errors.append(
                f"Missing {ROSTER_SIZE - actual_count} players "
                f"(have {actual_count}, need {ROSTER_SIZE})"
            )
        elif actual_count > ROSTER_SIZE:
            errors.append(
                f"Too many players (have {actual_count}, max {ROSTER_SIZE})"
            )

        return (len(errors) == 0, errors)

    def missing_roles(self, roster: SourceRoster) -> List[str]:
        """Roles with no player in ``roster``, in display order."""
        return [role for role in ROLE_ORDER if roster.get_role_count(role) == 0]

    def get_roster_summary(self, roster: SourceRoster) -> Dict[str, int]:
        """Player count per role, in display order."""
        return {role: roster.get_role_count(role) for role in ROLE_ORDER}

    def sort_by_role(self, players: Sequence[Player]) -> List[Player]:
        """Order players WK, Batter, All-Rounder, Bowler (stable)."""
        return sorted(players, key=lambda p: self.ROLE_RANK.get(p.role, len(ROLE_ORDER)))

    def get_composite_summary(self, roster: CompositeRoster) -> Dict:
        """Generate a display summary of a generated roster."""
        captain = roster.captain
        vice_captain = roster.vice_captain
        return {
            "players": self.sort_by_role(roster.players),
            "from_team1": roster.count_from(SOURCE_A),
            "from_team2": roster.count_from(SOURCE_B),
            "roles": roster.role_counts(),
            "captain": captain.name if captain else None,
            "vice_captain": vice_captain.name if vice_captain else None,
        }
