"""Roster edit rules and validation logic."""

from typing import Optional, Tuple

from src.roster_manager.roster_state import RosterState, SourceRoster, TeamInfo
from src.team_generator.config import ROLE_ORDER, ROLES, ROSTER_SIZE


class ValidationError(Exception):
    """Raised when a roster edit violates the roster rules."""

    pass


class RosterRules:
    """Enforces the rules for editing the two source rosters."""

    def __init__(self, state: RosterState):
        self.state = state

    def validate_new_player(
        self, roster: SourceRoster, name: str, role: str
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate if a player can be added to ``roster``.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        if not name or not name.strip():
            return False, "Player name cannot be empty"

        if role not in ROLES:
            return (
                False,
                f"Invalid role '{role}'. Must be one of: {', '.join(ROLE_ORDER)}",
            )

        if len(roster.players) >= ROSTER_SIZE:
            return False, f"Roster is full ({ROSTER_SIZE} players)"

        if roster.has_player_named(name.strip()):
            return False, f"{name.strip()} is already in this roster"

        return True, None

    def validate_removal(
        self, roster: SourceRoster, index: int
    ) -> Tuple[bool, Optional[str]]:
        """Check that ``index`` points at a player in ``roster``."""
        if not 0 <= index < len(roster.players):
            return (
                False,
                f"No player at position {index} "
                f"(roster has {len(roster.players)} players)",
            )
        return True, None

    def validate_team_selection(
        self, source: str, team_id: str
    ) -> Tuple[bool, Optional[str]]:
        """A franchise must exist and cannot be taken by the other roster."""
        team_info = TeamInfo.lookup(team_id)
        if team_info is None:
            return False, f"Unknown team '{team_id}'"

        other = self.state.get_other_roster(source)
        if other.team_info is not None and other.team_info.id == team_id:
            return False, f"{team_info.name} is already selected for the other team"

        return True, None
