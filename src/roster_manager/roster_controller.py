"""Roster controller - orchestrates roster edits, generation and autosave."""

import logging
from typing import Dict, List, Optional

from src.roster_manager.roster_rules import RosterRules, ValidationError
from src.roster_manager.roster_state import RosterState, SourceRoster, TeamInfo
from src.roster_manager.roster_validator import RosterValidator
from src.roster_manager.state_persistence import StatePersistence
from src.team_generator.composition_rules import GenerationError, PreconditionError
from src.team_generator.config import ROSTER_SIZE, SOURCE_A, SOURCE_B
from src.team_generator.generator import RosterCombinationEngine
from src.team_generator.models import CompositeRoster, GeneratedBatch, Player

logger = logging.getLogger(__name__)


class RosterController:
    """Main controller for building rosters and generating teams.

    Coordinates between RosterRules (edit validation), RosterValidator
    (readiness checks), the combination engine and StatePersistence.
    Every edit discards the current generated teams and autosaves.
    """

    def __init__(
        self,
        state: Optional[RosterState] = None,
        persistence: Optional[StatePersistence] = None,
        seed: Optional[int] = None,
    ):
        self.state = state or RosterState()
        self.persistence = persistence
        self.rules = RosterRules(self.state)
        self.validator = RosterValidator()
        self.engine = RosterCombinationEngine(seed=seed)

    @classmethod
    def from_storage(
        cls, persistence: StatePersistence, seed: Optional[int] = None
    ) -> "RosterController":
        """Restore a controller from whatever state was last saved."""
        return cls(persistence.load_state(), persistence, seed=seed)

    # ------------------------------------------------------------------
    # Roster edits
    # ------------------------------------------------------------------

    def add_player(self, source: str, name: str, role: str) -> Player:
        """Validate and append a player to a source roster.

        Raises:
            ValidationError: If the name is blank or taken, the role is
                unknown, the roster is full, or the source is unknown.
        """
        roster = self._get_roster(source)
        is_valid, error_msg = self.rules.validate_new_player(roster, name, role)
        if not is_valid:
            logger.warning("Invalid player for %s: %s", source, error_msg)
            raise ValidationError(error_msg)

        player = Player(name=name.strip(), role=role)
        roster.add_player(player)
        logger.info(
            "Added %s (%s) to %s (%d/%d)",
            player.name,
            player.role,
            source,
            len(roster.players),
            ROSTER_SIZE,
        )
        self._on_roster_changed()
        return player

    def remove_player(self, source: str, index: int) -> Player:
        """Remove the player at ``index`` from a source roster.

        Raises:
            ValidationError: If ``index`` is out of range.
        """
        roster = self._get_roster(source)
        is_valid, error_msg = self.rules.validate_removal(roster, index)
        if not is_valid:
            logger.warning("Invalid removal from %s: %s", source, error_msg)
            raise ValidationError(error_msg)

        player = roster.remove_player(index)
        logger.info("Removed %s from %s", player.name, source)
        self._on_roster_changed()
        return player

    def select_team(self, source: str, team_id: str) -> TeamInfo:
        """Tag a source roster with a franchise from the catalog.

        Raises:
            ValidationError: If the franchise is unknown or already taken
                by the other roster.
        """
        roster = self._get_roster(source)
        is_valid, error_msg = self.rules.validate_team_selection(source, team_id)
        if not is_valid:
            logger.warning("Invalid team selection for %s: %s", source, error_msg)
            raise ValidationError(error_msg)

        roster.team_info = TeamInfo.lookup(team_id)
        logger.info("Selected %s for %s", roster.team_info.name, source)
        self._on_roster_changed()
        return roster.team_info

    def clear_roster(self, source: str):
        """Remove every player and the franchise from a source roster."""
        self._get_roster(source).clear()
        logger.info("Cleared %s", source)
        self._on_roster_changed()

    def clear_generated_teams(self):
        """Discard the current generated teams."""
        self.state.generated_teams = []
        self._save()

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    @property
    def can_generate(self) -> bool:
        """Whether both rosters are complete."""
        return self.state.is_ready()

    def generate_teams(self) -> GeneratedBatch:
        """Generate a fresh batch of teams from the two source rosters.

        Returns:
            The generated batch (also stored in the state and saved).

        Raises:
            PreconditionError: If either roster is incomplete.
            InsufficientDiversityError: If the rosters lack the role
                variety needed for enough unique teams.
        """
        for source in (SOURCE_A, SOURCE_B):
            is_valid, errors = self.validator.validate_for_generation(
                self._get_roster(source)
            )
            if not is_valid:
                message = f"{source}: {'; '.join(errors)}"
                logger.warning("Cannot generate teams: %s", message)
                raise PreconditionError(message)

        try:
            batch = self.engine.generate(self.state.team1.players, self.state.team2.players)
        except GenerationError as e:
            logger.warning("Team generation failed: %s", e)
            self.state.generated_teams = []
            self._save()
            raise

        self.state.generated_teams = list(batch.rosters)
        self._save()
        return batch

    @property
    def generated_teams(self) -> List[CompositeRoster]:
        return self.state.generated_teams

    def get_team_summaries(self) -> List[Dict]:
        """Display summaries for every generated team."""
        return [
            self.validator.get_composite_summary(roster)
            for roster in self.state.generated_teams
        ]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _get_roster(self, source: str) -> SourceRoster:
        try:
            return self.state.get_roster(source)
        except ValueError as e:
            raise ValidationError(str(e)) from e

    def _on_roster_changed(self):
        self.state.generated_teams = []
        self._save()

    def _save(self):
        if self.persistence is not None:
            self.persistence.save_state(self.state)
