"""State persistence - save and load roster state as named JSON blobs."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.roster_manager.config import STORAGE_DIR, STORAGE_KEYS
from src.roster_manager.roster_state import RosterState, SourceRoster, TeamInfo
from src.team_generator.composition_rules import validate_composite
from src.team_generator.config import SOURCE_A, SOURCE_B
from src.team_generator.models import CompositeRoster, Player

logger = logging.getLogger(__name__)


class StatePersistence:
    """Key-value store of JSON blobs, one ``<key>.json`` file per key.

    Loads are best-effort: missing or malformed blobs are logged and
    ignored rather than raised.
    """

    def __init__(self, storage_dir: Optional[Path] = None):
        self.storage_dir = storage_dir or STORAGE_DIR
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Raw blobs
    # ------------------------------------------------------------------

    def save_blob(self, key: str, data: Any) -> Path:
        """Write ``data`` as JSON under ``key``.

        Returns:
            Path to the saved file.
        """
        filepath = self._path_for(key)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        return filepath

    def load_blob(self, key: str) -> Optional[Any]:
        """Read the JSON stored under ``key``.

        Returns:
            The decoded value, or None if absent or unreadable.
        """
        filepath = self._path_for(key)

        if not filepath.exists():
            return None

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Corrupt state file %s: %s", filepath, e)
            return None

    def clear(self, key: str) -> bool:
        """Delete the blob stored under ``key``.

        Returns:
            True if deleted, False if not found.
        """
        filepath = self._path_for(key)
        if not filepath.exists():
            return False
        filepath.unlink()
        logger.info("Cleared stored %s", key)
        return True

    # ------------------------------------------------------------------
    # Typed helpers
    # ------------------------------------------------------------------

    def save_source_roster(self, source: str, roster: SourceRoster) -> Path:
        """Persist one source roster under its fixed key."""
        filepath = self.save_blob(STORAGE_KEYS[source], self._roster_to_dict(roster))
        logger.debug("Saved %s (%d players) to %s", source, len(roster.players), filepath)
        return filepath

    def load_source_roster(self, source: str) -> Optional[SourceRoster]:
        """Load one source roster.

        Returns:
            SourceRoster if found and well-formed, None otherwise.
        """
        data = self.load_blob(STORAGE_KEYS[source])
        if data is None:
            return None

        try:
            return self._dict_to_roster(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Ignoring malformed %s roster: %s", source, e)
            return None

    def save_generated_teams(self, rosters: List[CompositeRoster]) -> Path:
        """Persist the generated batch (an empty list clears it)."""
        payload = [[p.to_dict() for p in roster.players] for roster in rosters]
        return self.save_blob(STORAGE_KEYS["generated_teams"], payload)

    def load_generated_teams(self) -> List[CompositeRoster]:
        """Load the last generated batch.

        Returns:
            The rosters, or an empty list if absent, malformed, or if any
            roster breaks the composition rules.
        """
        data = self.load_blob(STORAGE_KEYS["generated_teams"])
        if not data:
            return []

        try:
            rosters = [
                CompositeRoster(players=[Player.from_dict(p) for p in roster])
                for roster in data
            ]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Ignoring malformed generated teams: %s", e)
            return []

        for index, roster in enumerate(rosters, start=1):
            is_valid, errors = validate_composite(roster)
            if not is_valid:
                logger.warning(
                    "Ignoring stored generated teams: team %d invalid (%s)",
                    index,
                    "; ".join(errors),
                )
                return []

        return rosters

    def save_state(self, state: RosterState) -> None:
        """Persist all three blobs."""
        self.save_source_roster(SOURCE_A, state.team1)
        self.save_source_roster(SOURCE_B, state.team2)
        self.save_generated_teams(state.generated_teams)
        logger.info(
            "Saved state: %d + %d players, %d generated teams",
            len(state.team1.players),
            len(state.team2.players),
            len(state.generated_teams),
        )

    def load_state(self) -> RosterState:
        """Rebuild the full state, falling back to empty parts."""
        state = RosterState(
            team1=self.load_source_roster(SOURCE_A) or SourceRoster(),
            team2=self.load_source_roster(SOURCE_B) or SourceRoster(),
            generated_teams=self.load_generated_teams(),
        )
        logger.info(
            "Loaded state: %d + %d players, %d generated teams",
            len(state.team1.players),
            len(state.team2.players),
            len(state.generated_teams),
        )
        return state

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def _path_for(self, key: str) -> Path:
        return self.storage_dir / f"{key}.json"

    def _roster_to_dict(self, roster: SourceRoster) -> Dict:
        """Convert SourceRoster to JSON-serializable dict."""
        return {
            "players": [{"name": p.name, "role": p.role} for p in roster.players],
            "team_info": roster.team_info.to_dict() if roster.team_info else None,
        }

    def _dict_to_roster(self, data: Dict) -> SourceRoster:
        """Reconstruct SourceRoster from dict."""
        team_info = data.get("team_info")
        return SourceRoster(
            players=[Player.from_dict(p) for p in data["players"]],
            team_info=TeamInfo.from_dict(team_info) if team_info else None,
        )
