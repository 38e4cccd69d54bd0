"""CSV ingestion for source rosters.

Handles the usual quirks of hand-made roster sheets:
- Header names in any case ("Name", "Player Name", "player")
- Quoted or padded cells
- Blank rows
- Role spellings such as "wicket-keeper", "batsman" or "AR"
"""

import logging
import re
from pathlib import Path
from typing import Optional

import pandas as pd

from src.roster_manager.config import ROLE_ALIASES
from src.roster_manager.roster_rules import RosterRules
from src.roster_manager.roster_state import RosterState, SourceRoster
from src.team_generator.models import Player

logger = logging.getLogger(__name__)

_NAME_COLUMNS = ("name", "player name", "player", "player_name")
_ROLE_COLUMNS = ("role", "position", "pos", "player role")

# Characters ignored when matching role aliases
_ROLE_NOISE = re.compile(r"[\s\-_/.]+")


class IngestionError(Exception):
    """Raised when a roster CSV cannot be read."""


def normalize_role(raw: str) -> Optional[str]:
    """Map a free-form role string onto a canonical role.

    Examples:
        "wicket-keeper" -> "WK"
        "Batsman"       -> "Batter"
        "all rounder"   -> "All-Rounder"
        "spinner"       -> None
    """
    if pd.isna(raw):
        return None
    key = _ROLE_NOISE.sub("", str(raw).strip().strip('"')).lower()
    return ROLE_ALIASES.get(key)


class RosterIngester:
    """Reads a source roster from a two-column CSV (name, role)."""

    def read_roster(self, path: Path) -> SourceRoster:
        """Read and validate one roster file.

        Returns:
            SourceRoster with players in file order.

        Raises:
            IngestionError: If the file is missing, lacks the name/role
                columns, or any row breaks the roster rules.
        """
        path = Path(path)
        if not path.exists():
            raise IngestionError(f"Roster file not found: {path}")

        logger.info("Reading roster: %s", path.name)
        try:
            df = pd.read_csv(path, quotechar='"', dtype=str, skip_blank_lines=True)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise IngestionError(f"Failed to read {path}: {e}") from e

        name_col = self._find_column(df, _NAME_COLUMNS)
        role_col = self._find_column(df, _ROLE_COLUMNS)
        if name_col is None or role_col is None:
            raise IngestionError(
                f"{path.name} must have a name column and a role column "
                f"(found: {list(df.columns)})"
            )

        df = df[[name_col, role_col]].copy()
        for col in (name_col, role_col):
            df[col] = df[col].str.strip().str.strip('"').str.strip()

        # Drop rows where the player name is missing or blank
        df = df[df[name_col].notna() & (df[name_col] != "")]
        df = df.reset_index(drop=True)

        roster = SourceRoster()
        rules = RosterRules(RosterState(team1=roster))
        for row_number, row in enumerate(df.itertuples(index=False), start=1):
            name, raw_role = row[0], row[1]
            role = normalize_role(raw_role)
            if role is None:
                raise IngestionError(
                    f"{path.name} row {row_number}: unknown role {raw_role!r} for {name}"
                )

            is_valid, error = rules.validate_new_player(roster, name, role)
            if not is_valid:
                raise IngestionError(f"{path.name} row {row_number}: {error}")
            roster.add_player(Player(name=name, role=role))

        logger.info("Loaded %d players from %s", len(roster.players), path.name)
        return roster

    @staticmethod
    def _find_column(df: pd.DataFrame, candidates) -> Optional[str]:
        """Return the first column whose normalized header is a candidate."""
        cols = {str(c).strip().lower(): c for c in df.columns}
        for cand in candidates:
            if cand in cols:
                return cols[cand]
        return None
