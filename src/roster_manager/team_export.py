"""Export generated teams to JSON and CSV files."""

import csv
import json
import logging
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from src.roster_manager.config import EXPORT_CSV_COLUMNS
from src.team_generator.models import CompositeRoster, Player

logger = logging.getLogger(__name__)


def teams_to_json(rosters: Sequence[CompositeRoster]) -> str:
    """Serialize rosters as a JSON array of player arrays."""
    payload = [[p.to_dict() for p in roster.players] for roster in rosters]
    return json.dumps(payload, indent=2)


def teams_from_json(text: str) -> List[CompositeRoster]:
    """Parse :func:`teams_to_json` output.

    Raises:
        ValueError: If the document is not a list of player lists.
    """
    data = json.loads(text)
    if not isinstance(data, list) or not all(isinstance(r, list) for r in data):
        raise ValueError("Expected a JSON array of teams, each an array of players")
    try:
        return [
            CompositeRoster(players=[Player.from_dict(p) for p in roster])
            for roster in data
        ]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Malformed player record: {e}") from e


def teams_to_frame(rosters: Sequence[CompositeRoster]) -> pd.DataFrame:
    """One row per player: Team Number, Player Name, Role."""
    rows = [
        {
            "Team Number": f"Team {team_index}",
            "Player Name": player.name,
            "Role": player.role,
        }
        for team_index, roster in enumerate(rosters, start=1)
        for player in roster.players
    ]
    return pd.DataFrame(rows, columns=EXPORT_CSV_COLUMNS)


def teams_to_csv(rosters: Sequence[CompositeRoster]) -> str:
    """Serialize rosters as CSV: a bare header line, then quoted data cells."""
    header = ",".join(EXPORT_CSV_COLUMNS) + "\n"
    if not rosters:
        return header
    body = teams_to_frame(rosters).to_csv(
        index=False, header=False, quoting=csv.QUOTE_ALL, lineterminator="\n"
    )
    return header + body


def export_teams_json(rosters: Sequence[CompositeRoster], path: Path) -> Path:
    """Write rosters to a JSON file.

    Returns:
        Path to the written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(teams_to_json(rosters))
    logger.info("Exported %d teams to %s", len(rosters), path)
    return path


def load_teams_json(path: Path) -> List[CompositeRoster]:
    """Read rosters back from a file written by :func:`export_teams_json`."""
    with open(path, "r", encoding="utf-8") as f:
        return teams_from_json(f.read())


def export_teams_csv(rosters: Sequence[CompositeRoster], path: Path) -> Path:
    """Write rosters to a CSV file.

    Returns:
        Path to the written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(teams_to_csv(rosters))
    logger.info("Exported %d teams (%d rows) to %s", len(rosters),
                sum(len(r.players) for r in rosters), path)
    return path
