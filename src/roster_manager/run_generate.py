"""Generate fantasy teams from two roster CSV files.

Usage:
    python -m src.roster_manager.run_generate team1_csv team2_csv [output_dir] [seed]

Examples:
    python -m src.roster_manager.run_generate csk.csv mi.csv
    python -m src.roster_manager.run_generate csk.csv mi.csv out/ 42
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

from src.logging_config import setup_logging
from src.roster_manager.config import (
    EXPORT_CSV_FILENAME,
    EXPORT_DIR,
    EXPORT_JSON_FILENAME,
)
from src.roster_manager.roster_controller import RosterController
from src.roster_manager.roster_ingestion import IngestionError, RosterIngester
from src.roster_manager.roster_state import RosterState
from src.roster_manager.state_persistence import StatePersistence
from src.roster_manager.team_export import export_teams_csv, export_teams_json
from src.team_generator.composition_rules import GenerationError

logger = logging.getLogger(__name__)


def run_generation(
    team1_path: Path,
    team2_path: Path,
    output_dir: Optional[Path] = None,
    seed: Optional[int] = None,
    storage_dir: Optional[Path] = None,
) -> Dict[str, Path]:
    """Ingest two rosters, generate the batch and export it.

    Args:
        team1_path: CSV roster for source A.
        team2_path: CSV roster for source B.
        output_dir: Directory for the JSON/CSV exports.
            Defaults to ``data/exports/``.
        seed: Optional seed for a reproducible batch.
        storage_dir: Directory for persisted state.
            Defaults to ``data/state/``.

    Returns:
        Dict with the "json" and "csv" output paths.

    Raises:
        IngestionError: If either roster file is unusable.
        GenerationError: If the rosters cannot produce a full batch.
    """
    if output_dir is None:
        output_dir = EXPORT_DIR

    # 1. Ingest
    logger.info("Step 1/3: Reading rosters...")
    ingester = RosterIngester()
    state = RosterState(
        team1=ingester.read_roster(team1_path),
        team2=ingester.read_roster(team2_path),
    )

    # 2. Generate
    logger.info("Step 2/3: Generating teams...")
    controller = RosterController(state, StatePersistence(storage_dir), seed=seed)
    batch = controller.generate_teams()
    logger.info(
        "Generated %d teams (%d structured, %d fallback)",
        len(batch),
        batch.structured_count,
        batch.fallback_count,
    )

    # 3. Export
    logger.info("Step 3/3: Exporting...")
    outputs = {
        "json": export_teams_json(batch.rosters, Path(output_dir) / EXPORT_JSON_FILENAME),
        "csv": export_teams_csv(batch.rosters, Path(output_dir) / EXPORT_CSV_FILENAME),
    }

    logger.info("Generation complete! Output: %s", output_dir)
    return outputs


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 3:
        print(__doc__)
        sys.exit(2)

    team1 = Path(sys.argv[1])
    team2 = Path(sys.argv[2])
    out_dir = Path(sys.argv[3]) if len(sys.argv) > 3 else None
    seed = int(sys.argv[4]) if len(sys.argv) > 4 else None

    try:
        paths = run_generation(team1, team2, out_dir, seed)
        print(f"Teams written: {paths['json']}, {paths['csv']}")
    except (IngestionError, GenerationError) as e:
        logger.error("Could not generate teams: %s", e)
        sys.exit(2)
    except Exception:
        logger.exception("Generation failed")
        sys.exit(1)
