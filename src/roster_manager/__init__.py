from src.roster_manager.roster_controller import RosterController
from src.roster_manager.roster_ingestion import IngestionError, RosterIngester
from src.roster_manager.roster_rules import RosterRules, ValidationError
from src.roster_manager.roster_state import RosterState, SourceRoster, TeamInfo
from src.roster_manager.roster_validator import RosterValidator
from src.roster_manager.state_persistence import StatePersistence
from src.roster_manager.team_export import (
    export_teams_csv,
    export_teams_json,
    load_teams_json,
)

__all__ = [
    "IngestionError",
    "RosterController",
    "RosterIngester",
    "RosterRules",
    "RosterState",
    "RosterValidator",
    "SourceRoster",
    "StatePersistence",
    "TeamInfo",
    "ValidationError",
    "export_teams_csv",
    "export_teams_json",
    "load_teams_json",
]
