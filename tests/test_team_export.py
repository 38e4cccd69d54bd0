"""Tests for JSON/CSV export of generated teams."""

import pandas as pd
import pytest

from src.roster_manager.team_export import (
    export_teams_csv,
    export_teams_json,
    load_teams_json,
    teams_from_json,
    teams_to_csv,
    teams_to_frame,
    teams_to_json,
)
from src.team_generator.generator import generate_teams


@pytest.fixture
def rosters(source_a, source_b):
    return generate_teams(source_a, source_b, seed=8).rosters


def _signature(rosters):
    return [
        [(p.name, p.role, p.original_source, p.is_captain, p.is_vice_captain)
         for p in roster.players]
        for roster in rosters
    ]


# ── JSON ─────────────────────────────────────────────────────────────


class TestJsonExport:
    def test_round_trip(self, rosters):
        assert _signature(teams_from_json(teams_to_json(rosters))) == _signature(rosters)

    def test_rejects_non_list(self):
        with pytest.raises(ValueError):
            teams_from_json('{"teams": []}')

    def test_rejects_bad_player(self):
        with pytest.raises(ValueError):
            teams_from_json('[[{"role": "WK"}]]')

    def test_file_round_trip(self, rosters, tmp_path):
        path = export_teams_json(rosters, tmp_path / "out" / "fantasy-teams.json")
        assert path.exists()
        assert _signature(load_teams_json(path)) == _signature(rosters)


# ── CSV ──────────────────────────────────────────────────────────────


class TestCsvExport:
    def test_frame_shape(self, rosters):
        df = teams_to_frame(rosters)
        assert list(df.columns) == ["Team Number", "Player Name", "Role"]
        assert len(df) == 220
        assert df["Team Number"].iloc[0] == "Team 1"
        assert df["Team Number"].iloc[-1] == "Team 20"

    def test_header_bare_data_quoted(self, rosters):
        lines = teams_to_csv(rosters).splitlines()
        assert lines[0] == "Team Number,Player Name,Role"
        first = rosters[0].players[0]
        assert lines[1] == f'"Team 1","{first.name}","{first.role}"'

    def test_file_written(self, rosters, tmp_path):
        path = export_teams_csv(rosters, tmp_path / "fantasy-teams.csv")
        df = pd.read_csv(path)
        assert len(df) == 220
        assert set(df["Role"]) == {"WK", "Batter", "All-Rounder", "Bowler"}

    def test_empty_batch(self):
        assert teams_to_csv([]) == "Team Number,Player Name,Role\n"
