"""Tests for roster readiness checks and display summaries."""

import pytest

from src.roster_manager.roster_state import SourceRoster
from src.roster_manager.roster_validator import RosterValidator
from src.team_generator.generator import generate_teams
from src.team_generator.models import Player


@pytest.fixture
def validator():
    return RosterValidator()


# ── Readiness ────────────────────────────────────────────────────────


class TestValidateForGeneration:
    def test_complete_roster(self, validator, source_a):
        assert validator.validate_for_generation(SourceRoster(players=source_a)) == (True, [])

    def test_short_roster(self, validator, source_a):
        is_valid, errors = validator.validate_for_generation(SourceRoster(players=source_a[:8]))
        assert not is_valid
        assert errors == ["Missing 3 players (have 8, need 11)"]

    def test_empty_roster(self, validator):
        is_valid, errors = validator.validate_for_generation(SourceRoster())
        assert not is_valid
        assert errors == ["Missing 11 players (have 0, need 11)"]

    def test_oversized_roster(self, validator, source_a):
        roster = SourceRoster(players=source_a + [Player("Extra", "Bowler")])
        is_valid, errors = validator.validate_for_generation(roster)
        assert not is_valid
        assert errors == ["Too many players (have 12, max 11)"]


# ── Summaries ────────────────────────────────────────────────────────


class TestSummaries:
    def test_roster_summary(self, validator, source_a):
        summary = validator.get_roster_summary(SourceRoster(players=source_a))
        assert summary == {"WK": 1, "Batter": 4, "All-Rounder": 3, "Bowler": 3}

    def test_missing_roles(self, validator, make_players):
        roster = SourceRoster(players=make_players("X", (0, 6, 5, 0)))
        assert validator.missing_roles(roster) == ["WK", "Bowler"]

    def test_sort_by_role_is_stable(self, validator):
        players = [
            Player("b1", "Bowler"), Player("w1", "WK"), Player("a1", "All-Rounder"),
            Player("b2", "Bowler"), Player("t1", "Batter"), Player("w2", "WK"),
        ]
        ordered = [p.name for p in validator.sort_by_role(players)]
        assert ordered == ["w1", "w2", "t1", "a1", "b1", "b2"]

    def test_composite_summary(self, validator, source_a, source_b):
        roster = generate_teams(source_a, source_b, seed=21)[0]
        summary = validator.get_composite_summary(roster)
        assert summary["from_team1"] + summary["from_team2"] == 11
        assert summary["captain"] == roster.captain.name
        assert summary["vice_captain"] == roster.vice_captain.name
        assert sum(summary["roles"].values()) == 11
        assert summary["players"][0].role == "WK"
        assert summary["players"][-1].role == "Bowler"
