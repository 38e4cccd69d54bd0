"""Shared fixtures for the team generator test suite."""

import pytest

from src.roster_manager.roster_state import RosterState, SourceRoster
from src.roster_manager.state_persistence import StatePersistence
from src.team_generator.models import Player

# WK, Batter, All-Rounder, Bowler
BALANCED_COUNTS = (1, 4, 3, 3)


def _build_players(prefix, counts=BALANCED_COUNTS):
    wk, bat, ar, bowl = counts
    specs = (
        [("WK", n) for n in range(wk)]
        + [("Batter", n) for n in range(bat)]
        + [("All-Rounder", n) for n in range(ar)]
        + [("Bowler", n) for n in range(bowl)]
    )
    return [
        Player(name=f"{prefix} {role} {n + 1}", role=role)
        for role, n in specs
    ]


# ------------------------------------------------------------------
# Player factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def make_players():
    """Factory: ``make_players("CSK", (wk, bat, ar, bowl))``."""
    return _build_players


@pytest.fixture
def source_a():
    """Balanced 11-player roster: 1 WK, 4 Batters, 3 All-Rounders, 3 Bowlers."""
    return _build_players("CSK")


@pytest.fixture
def source_b():
    return _build_players("MI")


@pytest.fixture
def ready_state(source_a, source_b):
    """RosterState with both rosters complete."""
    return RosterState(
        team1=SourceRoster(players=source_a),
        team2=SourceRoster(players=source_b),
    )


# ------------------------------------------------------------------
# Storage – isolated per test
# ------------------------------------------------------------------

@pytest.fixture
def persistence(tmp_path):
    return StatePersistence(tmp_path / "state")
