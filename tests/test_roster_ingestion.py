"""Tests for roster CSV ingestion."""

import pytest

from src.roster_manager.roster_ingestion import IngestionError, RosterIngester, normalize_role


# ── Helpers ──────────────────────────────────────────────────────────

BALANCED_ROWS = [
    ("MS Dhoni", "WK"),
    ("Ruturaj Gaikwad", "Batter"),
    ("Devon Conway", "Batter"),
    ("Ajinkya Rahane", "Batter"),
    ("Shivam Dube", "Batter"),
    ("Ravindra Jadeja", "All-Rounder"),
    ("Moeen Ali", "All-Rounder"),
    ("Mitchell Santner", "All-Rounder"),
    ("Deepak Chahar", "Bowler"),
    ("Tushar Deshpande", "Bowler"),
    ("Matheesha Pathirana", "Bowler"),
]


def _write_csv(path, rows, header="Name,Role"):
    lines = [header] + [f"{name},{role}" for name, role in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def ingester():
    return RosterIngester()


# ── normalize_role ───────────────────────────────────────────────────


class TestNormalizeRole:
    @pytest.mark.parametrize("raw,expected", [
        ("WK", "WK"),
        ("wicket-keeper", "WK"),
        ("Wicket Keeper", "WK"),
        ("batsman", "Batter"),
        ("BAT", "Batter"),
        ("All Rounder", "All-Rounder"),
        ("all_rounder", "All-Rounder"),
        ("AR", "All-Rounder"),
        ("Bowler", "Bowler"),
        (' "Bowl" ', "Bowler"),
    ])
    def test_known_spellings(self, raw, expected):
        assert normalize_role(raw) == expected

    @pytest.mark.parametrize("raw", ["spinner", "", None])
    def test_unknown(self, raw):
        assert normalize_role(raw) is None


# ── read_roster ──────────────────────────────────────────────────────


class TestReadRoster:
    def test_reads_balanced_roster(self, ingester, tmp_path):
        roster = ingester.read_roster(_write_csv(tmp_path / "csk.csv", BALANCED_ROWS))
        assert roster.is_complete()
        assert roster.players[0].name == "MS Dhoni"
        assert roster.get_role_count("Batter") == 4

    def test_players_have_no_source_tag(self, ingester, tmp_path):
        roster = ingester.read_roster(_write_csv(tmp_path / "csk.csv", BALANCED_ROWS))
        assert all(p.original_source is None for p in roster.players)

    def test_alternate_headers(self, ingester, tmp_path):
        path = _write_csv(tmp_path / "csk.csv", BALANCED_ROWS, header="Player Name,Position")
        assert len(ingester.read_roster(path).players) == 11

    def test_role_aliases(self, ingester, tmp_path):
        rows = [("Keeper One", "wicket-keeper"), ("Bat One", "batsman"), ("AR One", "AR")]
        roster = ingester.read_roster(_write_csv(tmp_path / "partial.csv", rows))
        assert [p.role for p in roster.players] == ["WK", "Batter", "All-Rounder"]

    def test_strips_quotes_and_padding(self, ingester, tmp_path):
        path = tmp_path / "quoted.csv"
        path.write_text('name,role\n"  MS Dhoni  ", WK \n', encoding="utf-8")
        roster = ingester.read_roster(path)
        assert roster.players[0].name == "MS Dhoni"
        assert roster.players[0].role == "WK"

    def test_skips_blank_rows(self, ingester, tmp_path):
        path = tmp_path / "blank.csv"
        path.write_text("name,role\nMS Dhoni,WK\n\n ,Bowler\nDeepak Chahar,Bowler\n", encoding="utf-8")
        roster = ingester.read_roster(path)
        assert [p.name for p in roster.players] == ["MS Dhoni", "Deepak Chahar"]

    def test_missing_file(self, ingester, tmp_path):
        with pytest.raises(IngestionError, match="not found"):
            ingester.read_roster(tmp_path / "nope.csv")

    def test_missing_role_column(self, ingester, tmp_path):
        path = tmp_path / "names.csv"
        path.write_text("name,team\nMS Dhoni,CSK\n", encoding="utf-8")
        with pytest.raises(IngestionError, match="role column"):
            ingester.read_roster(path)

    def test_empty_file(self, ingester, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        with pytest.raises(IngestionError):
            ingester.read_roster(path)

    def test_unknown_role(self, ingester, tmp_path):
        path = _write_csv(tmp_path / "bad.csv", [("MS Dhoni", "WK"), ("Coach", "Manager")])
        with pytest.raises(IngestionError, match="row 2: unknown role 'Manager'"):
            ingester.read_roster(path)

    def test_duplicate_name(self, ingester, tmp_path):
        path = _write_csv(tmp_path / "dup.csv", [("MS Dhoni", "WK"), ("MS Dhoni", "Batter")])
        with pytest.raises(IngestionError, match="already in this roster"):
            ingester.read_roster(path)

    def test_too_many_players(self, ingester, tmp_path):
        rows = BALANCED_ROWS + [("Extra Player", "Bowler")]
        with pytest.raises(IngestionError, match="Roster is full"):
            ingester.read_roster(_write_csv(tmp_path / "big.csv", rows))
