from pathlib import Path

from src.team_generator.config import (
    ROLE_ALL_ROUNDER,
    ROLE_BATTER,
    ROLE_BOWLER,
    ROLE_WK,
    SOURCE_A,
    SOURCE_B,
)

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
STORAGE_DIR = PROJECT_ROOT / "data" / "state"
EXPORT_DIR = PROJECT_ROOT / "data" / "exports"

# Fixed keys of the persisted blobs
STORAGE_KEYS = {
    SOURCE_A: "ipl_fantasy_team1",
    SOURCE_B: "ipl_fantasy_team2",
    "generated_teams": "ipl_fantasy_generated_teams",
}

# Export output
EXPORT_JSON_FILENAME = "fantasy-teams.json"
EXPORT_CSV_FILENAME = "fantasy-teams.csv"
EXPORT_CSV_COLUMNS = ["Team Number", "Player Name", "Role"]

# Role spellings accepted from roster CSV files (matched lowercase,
# with spaces, dashes and underscores removed)
ROLE_ALIASES = {
    "wk": ROLE_WK,
    "wicketkeeper": ROLE_WK,
    "keeper": ROLE_WK,
    "wkbatter": ROLE_WK,
    "batter": ROLE_BATTER,
    "bat": ROLE_BATTER,
    "batsman": ROLE_BATTER,
    "allrounder": ROLE_ALL_ROUNDER,
    "ar": ROLE_ALL_ROUNDER,
    "bowler": ROLE_BOWLER,
    "bowl": ROLE_BOWLER,
}

# Franchises a source roster can be tagged with
TEAM_CATALOG = [
    {
        "id": "csk",
        "name": "Chennai Super Kings",
        "primary_color": "#FFFF3C",
        "secondary_color": "#0081E9",
        "text_color": "#000000",
    },
    {
        "id": "mi",
        "name": "Mumbai Indians",
        "primary_color": "#004B8D",
        "secondary_color": "#00AAF0",
        "text_color": "#FFFFFF",
    },
    {
        "id": "rcb",
        "name": "Royal Challengers Bangalore",
        "primary_color": "#EC1C24",
        "secondary_color": "#000000",
        "text_color": "#FFFFFF",
    },
    {
        "id": "kkr",
        "name": "Kolkata Knight Riders",
        "primary_color": "#3A225D",
        "secondary_color": "#F2C120",
        "text_color": "#FFFFFF",
    },
    {
        "id": "dc",
        "name": "Delhi Capitals",
        "primary_color": "#0078BC",
        "secondary_color": "#EF1C25",
        "text_color": "#FFFFFF",
    },
    {
        "id": "srh",
        "name": "Sunrisers Hyderabad",
        "primary_color": "#FF822A",
        "secondary_color": "#000000",
        "text_color": "#FFFFFF",
    },
    {
        "id": "rr",
        "name": "Rajasthan Royals",
        "primary_color": "#254AA5",
        "secondary_color": "#FF1B90",
        "text_color": "#FFFFFF",
    },
    {
        "id": "pbks",
        "name": "Punjab Kings",
        "primary_color": "#ED1B24",
        "secondary_color": "#A7A9AC",
        "text_color": "#FFFFFF",
    },
    {
        "id": "gt",
        "name": "Gujarat Titans",
        "primary_color": "#1E2D6D",
        "secondary_color": "#B0BFE0",
        "text_color": "#FFFFFF",
    },
    {
        "id": "lsg",
        "name": "Lucknow Super Giants",
        "primary_color": "#A6CFE2",
        "secondary_color": "#0A174A",
        "text_color": "#0A174A",
    },
]
