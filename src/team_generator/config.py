# Player roles, in display order
ROLE_WK = "WK"
ROLE_BATTER = "Batter"
ROLE_ALL_ROUNDER = "All-Rounder"
ROLE_BOWLER = "Bowler"

ROLE_ORDER = [ROLE_WK, ROLE_BATTER, ROLE_ALL_ROUNDER, ROLE_BOWLER]
ROLES = frozenset(ROLE_ORDER)

# Source roster tags
SOURCE_A = "team1"
SOURCE_B = "team2"

# Roster composition
ROSTER_SIZE = 11
BATCH_SIZE = 20
MIN_FROM_SOURCE = 4
MAX_FROM_SOURCE = 7  # 11 - MIN_FROM_SOURCE

# Upper bound on how many of each role the planner takes from source A.
# Bowlers are not listed: their count is forced by the total.
SOURCE_A_ROLE_LIMITS = {
    ROLE_WK: 2,
    ROLE_BATTER: 5,
    ROLE_ALL_ROUNDER: 5,
}

# Per-role capacity assumed for source B on top of its forced pick
SOURCE_B_SURPLUS = {
    ROLE_WK: 1,
    ROLE_BATTER: 4,
    ROLE_ALL_ROUNDER: 4,
    ROLE_BOWLER: 4,
}

# Search bounds
MAX_DISTRIBUTIONS = 50
MAX_COMBOS_PER_ROLE = 5
MAX_REMAINING_COMBOS = 10
MAX_TEAMS_PER_DISTRIBUTION = 5
MAX_FALLBACK_ATTEMPTS = 20000
