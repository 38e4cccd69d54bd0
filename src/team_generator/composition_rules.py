"""Composition rules for generated rosters and the generation error types."""

from typing import Iterable, List, Sequence, Tuple

from src.team_generator.config import (
    BATCH_SIZE,
    MAX_FROM_SOURCE,
    MIN_FROM_SOURCE,
    ROLE_ORDER,
    ROLES,
    ROSTER_SIZE,
    SOURCE_A,
    SOURCE_B,
)
from src.team_generator.models import CompositeRoster, Player


class GenerationError(Exception):
    """Base class for failures surfaced by team generation."""


class PreconditionError(GenerationError):
    """Raised when the source rosters cannot be used for generation."""


class InsufficientDiversityError(GenerationError):
    """Raised when not enough unique valid rosters can be found."""

    def __init__(self, message: str = ""):
        super().__init__(
            message
            or (
                f"Could not generate {BATCH_SIZE} unique valid teams. "
                "Try adding more variety in player roles."
            )
        )


class UnexpectedComputationError(GenerationError):
    """Raised when building a single candidate roster fails unexpectedly."""


def has_role_coverage(players: Iterable[Player]) -> bool:
    """Whether at least one player of every role is present."""
    return ROLES.issubset({p.role for p in players})


def has_unique_names(players: Sequence[Player]) -> bool:
    return len({p.name for p in players}) == len(players)


def is_acceptable_candidate(players: Sequence[Player]) -> bool:
    """Size, role coverage and name uniqueness checks for a candidate roster."""
    return (
        len(players) == ROSTER_SIZE
        and has_role_coverage(players)
        and has_unique_names(players)
    )


def validate_composite(roster: CompositeRoster) -> Tuple[bool, List[str]]:
    """
    Validate a finished roster against every composition rule.

    Returns:
        (is_valid, list_of_errors)
    """
    errors = []
    players = roster.players

    if len(players) != ROSTER_SIZE:
        errors.append(f"Roster has {len(players)} players (need {ROSTER_SIZE})")

    if not has_unique_names(players):
        errors.append("Roster contains duplicate player names")

    present = {p.role for p in players}
    for role in ROLE_ORDER:
        if role not in present:
            errors.append(f"Missing {role}")

    from_a = roster.count_from(SOURCE_A)
    from_b = roster.count_from(SOURCE_B)
    if from_a + from_b != len(players):
        errors.append("Every player must be tagged with a source team")
    if not MIN_FROM_SOURCE <= from_a <= MAX_FROM_SOURCE:
        errors.append(
            f"{from_a} players from {SOURCE_A} "
            f"(must be {MIN_FROM_SOURCE}-{MAX_FROM_SOURCE})"
        )
    if not MIN_FROM_SOURCE <= from_b <= MAX_FROM_SOURCE:
        errors.append(
            f"{from_b} players from {SOURCE_B} "
            f"(must be {MIN_FROM_SOURCE}-{MAX_FROM_SOURCE})"
        )

    captains = [p for p in players if p.is_captain]
    vice_captains = [p for p in players if p.is_vice_captain]
    if len(captains) != 1:
        errors.append(f"Expected exactly one captain (have {len(captains)})")
    if len(vice_captains) != 1:
        errors.append(
            f"Expected exactly one vice-captain (have {len(vice_captains)})"
        )
    if captains and vice_captains and captains[0] is vice_captains[0]:
        errors.append("Captain and vice-captain must be different players")

    return (len(errors) == 0, errors)
