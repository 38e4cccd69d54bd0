from src.team_generator.composition_rules import (
    GenerationError,
    InsufficientDiversityError,
    PreconditionError,
    UnexpectedComputationError,
    validate_composite,
)
from src.team_generator.generator import (
    RosterCombinationEngine,
    assign_captaincy,
    generate_teams,
)
from src.team_generator.models import (
    CompositeRoster,
    GeneratedBatch,
    Player,
    RoleDistribution,
)

__all__ = [
    "CompositeRoster",
    "GeneratedBatch",
    "GenerationError",
    "InsufficientDiversityError",
    "Player",
    "PreconditionError",
    "RoleDistribution",
    "RosterCombinationEngine",
    "UnexpectedComputationError",
    "assign_captaincy",
    "generate_teams",
    "validate_composite",
]
