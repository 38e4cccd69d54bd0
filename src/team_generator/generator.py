"""Roster combination engine - builds a batch of unique composite rosters.

Generation runs in two stages. Structured sampling walks a shuffled list
of role distributions and realizes a few rosters from each. If that falls
short, a rejection-sampling fallback tops the batch up. The batch is then
shuffled and every roster gets a captain and vice-captain.
"""

import dataclasses
import logging
import random
from typing import List, Optional, Sequence, Set

from src.team_generator.combination_sampler import CombinationSampler
from src.team_generator.composition_rules import (
    InsufficientDiversityError,
    PreconditionError,
    UnexpectedComputationError,
)
from src.team_generator.config import (
    BATCH_SIZE,
    MAX_FALLBACK_ATTEMPTS,
    ROLE_ORDER,
    ROLES,
    ROSTER_SIZE,
    SOURCE_A,
    SOURCE_B,
)
from src.team_generator.distribution_planner import (
    DistributionPlanner,
    PlayersByRole,
    partition_by_role,
)
from src.team_generator.fallback_sampler import FallbackSampler
from src.team_generator.models import (
    CompositeRoster,
    GeneratedBatch,
    GenerationStage,
    Player,
    RoleDistribution,
)

logger = logging.getLogger(__name__)


def assign_captaincy(roster: CompositeRoster, rng: random.Random) -> CompositeRoster:
    """Return a copy of ``roster`` with a random captain and vice-captain."""
    players = [
        dataclasses.replace(p, is_captain=False, is_vice_captain=False)
        for p in roster.players
    ]

    captain_index = rng.randrange(len(players))
    others = [i for i in range(len(players)) if i != captain_index]
    vice_index = others[rng.randrange(len(others))]

    players[captain_index].is_captain = True
    players[vice_index].is_vice_captain = True
    return CompositeRoster(players=players)


class RosterCombinationEngine:
    """Generates a batch of distinct, role-valid composite rosters.

    Each call to :meth:`generate` is independent: the dedup set and all
    candidate lists are rebuilt from scratch. Only the random generator
    carries over, so pass a fresh seed for reproducible batches.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        batch_size: int = BATCH_SIZE,
        max_fallback_attempts: int = MAX_FALLBACK_ATTEMPTS,
    ):
        self.rng = rng or random.Random(seed)
        self.batch_size = batch_size
        self.max_fallback_attempts = max_fallback_attempts

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(
        self, source_a: Sequence[Player], source_b: Sequence[Player]
    ) -> GeneratedBatch:
        """Build the batch from two complete source rosters.

        Args:
            source_a: The 11 players of source A (``team1``).
            source_b: The 11 players of source B (``team2``).

        Returns:
            A :class:`GeneratedBatch` of exactly ``batch_size`` rosters.

        Raises:
            PreconditionError: If either source is not exactly 11 players
                or holds a player with an unknown role.
            InsufficientDiversityError: If not enough unique valid
                rosters exist or can be found within the attempt budget.
        """
        self._check_preconditions(source_a, source_b)

        pool_a = partition_by_role(source_a, SOURCE_A)
        pool_b = partition_by_role(source_b, SOURCE_B)

        missing = [r for r in ROLE_ORDER if not pool_a[r] and not pool_b[r]]
        if missing:
            self._enter(GenerationStage.FAILED)
            raise InsufficientDiversityError(
                f"Neither team has a {', '.join(missing)}. "
                f"Could not generate {self.batch_size} unique valid teams. "
                "Try adding more variety in player roles."
            )

        used_keys: Set[str] = set()

        self._enter(GenerationStage.PLANNING)
        distributions = DistributionPlanner(self.rng).plan(pool_a, pool_b)

        self._enter(GenerationStage.STRUCTURED_SAMPLING)
        rosters = self._structured_sampling(pool_a, pool_b, distributions, used_keys)
        structured_count = len(rosters)

        fallback_attempts = 0
        if len(rosters) < self.batch_size:
            self._enter(GenerationStage.FALLBACK_SAMPLING)
            logger.info(
                "Structured sampling produced %d teams, falling back to random "
                "sampling for the remaining %d",
                structured_count,
                self.batch_size - structured_count,
            )
            # Flattened from the stamped pools so sources are tagged.
            fallback = FallbackSampler(
                [p for role in ROLE_ORDER for p in pool_a[role]],
                [p for role in ROLE_ORDER for p in pool_b[role]],
                self.rng,
                max_attempts=self.max_fallback_attempts,
            )
            rosters.extend(fallback.top_up(self.batch_size - len(rosters), used_keys))
            fallback_attempts = fallback.attempts

        if len(rosters) < self.batch_size:
            self._enter(GenerationStage.FAILED)
            logger.warning(
                "Only %d unique valid teams found after %d fallback attempts",
                len(rosters),
                fallback_attempts,
            )
            raise InsufficientDiversityError()

        self._enter(GenerationStage.SHUFFLING_AND_CAPTAINCY)
        self.rng.shuffle(rosters)
        finished = [assign_captaincy(roster, self.rng) for roster in rosters]

        self._enter(GenerationStage.DONE)
        logger.info(
            "Generated %d teams (%d structured, %d fallback, %d distributions)",
            len(finished),
            structured_count,
            len(finished) - structured_count,
            len(distributions),
        )
        return GeneratedBatch(
            rosters=finished,
            structured_count=structured_count,
            fallback_count=len(finished) - structured_count,
            fallback_attempts=fallback_attempts,
            distributions_considered=len(distributions),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_preconditions(
        self, source_a: Sequence[Player], source_b: Sequence[Player]
    ) -> None:
        for label, players in ((SOURCE_A, source_a), (SOURCE_B, source_b)):
            if len(players) != ROSTER_SIZE:
                self._enter(GenerationStage.FAILED)
                raise PreconditionError(
                    f"{label} must have exactly {ROSTER_SIZE} players "
                    f"(has {len(players)})"
                )
            unknown = sorted({p.role for p in players} - ROLES)
            if unknown:
                self._enter(GenerationStage.FAILED)
                raise PreconditionError(f"{label} has unknown roles: {unknown}")

    def _structured_sampling(
        self,
        pool_a: PlayersByRole,
        pool_b: PlayersByRole,
        distributions: Sequence[RoleDistribution],
        used_keys: Set[str],
    ) -> List[CompositeRoster]:
        """Realize rosters distribution by distribution, up to ``batch_size``.

        A failure inside the sampler ends this stage early; whatever was
        found so far is kept and the fallback takes over.
        """
        sampler = CombinationSampler(pool_a, pool_b)
        rosters: List[CompositeRoster] = []

        for distribution in distributions:
            try:
                generated = sampler.sample(distribution, distribution.total_b, used_keys)
            except UnexpectedComputationError as e:
                logger.warning("Structured sampling stopped early: %s", e)
                break
            rosters.extend(generated[: self.batch_size - len(rosters)])
            if len(rosters) >= self.batch_size:
                break

        return rosters

    @staticmethod
    def _enter(stage: GenerationStage) -> None:
        logger.debug("Generation stage -> %s", stage.value)


def generate_teams(
    source_a: Sequence[Player],
    source_b: Sequence[Player],
    seed: Optional[int] = None,
) -> GeneratedBatch:
    """Generate a batch of composite rosters from two complete rosters."""
    return RosterCombinationEngine(seed=seed).generate(source_a, source_b)
