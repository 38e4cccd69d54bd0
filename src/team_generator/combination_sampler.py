"""Structured sampling of concrete rosters from a role distribution."""

import itertools
import logging
from typing import List, Sequence, Set, Tuple

from src.team_generator.composition_rules import (
    UnexpectedComputationError,
    is_acceptable_candidate,
)
from src.team_generator.config import (
    MAX_COMBOS_PER_ROLE,
    MAX_REMAINING_COMBOS,
    MAX_TEAMS_PER_DISTRIBUTION,
    ROLE_ORDER,
)
from src.team_generator.distribution_planner import PlayersByRole
from src.team_generator.models import CompositeRoster, Player, RoleDistribution, team_key

logger = logging.getLogger(__name__)


def limited_combinations(
    players: Sequence[Player], k: int, limit: int
) -> List[Tuple[Player, ...]]:
    """First ``limit`` k-combinations of ``players`` in lexicographic order."""
    return list(itertools.islice(itertools.combinations(players, k), limit))


class CombinationSampler:
    """Turns a :class:`RoleDistribution` into concrete composite rosters.

    Each role's subsets are generated independently and truncated, then
    composed through a lazy Cartesian product so the search stops as soon
    as the per-distribution cap is reached.
    """

    def __init__(
        self,
        pool_a: PlayersByRole,
        pool_b: PlayersByRole,
        max_combos_per_role: int = MAX_COMBOS_PER_ROLE,
        max_remaining_combos: int = MAX_REMAINING_COMBOS,
        max_teams: int = MAX_TEAMS_PER_DISTRIBUTION,
    ):
        self.pool_a = pool_a
        self.pool_b = pool_b
        self.max_combos_per_role = max_combos_per_role
        self.max_remaining_combos = max_remaining_combos
        self.max_teams = max_teams

    def sample(
        self,
        distribution: RoleDistribution,
        total_b: int,
        used_keys: Set[str],
    ) -> List[CompositeRoster]:
        """Materialize up to ``max_teams`` new rosters for one distribution.

        Args:
            distribution: Per-role counts to take from source A.
            total_b: Number of players to take from source B.
            used_keys: Dedup keys of rosters already accepted. Updated in
                place as rosters are accepted here.

        Returns:
            The accepted rosters (possibly empty).

        Raises:
            UnexpectedComputationError: If composing a candidate fails.
        """
        a_choices = [
            limited_combinations(
                self.pool_a[role],
                distribution.a_counts[role],
                self.max_combos_per_role,
            )
            for role in ROLE_ORDER
        ]

        forced_roles = [role for role in ROLE_ORDER if distribution.a_counts[role] == 0]
        open_slots = total_b - len(forced_roles)
        if open_slots < 0:
            return []

        b_forced_choices = [
            list(itertools.combinations(self.pool_b[role], 1)) for role in forced_roles
        ]

        # Forced roles are fully served by their single pick.
        remaining_pool = [
            player
            for role in ROLE_ORDER
            if role not in forced_roles
            for player in self.pool_b[role]
        ]
        remaining_choices = limited_combinations(
            remaining_pool, open_slots, self.max_remaining_combos
        )

        rosters: List[CompositeRoster] = []
        try:
            for parts in itertools.product(*a_choices, *b_forced_choices, remaining_choices):
                candidate = [player for part in parts for player in part]
                if not is_acceptable_candidate(candidate):
                    continue

                key = team_key(candidate)
                if key in used_keys:
                    continue

                used_keys.add(key)
                rosters.append(CompositeRoster(players=candidate))
                if len(rosters) >= self.max_teams:
                    break
        except Exception as e:
            raise UnexpectedComputationError(
                f"Could not sample distribution {distribution.a_counts}: {e}"
            ) from e

        logger.debug(
            "Distribution %s (A=%d, B=%d) yielded %d rosters",
            distribution.a_counts,
            distribution.total_a,
            total_b,
            len(rosters),
        )
        return rosters
