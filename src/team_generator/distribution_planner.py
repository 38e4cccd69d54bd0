"""Role partitioning and distribution planning for structured generation.

A distribution fixes how many players of each role come from source A.
Source B then fills the remaining slots, covering every role source A
leaves empty.
"""

import dataclasses
import itertools
import logging
import random
from typing import Dict, List, Sequence

from src.team_generator.config import (
    MAX_DISTRIBUTIONS,
    MAX_FROM_SOURCE,
    MIN_FROM_SOURCE,
    ROLE_ALL_ROUNDER,
    ROLE_BATTER,
    ROLE_BOWLER,
    ROLE_ORDER,
    ROLE_WK,
    ROSTER_SIZE,
    SOURCE_A_ROLE_LIMITS,
    SOURCE_B_SURPLUS,
)
from src.team_generator.models import Player, RoleDistribution

logger = logging.getLogger(__name__)

PlayersByRole = Dict[str, List[Player]]


def partition_by_role(players: Sequence[Player], source: str) -> PlayersByRole:
    """Group players by role, stamping each copy with ``source``.

    Input order is preserved within each role. The originals are never
    modified.
    """
    by_role: PlayersByRole = {role: [] for role in ROLE_ORDER}
    for player in players:
        by_role[player.role].append(
            dataclasses.replace(
                player,
                original_source=source,
                is_captain=False,
                is_vice_captain=False,
            )
        )
    return by_role


class DistributionPlanner:
    """Enumerates candidate role distributions between two sources.

    The planner is stateless apart from the random generator used to
    shuffle its output, so repeated calls explore different regions first.
    """

    def __init__(
        self,
        rng: random.Random,
        max_distributions: int = MAX_DISTRIBUTIONS,
    ):
        self.rng = rng
        self.max_distributions = max_distributions

    def plan(self, pool_a: PlayersByRole, pool_b: PlayersByRole) -> List[RoleDistribution]:
        """Build a shuffled, capped list of distributions.

        Args:
            pool_a: Source A players partitioned by role.
            pool_b: Source B players partitioned by role.

        Returns:
            Up to ``max_distributions`` distributions in random order.
        """
        available_a = {role: len(pool_a[role]) for role in ROLE_ORDER}
        available_b = {role: len(pool_b[role]) for role in ROLE_ORDER}

        distributions: List[RoleDistribution] = []
        for total_a in range(MIN_FROM_SOURCE, MAX_FROM_SOURCE + 1):
            if len(distributions) >= self.max_distributions:
                break
            distributions.extend(
                self._plan_for_total(
                    total_a,
                    available_a,
                    available_b,
                    self.max_distributions - len(distributions),
                )
            )

        self.rng.shuffle(distributions)
        logger.debug("Planned %d role distributions", len(distributions))
        return distributions

    def _plan_for_total(
        self,
        total_a: int,
        available_a: Dict[str, int],
        available_b: Dict[str, int],
        limit: int,
    ) -> List[RoleDistribution]:
        """Distributions taking exactly ``total_a`` players from source A."""
        total_b = ROSTER_SIZE - total_a
        found: List[RoleDistribution] = []

        count_ranges = [
            range(min(SOURCE_A_ROLE_LIMITS[role], available_a[role]) + 1)
            for role in (ROLE_WK, ROLE_BATTER, ROLE_ALL_ROUNDER)
        ]
        for wk, bat, ar in itertools.product(*count_ranges):
            bowl = total_a - wk - bat - ar
            if bowl < 0 or bowl > available_a[ROLE_BOWLER]:
                continue

            a_counts = {
                ROLE_WK: wk,
                ROLE_BATTER: bat,
                ROLE_ALL_ROUNDER: ar,
                ROLE_BOWLER: bowl,
            }
            b_minimums = {
                role: 1 if a_counts[role] == 0 else 0 for role in ROLE_ORDER
            }
            b_capacity = {
                role: min(
                    available_b[role],
                    SOURCE_B_SURPLUS[role] + b_minimums[role],
                )
                for role in ROLE_ORDER
            }

            if sum(b_capacity.values()) < total_b:
                continue
            if any(a_counts[role] == 0 and b_capacity[role] == 0 for role in ROLE_ORDER):
                continue

            found.append(
                RoleDistribution(
                    total_a=total_a,
                    a_counts=a_counts,
                    b_minimums=b_minimums,
                    b_capacity=b_capacity,
                )
            )
            if len(found) >= limit:
                break

        return found
