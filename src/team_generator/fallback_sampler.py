"""Rejection-sampling fallback that tops a batch up to its target size."""

import logging
import random
from typing import List, Optional, Sequence, Set, Tuple

from src.team_generator.composition_rules import (
    UnexpectedComputationError,
    is_acceptable_candidate,
)
from src.team_generator.config import (
    MAX_FALLBACK_ATTEMPTS,
    MAX_FROM_SOURCE,
    MIN_FROM_SOURCE,
    ROSTER_SIZE,
)
from src.team_generator.models import CompositeRoster, Player, team_key

logger = logging.getLogger(__name__)


class FallbackSampler:
    """Draws random, role-agnostic splits of the two sources.

    Each attempt picks a source-A count in [4, 7], shuffles both sources
    and takes a prefix of each. Only candidates with full role coverage
    and an unseen dedup key are kept.
    """

    def __init__(
        self,
        players_a: Sequence[Player],
        players_b: Sequence[Player],
        rng: random.Random,
        max_attempts: int = MAX_FALLBACK_ATTEMPTS,
    ):
        self.players_a = list(players_a)
        self.players_b = list(players_b)
        self.rng = rng
        self.max_attempts = max_attempts
        self.attempts = 0

    def top_up(
        self,
        needed: int,
        used_keys: Set[str],
    ) -> List[CompositeRoster]:
        """Find up to ``needed`` new rosters within the attempt budget.

        Args:
            needed: How many more rosters the batch requires.
            used_keys: Dedup keys already taken. Updated in place.

        Returns:
            The accepted rosters. Fewer than ``needed`` means the attempt
            budget ran out.
        """
        found: List[CompositeRoster] = []
        while len(found) < needed and self.attempts < self.max_attempts:
            self.attempts += 1

            try:
                candidate, key = self._build_candidate()
            except UnexpectedComputationError as e:
                logger.warning("Skipping fallback attempt %d: %s", self.attempts, e)
                continue

            if candidate is None or key in used_keys:
                continue

            used_keys.add(key)
            found.append(CompositeRoster(players=candidate))

        logger.debug(
            "Fallback found %d/%d rosters in %d attempts",
            len(found),
            needed,
            self.attempts,
        )
        return found

    def _build_candidate(self) -> Tuple[Optional[List[Player]], Optional[str]]:
        """Draw, check and key one candidate.

        Returns:
            (players, key), or (None, None) if the draw breaks a
            composition rule.

        Raises:
            UnexpectedComputationError: If any step fails unexpectedly.
        """
        try:
            candidate = self._draw_candidate()
            if not is_acceptable_candidate(candidate):
                return None, None
            return candidate, team_key(candidate)
        except Exception as e:
            raise UnexpectedComputationError(f"Could not build candidate: {e}") from e

    def _draw_candidate(self) -> List[Player]:
        """One random split: shuffled prefixes of both sources."""
        count_a = self.rng.randint(MIN_FROM_SOURCE, MAX_FROM_SOURCE)
        count_b = ROSTER_SIZE - count_a

        shuffled_a = list(self.players_a)
        shuffled_b = list(self.players_b)
        self.rng.shuffle(shuffled_a)
        self.rng.shuffle(shuffled_b)
        return shuffled_a[:count_a] + shuffled_b[:count_b]
