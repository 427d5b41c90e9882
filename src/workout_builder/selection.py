"""Weighted random selection of exercises for a muscle group."""

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar


class HasId(Protocol):
    id: int


T = TypeVar("T")
E = TypeVar("E", bound=HasId)


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy of ``items`` (Fisher-Yates); the input is untouched."""
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


@dataclass(frozen=True)
class SelectionPolicy:
    """Tuning knobs for building and sampling a candidate pool."""

    minimum_threshold: int = 20
    pool_multiplier: int = 4
    minimum_pool_size: int = 30
    primary_ratio: float = 0.7

    def target_pool_size(self, limit: int) -> int:
        """Number of candidates to fetch for a given per-group limit."""
        return max(limit * self.pool_multiplier, self.minimum_pool_size)

    def needs_secondary(self, primary_count: int) -> bool:
        """Whether the primary pool is too small and secondaries must be added."""
        return primary_count < self.minimum_threshold

    def split(self, limit: int) -> tuple[int, int]:
        """Slots reserved for (primary, secondary) exercises."""
        target_primary = math.ceil(limit * self.primary_ratio)
        return target_primary, limit - target_primary


def weighted_select(
    primary: Sequence[E],
    secondary: Sequence[E],
    limit: int,
    policy: SelectionPolicy | None = None,
    rng: random.Random | None = None,
) -> list[E]:
    """Pick up to ``limit`` exercises, favoring primary-muscle matches.

    Roughly ``primary_ratio`` of the slots go to primaries, the rest to
    secondaries. Slots secondaries cannot fill are topped up with further
    primaries. The selection is shuffled once more so primaries are not
    always first.
    """
    if limit <= 0:
        return []

    policy = policy or SelectionPolicy()
    rng = rng or random.Random()

    primary_ids = {ex.id for ex in primary}
    shuffled_primary = shuffle(primary, rng)
    shuffled_secondary = shuffle([ex for ex in secondary if ex.id not in primary_ids], rng)

    target_primary, target_secondary = policy.split(limit)

    selected = shuffled_primary[:target_primary]

    if limit - len(selected) > 0:
        selected.extend(shuffled_secondary[:target_secondary])

        still_needed = limit - len(selected)
        if still_needed > 0 and len(shuffled_primary) > target_primary:
            selected.extend(shuffled_primary[target_primary : target_primary + still_needed])

    return shuffle(selected, rng)[:limit]
