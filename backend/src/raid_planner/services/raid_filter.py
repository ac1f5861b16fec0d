"""Composable raid filtering."""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Callable, Iterable

from raid_planner.models.raid import Difficulty, Raid, RaidStatus

RaidPredicate = Callable[[Raid], bool]


@dataclass(frozen=True)
class RaidFilters:
    """Optional raid constraints. Unset fields impose nothing."""

    difficulty: Difficulty | None = None
    status: RaidStatus | None = None
    instance: str | None = None
    min_level: int | None = None  # Inclusive, on required_level
    max_level: int | None = None  # Inclusive, on required_level
    date_from: datetime | None = None  # Inclusive, on raid start
    date_to: datetime | None = None  # Inclusive, on raid start

    @property
    def is_empty(self) -> bool:
        """True when no filter field is set."""
        return all(getattr(self, f.name) is None for f in fields(self))


def build_predicates(filters: RaidFilters) -> list[RaidPredicate]:
    """Turn the configured filter fields into predicates.

    A raid without a required level never satisfies a level bound.
    """
    predicates: list[RaidPredicate] = []

    if filters.difficulty is not None:
        difficulty = filters.difficulty
        predicates.append(lambda raid: raid.difficulty == difficulty)

    if filters.status is not None:
        status = filters.status
        predicates.append(lambda raid: raid.status == status)

    if filters.instance is not None:
        instance = filters.instance
        predicates.append(lambda raid: raid.instance == instance)

    if filters.min_level is not None:
        min_level = filters.min_level
        predicates.append(
            lambda raid: raid.required_level is not None and raid.required_level >= min_level
        )

    if filters.max_level is not None:
        max_level = filters.max_level
        predicates.append(
            lambda raid: raid.required_level is not None and raid.required_level <= max_level
        )

    if filters.date_from is not None:
        date_from = filters.date_from
        predicates.append(lambda raid: raid.date >= date_from)

    if filters.date_to is not None:
        date_to = filters.date_to
        predicates.append(lambda raid: raid.date <= date_to)

    return predicates


def filter_raids(raids: Iterable[Raid], filters: RaidFilters) -> list[Raid]:
    """Keep the raids that satisfy every configured filter.

    Single pass over `raids`; each raid stops at its first failing
    predicate. Input order is preserved.
    """
    predicates = build_predicates(filters)
    return [raid for raid in raids if all(predicate(raid) for predicate in predicates)]
