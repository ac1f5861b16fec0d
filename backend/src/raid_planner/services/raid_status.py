"""Raid status transitions."""

import logging
from types import MappingProxyType
from typing import Mapping

from raid_planner.models.raid import Raid, RaidStatus
from raid_planner.repositories.base import RaidRepository

logger = logging.getLogger(__name__)

# Completed and Cancelled are terminal
RAID_STATUS_TRANSITIONS: Mapping[RaidStatus, frozenset[RaidStatus]] = MappingProxyType({
    RaidStatus.DRAFT: frozenset({RaidStatus.OPEN, RaidStatus.CANCELLED}),
    RaidStatus.OPEN: frozenset({
        RaidStatus.DRAFT,
        RaidStatus.FULL,
        RaidStatus.IN_PROGRESS,
        RaidStatus.CANCELLED,
    }),
    RaidStatus.FULL: frozenset({
        RaidStatus.OPEN,
        RaidStatus.IN_PROGRESS,
        RaidStatus.CANCELLED,
    }),
    RaidStatus.IN_PROGRESS: frozenset({RaidStatus.COMPLETED, RaidStatus.CANCELLED}),
    RaidStatus.COMPLETED: frozenset(),
    RaidStatus.CANCELLED: frozenset(),
})


class InvalidStatusTransition(ValueError):
    """A raid cannot move from its current status to the requested one."""

    def __init__(self, current: RaidStatus, requested: RaidStatus):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change raid status from {current.value} to {requested.value}")


def can_transition(current: RaidStatus, requested: RaidStatus) -> bool:
    """Whether `requested` is reachable from `current` (same status is allowed)."""
    return current == requested or requested in RAID_STATUS_TRANSITIONS[current]


def allowed_transitions(current: RaidStatus) -> list[RaidStatus]:
    """Statuses reachable from `current`, in enum order."""
    return [status for status in RaidStatus if status in RAID_STATUS_TRANSITIONS[current]]


class RaidStatusService:
    """Applies status changes, optionally enforcing the transition table."""

    def __init__(self, repository: RaidRepository, strict: bool = True):
        self.repository = repository
        self.strict = strict

    def change_status(self, raid_id: str, requested: RaidStatus) -> Raid | None:
        """Set a raid's status.

        Returns:
            The updated raid, or None if the raid does not exist

        Raises:
            InvalidStatusTransition: In strict mode, when the move is not legal
        """
        raid = self.repository.get_raid(raid_id)
        if raid is None:
            return None

        if raid.status == requested:
            return raid

        if self.strict and not can_transition(raid.status, requested):
            logger.warning(
                f"Rejected status change for raid {raid_id}: "
                f"{raid.status.value} -> {requested.value}"
            )
            raise InvalidStatusTransition(raid.status, requested)

        previous = raid.status
        updated = self.repository.set_raid_status(raid_id, requested)
        logger.info(f"Raid {raid_id} status {previous.value} -> {requested.value}")
        return updated
