"""Tests for raid status transitions."""

from zoneinfo import ZoneInfo

import pytest

from raid_planner.models.raid import RaidStatus
from raid_planner.repositories.memory_repository import InMemoryRaidRepository
from raid_planner.repositories.seed_data import build_seed_data
from raid_planner.services.raid_status import (
    RAID_STATUS_TRANSITIONS,
    InvalidStatusTransition,
    RaidStatusService,
    allowed_transitions,
    can_transition,
)


@pytest.fixture
def repo():
    return InMemoryRaidRepository.from_seed(build_seed_data(ZoneInfo("Europe/Paris")))


def test_every_status_has_a_transition_entry():
    assert set(RAID_STATUS_TRANSITIONS) == set(RaidStatus)


@pytest.mark.parametrize(
    "current,requested",
    [
        (RaidStatus.DRAFT, RaidStatus.OPEN),
        (RaidStatus.OPEN, RaidStatus.FULL),
        (RaidStatus.FULL, RaidStatus.OPEN),
        (RaidStatus.OPEN, RaidStatus.IN_PROGRESS),
        (RaidStatus.IN_PROGRESS, RaidStatus.COMPLETED),
        (RaidStatus.FULL, RaidStatus.CANCELLED),
    ],
)
def test_legal_transitions(current, requested):
    assert can_transition(current, requested)


@pytest.mark.parametrize(
    "current,requested",
    [
        (RaidStatus.DRAFT, RaidStatus.COMPLETED),
        (RaidStatus.COMPLETED, RaidStatus.OPEN),
        (RaidStatus.CANCELLED, RaidStatus.OPEN),
        (RaidStatus.IN_PROGRESS, RaidStatus.DRAFT),
    ],
)
def test_illegal_transitions(current, requested):
    assert not can_transition(current, requested)


def test_terminal_statuses_have_no_exits():
    assert allowed_transitions(RaidStatus.COMPLETED) == []
    assert allowed_transitions(RaidStatus.CANCELLED) == []


def test_same_status_is_always_allowed():
    for status in RaidStatus:
        assert can_transition(status, status)


def test_strict_service_rejects_illegal_move(repo):
    service = RaidStatusService(repo, strict=True)
    service.change_status("1", RaidStatus.IN_PROGRESS)
    service.change_status("1", RaidStatus.COMPLETED)

    with pytest.raises(InvalidStatusTransition) as exc_info:
        service.change_status("1", RaidStatus.OPEN)
    assert exc_info.value.current == RaidStatus.COMPLETED
    assert repo.get_raid("1").status == RaidStatus.COMPLETED


def test_invalid_transition_is_a_value_error():
    assert issubclass(InvalidStatusTransition, ValueError)


def test_permissive_service_allows_any_move(repo):
    service = RaidStatusService(repo, strict=False)
    service.change_status("1", RaidStatus.COMPLETED)
    raid = service.change_status("1", RaidStatus.DRAFT)
    assert raid.status == RaidStatus.DRAFT


def test_change_status_of_missing_raid(repo):
    assert RaidStatusService(repo).change_status("missing", RaidStatus.OPEN) is None
