"""Tests for the in-memory repository and its query functions."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from raid_planner.models.raid import CreateRaidData, Difficulty, RaidStatus
from raid_planner.models.registration import RaidRegistration
from raid_planner.repositories.base import RepositoryError
from raid_planner.repositories.memory_repository import InMemoryRaidRepository
from raid_planner.repositories.seed_data import build_seed_data

PARIS = ZoneInfo("Europe/Paris")


@pytest.fixture
def repo():
    return InMemoryRaidRepository.from_seed(build_seed_data(PARIS))


class TestLookups:
    def test_get_by_id(self, repo):
        assert repo.get_raid("1").name == "Aberrus Heroic Clear"
        assert repo.get_user("2").name == "Jane Smith"
        assert repo.get_character("3").name == "Frostmage"
        assert repo.get_registration("4").raid_id == "2"

    def test_missing_ids_return_none(self, repo):
        assert repo.get_raid("missing") is None
        assert repo.get_user("missing") is None
        assert repo.get_character("missing") is None
        assert repo.get_registration("missing") is None

    def test_foreign_key_lookups(self, repo):
        assert [c.name for c in repo.get_characters_for_user("1")] == ["Thorgar", "Healbot"]
        assert [r.id for r in repo.get_registrations_for_raid("1")] == ["1", "2", "3"]
        assert [r.id for r in repo.get_registrations_for_user("2")] == ["2", "4"]

    def test_foreign_key_lookups_can_be_empty(self, repo):
        assert repo.get_characters_for_user("missing") == []
        assert repo.get_registrations_for_raid("3") == []

    def test_count_registrations(self, repo):
        assert repo.count_registrations("1") == 3
        assert repo.count_registrations("4") == 0

    def test_collections_preserve_insertion_order(self, repo):
        assert [r.id for r in repo.list_raids()] == ["1", "2", "3", "4"]
        assert len(repo.list_users()) == 3
        assert len(repo.list_characters()) == 5


class TestDateQueries:
    def test_date_range_is_inclusive(self, repo):
        raids = repo.get_raids_by_date_range(
            datetime(2025, 8, 20, 19, 0, tzinfo=PARIS),
            datetime(2025, 8, 24, 16, 0, tzinfo=PARIS),
        )
        assert [r.id for r in raids] == ["1", "2", "4"]

    def test_upcoming_raids_sorted_by_date(self, repo):
        raids = repo.get_upcoming_raids(datetime(2025, 8, 21, tzinfo=PARIS))
        assert [r.id for r in raids] == ["2", "4", "3"]

    def test_upcoming_excludes_raid_starting_now(self, repo):
        raids = repo.get_upcoming_raids(datetime(2025, 8, 25, 18, 30, tzinfo=PARIS))
        assert raids == []


class TestMutations:
    @pytest.mark.anyio
    async def test_create_raid_stores_record(self, repo):
        data = CreateRaidData(
            name="Amirdrassil Heroic",
            date=datetime(2025, 8, 27, 20, 0, tzinfo=PARIS),
            duration=180,
            max_players=20,
            difficulty=Difficulty.HEROIC,
            instance="Amirdrassil, the Dream's Hope",
            created_by="1",
        )
        raid = await repo.create_raid(data)

        assert repo.get_raid(raid.id) is raid
        assert raid.status == RaidStatus.DRAFT
        assert [r.id for r in repo.list_raids()][-1] == raid.id

    @pytest.mark.anyio
    async def test_create_raid_rejects_non_positive_duration(self, repo):
        data = CreateRaidData(
            name="Broken",
            date=datetime(2025, 8, 27, 20, 0, tzinfo=PARIS),
            duration=0,
            max_players=20,
            difficulty=Difficulty.NORMAL,
            instance="Legacy Content",
            created_by="1",
        )
        with pytest.raises(RepositoryError):
            await repo.create_raid(data)

    def test_set_raid_status(self, repo):
        raid = repo.set_raid_status("2", RaidStatus.FULL)
        assert raid.status == RaidStatus.FULL
        assert repo.set_raid_status("missing", RaidStatus.FULL) is None

    def test_delete_character(self, repo):
        assert repo.delete_character("5") is True
        assert repo.get_character("5") is None
        assert repo.delete_character("5") is False

    def test_add_registration_if_room(self, repo):
        first = RaidRegistration(id="r1", raid_id="4", user_id="2", user_name="Jane Smith")
        again = RaidRegistration(id="r2", raid_id="4", user_id="2", user_name="Jane Smith")
        other = RaidRegistration(id="r3", raid_id="4", user_id="3", user_name="Bob Wilson")

        assert repo.add_registration_if_room(first, max_players=2) is True
        assert repo.add_registration_if_room(again, max_players=2) is False
        assert repo.add_registration_if_room(other, max_players=1) is False
        assert [r.id for r in repo.get_registrations_for_raid("4")] == ["r1"]


def test_empty_repository():
    repo = InMemoryRaidRepository()
    assert repo.list_raids() == []
    assert repo.get_upcoming_raids(datetime(2025, 1, 1, tzinfo=PARIS)) == []
