"""Tests for character and class reference API routes."""

from zoneinfo import ZoneInfo

import httpx
import pytest

from raid_planner.main import app
from raid_planner.repositories.memory_repository import InMemoryRaidRepository
from raid_planner.repositories.seed_data import build_seed_data

pytestmark = pytest.mark.anyio


@pytest.fixture
def repo():
    return InMemoryRaidRepository.from_seed(build_seed_data(ZoneInfo("Europe/Paris")))


@pytest.fixture
async def client(repo):
    app.state.repository = repo

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def character_body(**overrides) -> dict:
    body = {
        "user_id": "3",
        "name": "Lightbringer",
        "level": 80,
        "wow_class": "Paladin",
        "item_level": 476,
        "specializations": [
            {"spec": "Retribution", "mastery_level": "Avancé"},
            {"spec": "Holy", "mastery_level": "Intermédiaire", "is_preferred": True},
        ],
    }
    body.update(overrides)
    return body


async def test_list_classes(client):
    response = await client.get("/api/classes")

    assert response.status_code == 200
    data = response.json()
    classes = {c["name"]: c["specs"] for c in data["classes"]}
    assert len(classes) == 13
    assert {"name": "Guardian", "role": "Tank"} in classes["Druid"]
    assert data["mastery_levels"] == ["Débutant", "Intermédiaire", "Avancé", "Expert"]


class TestListCharacters:
    async def test_all_characters(self, client):
        response = await client.get("/api/characters")

        data = response.json()
        assert data["count"] == 5
        assert data["mains"] == 3

    async def test_characters_of_user(self, client):
        response = await client.get("/api/characters", params={"user_id": "2"})

        data = response.json()
        assert [c["name"] for c in data["characters"]] == ["Frostmage", "Bearform"]
        assert data["mains"] == 1

    async def test_get_character(self, client):
        response = await client.get("/api/characters/1")

        assert response.status_code == 200
        data = response.json()
        assert data["primary_role"] == "Tank"
        assert data["specializations"][0] == {
            "spec": "Protection",
            "mastery_level": "Expert",
            "is_preferred": True,
        }

    async def test_missing_character(self, client):
        response = await client.get("/api/characters/missing")
        assert response.status_code == 404


class TestSaveCharacter:
    async def test_create_derives_role_from_preferred_spec(self, client, repo):
        response = await client.post("/api/characters", json=character_body())

        assert response.status_code == 201
        data = response.json()
        assert data["primary_role"] == "Healer"
        assert data["user_id"] == "3"
        assert len(repo.get_characters_for_user("3")) == 2

    async def test_create_without_specializations(self, client):
        response = await client.post("/api/characters", json=character_body(specializations=[]))

        assert response.status_code == 400
        assert "at least one specialization" in response.json()["detail"]

    async def test_create_with_foreign_spec(self, client):
        response = await client.post(
            "/api/characters",
            json=character_body(specializations=[{"spec": "Frost"}]),
        )
        assert response.status_code == 400

    async def test_level_out_of_range_fails_validation(self, client):
        response = await client.post("/api/characters", json=character_body(level=90))
        assert response.status_code == 422

    async def test_update_character(self, client):
        response = await client.put(
            "/api/characters/4",
            json=character_body(
                name="Shadowhunt",
                wow_class="Hunter",
                specializations=[{"spec": "Survival", "is_preferred": True}],
            ),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "4"
        assert data["specializations"][0]["spec"] == "Survival"
        assert data["primary_role"] == "DPS"

    async def test_update_missing_character(self, client):
        response = await client.put("/api/characters/missing", json=character_body())
        assert response.status_code == 404

    async def test_update_someone_elses_character(self, client):
        response = await client.put(
            "/api/characters/1",
            json=character_body(wow_class="Warrior", specializations=[{"spec": "Arms"}]),
        )
        assert response.status_code == 400

    async def test_delete_character(self, client, repo):
        response = await client.delete("/api/characters/5")

        assert response.status_code == 200
        assert response.json() == {"success": True, "character_id": "5"}
        assert repo.get_character("5") is None

        again = await client.delete("/api/characters/5")
        assert again.status_code == 404


class TestEditSpecializations:
    """Tests for POST /api/characters/specializations/edit."""

    async def test_add_to_empty_list(self, client):
        response = await client.post(
            "/api/characters/specializations/edit",
            json={"wow_class": "Monk", "action": "add"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["specializations"] == [
            {"spec": "Brewmaster", "mastery_level": "Débutant", "is_preferred": True}
        ]
        assert data["available_specs"] == ["Mistweaver", "Windwalker"]
        assert data["primary_role"] == "Tank"

    async def test_add_when_exhausted(self, client):
        response = await client.post(
            "/api/characters/specializations/edit",
            json={
                "wow_class": "Demon Hunter",
                "action": "add",
                "specializations": [{"spec": "Havoc"}, {"spec": "Vengeance"}],
            },
        )
        assert response.status_code == 400

    async def test_prefer_switches_role(self, client):
        response = await client.post(
            "/api/characters/specializations/edit",
            json={
                "wow_class": "Druid",
                "action": "prefer",
                "index": 1,
                "specializations": [
                    {"spec": "Guardian", "is_preferred": True},
                    {"spec": "Restoration"},
                ],
            },
        )

        data = response.json()
        assert [s["is_preferred"] for s in data["specializations"]] == [False, True]
        assert data["primary_role"] == "Healer"

    async def test_remove_requires_index(self, client):
        response = await client.post(
            "/api/characters/specializations/edit",
            json={"wow_class": "Druid", "action": "remove", "specializations": [{"spec": "Feral"}]},
        )
        assert response.status_code == 400

    async def test_update_to_duplicate_spec(self, client):
        response = await client.post(
            "/api/characters/specializations/edit",
            json={
                "wow_class": "Mage",
                "action": "update",
                "index": 1,
                "spec": "Frost",
                "specializations": [{"spec": "Frost"}, {"spec": "Fire"}],
            },
        )
        assert response.status_code == 400
        assert "already assigned" in response.json()["detail"]

    async def test_bad_index(self, client):
        response = await client.post(
            "/api/characters/specializations/edit",
            json={"wow_class": "Mage", "action": "remove", "index": 5},
        )
        assert response.status_code == 400

    async def test_negative_index_is_rejected(self, client):
        response = await client.post(
            "/api/characters/specializations/edit",
            json={
                "wow_class": "Warrior",
                "action": "prefer",
                "index": -1,
                "specializations": [
                    {"spec": "Arms", "is_preferred": True},
                    {"spec": "Protection"},
                ],
            },
        )
        assert response.status_code == 422
