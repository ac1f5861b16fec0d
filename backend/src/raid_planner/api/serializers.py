"""Dataclass -> JSON-ready dict conversion for API responses."""

from dataclasses import asdict

from raid_planner.models.character import Character
from raid_planner.models.raid import Raid, format_duration
from raid_planner.models.registration import RaidRegistration
from raid_planner.models.user import User
from raid_planner.repositories.base import RaidRepository
from raid_planner.services.registration_service import can_join


def raid_to_dict(raid: Raid, repo: RaidRepository) -> dict:
    """Raid fields plus participant count and join availability."""
    participant_count = repo.count_registrations(raid.id)
    return {
        **asdict(raid),
        "end_time": raid.end_time,
        "duration_label": format_duration(raid.duration),
        "participant_count": participant_count,
        "can_join": can_join(raid, participant_count),
    }


def character_to_dict(character: Character) -> dict:
    return asdict(character)


def registration_to_dict(registration: RaidRegistration) -> dict:
    return asdict(registration)


def user_to_dict(user: User) -> dict:
    return {**asdict(user), "name": user.name}
