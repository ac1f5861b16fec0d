"""Data models for the raid planner."""

from raid_planner.models.raid import (
    CreateRaidData,
    Difficulty,
    Raid,
    RaidStatus,
    format_duration,
)
from raid_planner.models.character import (
    Character,
    CharacterSpecialization,
    MasteryLevel,
    Role,
    WowClass,
)
from raid_planner.models.registration import RaidRegistration, RegistrationStatus
from raid_planner.models.user import GuildRole, User

__all__ = [
    "CreateRaidData",
    "Difficulty",
    "Raid",
    "RaidStatus",
    "format_duration",
    "Character",
    "CharacterSpecialization",
    "MasteryLevel",
    "Role",
    "WowClass",
    "RaidRegistration",
    "RegistrationStatus",
    "GuildRole",
    "User",
]
