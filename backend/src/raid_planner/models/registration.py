"""Raid registration models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class RegistrationStatus(str, Enum):
    """Officer decision on a raid signup."""

    PENDING = "Pending"
    ACCEPTED = "Accepted"
    DECLINED = "Declined"
    STANDBY = "Standby"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RaidRegistration:
    """A user's signup for a raid with the characters they propose."""

    id: str
    raid_id: str
    user_id: str
    user_name: str
    character_ids: list[str] = field(default_factory=list)
    selected_character_id: str | None = None  # Chosen by an officer
    status: RegistrationStatus = RegistrationStatus.PENDING
    notes: str | None = None
    registered_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
