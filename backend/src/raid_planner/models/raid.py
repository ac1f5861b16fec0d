"""Raid models."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum


class Difficulty(str, Enum):
    """Raid difficulty levels."""

    NORMAL = "Normal"
    HEROIC = "Heroic"
    MYTHIC = "Mythic"


class RaidStatus(str, Enum):
    """Lifecycle status of a raid."""

    DRAFT = "Draft"
    OPEN = "Open"
    FULL = "Full"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Raid:
    """A scheduled guild raid."""

    id: str
    name: str
    date: datetime  # Start instant
    duration: int  # Minutes
    max_players: int
    difficulty: Difficulty
    instance: str  # e.g. "Aberrus, the Shadowed Crucible"
    created_by: str  # User id
    status: RaidStatus = RaidStatus.DRAFT
    description: str | None = None
    objective: str | None = None
    required_level: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def end_time(self) -> datetime:
        """Instant the raid is scheduled to finish."""
        return self.date + timedelta(minutes=self.duration)


@dataclass
class CreateRaidData:
    """Input for creating a raid."""

    name: str
    date: datetime
    duration: int
    max_players: int
    difficulty: Difficulty
    instance: str
    created_by: str
    description: str | None = None
    objective: str | None = None
    required_level: int | None = None
    status: RaidStatus = RaidStatus.DRAFT


def format_duration(minutes: int) -> str:
    """Format a duration in minutes for display.

    Examples:
        >>> format_duration(45)
        '45min'
        >>> format_duration(180)
        '3h'
        >>> format_duration(150)
        '2h 30min'
    """
    hours, remaining = divmod(minutes, 60)
    if hours == 0:
        return f"{remaining}min"
    if remaining == 0:
        return f"{hours}h"
    return f"{hours}h {remaining}min"
