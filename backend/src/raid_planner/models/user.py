"""Guild member models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class GuildRole(str, Enum):
    """Rank inside the guild."""

    GUILD_MASTER = "Guild Master"
    OFFICER = "Officer"
    MEMBER = "Member"


@dataclass
class User:
    """A guild member account."""

    id: str
    email: str
    first_name: str
    last_name: str
    guild_role: GuildRole = GuildRole.MEMBER
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"
