"""Character and specialization models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class WowClass(str, Enum):
    """Playable classes."""

    WARRIOR = "Warrior"
    PALADIN = "Paladin"
    HUNTER = "Hunter"
    ROGUE = "Rogue"
    PRIEST = "Priest"
    SHAMAN = "Shaman"
    MAGE = "Mage"
    WARLOCK = "Warlock"
    MONK = "Monk"
    DRUID = "Druid"
    DEMON_HUNTER = "Demon Hunter"
    DEATH_KNIGHT = "Death Knight"
    EVOKER = "Evoker"


class Role(str, Enum):
    """Raid roles a specialization can fill."""

    TANK = "Tank"
    HEALER = "Healer"
    DPS = "DPS"


class MasteryLevel(str, Enum):
    """Self-reported proficiency with a specialization."""

    BEGINNER = "Débutant"
    INTERMEDIATE = "Intermédiaire"
    ADVANCED = "Avancé"
    EXPERT = "Expert"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CharacterSpecialization:
    """A spec assigned to a character with a proficiency rating."""

    spec: str
    mastery_level: MasteryLevel = MasteryLevel.BEGINNER
    is_preferred: bool = False


@dataclass
class Character:
    """A player's in-game character."""

    id: str
    user_id: str
    name: str
    level: int  # 1-80
    wow_class: WowClass
    specializations: list[CharacterSpecialization] = field(default_factory=list)
    primary_role: Role = Role.DPS
    item_level: int | None = None
    is_main: bool = False
    server: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
