"""Demo guild loaded into the in-memory repository at startup."""

from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from raid_planner.models.character import (
    Character,
    CharacterSpecialization,
    MasteryLevel,
    Role,
    WowClass,
)
from raid_planner.models.raid import Difficulty, Raid, RaidStatus
from raid_planner.models.registration import RaidRegistration, RegistrationStatus
from raid_planner.models.user import GuildRole, User

INSTANCES = (
    "Aberrus, the Shadowed Crucible",
    "Vault of the Incarnates",
    "Amirdrassil, the Dream's Hope",
    "Dragonflight Dungeons",
    "Legacy Content",
)


@dataclass
class SeedData:
    """Initial collections for the entity store."""

    users: list[User] = field(default_factory=list)
    characters: list[Character] = field(default_factory=list)
    raids: list[Raid] = field(default_factory=list)
    registrations: list[RaidRegistration] = field(default_factory=list)


def build_seed_data(tz: tzinfo) -> SeedData:
    """Build the demo guild with raid times expressed in `tz`."""

    def at(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
        return datetime(year, month, day, hour, minute, tzinfo=tz)

    users = [
        User(
            id="1",
            email="guildmaster@guild.com",
            first_name="John",
            last_name="Doe",
            guild_role=GuildRole.GUILD_MASTER,
            created_at=at(2025, 1, 1),
            updated_at=at(2025, 1, 1),
        ),
        User(
            id="2",
            email="officer@guild.com",
            first_name="Jane",
            last_name="Smith",
            guild_role=GuildRole.OFFICER,
            created_at=at(2025, 1, 15),
            updated_at=at(2025, 1, 15),
        ),
        User(
            id="3",
            email="member@guild.com",
            first_name="Bob",
            last_name="Wilson",
            guild_role=GuildRole.MEMBER,
            created_at=at(2025, 2, 1),
            updated_at=at(2025, 2, 1),
        ),
    ]

    characters = [
        Character(
            id="1",
            user_id="1",
            name="Thorgar",
            level=80,
            wow_class=WowClass.WARRIOR,
            specializations=[
                CharacterSpecialization("Protection", MasteryLevel.EXPERT, is_preferred=True),
                CharacterSpecialization("Arms", MasteryLevel.ADVANCED),
            ],
            primary_role=Role.TANK,
            item_level=480,
            is_main=True,
            created_at=at(2025, 1, 1),
            updated_at=at(2025, 8, 15),
        ),
        Character(
            id="2",
            user_id="1",
            name="Healbot",
            level=78,
            wow_class=WowClass.PRIEST,
            specializations=[
                CharacterSpecialization("Holy", MasteryLevel.ADVANCED, is_preferred=True),
            ],
            primary_role=Role.HEALER,
            item_level=470,
            created_at=at(2025, 2, 1),
            updated_at=at(2025, 8, 10),
        ),
        Character(
            id="3",
            user_id="2",
            name="Frostmage",
            level=80,
            wow_class=WowClass.MAGE,
            specializations=[
                CharacterSpecialization("Frost", MasteryLevel.EXPERT, is_preferred=True),
                CharacterSpecialization("Fire", MasteryLevel.INTERMEDIATE),
            ],
            primary_role=Role.DPS,
            item_level=485,
            is_main=True,
            created_at=at(2025, 1, 15),
            updated_at=at(2025, 8, 12),
        ),
        Character(
            id="4",
            user_id="3",
            name="Shadowhunt",
            level=79,
            wow_class=WowClass.HUNTER,
            specializations=[
                CharacterSpecialization("Marksmanship", MasteryLevel.ADVANCED, is_preferred=True),
            ],
            primary_role=Role.DPS,
            item_level=475,
            is_main=True,
            created_at=at(2025, 2, 1),
            updated_at=at(2025, 8, 14),
        ),
        Character(
            id="5",
            user_id="2",
            name="Bearform",
            level=80,
            wow_class=WowClass.DRUID,
            specializations=[
                CharacterSpecialization("Guardian", MasteryLevel.ADVANCED, is_preferred=True),
                CharacterSpecialization("Restoration", MasteryLevel.BEGINNER),
            ],
            primary_role=Role.TANK,
            item_level=478,
            created_at=at(2025, 3, 1),
            updated_at=at(2025, 8, 16),
        ),
    ]

    raids = [
        Raid(
            id="1",
            name="Aberrus Heroic Clear",
            description="Weekly heroic clear of Aberrus. All roles needed, good teamwork required.",
            objective="Clear all bosses in Aberrus on Heroic difficulty",
            date=at(2025, 8, 20, 19, 0),
            duration=180,
            max_players=20,
            difficulty=Difficulty.HEROIC,
            instance=INSTANCES[0],
            required_level=80,
            created_by="1",
            status=RaidStatus.OPEN,
            created_at=at(2025, 8, 15, 10, 0),
            updated_at=at(2025, 8, 15, 10, 0),
        ),
        Raid(
            id="2",
            name="Vault Normal Farm",
            description="Easy normal run for alts and new members. Relaxed atmosphere.",
            date=at(2025, 8, 22, 20, 0),
            duration=120,
            max_players=15,
            difficulty=Difficulty.NORMAL,
            instance=INSTANCES[1],
            required_level=70,
            created_by="2",
            status=RaidStatus.OPEN,
            created_at=at(2025, 8, 16, 14, 30),
            updated_at=at(2025, 8, 16, 14, 30),
        ),
        Raid(
            id="3",
            name="Mythic Progression",
            description="Mythic raid progression. Experienced raiders only.",
            objective="Progress on Mythic bosses, aiming for 3/9",
            date=at(2025, 8, 25, 18, 30),
            duration=240,
            max_players=20,
            difficulty=Difficulty.MYTHIC,
            instance=INSTANCES[0],
            required_level=80,
            created_by="1",
            status=RaidStatus.OPEN,
            created_at=at(2025, 8, 17, 9, 15),
            updated_at=at(2025, 8, 17, 9, 15),
        ),
        Raid(
            id="4",
            name="Learning Raid",
            description="Teaching raid for new members to learn mechanics.",
            objective="Learn raid mechanics and teamwork",
            date=at(2025, 8, 24, 16, 0),
            duration=150,
            max_players=12,
            difficulty=Difficulty.NORMAL,
            instance=INSTANCES[2],
            required_level=75,
            created_by="2",
            status=RaidStatus.OPEN,
            created_at=at(2025, 8, 18, 11, 0),
            updated_at=at(2025, 8, 18, 11, 0),
        ),
    ]

    registrations = [
        RaidRegistration(
            id="1",
            raid_id="1",
            user_id="1",
            user_name="John Doe",
            character_ids=["1", "2"],
            selected_character_id="1",
            status=RegistrationStatus.ACCEPTED,
            notes="Leading the raid",
            registered_at=at(2025, 8, 15, 12, 0),
            updated_at=at(2025, 8, 16, 10, 0),
        ),
        RaidRegistration(
            id="2",
            raid_id="1",
            user_id="2",
            user_name="Jane Smith",
            character_ids=["3", "5"],
            selected_character_id="3",
            status=RegistrationStatus.ACCEPTED,
            registered_at=at(2025, 8, 15, 13, 30),
            updated_at=at(2025, 8, 16, 10, 0),
        ),
        RaidRegistration(
            id="3",
            raid_id="1",
            user_id="3",
            user_name="Bob Wilson",
            character_ids=["4"],
            status=RegistrationStatus.PENDING,
            registered_at=at(2025, 8, 16, 9, 15),
            updated_at=at(2025, 8, 16, 9, 15),
        ),
        RaidRegistration(
            id="4",
            raid_id="2",
            user_id="2",
            user_name="Jane Smith",
            character_ids=["5"],
            selected_character_id="5",
            status=RegistrationStatus.ACCEPTED,
            registered_at=at(2025, 8, 16, 15, 0),
            updated_at=at(2025, 8, 17, 10, 0),
        ),
    ]

    return SeedData(
        users=users,
        characters=characters,
        raids=raids,
        registrations=registrations,
    )
