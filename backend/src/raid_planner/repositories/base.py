"""Repository contract shared by the in-memory store and future backends."""

from abc import ABC, abstractmethod
from datetime import datetime

from raid_planner.models.character import Character
from raid_planner.models.raid import CreateRaidData, Raid, RaidStatus
from raid_planner.models.registration import RaidRegistration
from raid_planner.models.user import User


class RepositoryError(Exception):
    """A repository operation could not be completed."""


class RaidRepository(ABC):
    """Data access for raids, characters, users and registrations.

    Lookups return None (single record) or an empty list (collections) when
    nothing matches. Only `create_raid` is asynchronous: it is the one
    operation expected to go over the network once a remote backend exists.
    """

    # Users

    @abstractmethod
    def list_users(self) -> list[User]: ...

    @abstractmethod
    def get_user(self, user_id: str) -> User | None: ...

    # Raids

    @abstractmethod
    def list_raids(self) -> list[Raid]: ...

    @abstractmethod
    def get_raid(self, raid_id: str) -> Raid | None: ...

    @abstractmethod
    def get_raids_by_date_range(self, start: datetime, end: datetime) -> list[Raid]: ...

    @abstractmethod
    def get_upcoming_raids(self, now: datetime) -> list[Raid]: ...

    @abstractmethod
    async def create_raid(self, data: CreateRaidData) -> Raid:
        """Store a new raid.

        Raises:
            RepositoryError: If the raid could not be stored
        """

    @abstractmethod
    def set_raid_status(self, raid_id: str, status: RaidStatus) -> Raid | None: ...

    # Characters

    @abstractmethod
    def list_characters(self) -> list[Character]: ...

    @abstractmethod
    def get_character(self, character_id: str) -> Character | None: ...

    @abstractmethod
    def get_characters_for_user(self, user_id: str) -> list[Character]: ...

    @abstractmethod
    def save_character(self, character: Character) -> Character: ...

    @abstractmethod
    def delete_character(self, character_id: str) -> bool: ...

    # Registrations

    @abstractmethod
    def get_registration(self, registration_id: str) -> RaidRegistration | None: ...

    @abstractmethod
    def get_registrations_for_raid(self, raid_id: str) -> list[RaidRegistration]: ...

    @abstractmethod
    def get_registrations_for_user(self, user_id: str) -> list[RaidRegistration]: ...

    @abstractmethod
    def save_registration(self, registration: RaidRegistration) -> RaidRegistration: ...

    @abstractmethod
    def add_registration_if_room(
        self, registration: RaidRegistration, max_players: int
    ) -> bool:
        """Store a new signup unless the raid is full or the user is already signed up.

        The check and the insert are one atomic step.

        Returns:
            True if the registration was stored
        """

    def count_registrations(self, raid_id: str) -> int:
        """Number of signups for a raid (the participant count)."""
        return len(self.get_registrations_for_raid(raid_id))
