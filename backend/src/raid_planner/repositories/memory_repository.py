"""In-memory data access for raids, characters, users and registrations."""

import asyncio
import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Iterable

from raid_planner.models.character import Character
from raid_planner.models.raid import CreateRaidData, Raid, RaidStatus
from raid_planner.models.registration import RaidRegistration
from raid_planner.models.user import User
from raid_planner.repositories.base import RaidRepository, RepositoryError
from raid_planner.repositories.seed_data import SeedData

logger = logging.getLogger(__name__)


def new_id() -> str:
    """Generate a short unique record id."""
    return uuid.uuid4().hex[:12]


class InMemoryRaidRepository(RaidRepository):
    """Entity store held in process memory.

    Built once at application startup and handed to consumers through
    `app.state`. Nothing survives a restart.
    """

    def __init__(
        self,
        users: Iterable[User] = (),
        characters: Iterable[Character] = (),
        raids: Iterable[Raid] = (),
        registrations: Iterable[RaidRegistration] = (),
        creation_delay_seconds: float = 0.0,
    ):
        """Initialize the store.

        Args:
            users: Initial guild members
            characters: Initial characters
            raids: Initial raids
            registrations: Initial raid signups
            creation_delay_seconds: Artificial latency applied to create_raid
        """
        # Insertion order is the collection order exposed to callers
        self._users: dict[str, User] = {u.id: u for u in users}
        self._characters: dict[str, Character] = {c.id: c for c in characters}
        self._raids: dict[str, Raid] = {r.id: r for r in raids}
        self._registrations: dict[str, RaidRegistration] = {r.id: r for r in registrations}
        self._creation_delay = creation_delay_seconds
        self._lock = threading.Lock()

    @classmethod
    def from_seed(cls, seed: SeedData, creation_delay_seconds: float = 0.0) -> "InMemoryRaidRepository":
        repo = cls(
            users=seed.users,
            characters=seed.characters,
            raids=seed.raids,
            registrations=seed.registrations,
            creation_delay_seconds=creation_delay_seconds,
        )
        logger.info(
            f"InMemoryRaidRepository: Loaded {len(seed.users)} users, "
            f"{len(seed.characters)} characters, {len(seed.raids)} raids, "
            f"{len(seed.registrations)} registrations"
        )
        return repo

    def _snapshot(self, store: dict) -> list:
        # Copied under the lock; writers may insert concurrently
        with self._lock:
            return list(store.values())

    # Users

    def list_users(self) -> list[User]:
        return self._snapshot(self._users)

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    # Raids

    def list_raids(self) -> list[Raid]:
        return self._snapshot(self._raids)

    def get_raid(self, raid_id: str) -> Raid | None:
        return self._raids.get(raid_id)

    def get_raids_by_date_range(self, start: datetime, end: datetime) -> list[Raid]:
        """Raids starting between `start` and `end`, both inclusive."""
        return [raid for raid in self._snapshot(self._raids) if start <= raid.date <= end]

    def get_upcoming_raids(self, now: datetime) -> list[Raid]:
        """Raids starting strictly after `now`, soonest first."""
        upcoming = [raid for raid in self._snapshot(self._raids) if raid.date > now]
        return sorted(upcoming, key=lambda raid: raid.date)

    async def create_raid(self, data: CreateRaidData) -> Raid:
        """Store a new raid after the configured artificial delay.

        Raises:
            RepositoryError: If the raid data cannot be stored
        """
        if self._creation_delay > 0:
            await asyncio.sleep(self._creation_delay)

        if data.duration <= 0:
            raise RepositoryError("Raid duration must be positive")
        if data.max_players <= 0:
            raise RepositoryError("Raid must allow at least one player")

        now = datetime.now(timezone.utc)
        raid = Raid(
            id=new_id(),
            name=data.name,
            date=data.date,
            duration=data.duration,
            max_players=data.max_players,
            difficulty=data.difficulty,
            instance=data.instance,
            created_by=data.created_by,
            status=data.status,
            description=data.description,
            objective=data.objective,
            required_level=data.required_level,
            created_at=now,
            updated_at=now,
        )
        with self._lock:
            self._raids[raid.id] = raid
        logger.info(f"Created raid {raid.id} ({raid.name}) on {raid.date.isoformat()}")
        return raid

    def set_raid_status(self, raid_id: str, status: RaidStatus) -> Raid | None:
        with self._lock:
            raid = self._raids.get(raid_id)
            if raid is None:
                return None
            raid.status = status
            raid.updated_at = datetime.now(timezone.utc)
        return raid

    # Characters

    def list_characters(self) -> list[Character]:
        return self._snapshot(self._characters)

    def get_character(self, character_id: str) -> Character | None:
        return self._characters.get(character_id)

    def get_characters_for_user(self, user_id: str) -> list[Character]:
        return [c for c in self._snapshot(self._characters) if c.user_id == user_id]

    def save_character(self, character: Character) -> Character:
        """Insert or replace a character (keyed by id)."""
        with self._lock:
            self._characters[character.id] = character
        return character

    def delete_character(self, character_id: str) -> bool:
        with self._lock:
            return self._characters.pop(character_id, None) is not None

    # Registrations

    def get_registration(self, registration_id: str) -> RaidRegistration | None:
        return self._registrations.get(registration_id)

    def get_registrations_for_raid(self, raid_id: str) -> list[RaidRegistration]:
        return [r for r in self._snapshot(self._registrations) if r.raid_id == raid_id]

    def get_registrations_for_user(self, user_id: str) -> list[RaidRegistration]:
        return [r for r in self._snapshot(self._registrations) if r.user_id == user_id]

    def save_registration(self, registration: RaidRegistration) -> RaidRegistration:
        """Insert or replace a registration (keyed by id)."""
        with self._lock:
            self._registrations[registration.id] = registration
        return registration

    def add_registration_if_room(
        self, registration: RaidRegistration, max_players: int
    ) -> bool:
        with self._lock:
            signups = [r for r in self._registrations.values() if r.raid_id == registration.raid_id]
            if len(signups) >= max_players:
                return False
            if any(r.user_id == registration.user_id for r in signups):
                return False
            self._registrations[registration.id] = registration
        return True
