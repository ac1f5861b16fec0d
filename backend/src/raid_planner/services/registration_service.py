"""Raid signups and roster composition."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable

from raid_planner.models.character import Character, Role
from raid_planner.models.raid import Raid, RaidStatus
from raid_planner.models.registration import RaidRegistration, RegistrationStatus
from raid_planner.repositories.base import RaidRepository
from raid_planner.repositories.memory_repository import new_id

logger = logging.getLogger(__name__)


class RegistrationError(ValueError):
    """A signup or signup update was rejected."""


def can_join(raid: Raid, participant_count: int) -> bool:
    """Open raids accept signups until they are full."""
    return raid.status == RaidStatus.OPEN and participant_count < raid.max_players


@dataclass
class RosterComposition:
    """Role breakdown of a raid's roster."""

    raid_id: str
    tanks: int = 0
    healers: int = 0
    dps: int = 0
    mains: int = 0
    # Registrations whose characters could not be resolved
    unresolved: list[str] = field(default_factory=list)
    characters: list[Character] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.tanks + self.healers + self.dps

    def to_dict(self) -> dict:
        return {
            "raid_id": self.raid_id,
            "tanks": self.tanks,
            "healers": self.healers,
            "dps": self.dps,
            "mains": self.mains,
            "total": self.total,
            "unresolved": list(self.unresolved),
        }


class RegistrationService:
    """Creates and updates raid registrations."""

    def __init__(self, repository: RaidRepository):
        self.repository = repository

    def register(
        self,
        raid_id: str,
        user_id: str,
        character_ids: list[str],
        notes: str | None = None,
    ) -> RaidRegistration:
        """Sign a user up for a raid with the characters they propose.

        Raises:
            LookupError: If the raid or the user does not exist
            RegistrationError: If no character is proposed, a character is
                not the user's, the user is already signed up, or the raid
                does not accept signups
        """
        raid = self.repository.get_raid(raid_id)
        if raid is None:
            raise LookupError(f"Raid not found: {raid_id}")
        user = self.repository.get_user(user_id)
        if user is None:
            raise LookupError(f"User not found: {user_id}")

        # Duplicates keep their first position
        proposed = list(dict.fromkeys(character_ids))
        if not proposed:
            raise RegistrationError("Select at least one character")

        for character_id in proposed:
            character = self.repository.get_character(character_id)
            if character is None or character.user_id != user_id:
                raise RegistrationError(f"Character {character_id} does not belong to {user.name}")

        if self._already_registered(raid_id, user_id):
            raise RegistrationError(f"{user.name} is already registered for {raid.name}")

        if not can_join(raid, self.repository.count_registrations(raid_id)):
            logger.warning(f"Rejected signup of user {user_id} for raid {raid_id} ({raid.status.value})")
            raise RegistrationError(f"Raid {raid.name} is not accepting registrations")

        now = datetime.now(timezone.utc)
        registration = RaidRegistration(
            id=new_id(),
            raid_id=raid_id,
            user_id=user_id,
            user_name=user.name,
            character_ids=proposed,
            status=RegistrationStatus.PENDING,
            notes=notes or None,
            registered_at=now,
            updated_at=now,
        )
        # A concurrent signup may have taken the last seat since the check above
        if not self.repository.add_registration_if_room(registration, raid.max_players):
            if self._already_registered(raid_id, user_id):
                raise RegistrationError(f"{user.name} is already registered for {raid.name}")
            logger.warning(f"Raid {raid_id} filled up before user {user_id} could register")
            raise RegistrationError(f"Raid {raid.name} is not accepting registrations")
        logger.info(f"User {user_id} registered {len(proposed)} character(s) for raid {raid_id}")
        return registration

    def _already_registered(self, raid_id: str, user_id: str) -> bool:
        return any(r.raid_id == raid_id for r in self.repository.get_registrations_for_user(user_id))

    def update_registration(
        self,
        registration_id: str,
        status: RegistrationStatus | None = None,
        selected_character_id: str | None = None,
    ) -> RaidRegistration | None:
        """Record an officer decision on a signup.

        Returns:
            The updated registration, or None if it does not exist

        Raises:
            RegistrationError: If the selected character was not proposed
        """
        registration = self.repository.get_registration(registration_id)
        if registration is None:
            return None

        if selected_character_id is not None:
            if selected_character_id not in registration.character_ids:
                raise RegistrationError(
                    f"Character {selected_character_id} was not proposed in this registration"
                )
            registration.selected_character_id = selected_character_id

        if status is not None:
            registration.status = status

        registration.updated_at = datetime.now(timezone.utc)
        self.repository.save_registration(registration)
        logger.info(f"Registration {registration_id} is now {registration.status.value}")
        return registration

    def roster_character(self, registration: RaidRegistration) -> Character | None:
        """Character that plays for a registration: the selected one, else the first proposed."""
        character_id = registration.selected_character_id or next(
            iter(registration.character_ids), None
        )
        if character_id is None:
            return None
        return self.repository.get_character(character_id)

    def roster_composition(
        self,
        raid_id: str,
        statuses: Iterable[RegistrationStatus] = (RegistrationStatus.ACCEPTED,),
    ) -> RosterComposition:
        """Count roles among the raid's registrations with the given statuses."""
        wanted = set(statuses)
        roster = RosterComposition(raid_id=raid_id)

        for registration in self.repository.get_registrations_for_raid(raid_id):
            if registration.status not in wanted:
                continue
            character = self.roster_character(registration)
            if character is None:
                roster.unresolved.append(registration.id)
                continue

            roster.characters.append(character)
            if character.primary_role == Role.TANK:
                roster.tanks += 1
            elif character.primary_role == Role.HEALER:
                roster.healers += 1
            else:
                roster.dps += 1
            if character.is_main:
                roster.mains += 1

        return roster
