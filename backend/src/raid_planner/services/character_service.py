"""Character creation, update and removal."""

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from raid_planner.models.character import Character, CharacterSpecialization, WowClass
from raid_planner.repositories.base import RaidRepository
from raid_planner.repositories.memory_repository import new_id
from raid_planner.services.specialization_editor import compute_primary_role
from raid_planner.utils.class_specs import is_valid_spec

logger = logging.getLogger(__name__)

MIN_LEVEL = 1
MAX_LEVEL = 80
MIN_ITEM_LEVEL = 1
MAX_ITEM_LEVEL = 600


@dataclass
class CharacterDraft:
    """Form input for a character, before ids and derived fields."""

    name: str
    level: int
    wow_class: WowClass
    item_level: int | None = None
    is_main: bool = False
    server: str | None = None
    notes: str | None = None


def validate_specializations(
    wow_class: WowClass, specializations: list[CharacterSpecialization]
) -> None:
    """Check a specialization list before it is saved.

    Raises:
        ValueError: If the list is empty, holds a spec foreign to the class,
            repeats a spec, or marks more than one spec preferred
    """
    if not specializations:
        raise ValueError("Select at least one specialization")

    seen: set[str] = set()
    for spec in specializations:
        if not is_valid_spec(wow_class, spec.spec):
            raise ValueError(f"{spec.spec} is not a {wow_class.value} specialization")
        if spec.spec in seen:
            raise ValueError(f"Specialization {spec.spec} is listed twice")
        seen.add(spec.spec)

    if sum(1 for s in specializations if s.is_preferred) > 1:
        raise ValueError("Only one specialization can be preferred")


def validate_draft(draft: CharacterDraft) -> None:
    """Range checks on the plain character fields.

    Raises:
        ValueError: If the name is blank or a level is out of range
    """
    if not draft.name.strip():
        raise ValueError("Character name is required")
    if not MIN_LEVEL <= draft.level <= MAX_LEVEL:
        raise ValueError(f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}")
    if draft.item_level is not None and not MIN_ITEM_LEVEL <= draft.item_level <= MAX_ITEM_LEVEL:
        raise ValueError(f"Item level must be between {MIN_ITEM_LEVEL} and {MAX_ITEM_LEVEL}")


class CharacterService:
    """Saves characters to the repository, deriving their primary role."""

    def __init__(self, repository: RaidRepository):
        self.repository = repository

    def save_character(
        self,
        draft: CharacterDraft,
        specializations: list[CharacterSpecialization],
        user_id: str,
        character_id: str | None = None,
    ) -> Character:
        """Create a character, or update it when `character_id` is given.

        Returns:
            The stored character

        Raises:
            ValueError: If the input is invalid, the user is unknown, or the
                character belongs to another user
            LookupError: If `character_id` does not exist
        """
        validate_draft(draft)
        validate_specializations(draft.wow_class, specializations)

        if self.repository.get_user(user_id) is None:
            raise ValueError(f"Unknown user: {user_id}")

        specs = [replace(s) for s in specializations]
        primary_role = compute_primary_role(draft.wow_class, specs)
        now = datetime.now(timezone.utc)

        if character_id is None:
            character = Character(
                id=new_id(),
                user_id=user_id,
                name=draft.name.strip(),
                level=draft.level,
                wow_class=draft.wow_class,
                specializations=specs,
                primary_role=primary_role,
                item_level=draft.item_level,
                is_main=draft.is_main,
                server=draft.server,
                notes=draft.notes,
                created_at=now,
                updated_at=now,
            )
            logger.info(f"Created character {character.name} ({character.id}) for user {user_id}")
        else:
            existing = self.repository.get_character(character_id)
            if existing is None:
                raise LookupError(f"Character not found: {character_id}")
            if existing.user_id != user_id:
                raise ValueError("Character belongs to another user")
            character = replace(
                existing,
                name=draft.name.strip(),
                level=draft.level,
                wow_class=draft.wow_class,
                specializations=specs,
                primary_role=primary_role,
                item_level=draft.item_level,
                is_main=draft.is_main,
                server=draft.server,
                notes=draft.notes,
                updated_at=now,
            )
            logger.info(f"Updated character {character.name} ({character.id})")

        return self.repository.save_character(character)

    def delete_character(self, character_id: str) -> bool:
        deleted = self.repository.delete_character(character_id)
        if deleted:
            logger.info(f"Deleted character {character_id}")
        return deleted
