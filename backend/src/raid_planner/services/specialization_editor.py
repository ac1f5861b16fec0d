"""Editing rules for a character's specialization list."""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from raid_planner.models.character import (
    CharacterSpecialization,
    MasteryLevel,
    Role,
    WowClass,
)
from raid_planner.utils.class_specs import SpecInfo, get_class_specs, is_valid_spec, role_for_spec

logger = logging.getLogger(__name__)


def compute_primary_role(
    wow_class: WowClass, specializations: list[CharacterSpecialization]
) -> Role:
    """Role of the preferred spec, else of the first spec, else DPS."""
    if not specializations:
        return Role.DPS
    preferred = next((s for s in specializations if s.is_preferred), specializations[0])
    return role_for_spec(wow_class, preferred.spec) or Role.DPS


class SpecializationEditor:
    """Working copy of a character's specializations.

    The single-preferred rule is applied by each edit; the list is not
    re-validated as a whole afterwards.
    """

    def __init__(
        self,
        wow_class: WowClass,
        specializations: Optional[Iterable[CharacterSpecialization]] = None,
    ):
        self.wow_class = wow_class
        self._specs: list[CharacterSpecialization] = [
            replace(s) for s in (specializations or [])
        ]

    @property
    def specializations(self) -> list[CharacterSpecialization]:
        """Copy of the current list."""
        return [replace(s) for s in self._specs]

    def __len__(self) -> int:
        return len(self._specs)

    def available_specs(self) -> list[SpecInfo]:
        """Class specs not yet assigned, in table order."""
        used = {s.spec for s in self._specs}
        return [spec for spec in get_class_specs(self.wow_class) if spec.name not in used]

    def can_add(self) -> bool:
        return bool(self.available_specs())

    def add(self) -> CharacterSpecialization | None:
        """Append the first unassigned spec.

        The first specialization of a character starts as preferred.
        Returns None when every class spec is already assigned.
        """
        available = self.available_specs()
        if not available:
            return None

        new_spec = CharacterSpecialization(
            spec=available[0].name,
            mastery_level=MasteryLevel.BEGINNER,
            is_preferred=not self._specs,
        )
        self._specs.append(new_spec)
        return replace(new_spec)

    def _check_index(self, index: int) -> int:
        # Negative positions are not list offsets here
        if not 0 <= index < len(self._specs):
            raise IndexError(f"No specialization at index {index}")
        return index

    def update(
        self,
        index: int,
        spec: str | None = None,
        mastery_level: MasteryLevel | None = None,
        is_preferred: bool | None = None,
    ) -> CharacterSpecialization:
        """Change one entry.

        Raises:
            IndexError: If there is no entry at `index`
            ValueError: If `spec` is not a spec of the class or is already
                used by another entry
        """
        current = self._specs[self._check_index(index)]

        if spec is not None and spec != current.spec:
            if not is_valid_spec(self.wow_class, spec):
                raise ValueError(f"{spec} is not a {self.wow_class.value} specialization")
            if any(s is not current and s.spec == spec for s in self._specs):
                raise ValueError(f"Specialization {spec} is already assigned")
            current.spec = spec

        if mastery_level is not None:
            current.mastery_level = mastery_level

        if is_preferred is not None:
            current.is_preferred = is_preferred
            if is_preferred:
                for other in self._specs:
                    if other is not current:
                        other.is_preferred = False

        return replace(current)

    def set_preferred(self, index: int) -> CharacterSpecialization:
        return self.update(index, is_preferred=True)

    def remove(self, index: int) -> CharacterSpecialization:
        """Drop an entry; losing the preferred one promotes the new first entry.

        Raises:
            IndexError: If there is no entry at `index`
        """
        removed = self._specs.pop(self._check_index(index))
        if removed.is_preferred and self._specs:
            self._specs[0].is_preferred = True
        return removed

    def change_class(self, wow_class: WowClass) -> None:
        """Switch class; specializations of the old class are cleared."""
        if wow_class != self.wow_class:
            logger.debug(f"Class changed {self.wow_class.value} -> {wow_class.value}, clearing specs")
        self.wow_class = wow_class
        self._specs = []

    def primary_role(self) -> Role:
        return compute_primary_role(self.wow_class, self._specs)
