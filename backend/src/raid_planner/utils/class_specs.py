"""Class, specialization and role reference data.

The table is built once at import time and validated for completeness:
every class has at least one spec, spec names are unique within a class,
and every spec maps to exactly one role. Lookups never have to guess.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from raid_planner.models.character import Role, WowClass


@dataclass(frozen=True)
class SpecInfo:
    """A specialization of a class and the role it plays."""

    wow_class: WowClass
    name: str
    role: Role


_SPEC_DEFINITIONS: tuple[SpecInfo, ...] = (
    # Warrior
    SpecInfo(WowClass.WARRIOR, "Arms", Role.DPS),
    SpecInfo(WowClass.WARRIOR, "Fury", Role.DPS),
    SpecInfo(WowClass.WARRIOR, "Protection", Role.TANK),
    # Paladin
    SpecInfo(WowClass.PALADIN, "Holy", Role.HEALER),
    SpecInfo(WowClass.PALADIN, "Protection", Role.TANK),
    SpecInfo(WowClass.PALADIN, "Retribution", Role.DPS),
    # Hunter
    SpecInfo(WowClass.HUNTER, "Beast Mastery", Role.DPS),
    SpecInfo(WowClass.HUNTER, "Marksmanship", Role.DPS),
    SpecInfo(WowClass.HUNTER, "Survival", Role.DPS),
    # Rogue
    SpecInfo(WowClass.ROGUE, "Assassination", Role.DPS),
    SpecInfo(WowClass.ROGUE, "Outlaw", Role.DPS),
    SpecInfo(WowClass.ROGUE, "Subtlety", Role.DPS),
    # Priest
    SpecInfo(WowClass.PRIEST, "Discipline", Role.HEALER),
    SpecInfo(WowClass.PRIEST, "Holy", Role.HEALER),
    SpecInfo(WowClass.PRIEST, "Shadow", Role.DPS),
    # Shaman
    SpecInfo(WowClass.SHAMAN, "Elemental", Role.DPS),
    SpecInfo(WowClass.SHAMAN, "Enhancement", Role.DPS),
    SpecInfo(WowClass.SHAMAN, "Restoration", Role.HEALER),
    # Mage
    SpecInfo(WowClass.MAGE, "Arcane", Role.DPS),
    SpecInfo(WowClass.MAGE, "Fire", Role.DPS),
    SpecInfo(WowClass.MAGE, "Frost", Role.DPS),
    # Warlock
    SpecInfo(WowClass.WARLOCK, "Affliction", Role.DPS),
    SpecInfo(WowClass.WARLOCK, "Demonology", Role.DPS),
    SpecInfo(WowClass.WARLOCK, "Destruction", Role.DPS),
    # Monk
    SpecInfo(WowClass.MONK, "Brewmaster", Role.TANK),
    SpecInfo(WowClass.MONK, "Mistweaver", Role.HEALER),
    SpecInfo(WowClass.MONK, "Windwalker", Role.DPS),
    # Druid
    SpecInfo(WowClass.DRUID, "Balance", Role.DPS),
    SpecInfo(WowClass.DRUID, "Feral", Role.DPS),
    SpecInfo(WowClass.DRUID, "Guardian", Role.TANK),
    SpecInfo(WowClass.DRUID, "Restoration", Role.HEALER),
    # Demon Hunter
    SpecInfo(WowClass.DEMON_HUNTER, "Havoc", Role.DPS),
    SpecInfo(WowClass.DEMON_HUNTER, "Vengeance", Role.TANK),
    # Death Knight
    SpecInfo(WowClass.DEATH_KNIGHT, "Blood", Role.TANK),
    SpecInfo(WowClass.DEATH_KNIGHT, "Frost", Role.DPS),
    SpecInfo(WowClass.DEATH_KNIGHT, "Unholy", Role.DPS),
    # Evoker
    SpecInfo(WowClass.EVOKER, "Devastation", Role.DPS),
    SpecInfo(WowClass.EVOKER, "Preservation", Role.HEALER),
    SpecInfo(WowClass.EVOKER, "Augmentation", Role.DPS),
)


def build_class_specs(
    definitions: Iterable[SpecInfo],
) -> Mapping[WowClass, tuple[SpecInfo, ...]]:
    """Group spec definitions by class and validate the result.

    Args:
        definitions: Spec definitions in display order

    Returns:
        Read-only mapping of class -> specs (definition order preserved)

    Raises:
        ValueError: If a class has no specs, a spec name is repeated within
            a class, or a spec has no valid role
    """
    grouped: dict[WowClass, list[SpecInfo]] = {wow_class: [] for wow_class in WowClass}

    for spec in definitions:
        if not isinstance(spec.role, Role):
            raise ValueError(f"Spec {spec.wow_class.value}/{spec.name} has no valid role")
        existing = {s.name for s in grouped[spec.wow_class]}
        if spec.name in existing:
            raise ValueError(f"Duplicate spec {spec.name} for class {spec.wow_class.value}")
        grouped[spec.wow_class].append(spec)

    missing = [wow_class.value for wow_class, specs in grouped.items() if not specs]
    if missing:
        raise ValueError(f"Classes without specializations: {', '.join(missing)}")

    return MappingProxyType({wow_class: tuple(specs) for wow_class, specs in grouped.items()})


CLASS_SPECS: Mapping[WowClass, tuple[SpecInfo, ...]] = build_class_specs(_SPEC_DEFINITIONS)


def get_class_specs(wow_class: WowClass) -> tuple[SpecInfo, ...]:
    """All specializations of a class, in display order."""
    return CLASS_SPECS[wow_class]


def get_spec(wow_class: WowClass, spec_name: str) -> Optional[SpecInfo]:
    """Find a spec of a class by name, or None if the class has no such spec."""
    for spec in CLASS_SPECS[wow_class]:
        if spec.name == spec_name:
            return spec
    return None


def is_valid_spec(wow_class: WowClass, spec_name: str) -> bool:
    return get_spec(wow_class, spec_name) is not None


def role_for_spec(wow_class: WowClass, spec_name: str) -> Optional[Role]:
    """Role mapped to a class spec, or None if unknown."""
    spec = get_spec(wow_class, spec_name)
    return spec.role if spec else None
