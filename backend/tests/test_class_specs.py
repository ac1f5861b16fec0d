"""Tests for the class/spec/role reference table."""

import pytest

from raid_planner.models.character import Role, WowClass
from raid_planner.utils.class_specs import (
    CLASS_SPECS,
    SpecInfo,
    build_class_specs,
    get_class_specs,
    get_spec,
    role_for_spec,
)


def test_every_class_has_specs():
    assert set(CLASS_SPECS) == set(WowClass)
    for wow_class in WowClass:
        assert len(get_class_specs(wow_class)) >= 1


def test_every_spec_has_a_role():
    for specs in CLASS_SPECS.values():
        for spec in specs:
            assert isinstance(spec.role, Role)


def test_spec_names_unique_within_class():
    for specs in CLASS_SPECS.values():
        names = [spec.name for spec in specs]
        assert len(names) == len(set(names))


def test_table_is_read_only():
    with pytest.raises(TypeError):
        CLASS_SPECS[WowClass.MAGE] = ()  # type: ignore[index]


def test_same_spec_name_maps_per_class():
    """Frost is DPS for both Mage and Death Knight; Holy heals for Priest and Paladin."""
    assert role_for_spec(WowClass.MAGE, "Frost") == Role.DPS
    assert role_for_spec(WowClass.DEATH_KNIGHT, "Frost") == Role.DPS
    assert role_for_spec(WowClass.PALADIN, "Holy") == Role.HEALER
    assert role_for_spec(WowClass.PALADIN, "Protection") == Role.TANK


def test_unknown_spec_lookup():
    assert get_spec(WowClass.MAGE, "Protection") is None
    assert role_for_spec(WowClass.MAGE, "Protection") is None


def test_druid_has_four_specs():
    assert [s.name for s in get_class_specs(WowClass.DRUID)] == [
        "Balance",
        "Feral",
        "Guardian",
        "Restoration",
    ]


def test_build_rejects_missing_class():
    definitions = [SpecInfo(WowClass.MAGE, "Frost", Role.DPS)]
    with pytest.raises(ValueError, match="Classes without specializations"):
        build_class_specs(definitions)


def test_build_rejects_duplicate_spec():
    definitions = [SpecInfo(c, "Only", Role.DPS) for c in WowClass]
    definitions.append(SpecInfo(WowClass.MAGE, "Only", Role.TANK))
    with pytest.raises(ValueError, match="Duplicate spec"):
        build_class_specs(definitions)


def test_build_rejects_spec_without_role():
    definitions = [SpecInfo(c, "Only", Role.DPS) for c in WowClass]
    definitions[0] = SpecInfo(definitions[0].wow_class, "Only", "Tank")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="no valid role"):
        build_class_specs(definitions)
