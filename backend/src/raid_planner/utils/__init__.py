"""Utility modules for raid_planner."""

from raid_planner.utils.class_specs import (
    CLASS_SPECS,
    SpecInfo,
    build_class_specs,
    get_class_specs,
    get_spec,
    is_valid_spec,
    role_for_spec,
)
from raid_planner.utils.timeutils import ensure_aware, get_timezone, local_date, to_local

__all__ = [
    "CLASS_SPECS",
    "SpecInfo",
    "build_class_specs",
    "get_class_specs",
    "get_spec",
    "is_valid_spec",
    "role_for_spec",
    "ensure_aware",
    "get_timezone",
    "local_date",
    "to_local",
]
