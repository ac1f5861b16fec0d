"""Business logic services."""

from raid_planner.services.calendar_service import (
    CalendarWeek,
    DayBucket,
    WeekView,
    bucket_week,
    calendar_stats,
    week_dates,
    week_start,
)
from raid_planner.services.character_service import CharacterDraft, CharacterService
from raid_planner.services.raid_filter import RaidFilters, filter_raids
from raid_planner.services.raid_service import RaidService
from raid_planner.services.raid_status import (
    InvalidStatusTransition,
    RaidStatusService,
    can_transition,
)
from raid_planner.services.registration_service import (
    RegistrationError,
    RegistrationService,
    RosterComposition,
    can_join,
)
from raid_planner.services.specialization_editor import (
    SpecializationEditor,
    compute_primary_role,
)

__all__ = [
    "CalendarWeek",
    "DayBucket",
    "WeekView",
    "bucket_week",
    "calendar_stats",
    "week_dates",
    "week_start",
    "CharacterDraft",
    "CharacterService",
    "RaidFilters",
    "filter_raids",
    "RaidService",
    "InvalidStatusTransition",
    "RaidStatusService",
    "can_transition",
    "RegistrationError",
    "RegistrationService",
    "RosterComposition",
    "can_join",
    "SpecializationEditor",
    "compute_primary_role",
]
