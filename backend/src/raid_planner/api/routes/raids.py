"""REST endpoints for raids, the raid calendar, registrations and guild members."""

from datetime import date, datetime
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import BaseModel, Field

from raid_planner.api.serializers import (
    character_to_dict,
    raid_to_dict,
    registration_to_dict,
    user_to_dict,
)
from raid_planner.config import settings
from raid_planner.models.raid import CreateRaidData, Difficulty, RaidStatus
from raid_planner.models.registration import RegistrationStatus
from raid_planner.repositories.base import RepositoryError
from raid_planner.services.calendar_service import (
    CalendarWeek,
    bucket_week,
    calendar_stats,
    format_time,
    is_today,
)
from raid_planner.services.raid_filter import RaidFilters, filter_raids
from raid_planner.services.raid_service import RaidService
from raid_planner.services.raid_status import (
    InvalidStatusTransition,
    RaidStatusService,
    allowed_transitions,
)
from raid_planner.services.registration_service import RegistrationError, RegistrationService
from raid_planner.utils.timeutils import ensure_aware, get_timezone, now

router = APIRouter(prefix="/api", tags=["raids"])

# Ten years either way
MAX_WEEK_OFFSET = 520


class CreateRaidRequest(BaseModel):
    """Request body for creating a raid."""

    name: str = Field(min_length=1)
    date: datetime
    duration: int = Field(default=120, gt=0)  # Minutes
    max_players: int = Field(default=20, gt=0)
    difficulty: Difficulty = Difficulty.NORMAL
    instance: str = Field(min_length=1)
    created_by: str
    description: str | None = None
    objective: str | None = None
    required_level: int | None = Field(default=None, ge=1, le=80)
    status: RaidStatus = RaidStatus.DRAFT


class StatusUpdateRequest(BaseModel):
    status: RaidStatus


class RegisterRequest(BaseModel):
    """Request body for signing up for a raid."""

    user_id: str
    character_ids: list[str]
    notes: str | None = None


class RegistrationUpdateRequest(BaseModel):
    status: RegistrationStatus | None = None
    selected_character_id: str | None = None


def _viewer_timezone():
    return get_timezone(settings.timezone)


def _build_filters(
    difficulty: Difficulty | None,
    status: RaidStatus | None,
    instance: str | None,
    min_level: int | None = None,
    max_level: int | None = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
) -> RaidFilters:
    tz = _viewer_timezone()
    return RaidFilters(
        difficulty=difficulty,
        status=status,
        # Blank select value means "all"
        instance=instance or None,
        min_level=min_level,
        max_level=max_level,
        date_from=ensure_aware(date_from, tz) if date_from else None,
        date_to=ensure_aware(date_to, tz) if date_to else None,
    )


@router.get("/raids")
def list_raids(
    request: Request,
    difficulty: Difficulty | None = None,
    status: RaidStatus | None = None,
    instance: str | None = None,
    min_level: Annotated[int | None, Query(ge=1, le=80)] = None,
    max_level: Annotated[int | None, Query(ge=1, le=80)] = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
):
    """List raids matching the optional filters, in collection order."""
    repo = request.app.state.repository
    filters = _build_filters(
        difficulty, status, instance, min_level, max_level, date_from, date_to
    )
    raids = filter_raids(repo.list_raids(), filters)
    return {
        "raids": [raid_to_dict(raid, repo) for raid in raids],
        "count": len(raids),
        "filtered": not filters.is_empty,
    }


@router.get("/raids/upcoming")
def list_upcoming_raids(
    request: Request,
    limit: Annotated[int, Query(ge=1, le=100)] = 10,
):
    """Raids that have not started yet, soonest first."""
    repo = request.app.state.repository
    raids = repo.get_upcoming_raids(now(_viewer_timezone()))[:limit]
    return {"raids": [raid_to_dict(raid, repo) for raid in raids]}


@router.get("/raids/calendar")
def get_calendar_week(
    request: Request,
    reference: date | None = None,
    offset: Annotated[int, Query(ge=-MAX_WEEK_OFFSET, le=MAX_WEEK_OFFSET)] = 0,
    difficulty: Difficulty | None = None,
    status: RaidStatus | None = None,
    instance: str | None = None,
    min_level: Annotated[int | None, Query(ge=1, le=80)] = None,
    max_level: Annotated[int | None, Query(ge=1, le=80)] = None,
    date_from: datetime | None = None,
    date_to: datetime | None = None,
):
    """Monday-to-Sunday view of the week containing `reference`.

    `offset` moves by whole weeks (-1 previous, 1 next). Without a
    reference the current week is used.
    """
    repo = request.app.state.repository
    tz = _viewer_timezone()

    try:
        week = CalendarWeek(reference) if reference else CalendarWeek.current(tz)
        week = week.shifted(offset)
        navigation = {
            "title": week.title,
            "reference": week.reference,
            "start": week.start,
            "end": week.end,
            "previous": week.previous_week().reference,
            "next": week.next_week().reference,
        }
    except OverflowError:
        raise HTTPException(400, "Calendar week is outside the supported date range")

    filters = _build_filters(
        difficulty, status, instance, min_level, max_level, date_from, date_to
    )
    raids = filter_raids(repo.list_raids(), filters)
    view = bucket_week(week, raids, tz)

    def _calendar_entry(raid) -> dict:
        return {
            "id": raid.id,
            "name": raid.name,
            "difficulty": raid.difficulty,
            "status": raid.status,
            "date": raid.date,
            "time": format_time(raid, tz),
        }

    return {
        **navigation,
        "days": [
            {
                "date": bucket.day,
                "label": bucket.label,
                "is_today": is_today(bucket.day, tz),
                "raids": [_calendar_entry(raid) for raid in bucket.raids],
            }
            for bucket in view.days
        ],
        "agenda": [_calendar_entry(raid) for raid in view.agenda()],
        "stats": calendar_stats(raids, now(tz)),
    }


@router.get("/raids/{raid_id}")
def get_raid(request: Request, raid_id: str):
    """Raid details with registrations and roster composition."""
    repo = request.app.state.repository
    raid = repo.get_raid(raid_id)
    if not raid:
        raise HTTPException(404, f"Raid not found: {raid_id}")

    registrations = repo.get_registrations_for_raid(raid_id)
    roster = RegistrationService(repo).roster_composition(raid_id)
    creator = repo.get_user(raid.created_by)

    return {
        **raid_to_dict(raid, repo),
        "created_by_name": creator.name if creator else None,
        "registrations": [registration_to_dict(r) for r in registrations],
        "roster": roster.to_dict(),
        "allowed_statuses": (
            allowed_transitions(raid.status)
            if settings.strict_status_transitions
            else [s for s in RaidStatus if s != raid.status]
        ),
    }


@router.post("/raids", status_code=201)
async def create_raid(request: Request, body: CreateRaidRequest):
    """Create a raid."""
    repo = request.app.state.repository
    service = RaidService(repo, timeout_seconds=settings.raid_creation_timeout_seconds)
    data = CreateRaidData(
        name=body.name,
        date=ensure_aware(body.date, _viewer_timezone()),
        duration=body.duration,
        max_players=body.max_players,
        difficulty=body.difficulty,
        instance=body.instance,
        created_by=body.created_by,
        description=body.description,
        objective=body.objective,
        required_level=body.required_level,
        status=body.status,
    )
    try:
        raid = await service.create_raid(data)
    except RepositoryError as e:
        raise HTTPException(status_code=503, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return raid_to_dict(raid, repo)


@router.patch("/raids/{raid_id}/status")
def update_raid_status(request: Request, raid_id: str, body: StatusUpdateRequest):
    """Change a raid's status."""
    repo = request.app.state.repository
    service = RaidStatusService(repo, strict=settings.strict_status_transitions)
    try:
        raid = service.change_status(raid_id, body.status)
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=400, detail=str(e))
    if raid is None:
        raise HTTPException(404, f"Raid not found: {raid_id}")
    return raid_to_dict(raid, repo)


@router.post("/raids/{raid_id}/registrations", status_code=201)
def register_for_raid(request: Request, raid_id: str, body: RegisterRequest):
    """Sign up characters for a raid."""
    service = RegistrationService(request.app.state.repository)
    try:
        registration = service.register(raid_id, body.user_id, body.character_ids, body.notes)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RegistrationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return registration_to_dict(registration)


@router.get("/raids/{raid_id}/roster")
def get_roster(
    request: Request,
    raid_id: str,
    status: Annotated[list[RegistrationStatus] | None, Query()] = None,
):
    """Role breakdown of a raid, over accepted signups unless `status` is given."""
    repo = request.app.state.repository
    if not repo.get_raid(raid_id):
        raise HTTPException(404, f"Raid not found: {raid_id}")
    service = RegistrationService(repo)
    roster = service.roster_composition(raid_id, statuses=status or (RegistrationStatus.ACCEPTED,))
    return roster.to_dict()


@router.patch("/registrations/{registration_id}")
def update_registration(request: Request, registration_id: str, body: RegistrationUpdateRequest):
    """Accept, decline or bench a signup and pick the character that plays."""
    service = RegistrationService(request.app.state.repository)
    try:
        registration = service.update_registration(
            registration_id,
            status=body.status,
            selected_character_id=body.selected_character_id,
        )
    except RegistrationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if registration is None:
        raise HTTPException(404, f"Registration not found: {registration_id}")
    return registration_to_dict(registration)


@router.get("/users")
def list_users(request: Request):
    return {"users": [user_to_dict(u) for u in request.app.state.repository.list_users()]}


@router.get("/users/{user_id}")
def get_user(request: Request, user_id: str):
    """A guild member with their characters."""
    repo = request.app.state.repository
    user = repo.get_user(user_id)
    if not user:
        raise HTTPException(404, f"User not found: {user_id}")
    return {
        **user_to_dict(user),
        "characters": [character_to_dict(c) for c in repo.get_characters_for_user(user_id)],
    }


@router.get("/users/{user_id}/registrations")
def list_user_registrations(request: Request, user_id: str):
    """All signups of a user."""
    repo = request.app.state.repository
    if not repo.get_user(user_id):
        raise HTTPException(404, f"User not found: {user_id}")
    registrations = repo.get_registrations_for_user(user_id)
    return {"user_id": user_id, "registrations": [registration_to_dict(r) for r in registrations]}
