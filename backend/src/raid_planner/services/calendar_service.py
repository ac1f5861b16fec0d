"""Monday-aligned calendar weeks and per-day raid buckets."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, tzinfo
from typing import Iterable

from raid_planner.models.raid import Difficulty, Raid, RaidStatus
from raid_planner.utils.timeutils import local_date, now as local_now, to_local

DAYS_PER_WEEK = 7

DAY_LABELS = ("Lun", "Mar", "Mer", "Jeu", "Ven", "Sam", "Dim")

MONTH_NAMES = (
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
)


def week_start(reference: date) -> date:
    """Monday on or before `reference` (Sunday closes the week)."""
    return reference - timedelta(days=reference.weekday())


def week_dates(reference: date) -> list[date]:
    """The seven days of the week containing `reference`, Monday first."""
    start = week_start(reference)
    return [start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]


@dataclass(frozen=True)
class CalendarWeek:
    """A navigable calendar week anchored on a reference day."""

    reference: date

    @classmethod
    def current(cls, tz: tzinfo) -> "CalendarWeek":
        """The week containing today in the viewer's timezone."""
        return cls(local_now(tz).date())

    @property
    def start(self) -> date:
        return week_start(self.reference)

    @property
    def end(self) -> date:
        return self.start + timedelta(days=DAYS_PER_WEEK - 1)

    @property
    def dates(self) -> list[date]:
        return week_dates(self.reference)

    def next_week(self) -> "CalendarWeek":
        return CalendarWeek(self.reference + timedelta(days=DAYS_PER_WEEK))

    def previous_week(self) -> "CalendarWeek":
        return CalendarWeek(self.reference - timedelta(days=DAYS_PER_WEEK))

    def shifted(self, weeks: int) -> "CalendarWeek":
        """Move by a whole number of weeks (negative goes back)."""
        return CalendarWeek(self.reference + timedelta(days=DAYS_PER_WEEK * weeks))

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    @property
    def label(self) -> str:
        """Month label, e.g. "août 2025" or "août - septembre 2025"."""
        start_month = MONTH_NAMES[self.start.month - 1]
        end_month = MONTH_NAMES[self.end.month - 1]
        if start_month == end_month:
            return f"{start_month} {self.start.year}"
        return f"{start_month} - {end_month} {self.start.year}"

    @property
    def title(self) -> str:
        return f"Semaine du {self.start.day}-{self.end.day} {self.label}"


@dataclass
class DayBucket:
    """Raids falling on one calendar day, in collection order."""

    day: date
    label: str
    raids: list[Raid] = field(default_factory=list)

    def by_time(self) -> list[Raid]:
        """Raids of the day sorted by start time."""
        return sorted(self.raids, key=lambda raid: raid.date)


@dataclass
class WeekView:
    """A calendar week with its seven day buckets."""

    week: CalendarWeek
    days: list[DayBucket]

    def agenda(self) -> list[Raid]:
        """Every raid of the week, earliest first."""
        raids = [raid for bucket in self.days for raid in bucket.raids]
        return sorted(raids, key=lambda raid: raid.date)

    @property
    def raid_count(self) -> int:
        return sum(len(bucket.raids) for bucket in self.days)


def bucket_week(week: CalendarWeek, raids: Iterable[Raid], tz: tzinfo) -> WeekView:
    """Group raids into the seven days of `week`.

    A raid is placed by its start date in the viewer's timezone; time of
    day is ignored. Raids outside the week are dropped.
    """
    buckets = [
        DayBucket(day=day, label=DAY_LABELS[index])
        for index, day in enumerate(week.dates)
    ]
    by_day = {bucket.day: bucket for bucket in buckets}

    for raid in raids:
        bucket = by_day.get(local_date(raid.date, tz))
        if bucket is not None:
            bucket.raids.append(raid)

    return WeekView(week=week, days=buckets)


def is_today(day: date, tz: tzinfo) -> bool:
    return day == local_now(tz).date()


def calendar_stats(raids: Iterable[Raid], now: datetime) -> dict[str, int]:
    """Summary counters shown next to the calendar.

    `upcoming_week` counts raids starting within seven days of `now`.
    """
    raids = list(raids)
    horizon = now + timedelta(days=DAYS_PER_WEEK)
    return {
        "total": len(raids),
        "open": sum(1 for raid in raids if raid.status == RaidStatus.OPEN),
        "upcoming_week": sum(1 for raid in raids if now <= raid.date <= horizon),
        "mythic": sum(1 for raid in raids if raid.difficulty == Difficulty.MYTHIC),
    }


def format_time(raid: Raid, tz: tzinfo) -> str:
    """Local start time as HH:MM."""
    return to_local(raid.date, tz).strftime("%H:%M")
