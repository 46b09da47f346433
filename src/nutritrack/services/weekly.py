"""Weekly calorie aggregation."""

from bisect import bisect_right
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Protocol

from nutritrack.domain.records import DayCalories, FoodLogEntry
from nutritrack.services.clock import Clock
from nutritrack.services.validation import require_email

DAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class WeeklyFoodLogSource(Protocol):
    """Read access to food logs within a time range."""

    def list_between(
        self, email: str, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return food logs with start <= timestamp <= end."""


@dataclass
class WeeklyCaloriesService:
    """Computes per-day calorie totals for the current Sunday-first week."""

    repository: WeeklyFoodLogSource
    clock: Clock

    def get_week(self, email: str | None) -> list[DayCalories]:
        """Return seven Sunday-to-Saturday totals, zero-filled."""
        owner = require_email(email)
        boundaries = day_boundaries(self.clock.now())
        start, end = boundaries[0], boundaries[-1] - timedelta(milliseconds=1)
        logs = self.repository.list_between(owner, start, end)
        totals = _group_by_day(logs, boundaries)
        return [
            DayCalories(day=label, calories=totals.get(index, 0.0))
            for index, label in enumerate(DAY_LABELS)
        ]


def week_window(now: datetime) -> tuple[datetime, datetime]:
    """Return the inclusive bounds of the calendar week containing now.

    The week starts on Sunday at midnight and ends on the following Saturday
    at 23:59:59.999, both as local wall-clock times.
    """
    boundaries = day_boundaries(now)
    return boundaries[0], boundaries[-1] - timedelta(milliseconds=1)


def day_boundaries(now: datetime) -> list[datetime]:
    """Return the eight local midnights from this week's Sunday to the next."""
    sunday = now.date() - timedelta(days=day_index(now))
    return [
        local_midnight(sunday + timedelta(days=offset), now.tzinfo)
        for offset in range(8)
    ]


def local_midnight(day: date, zone: tzinfo | None) -> datetime:
    """Return midnight of a calendar day under the zone's offset rules.

    A fixed-offset zone carries no daylight-saving rules, so it is treated as
    server-local time and the offset is resolved again for that day.
    """
    midnight = datetime.combine(day, time.min)
    if zone is None or isinstance(zone, timezone):
        return midnight.astimezone()
    return midnight.replace(tzinfo=zone)


def day_index(moment: datetime) -> int:
    """Return the Sunday-first day-of-week index (Sunday is 0)."""
    return (moment.weekday() + 1) % 7


def calorie_amount(value: object) -> float:
    """Return a stored calorie value as a number, or 0 when it is not numeric."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return 0.0
    return 0.0


def _group_by_day(
    logs: list[FoodLogEntry], boundaries: list[datetime]
) -> dict[int, float]:
    totals: dict[int, float] = {}
    for log in logs:
        index = bisect_right(boundaries, log.timestamp) - 1
        if not 0 <= index < len(DAY_LABELS):
            continue
        totals[index] = totals.get(index, 0.0) + calorie_amount(log.calories)
    return totals
