"""Calendar window selection - which appointments fall in a day, week or month.

Every function here is pure: the reference date is always passed in and no
clock is read. Appointments are duck-typed; anything with ``date`` and
``time`` attributes works (ORM rows, response schemas, plain records).
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Iterable, Sequence, TypeVar

from medoffice.errors import InvalidArgument

T = TypeVar("T")

DAYS_IN_WEEK = 7
GRID_CELLS = 42  # six Sunday-first weeks

# fromisoformat also takes basic and week-date forms on newer interpreters
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}(:[0-9]{2})?")


class Granularity(str, Enum):
    """Bucketing unit of a calendar view."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


def parse_granularity(value) -> Granularity:
    """Return the Granularity for ``value`` or raise InvalidArgument."""
    if isinstance(value, Granularity):
        return value
    try:
        return Granularity(value)
    except ValueError:
        raise InvalidArgument(
            f"Unknown granularity {value!r}; expected one of: day, week, month"
        ) from None


def parse_date(value) -> date:
    """Coerce a ``date`` or ISO ``YYYY-MM-DD`` string to a ``date``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and DATE_PATTERN.fullmatch(value):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise InvalidArgument(f"Malformed calendar date {value!r}; expected YYYY-MM-DD")


def parse_time(value) -> time:
    """Coerce a ``time`` or ``HH:MM`` / ``HH:MM:SS`` string to a ``time``."""
    if isinstance(value, time):
        return value
    if isinstance(value, str) and TIME_PATTERN.fullmatch(value):
        try:
            return time.fromisoformat(value)
        except ValueError:
            pass
    raise InvalidArgument(f"Malformed time {value!r}; expected HH:MM")


def weekday_index(day: date) -> int:
    """Sunday=0 .. Saturday=6."""
    return day.isoweekday() % 7


def week_start(day: date) -> date:
    """The Sunday on or before ``day``."""
    return day - timedelta(days=weekday_index(day))


def month_end(day: date) -> date:
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


@dataclass(frozen=True)
class ViewWindow:
    """A (reference date, granularity) pair and the dates it covers."""

    reference_date: date
    granularity: Granularity

    @classmethod
    def of(cls, reference_date, granularity) -> "ViewWindow":
        return cls(parse_date(reference_date), parse_granularity(granularity))

    @property
    def start(self) -> date:
        if self.granularity is Granularity.DAY:
            return self.reference_date
        if self.granularity is Granularity.WEEK:
            return week_start(self.reference_date)
        return self.reference_date.replace(day=1)

    @property
    def end(self) -> date:
        if self.granularity is Granularity.DAY:
            return self.reference_date
        if self.granularity is Granularity.WEEK:
            return self.start + timedelta(days=DAYS_IN_WEEK - 1)
        return month_end(self.reference_date)

    def contains(self, day: date) -> bool:
        if self.granularity is Granularity.DAY:
            return day == self.reference_date
        if self.granularity is Granularity.WEEK:
            return self.start <= day <= self.end
        return (day.year, day.month) == (self.reference_date.year, self.reference_date.month)

    @property
    def label(self) -> str:
        """Human-readable window label, e.g. ``January 2024``."""
        if self.granularity is Granularity.DAY:
            return format_long_date(self.reference_date)
        if self.granularity is Granularity.WEEK:
            return f"{format_long_date(self.start)} - {format_long_date(self.end)}"
        return f"{self.reference_date:%B} {self.reference_date.year}"


def format_long_date(day: date) -> str:
    """``December 21, 2024``."""
    return f"{day:%B} {day.day}, {day.year}"


def select_window(appointments: Iterable[T], reference_date, granularity) -> list[T]:
    """Return the appointments whose date falls in the given window.

    The result keeps input order; use ``sort_appointments`` when an ordered
    listing is needed. An unknown granularity or a malformed date raises
    ``InvalidArgument``.
    """
    window = ViewWindow.of(reference_date, granularity)
    return [appt for appt in appointments if window.contains(parse_date(appt.date))]


def sort_key(appointment) -> tuple[date, time]:
    return parse_date(appointment.date), parse_time(appointment.time)


def sort_appointments(appointments: Iterable[T]) -> list[T]:
    """Stable sort by date, then time."""
    return sorted(appointments, key=sort_key)


def select_sorted(appointments: Iterable[T], reference_date, granularity) -> list[T]:
    return sort_appointments(select_window(appointments, reference_date, granularity))


def shift(reference_date, granularity, steps: int = 1) -> date:
    """Move a reference date by ``steps`` days, weeks or months.

    Month steps keep the day of month, clamped to the target month's length
    (Jan 31 + 1 month is Feb 28/29).
    """
    day = parse_date(reference_date)
    unit = parse_granularity(granularity)
    if unit is Granularity.DAY:
        return day + timedelta(days=steps)
    if unit is Granularity.WEEK:
        return day + timedelta(weeks=steps)
    months = day.year * 12 + (day.month - 1) + steps
    year, month = divmod(months, 12)
    last = calendar.monthrange(year, month + 1)[1]
    return date(year, month + 1, min(day.day, last))


@dataclass(frozen=True)
class CalendarDay:
    """One cell of the month grid."""

    date: date
    is_current_month: bool
    is_today: bool
    appointments: Sequence


def month_grid(appointments: Iterable, reference_date, today=None) -> list[CalendarDay]:
    """Build the 42-cell Sunday-first grid for the month of ``reference_date``.

    ``today`` is optional and only marks the matching cell; it is ignored for
    cells outside the displayed month.
    """
    ref = parse_date(reference_date)
    today = parse_date(today) if today is not None else None
    first = ref.replace(day=1)
    start = week_start(first)

    by_day: dict[date, list] = {}
    for appt in sort_appointments(appointments):
        by_day.setdefault(parse_date(appt.date), []).append(appt)

    days = []
    for offset in range(GRID_CELLS):
        cell = start + timedelta(days=offset)
        in_month = (cell.year, cell.month) == (ref.year, ref.month)
        days.append(
            CalendarDay(
                date=cell,
                is_current_month=in_month,
                is_today=in_month and cell == today,
                appointments=tuple(by_day.get(cell, ())),
            )
        )
    return days
