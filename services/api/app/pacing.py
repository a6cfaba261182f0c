"""Where a course should be today, given the school calendar."""

from datetime import date
from typing import Iterable

from app.models import Course, LessonMapping, SchoolBreak, SchoolYear

DEFAULT_ACTIVE_DAYS = ["Mon", "Tue", "Wed", "Thu", "Fri"]
WEEKDAYS = {"Mon": 0, "Tue": 1, "Wed": 2, "Thu": 3, "Fri": 4, "Sat": 5, "Sun": 6}


def active_weekdays(active_days: str | None) -> set[int]:
    names = [d.strip() for d in active_days.split(",")] if active_days else DEFAULT_ACTIVE_DAYS
    return {WEEKDAYS[n] for n in names if n in WEEKDAYS}


def count_weekdays(start: date, end: date, weekdays: set[int]) -> int:
    """Count days in ``start..end`` (inclusive) whose weekday is in ``weekdays``."""
    if end < start:
        return 0
    weeks, rest = divmod((end - start).days + 1, 7)
    first = start.weekday()
    return weeks * len(weekdays) + sum(1 for i in range(rest) if (first + i) % 7 in weekdays)


def merged_breaks(breaks: Iterable[SchoolBreak], start: date, end: date) -> list[tuple[date, date]]:
    """Clip breaks to ``start..end`` and merge overlapping or adjacent ones."""
    spans = sorted(
        (max(b.start_date, start), min(b.end_date, end))
        for b in breaks
        if b.start_date <= end and b.end_date >= start and b.start_date <= b.end_date
    )
    merged: list[tuple[date, date]] = []
    for lo, hi in spans:
        if merged and (lo - merged[-1][1]).days <= 1:
            if hi > merged[-1][1]:
                merged[-1] = (merged[-1][0], hi)
        else:
            merged.append((lo, hi))
    return merged


def expected_lesson(course: Course, school_year: SchoolYear, breaks: list[SchoolBreak], today: date) -> LessonMapping:
    """Compare the course's current lesson with the number of school days so far.

    School days are the course's active weekdays from the year start through
    today (or the year end, if earlier), excluding break days. Before the year
    starts every course is on track at lesson 1.
    """
    if today < school_year.start_date:
        return LessonMapping(expected_lesson=1, status="on-track", diff=0)

    weekdays = active_weekdays(course.active_days)
    start = school_year.start_date
    limit = min(today, school_year.end_date)

    school_days = count_weekdays(start, limit, weekdays)
    for lo, hi in merged_breaks(breaks, start, limit):
        school_days -= count_weekdays(lo, hi, weekdays)

    expected = min(school_days, course.total_lessons)
    diff = course.current_lesson - expected
    status = "ahead" if diff > 0 else "behind" if diff < 0 else "on-track"
    return LessonMapping(expected_lesson=expected, status=status, diff=abs(diff))
