from datetime import date, timedelta

from app.models import Course, SchoolBreak, SchoolYear
from app.pacing import active_weekdays, count_weekdays, expected_lesson

# 2026-09-07 is a Monday
YEAR = SchoolYear(start_date=date(2026, 9, 7), end_date=date(2026, 9, 25))


def course(current: int, total: int = 100, active_days: str | None = None) -> Course:
    return Course(total_lessons=total, current_lesson=current, active_days=active_days)


def test_before_year_starts():
    m = expected_lesson(course(0), YEAR, [], date(2026, 9, 1))
    assert (m.expected_lesson, m.status, m.diff) == (1, "on-track", 0)


def test_weekdays_default():
    m = expected_lesson(course(5), YEAR, [], date(2026, 9, 13))
    assert (m.expected_lesson, m.status) == (5, "on-track")


def test_behind_and_ahead():
    assert expected_lesson(course(2), YEAR, [], date(2026, 9, 11)).status == "behind"
    ahead = expected_lesson(course(9), YEAR, [], date(2026, 9, 11))
    assert (ahead.status, ahead.diff) == ("ahead", 4)


def test_breaks_are_skipped():
    breaks = [SchoolBreak(start_date=date(2026, 9, 14), end_date=date(2026, 9, 18))]
    m = expected_lesson(course(5), YEAR, breaks, date(2026, 9, 20))
    assert m.expected_lesson == 5


def test_capped_by_year_end_and_total_lessons():
    assert expected_lesson(course(0), YEAR, [], date(2027, 1, 1)).expected_lesson == 15
    assert expected_lesson(course(0, total=10), YEAR, [], date(2027, 1, 1)).expected_lesson == 10


def test_active_days_parsing():
    assert active_weekdays("Mon, Wed,Fri") == {0, 2, 4}
    assert active_weekdays(None) == {0, 1, 2, 3, 4}


def test_overlapping_and_repeated_breaks_count_once():
    overlapping = [
        SchoolBreak(start_date=date(2026, 9, 14), end_date=date(2026, 9, 16)),
        SchoolBreak(start_date=date(2026, 9, 16), end_date=date(2026, 9, 18)),
    ]
    assert expected_lesson(course(0), YEAR, overlapping, date(2026, 9, 25)).expected_lesson == 10

    repeated = [SchoolBreak(start_date=date(2026, 9, 14), end_date=date(2026, 9, 18))] * 200
    assert expected_lesson(course(0), YEAR, repeated, date(2026, 9, 25)).expected_lesson == 10


def test_breaks_outside_year_are_ignored():
    breaks = [
        SchoolBreak(start_date=date(2026, 8, 1), end_date=date(2026, 9, 8)),
        SchoolBreak(start_date=date(2026, 9, 24), end_date=date(2026, 12, 31)),
    ]
    # Sep 7-8 and Sep 24-25 fall inside the clipped breaks
    assert expected_lesson(course(0), YEAR, breaks, date(2026, 12, 1)).expected_lesson == 11


def test_calendar_ending_on_max_date():
    # 0001-01-01 is a Monday; 3,652,059 days = 521,722 weeks + Mon..Fri
    year = SchoolYear(start_date=date.min, end_date=date.max)
    m = expected_lesson(course(0, total=10**7), year, [], date.max)
    assert m.expected_lesson == 521_722 * 5 + 5


def test_long_calendar_with_many_breaks():
    year = SchoolYear(start_date=date.min, end_date=date.max)
    # one full week off every year for 200 years, each removes five weekdays
    breaks = []
    for y in range(2000, 2200):
        monday = date(y, 1, 1) + timedelta(days=(7 - date(y, 1, 1).weekday()) % 7)
        breaks.append(SchoolBreak(start_date=monday, end_date=monday + timedelta(days=6)))
    m = expected_lesson(course(0, total=10**7), year, breaks, date.max)
    assert m.expected_lesson == 521_722 * 5 + 5 - 200 * 5


def test_count_weekdays():
    assert count_weekdays(date(2026, 9, 7), date(2026, 9, 13), {0, 2, 4}) == 3
    assert count_weekdays(date(2026, 9, 12), date(2026, 9, 13), {0, 1, 2, 3, 4}) == 0
    assert count_weekdays(date(2026, 9, 13), date(2026, 9, 7), {0}) == 0
