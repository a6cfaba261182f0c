from app.achievements import (
    ACHIEVEMENTS,
    achievements_by_category,
    check_achievement,
    earned_achievements,
    get_achievement,
)


def test_catalog_keys_unique():
    keys = [a.key for a in ACHIEVEMENTS]
    assert len(keys) == len(set(keys)) == 29


def test_threshold_is_inclusive():
    week_warrior = get_achievement("week_warrior")
    assert check_achievement(week_warrior, {"attendance_streak": 7})
    assert not check_achievement(week_warrior, {"attendance_streak": 6})


def test_missing_metric_counts_as_zero():
    assert not check_achievement(get_achievement("first_lesson"), {})


def test_unknown_key():
    assert get_achievement("no_such_badge") is None


def test_by_category():
    assert {a.category for a in achievements_by_category("consistency")} == {"consistency"}
    assert achievements_by_category("nope") == []


def test_earned_keeps_catalog_order():
    metrics = {"study_minutes": 600, "portfolio_items": 1}
    assert earned_achievements(metrics) == ["portfolio_starter", "hour_of_focus", "study_marathon"]
