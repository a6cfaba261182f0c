"""Achievement catalog and the threshold checks that award badges."""

from dataclasses import asdict, dataclass
from typing import Literal, Mapping

Category = Literal["learning", "consistency", "mastery", "milestone"]
Tier = Literal["bronze", "silver", "gold", "platinum"]
RequirementType = Literal["count", "streak", "score", "completion"]


@dataclass(frozen=True)
class Requirement:
    type: RequirementType
    metric: str
    value: float


@dataclass(frozen=True)
class Achievement:
    key: str
    name: str
    description: str
    category: Category
    tier: Tier
    requirement: Requirement

    def to_dict(self) -> dict:
        return asdict(self)


def _a(key, name, description, category, tier, type_, metric, value) -> Achievement:
    return Achievement(key, name, description, category, tier, Requirement(type_, metric, value))


ACHIEVEMENTS: list[Achievement] = [
    # learning
    _a("first_lesson", "First Steps", "Complete your very first lesson", "learning", "bronze", "count", "lessons_completed", 1),
    _a("lesson_explorer", "Lesson Explorer", "Complete 10 lessons", "learning", "bronze", "count", "lessons_completed", 10),
    _a("lesson_adventurer", "Lesson Adventurer", "Complete 50 lessons", "learning", "silver", "count", "lessons_completed", 50),
    _a("lesson_master", "Lesson Master", "Complete 100 lessons", "learning", "gold", "count", "lessons_completed", 100),
    _a("course_champion", "Course Champion", "Finish your first complete course", "learning", "silver", "count", "courses_completed", 1),
    _a("rising_star", "Rising Star", "Complete 5 courses", "learning", "gold", "count", "courses_completed", 5),
    _a("diamond_scholar", "Diamond Scholar", "Complete 10 courses", "learning", "platinum", "count", "courses_completed", 10),
    # consistency
    _a("attendance_starter", "Showing Up", "Log your first day of attendance", "consistency", "bronze", "count", "attendance_days", 1),
    _a("week_warrior", "Week Warrior", "7-day attendance streak", "consistency", "bronze", "streak", "attendance_streak", 7),
    _a("month_champion", "Month Champion", "30-day attendance streak", "consistency", "silver", "streak", "attendance_streak", 30),
    _a("century_student", "Century Student", "Log 100 days of attendance", "consistency", "gold", "count", "attendance_days", 100),
    _a("bookworm_starter", "Bookworm", "Read for 7 days in a row", "consistency", "bronze", "streak", "reading_streak", 7),
    _a("bibliophile", "Bibliophile", "Read for 30 days in a row", "consistency", "silver", "streak", "reading_streak", 30),
    _a("focus_beginner", "Getting Focused", "Complete your first study session", "consistency", "bronze", "count", "study_sessions", 1),
    _a("focus_master", "Focus Master", "Complete 10 study timer sessions", "consistency", "silver", "count", "study_sessions", 10),
    _a("study_champion", "Study Champion", "Complete 50 study timer sessions", "consistency", "gold", "count", "study_sessions", 50),
    # mastery
    _a("perfect_score", "Perfect Score", "Get 100% on an assignment", "mastery", "silver", "score", "perfect_assignments", 1),
    _a("triple_perfect", "Triple Perfect", "Get 100% on 3 assignments", "mastery", "gold", "score", "perfect_assignments", 3),
    _a("perfectionist", "Perfectionist", "Get 100% on 10 assignments", "mastery", "platinum", "score", "perfect_assignments", 10),
    _a("a_student", "A Student", "Maintain an A average (90%+) across 10 assignments", "mastery", "gold", "score", "a_average_count", 10),
    # milestone
    _a("assignment_starter", "Assignment Starter", "Complete your first assignment", "milestone", "bronze", "count", "assignments_completed", 1),
    _a("assignment_pro", "Assignment Pro", "Complete 25 assignments", "milestone", "silver", "count", "assignments_completed", 25),
    _a("assignment_legend", "Assignment Legend", "Complete 100 assignments", "milestone", "gold", "count", "assignments_completed", 100),
    _a("portfolio_starter", "Portfolio Starter", "Add your first portfolio item", "milestone", "bronze", "count", "portfolio_items", 1),
    _a("portfolio_collector", "Portfolio Collector", "Add 10 portfolio items", "milestone", "silver", "count", "portfolio_items", 10),
    _a("portfolio_curator", "Portfolio Curator", "Add 25 portfolio items", "milestone", "gold", "count", "portfolio_items", 25),
    _a("hour_of_focus", "Hour of Focus", "Accumulate 1 hour of study time", "milestone", "bronze", "count", "study_minutes", 60),
    _a("study_marathon", "Study Marathon", "Accumulate 10 hours of study time", "milestone", "silver", "count", "study_minutes", 600),
    _a("study_olympian", "Study Olympian", "Accumulate 50 hours of study time", "milestone", "gold", "count", "study_minutes", 3000),
]


def get_achievement(key: str) -> Achievement | None:
    return next((a for a in ACHIEVEMENTS if a.key == key), None)


def achievements_by_category(category: str) -> list[Achievement]:
    return [a for a in ACHIEVEMENTS if a.category == category]


def check_achievement(achievement: Achievement, metrics: Mapping[str, float]) -> bool:
    # Every requirement type is a ">= threshold" check; absent metrics count as 0
    return (metrics.get(achievement.requirement.metric) or 0) >= achievement.requirement.value


def earned_achievements(metrics: Mapping[str, float], category: str | None = None) -> list[str]:
    candidates = achievements_by_category(category) if category else ACHIEVEMENTS
    return [a.key for a in candidates if check_achievement(a, metrics)]
