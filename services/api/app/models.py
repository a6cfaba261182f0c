from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

QuestionType = Literal["multiple-choice", "reflection"]
PacingStatus = Literal["ahead", "behind", "on-track"]


class CamelModel(BaseModel):
    # The web client sends ids and grades as numbers or strings
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class GenerateLessonRequest(CamelModel):
    # Loosely typed on purpose: missing fields are reported as a 400 by the handler
    child_id: str | None = Field(None, alias="childId")
    subject: str | None = None
    course_name: str | None = Field(None, alias="courseName")
    grade_level: str | None = Field(None, alias="gradeLevel")


class Resource(BaseModel):
    label: str
    url: str


class LessonContent(BaseModel):
    hook: str
    activity: str | None = None
    resources: list[Resource] = []


class Question(BaseModel):
    id: str
    text: str
    type: QuestionType
    options: list[str] | None = None
    answer: str | None = None


class InteractiveData(BaseModel):
    questions: list[Question] = []


class Lesson(BaseModel):
    title: str
    grade_level: str | None = None
    subject: str | None = None
    type: str | None = None
    content: LessonContent
    interactive_data: InteractiveData


class GradeRequest(BaseModel):
    lesson: Lesson
    answers: dict[str, str] = {}


class GradeResult(BaseModel):
    score: float
    correct: int
    total: int
    feedback: str


class TutorMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class TutorRequest(CamelModel):
    messages: list[TutorMessage] = []
    student_name: str | None = Field(None, alias="studentName")
    grade_level: str | None = Field(None, alias="gradeLevel")
    subject: str | None = None


class TutorReply(BaseModel):
    message: str
    usage: dict | None = None


class SendReportRequest(CamelModel):
    subject: str | None = None
    html: str | None = None
    week_start: str | None = Field(None, alias="weekStart")
    week_end: str | None = Field(None, alias="weekEnd")


class Course(CamelModel):
    name: str | None = None
    total_lessons: int = Field(..., alias="totalLessons")
    current_lesson: int = Field(0, alias="currentLesson")
    active_days: str | None = Field(None, alias="activeDays")


class SchoolYear(CamelModel):
    name: str | None = None
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")


class SchoolBreak(CamelModel):
    name: str | None = None
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")


class PacingRequest(CamelModel):
    course: Course
    school_year: SchoolYear = Field(..., alias="schoolYear")
    breaks: list[SchoolBreak] = []
    today: date | None = None


class LessonMapping(BaseModel):
    expected_lesson: int
    status: PacingStatus
    diff: int


class EvaluateAchievementsRequest(BaseModel):
    metrics: dict[str, float] = {}
    category: Literal["learning", "consistency", "mastery", "milestone"] | None = None


class EvaluateAchievementsResult(BaseModel):
    earned: list[str]
