import logging

from fastapi import APIRouter, Depends, Request

from app.errors import ConfigurationError, RateLimitError, ValidationError
from app.grading import grade_lesson
from app.llm import generate_lesson
from app.models import GenerateLessonRequest, GradeRequest, GradeResult
from app.prompts import build_lesson_prompt
from app.ratelimit import RateLimiter, get_lesson_limiter
from app.settings import settings
from app.utils import resolve_client_key

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate-spark")
@router.post("/ai-spark", include_in_schema=False)
async def create_spark(
    payload: GenerateLessonRequest,
    request: Request,
    limiter: RateLimiter = Depends(get_lesson_limiter),
):
    client_key = resolve_client_key(request.headers)
    if not limiter.admit(client_key):
        logger.info("Lesson generation rate limited for client=%s", client_key)
        raise RateLimitError(f"Rate limit exceeded for {client_key}")

    if not payload.child_id or not payload.subject:
        raise ValidationError("childId and subject are required")

    if not settings.openrouter_api_key:
        raise ConfigurationError("VILLAGE_SPARK_OPENROUTER_KEY is not set")

    prompt = build_lesson_prompt(payload.subject, payload.course_name, payload.grade_level)
    lesson = await generate_lesson(settings.openrouter_api_key, prompt)
    logger.info("Generated lesson for child=%s subject=%s", payload.child_id, payload.subject)
    return lesson


@router.post("/lessons/grade", response_model=GradeResult)
def grade(payload: GradeRequest):
    return grade_lesson(payload.lesson, payload.answers)
