import json
import logging
import re

from app.errors import ParseError

logger = logging.getLogger(__name__)

REQUIRED_LESSON_KEYS = ("title", "content", "interactive_data")

_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def parse_lesson(text: str) -> dict:
    # Models sometimes wrap JSON mode output in a markdown fence anyway
    body = (text or "").strip()
    m = _FENCE.match(body)
    if m:
        body = m.group(1)

    try:
        lesson = json.loads(body)
    except json.JSONDecodeError as e:
        logger.error("Lesson JSON decode failed: %s (snippet=%r)", e, body[:200])
        raise ParseError(f"Lesson JSON decode failed: {e}", public_message="Failed to generate spark")

    if not isinstance(lesson, dict):
        raise ParseError("Lesson payload is not a JSON object", public_message="Failed to generate spark")

    missing = [k for k in REQUIRED_LESSON_KEYS if k not in lesson]
    if missing:
        logger.error("Lesson payload missing keys: %s", ", ".join(missing))
        raise ParseError(f"Lesson payload missing keys: {missing}", public_message="Failed to generate spark")

    return lesson
