import logging
from datetime import date

from fastapi import APIRouter

from app.errors import ValidationError
from app.mailer import send_report
from app.models import LessonMapping, PacingRequest, SendReportRequest
from app.pacing import expected_lesson

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/send-report")
async def create_report(payload: SendReportRequest):
    if not payload.subject or not payload.html:
        raise ValidationError("Report subject or html missing", public_message="Missing subject or html body")

    logger.info("Sending weekly report week=%s..%s", payload.week_start, payload.week_end)
    return await send_report(payload.subject, payload.html)


@router.post("/pacing", response_model=LessonMapping)
def pacing(payload: PacingRequest):
    today = payload.today or date.today()
    return expected_lesson(payload.course, payload.school_year, payload.breaks, today)
