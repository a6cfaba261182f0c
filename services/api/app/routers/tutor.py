from fastapi import APIRouter

from app.errors import ConfigurationError, ValidationError
from app.llm import ask_tutor
from app.models import TutorReply, TutorRequest
from app.prompts import build_tutor_messages, build_tutor_system_prompt
from app.settings import settings

router = APIRouter()


@router.post("/tutor", response_model=TutorReply)
async def tutor(payload: TutorRequest):
    if not settings.openrouter_api_key:
        raise ConfigurationError("VILLAGE_SPARK_OPENROUTER_KEY is not set", public_message="Tutor service not configured")

    if not payload.messages:
        raise ValidationError("Empty conversation", public_message="No messages provided")

    system_prompt = build_tutor_system_prompt(payload.student_name, payload.grade_level, payload.subject)
    history = [m.model_dump() for m in payload.messages]
    message, usage = await ask_tutor(settings.openrouter_api_key, build_tutor_messages(system_prompt, history))
    return TutorReply(message=message, usage=usage)
