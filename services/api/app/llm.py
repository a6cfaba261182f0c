"""OpenRouter chat-completion calls for lesson generation and tutoring."""

import json
import logging
from typing import Any

import httpx

from app.errors import UpstreamError
from app.parse import parse_lesson
from app.settings import settings

logger = logging.getLogger(__name__)

LESSON_FAILURE = "Failed to generate spark"
TUTOR_FAILURE = "Failed to get response from tutor"


async def chat_completion(api_key: str, payload: dict, failure_message: str = UpstreamError.default_public_message) -> dict:
    """Send one chat-completion request and return the decoded response body.

    There is no retry and no explicit timeout beyond the httpx defaults.

    Args:
        api_key: OpenRouter API key.
        payload: Request body (model, messages and options).
        failure_message: Message exposed to the client if the call fails.

    Returns:
        The provider's JSON response.

    Raises:
        UpstreamError: Transport failure, non-2xx status, non-JSON body, or an
            ``error`` envelope.
    """
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
        "HTTP-Referer": settings.app_referer,
        "X-Title": settings.app_title,
    }
    try:
        async with httpx.AsyncClient() as client:
            r = await client.post(settings.openrouter_url, headers=headers, json=payload)
    except httpx.HTTPError as e:
        logger.error("OpenRouter request failed: %s: %s", e.__class__.__name__, e)
        raise UpstreamError(f"OpenRouter request failed: {e}", public_message=failure_message) from e

    if r.status_code >= 400:
        logger.error("OpenRouter error status=%s body=%s", r.status_code, r.text[:500])
        raise UpstreamError(f"OpenRouter returned {r.status_code}", public_message=failure_message)

    try:
        data = r.json()
    except json.JSONDecodeError:
        logger.error("OpenRouter returned non-JSON body: %s", r.text[:500])
        raise UpstreamError("OpenRouter returned non-JSON body", public_message=failure_message)

    if isinstance(data, dict) and data.get("error"):
        err = data["error"]
        detail = err.get("message") if isinstance(err, dict) else str(err)
        logger.error("OpenRouter error envelope: %s", detail)
        raise UpstreamError(detail or "OpenRouter API Error", public_message=failure_message)

    return data


def first_message_content(data: Any) -> str | None:
    """Pull the first choice's message content, or None if the envelope lacks it."""
    try:
        return data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None


async def generate_lesson(api_key: str, prompt: str) -> dict:
    payload = {
        "model": settings.lesson_model,
        "messages": [{"role": "user", "content": prompt}],
        "response_format": {"type": "json_object"},
    }
    data = await chat_completion(api_key, payload, failure_message=LESSON_FAILURE)
    content = first_message_content(data)
    if content is None:
        logger.error("Invalid OpenRouter response structure: %s", str(data)[:500])
        raise UpstreamError("Invalid API response structure", public_message=LESSON_FAILURE)
    return parse_lesson(content)


async def ask_tutor(api_key: str, messages: list[dict]) -> tuple[str, dict | None]:
    payload = {
        "model": settings.tutor_model,
        "messages": messages,
        "max_tokens": 500,
        "temperature": 0.7,
    }
    data = await chat_completion(api_key, payload, failure_message=TUTOR_FAILURE)
    message = first_message_content(data)
    if not message:
        raise UpstreamError("Empty model reply", public_message="Empty response from tutor")
    return message, data.get("usage")
