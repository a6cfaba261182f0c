"""Weekly report delivery through the Resend email API."""

import logging

import httpx
from nanoid import generate

from app.errors import ConfigurationError, UpstreamError
from app.settings import settings

logger = logging.getLogger(__name__)

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


async def send_report(subject: str, html: str) -> dict:
    """Send the report, or log a simulated send when Resend is not configured.

    Returns:
        Response payload for the client. Simulated sends carry
        ``simulated=True`` and a local ``sim_`` id.

    Raises:
        ConfigurationError: An API key is set but no recipient is.
        UpstreamError: Resend rejected the request or could not be reached.
    """
    if not settings.resend_api_key:
        sim_id = f"sim_{generate(size=10, alphabet=ALPHABET)}"
        logger.info(
            "Email report would be sent id=%s subject=%r to=%s html_len=%d",
            sim_id,
            subject,
            settings.report_email_to or "Not configured",
            len(html),
        )
        return {
            "success": True,
            "simulated": True,
            "id": sim_id,
            "message": "Email API not configured. Use Print/PDF instead, or set RESEND_API_KEY.",
        }

    if not settings.report_email_to:
        raise ConfigurationError("REPORT_EMAIL_TO missing", public_message="REPORT_EMAIL_TO not configured")

    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {settings.resend_api_key}",
    }
    payload = {
        "from": settings.report_email_from,
        "to": settings.report_email_to,
        "subject": subject,
        "html": html,
    }
    try:
        async with httpx.AsyncClient() as client:
            r = await client.post(settings.resend_url, headers=headers, json=payload)
    except httpx.HTTPError as e:
        logger.error("Resend request failed: %s: %s", e.__class__.__name__, e)
        raise UpstreamError(f"Resend request failed: {e}", public_message="Failed to send email") from e

    try:
        data = r.json()
    except ValueError:
        data = {}

    if r.status_code >= 400:
        logger.error("Resend API error status=%s body=%s", r.status_code, r.text[:500])
        message = data.get("message") if isinstance(data, dict) else None
        raise UpstreamError(f"Resend returned {r.status_code}", public_message=message or "Failed to send email")

    return {
        "success": True,
        "id": data.get("id"),
        "message": f"Report sent to {settings.report_email_to}",
    }
