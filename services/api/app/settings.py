"""Application configuration loaded from environment variables."""

from pydantic import BaseModel
import os


class Settings(BaseModel):
    """Typed settings with defaults for local development."""

    app_env: str = os.getenv("APP_ENV", "dev")
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    openrouter_api_key: str | None = os.getenv("VILLAGE_SPARK_OPENROUTER_KEY")
    openrouter_url: str = os.getenv("OPENROUTER_URL", "https://openrouter.ai/api/v1/chat/completions")
    lesson_model: str = os.getenv("LESSON_MODEL", "google/gemini-2.0-flash-001")
    tutor_model: str = os.getenv("TUTOR_MODEL", "google/gemini-2.0-flash-001")
    app_referer: str = os.getenv("APP_REFERER", "https://village.homeschool")
    app_title: str = os.getenv("APP_TITLE", "Village Homeschool")

    rate_limit_per_window: int = int(os.getenv("RATE_LIMIT_PER_WINDOW", "5"))
    rate_limit_window_ms: int = int(os.getenv("RATE_LIMIT_WINDOW_MS", "60000"))
    rate_limit_max_keys: int = int(os.getenv("RATE_LIMIT_MAX_KEYS", "10000"))

    resend_api_key: str | None = os.getenv("RESEND_API_KEY")
    resend_url: str = os.getenv("RESEND_URL", "https://api.resend.com/emails")
    report_email_to: str | None = os.getenv("REPORT_EMAIL_TO")
    report_email_from: str = os.getenv("REPORT_EMAIL_FROM", "noreply@village.homeschool")

    @property
    def cors_origins_list(self) -> list[str]:
        """Return CORS origins as a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
