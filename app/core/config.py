# backend/app/core/config.py
import os
import secrets
import logging

try:
    from dotenv import load_dotenv, find_dotenv
    load_dotenv(find_dotenv())
except ImportError:
    pass

logger = logging.getLogger(__name__)

DEFAULT_CRISIS_HOTLINES = (
    "988 Suicide & Crisis Lifeline|Call or text 988;"
    "Crisis Text Line|Text HOME to 741741;"
    "Emergency services|Call 911"
)


def parse_hotlines(raw: str) -> list[dict]:
    """`name|contact;name|contact` -> [{"name": ..., "contact": ...}]"""
    out = []
    for item in (raw or "").split(";"):
        item = item.strip()
        if not item:
            continue
        name, _, contact = item.partition("|")
        out.append({"name": name.strip(), "contact": contact.strip()})
    return out


class Settings:
    # JWT_SECRET is mandatory outside development
    JWT_SECRET = os.getenv("JWT_SECRET")

    if not JWT_SECRET:
        if os.getenv("ENV") == "development":
            JWT_SECRET = secrets.token_urlsafe(32)
            logger.warning("JWT_SECRET not set, using a temporary secret")
        else:
            raise RuntimeError("JWT_SECRET environment variable is not set")

    JWT_ALG = "HS256"
    JWT_EXPIRE_MINUTES = int(os.getenv("JWT_EXPIRE_MINUTES", "10080"))
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./app.db")
    ALLOWED_ORIGINS = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:5173,http://localhost:3000",
    )
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
    if not OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY not set, chat replies will use the fallback")

    # local day boundary for meditation streaks
    APP_TZ_OFFSET_HOURS = float(os.getenv("APP_TZ_OFFSET_HOURS", "0"))

    CRISIS_HOTLINES = parse_hotlines(os.getenv("CRISIS_HOTLINES", DEFAULT_CRISIS_HOTLINES))


settings = Settings()
