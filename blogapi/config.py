from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env if present
ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


def _engine_options() -> dict:
    schema = os.getenv("DB_SCHEMA")
    if not schema:
        return {"pool_pre_ping": True}
    return {
        "pool_pre_ping": True,
        "connect_args": {"options": f"-c search_path={schema}"},
    }


class Config:
    SECRET_KEY: str = os.getenv("SECRET_KEY", os.urandom(32).hex())

    # Database
    # Read from environment and then unset for security
    SQLALCHEMY_DATABASE_URI: str = os.environ.pop("DATABASE_URL", "sqlite:///blog.db")
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options()

    # JSON bodies only; blogs are text
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(1024 * 1024)))

    # Rate limiting
    RATELIMIT_ENABLED = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "100 per minute")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")

    # Message catalog overrides, keyed by message id
    MESSAGES: dict[str, str] = {}

    # Security headers
    SECURITY_CSP = "default-src 'none'; frame-ancestors 'none'"
    SECURITY_HSTS_SECONDS = 31536000

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Flask env
    ENV = os.getenv("FLASK_ENV", "production")
    DEBUG = ENV != "production"
