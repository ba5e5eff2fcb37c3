"""Application configuration.

Environment variables override all defaults.
The knowledge tables are compiled into the service; only runtime knobs live here.
"""

import os
from pathlib import Path
from typing import List


# Load .env for local development (safe no-op if not installed)
try:
    from dotenv import load_dotenv  # type: ignore

    _BACKEND_DIR = Path(__file__).resolve().parents[2]
    load_dotenv(dotenv_path=_BACKEND_DIR / ".env", override=False)
except ImportError:
    pass


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Medicine catalog. In-memory SQLite by default: nothing survives a restart.
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite://")

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = ENVIRONMENT == "development"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Server (run_server.py)
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))
    RELOAD: bool = _env_bool("RELOAD", "false")  # only honoured in development

    # Recommendation engine: cap applied AFTER ranking. 0 disables the cap.
    RECOMMENDATION_LIMIT: int = int(os.getenv("RECOMMENDATION_LIMIT", "20"))

    # Notification dispatcher (bounded worker pool, fire-and-forget)
    NOTIFICATION_WORKERS: int = int(os.getenv("NOTIFICATION_WORKERS", "5"))
    NOTIFICATION_SHUTDOWN_WAIT: bool = _env_bool("NOTIFICATION_SHUTDOWN_WAIT", "true")

    # Who gets told when triage flags a critical symptom. Empty disables it.
    ESCALATION_CONTACT: str = os.getenv("ESCALATION_CONTACT", "")

    # CORS (explicit origins only, no wildcards)
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]


settings = Settings()
