"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., LOG_LEVEL env var → Settings.LOG_LEVEL)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Both entry points (the console in cli/main.py and the HTTP app in api/main.py)
read from this object instead of hardcoding values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduler ───────────────────────────────────────────────
    AUTO_FILL_ON_VACANCY: bool = True   # dispatch next job right after block/done
    DEFAULT_OWNER: str = "Console User"  # owner recorded for console submissions

    # ── Console ─────────────────────────────────────────────────
    PROMPT: str = "Printer OS> "

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "WARNING"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton: import this everywhere
settings = Settings()
