# api/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    eligibility_url: str  # vazio = verificacao de elegibilidade desligada
    eligibility_timeout: float
    session_default_minutes: int
    log_level: str
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        eligibility_url=os.environ.get("ELIGIBILITY_URL", "").rstrip("/"),
        eligibility_timeout=float(os.environ.get("ELIGIBILITY_TIMEOUT", "5.0")),
        session_default_minutes=int(os.environ.get("SESSION_DEFAULT_MINUTES", "1")),
        log_level=os.environ.get("API_LOG_LEVEL", "INFO").upper(),
        debug=os.environ.get("API_DEBUG", "false").lower() == "true",
    )
