from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the daily diet API."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("DAILY_DIET_DATA_ROOT") or data_root_default
        ).expanduser()
        self.db_path: Path = Path(
            os.environ.get("DAILY_DIET_DB_PATH") or (self.data_root / "daily_diet.db")
        ).expanduser()
        self.session_ttl_days: int = int(os.environ.get("DAILY_DIET_SESSION_TTL_DAYS") or "7")
        self.cookie_secure: bool = (os.environ.get("DAILY_DIET_COOKIE_SECURE") or "").strip() in {"1", "true", "True"}
        self.log_level: str = (os.environ.get("DAILY_DIET_LOG_LEVEL") or "INFO").upper()
        self.host: str = os.environ.get("DAILY_DIET_HOST") or "127.0.0.1"
        self.port_raw: str = os.environ.get("DAILY_DIET_PORT") or "8000"

        cors = os.environ.get("DAILY_DIET_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]

    @property
    def session_max_age(self) -> int:
        return int(self.session_ttl_days) * 24 * 60 * 60


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings()
