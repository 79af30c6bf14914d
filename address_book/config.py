#!/usr/bin/env python3
"""
Settings for the address book, read from the environment (.env supported).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv  # It loads environment variables from a .env file into the environment.

# -----------------------------------------------------------------------------
# Load settings from .env (one directory above this file)
# -----------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
# Project root (the folder that holds address_book/ and api_server.py).
load_dotenv(BASE_DIR / ".env")

DEFAULT_API_URL = "https://randomuser.me/api/"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    # Unset or empty means "no timeout": a stalled request waits forever, like a browser fetch.
    if raw is None or not raw.strip():
        return None
    value = float(raw)
    if value <= 0:
        raise ValueError(f"ADDRESS_BOOK_HTTP_TIMEOUT must be positive, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    http_timeout: Optional[float] = None
    base_dir: Path = BASE_DIR
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_url=os.getenv("RANDOMUSER_API_URL", DEFAULT_API_URL),
            http_timeout=_parse_timeout(os.getenv("ADDRESS_BOOK_HTTP_TIMEOUT")),
            base_dir=Path(os.getenv("ADDRESS_BOOK_DATA_DIR", str(BASE_DIR))),
            log_level=os.getenv("ADDRESS_BOOK_LOG_LEVEL", "INFO").upper(),
        )
