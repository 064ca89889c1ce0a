"""
conventions.settings
====================

Configuration for the demo driver.

Module‑level constants are read straight from the environment; the
:class:`Settings` model (pydantic‑settings) collects the values the demo
sections use and can also be fed from a ``.env`` file.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# ---------------------------------------------------------------------------
# Base directories
# ---------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent

# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("CONVENTIONS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Pydantic settings model
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Demo settings, loaded from ``CONVENTIONS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CONVENTIONS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(LOG_LEVEL, description="Root logger level for the CLI")
    log_format: str = Field(LOG_FORMAT, description="logging.basicConfig format string")
    demo_year: int = Field(2023, ge=2, le=9999, description="Year whose new‑year days off are listed")
    vacation_days: int = Field(10, ge=0, le=3650, description="Length of the vacation range in days")


# Initialize settings
settings = Settings()
