"""FastAPI dependency injection."""

from __future__ import annotations

from ailab.config import Settings, settings


def get_settings() -> Settings:
    return settings
