"""Package configuration using pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class HetuSettings(BaseSettings):
    """Runtime settings read from ``HETU_*`` environment variables."""

    model_config = {"env_prefix": "HETU_"}

    log_level: str = "WARNING"
    log_rejections: bool = True  # DEBUG record per rejected strict parse
