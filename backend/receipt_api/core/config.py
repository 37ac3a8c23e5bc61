"""Configuration management.

This module defines a ``Settings`` class that reads configuration
values from environment variables and provides sensible defaults.
``.env`` support is implemented by loading files from the repository
root first and then whatever python-dotenv discovers from the current
working directory.  You can override any value via environment variables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from dotenv import load_dotenv, find_dotenv

# -----------------------------------------------------------------------------
# .env loading
#
# Files are loaded in order without overriding already-set variables.

_THIS_FILE = Path(__file__).resolve()
_REPO_ROOT = _THIS_FILE.parents[3]
_ROOT_ENV = _REPO_ROOT / ".env"

_candidate_envs: list[str] = []
if _ROOT_ENV.exists():
    _candidate_envs.append(str(_ROOT_ENV))

_FOUND_ENV = find_dotenv(usecwd=True)
if _FOUND_ENV and _FOUND_ENV not in _candidate_envs:
    _candidate_envs.append(_FOUND_ENV)

for _env_path in _candidate_envs:
    load_dotenv(dotenv_path=_env_path, override=False)


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from the environment with sensible defaults.  Any
    attribute defined here can be overridden by setting the corresponding
    environment variable.  List values are given as JSON arrays, e.g.
    ``CORS_ALLOW_METHODS='["GET", "POST", "DELETE"]'``.
    """

    model_config = SettingsConfigDict(
        env_file=tuple(_candidate_envs) if _candidate_envs else (".env",),
        case_sensitive=True,
        extra="ignore",
    )

    # API Settings
    PROJECT_NAME: str = "Receipt API"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = Field(default="development")
    API_PREFIX: str = Field(default="/api")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # CORS
    CORS_ALLOW_ORIGINS: list[str] = Field(default=["*"])
    CORS_ALLOW_METHODS: list[str] = Field(default=["GET", "POST", "OPTIONS"])
    CORS_ALLOW_HEADERS: list[str] = Field(default=["Content-Type"])

    # Sentry
    SENTRY_DSN: Optional[str] = Field(default=None)
    SENTRY_TRACES_SAMPLE_RATE: float = Field(default=0.0)
    # Optional release name to tag events consistently with the frontend
    SENTRY_RELEASE: Optional[str] = Field(default=None)


# Instantiate global settings
settings = Settings()
