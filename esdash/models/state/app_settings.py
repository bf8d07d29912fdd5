"""Application settings models."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from esdash.constants.defaults import (
    AUTO_LOAD_ON_SELECT_DEFAULT,
    BASE_URL_DEFAULT,
    BASE_URL_ENV_VAR,
    FETCH_WORKERS_DEFAULT,
    PAGE_SIZE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from esdash.constants.limits import (
    FETCH_WORKERS_MAX,
    FETCH_WORKERS_MIN,
    PAGE_SIZE_MAX,
    PAGE_SIZE_MIN,
    REFRESH_INTERVAL_MIN,
    REQUEST_TIMEOUT_MIN,
)
from esdash.constants.timeouts import REQUEST_TIMEOUT


class AppSettings(BaseModel):
    """Application settings model with validation.

    Settings are loaded once at startup and never change while the
    dashboard runs.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Cluster
    base_url: str = BASE_URL_DEFAULT
    request_timeout: float = Field(default=REQUEST_TIMEOUT, ge=REQUEST_TIMEOUT_MIN)

    # Refresh
    refresh_interval: float = Field(default=REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN)
    page_size: int = Field(default=PAGE_SIZE_DEFAULT, ge=PAGE_SIZE_MIN, le=PAGE_SIZE_MAX)
    auto_load_on_select: bool = AUTO_LOAD_ON_SELECT_DEFAULT
    fetch_workers: int = Field(
        default=FETCH_WORKERS_DEFAULT, ge=FETCH_WORKERS_MIN, le=FETCH_WORKERS_MAX
    )

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        normalized = value.strip().rstrip("/")
        if not normalized:
            raise ValueError("base URL must not be empty")
        if not normalized.startswith(("http://", "https://")):
            raise ValueError(f"base URL must start with http:// or https://, got {value!r}")
        return normalized

    @classmethod
    def load(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> AppSettings:
        """Build settings from defaults, the environment and explicit overrides.

        Explicit overrides win over the environment; ``None`` overrides are
        ignored so CLI options left unset fall through.

        Raises:
            ConfigError: If any value fails validation.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        env_url = env.get(BASE_URL_ENV_VAR)
        if env_url:
            values["base_url"] = env_url
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return cls(**values)
        except ValidationError as err:
            raise ConfigError(str(err)) from err


class ConfigError(Exception):
    """Raised when settings fail validation."""
