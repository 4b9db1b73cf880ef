"""Maintainer reference fetch configuration values."""

from __future__ import annotations

from typing import Final

from refroster import __version__

from .env import optional_env_var, positive_float_env, positive_int_env
from .http_resilience import (
    DEFAULT_MAX_BODY_BYTES,
    DEFAULT_TIMEOUT_SECONDS,
    FetchConfig,
    RateLimit,
)

TIMEOUT_ENV: Final[str] = "REFROSTER_FETCH_TIMEOUT_SECONDS"
MAX_BODY_ENV: Final[str] = "REFROSTER_MAX_BODY_BYTES"
USER_AGENT_ENV: Final[str] = "REFROSTER_USER_AGENT"
DEFAULT_USER_AGENT: Final[str] = f"refroster/{__version__}"


def get_fetch_config(*, ratelimit: RateLimit | None = None) -> FetchConfig:
    """Build the reference fetch configuration, honouring environment overrides."""

    user_agent = optional_env_var(USER_AGENT_ENV) or DEFAULT_USER_AGENT
    return FetchConfig(
        name="maintainer-ref",
        timeout_seconds=positive_float_env(TIMEOUT_ENV, DEFAULT_TIMEOUT_SECONDS),
        max_body_bytes=positive_int_env(MAX_BODY_ENV, DEFAULT_MAX_BODY_BYTES),
        ratelimit=ratelimit,
        default_headers={"User-Agent": user_agent},
    )
