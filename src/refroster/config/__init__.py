"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, positive_float_env, positive_int_env
from .errors import ConfigurationError
from .http_resilience import DEFAULT_MAX_BODY_BYTES, DEFAULT_TIMEOUT_SECONDS, FetchConfig, RateLimit
from .logging import configure_logging
from .reference import get_fetch_config

__all__ = [
    "DEFAULT_MAX_BODY_BYTES",
    "DEFAULT_TIMEOUT_SECONDS",
    "ConfigurationError",
    "FetchConfig",
    "RateLimit",
    "configure_logging",
    "get_fetch_config",
    "optional_env_var",
    "positive_float_env",
    "positive_int_env",
]
