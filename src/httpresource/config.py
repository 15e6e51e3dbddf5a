# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for httpresource."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"httpresource/{__version__}"

HTTP_USER_ENV = "HTTP_USER"
HTTP_PASS_ENV = "HTTP_PASS"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("HTTPRESOURCE_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            timeout=timeout,
            user_agent=os.getenv("HTTPRESOURCE_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("HTTPRESOURCE_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("HTTPRESOURCE_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
