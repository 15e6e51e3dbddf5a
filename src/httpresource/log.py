# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging setup for the CLI and for embedding applications."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "HTTPRESOURCE_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# httpx logs every exchange at INFO; resource callbacks already log their own requests.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def resolve_log_level(level: str | None = None) -> int:
    name = (level or os.getenv(LOG_LEVEL_ENV) or "WARNING").strip().upper()
    return getattr(logging, name, logging.WARNING) if name.isalpha() else logging.WARNING


def setup_logging(level: str | None = None) -> None:
    """Configure root logging; transport loggers stay at WARNING unless DEBUG is requested."""
    effective_level = resolve_log_level(level)
    logging.basicConfig(level=effective_level, format=LOG_FORMAT)
    transport_level = logging.DEBUG if effective_level <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)


__all__ = ["resolve_log_level", "setup_logging"]
