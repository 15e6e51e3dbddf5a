# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header utilities.

HTTP header field names are case-insensitive (RFC 9110). Responses are stored as plain dicts
in resource state, so lookups go through these helpers instead of raw key access.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

_TEXT_MEDIA_TYPES = (
    re.compile(r"^text/.+"),
    re.compile(r"^application/json$"),
    re.compile(r"^application/samlmetadata\+xml"),
)
_TOKEN_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default

    lower = name.lower()
    for key in (name, lower, lower.title()):
        if key in headers:
            value = headers[key]
            return default if value is None else str(value).strip()

    for key, value in headers.items():
        if key is not None and str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


def parse_content_type(value: str) -> tuple[str, dict[str, str]]:
    """
    Split a Content-Type value into ``(media_type, params)``.

    The media type and parameter names are lowercased. Raises ValueError when the media
    type is not a well-formed ``type/subtype`` pair.
    """
    parts = (value or "").split(";")
    media_type = parts[0].strip().lower()
    main, sep, sub = media_type.partition("/")
    if not sep or not _TOKEN_RE.match(main) or not _TOKEN_RE.match(sub):
        raise ValueError(f"invalid media type: {value!r}")

    params: dict[str, str] = {}
    for raw in parts[1:]:
        raw = raw.strip()
        if not raw:
            continue
        key, sep, param_value = raw.partition("=")
        key = key.strip().lower()
        if not sep or not _TOKEN_RE.match(key):
            raise ValueError(f"invalid media type parameter: {raw!r}")
        params[key] = param_value.strip().strip('"')
    return media_type, params


def is_text_content_type(value: str) -> bool:
    """True for text-like media types that are unencoded or UTF-8 encoded."""
    try:
        media_type, params = parse_content_type(value)
    except ValueError:
        return False

    if any(pattern.match(media_type) for pattern in _TEXT_MEDIA_TYPES):
        charset = params.get("charset", "").lower()
        return charset in ("", "utf-8")
    return False


__all__ = ["header_value", "is_text_content_type", "parse_content_type"]
