# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by resource callbacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

Headers = dict[str, str]
BasicAuth = tuple[str, str]

# Undecodable bytes map to lone surrogates and back, so a body read as text is PUT back unchanged.
BODY_ENCODING = "utf-8"
BODY_ERRORS = "surrogateescape"


def encode_body(body: str) -> bytes:
    return body.encode(BODY_ENCODING, errors=BODY_ERRORS)


def decode_body(content: bytes) -> str:
    return content.decode(BODY_ENCODING, errors=BODY_ERRORS)


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    auth: BasicAuth | None = None
    timeout: float | None = None

    @property
    def content(self) -> bytes | None:
        if isinstance(self.body, str):
            return encode_body(self.body)
        return self.body


@dataclass
class HttpResponse:
    """Normalized HTTP response; `ok` is False only for transport-level failures."""

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)
