# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


def _wire_headers(headers: httpx.Headers) -> dict[str, str]:
    """Header names as sent by the server; repeated fields are joined with ", "."""
    out: dict[str, str] = {}
    seen: dict[str, str] = {}
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode(headers.encoding)
        value = raw_value.decode(headers.encoding)
        first = seen.setdefault(name.lower(), name)
        out[first] = f"{out[first]}, {value}" if first in out else value
    return out


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        # Non-ASCII values go out as UTF-8 bytes; httpx only encodes str values as ASCII.
        headers: dict[str, str | bytes] = {
            name: value if value.isascii() else value.encode("utf-8") for name, value in (request.headers or {}).items()
        }
        if not any(name.lower() == "user-agent" for name in headers):
            headers["User-Agent"] = self.settings.user_agent

        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        kwargs = {"headers": headers, "content": request.content, "timeout": timeout}
        if request.auth is not None:
            kwargs["auth"] = httpx.BasicAuth(*request.auth)

        try:
            resp = self._client.request(request.method, request.url, **kwargs)
            content = resp.content
            encoding = resp.encoding or "utf-8"
            try:
                text = content.decode(encoding, errors="replace")
            except LookupError:
                text = content.decode("utf-8", errors="replace")
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.debug("%s %s failed (%s): %s", request.method, request.url, category.value, exc)
            return HttpResponse(
                ok=False,
                url=request.url,
                error_message=str(exc),
                error_type=type(exc).__name__,
                meta={"error_category": category},
            )

        return HttpResponse(
            ok=True,
            status_code=resp.status_code,
            headers=_wire_headers(resp.headers),
            text=text,
            content=content,
            url=str(resp.url),
        )

    def close(self) -> None:
        self._client.close()
