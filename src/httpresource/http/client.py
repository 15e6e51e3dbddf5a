# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Client seam between resource callbacks and the network.

The provider hands one `HttpClient` to every callback as its meta argument. Implementations
send `HttpRequest.headers` as given and apply `HttpRequest.auth` as HTTP basic auth when it
is set. Any status code is a successful exchange; `HttpResponse.ok` is False only when no
response arrived, with the cause in `error_message` and `meta["error_category"]`.
"""

from typing import Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None: ...


def create_default_http_client(settings: HttpSettings | None = None) -> HttpClient:
    """httpx-backed client configured from `settings`, or from the environment when omitted."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings if settings is not None else load_http_settings())
