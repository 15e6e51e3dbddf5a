# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Translation between resource attributes and HTTP requests."""

from __future__ import annotations

import hashlib
import logging

from .errors import ErrorCategory, RequestError
from .http import HttpClient, HttpRequest, HttpResponse, encode_body
from .schema import ResourceData

logger = logging.getLogger(__name__)


def body_identity(body: bytes | str) -> str:
    """Hex MD5 digest used as the resource identity."""
    raw = encode_body(body) if isinstance(body, str) else body
    return hashlib.md5(raw).hexdigest()


def build_request(d: ResourceData, method: str, body: str | None = None) -> HttpRequest:
    """Build a request from the url, request_headers and basic-auth attributes of `d`."""
    url = d.get("url")
    headers = {str(name): str(value) for name, value in d.get("request_headers").items()}

    auth = None
    user, ok = d.get_ok("http_user")
    if ok:
        auth = (user, d.get("http_pass"))

    return HttpRequest(url=url, method=method, headers=headers, body=body, auth=auth)


def send_request(client: HttpClient, request: HttpRequest) -> HttpResponse:
    """Send `request`; transport failures become RequestError."""
    logger.debug("%s %s", request.method, request.url)
    try:
        response = client.request(request)
    except Exception as exc:  # noqa: BLE001
        raise RequestError(request.url, detail=str(exc)) from exc

    if not response.ok:
        category = response.meta.get("error_category", ErrorCategory.UNKNOWN_ERROR)
        logger.info("%s %s failed: %s", request.method, request.url, response.error_message)
        raise RequestError(request.url, category=category, detail=response.error_message)

    logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
    return response


__all__ = ["body_identity", "build_request", "send_request"]
