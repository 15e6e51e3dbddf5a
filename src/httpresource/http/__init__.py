# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .headers import header_value, is_text_content_type, parse_content_type
from .httpx_client import HttpxClient
from .models import BasicAuth, Headers, HttpRequest, HttpResponse, decode_body, encode_body

__all__ = [
    "BasicAuth",
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "create_default_http_client",
    "decode_body",
    "encode_body",
    "header_value",
    "is_text_content_type",
    "parse_content_type",
]
