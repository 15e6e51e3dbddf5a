# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception types raised by resource callbacks."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    # ssl.SSLError subclasses OSError, so it has to be checked before the connection family.
    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


class HttpResourceError(Exception):
    """Base class for every failure surfaced by the provider."""


class SchemaError(HttpResourceError):
    """Invalid schema definition or configuration."""


class RequestError(HttpResourceError):
    """The request could not be built or did not reach the server."""

    def __init__(
        self,
        url: str,
        *,
        category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR,
        detail: str | None = None,
    ):
        super().__init__(f"Error during making a request: {url}")
        self.url = url
        self.category = category
        self.detail = detail


class ResponseStatusError(HttpResourceError):
    """The server answered with a status code the operation does not accept."""

    def __init__(self, status_code: int, url: str | None = None):
        super().__init__(f"HTTP request error. Response code: {status_code}")
        self.status_code = status_code
        self.url = url


class ContentTypeError(HttpResourceError):
    """The data source response is not a UTF-8 text document."""

    def __init__(self, content_type: str):
        super().__init__(f"Content-Type is not a text type. Got: {content_type}")
        self.content_type = content_type


__all__ = [
    "ContentTypeError",
    "ErrorCategory",
    "HttpResourceError",
    "RequestError",
    "ResponseStatusError",
    "SchemaError",
    "categorize_exception",
]
