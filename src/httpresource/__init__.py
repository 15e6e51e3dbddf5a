# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
httpresource package entrypoint.

This package exposes a remote HTTP endpoint's content as a managed resource and as a
read-only data source. Declarative attributes (url, body, headers, basic-auth
credentials) are translated into GET/PUT/DELETE calls, and response codes and bodies are
mapped back into resource state. HTTP behavior is abstracted behind an injectable client
interface.
"""

from .config import HttpSettings, load_http_settings
from .data_source_http import data_source_http
from .errors import (
    ContentTypeError,
    ErrorCategory,
    HttpResourceError,
    RequestError,
    ResponseStatusError,
    SchemaError,
)
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .provider import Provider, new_provider
from .resource_http import resource_http
from .schema import Resource, ResourceData, Schema, SchemaType, env_default_func
from .version import __version__

__all__ = [
    "ContentTypeError",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResourceError",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "Provider",
    "RequestError",
    "Resource",
    "ResourceData",
    "ResponseStatusError",
    "Schema",
    "SchemaError",
    "SchemaType",
    "StubHttpClient",
    "__version__",
    "create_default_http_client",
    "data_source_http",
    "env_default_func",
    "load_http_settings",
    "new_provider",
    "resource_http",
    "setup_logging",
]
