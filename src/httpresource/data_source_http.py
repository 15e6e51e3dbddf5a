# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The `http` data source: read-only view of a remote text document."""

from __future__ import annotations

from .config import HTTP_PASS_ENV, HTTP_USER_ENV
from .errors import ContentTypeError, ResponseStatusError
from .http import HttpClient, header_value, is_text_content_type
from .mapper import body_identity, build_request, send_request
from .schema import Resource, ResourceData, Schema, SchemaType, env_default_func


def data_source_http() -> Resource:
    return Resource(
        read=data_source_http_read,
        schema={
            "url": Schema(SchemaType.STRING, required=True),
            "http_user": Schema(
                SchemaType.STRING,
                optional=True,
                default_func=env_default_func(HTTP_USER_ENV, ""),
            ),
            "http_pass": Schema(
                SchemaType.STRING,
                optional=True,
                default_func=env_default_func(HTTP_PASS_ENV, ""),
            ),
            "request_headers": Schema(SchemaType.MAP, optional=True),
            "body": Schema(SchemaType.STRING, computed=True),
            "response_headers": Schema(SchemaType.MAP, computed=True),
        },
    )


def data_source_http_read(d: ResourceData, meta: HttpClient) -> None:
    request = build_request(d, "GET")
    response = send_request(meta, request)

    if response.status_code != 200:
        raise ResponseStatusError(response.status_code, request.url)

    content_type = header_value(response.headers, "Content-Type")
    if not is_text_content_type(content_type):
        raise ContentTypeError(content_type)

    d.set("body", response.text)
    d.set("response_headers", response.headers)
    d.set_id(body_identity(response.content))
