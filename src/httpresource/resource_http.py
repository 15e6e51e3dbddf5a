# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The `http` managed resource: remote content driven by PUT/GET/DELETE."""

from __future__ import annotations

from .config import HTTP_PASS_ENV, HTTP_USER_ENV
from .errors import ResponseStatusError
from .http import HttpClient, decode_body
from .mapper import body_identity, build_request, send_request
from .schema import Resource, ResourceData, Schema, SchemaType, env_default_func


def resource_http() -> Resource:
    return Resource(
        read=resource_http_read,
        create=resource_http_create,
        update=resource_http_create,
        delete=resource_http_delete,
        schema={
            "url": Schema(
                SchemaType.STRING,
                required=True,
                force_new=True,
                description="Target URL; changing it replaces the resource.",
            ),
            "http_user": Schema(
                SchemaType.STRING,
                optional=True,
                default_func=env_default_func(HTTP_USER_ENV, ""),
                description="Basic-auth user name.",
            ),
            "http_pass": Schema(
                SchemaType.STRING,
                optional=True,
                default_func=env_default_func(HTTP_PASS_ENV, ""),
                description="Basic-auth password.",
            ),
            "request_headers": Schema(SchemaType.MAP, optional=True),
            "body": Schema(SchemaType.STRING, required=True),
        },
    )


def resource_http_read(d: ResourceData, meta: HttpClient) -> None:
    request = build_request(d, "GET")
    response = send_request(meta, request)

    if response.status_code == 404:
        d.set_id("")
        return

    if response.status_code != 200:
        raise ResponseStatusError(response.status_code, request.url)

    d.set("body", decode_body(response.content))
    d.set_id(body_identity(response.content))


def resource_http_create(d: ResourceData, meta: HttpClient) -> None:
    body = d.get("body")
    request = build_request(d, "PUT", body)
    response = send_request(meta, request)

    if response.status_code != 200:
        raise ResponseStatusError(response.status_code, request.url)

    d.set_id(body_identity(body))


def resource_http_delete(d: ResourceData, meta: HttpClient) -> None:
    request = build_request(d, "DELETE")
    response = send_request(meta, request)

    if response.status_code != 200:
        raise ResponseStatusError(response.status_code, request.url)

    d.set_id("")
