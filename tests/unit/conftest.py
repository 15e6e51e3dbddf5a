# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

import base64

import httpx
import pytest

from httpresource.config import HttpSettings
from httpresource.http import HttpxClient
from httpresource.provider import new_provider

BASE_URL = "http://testserver"
RESTRICTED_TOKEN = "Zm9vOmJhcg=="
BASIC_HEADER = "Basic " + base64.b64encode(b"user:pass").decode("ascii")


class FakeServer:
    """In-memory HTTP server storing PUT bodies per path."""

    def __init__(self):
        self.files: dict[str, bytes] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        text_plain = {"Content-Type": "text/plain"}

        if path == "/meta_200.txt":
            return httpx.Response(200, headers=text_plain, content=b"1.0.0")
        if path == "/utf-8/meta_200.txt":
            return httpx.Response(200, headers={"Content-Type": "text/plain; charset=UTF-8"}, content=b"1.0.0")
        if path == "/utf-16/meta_200.txt":
            return httpx.Response(200, headers={"Content-Type": "application/json; charset=UTF-16"}, content=b'"1.0.0"')
        if path == "/meta_404.txt":
            return httpx.Response(404, headers=text_plain)
        if path == "/error":
            return httpx.Response(500, headers=text_plain)

        if path.startswith("/basic") and request.headers.get("Authorization") != BASIC_HEADER:
            return httpx.Response(403, headers=text_plain)
        if path.startswith("/restricted") and request.headers.get("Authorization") != RESTRICTED_TOKEN:
            return httpx.Response(403, headers=text_plain)

        if request.method == "GET":
            if path not in self.files:
                return httpx.Response(404, headers=text_plain)
            return httpx.Response(200, headers=text_plain, content=self.files[path])
        if request.method == "PUT":
            self.files[path] = request.content
            return httpx.Response(200, headers=text_plain)
        if request.method == "DELETE":
            if self.files.pop(path, None) is None:
                return httpx.Response(404, headers=text_plain)
            return httpx.Response(200, headers=text_plain)
        return httpx.Response(405, headers=text_plain)


@pytest.fixture(autouse=True)
def _clear_credentials_env(monkeypatch):
    monkeypatch.delenv("HTTP_USER", raising=False)
    monkeypatch.delenv("HTTP_PASS", raising=False)


@pytest.fixture
def server():
    return FakeServer()


@pytest.fixture
def http_client(server):
    transport = httpx.MockTransport(server.handler)
    client = HttpxClient(HttpSettings(user_agent="UA/1.0"), client=httpx.Client(transport=transport))
    yield client
    client.close()


@pytest.fixture
def provider(http_client):
    with new_provider(http_client) as provider:
        yield provider


@pytest.fixture
def url():
    def _url(path: str) -> str:
        return f"{BASE_URL}/{path.lstrip('/')}"

    return _url
