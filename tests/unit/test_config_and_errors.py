# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import socket
import ssl

import httpx

from httpresource import config
from httpresource.config import DEFAULT_USER_AGENT
from httpresource.errors import (
    ContentTypeError,
    ErrorCategory,
    HttpResourceError,
    RequestError,
    ResponseStatusError,
    categorize_exception,
)
from httpresource.log import setup_logging


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("HTTPRESOURCE_HTTP_TIMEOUT", "5.5")
    monkeypatch.setenv("HTTPRESOURCE_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("HTTPRESOURCE_HTTP_REDIRECTS", "false")
    monkeypatch.setenv("HTTPRESOURCE_HTTP_VERIFY_SSL", "0")

    settings = config.load_http_settings()

    assert settings.timeout == 5.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.allow_redirects is False
    assert settings.verify_ssl is False


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("HTTPRESOURCE_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.delenv("HTTPRESOURCE_USER_AGENT", raising=False)

    settings = config.load_http_settings()

    assert settings.timeout == config.HttpSettings.timeout
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_http_settings_non_positive_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("HTTPRESOURCE_HTTP_TIMEOUT", "0")
    assert config.load_http_settings().timeout == config.HttpSettings.timeout


def test_http_settings_redirects_truthy_variants(monkeypatch):
    for value in ("1", "on", "YES", "true"):
        monkeypatch.setenv("HTTPRESOURCE_HTTP_REDIRECTS", value)
        assert config.load_http_settings().allow_redirects is True


def test_load_http_settings_reads_env_at_call_time(monkeypatch):
    monkeypatch.setenv("HTTPRESOURCE_HTTP_TIMEOUT", "7.7")
    assert config.load_http_settings().timeout == 7.7
    monkeypatch.setenv("HTTPRESOURCE_HTTP_TIMEOUT", "8.8")
    assert config.load_http_settings().timeout == 8.8


def test_categorize_exception_maps_transport_failures():
    request = httpx.Request("GET", "http://example")
    assert categorize_exception(httpx.ReadTimeout("slow", request=request)) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("refused", request=request)) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ssl.SSLError("bad cert")) is ErrorCategory.SSL_ERROR
    assert categorize_exception(socket.gaierror("no such host")) is ErrorCategory.DNS_ERROR
    assert categorize_exception(ConnectionResetError()) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(ValueError("other")) is ErrorCategory.UNKNOWN_ERROR


def test_error_messages_carry_url_and_status():
    err = RequestError("http://example/a", category=ErrorCategory.TIMEOUT, detail="timed out")
    assert str(err) == "Error during making a request: http://example/a"
    assert err.category is ErrorCategory.TIMEOUT
    assert err.detail == "timed out"

    status = ResponseStatusError(403, "http://example/a")
    assert str(status) == "HTTP request error. Response code: 403"
    assert status.status_code == 403

    content = ContentTypeError("image/png")
    assert "image/png" in str(content)

    for exc in (err, status, content):
        assert isinstance(exc, HttpResourceError)


def test_setup_logging_applies_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    setup_logging("debug")
    assert calls["level"] == logging.DEBUG

    setup_logging("bogus")
    assert calls["level"] == logging.WARNING


def test_setup_logging_reads_env_and_quiets_transport(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    monkeypatch.setenv("HTTPRESOURCE_LOG_LEVEL", "info")

    setup_logging()
    assert calls["level"] == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING

    setup_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.DEBUG
    logging.getLogger("httpx").setLevel(logging.NOTSET)
    logging.getLogger("httpcore").setLevel(logging.NOTSET)
