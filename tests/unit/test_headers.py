# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from httpresource.http.headers import header_value, is_text_content_type, parse_content_type


def test_header_value_is_case_insensitive():
    headers = {"content-type": "text/plain", "X-Custom": " v "}
    assert header_value(headers, "Content-Type") == "text/plain"
    assert header_value(headers, "x-custom") == "v"
    assert header_value(headers, "missing", "default") == "default"
    assert header_value(None, "Content-Type") == ""


def test_parse_content_type_splits_params():
    media_type, params = parse_content_type('Text/HTML; Charset="UTF-8"; boundary=x')
    assert media_type == "text/html"
    assert params == {"charset": "UTF-8", "boundary": "x"}


@pytest.mark.parametrize("value", ["", "text", "text/", "/plain", "text/plain; =x"])
def test_parse_content_type_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_content_type(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("text/plain", True),
        ("text/plain; charset=UTF-8", True),
        ("application/json", True),
        ("application/json; charset=utf-8", True),
        ("application/samlmetadata+xml", True),
        ("application/json; charset=UTF-16", False),
        ("text/html; charset=iso-8859-1", False),
        ("application/octet-stream", False),
        ("image/png", False),
        ("", False),
    ],
)
def test_is_text_content_type(value, expected):
    assert is_text_content_type(value) is expected
