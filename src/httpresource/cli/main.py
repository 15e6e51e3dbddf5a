# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpresource CLI."""

import argparse
import json
import logging
import sys
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..errors import HttpResourceError
from ..http import create_default_http_client, encode_body
from ..log import setup_logging
from ..provider import new_provider

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "http"
_MASKED = "********"


def _header_arg(value: str) -> tuple[str, str]:
    name, sep, header = value.partition("=")
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {value!r}")
    return name, header


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("url", help="Target URL")
    common.add_argument(
        "--header",
        dest="headers",
        action="append",
        type=_header_arg,
        default=[],
        metavar="NAME=VALUE",
        help="Request header (repeatable)",
    )
    common.add_argument("--user", help="Basic-auth user (defaults to $HTTP_USER)")
    common.add_argument("--password", help="Basic-auth password (defaults to $HTTP_PASS)")
    common.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    common.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    common.add_argument("--log-level", help="Logging level (defaults to $HTTPRESOURCE_LOG_LEVEL)")

    parser = argparse.ArgumentParser(description="Manage remote HTTP content as a resource")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("get", parents=[common], help="Read the resource (GET)")
    put = commands.add_parser("put", parents=[common], help="Create or update the resource (PUT)")
    put.add_argument("--body", required=True, help="Content to store")
    commands.add_parser("delete", parents=[common], help="Delete the resource (DELETE)")
    commands.add_parser("data", parents=[common], help="Read the URL as a data source")
    return parser


def _config_from_args(args: argparse.Namespace) -> dict[str, Any]:
    config: dict[str, Any] = {"url": args.url, "request_headers": dict(args.headers)}
    if args.user is not None:
        config["http_user"] = args.user
    if args.password is not None:
        config["http_pass"] = args.password
    return config


def _public_state(state: dict[str, Any]) -> dict[str, Any]:
    public = dict(state)
    if public.get("http_pass"):
        public["http_pass"] = _MASKED
    return public


def _print_json(state: dict[str, Any]) -> None:
    json.dump(state, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(command: str, state: dict[str, Any]) -> None:
    identity = state.get("id") or ""
    if command == "delete":
        print(f"[httpresource] Deleted {state.get('url')}")
        return
    if not identity:
        print(f"[httpresource] {state.get('url')}: absent")
        return
    print(f"[httpresource] {state.get('url')}: {identity}")
    headers = state.get("response_headers") or {}
    for name in sorted(headers):
        print(f"{name}: {headers[name]}")
    if command != "put":
        print(encode_body(state.get("body") or "").decode("utf-8", errors="replace"))


def run(args: argparse.Namespace, settings: HttpSettings) -> dict[str, Any]:
    config = _config_from_args(args)
    with new_provider(create_default_http_client(settings)) as provider:
        if args.command == "data":
            data = provider.read_data_source(RESOURCE_TYPE, config)
        elif args.command == "put":
            data = provider.create(RESOURCE_TYPE, {**config, "body": args.body})
        else:
            # Reads overwrite the body, and delete ignores it.
            data = provider.resource(RESOURCE_TYPE).data({**config, "body": ""})
            if args.command == "get":
                provider.read(RESOURCE_TYPE, data)
            else:
                provider.delete(RESOURCE_TYPE, data)
    return data.to_state()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    try:
        state = run(args, settings)
    except HttpResourceError as exc:
        logger.debug("%s %s failed", args.command, args.url, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    state = _public_state(state)
    if args.json:
        _print_json(state)
    else:
        _pretty_print(args.command, state)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
