"""
Command-line interface for exercising the MercadoPago client.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable, Dict, Iterable, Sequence, Tuple

import requests

from .api import create_client
from .core.client import AccessError, Client
from .core.config import ConfigError
from .core.transport import RequestError


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )


def _key_value(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Values must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Key must not be empty")
    return key, val


def _json_object(value: str) -> Dict[str, Any]:
    try:
        data = json.loads(value)
    except json.JSONDecodeError as exc:
        raise argparse.ArgumentTypeError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError("Expected a JSON object")
    return data


def _collect_pairs(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    collected: dict[str, str] = {}
    for key, value in pairs:
        collected[key] = value
    return collected


_COMMANDS: Dict[str, Callable[[Client, argparse.Namespace], Any]] = {
    "create-preference": lambda client, args: client.create_preference(args.data),
    "update-preference": lambda client, args: client.update_preference(args.id, args.data),
    "get-preference": lambda client, args: client.get_preference(args.id),
    "notification": lambda client, args: client.notification(args.id),
    "search": lambda client, args: client.search(_collect_pairs(args.criteria)),
    "cancel": lambda client, args: client.cancel_payment(args.id),
    "refund": lambda client, args: client.refund_payment(args.id),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mercadopago",
        description="Call the MercadoPago API with credentials from the environment",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MP_* settings (default: .env)",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_key_value,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--sandbox",
        action="store_true",
        default=None,
        help="Use the sandbox environment for notification and search",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create-preference", help="Create a payment preference")
    create.add_argument("data", type=_json_object, help="Preference as a JSON object")

    update = commands.add_parser("update-preference", help="Update a payment preference")
    update.add_argument("id", help="Preference id")
    update.add_argument("data", type=_json_object, help="Fields to update as a JSON object")

    get = commands.add_parser("get-preference", help="Show a payment preference")
    get.add_argument("id", help="Preference id")

    notification = commands.add_parser("notification", help="Show the latest state of a payment")
    notification.add_argument("id", help="Payment id")

    search = commands.add_parser("search", help="Search collections")
    search.add_argument(
        "criteria",
        nargs="*",
        type=_key_value,
        metavar="KEY=VALUE",
        help="Search filters, e.g. external_reference=order-42",
    )

    cancel = commands.add_parser("cancel", help="Cancel a payment")
    cancel.add_argument("id", help="Payment id")

    refund = commands.add_parser("refund", help="Refund a payment")
    refund.add_argument("id", help="Payment id")

    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    overrides = _collect_pairs(args.set or ())

    try:
        client = create_client(
            env_file=args.env_file,
            overrides=overrides,
            sandbox=args.sandbox,
            session=requests.Session(),
        )
    except (ConfigError, ValueError) as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1
    except AccessError as exc:
        logging.error("Authentication failed: %s", exc.message)
        return 1
    except (RequestError, requests.RequestException) as exc:
        logging.error("Authentication request failed: %s", exc)
        return 1

    try:
        result = _COMMANDS[args.command](client, args)
    except (RequestError, requests.RequestException) as exc:
        logging.error("%s request failed: %s", args.command, exc)
        return 1

    print(json.dumps(getattr(result, "raw", result), indent=2, sort_keys=True))
    return 0


def main() -> None:
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
