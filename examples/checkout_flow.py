"""
Minimal script that uses the public API to create a preference and follow its payments.
"""

from __future__ import annotations

import argparse
import logging
import sys

from mercadopago import AccessError, ConfigError, RequestError, create_client


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a checkout preference with the SDK")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing MP_* settings",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument("--title", default="Sample item", help="Item title")
    parser.add_argument("--price", type=float, default=10.0, help="Unit price")
    parser.add_argument("--currency", default="ARS", help="Currency id (default: ARS)")
    parser.add_argument(
        "--external-reference",
        default="example-order-1",
        help="Reference used to look the payments up afterwards",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        client = create_client(env_file=args.env_file)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1
    except AccessError as exc:
        logging.error("Authentication failed: %s", exc.message)
        return 1

    data = {
        "items": [
            {
                "title": args.title,
                "quantity": 1,
                "unit_price": args.price,
                "currency_id": args.currency,
            }
        ],
        "external_reference": args.external_reference,
    }

    try:
        preference = client.create_preference(data)
    except RequestError as exc:
        logging.error("Preference creation failed: %s", exc)
        return 1

    logging.info("Preference %s created. Checkout URL: %s", preference.id, preference.init_point)

    try:
        payments = client.search({"external_reference": args.external_reference})
    except RequestError as exc:
        logging.error("Search failed: %s", exc)
        return 1

    for payment in payments:
        logging.info("Payment %s is %s", payment.id, payment.status)
    if not payments:
        logging.info("No payments yet for %s", args.external_reference)
    return 0


if __name__ == "__main__":
    sys.exit(main())
