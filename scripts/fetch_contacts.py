#!/usr/bin/env python3
"""
Fetch the whole contacts directory and print it.

Credentials come from the environment (or .env):
GOOGLE_ACCESS_TOKEN, GOOGLE_REFRESH_TOKEN, GOOGLE_CONSUMER_KEY, GOOGLE_CONSUMER_SECRET.

Run with --refresh to exchange the refresh token for a fresh access token first.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from gcontacts.error_handler import ErrorHandler
from gcontacts.integrations.clients.real_http.contacts import RealContactsClient
from gcontacts.integrations.contracts.errors import ContactsClientError
from gcontacts.utils.config_loader import (
    DEFAULT_CONFIG_PATH,
    ContactsAPIConfig,
    load_client_options_from_env,
    load_contacts_config,
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch all contacts from the contacts feed API")
    parser.add_argument("--config", type=Path, default=None, help="Path to contacts_config.yml")
    parser.add_argument("--refresh", action="store_true", help="Refresh the access token before fetching")
    parser.add_argument("--type", default=None, help="Feed type (default: contacts)")
    parser.add_argument("--email", default=None, help="Directory owner (default: default)")
    parser.add_argument("--projection", default=None, help="Feed projection (default: thin)")
    parser.add_argument("--max-results", type=int, default=None, help="Page size requested from the API")
    parser.add_argument("--json", action="store_true", help="Print contacts as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def load_config(config_path) -> ContactsAPIConfig:
    if config_path is not None:
        return load_contacts_config(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_contacts_config(DEFAULT_CONFIG_PATH)
    return ContactsAPIConfig()


async def run(args: argparse.Namespace) -> int:
    client = RealContactsClient(load_client_options_from_env(), config=load_config(args.config))

    if args.refresh:
        if not client.refresh_token:
            print("GOOGLE_REFRESH_TOKEN is not set.", file=sys.stderr)
            return 1
        client.token = await client.refresh_access_token(client.refresh_token)
        logger.info("Using refreshed access token")
    elif not client.token:
        print("GOOGLE_ACCESS_TOKEN is not set (or pass --refresh).", file=sys.stderr)
        return 1

    params = {
        "type": args.type,
        "email": args.email,
        "projection": args.projection,
        "max-results": args.max_results,
    }
    contacts = await client.get_contacts(params)

    if args.json:
        print(json.dumps([{"name": c.name, "email": c.email} for c in contacts], indent=2, ensure_ascii=False))
    else:
        for contact in contacts:
            print(f"{contact.name}\t{contact.email}")
    logger.info("Printed %d contact(s)", len(contacts))
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        return asyncio.run(run(args))
    except ContactsClientError as exc:
        payload = ErrorHandler().handle_exception(exc, context={"refresh": args.refresh})
        print(payload["message"], file=sys.stderr)
        print(f"Error: {payload['metadata']['error']}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
