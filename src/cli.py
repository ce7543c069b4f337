# This module provides a small command line front end over the storefront services.
# It exists so operators can log in, inspect the cached session, and check a basket without writing code.
# Sessions persist in the file-backed store configured by STOREFRONT_SESSION_FILE.

from __future__ import annotations

import argparse
import getpass
import json
import sys

from src.client.errors import StorefrontClientError
from src.common.logging import configure_logging
from src.common.settings import get_settings
from src.schemas.user_schemas import LoginRequest
from src.services.dependencies import StorefrontServices, build_services


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="storefront", description="Storefront API client utilities")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL for this run")
    subparsers = parser.add_subparsers(dest="command", required=True)

    login = subparsers.add_parser("login", help="Authenticate and cache the session")
    login.add_argument("--email", required=True)
    login.add_argument("--password", default=None, help="Prompted for when omitted")

    subparsers.add_parser("logout", help="Clear the cached session")
    subparsers.add_parser("whoami", help="Show the cached user snapshot")
    subparsers.add_parser("basket", help="Show the current user's basket")
    return parser.parse_args(argv)


def _login(services: StorefrontServices, args: argparse.Namespace) -> int:
    password = args.password or getpass.getpass("Password: ")
    response = services.users.login(LoginRequest(email=args.email, password=password))
    if not response.success or response.data is None:
        print(f"Login failed: {response.message}")
        return 1
    user = response.data.user
    print(f"Logged in as {user.email} ({user.role})")
    return 0


def _whoami(services: StorefrontServices) -> int:
    user = services.users.get_current_user()
    if user is None:
        print("Not logged in.")
        return 1
    print(json.dumps(user.model_dump(mode="json"), indent=2))
    return 0


def _basket(services: StorefrontServices) -> int:
    response = services.baskets.get_basket()
    if not response.success or response.data is None:
        print(f"Basket unavailable: {response.message}")
        return 1
    basket = response.data
    for item in basket.items:
        print(f"- product {item.product_id}: {item.quantity} x {item.unit_price:.2f} = {item.total_price:.2f}")
    print(f"{basket.item_count} item(s), total {basket.total:.2f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    services = build_services(get_settings())

    try:
        if args.command == "login":
            return _login(services, args)
        if args.command == "logout":
            services.users.logout()
            print("Logged out.")
            return 0
        if args.command == "whoami":
            return _whoami(services)
        if args.command == "basket":
            return _basket(services)
    except StorefrontClientError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 2


if __name__ == "__main__":
    sys.exit(main())
