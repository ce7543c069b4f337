# This file builds the storefront services from client settings.
# It exists so every service shares one session store and one client per backend host.
# The main API serves users, products, and baskets; payments live behind their own base URL.
# Tests and embedding applications pass their own store, session, or 401 handler instead of the defaults.

from __future__ import annotations

from dataclasses import dataclass

import requests

from src.client.http_client import LoginRedirect, UnauthorizedHandler, build_api_client
from src.client.session_store import FileSessionStore, SessionStore
from src.common.settings import ClientSettings
from src.services.basket_service import BasketService
from src.services.payment_service import PaymentService
from src.services.product_service import ProductService
from src.services.user_service import UserService


@dataclass(frozen=True)
class StorefrontServices:
    session_store: SessionStore
    users: UserService
    products: ProductService
    baskets: BasketService
    payments: PaymentService


def build_services(
    settings: ClientSettings,
    *,
    session_store: SessionStore | None = None,
    http_session: requests.Session | None = None,
    on_unauthorized: UnauthorizedHandler | None = None,
) -> StorefrontServices:
    store = session_store or FileSessionStore(settings.session_file)
    handler = on_unauthorized or LoginRedirect(settings.login_url)
    shared_session = http_session or requests.Session()

    main_client = build_api_client(
        base_url=settings.api_base_url,
        session_store=store,
        on_unauthorized=handler,
        timeout_seconds=settings.request_timeout_seconds,
        session=shared_session,
    )
    payment_client = build_api_client(
        base_url=settings.payment_base_url,
        session_store=store,
        on_unauthorized=handler,
        timeout_seconds=settings.request_timeout_seconds,
        session=shared_session,
    )

    return StorefrontServices(
        session_store=store,
        users=UserService(api_client=main_client, session_store=store),
        products=ProductService(
            api_client=main_client,
            strict_placeholders=settings.strict_placeholders,
        ),
        baskets=BasketService(api_client=main_client, session_store=store),
        payments=PaymentService(api_client=payment_client),
    )

