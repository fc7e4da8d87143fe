"""
Storefront wiring

Builds the cart, API client, query cache and checkout service from settings
and owns their lifecycle: the cart is loaded from disk on start, the HTTP
client is closed on exit.
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

import httpx

from .core.cart_store import CartStore
from .core.config import Settings, configure_logging, get_settings
from .core.storage import JSONFileStorage, MemoryStorage
from .services.api_client import StorefrontClient
from .services.checkout import CheckoutService, ConfirmationHandler
from .services.queries import QueryCache, StorefrontQueries

logger = logging.getLogger(__name__)


@dataclass
class Storefront:
    """Process-wide storefront state"""
    settings: Settings
    cart: CartStore
    client: StorefrontClient
    queries: StorefrontQueries
    checkout: CheckoutService

    async def close(self) -> None:
        await self.client.close()


def create_storefront(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    on_confirmed: Optional[ConfirmationHandler] = None,
    persist: bool = True,
) -> Storefront:
    """Wire up a storefront and hydrate its cart"""
    settings = settings or get_settings()

    storage = JSONFileStorage(settings.cart_store_dir) if persist else MemoryStorage()
    cart = CartStore(storage, name=settings.cart_store_name).load()

    client = StorefrontClient.from_settings(settings, http_client=http_client)
    cache = QueryCache()

    return Storefront(
        settings=settings,
        cart=cart,
        client=client,
        queries=StorefrontQueries(client, cache),
        checkout=CheckoutService(client, cart, cache=cache, on_confirmed=on_confirmed),
    )


@asynccontextmanager
async def storefront_session(
    settings: Optional[Settings] = None,
    **kwargs,
) -> AsyncIterator[Storefront]:
    """Storefront for the duration of an async block"""
    settings = settings or get_settings()
    configure_logging(settings)
    storefront = create_storefront(settings, **kwargs)
    logger.info(f"{settings.app_name} starting with {storefront.cart.total_items()} item(s) in cart")
    try:
        yield storefront
    finally:
        await storefront.close()
        logger.info(f"{settings.app_name} shutting down...")
