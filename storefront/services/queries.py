"""Cached reads over the storefront API"""

import time
import logging
from typing import Any, Awaitable, Callable, Optional

from ..models.checkout import DeliveryZone
from ..models.product import Product
from .api_client import StorefrontClient

logger = logging.getLogger(__name__)

CacheKey = tuple


class QueryCache:
    """
    In-process cache keyed by tuples.

    Entries expire after their stale time (None keeps them until invalidated).
    invalidate() drops every key starting with the given prefix, so
    invalidate(("orders",)) also drops ("orders", 2).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[CacheKey, tuple[float, Optional[float], Any]] = {}

    def get(self, key: CacheKey) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        stored_at, stale_time, value = entry
        if stale_time is not None and self._clock() - stored_at > stale_time:
            del self._entries[key]
            return None
        return value

    def set(self, key: CacheKey, value: Any, stale_time: Optional[float] = None) -> None:
        self._entries[key] = (self._clock(), stale_time, value)

    def invalidate(self, prefix: CacheKey = ()) -> int:
        stale = [k for k in self._entries if k[:len(prefix)] == prefix]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug(f"Invalidated {len(stale)} cache entries under {prefix!r}")
        return len(stale)

    async def fetch(
        self,
        key: CacheKey,
        fetcher: Callable[[], Awaitable[Any]],
        stale_time: Optional[float] = None,
    ) -> Any:
        cached = self.get(key)
        if cached is not None:
            return cached
        value = await fetcher()
        self.set(key, value, stale_time)
        return value


class StorefrontQueries:
    """Read side of the storefront with per-resource stale times"""

    PRODUCT_STALE_TIME = 5 * 60
    DELIVERY_ZONES_STALE_TIME = 10 * 60

    def __init__(self, client: StorefrontClient, cache: Optional[QueryCache] = None):
        self.client = client
        self.cache = cache or QueryCache()

    async def product(self, slug: str) -> Product:
        return await self.cache.fetch(
            ("products", slug),
            lambda: self.client.get_product(slug),
            self.PRODUCT_STALE_TIME,
        )

    async def delivery_zones(self) -> list[DeliveryZone]:
        return await self.cache.fetch(
            ("delivery-zones",),
            self.client.list_delivery_zones,
            self.DELIVERY_ZONES_STALE_TIME,
        )

    async def my_orders(self, page: int = 1) -> dict:
        # Kept until an order is placed
        return await self.cache.fetch(
            ("orders", page),
            lambda: self.client.list_my_orders(page),
        )
