"""
Storefront API Client

HTTP client for the storefront REST API (catalog, delivery zones, orders).
"""

import logging
from typing import Optional, Any

import httpx

from ..core.exceptions import AuthenticationError, StorefrontAPIError
from ..models.checkout import DeliveryZone, OrderConfirmation, PlaceOrderRequest
from ..models.product import Product

logger = logging.getLogger(__name__)


class StorefrontClient:
    """
    Client for the storefront REST API.

    Responses wrap their payload in {"data": ...}; the client unwraps it and
    returns models. Any status >= 400 raises StorefrontAPIError carrying the
    server's message.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        locale: str = "fr",
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize storefront client.

        Args:
            base_url: Base URL of the API, e.g. http://localhost:8000/api
            token: Bearer token of the signed-in shopper, if any
            locale: Sent as Accept-Language on every request
            timeout: Request timeout in seconds
            http_client: Pre-built client (tests mount an ASGI transport here)
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.locale = locale
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings, http_client: Optional[httpx.AsyncClient] = None) -> "StorefrontClient":
        return cls(
            base_url=settings.api_base_url,
            token=settings.api_token,
            locale=settings.locale,
            timeout=settings.api_timeout,
            http_client=http_client,
        )

    async def close(self) -> None:
        """Close HTTP client"""
        if self._owns_client:
            await self._http_client.aclose()

    def _generate_headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Accept-Language": self.locale,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Make an HTTP request and return the decoded JSON body"""
        url = f"{self.base_url}{path}"

        try:
            response = await self._http_client.request(
                method=method,
                url=url,
                headers=self._generate_headers(),
                json=body,
                params=params,
            )
        except httpx.HTTPError as e:
            logger.error(f"Request failed: {method} {url} - {e}")
            raise StorefrontAPIError(f"Could not reach storefront API: {e}") from e

        if response.status_code >= 400:
            logger.error(f"Request failed: {response.status_code} - {response.text}")
            raise self._error_from_response(response)

        return response.json()

    @staticmethod
    def _error_from_response(response: httpx.Response) -> StorefrontAPIError:
        message = f"Request failed with status {response.status_code}"
        errors: dict[str, Any] = {}
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            detail = payload.get("message") or payload.get("detail")
            if isinstance(detail, str):
                message = detail
            if isinstance(payload.get("errors"), dict):
                errors = payload["errors"]

        if response.status_code == 401:
            return AuthenticationError(message, status_code=401, errors=errors)
        return StorefrontAPIError(message, status_code=response.status_code, errors=errors)

    # ==================== Catalog APIs ====================

    async def list_products(self, **filters: Any) -> dict:
        """List products. Filters use the API's filter[...] names."""
        params = {k: v for k, v in filters.items() if v not in (None, "")}
        return await self._request("GET", "/products", params=params)

    async def get_product(self, slug: str) -> Product:
        """Get product details by slug"""
        payload = await self._request("GET", f"/products/{slug}")
        return Product.model_validate(payload["data"])

    # ==================== Checkout APIs ====================

    async def list_delivery_zones(self) -> list[DeliveryZone]:
        payload = await self._request("GET", "/delivery-zones")
        return [DeliveryZone.model_validate(z) for z in payload["data"]]

    async def place_order(self, request: PlaceOrderRequest) -> OrderConfirmation:
        """Place an order. Pricing comes back from the server."""
        body = request.model_dump()
        if body.get("note") is None:
            body.pop("note", None)
        payload = await self._request("POST", "/orders", body=body)
        return OrderConfirmation.model_validate(payload["data"])

    async def list_my_orders(self, page: int = 1) -> dict:
        """Get the signed-in shopper's order history"""
        return await self._request("GET", "/orders", params={"page": page})
