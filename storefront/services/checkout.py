"""
Checkout

Turns the current cart into an order request and applies the side effects of
a successful order: the cart is cleared, cached order lists are dropped and
the confirmation is handed to whoever displays it.
"""

import logging
from typing import Callable, Optional, Sequence

from ..core.cart_store import CartStore
from ..core.exceptions import CheckoutError, EmptyCartError, StorefrontAPIError
from ..models.cart import CartLine
from ..models.checkout import (
    CheckoutContact,
    CheckoutSummary,
    DeliveryZone,
    OrderConfirmation,
    OrderItemInput,
    PlaceOrderRequest,
)
from .api_client import StorefrontClient
from .queries import QueryCache
from ..utils.currency import format_currency

logger = logging.getLogger(__name__)

ConfirmationHandler = Callable[[OrderConfirmation], None]


def build_order_request(lines: Sequence[CartLine], contact: CheckoutContact) -> PlaceOrderRequest:
    """Order request for the given lines. Prices stay on the server side."""
    return PlaceOrderRequest(
        phone=contact.phone,
        city=contact.city,
        items=[
            OrderItemInput(
                product_id=line.product_id,
                variant_id=line.variant_id,
                quantity=line.quantity,
            )
            for line in lines
        ],
        note=contact.note or None,
    )


class CheckoutService:
    """
    Places orders for the cart.

    A failed order leaves the cart untouched and is never retried; the
    shopper resubmits. is_pending is True while a request is in flight so the
    submit control can be disabled.
    """

    def __init__(
        self,
        client: StorefrontClient,
        cart: CartStore,
        cache: Optional[QueryCache] = None,
        on_confirmed: Optional[ConfirmationHandler] = None,
    ):
        self.client = client
        self.cart = cart
        self.cache = cache
        self.on_confirmed = on_confirmed
        self.is_pending = False

    def summarize(self, zone: Optional[DeliveryZone] = None) -> CheckoutSummary:
        """Preview of the totals from snapshotted prices"""
        subtotal = self.cart.subtotal_centimes()
        fee = zone.fee if zone is not None else 0
        return CheckoutSummary(subtotal=subtotal, delivery_fee=fee, total=subtotal + fee)

    async def place_order(self, contact: CheckoutContact) -> OrderConfirmation:
        lines = self.cart.lines
        if not lines:
            raise EmptyCartError()

        request = build_order_request(lines, contact)
        logger.info(f"Placing order with {len(request.items)} line(s) for {contact.city}")

        self.is_pending = True
        try:
            confirmation = await self.client.place_order(request)
        except StorefrontAPIError as e:
            logger.error(f"Order placement failed: {e.message}")
            raise CheckoutError(e.message, cause=e) from e
        finally:
            self.is_pending = False

        self.cart.clear_cart()
        if self.cache is not None:
            self.cache.invalidate(("orders",))
        logger.info(f"Order {confirmation.order_number} placed: {format_currency(confirmation.total)}")

        if self.on_confirmed is not None:
            self.on_confirmed(confirmation)
        return confirmation
