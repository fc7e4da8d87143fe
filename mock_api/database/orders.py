"""Order storage for the mock API"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from storefront.models.checkout import (
    DeliveryZone,
    OrderConfirmation,
    OrderConfirmationItem,
    PlaceOrderRequest,
)


class OrderDatabase:
    """In-memory order storage"""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.orders: dict[str, OrderConfirmation] = {}
        self._next_id = 1

    def create_order(
        self,
        request: PlaceOrderRequest,
        items: list[OrderConfirmationItem],
        zone: DeliveryZone,
    ) -> OrderConfirmation:
        """Create an order from server-priced items"""
        subtotal = sum(item.subtotal for item in items)

        order = OrderConfirmation(
            id=self._next_id,
            order_number=f"ORD-{uuid.uuid4().hex[:8].upper()}",
            phone=request.phone,
            city=zone.city,
            subtotal=subtotal,
            delivery_fee=zone.fee,
            total=subtotal + zone.fee,
            status="pending",
            note=request.note,
            created_at=datetime.now(timezone.utc).isoformat(),
            items=items,
        )
        self._next_id += 1

        self.orders[order.order_number] = order
        return order

    def get_order(self, order_number: str) -> Optional[OrderConfirmation]:
        """Get an order by its number"""
        return self.orders.get(order_number)

    def list_orders(self, page: int = 1, per_page: int = 15) -> tuple[list[OrderConfirmation], int]:
        """List orders, newest first"""
        orders = sorted(self.orders.values(), key=lambda o: o.id, reverse=True)
        offset = (page - 1) * per_page
        return orders[offset : offset + per_page], len(orders)


# Singleton instance
order_db = OrderDatabase()
