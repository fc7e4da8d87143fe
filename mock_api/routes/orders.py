"""Order API routes for the mock API"""

import logging
from fastapi import APIRouter, HTTPException, Query, status

from storefront.models.checkout import OrderConfirmationItem, PlaceOrderRequest
from storefront.utils.currency import format_currency
from ..database.delivery_zones import delivery_zone_db
from ..database.orders import order_db
from ..database.products import product_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def place_order(request: PlaceOrderRequest):
    """
    Place a cash-on-delivery order.

    Prices are computed here from the current catalog; the client only sends
    product/variant identities and quantities.
    """
    zone = delivery_zone_db.find_by_city(request.city)
    if not zone:
        raise HTTPException(status_code=422, detail=f"No delivery to {request.city}")

    # Price and check stock for every line before touching anything
    priced = []
    for item in request.items:
        product = product_db.get_product_by_id(item.product_id)
        if not product:
            raise HTTPException(status_code=422, detail=f"Product {item.product_id} not found")

        if item.variant_id is not None:
            variant = product_db.find_variant(product, item.variant_id)
            if not variant:
                raise HTTPException(status_code=422, detail=f"Variant {item.variant_id} not available")
            stock = variant.stock
            unit_price = variant.effective_price(product)
            sku = variant.sku or product.sku
        else:
            stock = product.stock_quantity
            unit_price = product.price
            sku = product.sku

        if stock < item.quantity:
            raise HTTPException(status_code=422, detail=f"Insufficient stock for {sku}")

        priced.append((product, item, OrderConfirmationItem(
            product_id=product.id,
            variant_id=item.variant_id,
            product_sku=sku,
            unit_price=unit_price,
            quantity=item.quantity,
            subtotal=unit_price * item.quantity,
        )))

    for product, item, _ in priced:
        product_db.update_stock(product, item.variant_id, -item.quantity)

    order = order_db.create_order(request, [line for _, _, line in priced], zone)
    logger.info(f"Order {order.order_number} created: {format_currency(order.total)}")

    return {"data": order}


@router.get("")
async def list_orders(
    page: int = Query(1, ge=1),
    per_page: int = Query(15, ge=1, le=100),
):
    """List placed orders"""
    orders, total = order_db.list_orders(page=page, per_page=per_page)
    return {
        "data": orders,
        "meta": {
            "current_page": page,
            "last_page": max(1, -(-total // per_page)),
            "per_page": per_page,
            "total": total,
        },
    }


@router.get("/{order_number}")
async def get_order(order_number: str):
    """Get order details"""
    order = order_db.get_order(order_number)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return {"data": order}
