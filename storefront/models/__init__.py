# Storefront Models

from .product import Product, ProductImage, ProductVariant, DefaultVariant, AttributeValue
from .cart import CartLine, CartState, LineKey, line_key
from .checkout import (
    CheckoutContact,
    CheckoutSummary,
    DeliveryZone,
    OrderConfirmation,
    OrderConfirmationItem,
    OrderItemInput,
    PlaceOrderRequest,
)

__all__ = [
    "Product",
    "ProductImage",
    "ProductVariant",
    "DefaultVariant",
    "AttributeValue",
    "CartLine",
    "CartState",
    "LineKey",
    "line_key",
    "CheckoutContact",
    "CheckoutSummary",
    "DeliveryZone",
    "OrderConfirmation",
    "OrderConfirmationItem",
    "OrderItemInput",
    "PlaceOrderRequest",
]
