"""Checkout models for the storefront"""

from typing import Optional

from pydantic import BaseModel, Field


PHONE_PATTERN = r"^\+?\d{6,15}$"


class DeliveryZone(BaseModel):
    """City served by delivery, with its fee"""
    id: int
    city: str
    fee: int = Field(ge=0)  # centimes


class CheckoutContact(BaseModel):
    """Shopper contact fields collected by the checkout form"""
    phone: str = Field(pattern=PHONE_PATTERN)
    city: str = Field(min_length=1)
    note: Optional[str] = Field(default=None, max_length=500)


class OrderItemInput(BaseModel):
    """Line of an order request. Prices are never sent by the client."""
    product_id: int
    variant_id: Optional[int] = None
    quantity: int = Field(gt=0)


class PlaceOrderRequest(BaseModel):
    """Request to place an order"""
    phone: str
    city: str
    items: list[OrderItemInput] = Field(min_length=1)
    note: Optional[str] = None


class OrderConfirmationItem(BaseModel):
    """Order line priced by the server"""
    product_id: int
    variant_id: Optional[int] = None
    product_sku: str
    unit_price: int
    quantity: int
    subtotal: int


class OrderConfirmation(BaseModel):
    """Order returned by the API once placed"""
    id: int
    order_number: str
    phone: str
    city: Optional[str] = None
    subtotal: int
    delivery_fee: int
    total: int
    status: str = "pending"
    note: Optional[str] = None
    created_at: str
    items: list[OrderConfirmationItem] = []


class CheckoutSummary(BaseModel):
    """Client-side pricing preview shown before submitting"""
    subtotal: int
    delivery_fee: int = 0
    total: int
