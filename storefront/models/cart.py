"""Cart models for the storefront"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


LineKey = tuple[int, Optional[int]]


def line_key(product_id: int, variant_id: Optional[int] = None) -> LineKey:
    """Identity of a cart line. A missing variant is its own group."""
    return (product_id, variant_id)


class CartLine(BaseModel):
    """
    Snapshot of product data at the time the item was added to cart.

    Name, price and stock are captured at add-time and never refreshed, so the
    cart stays consistent while the catalog changes underneath it. Lines are
    immutable; the store replaces them instead of editing them.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    product_id: int
    variant_id: Optional[int] = None
    sku: str = ""
    variant_sku: Optional[str] = None
    name: str = ""
    price: int = Field(ge=0)  # centimes
    thumbnail_url: str = ""
    quantity: int
    stock_quantity: int
    variant_label: Optional[str] = None

    @property
    def key(self) -> LineKey:
        return line_key(self.product_id, self.variant_id)

    @property
    def line_total(self) -> int:
        return self.price * self.quantity


class CartState(BaseModel):
    """Persisted cart state"""
    items: list[CartLine] = []
