"""Catalog models as returned by the storefront API"""

from typing import Optional

from pydantic import BaseModel, Field


class ProductImage(BaseModel):
    """Image renditions for a product"""
    id: int
    thumbnail: str = ""
    card: str = ""
    full: str = ""
    original: str = ""


class AttributeValue(BaseModel):
    """One attribute assignment on a variant, e.g. Color=Red"""
    attribute_id: Optional[int] = None
    attribute: str
    id: Optional[int] = None
    value: str


class ProductVariant(BaseModel):
    """A purchasable configuration of a product"""
    id: int
    sku: Optional[str] = None
    price: Optional[int] = None  # centimes, None inherits product price
    stock: int = 0
    is_active: bool = True
    attribute_values: list[AttributeValue] = []

    def effective_price(self, product: "Product") -> int:
        return self.price if self.price is not None else product.price


class DefaultVariant(BaseModel):
    """Variant holding the base stock/price of a product"""
    id: int
    sku: Optional[str] = None
    price: Optional[int] = None
    stock: int = 0

    def as_variant(self) -> ProductVariant:
        """Synthetic variant with no attribute values"""
        return ProductVariant(
            id=self.id,
            sku=self.sku,
            price=self.price,
            stock=self.stock,
        )


class Product(BaseModel):
    """Product in the catalog"""
    id: int
    sku: str
    name: str = ""
    slug: str = ""
    description: Optional[str] = None
    price: int = Field(ge=0)  # centimes
    stock_quantity: int = 0
    in_stock: bool = True
    images: list[ProductImage] = []
    default_variant: Optional[DefaultVariant] = None
    variants: list[ProductVariant] = []

    @property
    def purchasable_variants(self) -> list[ProductVariant]:
        return [v for v in self.variants if v.is_active]

    @property
    def thumbnail_url(self) -> str:
        return self.images[0].thumbnail if self.images else ""
