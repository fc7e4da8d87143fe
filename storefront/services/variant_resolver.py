"""
Variant resolution

Maps a shopper's attribute selections (e.g. Color=Red, Size=M) to the
concrete variant they describe.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from ..models.product import Product, ProductVariant


@dataclass
class VariationDimension:
    """An attribute axis and the distinct values it takes"""
    name: str
    values: list[str] = field(default_factory=list)


def build_variation_dimensions(variants: Sequence[ProductVariant]) -> list[VariationDimension]:
    """
    Group the variants' attribute values by attribute name.

    Dimensions keep first-seen order across variants, values keep first-seen
    order within their dimension. No variants means no dimensions.
    """
    dimensions: dict[str, VariationDimension] = {}
    for variant in variants:
        for av in variant.attribute_values:
            dimension = dimensions.setdefault(av.attribute, VariationDimension(name=av.attribute))
            if av.value not in dimension.values:
                dimension.values.append(av.value)
    return list(dimensions.values())


def resolve_variant(
    variants: Sequence[ProductVariant],
    dimensions: Sequence[VariationDimension],
    selections: Mapping[str, str],
) -> Optional[ProductVariant]:
    """
    Find the variant matching a complete selection.

    Returns None when the selection does not cover every dimension, and also
    when no variant matches. Callers treat both the same way: nothing can be
    added to the cart yet.
    """
    if len(selections) != len(dimensions):
        return None
    # A variant with no attribute values has nothing to disagree with, so it
    # matches any complete selection.
    return next(
        (
            v for v in variants
            if all(selections.get(av.attribute) == av.value for av in v.attribute_values)
        ),
        None,
    )


def variant_label(variant: ProductVariant) -> Optional[str]:
    """Human-readable label, e.g. "Red / M". None when there is nothing to show."""
    label = " / ".join(av.value for av in variant.attribute_values)
    return label or None


class ProductSelection:
    """
    Attribute selection state for one product detail view.

    Products without attribute variants resolve straight to their default
    variant, so every product goes through the same add-to-cart path.
    """

    def __init__(self, product: Product):
        self.product = product
        self.variants = product.purchasable_variants
        self.dimensions = build_variation_dimensions(self.variants)
        self.selections: dict[str, str] = {}

    @property
    def has_variants(self) -> bool:
        return bool(self.dimensions)

    def select(self, name: str, value: str) -> Optional[ProductVariant]:
        """Select a value on a dimension. Unknown dimensions/values are ignored."""
        dimension = next((d for d in self.dimensions if d.name == name), None)
        if dimension is not None and value in dimension.values:
            self.selections[name] = value
        return self.resolved_variant

    def deselect(self, name: str) -> None:
        self.selections.pop(name, None)

    def clear(self) -> None:
        self.selections = {}

    @property
    def resolved_variant(self) -> Optional[ProductVariant]:
        if not self.has_variants:
            default = self.product.default_variant
            return default.as_variant() if default is not None else None
        return resolve_variant(self.variants, self.dimensions, self.selections)

    @property
    def display_price(self) -> int:
        variant = self.resolved_variant
        return variant.effective_price(self.product) if variant else self.product.price

    @property
    def display_stock(self) -> int:
        variant = self.resolved_variant
        return variant.stock if variant else self.product.stock_quantity

    @property
    def can_add_to_cart(self) -> bool:
        variant = self.resolved_variant
        if variant is None:
            # Legacy products with neither variants nor a default variant
            return not self.has_variants and self.product.stock_quantity > 0
        return variant.stock > 0
