"""Mock product database"""

from typing import Optional

from storefront.models.product import (
    AttributeValue,
    DefaultVariant,
    Product,
    ProductImage,
    ProductVariant,
)


def _av(attribute_id: int, attribute: str, value_id: int, value: str) -> AttributeValue:
    return AttributeValue(attribute_id=attribute_id, attribute=attribute, id=value_id, value=value)


RED = _av(1, "Couleur", 11, "Rouge")
BLACK = _av(1, "Couleur", 12, "Noir")
SIZE_M = _av(2, "Taille", 21, "M")
SIZE_L = _av(2, "Taille", 22, "L")

# Mock scooter catalog, prices in centimes
PRODUCTS: dict[str, Product] = {
    "trottinette-city-350": Product(
        id=1,
        sku="TROT-CITY-350",
        name="Trottinette City 350W",
        slug="trottinette-city-350",
        description="Urban e-scooter, 350W motor, 25 km range.",
        price=450000,
        stock_quantity=5,
        images=[ProductImage(id=1, thumbnail="/media/city-350/thumb.webp")],
        default_variant=DefaultVariant(id=100, sku="TROT-CITY-350", price=450000, stock=5),
    ),
    "trottinette-pro": Product(
        id=2,
        sku="TROT-PRO",
        name="Trottinette Pro 500W",
        slug="trottinette-pro",
        description="Dual suspension, 500W motor, 45 km range.",
        price=1200000,
        stock_quantity=0,
        images=[ProductImage(id=2, thumbnail="/media/pro/thumb.webp")],
        default_variant=DefaultVariant(id=200, sku="TROT-PRO", price=1200000, stock=0),
        variants=[
            ProductVariant(id=201, sku="TROT-PRO-RED-M", price=None, stock=3, attribute_values=[RED, SIZE_M]),
            ProductVariant(id=202, sku="TROT-PRO-BLK-L", price=1250000, stock=2, attribute_values=[BLACK, SIZE_L]),
            ProductVariant(id=203, sku="TROT-PRO-RED-L", price=1250000, stock=0, attribute_values=[RED, SIZE_L]),
        ],
    ),
    "casque-urbain": Product(
        id=3,
        sku="CASQ-URB",
        name="Casque urbain",
        slug="casque-urbain",
        price=39900,
        stock_quantity=0,
        in_stock=False,
        default_variant=DefaultVariant(id=300, sku="CASQ-URB", price=39900, stock=0),
    ),
}


class ProductDatabase:
    """In-memory product database for the mock API"""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Restore the seed catalog"""
        self.products = {slug: p.model_copy(deep=True) for slug, p in PRODUCTS.items()}

    def get_product(self, slug: str) -> Optional[Product]:
        """Get a product by slug"""
        return self.products.get(slug)

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return next((p for p in self.products.values() if p.id == product_id), None)

    def search_products(
        self,
        search: Optional[str] = None,
        in_stock_only: bool = False,
        page: int = 1,
        per_page: int = 12,
    ) -> tuple[list[Product], int]:
        """
        Search products with filters.

        Returns:
            Tuple of (page of matching products, total count)
        """
        results = list(self.products.values())

        if search:
            needle = search.lower()
            results = [p for p in results if needle in p.name.lower() or needle in p.sku.lower()]

        if in_stock_only:
            results = [p for p in results if p.in_stock]

        total = len(results)
        offset = (page - 1) * per_page
        return results[offset : offset + per_page], total

    def find_variant(self, product: Product, variant_id: int) -> Optional[ProductVariant]:
        """Active variant of a product, including its default variant"""
        if product.default_variant is not None and product.default_variant.id == variant_id:
            return product.default_variant.as_variant()
        return next((v for v in product.purchasable_variants if v.id == variant_id), None)

    def update_stock(self, product: Product, variant_id: Optional[int], quantity_change: int) -> None:
        """
        Update stock of a product or one of its variants.

        The default variant and the product's base stock move together.
        """
        default = product.default_variant
        if variant_id is None or (default is not None and default.id == variant_id):
            product.stock_quantity += quantity_change
            if default is not None:
                default.stock += quantity_change
        else:
            variant = next(v for v in product.variants if v.id == variant_id)
            variant.stock += quantity_change

        product.in_stock = product.stock_quantity > 0 or any(
            v.stock > 0 for v in product.purchasable_variants
        )


# Singleton instance
product_db = ProductDatabase()
