"""Client-side shopping cart"""

import logging
from typing import Callable, Optional

from ..models.cart import CartLine, LineKey, line_key
from ..models.product import Product, ProductVariant
from ..services.variant_resolver import variant_label
from .storage import MemoryStorage, dump_cart_state, load_cart_state

logger = logging.getLogger(__name__)

Lines = tuple[CartLine, ...]


class CartStore:
    """
    Persisted shopping cart.

    Holds an immutable tuple of CartLine and replaces it wholesale on every
    change. Each change is a compare-and-swap: read the current lines, compute
    the next ones, and only install them if nothing else replaced the lines in
    between. The new lines are flushed to storage after each change.

    Invariants:
    - at most one line per (product_id, variant_id)
    - 1 <= quantity <= stock_quantity for every line
    - snapshotted name/price/stock are never refreshed

    None of the operations raise on bad quantities or unknown lines; they
    clamp or do nothing instead.

    Usage:
        store = CartStore(JSONFileStorage(".storefront"))
        store.load()
        store.add_item(product, product.name, variant)
    """

    def __init__(self, storage=None, name: str = "cart-store"):
        self.storage = storage if storage is not None else MemoryStorage()
        self.name = name
        self._lines: Lines = ()

    @property
    def lines(self) -> Lines:
        return self._lines

    def load(self) -> "CartStore":
        """Hydrate from storage. Malformed data yields an empty cart."""
        state = load_cart_state(self.storage, self.name)
        self._lines = _normalize(state.items)
        logger.debug(f"Loaded cart '{self.name}' with {len(self._lines)} line(s)")
        return self

    def get_line(self, product_id: int, variant_id: Optional[int] = None) -> Optional[CartLine]:
        key = line_key(product_id, variant_id)
        return next((line for line in self._lines if line.key == key), None)

    # ==================== Mutations ====================

    def add_item(
        self,
        product: Product,
        display_name: str,
        variant: Optional[ProductVariant] = None,
    ) -> None:
        """
        Add one unit of a product (or one of its variants) to the cart.

        Out-of-stock targets are ignored. Adding an existing line increments
        its quantity up to the stock snapshotted on the line, or the current
        stock when that is lower.
        """
        available_stock = variant.stock if variant is not None else product.stock_quantity
        if available_stock <= 0:
            logger.debug(f"Ignoring add of out-of-stock product {product.id}")
            return

        key = line_key(product.id, variant.id if variant is not None else None)

        def transition(lines: Lines) -> Lines:
            if any(line.key == key for line in lines):
                return tuple(
                    line.model_copy(update={
                        "quantity": min(line.quantity + 1, line.stock_quantity, available_stock),
                    }) if line.key == key else line
                    for line in lines
                )
            return lines + (_new_line(product, display_name, variant, available_stock),)

        self._update(transition)

    def update_quantity(
        self,
        product_id: int,
        quantity: int,
        variant_id: Optional[int] = None,
    ) -> None:
        """Set a line's quantity, capped at its stock. Zero or less removes it."""
        if quantity <= 0:
            self.remove_item(product_id, variant_id)
            return

        key = line_key(product_id, variant_id)
        self._update(lambda lines: tuple(
            line.model_copy(update={"quantity": min(quantity, line.stock_quantity)})
            if line.key == key else line
            for line in lines
        ))

    def remove_item(self, product_id: int, variant_id: Optional[int] = None) -> None:
        key = line_key(product_id, variant_id)
        self._update(lambda lines: tuple(line for line in lines if line.key != key))

    def clear_cart(self) -> None:
        self._update(lambda lines: ())

    # ==================== Derived ====================

    def total_items(self) -> int:
        return sum(line.quantity for line in self._lines)

    def subtotal_centimes(self) -> int:
        return sum(line.price * line.quantity for line in self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    # ==================== Internals ====================

    def _update(self, transition: Callable[[Lines], Lines]) -> None:
        while True:
            current = self._lines
            proposed = transition(current)
            if self._lines is current:
                break
        if proposed == current:
            return
        self._lines = proposed
        self._flush()

    def _flush(self) -> None:
        try:
            self.storage.set_item(self.name, dump_cart_state(self._lines))
        except OSError as e:
            logger.error(f"Failed to persist cart '{self.name}': {e}")


def _new_line(
    product: Product,
    display_name: str,
    variant: Optional[ProductVariant],
    stock: int,
) -> CartLine:
    if variant is None:
        return CartLine(
            product_id=product.id,
            sku=product.sku,
            name=display_name,
            price=product.price,
            thumbnail_url=product.thumbnail_url,
            quantity=1,
            stock_quantity=stock,
        )
    return CartLine(
        product_id=product.id,
        variant_id=variant.id,
        sku=variant.sku or product.sku,
        variant_sku=variant.sku,
        name=display_name,
        price=variant.effective_price(product),
        thumbnail_url=product.thumbnail_url,
        quantity=1,
        stock_quantity=stock,
        variant_label=variant_label(variant),
    )


def _normalize(lines: list[CartLine]) -> Lines:
    """Enforce the line invariants on data read from storage"""
    merged: dict[LineKey, CartLine] = {}
    for line in lines:
        if line.quantity <= 0 or line.stock_quantity <= 0:
            logger.warning(f"Dropping unusable cart line for product {line.product_id}")
            continue
        existing = merged.get(line.key)
        quantity = line.quantity + (existing.quantity if existing else 0)
        base = existing or line
        merged[line.key] = base.model_copy(update={
            "quantity": min(quantity, base.stock_quantity),
        })
    return tuple(merged.values())
