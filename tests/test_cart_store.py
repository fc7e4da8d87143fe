import json
import random

from storefront.core.cart_store import CartStore
from storefront.core.storage import CART_STORE_VERSION

from .conftest import make_variant


class TestAddItem:
    def test_first_add_creates_line(self, cart, plain_product):
        cart.add_item(plain_product, "City 350")

        assert len(cart.lines) == 1
        line = cart.lines[0]
        assert line.product_id == 1
        assert line.variant_id is None
        assert line.quantity == 1
        assert line.stock_quantity == 5
        assert line.price == 10000
        assert line.sku == "P1"
        assert line.thumbnail_url == "/thumbs/p1.webp"
        assert line.variant_label is None

    def test_repeated_adds_cap_at_stock(self, cart, plain_product):
        for _ in range(6):
            cart.add_item(plain_product, "City 350")

        assert len(cart.lines) == 1
        assert cart.lines[0].quantity == 5

    def test_restock_does_not_lift_snapshotted_cap(self, cart, plain_product):
        cart.add_item(plain_product, "City 350")

        plain_product.stock_quantity = 10
        for _ in range(8):
            cart.add_item(plain_product, "City 350")

        line = cart.lines[0]
        assert line.stock_quantity == 5
        assert line.quantity == 5

    def test_variants_of_same_product_are_distinct_lines(self, cart, variant_product, red_m, blue_l):
        cart.add_item(variant_product, "Pro 500", red_m)
        cart.add_item(variant_product, "Pro 500", blue_l)

        assert [(l.product_id, l.variant_id) for l in cart.lines] == [(2, 21), (2, 22)]
        assert [l.price for l in cart.lines] == [12000, 12500]
        assert [l.variant_label for l in cart.lines] == ["Red / M", "Blue / L"]
        assert cart.lines[0].sku == "VAR-21"
        assert cart.lines[0].variant_sku == "VAR-21"

    def test_variant_without_price_inherits_product_price(self, cart, variant_product):
        variant = make_variant(30, stock=4, Color="Green", Size="S")

        cart.add_item(variant_product, "Pro 500", variant)

        assert cart.lines[0].price == 11000
        assert cart.lines[0].stock_quantity == 4

    def test_out_of_stock_product_is_ignored(self, cart, plain_product):
        plain_product.stock_quantity = 0

        cart.add_item(plain_product, "City 350")

        assert cart.is_empty

    def test_out_of_stock_variant_is_ignored(self, cart, variant_product):
        sold_out = make_variant(31, stock=0, Color="Red", Size="L")

        cart.add_item(variant_product, "Pro 500", sold_out)

        assert cart.is_empty

    def test_variant_stock_is_used_not_product_stock(self, cart, variant_product, blue_l):
        for _ in range(5):
            cart.add_item(variant_product, "Pro 500", blue_l)

        assert cart.lines[0].quantity == 2

    def test_default_variant_line(self, cart, plain_product):
        default = plain_product.default_variant.as_variant()

        cart.add_item(plain_product, "City 350", default)

        line = cart.lines[0]
        assert line.variant_id == 10
        assert line.price == 10000
        assert line.variant_label is None

    def test_snapshot_is_not_refreshed(self, cart, plain_product):
        cart.add_item(plain_product, "City 350")

        plain_product.price = 99999
        cart.add_item(plain_product, "Renamed")

        line = cart.lines[0]
        assert line.price == 10000
        assert line.name == "City 350"
        assert line.quantity == 2

    def test_adds_never_duplicate_lines(self, cart, plain_product, variant_product, red_m, blue_l):
        rng = random.Random(7)
        targets = [
            (plain_product, None),
            (variant_product, red_m),
            (variant_product, blue_l),
        ]

        for _ in range(50):
            product, variant = rng.choice(targets)
            cart.add_item(product, product.name, variant)

        keys = [line.key for line in cart.lines]
        assert len(keys) == len(set(keys))
        assert all(1 <= l.quantity <= l.stock_quantity for l in cart.lines)


class TestUpdateQuantity:
    def test_sets_quantity(self, cart, plain_product):
        cart.add_item(plain_product, "City 350")

        cart.update_quantity(1, 3)

        assert cart.lines[0].quantity == 3

    def test_clamps_to_snapshotted_stock(self, cart, plain_product):
        cart.add_item(plain_product, "City 350")

        cart.update_quantity(1, 50)

        assert cart.lines[0].quantity == 5

    def test_zero_removes_line(self, cart, plain_product, variant_product, red_m):
        cart.add_item(plain_product, "City 350")
        cart.add_item(variant_product, "Pro 500", red_m)
        assert cart.total_items() == 2

        cart.update_quantity(1, 0)

        assert cart.get_line(1) is None
        assert cart.total_items() == 1

    def test_negative_removes_line(self, cart, plain_product):
        cart.add_item(plain_product, "City 350")

        cart.update_quantity(1, -4)

        assert cart.is_empty

    def test_targets_variant_line_only(self, cart, variant_product, red_m, blue_l):
        cart.add_item(variant_product, "Pro 500", red_m)
        cart.add_item(variant_product, "Pro 500", blue_l)

        cart.update_quantity(2, 2, variant_id=22)

        assert cart.get_line(2, 21).quantity == 1
        assert cart.get_line(2, 22).quantity == 2

    def test_unknown_line_is_a_noop(self, cart, plain_product, storage):
        cart.add_item(plain_product, "City 350")
        before = storage.get_item("cart-store")

        cart.update_quantity(42, 3)

        assert cart.lines[0].quantity == 1
        assert storage.get_item("cart-store") == before


class TestRemoveAndClear:
    def test_remove_only_matching_key(self, cart, plain_product, variant_product, red_m):
        cart.add_item(plain_product, "City 350")
        cart.add_item(variant_product, "Pro 500", red_m)

        cart.remove_item(2)  # no variant-less line for product 2

        assert len(cart.lines) == 2

        cart.remove_item(2, 21)

        assert [l.key for l in cart.lines] == [(1, None)]

    def test_clear_cart(self, cart, plain_product, variant_product, red_m):
        cart.add_item(plain_product, "City 350")
        cart.add_item(variant_product, "Pro 500", red_m)

        cart.clear_cart()

        assert cart.is_empty
        assert cart.total_items() == 0
        assert cart.subtotal_centimes() == 0


class TestTotals:
    def test_subtotal_is_integer_sum(self, cart, variant_product, red_m, blue_l):
        cart.add_item(variant_product, "Pro 500", red_m)
        cart.add_item(variant_product, "Pro 500", blue_l)
        cart.add_item(variant_product, "Pro 500", blue_l)

        assert cart.subtotal_centimes() == 12000 + 2 * 12500
        assert isinstance(cart.subtotal_centimes(), int)
        assert cart.total_items() == 3

    def test_add_then_remove_restores_subtotal(self, cart, plain_product, variant_product, red_m):
        cart.add_item(plain_product, "City 350")
        before = cart.subtotal_centimes()

        cart.add_item(variant_product, "Pro 500", red_m)
        cart.remove_item(2, 21)

        assert cart.subtotal_centimes() == before


class TestPersistence:
    def test_every_change_is_flushed(self, cart, storage, plain_product):
        cart.add_item(plain_product, "City 350")

        envelope = json.loads(storage.get_item("cart-store"))

        assert envelope["version"] == CART_STORE_VERSION
        item = envelope["state"]["items"][0]
        assert item["productId"] == 1
        assert item["variantId"] is None
        assert item["stockQuantity"] == 5

    def test_reload_restores_lines(self, storage, variant_product, red_m):
        first = CartStore(storage).load()
        first.add_item(variant_product, "Pro 500", red_m)
        first.update_quantity(2, 3, variant_id=21)

        second = CartStore(storage).load()

        assert second.lines == first.lines

    def test_write_failure_keeps_state(self, plain_product, caplog):
        class FailingStorage:
            def get_item(self, name):
                return None

            def set_item(self, name, value):
                raise OSError("disk full")

        cart = CartStore(FailingStorage()).load()

        cart.add_item(plain_product, "City 350")

        assert cart.total_items() == 1
        assert "Failed to persist cart" in caplog.text

    def test_separate_store_names_do_not_collide(self, storage, plain_product):
        CartStore(storage, name="a").load().add_item(plain_product, "City 350")

        assert CartStore(storage, name="b").load().is_empty
