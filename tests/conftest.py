import httpx
import pytest
import pytest_asyncio

from storefront.core.cart_store import CartStore
from storefront.core.storage import MemoryStorage
from storefront.models.product import (
    AttributeValue,
    DefaultVariant,
    Product,
    ProductImage,
    ProductVariant,
)
from storefront.services.api_client import StorefrontClient
from mock_api.database import delivery_zone_db, order_db, product_db
from mock_api.main import app as mock_app


def make_variant(variant_id, stock, price=None, **attributes):
    return ProductVariant(
        id=variant_id,
        sku=f"VAR-{variant_id}",
        price=price,
        stock=stock,
        attribute_values=[
            AttributeValue(attribute=name, value=value) for name, value in attributes.items()
        ],
    )


@pytest.fixture
def plain_product():
    """P1: stock 5, no variants"""
    return Product(
        id=1,
        sku="P1",
        name="City 350",
        slug="city-350",
        price=10000,
        stock_quantity=5,
        images=[ProductImage(id=1, thumbnail="/thumbs/p1.webp")],
        default_variant=DefaultVariant(id=10, sku="P1", price=10000, stock=5),
    )


@pytest.fixture
def red_m():
    return make_variant(21, stock=3, price=12000, Color="Red", Size="M")


@pytest.fixture
def blue_l():
    return make_variant(22, stock=2, price=12500, Color="Blue", Size="L")


@pytest.fixture
def variant_product(red_m, blue_l):
    """P2: two variants over Color x Size"""
    return Product(
        id=2,
        sku="P2",
        name="Pro 500",
        slug="pro-500",
        price=11000,
        stock_quantity=0,
        variants=[red_m, blue_l],
    )


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def cart(storage):
    return CartStore(storage).load()


@pytest.fixture(autouse=True)
def reset_mock_api():
    """Fresh mock catalog, zones and orders for every test"""
    product_db.reset()
    delivery_zone_db.reset()
    order_db.reset()
    yield


@pytest_asyncio.fixture
async def http_client():
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=mock_app), base_url="http://test"
    ) as client:
        yield client


@pytest_asyncio.fixture
async def api_client(http_client):
    client = StorefrontClient("http://test/api", locale="fr", http_client=http_client)
    yield client
    await client.close()
