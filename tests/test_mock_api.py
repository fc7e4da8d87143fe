import pytest

from mock_api.database import product_db


@pytest.mark.asyncio
async def test_health(http_client):
    response = await http_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_order_decrements_variant_stock(http_client):
    response = await http_client.post("/api/orders", json={
        "phone": "0612345678",
        "city": "Casablanca",
        "items": [{"product_id": 2, "variant_id": 201, "quantity": 2}],
    })

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["items"][0]["unit_price"] == 1200000
    assert data["total"] == 2 * 1200000 + 2000
    variant = next(v for v in product_db.get_product("trottinette-pro").variants if v.id == 201)
    assert variant.stock == 1


@pytest.mark.asyncio
async def test_order_rejects_inactive_or_unknown_variant(http_client):
    product_db.get_product("trottinette-pro").variants[0].is_active = False

    response = await http_client.post("/api/orders", json={
        "phone": "0612345678",
        "city": "Casablanca",
        "items": [{"product_id": 2, "variant_id": 201, "quantity": 1}],
    })

    assert response.status_code == 422
    assert response.json()["detail"] == "Variant 201 not available"


@pytest.mark.asyncio
async def test_failed_order_does_not_touch_stock(http_client):
    response = await http_client.post("/api/orders", json={
        "phone": "0612345678",
        "city": "Casablanca",
        "items": [
            {"product_id": 1, "variant_id": None, "quantity": 1},
            {"product_id": 2, "variant_id": 202, "quantity": 3},
        ],
    })

    assert response.status_code == 422
    assert product_db.get_product("trottinette-city-350").stock_quantity == 5
