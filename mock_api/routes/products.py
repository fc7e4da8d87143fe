"""Product API routes for the mock API"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query

from ..database.products import product_db

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("")
async def search_products(
    search: Optional[str] = Query(None, alias="filter[search]", description="Search query"),
    in_stock: bool = Query(False, alias="filter[in_stock]", description="Only show in-stock items"),
    page: int = Query(1, ge=1),
    per_page: int = Query(12, ge=1, le=100),
):
    """Search products in the catalog"""
    products, total = product_db.search_products(
        search=search,
        in_stock_only=in_stock,
        page=page,
        per_page=per_page,
    )

    return {
        "data": products,
        "meta": {
            "current_page": page,
            "last_page": max(1, -(-total // per_page)),
            "per_page": per_page,
            "total": total,
        },
    }


@router.get("/{slug}")
async def get_product(slug: str):
    """Get a product by slug"""
    product = product_db.get_product(slug)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"data": product}
