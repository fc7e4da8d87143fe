# API Routes

from .products import router as products_router
from .orders import router as orders_router
from .delivery_zones import router as delivery_zones_router

__all__ = ["products_router", "orders_router", "delivery_zones_router"]
