# Database modules

from .products import product_db, ProductDatabase
from .orders import order_db, OrderDatabase
from .delivery_zones import delivery_zone_db, DeliveryZoneDatabase

__all__ = [
    "product_db",
    "ProductDatabase",
    "order_db",
    "OrderDatabase",
    "delivery_zone_db",
    "DeliveryZoneDatabase",
]
