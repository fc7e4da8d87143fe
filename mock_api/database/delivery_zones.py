"""Mock delivery zones"""

from typing import Optional

from storefront.models.checkout import DeliveryZone

DELIVERY_ZONES: list[DeliveryZone] = [
    DeliveryZone(id=1, city="Casablanca", fee=2000),
    DeliveryZone(id=2, city="Rabat", fee=3000),
    DeliveryZone(id=3, city="Marrakech", fee=4500),
]


class DeliveryZoneDatabase:
    """In-memory delivery zone storage"""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.zones = [z.model_copy() for z in DELIVERY_ZONES]

    def list_zones(self) -> list[DeliveryZone]:
        return list(self.zones)

    def find_by_city(self, city: str) -> Optional[DeliveryZone]:
        """Case-insensitive lookup by city name"""
        wanted = city.strip().lower()
        return next((z for z in self.zones if z.city.lower() == wanted), None)


# Singleton instance
delivery_zone_db = DeliveryZoneDatabase()
