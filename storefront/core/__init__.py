# Core modules

from .config import settings, get_settings
from .cart_store import CartStore
from .storage import JSONFileStorage, MemoryStorage

__all__ = ["settings", "get_settings", "CartStore", "JSONFileStorage", "MemoryStorage"]
