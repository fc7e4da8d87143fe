"""
Local persistence for client-side state.

State is stored as a versioned JSON envelope, the same shape the browser
storefront keeps in localStorage:

    {"state": {"items": [...]}, "version": 2}

When the stored version is older than CART_STORE_VERSION the state goes
through migrate_cart_state() once at load time. Anything unreadable loads as
an empty cart.
"""

import os
import json
import logging
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from ..models.cart import CartLine, CartState

logger = logging.getLogger(__name__)

# v1: lines keyed by product only
# v2: lines carry variantId / variantSku / variantLabel
CART_STORE_VERSION = 2


class MemoryStorage:
    """In-memory key/value storage"""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(initial or {})

    def get_item(self, name: str) -> Optional[str]:
        return self.data.get(name)

    def set_item(self, name: str, value: str) -> None:
        self.data[name] = value

    def remove_item(self, name: str) -> None:
        self.data.pop(name, None)


class JSONFileStorage:
    """Key/value storage with one JSON file per key under a directory"""

    def __init__(self, directory: str | os.PathLike):
        self.directory = Path(directory)

    def _path(self, name: str) -> Path:
        return self.directory / f"{name}.json"

    def get_item(self, name: str) -> Optional[str]:
        path = self._path(name)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, name: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_path, self._path(name))
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def remove_item(self, name: str) -> None:
        path = self._path(name)
        if path.exists():
            path.unlink()


def migrate_cart_state(state: dict[str, Any], version: int) -> dict[str, Any]:
    """
    Bring a persisted cart state up to CART_STORE_VERSION.

    Pure: returns a new dict and leaves the input untouched.

    Args:
        state: The "state" part of the stored envelope
        version: Version the state was written with

    Returns:
        State in the current schema
    """
    items = state.get("items") or []
    if not isinstance(items, list):
        # Left for validation to reject
        return dict(state)
    if version < 2:
        # Lines written before variant tracking are default-variant lines
        items = [
            {**item, "variantId": item.get("variantId", item.get("variant_id"))}
            if isinstance(item, dict) else item
            for item in items
        ]
    return {**state, "items": list(items)}


def load_cart_state(storage, name: str) -> CartState:
    """Read, migrate and validate a persisted cart. Falls back to empty."""
    try:
        raw = storage.get_item(name)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read cart store '{name}': {e}")
        return CartState()

    if raw is None:
        return CartState()

    try:
        envelope = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Discarding corrupt cart store '{name}': {e}")
        return CartState()

    if not isinstance(envelope, dict) or not isinstance(envelope.get("state", {}), dict):
        logger.warning(f"Discarding cart store '{name}': unexpected shape")
        return CartState()

    version = envelope.get("version", 0)
    if not isinstance(version, int) or isinstance(version, bool) or version > CART_STORE_VERSION:
        logger.warning(f"Discarding cart store '{name}': unsupported version {version!r}")
        return CartState()

    state = envelope.get("state", {})
    if version < CART_STORE_VERSION:
        logger.info(f"Migrating cart store '{name}' from v{version} to v{CART_STORE_VERSION}")
        state = migrate_cart_state(state, version)

    try:
        return CartState.model_validate(state)
    except ValidationError as e:
        logger.warning(f"Discarding invalid cart store '{name}': {e.error_count()} error(s)")
        return CartState()


def dump_cart_state(lines: list[CartLine] | tuple[CartLine, ...]) -> str:
    """Serialize lines into the current versioned envelope"""
    envelope = {
        "state": {"items": [line.model_dump(by_alias=True) for line in lines]},
        "version": CART_STORE_VERSION,
    }
    return json.dumps(envelope)
