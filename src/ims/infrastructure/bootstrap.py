"""Composition root: wires the concrete store to the domain interface.

This is the only place in the codebase that knows which InventoryStore
implementation is used and where its files live.
"""

from __future__ import annotations

from pathlib import Path

from ims.infrastructure.persistence.json_inventory_store import JsonInventoryStore

DEFAULT_CACHE_DIR = "cache"
CACHE_DIR_ENV = "IMS_CACHE_DIR"


def resolve_cache_dir(cache_dir: str | Path) -> Path:
    """Return ``cache_dir`` as an absolute path, relative ones against the cwd."""
    path = Path(cache_dir).expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def inventory_store(cache_dir: str | Path = DEFAULT_CACHE_DIR) -> JsonInventoryStore:
    return JsonInventoryStore(resolve_cache_dir(cache_dir))
