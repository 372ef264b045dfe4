"""Application service: Get Photo use case (query)."""

from __future__ import annotations

from ims.domain.exceptions import NotFoundError
from ims.domain.repository.inventory_store import InventoryStore


class GetPhotoHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, item_id: int) -> bytes:
        data = self._store.read_photo(item_id)
        if data is None:
            raise NotFoundError(f"Photo for item #{item_id} not found")
        return data
