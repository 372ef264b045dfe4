"""Application service: Show Item use case (query)."""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.exceptions import NotFoundError
from ims.domain.repository.inventory_store import InventoryStore


class ShowItemHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, item_id: int) -> ItemDTO:
        record = self._store.find_by_id(item_id)
        if record is None:
            raise NotFoundError(f"Item #{item_id} not found")
        return ItemDTO.from_record(record)
