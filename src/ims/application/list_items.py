"""Application service: List Items use case (query)."""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.repository.inventory_store import InventoryStore


class ListItemsHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self) -> list[ItemDTO]:
        return [ItemDTO.from_record(record) for record in self._store.load()]
