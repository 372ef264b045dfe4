"""Application service: Delete Item use case.

Deleting an unknown ID is not an error. The item's photo, if any, is
left on disk.
"""

from __future__ import annotations

from ims.domain.repository.inventory_store import InventoryStore


class DeleteItemHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, item_id: int) -> None:
        self._store.delete(item_id)
