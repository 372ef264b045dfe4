"""Application service: Update Item use case."""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.exceptions import NotFoundError
from ims.domain.model.record import RecordPatch
from ims.domain.repository.inventory_store import InventoryStore


class UpdateItemHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, item_id: int, patch: RecordPatch) -> ItemDTO:
        """Apply the non-blank fields of ``patch`` to the item.

        Blank fields are ignored, so a description cannot be cleared
        this way.
        """
        record = self._store.update(item_id, patch)
        if record is None:
            raise NotFoundError(f"Item #{item_id} not found")
        return ItemDTO.from_record(record)
