"""Application service: Register Item use case.

The record is committed before the photo is written, so a failure in
between leaves a record without a photo rather than an orphaned blob.
"""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.model.photo import PhotoSource, ensure_jpeg, is_empty
from ims.domain.model.record import require_name
from ims.domain.repository.inventory_store import InventoryStore


class RegisterItemHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(
        self,
        name: str | None,
        description: str | None = None,
        photo: PhotoSource | None = None,
    ) -> ItemDTO:
        name = require_name(name)

        if photo is not None and is_empty(photo):
            photo = None
        if photo is not None:
            ensure_jpeg(photo)

        record = self._store.create(
            name, description or "", has_photo=photo is not None
        )
        if photo is not None:
            self._store.write_photo(record.id, photo)
        return ItemDTO.from_record(record)
