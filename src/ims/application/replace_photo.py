"""Application service: Replace Photo use case."""

from __future__ import annotations

from ims.domain.exceptions import ValidationError
from ims.domain.model.photo import PhotoSource, is_empty
from ims.domain.repository.inventory_store import InventoryStore


class ReplacePhotoHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, item_id: int, photo: PhotoSource | None) -> None:
        """Store ``photo`` for the item, overwriting the previous one.

        The item itself is not looked up; a photo can be uploaded ahead
        of (or after deletion of) its record.
        """
        if photo is None or is_empty(photo):
            raise ValidationError("photo is required")
        self._store.write_photo(item_id, photo)
