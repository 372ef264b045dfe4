"""Application service: Search Item use case (query).

Search takes its input the way an HTML form submits it: the ID as text
and the "include photo" checkbox as one of a few truthy strings.
"""

from __future__ import annotations

from ims.application.dto import ItemDTO
from ims.domain.exceptions import NotFoundError, ValidationError
from ims.domain.repository.inventory_store import InventoryStore

PHOTO_FLAG_VALUES = frozenset({"1", "on", "true"})


def wants_photo(flag: str | bool | None) -> bool:
    """Interpret the has_photo form field."""
    if isinstance(flag, bool):
        return flag
    return flag in PHOTO_FLAG_VALUES


class SearchItemHandler:

    def __init__(self, store: InventoryStore) -> None:
        self._store = store

    def handle(self, item_id: int | str | None, has_photo: str | bool | None = None) -> ItemDTO:
        parsed_id = self._parse_id(item_id)
        record = self._store.find_by_id(parsed_id)
        if record is None:
            raise NotFoundError(f"Item #{item_id} not found")
        return ItemDTO.from_record(record, with_photo=wants_photo(has_photo))

    @staticmethod
    def _parse_id(raw: int | str | None) -> int:
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        if raw is None or not str(raw).strip():
            raise ValidationError("id is required")
        try:
            return int(str(raw).strip())
        except ValueError:
            # Nothing can match a non-numeric ID.
            raise NotFoundError(f"Item #{raw} not found")
