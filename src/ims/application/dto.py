"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.record import InventoryRecord


@dataclass(frozen=True)
class ItemDTO:
    """Output: a record as shown to the client.

    ``photo_reference`` is None when the caller asked for the short form.
    """

    id: int
    inventory_name: str
    description: str
    photo_reference: str | None = None

    @classmethod
    def from_record(cls, record: InventoryRecord, with_photo: bool = True) -> ItemDTO:
        return cls(
            id=record.id,
            inventory_name=record.inventory_name,
            description=record.description,
            photo_reference=record.photo_reference if with_photo else None,
        )

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "inventory_name": self.inventory_name,
            "description": self.description,
        }
        if self.photo_reference is not None:
            data["photo_reference"] = self.photo_reference
        return data
