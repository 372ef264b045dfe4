"""InventoryRecord aggregate: one registered item.

Records carry only metadata. The photo lives in a separate blob keyed
by ``id``; the record exposes the URL-style reference to it but never
tracks whether the blob actually exists.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ims.domain.exceptions import ValidationError


def require_name(name: str | None) -> str:
    """Return ``name`` stripped, or raise if nothing is left."""
    if not name or not name.strip():
        raise ValidationError("inventory_name is required")
    return name.strip()


def next_id(records: Iterable[InventoryRecord]) -> int:
    """Return the ID following the highest one in ``records``.

    Works on the maximum rather than the last element, so the order of
    the collection does not matter.
    """
    return max((r.id for r in records), default=0) + 1


@dataclass(frozen=True)
class RecordPatch:
    """Partial update for a record. ``None`` or ``""`` means "keep"."""

    inventory_name: str | None = None
    description: str | None = None


@dataclass
class InventoryRecord:
    """Aggregate root for a registered item.

    Invariants:
    - ``id`` is a positive integer, unique within the collection
    - ``inventory_name`` is never blank
    """

    id: int
    inventory_name: str
    description: str = ""

    @property
    def photo_reference(self) -> str:
        return f"/inventory/{self.id}/photo"

    def apply_patch(self, patch: RecordPatch) -> None:
        """Apply a partial update.

        Blank or missing values leave the current field as it is; there
        is no way to clear a description through a patch.
        """
        if patch.inventory_name and patch.inventory_name.strip():
            self.inventory_name = patch.inventory_name.strip()
        if patch.description:
            self.description = patch.description

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "inventory_name": self.inventory_name,
            "description": self.description,
            "photo_reference": self.photo_reference,
        }

