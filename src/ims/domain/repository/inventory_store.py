"""Abstract store for InventoryRecord aggregates and their photos.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory) live
elsewhere.

Absence is signalled with ``None``; failures raise subclasses of
``StorageError`` or ``ValidationError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from ims.domain.model.photo import PhotoSource
from ims.domain.model.record import InventoryRecord, RecordPatch, next_id


class InventoryStore(ABC):

    # --- Collection -----------------------------------------------------------

    @abstractmethod
    def initialize(self) -> None:
        """Create empty backing storage if it does not exist yet."""

    @abstractmethod
    def load(self) -> list[InventoryRecord]:
        """Return every record in stored order."""

    @abstractmethod
    def save(self, records: list[InventoryRecord]) -> None:
        """Replace the whole collection with ``records``."""

    def next_id(self, records: list[InventoryRecord]) -> int:
        """Return the ID a new record appended to ``records`` would get."""
        return next_id(records)

    # --- Records --------------------------------------------------------------

    @abstractmethod
    def create(
        self, name: str, description: str = "", has_photo: bool = False
    ) -> InventoryRecord:
        """Register a new record and return it."""

    @abstractmethod
    def find_by_id(self, item_id: int) -> InventoryRecord | None:
        """Return the record with ``item_id``, or None."""

    @abstractmethod
    def update(self, item_id: int, patch: RecordPatch) -> InventoryRecord | None:
        """Apply a partial update; return the record, or None if absent."""

    @abstractmethod
    def delete(self, item_id: int) -> bool:
        """Remove the record if present. Return whether anything was removed."""

    # --- Photos ---------------------------------------------------------------

    @abstractmethod
    def photo_path_for(self, item_id: int) -> Path:
        """Return where the photo for ``item_id`` lives (may not exist)."""

    @abstractmethod
    def photo_exists(self, item_id: int) -> bool:
        """Return True if a photo is stored for ``item_id``."""

    @abstractmethod
    def write_photo(self, item_id: int, source: PhotoSource) -> None:
        """Store ``source`` as the photo for ``item_id``, replacing any prior one."""

    @abstractmethod
    def read_photo(self, item_id: int) -> bytes | None:
        """Return the photo bytes for ``item_id``, or None."""
