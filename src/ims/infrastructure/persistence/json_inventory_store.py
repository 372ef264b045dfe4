"""JSON-file-backed implementation of InventoryStore.

Layout under the cache directory::

    inventory.json      JSON array of record objects
    .last_id            highest ID ever assigned, as decimal text
    photos/<id>.jpg     one blob per record that has a photo

Every operation re-reads the file. A single re-entrant lock per store
instance covers each load -> mutate -> save cycle; separate instances or
processes sharing a cache directory are not coordinated and the last
write wins.
"""

from __future__ import annotations

import json
import os
import shutil
import tempfile
import threading
from pathlib import Path

import structlog

from ims.domain.exceptions import StorageCorruptError, StorageError, StorageWriteError
from ims.domain.model.photo import PhotoSource, ensure_jpeg
from ims.domain.model.record import InventoryRecord, RecordPatch, require_name
from ims.domain.repository.inventory_store import InventoryStore

INVENTORY_FILE = "inventory.json"
LAST_ID_FILE = ".last_id"
PHOTOS_DIR = "photos"
PHOTO_SUFFIX = ".jpg"

logger = structlog.get_logger(__name__)


class JsonInventoryStore(InventoryStore):

    def __init__(self, cache_dir: Path) -> None:
        self._cache_dir = cache_dir
        self._file_path = cache_dir / INVENTORY_FILE
        self._last_id_path = cache_dir / LAST_ID_FILE
        self._photos_dir = cache_dir / PHOTOS_DIR
        self._lock = threading.RLock()
        self.initialize()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def photos_dir(self) -> Path:
        return self._photos_dir

    # --- InventoryStore interface ---------------------------------------------

    def initialize(self) -> None:
        with self._lock:
            try:
                self._photos_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise StorageWriteError(
                    f"Cannot create {self._photos_dir}: {exc}"
                ) from exc
            if not self._file_path.exists():
                self._persist_raw([])
                logger.info("inventory_initialized", path=str(self._file_path))

    def load(self) -> list[InventoryRecord]:
        with self._lock:
            return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, records: list[InventoryRecord]) -> None:
        with self._lock:
            self._persist_raw([self._to_raw(r) for r in records])

    def create(
        self, name: str, description: str = "", has_photo: bool = False
    ) -> InventoryRecord:
        name = require_name(name)
        with self._lock:
            records = self.load()
            item_id = max(self.next_id(records), self._load_last_id() + 1)
            record = InventoryRecord(
                id=item_id,
                inventory_name=name,
                description=description or "",
            )
            records.append(record)
            self.save(records)
            self._write_atomic(self._last_id_path, f"{item_id}\n".encode("ascii"))
        logger.info("item_created", item_id=item_id, has_photo=has_photo)
        return record

    def find_by_id(self, item_id: int) -> InventoryRecord | None:
        for record in self.load():
            if record.id == item_id:
                return record
        return None

    def update(self, item_id: int, patch: RecordPatch) -> InventoryRecord | None:
        with self._lock:
            records = self.load()
            for record in records:
                if record.id == item_id:
                    record.apply_patch(patch)
                    self.save(records)
                    logger.info("item_updated", item_id=item_id)
                    return record
        return None

    def delete(self, item_id: int) -> bool:
        with self._lock:
            records = self.load()
            kept = [r for r in records if r.id != item_id]
            self.save(kept)
        removed = len(kept) != len(records)
        logger.info("item_deleted", item_id=item_id, removed=removed)
        return removed

    def photo_path_for(self, item_id: int) -> Path:
        return self._photos_dir / f"{item_id}{PHOTO_SUFFIX}"

    def photo_exists(self, item_id: int) -> bool:
        return self.photo_path_for(item_id).is_file()

    def write_photo(self, item_id: int, source: PhotoSource) -> None:
        ensure_jpeg(source)
        target = self.photo_path_for(item_id)
        with self._lock:
            self._write_atomic(target, source if isinstance(source, Path) else bytes(source))
        logger.info("photo_written", item_id=item_id, path=str(target))

    def read_photo(self, item_id: int) -> bytes | None:
        path = self.photo_path_for(item_id)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageError(f"Cannot read photo {path}: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: InventoryRecord) -> dict:
        return record.to_dict()

    def _to_domain(self, raw: object) -> InventoryRecord:
        if not isinstance(raw, dict):
            raise self._corrupt(f"expected an object, got {type(raw).__name__}")

        item_id = raw.get("id")
        if isinstance(item_id, bool) or not isinstance(item_id, int) or item_id < 1:
            raise self._corrupt(f"invalid id {item_id!r}")

        name = raw.get("inventory_name")
        if not isinstance(name, str):
            raise self._corrupt(f"record {item_id} has no inventory_name")

        description = raw.get("description")
        if description is None:
            description = ""
        elif not isinstance(description, str):
            raise self._corrupt(f"record {item_id} has a non-text description")

        # photo_reference (or the older photoPath) is derived from the id
        return InventoryRecord(id=item_id, inventory_name=name, description=description)

    def _corrupt(self, reason: str) -> StorageCorruptError:
        logger.error("inventory_corrupt", path=str(self._file_path), reason=reason)
        return StorageCorruptError(f"{self._file_path} is corrupt: {reason}")

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list:
        try:
            data = self._file_path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc

        try:
            raw = json.loads(data.decode("utf-8"))
        except ValueError as exc:
            raise self._corrupt(str(exc)) from exc
        if not isinstance(raw, list):
            raise self._corrupt(f"expected a JSON array, got {type(raw).__name__}")
        return raw

    def _persist_raw(self, records: list[dict]) -> None:
        text = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
        self._write_atomic(self._file_path, text.encode("utf-8"))

    def _load_last_id(self) -> int:
        try:
            text = self._last_id_path.read_text(encoding="ascii").strip()
        except FileNotFoundError:
            return 0
        except OSError as exc:
            raise StorageError(f"Cannot read {self._last_id_path}: {exc}") from exc
        except ValueError as exc:
            raise self._corrupt(f"{LAST_ID_FILE} is not text: {exc}") from exc

        if not text.isdigit():
            raise self._corrupt(f"{LAST_ID_FILE} holds {text!r}, not an ID")
        return int(text)

    def _write_atomic(self, target: Path, data: bytes | Path) -> None:
        """Fill a sibling temp file from ``data`` and rename it over ``target``.

        ``data`` is either the bytes to write or a staged file, which is
        moved into the temp file first so a cross-device copy is never
        visible under ``target``.
        """
        tmp_path: Path | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
            )
            tmp_path = Path(tmp_name)
            if isinstance(data, Path):
                os.close(fd)
                shutil.move(str(data), tmp_name)
            else:
                with os.fdopen(fd, "wb") as fh:
                    fh.write(data)
                    fh.flush()
                    os.fsync(fh.fileno())
            os.replace(tmp_path, target)
        except OSError as exc:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            logger.error("write_failed", path=str(target), error=str(exc))
            raise StorageWriteError(f"Cannot write {target}: {exc}") from exc
