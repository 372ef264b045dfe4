"""Photo blobs attached to inventory records.

A photo is either raw bytes or a path to a staged upload on disk. Both
must be JPEG: the content has to open with the SOI marker.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from ims.domain.exceptions import ValidationError

PhotoSource = Union[bytes, Path]

JPEG_MAGIC = b"\xff\xd8\xff"


def is_empty(source: PhotoSource | None) -> bool:
    """True when there is nothing to store."""
    if source is None:
        return True
    if isinstance(source, Path):
        return not source.is_file() or source.stat().st_size == 0
    return len(source) == 0


def _header(source: PhotoSource) -> bytes:
    if isinstance(source, Path):
        with source.open("rb") as fh:
            return fh.read(len(JPEG_MAGIC))
    return bytes(source[: len(JPEG_MAGIC)])


def ensure_jpeg(source: PhotoSource) -> None:
    """Raise ValidationError unless ``source`` holds JPEG data."""
    if is_empty(source):
        raise ValidationError("Photo is empty")
    if _header(source) != JPEG_MAGIC:
        raise ValidationError("Photo must be a JPEG image")
