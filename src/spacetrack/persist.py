"""Persist fetched rows to the work directory.

Two layouts are supported:

- one file per batch: ``Spacetrack_record_<unix-time>.<ext>``
- one file per row: ``Spacetrack_record_<index>.<ext>``, after removing the
  records a previous run left in the same folder
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Sequence

from .query.types import Format
from .writers import encode

logger = logging.getLogger(__name__)

FILE_NAME = "Spacetrack_record_"
FILE_FORMAT = "{:016d}"


def build_filepath(index: int, folder: Path, fmt: Format) -> Path:
    return folder / f"{FILE_NAME}{FILE_FORMAT.format(index)}.{fmt.extension}"


def clean_up(folder: Path) -> int:
    """Delete previous record files in ``folder``; returns how many went."""
    removed = 0
    for f in folder.glob(f"{FILE_NAME}*"):
        try:
            f.unlink()
            removed += 1
        except OSError as e:
            logger.warning(
                "trying to delete a file while cleaning up the folder %s: %s (%s)",
                folder,
                f,
                e,
            )
    return removed


class Persister(ABC):
    """Base persister: serializes rows with the configured format."""

    def __init__(self, fmt: Format, kind: str = "tle"):
        self.format = fmt
        self.kind = kind

    def write(self, path: Path, records: Sequence[Dict[str, Any]]) -> None:
        data = encode(records, self.format, self.kind)
        logger.info("writing to file %s (%d bytes)", path, len(data))
        path.write_bytes(data)

    @abstractmethod
    def persist(self, folder: Path | str, records: Sequence[Dict[str, Any]]) -> int:
        """Write ``records`` under ``folder``; returns the number of files written."""


class OneFilePersister(Persister):
    """Write the whole batch into a single file named after the current time."""

    def persist(self, folder: Path | str, records: Sequence[Dict[str, Any]]) -> int:
        folder = Path(folder)
        folder.mkdir(parents=True, exist_ok=True)
        self.write(build_filepath(int(time.time()), folder, self.format), records)
        return 1


class OneFilePerRowPersister(Persister):
    """Write each row into its own numbered file."""

    def persist(self, folder: Path | str, records: Sequence[Dict[str, Any]]) -> int:
        folder = Path(folder)
        if folder.exists():
            clean_up(folder)
        folder.mkdir(parents=True, exist_ok=True)

        written = 0
        for i, record in enumerate(records):
            path = build_filepath(i, folder, self.format)
            try:
                self.write(path, [record])
            except OSError as e:
                logger.error("trying to write file %s to system: %s", path, e)
                continue
            written += 1

        logger.info("persisted %d files into %s", written, folder)
        return written


def get_persister(one_file: bool, fmt: Format, kind: str = "tle") -> Persister:
    if one_file:
        return OneFilePersister(fmt, kind)
    return OneFilePerRowPersister(fmt, kind)


def batch_folder(work_dir: Path | str, kind: str, stamp: int | None = None) -> Path:
    """``<work_dir>/spacetrack-<kind>/<unix-time>``."""
    stamp = int(time.time()) if stamp is None else stamp
    return Path(work_dir) / f"spacetrack-{kind}" / str(stamp)


__all__ = [
    "FILE_NAME",
    "OneFilePerRowPersister",
    "OneFilePersister",
    "Persister",
    "batch_folder",
    "build_filepath",
    "clean_up",
    "get_persister",
]
