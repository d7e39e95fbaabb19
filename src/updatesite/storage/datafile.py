# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""On-disk storage for the last received catalog document of a site."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from updatesite.core.constants import DATA_DIR_NAME
from updatesite.core.exceptions import StorageError

logger = logging.getLogger("updatesite.storage.datafile")


class DataFile:
    """Raw catalog document stored at ``<root_dir>/updates/<site_id>.json``."""

    def __init__(self, root_dir: str | Path, site_id: str) -> None:
        if not site_id or "/" in site_id or "\\" in site_id or site_id in (".", ".."):
            raise StorageError(f"Invalid site id for data file: {site_id!r}")
        self.site_id = site_id
        self.path = Path(root_dir) / DATA_DIR_NAME / f"{site_id}.json"

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> str | None:
        """Return the stored document, or ``None`` if nothing is stored."""
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageError(f"Failed to read {self.path}: {exc}") from exc

    def write(self, text: str) -> None:
        """Atomically replace the stored document with *text*."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.site_id}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(text)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Failed to write {self.path}: {exc}") from exc
        logger.info("Stored catalog document for site %s (%d bytes)", self.site_id, len(text))

    def delete(self) -> bool:
        """Remove the stored document. Returns ``True`` if one existed."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StorageError(f"Failed to delete {self.path}: {exc}") from exc
        return True

    def timestamp(self) -> float | None:
        """Modification time of the stored document, or ``None``."""
        try:
            return self.path.stat().st_mtime
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageError(f"Failed to stat {self.path}: {exc}") from exc
