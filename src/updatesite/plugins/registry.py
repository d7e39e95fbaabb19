# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Registry of installed plugins and their versions, from multiple sources."""

from __future__ import annotations

import importlib.metadata
import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path

from updatesite.core.constants import ENTRY_POINT_GROUP
from updatesite.core.exceptions import CatalogFormatError

logger = logging.getLogger("updatesite.plugins.registry")


class InstalledRegistry(Mapping[str, str]):
    """Read-only mapping of installed plugin id to installed version.

    Sources (merged by :meth:`discover`, later sources win):
      1. ``importlib.metadata`` entry points in the ``updatesite.plugins`` group.
      2. A JSON manifest file of the form ``{"plugin-id": "1.2.3"}``.
    """

    def __init__(self, installed: Mapping[str, str] | None = None) -> None:
        self._installed: dict[str, str] = dict(installed or {})

    def __getitem__(self, plugin_id: str) -> str:
        return self._installed[plugin_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._installed)

    def __len__(self) -> int:
        return len(self._installed)

    def as_dict(self) -> dict[str, str]:
        return dict(self._installed)

    # -- sources -----------------------------------------------------------

    @classmethod
    def load_manifest(cls, path: str | Path) -> InstalledRegistry:
        """Load a JSON manifest.  A missing file yields an empty registry."""
        manifest = Path(path)
        if not manifest.is_file():
            logger.warning("Installed-plugin manifest does not exist: %s", manifest)
            return cls()

        try:
            data = json.loads(manifest.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise CatalogFormatError(f"Invalid installed-plugin manifest {manifest}: {exc}") from exc

        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            raise CatalogFormatError(
                f"Installed-plugin manifest {manifest} must map plugin ids to version strings"
            )
        return cls(data)

    @classmethod
    def load_entry_points(cls, group: str = ENTRY_POINT_GROUP) -> InstalledRegistry:
        """Collect distributions that register entry points in *group*."""
        installed: dict[str, str] = {}
        try:
            eps = importlib.metadata.entry_points().select(group=group)
        except Exception:
            logger.debug("No entry points found for group %s", group)
            return cls()

        for ep in eps:
            dist = ep.dist
            if dist is None:
                logger.warning("Entry point %s has no distribution metadata; skipping", ep.name)
                continue
            installed[ep.name] = dist.version
        return cls(installed)

    @classmethod
    def discover(
        cls,
        *,
        manifest_path: str | Path | None = None,
        entry_point_group: str | None = None,
    ) -> InstalledRegistry:
        """Merge all configured sources; the manifest wins on conflicts."""
        installed: dict[str, str] = {}

        if entry_point_group:
            installed.update(cls.load_entry_points(entry_point_group))

        if manifest_path:
            installed.update(cls.load_manifest(manifest_path))

        for plugin_id, version in installed.items():
            logger.info("Registered installed plugin %s v%s", plugin_id, version)
        return cls(installed)
