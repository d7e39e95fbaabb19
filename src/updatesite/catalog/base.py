# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Abstract catalog source and an in-memory implementation."""

from __future__ import annotations

import abc

from updatesite.models.plugin import Catalog, PluginDescriptor
from updatesite.plugins.detector import list_installed, list_updatable


class CatalogSource(abc.ABC):
    """Anything that can hand out a catalog snapshot.

    Subclasses implement :meth:`get_data`; the installed and updatable
    listings are computed from whatever snapshot it returns.
    """

    @abc.abstractmethod
    def get_data(self) -> Catalog | None:
        """Return the current catalog snapshot.

        Returns:
            The catalog, or ``None`` when it is unavailable (for example
            not fetched yet).
        """

    def get_installed(self) -> list[PluginDescriptor]:
        return list_installed(self.get_data())

    def get_updates(self) -> list[PluginDescriptor]:
        """Installed plugins with a newer catalog version. Never ``None``."""
        return list_updatable(self.get_data())


class StaticCatalogSource(CatalogSource):
    """Serves a fixed, already materialized catalog."""

    def __init__(self, catalog: Catalog | None) -> None:
        self._catalog = catalog

    def get_data(self) -> Catalog | None:
        return self._catalog
