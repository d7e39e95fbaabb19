# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""An update site: stored catalog, installed plugins, and available updates."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from updatesite.catalog.base import CatalogSource
from updatesite.catalog.parser import attach_installed, parse_catalog
from updatesite.core.exceptions import CatalogFormatError, ConfigurationError
from updatesite.models.plugin import Catalog
from updatesite.plugins.registry import InstalledRegistry
from updatesite.plugins.versions import is_newer
from updatesite.storage.datafile import DataFile

if TYPE_CHECKING:
    from updatesite.core.config import Settings
    from updatesite.remote.client import UpdateSiteClient

logger = logging.getLogger("updatesite.site")


class UpdateSite(CatalogSource):
    """Catalog and update information for one site.

    Typical usage::

        site = UpdateSite.from_settings(get_settings())
        await site.update_directly(UpdateSiteClient())
        for plugin in site.get_updates():
            print(plugin.id, plugin.installed_version, "->", plugin.version)
    """

    def __init__(
        self,
        site_id: str,
        *,
        root_dir: str | Path,
        url: str | None = None,
        registry: Mapping[str, str] | None = None,
    ) -> None:
        self.id = site_id
        self.url = url or None
        self.registry: Mapping[str, str] = registry if registry is not None else InstalledRegistry()
        self.data_file = DataFile(root_dir, site_id)

    @classmethod
    def from_settings(cls, settings: Settings, site_id: str | None = None) -> UpdateSite:
        registry = InstalledRegistry.discover(
            manifest_path=settings.installed_manifest,
            entry_point_group=settings.entry_point_group or None,
        )
        return cls(
            site_id or settings.site_id,
            root_dir=settings.root_dir,
            url=settings.update_site_url,
            registry=registry,
        )

    # -- catalog -----------------------------------------------------------

    def get_data(self) -> Catalog | None:
        """Return the stored catalog with installed versions attached.

        ``None`` when nothing has been stored yet or the stored document
        cannot be parsed.
        """
        text = self.data_file.read()
        if text is None:
            return None
        try:
            catalog = parse_catalog(text, site_id=self.id)
        except CatalogFormatError:
            logger.warning("Stored catalog for site %s is unreadable", self.id, exc_info=True)
            return None
        return attach_installed(catalog, self.registry)

    def is_newer_plugin(self, new_version: str, installed_version: str) -> bool:
        return is_newer(new_version, installed_version)

    # -- receiving ---------------------------------------------------------

    def post_back(self, document: str | None) -> bool:
        """Store *document* verbatim unless it is blank.

        Returns ``True`` if the document was stored.
        """
        if not document or not document.strip():
            logger.debug("Ignoring blank catalog document for site %s", self.id)
            return False
        self.data_file.write(document)
        return True

    def is_due(self, interval: float, now: float | None = None) -> bool:
        """Whether the stored document is missing or older than *interval* seconds."""
        stamp = self.data_file.timestamp()
        if stamp is None:
            return True
        current = time.time() if now is None else now
        return current - stamp >= interval

    async def update_directly(self, client: UpdateSiteClient) -> bool:
        """Download the catalog from :attr:`url` and store it.

        The document must parse as a catalog; a :class:`CatalogFormatError`
        leaves the previously stored document in place.
        """
        if not self.url:
            raise ConfigurationError(f"No update site URL configured for site {self.id}")
        document = await client.fetch(self.url)
        parse_catalog(document, site_id=self.id)
        return self.post_back(document)
