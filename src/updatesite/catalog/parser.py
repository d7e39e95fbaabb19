# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Parse update-center catalog documents into :class:`Catalog` snapshots."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from updatesite.core.constants import JSONP_CALLBACK
from updatesite.core.exceptions import CatalogFormatError
from updatesite.models.plugin import Catalog, CoreRelease, PluginDescriptor

logger = logging.getLogger("updatesite.catalog.parser")


def unwrap_jsonp(text: str) -> str:
    """Return the JSON payload of ``updateCenter.post(...)`` or *text* unchanged."""
    body = text.strip()
    if not body.startswith(JSONP_CALLBACK):
        return body
    start = body.find("(")
    end = body.rfind(")")
    if start == -1 or end <= start:
        raise CatalogFormatError("Unterminated JSONP wrapper in catalog document")
    return body[start + 1 : end].strip()


def parse_catalog(text: str, *, site_id: str | None = None) -> Catalog:
    """Parse an update-center JSON (or JSONP) document.

    Raises :class:`CatalogFormatError` if the document is not valid JSON or
    a plugin entry lacks a version.
    """
    try:
        data = json.loads(unwrap_jsonp(text))
    except json.JSONDecodeError as exc:
        raise CatalogFormatError(f"Catalog document is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise CatalogFormatError("Catalog document must be a JSON object")

    return catalog_from_dict(data, site_id=site_id)


def catalog_from_dict(data: Mapping[str, Any], *, site_id: str | None = None) -> Catalog:
    raw_plugins = data.get("plugins") or {}
    if not isinstance(raw_plugins, dict):
        raise CatalogFormatError("'plugins' must be a JSON object")

    plugins: dict[str, PluginDescriptor] = {}
    for key, entry in raw_plugins.items():
        if not isinstance(entry, dict):
            raise CatalogFormatError(f"Plugin entry {key!r} must be a JSON object")
        plugin_id = entry.get("name") or key
        fields = {k: v for k, v in entry.items() if k != "name"}
        try:
            plugins[plugin_id] = PluginDescriptor.model_validate({**fields, "id": plugin_id})
        except ValidationError as exc:
            raise CatalogFormatError(f"Invalid plugin entry {key!r}: {exc}") from exc

    core: CoreRelease | None = None
    raw_core = data.get("core")
    if isinstance(raw_core, dict) and raw_core.get("version"):
        core = CoreRelease.model_validate(raw_core)

    catalog = Catalog(
        site_id=data.get("id") or site_id,
        connection_check_url=data.get("connectionCheckUrl"),
        core=core,
        plugins=plugins,
    )
    logger.debug("Parsed catalog %s with %d plugins", catalog.site_id, len(catalog))
    return catalog


def attach_installed(catalog: Catalog, installed: Mapping[str, str]) -> Catalog:
    """Return a copy of *catalog* with ``installed_version`` taken from *installed*.

    Descriptors whose id is not in *installed* end up not installed.
    """
    plugins = {
        plugin_id: descriptor.model_copy(
            update={"installed_version": installed.get(plugin_id)}
        )
        for plugin_id, descriptor in catalog.plugins.items()
    }
    return catalog.model_copy(update={"plugins": plugins})
