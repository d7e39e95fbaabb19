# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Installed and updatable plugins of a catalog snapshot."""

from __future__ import annotations

from updatesite.models.plugin import Catalog, PluginDescriptor
from updatesite.plugins.versions import is_newer


def list_installed(catalog: Catalog | None) -> list[PluginDescriptor]:
    """Return the installed descriptors of *catalog* in catalog order.

    An unavailable catalog (``None``) yields an empty list.
    """
    if catalog is None:
        return []
    return [p for p in catalog.descriptors() if p.installed]


def list_updatable(catalog: Catalog | None) -> list[PluginDescriptor]:
    """Return installed descriptors whose catalog version is newer.

    An unavailable catalog (``None``) yields an empty list.  A version that
    cannot be parsed raises :class:`~updatesite.core.exceptions.VersionParseError`.
    """
    if catalog is None:
        return []  # fail to determine
    return [
        p
        for p in catalog.descriptors()
        if p.installed and is_newer(p.version, p.installed_version)
    ]
