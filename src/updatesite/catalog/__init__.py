# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Update-center catalog documents and catalog sources."""

from updatesite.catalog.base import CatalogSource, StaticCatalogSource
from updatesite.catalog.parser import attach_installed, parse_catalog, unwrap_jsonp

__all__ = [
    "CatalogSource",
    "StaticCatalogSource",
    "attach_installed",
    "parse_catalog",
    "unwrap_jsonp",
]
