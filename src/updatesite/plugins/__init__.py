# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Plugin version comparison, update detection, and installed-plugin registry."""

from updatesite.plugins.detector import list_installed, list_updatable
from updatesite.plugins.registry import InstalledRegistry
from updatesite.plugins.versions import VersionNumber, is_newer, parse_version, strip_qualifiers

__all__ = [
    "InstalledRegistry",
    "VersionNumber",
    "is_newer",
    "list_installed",
    "list_updatable",
    "parse_version",
    "strip_qualifiers",
]
