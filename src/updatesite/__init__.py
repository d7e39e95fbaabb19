# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""updatesite - plugin update site with catalog storage and update detection."""

__version__ = "0.1.0"

from updatesite.plugins.detector import list_installed, list_updatable
from updatesite.plugins.versions import VersionNumber, is_newer, parse_version, strip_qualifiers
from updatesite.site import UpdateSite

__all__ = [
    "UpdateSite",
    "VersionNumber",
    "__version__",
    "is_newer",
    "list_installed",
    "list_updatable",
    "parse_version",
    "strip_qualifiers",
]
