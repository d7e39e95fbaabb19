# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Site defaults and well-known names."""

from enum import StrEnum


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"


DEFAULT_SITE_ID = "simple"
DATA_DIR_NAME = "updates"
ENTRY_POINT_GROUP = "updatesite.plugins"

# Update centers publish their catalog wrapped in this JSONP call.
JSONP_CALLBACK = "updateCenter.post"

DEFAULT_REFRESH_INTERVAL = 24 * 60 * 60  # seconds
