# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

import json

from updatesite.models.plugin import PluginDescriptor


def format_plugins_json(plugins: list[PluginDescriptor]) -> str:
    """Return *plugins* as a formatted JSON array."""
    data = [p.model_dump(mode="json", exclude_none=True) for p in plugins]
    return json.dumps(data, indent=2)
