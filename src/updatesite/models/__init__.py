# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for updatesite."""

from updatesite.models.plugin import Catalog, CoreRelease, PluginDependency, PluginDescriptor

__all__ = [
    "Catalog",
    "CoreRelease",
    "PluginDependency",
    "PluginDescriptor",
]
