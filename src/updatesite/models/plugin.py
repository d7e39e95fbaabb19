# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Catalog and plugin descriptor models."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field


class PluginDependency(BaseModel):
    """A dependency declared by a catalog entry."""

    name: str
    version: str = ""
    optional: bool = False

    model_config = ConfigDict(frozen=True)


class PluginDescriptor(BaseModel):
    """One catalog entry: available version plus the installed one, if any."""

    id: str = Field(min_length=1)
    version: str
    installed_version: str | None = None

    title: str | None = None
    url: str | None = None
    wiki: str | None = None
    excerpt: str | None = None
    required_core: str | None = Field(default=None, alias="requiredCore")
    build_date: str | None = Field(default=None, alias="buildDate")
    dependencies: list[PluginDependency] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def installed(self) -> bool:
        return self.installed_version is not None


class CoreRelease(BaseModel):
    """The core release advertised by an update center."""

    name: str = "core"
    version: str
    url: str | None = None

    model_config = ConfigDict(frozen=True)


class Catalog(BaseModel):
    """Snapshot of an update site's plugins, keyed by plugin id.

    Iteration follows the insertion order of the source document.
    """

    site_id: str | None = None
    connection_check_url: str | None = Field(default=None, alias="connectionCheckUrl")
    core: CoreRelease | None = None
    plugins: dict[str, PluginDescriptor] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def descriptors(self) -> Iterator[PluginDescriptor]:
        return iter(self.plugins.values())

    def __len__(self) -> int:
        return len(self.plugins)

    def __contains__(self, plugin_id: object) -> bool:
        return plugin_id in self.plugins

    def get(self, plugin_id: str) -> PluginDescriptor | None:
        return self.plugins.get(plugin_id)
