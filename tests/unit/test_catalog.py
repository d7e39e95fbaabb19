# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for update-center document parsing and installed-version attachment."""

from __future__ import annotations

import json

import pytest

from updatesite.catalog.base import CatalogSource, StaticCatalogSource
from updatesite.catalog.parser import attach_installed, parse_catalog, unwrap_jsonp
from updatesite.core.exceptions import CatalogFormatError
from updatesite.models.plugin import Catalog, PluginDescriptor


class TestUnwrapJsonp:
    def test_bare_json_unchanged(self) -> None:
        assert unwrap_jsonp(' {"plugins": {}} ') == '{"plugins": {}}'

    def test_wrapper_removed(self) -> None:
        assert unwrap_jsonp('updateCenter.post(\n{"a": 1}\n);') == '{"a": 1}'

    def test_unterminated_wrapper(self) -> None:
        with pytest.raises(CatalogFormatError):
            unwrap_jsonp('updateCenter.post({"a": 1}')


class TestParseCatalog:
    def test_sample_document(self, catalog_document: str) -> None:
        catalog = parse_catalog(catalog_document)

        assert catalog.site_id == "simple"
        assert catalog.connection_check_url == "http://www.google.com/"
        assert catalog.core is not None
        assert catalog.core.version == "1.398"
        assert list(catalog.plugins) == ["git", "ant", "cvs"]

    def test_entry_fields(self, catalog_document: str) -> None:
        git = parse_catalog(catalog_document).get("git")

        assert git is not None
        assert git.title == "Git Plugin"
        assert git.version == "1.1.5"
        assert git.required_core == "1.380"
        assert git.build_date == "2011-02-10"
        assert git.dependencies[0].name == "maven-plugin"
        assert git.dependencies[0].optional is True
        assert git.installed_version is None

    def test_qualified_version_kept_verbatim(self, catalog_document: str) -> None:
        assert parse_catalog(catalog_document).plugins["ant"].version == "1.1 (beta)"

    def test_name_falls_back_to_key(self) -> None:
        catalog = parse_catalog(json.dumps({"plugins": {"foo": {"version": "1.0"}}}))
        foo = catalog.get("foo")
        assert foo is not None
        assert (foo.id, foo.version) == ("foo", "1.0")

    def test_site_id_default(self) -> None:
        catalog = parse_catalog('{"plugins": {}}', site_id="mine")
        assert catalog.site_id == "mine"
        assert len(catalog) == 0

    def test_missing_plugins_is_empty(self) -> None:
        assert len(parse_catalog("{}")) == 0

    def test_invalid_json(self) -> None:
        with pytest.raises(CatalogFormatError):
            parse_catalog("{not json")

    def test_non_object_document(self) -> None:
        with pytest.raises(CatalogFormatError):
            parse_catalog("[1, 2, 3]")

    def test_plugins_must_be_object(self) -> None:
        with pytest.raises(CatalogFormatError):
            parse_catalog('{"plugins": []}')

    def test_entry_without_version(self) -> None:
        with pytest.raises(CatalogFormatError):
            parse_catalog('{"plugins": {"foo": {"name": "foo"}}}')

    def test_entry_not_object(self) -> None:
        with pytest.raises(CatalogFormatError):
            parse_catalog('{"plugins": {"foo": "1.0"}}')


class TestAttachInstalled:
    def test_installed_versions_attached(self, catalog_document: str) -> None:
        catalog = attach_installed(parse_catalog(catalog_document), {"git": "1.1.4", "cvs": "1.3"})

        assert catalog.plugins["git"].installed_version == "1.1.4"
        assert catalog.plugins["cvs"].installed_version == "1.3"
        assert catalog.plugins["ant"].installed_version is None

    def test_unknown_installed_ids_ignored(self) -> None:
        catalog = Catalog(plugins={"a": PluginDescriptor(id="a", version="1.0")})
        attached = attach_installed(catalog, {"zzz": "1.0"})
        assert list(attached.plugins) == ["a"]
        assert attached.plugins["a"].installed_version is None

    def test_original_not_mutated(self) -> None:
        catalog = Catalog(plugins={"a": PluginDescriptor(id="a", version="1.0")})
        attach_installed(catalog, {"a": "0.9"})
        assert catalog.plugins["a"].installed_version is None

    def test_stale_installed_version_cleared(self) -> None:
        catalog = Catalog(
            plugins={"a": PluginDescriptor(id="a", version="1.0", installed_version="0.1")}
        )
        assert attach_installed(catalog, {}).plugins["a"].installed_version is None


class TestCatalogModel:
    def test_contains_and_get(self) -> None:
        catalog = Catalog(plugins={"a": PluginDescriptor(id="a", version="1.0")})
        assert "a" in catalog
        assert "b" not in catalog
        assert catalog.get("b") is None

    def test_descriptor_installed_flag(self) -> None:
        assert PluginDescriptor(id="a", version="1", installed_version="1").installed
        assert not PluginDescriptor(id="a", version="1").installed


class TestStaticCatalogSource:
    def test_unavailable(self) -> None:
        source = StaticCatalogSource(None)
        assert source.get_data() is None
        assert source.get_installed() == []
        assert source.get_updates() == []

    def test_listings(self) -> None:
        behind = PluginDescriptor(id="a", version="2.0", installed_version="1.0")
        current = PluginDescriptor(id="b", version="1.0", installed_version="1.0")
        source = StaticCatalogSource(Catalog(plugins={"a": behind, "b": current}))

        assert isinstance(source, CatalogSource)
        assert [p.id for p in source.get_installed()] == ["a", "b"]
        assert [p.id for p in source.get_updates()] == ["a"]

    def test_abstract(self) -> None:
        with pytest.raises(TypeError):
            CatalogSource()  # type: ignore[abstract]
