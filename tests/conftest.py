# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "catalogs"
UPDATE_CENTER_JSONP = FIXTURES_DIR / "update-center.json"


@pytest.fixture
def catalog_document() -> str:
    """The sample update-center document, JSONP-wrapped."""
    return UPDATE_CENTER_JSONP.read_text(encoding="utf-8")


@pytest.fixture
def installed_manifest(tmp_path) -> Path:
    """Manifest with git behind the catalog and cvs up to date."""
    path = tmp_path / "installed.json"
    path.write_text(json.dumps({"git": "1.1.4", "cvs": "1.3", "not-in-catalog": "2.0"}))
    return path


@pytest.fixture
def site_env(tmp_path, monkeypatch, installed_manifest) -> Path:
    """Point settings at a temporary root directory and the test manifest."""
    root = tmp_path / "home"
    root.mkdir()
    monkeypatch.setenv("UPDATESITE_ROOT_DIR", str(root))
    monkeypatch.setenv("UPDATESITE_SITE_ID", "simple")
    monkeypatch.setenv("UPDATESITE_INSTALLED_MANIFEST", str(installed_manifest))
    monkeypatch.setenv("UPDATESITE_ENTRY_POINT_GROUP", "updatesite.tests.none")
    monkeypatch.setenv("UPDATESITE_LOG_LEVEL", "ERROR")
    monkeypatch.delenv("UPDATESITE_API_KEYS", raising=False)
    monkeypatch.delenv("UPDATESITE_UPDATE_SITE_URL", raising=False)
    return root
