# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Request-scoped dependencies shared by the update site routes."""

from __future__ import annotations

from fastapi import Depends, HTTPException

from updatesite.core.config import Settings, get_settings
from updatesite.core.exceptions import StorageError
from updatesite.site import UpdateSite


def get_app_settings() -> Settings:
    """Settings for the current request, resolved once and shared by its dependencies."""
    return get_settings()


def get_update_site(
    site_id: str,
    settings: Settings = Depends(get_app_settings),
) -> UpdateSite:
    """Build the :class:`UpdateSite` for *site_id*.

    An id that cannot name a data file (``..``, one containing a path
    separator) does not identify any site and yields 404.
    """
    try:
        return UpdateSite.from_settings(settings, site_id=site_id)
    except StorageError as exc:
        raise HTTPException(status_code=404, detail=f"Unknown update site: {site_id!r}") from exc
