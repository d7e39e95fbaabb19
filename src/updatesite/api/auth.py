# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared-key guard for the catalog receive endpoint."""

from __future__ import annotations

import hmac
import logging

from fastapi import Depends, HTTPException, Security
from fastapi.security import APIKeyHeader

from updatesite.api.deps import get_app_settings
from updatesite.core.config import Settings

logger = logging.getLogger("updatesite.api.auth")

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def _matches_any(candidate: str, keys: list[str]) -> bool:
    # Every key is compared so timing does not reveal which one matched.
    supplied = candidate.encode("utf-8")
    matched = False
    for key in keys:
        matched |= hmac.compare_digest(supplied, key.encode("utf-8"))
    return matched


async def require_api_key(
    api_key: str | None = Security(_api_key_header),
    settings: Settings = Depends(get_app_settings),
) -> str | None:
    """Reject catalog uploads that do not carry a configured ``X-API-Key``.

    With no keys configured every caller may post.  Returns the accepted
    key, or ``None`` when the guard is disabled.
    """
    if not settings.api_keys:
        return None
    if not api_key:
        raise HTTPException(
            status_code=401,
            detail="Missing X-API-Key header",
            headers={"WWW-Authenticate": "APIKey"},
        )
    if not _matches_any(api_key, settings.api_keys):
        logger.warning("Rejected catalog upload with an unknown API key")
        raise HTTPException(status_code=403, detail="Invalid API key")
    return api_key
