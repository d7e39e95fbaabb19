# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Update site endpoints: receive catalog documents, list installed and updatable plugins."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from updatesite.api.auth import require_api_key
from updatesite.api.deps import get_update_site
from updatesite.models.plugin import PluginDescriptor
from updatesite.site import UpdateSite

router = APIRouter()


class PluginResponse(BaseModel):
    id: str
    title: str | None = None
    version: str
    installed_version: str | None = None
    url: str | None = None


def _to_response(plugin: PluginDescriptor) -> PluginResponse:
    return PluginResponse(
        id=plugin.id,
        title=plugin.title,
        version=plugin.version,
        installed_version=plugin.installed_version,
        url=plugin.url,
    )


@router.post(
    "/updates/{site_id}/postBack",
    response_class=PlainTextResponse,
    dependencies=[Depends(require_api_key)],
)
async def post_back(
    request: Request,
    json: str | None = Query(default=None, description="Catalog document"),
    site: UpdateSite = Depends(get_update_site),
) -> PlainTextResponse:
    """Receive an update-center catalog document and store it verbatim.

    The document is read from the ``json`` query parameter, or from the raw
    request body when the parameter is absent.  Blank documents are ignored.
    Undecodable bytes in the body become U+FFFD; whether the result is a
    usable catalog is decided when it is read back.
    """
    document = json
    if not document:
        document = (await request.body()).decode("utf-8", errors="replace")
    site.post_back(document)
    return PlainTextResponse("", media_type="text/plain")


@router.get("/updates/{site_id}/installed", response_model=list[PluginResponse])
async def installed_plugins(
    site: UpdateSite = Depends(get_update_site),
) -> list[PluginResponse]:
    """List catalog plugins that are installed."""
    return [_to_response(p) for p in site.get_installed()]


@router.get("/updates/{site_id}/updates", response_model=list[PluginResponse])
async def updatable_plugins(
    site: UpdateSite = Depends(get_update_site),
) -> list[PluginResponse]:
    """List installed plugins with a newer version in the catalog."""
    return [_to_response(p) for p in site.get_updates()]
