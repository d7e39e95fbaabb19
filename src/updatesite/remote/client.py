# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Async HTTP client for downloading update-site catalog documents."""

from __future__ import annotations

import logging

import httpx

from updatesite import __version__
from updatesite.core.exceptions import FetchError

logger = logging.getLogger("updatesite.remote.client")

_TIMEOUT = 30.0
_USER_AGENT = f"simple-updatesite/{__version__}"


def _check_response(resp: httpx.Response, context: str = "") -> None:
    """Raise :class:`FetchError` for non-2xx responses."""
    if resp.is_success:
        return
    msg = f"{context}: HTTP {resp.status_code}" if context else f"HTTP {resp.status_code}"
    body = resp.text[:200]
    if body:
        msg = f"{msg} - {body}"
    raise FetchError(msg, status_code=resp.status_code)


class UpdateSiteClient:
    """Fetches catalog documents over HTTP.

    Parameters
    ----------
    timeout:
        HTTP timeout in seconds.
    """

    def __init__(self, timeout: float = _TIMEOUT) -> None:
        self.timeout = timeout

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers={"User-Agent": _USER_AGENT},
            follow_redirects=True,
        )

    async def fetch(self, url: str) -> str:
        """Return the body of the document at *url*."""
        logger.info("Fetching catalog document from %s", url)
        try:
            async with self._client() as client:
                resp = await client.get(url)
        except httpx.HTTPError as exc:
            raise FetchError(f"fetch {url}: {exc}") from exc

        _check_response(resp, f"fetch {url}")
        return resp.text
