# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for updatesite."""


class UpdateSiteError(Exception):
    """Base exception for all updatesite errors."""


class ConfigurationError(UpdateSiteError):
    """Invalid or missing configuration."""


class VersionParseError(UpdateSiteError):
    """A non-empty version string could not be parsed."""

    def __init__(self, version: str) -> None:
        super().__init__(f"Invalid version string: {version!r}")
        self.version = version


class CatalogFormatError(UpdateSiteError):
    """Failed to parse an update-center catalog document."""


class StorageError(UpdateSiteError):
    """Reading or writing a stored catalog document failed."""


class FetchError(UpdateSiteError):
    """Failed to fetch a catalog document from the update site URL."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
