# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Catalog document storage."""

from updatesite.storage.datafile import DataFile

__all__ = ["DataFile"]
