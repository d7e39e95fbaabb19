# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Version strings: qualifier stripping, parsing, and ordering."""

from __future__ import annotations

import functools
import re

from packaging.version import InvalidVersion, Version

from updatesite.core.exceptions import VersionParseError

_QUALIFIER_RE = re.compile(r"\(.*?\)")
_MAVEN_RE = re.compile(
    r"^(?P<release>[vV]?\d+(?:\.\d+)*)"
    r"[-_.](?P<qualifier>[A-Za-z0-9]+(?:[-_.][A-Za-z0-9]+)*)$"
)
_SEPARATOR_RE = re.compile(r"[-_.]")


def _to_version(text: str) -> Version:
    """Parse *text*, accepting Maven-style suffixes that PEP 440 rejects.

    ``-SNAPSHOT`` sorts just below its release (``1.3-SNAPSHOT`` becomes
    ``1.3.dev0``).  Any other unrecognised qualifier becomes a local label,
    so ``1.0-jenkins-3`` orders just above ``1.0``.
    """
    try:
        return Version(text)
    except InvalidVersion:
        pass

    match = _MAVEN_RE.match(text)
    if match is None:
        raise VersionParseError(text)

    release = match.group("release")
    parts = _SEPARATOR_RE.split(match.group("qualifier"))
    snapshot = parts[-1].upper() == "SNAPSHOT"
    if snapshot:
        parts = parts[:-1]

    public, local = release, ""
    if parts:
        try:
            public = Version(f"{release}-{'-'.join(parts)}").public
        except InvalidVersion:
            local = ".".join(parts)

    normalized = public
    if snapshot:
        normalized += ".dev0"
    if local:
        normalized += f"+{local}"
    try:
        return Version(normalized)
    except InvalidVersion as exc:
        raise VersionParseError(text) from exc


def strip_qualifiers(version: str) -> str:
    """Remove every parenthetical group from *version* and trim whitespace.

    ``"1.2.3 (beta)"`` becomes ``"1.2.3"`` and ``"1(a).2(b)"`` becomes
    ``"1.2"``.  Applying it twice gives the same result as applying it once.
    """
    return _QUALIFIER_RE.sub("", version).strip()


@functools.total_ordering
class VersionNumber:
    """Segment-wise comparable version.

    Numeric segments compare left to right, so ``1.10 > 1.9`` and
    ``1.0 == 1.0.0``.  The empty version sorts below every other version.
    """

    __slots__ = ("text", "_parsed")

    def __init__(self, text: str) -> None:
        self.text = text.strip()
        self._parsed: Version | None = None
        if self.text:
            self._parsed = _to_version(self.text)

    @property
    def is_empty(self) -> bool:
        return self._parsed is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self._parsed == other._parsed

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        if other._parsed is None:
            return False
        if self._parsed is None:
            return True
        return self._parsed < other._parsed

    def __hash__(self) -> int:
        return hash(self._parsed)

    def __repr__(self) -> str:
        return f"VersionNumber({self.text!r})"

    def __str__(self) -> str:
        return self.text


def parse_version(version: str) -> VersionNumber:
    """Strip qualifiers from *version* and parse it.

    Raises :class:`VersionParseError` for a non-empty string that is not a
    valid version.
    """
    return VersionNumber(strip_qualifiers(version))


def is_newer(candidate: str, baseline: str) -> bool:
    """Return ``True`` iff *candidate* is strictly newer than *baseline*."""
    return parse_version(candidate) > parse_version(baseline)
