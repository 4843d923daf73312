"""Media type helpers used to match ``Accept`` headers against routes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

APPLICATION_JSON = "application/json"
WILDCARD = "*"


@dataclass(frozen=True)
class MediaRange:
    """A single ``type/subtype`` entry taken from an ``Accept`` header."""

    type: str
    subtype: str

    @property
    def suffix(self) -> str | None:
        if "+" not in self.subtype:
            return None
        return self.subtype.rsplit("+", 1)[1]

    def is_compatible_with(self, other: MediaRange) -> bool:
        """Return whether either range could describe the other.

        Wildcards match anything in their position, and a wildcard subtype
        with a structured suffix (``*+json``) matches the bare subtype
        named by the suffix.
        """

        if WILDCARD in (self.type, other.type):
            return True
        if self.type != other.type:
            return False
        if self.subtype == other.subtype:
            return True
        return _subtype_covers(self, other) or _subtype_covers(other, self)


def _subtype_covers(pattern: MediaRange, candidate: MediaRange) -> bool:
    if pattern.subtype == WILDCARD:
        return True
    if not pattern.subtype.startswith(WILDCARD + "+"):
        return False
    suffix = pattern.suffix
    return candidate.subtype == suffix or candidate.suffix == suffix


def parse_media_range(value: str) -> MediaRange | None:
    """Parse one ``Accept`` entry, ignoring parameters such as ``q``.

    Returns ``None`` when the entry is not a ``type/subtype`` pair.
    """

    essence = value.split(";", 1)[0].strip().lower()
    if essence == WILDCARD:
        # Some clients send a bare "*"; treat it as "*/*".
        return MediaRange(WILDCARD, WILDCARD)
    type_, sep, subtype = essence.partition("/")
    type_ = type_.strip()
    subtype = subtype.strip()
    if not sep or not type_ or not subtype or "/" in subtype:
        return None
    if type_ == WILDCARD and subtype != WILDCARD:
        return None
    return MediaRange(type_, subtype)


def parse_accept(header_values: Iterable[str]) -> list[MediaRange]:
    """Split and parse every ``Accept`` header line, skipping invalid entries."""

    ranges: list[MediaRange] = []
    for header_value in header_values:
        for entry in header_value.split(","):
            if not entry.strip():
                continue
            media_range = parse_media_range(entry)
            if media_range is not None:
                ranges.append(media_range)
    return ranges


def accepts(header_values: Iterable[str] | None, media_type: str) -> bool:
    """Return whether a request with ``header_values`` accepts ``media_type``.

    A missing or blank ``Accept`` header is treated as ``*/*``.
    """

    values = [value for value in (header_values or ()) if value.strip()]
    if not values:
        return True

    target = parse_media_range(media_type)
    if target is None:
        raise ValueError(f"Invalid media type: {media_type!r}")

    return any(candidate.is_compatible_with(target) for candidate in parse_accept(values))


def accepts_json(header_values: Iterable[str] | None) -> bool:
    """Shortcut for :func:`accepts` with ``application/json``."""

    return accepts(header_values, APPLICATION_JSON)


__all__ = [
    "APPLICATION_JSON",
    "MediaRange",
    "accepts",
    "accepts_json",
    "parse_accept",
    "parse_media_range",
]
