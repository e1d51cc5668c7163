"""Version value type used to compare a running version with a GitHub release."""

import re
from enum import Enum
from functools import total_ordering

# Current version - updated on release
__version__ = "0.1.0"

_NUMERIC = re.compile(r"[0-9]+(?:\.[0-9]+)*")
_KIND_SUFFIX = re.compile(r"^(?P<numeric>.*?)[-.]?(?P<suffix>snapshot|dev)\Z", re.IGNORECASE)
# Only accepted when the release is flagged as a pre-release (e.g. "1.0.0-rc").
_PRERELEASE_LABEL = re.compile(r"^(?P<numeric>[0-9]+(?:\.[0-9]+)*)-[0-9A-Za-z][0-9A-Za-z.-]*\Z")


class InvalidVersionFormat(ValueError):
    """Raised when a version string is not dot-separated integers plus an optional suffix."""
    pass


class VersionKind(str, Enum):
    """Classification of a version by its suffix."""

    RELEASE = "release"
    SNAPSHOT = "snapshot"
    DEV = "dev"


def strip_prefix(value: str) -> str:
    """Remove a single leading ``v`` (``v1.2.0`` -> ``1.2.0``)."""
    return value[1:] if value.startswith("v") else value


def parse_kind(raw: str, force_prerelease: bool = False) -> tuple[str, VersionKind]:
    """
    Split a raw version string into its numeric portion and kind.

    Suffixes are matched case-insensitively, ``snapshot`` first, then ``dev``.
    A forced pre-release is DEV unless it carries a ``snapshot`` suffix, and
    may carry any ``-label`` (``rc``, ``beta.1``) which is dropped from the
    numeric portion.

    Raises:
        InvalidVersionFormat: If the numeric portion is not ``int(.int)*``.
    """
    match = _KIND_SUFFIX.match(raw)
    if match:
        numeric = match.group("numeric")
        if match.group("suffix").lower() == VersionKind.SNAPSHOT.value:
            kind = VersionKind.SNAPSHOT
        else:
            kind = VersionKind.DEV
    elif force_prerelease:
        label = _PRERELEASE_LABEL.match(raw)
        numeric = label.group("numeric") if label else raw
        kind = VersionKind.DEV
    else:
        numeric, kind = raw, VersionKind.RELEASE

    if not _NUMERIC.fullmatch(numeric):
        raise InvalidVersionFormat(
            f"Invalid version format: {raw!r}. "
            "Supported format is int.int.int...(-snapshot/dev)"
        )
    return numeric, kind


@total_ordering
class Version:
    """
    Immutable dotted numeric version with an optional kind suffix.

    Ordering and equality only look at the numeric parts, padded with zeros,
    so ``Version("1.0-snapshot") == Version("1.0.0")``.

    Usage:
        current = Version("1.2.0")
        latest = Version("1.10", force_prerelease=True)
        current.compare(latest)  # -1
    """

    __slots__ = ("_raw", "_numeric", "_kind", "_parts")

    def __init__(self, raw: str, force_prerelease: bool = False):
        numeric, kind = parse_kind(raw, force_prerelease)
        self._raw = raw
        self._numeric = numeric
        self._kind = kind
        self._parts = tuple(int(part) for part in numeric.split("."))

    @property
    def raw(self) -> str:
        """The full version string, suffix included."""
        return self._raw

    @property
    def numeric(self) -> str:
        """The version string with its recognized suffix stripped."""
        return self._numeric

    @property
    def kind(self) -> VersionKind:
        return self._kind

    @property
    def parts(self) -> tuple[int, ...]:
        return self._parts

    def compare(self, other: "Version") -> int:
        """Return -1, 0 or 1 as this version is older, equal or newer than *other*."""
        length = max(len(self._parts), len(other._parts))
        for i in range(length):
            ours = self._parts[i] if i < len(self._parts) else 0
            theirs = other._parts[i] if i < len(other._parts) else 0
            if ours < theirs:
                return -1
            if ours > theirs:
                return 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        parts = list(self._parts)
        while len(parts) > 1 and parts[-1] == 0:
            parts.pop()
        return hash(tuple(parts))

    def __str__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"Version({self._raw!r}, kind={self._kind.value})"
