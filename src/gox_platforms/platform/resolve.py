"""Resolve a Go version string to its supported platform snapshot."""

import logging
from dataclasses import dataclass, field

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

from .table import (
    PLATFORMS_1_0,
    PLATFORMS_1_1,
    PLATFORMS_1_3,
    PLATFORMS_1_4,
    PLATFORMS_1_5,
    PLATFORMS_1_6,
    PLATFORMS_1_7,
    PLATFORMS_1_8,
    PLATFORMS_1_9,
    PLATFORMS_1_10,
    PLATFORMS_LATEST,
)
from .types import PlatformSnapshot

logger = logging.getLogger(__name__)

GO_PREFIX = "go"


class PlatformTableError(RuntimeError):
    """The static platform table is malformed."""


@dataclass(frozen=True)
class VersionRange:
    """A version constraint and the snapshot it selects."""

    constraint: str
    snapshot: PlatformSnapshot
    specifier: SpecifierSet = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            specifier = SpecifierSet(self.constraint)
        except InvalidSpecifier as e:
            raise PlatformTableError(
                f"Invalid constraint {self.constraint!r} for go{self.snapshot.release}"
            ) from e
        object.__setattr__(self, "specifier", specifier)

    def matches(self, version: Version) -> bool:
        # Pre-releases never satisfy a plain release range
        return self.specifier.contains(version, prereleases=False)


# Checked in order, first match wins. Ranges are assumed not to overlap.
VERSION_RANGES: tuple[VersionRange, ...] = (
    VersionRange(">= 1.0, < 1.1", PLATFORMS_1_0),
    VersionRange(">= 1.1, < 1.3", PLATFORMS_1_1),
    VersionRange(">= 1.3, < 1.4", PLATFORMS_1_3),
    VersionRange(">= 1.4, < 1.5", PLATFORMS_1_4),
    VersionRange(">= 1.5, < 1.6", PLATFORMS_1_5),
    VersionRange(">= 1.6, < 1.7", PLATFORMS_1_6),
    VersionRange(">= 1.7, < 1.8", PLATFORMS_1_7),
    VersionRange(">= 1.8, < 1.9", PLATFORMS_1_8),
    VersionRange(">= 1.9, < 1.10", PLATFORMS_1_9),
    VersionRange(">= 1.10, < 1.11", PLATFORMS_1_10),
)

# Returned when a parsed version falls outside every range. This is 1.9,
# not PLATFORMS_LATEST.
FALLBACK_PLATFORMS = PLATFORMS_1_9


def resolve_platforms(version: str) -> PlatformSnapshot:
    """Return the platforms supported by the Go toolchain ``version``.

    Args:
        version: Version string as printed by the toolchain, e.g. ``"go1.7.4"``

    Returns:
        The matching snapshot. Input without the ``go`` prefix or with an
        unparseable version gets PLATFORMS_LATEST; a version outside every
        known range gets FALLBACK_PLATFORMS.
    """
    if not version.startswith(GO_PREFIX):
        return PLATFORMS_LATEST

    number = version[len(GO_PREFIX):]
    try:
        if number != number.strip():
            # Version() alone accepts surrounding whitespace
            raise InvalidVersion(f"Invalid version: {number!r}")
        current = Version(number)
    except InvalidVersion as e:
        logger.warning("Unable to parse current go version: %s (%s)", number, e)
        return PLATFORMS_LATEST

    for version_range in VERSION_RANGES:
        if version_range.matches(current):
            return version_range.snapshot

    logger.debug(
        "go%s matches no known range, using go%s platforms",
        current,
        FALLBACK_PLATFORMS.release,
    )
    return FALLBACK_PLATFORMS


def find_range(snapshot: PlatformSnapshot) -> VersionRange | None:
    """Return the range that selects ``snapshot``, if any."""
    for version_range in VERSION_RANGES:
        if version_range.snapshot is snapshot:
            return version_range
    return None
