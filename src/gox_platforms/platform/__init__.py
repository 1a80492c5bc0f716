"""Go cross-compilation platform tables."""

from .resolve import (
    FALLBACK_PLATFORMS,
    VERSION_RANGES,
    PlatformTableError,
    VersionRange,
    find_range,
    resolve_platforms,
)
from .select import select_platforms
from .table import PLATFORMS_LATEST, SNAPSHOTS, get_snapshot
from .toolchain import version_from_go_output
from .types import (
    ARCH_LIST,
    OS_LIST,
    Platform,
    PlatformSnapshot,
    parse_platform,
    platform_from_string,
)

__all__ = [
    "ARCH_LIST",
    "FALLBACK_PLATFORMS",
    "OS_LIST",
    "PLATFORMS_LATEST",
    "SNAPSHOTS",
    "VERSION_RANGES",
    "Platform",
    "PlatformSnapshot",
    "PlatformTableError",
    "VersionRange",
    "find_range",
    "get_snapshot",
    "parse_platform",
    "platform_from_string",
    "resolve_platforms",
    "select_platforms",
    "version_from_go_output",
]
