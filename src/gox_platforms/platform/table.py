"""
Cross-compilation targets supported by each Go release line.

Every snapshot extends an earlier one; entries are only ever appended. The one
exception to "extend the previous release" is Go 1.7, which re-derives from 1.5
and lists the 1.6 additions again so mips64/mips64le can become defaults.
"""

from .types import Platform, PlatformSnapshot, platform_from_string

PLATFORMS_1_0 = PlatformSnapshot(
    release="1.0",
    platforms=(
        Platform("darwin", "386", True),
        Platform("darwin", "amd64", True),
        Platform("linux", "386", True),
        Platform("linux", "amd64", True),
        Platform("linux", "arm", True),
        Platform("freebsd", "386", True),
        Platform("freebsd", "amd64", True),
        Platform("openbsd", "386", True),
        Platform("openbsd", "amd64", True),
        Platform("windows", "386", True),
        Platform("windows", "amd64", True),
    ),
)

PLATFORMS_1_1 = PLATFORMS_1_0.extend(
    "1.1",
    Platform("freebsd", "arm", True),
    platform_from_string("linux", "armv5"),
    platform_from_string("linux", "armv6"),
    platform_from_string("linux", "armv7"),
    Platform("netbsd", "386", True),
    Platform("netbsd", "amd64", True),
    Platform("netbsd", "arm", True),
    Platform("plan9", "386"),
)

PLATFORMS_1_3 = PLATFORMS_1_1.extend(
    "1.3",
    Platform("dragonfly", "386"),
    Platform("dragonfly", "amd64"),
    Platform("nacl", "amd64"),
    Platform("nacl", "amd64p32"),
    Platform("nacl", "arm"),
    Platform("solaris", "amd64"),
)

PLATFORMS_1_4 = PLATFORMS_1_3.extend(
    "1.4",
    Platform("android", "arm"),
    Platform("plan9", "amd64"),
)

PLATFORMS_1_5 = PLATFORMS_1_4.extend(
    "1.5",
    Platform("darwin", "arm"),
    Platform("darwin", "arm64"),
    Platform("linux", "arm64"),
    Platform("linux", "ppc64"),
    Platform("linux", "ppc64le"),
)

PLATFORMS_1_6 = PLATFORMS_1_5.extend(
    "1.6",
    Platform("android", "386"),
    Platform("linux", "mips64"),
    Platform("linux", "mips64le"),
)

# Derived from 1.5, not 1.6: the 1.6 additions are repeated below with
# mips64/mips64le fully supported.
PLATFORMS_1_7 = PLATFORMS_1_5.extend(
    "1.7",
    # Not fully supported, but s390x is generally useful
    Platform("linux", "s390x", True),
    Platform("plan9", "arm"),
    Platform("android", "386"),
    Platform("linux", "mips64", True),
    Platform("linux", "mips64le", True),
)

PLATFORMS_1_8 = PLATFORMS_1_7.extend(
    "1.8",
    Platform("linux", "mips", True),
    Platform("linux", "mipsle", True),
)

# no new platforms in 1.9
PLATFORMS_1_9 = PLATFORMS_1_8.extend("1.9")

# no new platforms in 1.10
PLATFORMS_1_10 = PLATFORMS_1_9.extend("1.10")

PLATFORMS_LATEST = PLATFORMS_1_10

SNAPSHOTS: tuple[PlatformSnapshot, ...] = (
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
)


def get_snapshot(release: str) -> PlatformSnapshot | None:
    """Look up a snapshot by release line, e.g. ``"1.7"``."""
    for snapshot in SNAPSHOTS:
        if snapshot.release == release:
            return snapshot
    return None
