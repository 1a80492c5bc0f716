"""Platform type definitions."""

import re
from collections.abc import Iterator
from dataclasses import dataclass

OS_LIST: tuple[str, ...] = (
    "darwin",
    "dragonfly",
    "linux",
    "android",
    "solaris",
    "freebsd",
    "nacl",
    "netbsd",
    "openbsd",
    "plan9",
    "windows",
)

ARCH_LIST: tuple[str, ...] = (
    "386",
    "amd64",
    "amd64p32",
    "arm",
    "arm64",
    "mips",
    "mipsle",
    "mips64",
    "mips64le",
    "ppc64",
    "ppc64le",
    "s390x",
)

_ARM_REVISION = re.compile(r"armv(\d.*)")


@dataclass(frozen=True)
class Platform:
    """An OS/arch combination that can be built against.

    ``is_default`` marks targets built when none are requested explicitly. Only
    popular, generally useful targets get it: Android is not a default because
    cross-compiling to it alongside something like Linux is rare.
    """

    os: str
    arch_base: str
    is_default: bool = False
    arm_version: str = ""  # ARM revision, e.g. "6"

    @property
    def effective_arch(self) -> str:
        if self.arm_version:
            return f"{self.arch_base}v{self.arm_version}"
        return self.arch_base

    @property
    def identity(self) -> tuple[str, str, str]:
        """Key used to compare platforms regardless of the default flag."""
        return self.os, self.arch_base, self.arm_version

    def __str__(self) -> str:
        return f"{self.os}/{self.effective_arch}"


def platform_from_string(os: str, arch: str, default: bool = False) -> Platform:
    """Build a Platform, splitting ``armvN`` arches into base and revision."""
    match = _ARM_REVISION.match(arch)
    if match:
        return Platform(os=os, arch_base="arm", is_default=default, arm_version=match.group(1))
    return Platform(os=os, arch_base=arch, is_default=default)


def parse_platform(value: str, default: bool = False) -> Platform:
    """Parse an ``os/arch`` display string such as ``linux/armv7``."""
    parts = value.strip().split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Expected <os>/<arch>, got {value!r}")
    return platform_from_string(parts[0], parts[1], default=default)


@dataclass(frozen=True)
class PlatformSnapshot:
    """Platforms supported by one Go release line, in table order."""

    release: str
    platforms: tuple[Platform, ...] = ()

    def __iter__(self) -> Iterator[Platform]:
        return iter(self.platforms)

    def __len__(self) -> int:
        return len(self.platforms)

    def __getitem__(self, index: int) -> Platform:
        return self.platforms[index]

    def __contains__(self, item: object) -> bool:
        return item in self.platforms

    def __str__(self) -> str:
        return f"go{self.release} ({len(self.platforms)} platforms)"

    @property
    def defaults(self) -> tuple[Platform, ...]:
        return tuple(p for p in self.platforms if p.is_default)

    @property
    def identities(self) -> set[tuple[str, str, str]]:
        return {p.identity for p in self.platforms}

    def extend(self, release: str, *additions: Platform) -> "PlatformSnapshot":
        """Return a new snapshot for ``release`` with ``additions`` appended."""
        return PlatformSnapshot(release=release, platforms=self.platforms + additions)
