"""Narrow a supported platform list by OS/arch filters."""

from collections.abc import Iterable, Sequence
from dataclasses import replace

from .types import Platform, parse_platform, platform_from_string


def _split_filters(values: Iterable[str]) -> tuple[list[str], set[str]]:
    """Split filter values into ordered includes and ``!``-prefixed excludes."""
    include: list[str] = []
    exclude: set[str] = set()
    for value in values:
        if value.startswith("!"):
            exclude.add(value[1:])
        elif value not in include:
            include.append(value)
    return include, exclude


def select_platforms(
    supported: Sequence[Platform],
    os: Iterable[str] = (),
    arch: Iterable[str] = (),
    osarch: Iterable[str] = (),
) -> list[Platform]:
    """Select build targets from ``supported``.

    Args:
        supported: Platforms the toolchain can build, e.g. a resolved snapshot
        os: OS names to include, or exclude when prefixed with ``!``
        arch: Arch names (``armv7`` style allowed), same ``!`` convention
        osarch: ``os/arch`` pairs, same ``!`` convention

    Returns:
        Selected platforms with the default flag cleared. Without any
        inclusions the default platforms of ``supported`` are used.

    Raises:
        ValueError: An osarch value is not of the form ``os/arch``.
    """
    include_os, ignore_os = _split_filters(os)
    include_arch, ignore_arch = _split_filters(arch)
    include_osarch_raw, ignore_osarch_raw = _split_filters(osarch)

    include_osarch = [str(parse_platform(v)) for v in include_osarch_raw]
    ignore_osarch = {str(parse_platform(v)) for v in ignore_osarch_raw}

    supported_by_name = {str(p): p for p in supported}

    candidates: list[Platform] | None = None
    if include_osarch or include_os:
        pending: list[str] = list(include_osarch)
        if include_os and include_arch:
            for os_name in include_os:
                for arch_name in include_arch:
                    pending.append(str(platform_from_string(os_name, arch_name)))
        elif include_os:
            for os_name in include_os:
                pending.extend(str(p) for p in supported if p.os == os_name)
        # Drop anything the toolchain can't build
        candidates = [supported_by_name[name] for name in pending if name in supported_by_name]

    if candidates is None:
        candidates = [p for p in supported if p.is_default]

    selected: list[Platform] = []
    seen: set[str] = set()
    for platform in candidates:
        name = str(platform)
        if name in seen or name in ignore_osarch:
            continue

        # Only filter by component when the pair wasn't explicitly requested
        if name not in include_osarch:
            if platform.effective_arch in ignore_arch or platform.os in ignore_os:
                continue
            if include_arch and platform.effective_arch not in include_arch:
                continue
            if include_os and platform.os not in include_os:
                continue

        seen.add(name)
        selected.append(replace(platform, is_default=False))

    return selected
