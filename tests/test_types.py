"""
Tests for platform types — Platform, PlatformSnapshot and string parsing.
"""

import dataclasses

import pytest

from gox_platforms.platform import (
    Platform,
    PlatformSnapshot,
    parse_platform,
    platform_from_string,
)


# ═══════════════════════════════════════════════════════════════════
#  platform_from_string
# ═══════════════════════════════════════════════════════════════════


class TestPlatformFromString:
    @pytest.mark.parametrize("revision", ["5", "6", "7", "12"])
    def test_arm_revision_is_split(self, revision: str):
        p = platform_from_string("linux", f"armv{revision}")
        assert p.arch_base == "arm"
        assert p.arm_version == revision
        assert p.effective_arch == f"armv{revision}"
        assert str(p) == f"linux/armv{revision}"

    @pytest.mark.parametrize("arch", ["386", "amd64", "arm", "arm64", "mips64le", "s390x"])
    def test_plain_arch_is_unchanged(self, arch: str):
        p = platform_from_string("linux", arch)
        assert p.arch_base == arch
        assert p.arm_version == ""
        assert str(p) == f"linux/{arch}"

    def test_armv_without_digits_is_not_split(self):
        p = platform_from_string("linux", "armv")
        assert p.arch_base == "armv"
        assert p.arm_version == ""

    def test_armv_with_suffix_is_split(self):
        p = platform_from_string("linux", "armv7l")
        assert p.arch_base == "arm"
        assert p.arm_version == "7l"
        assert str(p) == "linux/armv7l"

    def test_armv_with_letter_is_not_split(self):
        assert platform_from_string("linux", "armvx").arch_base == "armvx"

    def test_default_flag(self):
        assert platform_from_string("linux", "amd64").is_default is False
        assert platform_from_string("linux", "amd64", default=True).is_default is True


# ═══════════════════════════════════════════════════════════════════
#  parse_platform
# ═══════════════════════════════════════════════════════════════════


class TestParsePlatform:
    def test_parses_os_arch(self):
        p = parse_platform("darwin/arm64")
        assert p.os == "darwin"
        assert p.arch_base == "arm64"

    def test_parses_arm_revision(self):
        assert parse_platform("linux/armv6") == platform_from_string("linux", "armv6")

    def test_strips_whitespace(self):
        assert str(parse_platform("  windows/386\n")) == "windows/386"

    @pytest.mark.parametrize("value", ["linux", "linux/", "/amd64", "linux/arm/v7", ""])
    def test_rejects_malformed(self, value: str):
        with pytest.raises(ValueError):
            parse_platform(value)


# ═══════════════════════════════════════════════════════════════════
#  Platform / PlatformSnapshot
# ═══════════════════════════════════════════════════════════════════


class TestPlatform:
    def test_identity_ignores_default(self):
        a = Platform("linux", "mips64", False)
        b = Platform("linux", "mips64", True)
        assert a != b
        assert a.identity == b.identity

    def test_frozen(self):
        p = Platform("linux", "amd64")
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.os = "darwin"  # type: ignore[misc]


class TestPlatformSnapshot:
    def _snapshot(self) -> PlatformSnapshot:
        return PlatformSnapshot(
            release="1.0",
            platforms=(
                Platform("linux", "amd64", True),
                platform_from_string("linux", "armv7"),
            ),
        )

    def test_sequence_behaviour(self):
        snap = self._snapshot()
        assert len(snap) == 2
        assert snap[0] == Platform("linux", "amd64", True)
        assert [str(p) for p in snap] == ["linux/amd64", "linux/armv7"]
        assert Platform("linux", "amd64", True) in snap

    def test_defaults(self):
        assert self._snapshot().defaults == (Platform("linux", "amd64", True),)

    def test_extend_does_not_mutate_parent(self):
        parent = self._snapshot()
        child = parent.extend("1.1", Platform("freebsd", "arm", True))
        assert len(parent) == 2
        assert len(child) == 3
        assert child.release == "1.1"
        assert child.platforms[:2] == parent.platforms

    def test_extend_without_additions_renames(self):
        parent = self._snapshot()
        child = parent.extend("1.9")
        assert child.platforms == parent.platforms
        assert child.release == "1.9"
        assert child != parent
