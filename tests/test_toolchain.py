"""
Tests for version_from_go_output.
"""

import pytest

from gox_platforms.platform import resolve_platforms, version_from_go_output


class TestVersionFromGoOutput:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("go version go1.10.3 linux/amd64", "go1.10.3"),
            ("go version go1.7 darwin/amd64\n", "go1.7"),
            ("go1.8", "go1.8"),
            ("  go1.4.2\n", "go1.4.2"),
            ("go version go1.9rc2 windows/386", "go1.9rc2"),
        ],
    )
    def test_extracts_token(self, text: str, expected: str):
        assert version_from_go_output(text) == expected

    def test_without_token_returns_stripped(self):
        assert version_from_go_output("  devel +abc123 \n") == "devel +abc123"

    def test_feeds_resolver(self):
        version = version_from_go_output("go version go1.6.2 linux/amd64")
        assert resolve_platforms(version).release == "1.6"
