"""Helpers for version strings reported by a Go toolchain."""

import re

_GO_VERSION_TOKEN = re.compile(r"\bgo\d[^\s]*")


def version_from_go_output(text: str) -> str:
    """Extract the version token from ``go version`` output.

    ``"go version go1.10.3 linux/amd64"`` gives ``"go1.10.3"``. Text without a
    ``go<digit>`` token is returned stripped, leaving the fallback to the
    resolver.
    """
    match = _GO_VERSION_TOKEN.search(text)
    if match:
        return match.group(0)
    return text.strip()
