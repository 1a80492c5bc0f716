"""Release menu entries for the interactive browser."""

from collections.abc import Sequence
from dataclasses import dataclass

from gox_platforms.platform import SNAPSHOTS, PlatformSnapshot, find_range

# Keys offered in the browser, one per release line
MENU_KEYS = "1234567890"


@dataclass
class ReleaseEntry:
    key: str
    snapshot: PlatformSnapshot
    constraint: str = ""

    @property
    def name(self) -> str:
        return f"go{self.snapshot.release}"


def get_release_entries(
    snapshots: Sequence[PlatformSnapshot] = SNAPSHOTS,
) -> list[ReleaseEntry]:
    if len(snapshots) > len(MENU_KEYS):
        raise ValueError(
            f"{len(snapshots)} releases but only {len(MENU_KEYS)} menu keys"
        )

    entries = []
    for key, snapshot in zip(MENU_KEYS, snapshots):
        version_range = find_range(snapshot)
        entries.append(
            ReleaseEntry(
                key=key,
                snapshot=snapshot,
                constraint=version_range.constraint if version_range else "",
            )
        )
    return entries
