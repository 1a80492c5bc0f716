"""Rich rendering for platform tables."""

import sys
from collections.abc import Sequence

import readchar
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gox_platforms.platform import PLATFORMS_LATEST, Platform, PlatformSnapshot

from .components import ReleaseEntry, get_release_entries

DEFAULT_ICONS = {
    True: "[green]yes[/green]",
    False: "[dim]-[/dim]",
}


def _build_snapshot_panel(snapshot: PlatformSnapshot, go_version: str = "") -> Panel:
    info = f"Go:        {go_version or '(not given)'}\n"
    info += f"Release:   go{snapshot.release}"
    if snapshot is PLATFORMS_LATEST:
        info += " (latest)"
    info += f"\nPlatforms: {len(snapshot)} ({len(snapshot.defaults)} default)"
    return Panel(info, title="Toolchain")


def _build_platforms_table(platforms: Sequence[Platform]) -> Table:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Platform", style="cyan", min_width=18)
    table.add_column("OS", min_width=10)
    table.add_column("Arch", min_width=10)
    table.add_column("Default", justify="center", width=8)

    for platform in platforms:
        table.add_row(
            str(platform),
            platform.os,
            platform.effective_arch,
            DEFAULT_ICONS[platform.is_default],
        )
    return table


def _build_releases_table(entries: list[ReleaseEntry]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("#", style="cyan", width=3)
    table.add_column("Release", min_width=8)
    table.add_column("Constraint", min_width=16)
    table.add_column("Platforms", justify="right", width=10)
    table.add_column("Default", justify="right", width=8)

    for entry in entries:
        table.add_row(
            f"[{entry.key}]",
            entry.name,
            entry.constraint or "[dim]-[/dim]",
            str(len(entry.snapshot)),
            str(len(entry.snapshot.defaults)),
        )
    return table


def render_platforms(
    snapshot: PlatformSnapshot,
    platforms: Sequence[Platform],
    go_version: str = "",
    console: Console | None = None,
) -> None:
    console = console or Console()
    console.print(_build_snapshot_panel(snapshot, go_version))
    console.print()
    console.print(_build_platforms_table(platforms))
    console.print(Text(f"{len(platforms)} selected", style="dim"))


def render_releases(console: Console | None = None) -> None:
    console = console or Console()
    console.print(Panel(_build_releases_table(get_release_entries()), title="Releases"))


def _show_release(entry: ReleaseEntry, console: Console) -> None:
    console.clear()
    render_platforms(entry.snapshot, entry.snapshot, go_version=entry.name, console=console)
    console.print("\n[dim]Press any key to go back...[/dim]")
    readchar.readkey()


def run_interactive() -> None:
    console = Console()
    entries = get_release_entries()
    entry_map = {e.key: e for e in entries}

    while True:
        console.clear()
        console.print(Panel(_build_releases_table(entries), title="Releases"))
        console.print()
        console.print(
            Text("Press a number key to view a release, q to quit", style="dim")
        )

        try:
            key = readchar.readkey()
        except KeyboardInterrupt:
            console.print()
            sys.exit(0)

        if key in ("q", "Q", "\x03"):
            console.print()
            sys.exit(0)

        if key in entry_map:
            _show_release(entry_map[key], console)
