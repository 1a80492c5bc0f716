import json
import logging

import click
from rich.logging import RichHandler

from gox_platforms.platform import (
    PLATFORMS_LATEST,
    SNAPSHOTS,
    find_range,
    resolve_platforms,
    select_platforms,
    version_from_go_output,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def _validate_osarch(ctx, param, value: tuple[str, ...]) -> tuple[str, ...]:
    for item in value:
        parts = item.lstrip("!").split("/")
        if len(parts) != 2 or not all(parts):
            raise click.BadParameter(f"expected <os>/<arch>, got {item!r}")
    return value


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Go cross-compilation platform lookup."""
    _configure_logging(verbose)


@main.command("list")
@click.option(
    "--go-version",
    envvar="GOX_GO_VERSION",
    default=None,
    help="Go version (e.g. go1.7.4) or full `go version` output",
)
@click.option(
    "--defaults", is_flag=True, help="Only show default platforms (not combinable with filters)"
)
@click.option("--os", "os_names", multiple=True, help="OS to include, !os to exclude")
@click.option("--arch", "arches", multiple=True, help="Arch to include, !arch to exclude")
@click.option(
    "--osarch",
    multiple=True,
    callback=_validate_osarch,
    help="os/arch pair to include, !os/arch to exclude",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_platforms(
    go_version: str | None,
    defaults: bool,
    os_names: tuple[str, ...],
    arches: tuple[str, ...],
    osarch: tuple[str, ...],
    as_json: bool,
):
    """List supported platforms for a Go version."""
    from gox_platforms.ui.dashboard import render_platforms

    if defaults and (os_names or arches or osarch):
        raise click.UsageError("--defaults cannot be combined with --os, --arch or --osarch")

    version = version_from_go_output(go_version) if go_version else ""
    snapshot = resolve_platforms(version) if version else PLATFORMS_LATEST

    if os_names or arches or osarch:
        platforms = select_platforms(snapshot, os=os_names, arch=arches, osarch=osarch)
    elif defaults:
        platforms = list(snapshot.defaults)
    else:
        platforms = list(snapshot)

    if as_json:
        data = {
            "go_version": version,
            "release": snapshot.release,
            "platforms": [
                {
                    "name": str(p),
                    "os": p.os,
                    "arch": p.effective_arch,
                    "arm": p.arm_version,
                    "default": p.is_default,
                }
                for p in platforms
            ],
        }
        click.echo(json.dumps(data, indent=2))
    else:
        render_platforms(snapshot, platforms, go_version=version)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def releases(as_json: bool):
    """Show known Go release lines."""
    from gox_platforms.ui.dashboard import render_releases

    if not as_json:
        render_releases()
        return

    data = []
    for snapshot in SNAPSHOTS:
        version_range = find_range(snapshot)
        data.append(
            {
                "release": snapshot.release,
                "constraint": version_range.constraint if version_range else None,
                "platforms": len(snapshot),
                "defaults": len(snapshot.defaults),
                "latest": snapshot is PLATFORMS_LATEST,
            }
        )
    click.echo(json.dumps(data, indent=2))


@main.command()
def browse():
    """Browse release lines interactively."""
    from gox_platforms.ui.dashboard import run_interactive

    run_interactive()


if __name__ == "__main__":
    main()
