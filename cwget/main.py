"""
cwget — CLI entrypoint.

Usage:
    python -m cwget.main --help
    python -m cwget.main check
    python -m cwget.main commands curlib --platform powershell
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from cwget import __version__
from cwget.core.observability.logging_config import resolve_level, setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="cwget")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--catalog",
    "-c",
    "catalog_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to catalog.yml / catalog.xml (default: auto-detect).",
)
@click.option(
    "--base-dir",
    "base_dir",
    default=None,
    help="Override base install directory (env: CWGET_BASE_DIR).",
)
@click.option(
    "--platform",
    type=click.Choice(["posix", "powershell"], case_sensitive=False),
    default=None,
    help="Shell dialect for commands and scripts (env: CWGET_PLATFORM).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    catalog_path: str | None,
    base_dir: str | None,
    platform: str | None,
) -> None:
    """cwget — fetch and compile small C libraries."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["catalog_path"] = Path(catalog_path) if catalog_path else None
    ctx.obj["base_dir"] = base_dir
    ctx.obj["platform"] = platform

    setup_logging(
        level=resolve_level(debug, verbose, quiet, os.environ.get("CWGET_LOG_LEVEL")),
        log_file=os.environ.get("CWGET_LOG_FILE"),
        log_file_level=os.environ.get("CWGET_LOG_FILE_LEVEL"),
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Validate the library catalog."""
    from cwget.core.use_cases.catalog_check import check_catalog

    result = check_catalog(catalog_path=ctx.obj.get("catalog_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.catalog is not None  # guaranteed when valid
        click.secho("✅ Catalog is valid", fg="green", bold=True)
        click.echo(f"   File: {result.catalog_path}")
        click.echo(f"   Libraries: {len(result.catalog)}")
        click.echo(f"   Base dir: {result.catalog.settings.base_dir_default}")
    else:
        click.secho("❌ Catalog errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


# ── Register library commands from cwget/ui/cli/ ──────────────────

from cwget.ui.cli.library import (  # noqa: E402
    commands,
    info,
    list_libraries,
    path,
    sample,
    script,
    search,
)

cli.add_command(list_libraries)
cli.add_command(search)
cli.add_command(info)
cli.add_command(path)
cli.add_command(commands)
cli.add_command(script)
cli.add_command(sample)


if __name__ == "__main__":
    cli()
