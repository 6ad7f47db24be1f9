"""
CLI commands for browsing the catalog and printing commands/scripts.

Thin wrappers over ``cwget.core.services``. Nothing here downloads or
runs anything; output is text for the user to copy.
"""

from __future__ import annotations

import json
import sys

import click

from cwget.core.config.settings import UserSettings
from cwget.core.models.library import Catalog, LibraryRecord
from cwget.core.services.synthesis.quoting import Dialect


def _load(ctx: click.Context) -> tuple[Catalog, UserSettings]:
    """Load the catalog and resolve settings, exiting on failure."""
    from cwget.core.config.loader import CatalogFileError, load_catalog_file
    from cwget.core.config.settings import resolve_settings
    from cwget.core.services.catalog_ops import CatalogError

    try:
        catalog = load_catalog_file(ctx.obj.get("catalog_path"))
    except (CatalogFileError, CatalogError) as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    settings = resolve_settings(
        catalog.settings,
        base_dir=ctx.obj.get("base_dir"),
        platform=ctx.obj.get("platform"),
    )
    return catalog, settings


def _get_library(catalog: Catalog, library_id: str) -> LibraryRecord:
    lib = catalog.get(library_id)
    if lib is None:
        click.secho(f"❌ Unknown library: {library_id}", fg="red")
        sys.exit(1)
    return lib


def _summary(lib: LibraryRecord) -> dict:
    return {
        "id": lib.id,
        "title": lib.title,
        "version": lib.version,
        "categories": list(lib.categories),
        "description": lib.description,
    }


def _echo_list(libs: list[LibraryRecord]) -> None:
    for lib in libs:
        tags = f"  [{', '.join(lib.categories)}]" if lib.categories else ""
        click.secho(f"   {lib.id}", fg="cyan", nl=False)
        click.echo(f"  {lib.title} v{lib.version}{tags}")


# ── Browse ──────────────────────────────────────────────────────


@click.command("list")
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Show at most N libraries.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_libraries(ctx: click.Context, limit: int | None, as_json: bool) -> None:
    """List libraries in catalog order."""
    catalog, _ = _load(ctx)
    libs = list(catalog.libraries)
    if limit is not None:
        libs = libs[:limit]

    if as_json:
        click.echo(json.dumps([_summary(lib) for lib in libs], indent=2))
        return

    click.secho(f"\n📚 {len(catalog)} libraries", fg="cyan", bold=True)
    _echo_list(libs)
    click.echo()


@click.command()
@click.argument("query", required=False, default="")
@click.option("--tag", default=None, help="Only libraries with this category.")
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Show at most N results.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def search(ctx: click.Context, query: str, tag: str | None, limit: int | None, as_json: bool) -> None:
    """Search titles, descriptions, categories, and file names."""
    from cwget.core.services.catalog_query import filter_by_tag, filter_libraries

    catalog, _ = _load(ctx)
    libs = filter_libraries(catalog.libraries, query)
    if tag:
        libs = filter_by_tag(libs, tag)
    if limit is not None:
        libs = libs[:limit]

    if as_json:
        click.echo(json.dumps([_summary(lib) for lib in libs], indent=2))
        return

    label = " ".join(p for p in (query.strip(), f"tag:{tag}" if tag else "") if p)
    if not libs:
        click.secho(f"No libraries match {label!r}", fg="yellow")
        return
    click.secho(f"\n🔍 {len(libs)} of {len(catalog)} match {label!r}", fg="cyan", bold=True)
    _echo_list(libs)
    click.echo()


@click.command()
@click.argument("library_id")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def info(ctx: click.Context, library_id: str, as_json: bool) -> None:
    """Show details for one library."""
    from cwget.core.services.catalog_query import resolve_related
    from cwget.core.services.display import link_label
    from cwget.core.services.synthesis.paths import resolve_install_dirs

    catalog, settings = _load(ctx)
    lib = _get_library(catalog, library_id)
    dirs = resolve_install_dirs(settings.base_dir, lib.suffix_dir)
    related = resolve_related(lib, catalog)

    if as_json:
        data = lib.model_dump(mode="json")
        data["test_file"] = lib.test_file
        data["install_dir"] = dirs.model_dump()
        data["related"] = [r.id for r in related]
        click.echo(json.dumps(data, indent=2))
        return

    click.secho(f"\n📦 {lib.title} v{lib.version}", fg="cyan", bold=True)
    click.echo(f"   {lib.description}")
    click.echo()
    click.echo(f"   Install directory: {dirs.posix}")
    click.echo(f"   Files: {', '.join(lib.file_paths)}")
    if lib.categories:
        click.echo(f"   Categories: {', '.join(lib.categories)}")
    click.echo(f"   License: {link_label(lib.license_summary, lib.license_url)}")

    click.echo()
    click.secho("   Documentation:", fg="white", bold=True)
    for doc in lib.documentation:
        click.echo(f"     • {link_label(doc.label, doc.url)}")

    if related:
        click.echo()
        click.secho("   Works well with:", fg="white", bold=True)
        for r in related:
            click.echo(f"     • {r.title} ({r.id})")

    click.echo()


# ── Synthesize ──────────────────────────────────────────────────


@click.command()
@click.argument("library_id")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def path(ctx: click.Context, library_id: str, as_json: bool) -> None:
    """Print the install directory for the active platform."""
    from cwget.core.services.synthesis.paths import resolve_install_dirs

    catalog, settings = _load(ctx)
    lib = _get_library(catalog, library_id)
    dirs = resolve_install_dirs(settings.base_dir, lib.suffix_dir)

    if as_json:
        click.echo(json.dumps(dirs.model_dump(), indent=2))
        return

    click.echo(dirs.win if settings.platform is Dialect.POWERSHELL else dirs.posix)


@click.command()
@click.argument("library_id")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def commands(ctx: click.Context, library_id: str, as_json: bool) -> None:
    """Print download and compile commands."""
    from cwget.core.services.synthesis.render import render_library

    catalog, settings = _load(ctx)
    lib = _get_library(catalog, library_id)
    data = render_library(lib, settings.base_dir, catalog.settings.base_dir_default)

    if as_json:
        click.echo(json.dumps(data.to_dict(), indent=2))
        return

    cmds = data.commands
    if settings.platform is Dialect.POWERSHELL:
        blocks = [
            ("PowerShell curl alias", cmds.curl_pwsh),
            ("PowerShell wget alias", cmds.wget_pwsh),
            ("Invoke-WebRequest", cmds.iwr_pwsh),
            ("Windows compile", cmds.compile_win),
        ]
    else:
        blocks = [
            ("POSIX wget", cmds.wget_posix),
            ("POSIX curl", cmds.curl_posix),
            ("POSIX compile", cmds.compile_posix),
        ]

    quiet = ctx.obj.get("quiet", False)
    for label, text in blocks:
        if not quiet:
            click.secho(f"# {label}", fg="cyan")
        click.echo(text)
        if not quiet:
            click.echo()


@click.command()
@click.argument("library_id")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def script(ctx: click.Context, library_id: str, as_json: bool) -> None:
    """Print the full install script for the active platform."""
    from cwget.core.services.synthesis.paths import build_install_target
    from cwget.core.services.synthesis.scripts import build_script

    catalog, settings = _load(ctx)
    lib = _get_library(catalog, library_id)
    target = build_install_target(lib, settings.base_dir, catalog.settings.base_dir_default)
    text = build_script(lib, target, settings.platform)

    if as_json:
        click.echo(json.dumps({
            "id": lib.id,
            "platform": str(settings.platform),
            "script": text,
        }, indent=2))
        return

    click.echo(text, nl=False)


@click.command()
@click.argument("library_id")
@click.pass_context
def sample(ctx: click.Context, library_id: str) -> None:
    """Print the sample program."""
    catalog, _ = _load(ctx)
    lib = _get_library(catalog, library_id)
    click.echo(lib.sample_code.strip())
