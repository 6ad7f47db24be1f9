"""
Render pipeline — record + base dir → every command and script for it.

Recomputed on every call; the caller owns the base-dir setting and
nothing is cached here.
"""

from __future__ import annotations

import logging

from cwget.core.models.library import DEFAULT_BASE_DIR, Catalog, LibraryRecord
from cwget.core.models.target import RenderData
from cwget.core.services.synthesis.commands import build_commands
from cwget.core.services.synthesis.paths import build_install_target
from cwget.core.services.synthesis.scripts import build_scripts

logger = logging.getLogger(__name__)


def render_library(
    record: LibraryRecord,
    base_dir: str | None,
    fallback: str = DEFAULT_BASE_DIR,
) -> RenderData:
    """Resolve paths, then build commands and scripts for ``record``.

    Args:
        record: A validated catalog entry.
        base_dir: User's base-directory override (blank → ``fallback``).
        fallback: Catalog default base directory.
    """
    target = build_install_target(record, base_dir, fallback)
    data = RenderData(
        library_id=record.id,
        target=target,
        commands=build_commands(record, target),
        scripts=build_scripts(record, target),
    )
    logger.debug("Rendered '%s' into %s", record.id, target.dirs.posix)
    return data


def render_catalog(catalog: Catalog, base_dir: str | None = None) -> list[RenderData]:
    """Render every library of ``catalog`` under one base directory."""
    fallback = catalog.settings.base_dir_default
    return [render_library(lib, base_dir, fallback) for lib in catalog.libraries]
