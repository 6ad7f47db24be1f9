"""
Domain models — Pydantic types for the library catalog.

All models are re-exported here for convenient access:

    from cwget.core.models import LibraryRecord, Catalog, InstallTarget
"""

from cwget.core.models.library import (
    DEFAULT_BASE_DIR,
    DEFAULT_VERSION,
    MAX_RELATED,
    Catalog,
    CatalogSettings,
    DocLink,
    LibraryFile,
    LibraryRecord,
)
from cwget.core.models.target import (
    CommandSet,
    InstallDirs,
    InstallTarget,
    RenderData,
    ScriptSet,
)

__all__ = [
    "DEFAULT_BASE_DIR",
    "DEFAULT_VERSION",
    "MAX_RELATED",
    # library.py
    "Catalog",
    "CatalogSettings",
    "DocLink",
    "LibraryFile",
    "LibraryRecord",
    # target.py
    "CommandSet",
    "InstallDirs",
    "InstallTarget",
    "RenderData",
    "ScriptSet",
]
