"""
Catalog check use case — validate the catalog file and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from cwget.core.config.loader import CatalogFileError, find_catalog_file, load_catalog_file
from cwget.core.models.library import Catalog
from cwget.core.services.catalog_ops import CatalogError


@dataclass
class CatalogCheckResult:
    """Result of catalog validation."""

    valid: bool = False
    catalog: Catalog | None = None
    catalog_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "catalog_path": str(self.catalog_path) if self.catalog_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "library_count": len(self.catalog) if self.catalog else 0,
            "base_dir": self.catalog.settings.base_dir_default if self.catalog else None,
            "default_version": self.catalog.settings.default_version if self.catalog else None,
        }


def check_catalog(catalog_path: Path | None = None) -> CatalogCheckResult:
    """Validate the catalog and report structural errors and soft issues.

    Args:
        catalog_path: Optional explicit path to the catalog file.

    Returns:
        CatalogCheckResult with validation status and any issues.
    """
    result = CatalogCheckResult()

    if catalog_path is None:
        catalog_path = find_catalog_file()
    if catalog_path is None:
        result.errors.append("No catalog file found.")
        return result
    result.catalog_path = catalog_path

    try:
        catalog = load_catalog_file(catalog_path)
    except (CatalogFileError, CatalogError) as e:
        result.errors.append(str(e))
        return result
    result.catalog = catalog

    if not catalog.libraries:
        result.warnings.append("Catalog has no libraries.")

    lookup = catalog.lookup
    for lib in catalog.libraries:
        if not lib.categories:
            result.warnings.append(f"Library '{lib.id}' has no usable categories.")
        missing = [i for i in lib.works_well_with if i not in lookup]
        if missing:
            result.warnings.append(
                f"Library '{lib.id}' links unknown libraries: {', '.join(missing)}"
            )
        if lib.id in lib.works_well_with:
            result.warnings.append(f"Library '{lib.id}' lists itself in worksWellWith.")

    # Two libraries sharing an install dir would overwrite each other's test file
    fs_names: dict[tuple[str, str], str] = {}
    for lib in catalog.libraries:
        key = (lib.suffix_dir, lib.fs_name)
        if key in fs_names:
            result.warnings.append(
                f"Libraries '{fs_names[key]}' and '{lib.id}' share "
                f"{lib.suffix_dir}/{lib.test_file}"
            )
        else:
            fs_names[key] = lib.id

    result.valid = not result.errors
    return result
