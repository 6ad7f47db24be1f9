"""
Catalog loader — raw catalog entries → validated ``LibraryRecord``s.

Input is already decoded (YAML, XML, or a plain dict built in code):
a mapping with a ``libraries`` sequence and the optional catalog-level
defaults ``baseDir`` and ``defaultVersion``. Each entry is a mapping of
camelCase field name → text, except ``files`` and ``documentation``
which are lists of mappings.

Validation is fail-fast: the first missing required field anywhere in
the catalog raises ``CatalogError`` and no records are returned.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

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

logger = logging.getLogger(__name__)

UNKNOWN_ID = "unknown"


class CatalogError(Exception):
    """Raised when the catalog is structurally invalid.

    Carries the raw field name and the owning library id so callers
    can point at the offending entry.
    """

    def __init__(self, field: str, library_id: str, message: str | None = None):
        self.field = field
        self.library_id = library_id or UNKNOWN_ID
        super().__init__(
            message
            or f'Missing required field "{field}" for library "{self.library_id}"'
        )


# ── Field helpers ───────────────────────────────────────────────


def _text(value: Any) -> str:
    """Coerce a raw field value to trimmed text ('' for None)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def _ensure(value: str, field: str, library_id: str) -> str:
    if not value:
        raise CatalogError(field, library_id)
    return value


def _tag_text(value: Any) -> str:
    """Raw text of a tag field; YAML catalogs may give a list instead."""
    if isinstance(value, (list, tuple)):
        return ",".join(_text(t) for t in value)
    return _text(value)


def parse_tags(text: Any) -> list[str]:
    """Split a comma-separated field, trimming and dropping empty tokens."""
    return [t.strip() for t in _tag_text(text).split(",") if t.strip()]


def _parse_files(entry: Mapping[str, Any], library_id: str) -> list[LibraryFile]:
    """Read the explicit file list, falling back to legacy file/url fields."""
    raw_files = entry.get("files")

    if raw_files:
        if not isinstance(raw_files, Sequence) or isinstance(raw_files, str):
            raise CatalogError(
                "files", library_id,
                f'Field "files" for library "{library_id}" must be a list',
            )
        files: list[LibraryFile] = []
        for index, raw in enumerate(raw_files):
            raw = raw if isinstance(raw, Mapping) else {"path": raw}
            path = _ensure(_text(raw.get("path")), f"files[{index}].path", library_id)
            url = _text(raw.get("url")) or _text(raw.get("href"))
            _ensure(url, f"files[{index}].url", library_id)
            files.append(LibraryFile(path=path, url=url))
        return files

    # Legacy: single file + url on the entry itself
    path = _ensure(_text(entry.get("file")), "file", library_id)
    url = _ensure(_text(entry.get("url")), "url", library_id)
    return [LibraryFile(path=path, url=url)]


def _parse_documentation(entry: Mapping[str, Any], library_id: str) -> list[DocLink]:
    raw_links = entry.get("documentation")
    if not raw_links or isinstance(raw_links, str) or not isinstance(raw_links, Sequence):
        raise CatalogError("documentation", library_id)

    links: list[DocLink] = []
    for index, raw in enumerate(raw_links):
        if not isinstance(raw, Mapping):
            raise CatalogError(f"documentation[{index}].url", library_id)
        url = _ensure(_text(raw.get("url")), f"documentation[{index}].url", library_id)
        label = _ensure(
            _text(raw.get("label")), f"documentation[{index}].label", library_id,
        )
        links.append(DocLink(url=url, label=label))
    return links


# ── Entry / catalog parsing ─────────────────────────────────────


def parse_library(entry: Mapping[str, Any], default_version: str = DEFAULT_VERSION) -> LibraryRecord:
    """Validate one raw entry and build its ``LibraryRecord``.

    Raises:
        CatalogError: On the first missing or empty required field.
    """
    if not isinstance(entry, Mapping):
        raise CatalogError("id", UNKNOWN_ID, "Library entry must be a mapping")

    library_id = _text(entry.get("id"))
    _ensure(library_id, "id", UNKNOWN_ID)

    fs_name = _text(entry.get("fsName")) or library_id
    files = _parse_files(entry, library_id)

    suffix_dir = _ensure(_text(entry.get("suffixDir")), "suffixDir", library_id)
    version = _text(entry.get("version")) or default_version
    title = _text(entry.get("title")) or fs_name
    description = _ensure(_text(entry.get("description")), "description", library_id)

    # The raw field must be present; an all-blank tag list is accepted
    categories_raw = _ensure(_tag_text(entry.get("categories")), "categories", library_id)
    categories = parse_tags(categories_raw)

    sample_code = _ensure(_text(entry.get("sampleCode")), "sampleCode", library_id)
    license_summary = _ensure(
        _text(entry.get("licenseSummary")), "licenseSummary", library_id,
    )
    license_url = _ensure(_text(entry.get("licenseUrl")), "licenseUrl", library_id)

    works_well_with = parse_tags(entry.get("worksWellWith"))[:MAX_RELATED]
    documentation = _parse_documentation(entry, library_id)

    record = LibraryRecord(
        id=library_id,
        fs_name=fs_name,
        files=tuple(files),
        suffix_dir=suffix_dir,
        version=version,
        title=title,
        description=description,
        license_summary=license_summary,
        license_url=license_url,
        categories=tuple(categories),
        sample_code=sample_code,
        works_well_with=tuple(works_well_with),
        documentation=tuple(documentation),
    )
    logger.debug("Parsed library '%s' (%d files)", record.id, len(record.files))
    return record


def parse_catalog(raw: Mapping[str, Any] | None) -> tuple[CatalogSettings, list[LibraryRecord]]:
    """Validate a decoded catalog.

    Args:
        raw: Mapping with ``libraries`` (sequence of entries) and the
            optional ``baseDir`` / ``defaultVersion`` defaults.

    Returns:
        ``(settings, records)`` with records in catalog order.

    Raises:
        CatalogError: On the first structural problem. No partial
            catalog is ever returned.
    """
    if not isinstance(raw, Mapping):
        raise CatalogError("libraries", UNKNOWN_ID, "Catalog is missing the libraries root")

    entries = raw.get("libraries")
    if entries is None or isinstance(entries, (str, Mapping)) or not isinstance(entries, Sequence):
        raise CatalogError("libraries", UNKNOWN_ID, "Catalog is missing the libraries root")

    settings = CatalogSettings(
        base_dir_default=_text(raw.get("baseDir")) or DEFAULT_BASE_DIR,
        default_version=_text(raw.get("defaultVersion")) or DEFAULT_VERSION,
    )

    records: list[LibraryRecord] = []
    seen: set[str] = set()
    for entry in entries:
        record = parse_library(entry, default_version=settings.default_version)
        if record.id in seen:
            raise CatalogError(
                "id", record.id, f'Duplicate library id "{record.id}"',
            )
        seen.add(record.id)
        records.append(record)

    logger.info(
        "Parsed catalog: %d libraries, baseDir=%s",
        len(records), settings.base_dir_default,
    )
    return settings, records


def load_catalog(raw: Mapping[str, Any] | None) -> Catalog:
    """Validate a decoded catalog and wrap it into a ``Catalog``."""
    settings, records = parse_catalog(raw)
    return Catalog(settings=settings, libraries=tuple(records))
