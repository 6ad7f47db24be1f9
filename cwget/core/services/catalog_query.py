"""
Catalog queries — free-text search, tag filter, related libraries.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cwget.core.models.library import MAX_RELATED, Catalog, LibraryRecord

logger = logging.getLogger(__name__)


def _haystack(record: LibraryRecord) -> str:
    return " ".join([
        record.title,
        record.description,
        " ".join(record.categories),
        " ".join(record.file_paths),
    ]).lower()


def filter_libraries(records: Iterable[LibraryRecord], query: str | None) -> list[LibraryRecord]:
    """Case-insensitive substring search over title, description, tags, file paths.

    A blank query matches everything.
    """
    needle = (query or "").strip().lower()
    records = list(records)
    if not needle:
        return records
    matched = [r for r in records if needle in _haystack(r)]
    logger.debug("Filter %r matched %d of %d", needle, len(matched), len(records))
    return matched


def filter_by_tag(records: Iterable[LibraryRecord], tag: str) -> list[LibraryRecord]:
    """Records carrying ``tag`` (exact match, case-insensitive)."""
    wanted = tag.strip().lower()
    return [r for r in records if wanted in (c.lower() for c in r.categories)]


def all_tags(records: Iterable[LibraryRecord]) -> list[str]:
    """Sorted unique tags across ``records``."""
    return sorted({tag for r in records for tag in r.categories})


def resolve_related(record: LibraryRecord, catalog: Catalog) -> list[LibraryRecord]:
    """Resolve ``works_well_with`` ids; unknown ids are dropped."""
    lookup = catalog.lookup
    related = [lookup[i] for i in record.works_well_with[:MAX_RELATED] if i in lookup]
    dropped = len(record.works_well_with) - len(related)
    if dropped:
        logger.debug("'%s': %d related id(s) not in catalog", record.id, dropped)
    return related
