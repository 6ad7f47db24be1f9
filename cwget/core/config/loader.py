"""
Catalog file loader — reads catalog.yml / catalog.xml into a Catalog.

This is the only place that touches the filesystem. It decodes the
file into the raw mapping the catalog parser expects, then hands it
over for validation.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

import yaml

from cwget.core.models.library import Catalog
from cwget.core.services.catalog_ops import load_catalog

logger = logging.getLogger(__name__)

# Candidate catalog filenames, in lookup order
CATALOG_FILES = ("catalog.yml", "catalog.yaml", "catalog.xml")


class CatalogFileError(Exception):
    """Raised when the catalog file is missing, unreadable, or undecodable."""


def find_catalog_file(start_dir: Path | None = None) -> Path | None:
    """Search for a catalog file starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the catalog file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        for name in CATALOG_FILES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


# ── XML decoding ────────────────────────────────────────────────


def _child_text(node: ET.Element, tag: str) -> str:
    child = node.find(tag)
    if child is None:
        return ""
    return (child.text or "").strip()


def _decode_files(node: ET.Element) -> list[dict[str, str]]:
    files_parent = node.find("files")
    if files_parent is None:
        return []
    files = []
    for file_node in files_parent.findall("file"):
        path = file_node.get("path") or file_node.text or ""
        url = file_node.get("url") or file_node.get("href") or _child_text(file_node, "url")
        files.append({"path": path.strip(), "url": url.strip()})
    return files


def _decode_documentation(node: ET.Element) -> list[dict[str, str]]:
    docs_parent = node.find("documentation")
    if docs_parent is None:
        return []
    return [
        {
            "url": (link.get("url") or link.get("href") or "").strip(),
            "label": (link.get("label") or link.text or "").strip(),
        }
        for link in docs_parent.findall("link")
    ]


def _decode_library(node: ET.Element) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "id": node.get("id") or "",
        "fsName": node.get("fsName") or "",
    }
    for tag in (
        "suffixDir", "version", "title", "description", "categories",
        "sampleCode", "licenseSummary", "licenseUrl", "worksWellWith",
    ):
        entry[tag] = _child_text(node, tag)

    files = _decode_files(node)
    if files:
        entry["files"] = files
    else:
        # Legacy: a single <file> and <url> directly under <library>
        entry["file"] = _child_text(node, "file")
        entry["url"] = _child_text(node, "url")

    entry["documentation"] = _decode_documentation(node)
    return entry


def decode_xml(text: str) -> dict[str, Any]:
    """Decode a ``<libraries>`` XML document into a raw catalog mapping.

    Raises:
        CatalogFileError: On malformed XML or a missing root element.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise CatalogFileError(f"XML parse error: {e}") from e

    if root.tag != "libraries":
        found = root.find(".//libraries")
        if found is None:
            raise CatalogFileError("XML is missing the <libraries> root element")
        root = found

    return {
        "baseDir": root.get("baseDir") or "",
        "defaultVersion": root.get("defaultVersion") or "",
        "libraries": [_decode_library(node) for node in root.findall("library")],
    }


# ── YAML decoding ───────────────────────────────────────────────


def decode_yaml(text: str) -> dict[str, Any]:
    """Decode a YAML catalog. The content may sit under a ``catalog:`` key.

    Raises:
        CatalogFileError: On invalid YAML or a non-mapping document.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise CatalogFileError(f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise CatalogFileError(f"Expected a YAML mapping, got {type(data).__name__}")

    return data.get("catalog", data) if isinstance(data.get("catalog"), dict) else data


# ── Entry points ────────────────────────────────────────────────


def read_catalog(path: Path) -> dict[str, Any]:
    """Read and decode a catalog file (by extension) without validating it.

    Raises:
        CatalogFileError: If the file is missing, unreadable, or undecodable.
    """
    if not path.is_file():
        raise CatalogFileError(f"Catalog file not found: {path}")

    logger.debug("Reading catalog from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogFileError(f"Cannot read {path}: {e}") from e

    try:
        if path.suffix.lower() == ".xml":
            return decode_xml(raw)
        return decode_yaml(raw)
    except CatalogFileError as e:
        raise CatalogFileError(f"{path}: {e}") from e


def load_catalog_file(path: Path | None = None) -> Catalog:
    """Load and validate a catalog file.

    Args:
        path: Explicit catalog path. If None, searches upward from cwd.

    Returns:
        Validated Catalog.

    Raises:
        CatalogFileError: If the file is missing or cannot be decoded.
        CatalogError: If the decoded catalog fails validation.
    """
    if path is None:
        path = find_catalog_file()

    if path is None:
        raise CatalogFileError(
            f"No catalog file found ({', '.join(CATALOG_FILES)}). "
            "Specify one with --catalog."
        )

    catalog = load_catalog(read_catalog(path))
    logger.info("Loaded catalog %s with %d libraries", path, len(catalog))
    return catalog
