"""
Shared test fixtures and configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from cwget.core.models.library import LibraryRecord
from cwget.core.services.catalog_ops import parse_library

from tests.factories import make_entry


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def entry() -> dict[str, Any]:
    return make_entry()


@pytest.fixture
def curlib() -> LibraryRecord:
    """The curlib record (single header, suffix dir 'net')."""
    return parse_library(make_entry())


@pytest.fixture
def multi_file() -> LibraryRecord:
    """A record mixing headers, sources, and nested paths."""
    return parse_library(make_entry(
        id="mix",
        fsName="mix",
        suffixDir="util/mix",
        files=[
            {"path": "a.h", "url": "https://example.org/a.h"},
            {"path": "b.c", "url": "https://example.org/b.c"},
            {"path": "sub/C.C", "url": "https://example.org/C.C"},
            {"path": "d.txt", "url": "https://example.org/d.txt"},
        ],
    ))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep CWGET_* variables from the developer's shell out of tests."""
    for name in ("CWGET_BASE_DIR", "CWGET_PLATFORM", "CWGET_LOG_LEVEL", "CWGET_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
