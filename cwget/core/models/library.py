"""
Library model — one catalog entry and the catalog that holds it.

Records are built once by the catalog loader and never mutated
afterwards; every model here is frozen.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Catalog-wide fallbacks when the catalog root does not set them
DEFAULT_BASE_DIR = "external"
DEFAULT_VERSION = "0.0.0"

# worksWellWith is a cross-link list, capped for display
MAX_RELATED = 7


class LibraryFile(BaseModel):
    """A single downloadable file of a library.

    ``path`` is relative to the install directory and may contain
    forward slashes; ``url`` is the fully qualified download URL.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    url: str


class DocLink(BaseModel):
    """A documentation link shown next to a library."""

    model_config = ConfigDict(frozen=True)

    url: str
    label: str


class LibraryRecord(BaseModel):
    """A validated catalog entry.

    The declared fields come straight from the catalog; ``test_file``
    and ``exe_name`` are derived from ``fs_name``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    fs_name: str
    files: tuple[LibraryFile, ...]
    suffix_dir: str
    version: str
    title: str
    description: str
    license_summary: str
    license_url: str
    categories: tuple[str, ...] = ()
    sample_code: str
    works_well_with: tuple[str, ...] = Field(default=(), max_length=MAX_RELATED)
    documentation: tuple[DocLink, ...]

    @property
    def test_file(self) -> str:
        """Name of the generated sample program source file."""
        return f"test_{self.fs_name}_main.c"

    @property
    def exe_name(self) -> str:
        """Base name of the compiled sample binary (no extension)."""
        return f"{self.fs_name}_example"

    @property
    def file_paths(self) -> list[str]:
        return [f.path for f in self.files]


class CatalogSettings(BaseModel):
    """Catalog-wide defaults read from the catalog root."""

    model_config = ConfigDict(frozen=True)

    base_dir_default: str = DEFAULT_BASE_DIR
    default_version: str = DEFAULT_VERSION


class Catalog(BaseModel):
    """The full ordered collection of library records plus defaults."""

    model_config = ConfigDict(frozen=True)

    settings: CatalogSettings = Field(default_factory=CatalogSettings)
    libraries: tuple[LibraryRecord, ...] = ()

    @property
    def ids(self) -> list[str]:
        return [lib.id for lib in self.libraries]

    @property
    def lookup(self) -> dict[str, LibraryRecord]:
        """Map of library id → record."""
        return {lib.id: lib for lib in self.libraries}

    def get(self, library_id: str) -> LibraryRecord | None:
        """Look up a library by id."""
        for lib in self.libraries:
            if lib.id == library_id:
                return lib
        return None

    def __len__(self) -> int:
        return len(self.libraries)
