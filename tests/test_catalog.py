"""
Tests for the catalog loader — field rules, defaults, fail-fast errors.
"""

import pytest

from cwget.core.models import DEFAULT_BASE_DIR, DEFAULT_VERSION, LibraryFile
from cwget.core.services.catalog_ops import (
    CatalogError,
    load_catalog,
    parse_catalog,
    parse_library,
    parse_tags,
)

from tests.factories import make_entry


# ═══════════════════════════════════════════════════════════════════
#  parse_tags
# ═══════════════════════════════════════════════════════════════════


class TestParseTags:
    def test_split_and_trim(self):
        assert parse_tags(" net , http,,  ") == ["net", "http"]

    def test_empty(self):
        assert parse_tags("") == []
        assert parse_tags(None) == []

    def test_list_input(self):
        """YAML catalogs may use a list instead of a comma string."""
        assert parse_tags(["a", " b ", ""]) == ["a", "b"]


# ═══════════════════════════════════════════════════════════════════
#  parse_library
# ═══════════════════════════════════════════════════════════════════


class TestParseLibrary:
    def test_full_entry(self, entry):
        lib = parse_library(entry)
        assert lib.id == "curlib"
        assert lib.fs_name == "curlib"
        assert lib.files == (LibraryFile(path="curlib.h", url="https://example.org/curlib.h"),)
        assert lib.suffix_dir == "net"
        assert lib.version == "1.2.0"
        assert lib.categories == ("net", "http")
        assert lib.works_well_with == ("jsonlite",)
        assert lib.test_file == "test_curlib_main.c"
        assert lib.documentation[0].label == "Docs"

    def test_defaults(self):
        """fsName → id, title → fsName, version → catalog default."""
        lib = parse_library(
            make_entry(fsName=None, title=None, version=None),
            default_version="9.9",
        )
        assert lib.fs_name == "curlib"
        assert lib.title == "curlib"
        assert lib.version == "9.9"

    def test_title_defaults_to_fs_name(self):
        lib = parse_library(make_entry(fsName="cur_lib", title=None))
        assert lib.title == "cur_lib"
        assert lib.test_file == "test_cur_lib_main.c"

    def test_fields_are_trimmed(self):
        lib = parse_library(make_entry(suffixDir="  net  ", description="\n desc \n"))
        assert lib.suffix_dir == "net"
        assert lib.description == "desc"

    def test_works_well_with_truncated(self):
        ids = ",".join(f"lib{i}" for i in range(10))
        lib = parse_library(make_entry(worksWellWith=ids))
        assert len(lib.works_well_with) == 7
        assert lib.works_well_with[0] == "lib0"
        assert lib.works_well_with[-1] == "lib6"

    def test_works_well_with_optional(self):
        lib = parse_library(make_entry(worksWellWith=None))
        assert lib.works_well_with == ()

    def test_blank_categories_accepted(self):
        """The raw field must exist; an empty tag set after trimming is fine."""
        lib = parse_library(make_entry(categories=" , ,"))
        assert lib.categories == ()

    def test_href_alias_for_file_url(self):
        lib = parse_library(make_entry(files=[{"path": "x.h", "href": "https://e.org/x.h"}]))
        assert lib.files[0].url == "https://e.org/x.h"

    def test_records_are_frozen(self, entry):
        lib = parse_library(entry)
        with pytest.raises(Exception):
            lib.id = "other"


class TestLegacyFiles:
    def test_legacy_pair(self):
        lib = parse_library(make_entry(
            files=None, file="curlib.h", url="https://example.org/curlib.h",
        ))
        assert lib.files == (LibraryFile(path="curlib.h", url="https://example.org/curlib.h"),)

    def test_legacy_equivalent_to_explicit(self, entry):
        legacy = parse_library(make_entry(
            files=None, file="curlib.h", url="https://example.org/curlib.h",
        ))
        assert legacy == parse_library(entry)

    def test_empty_files_list_falls_back(self):
        lib = parse_library(make_entry(
            files=[], file="old.h", url="https://example.org/old.h",
        ))
        assert lib.file_paths == ["old.h"]

    def test_no_files_at_all(self):
        with pytest.raises(CatalogError) as exc_info:
            parse_library(make_entry(files=None))
        assert exc_info.value.field == "file"
        assert exc_info.value.library_id == "curlib"

    def test_legacy_missing_url(self):
        with pytest.raises(CatalogError) as exc_info:
            parse_library(make_entry(files=None, file="old.h"))
        assert exc_info.value.field == "url"


class TestRequiredFields:
    @pytest.mark.parametrize("field", [
        "suffixDir",
        "description",
        "categories",
        "sampleCode",
        "licenseSummary",
        "licenseUrl",
    ])
    def test_missing(self, field):
        with pytest.raises(CatalogError) as exc_info:
            parse_library(make_entry(**{field: None}))
        assert exc_info.value.field == field
        assert exc_info.value.library_id == "curlib"
        assert f'"{field}"' in str(exc_info.value)
        assert '"curlib"' in str(exc_info.value)

    @pytest.mark.parametrize("field", ["suffixDir", "sampleCode", "licenseUrl"])
    def test_whitespace_only(self, field):
        with pytest.raises(CatalogError) as exc_info:
            parse_library(make_entry(**{field: "   \n"}))
        assert exc_info.value.field == field

    def test_missing_id_reports_unknown(self):
        with pytest.raises(CatalogError) as exc_info:
            parse_library(make_entry(id=None))
        assert exc_info.value.field == "id"
        assert exc_info.value.library_id == "unknown"

    def test_file_path_index(self):
        with pytest.raises(CatalogError) as exc_info:
            parse_library(make_entry(files=[
                {"path": "a.h", "url": "https://e.org/a.h"},
                {"path": " ", "url": "https://e.org/b.h"},
            ]))
        assert exc_info.value.field == "files[1].path"

    def test_file_url_index(self):
        with pytest.raises(CatalogError) as exc_info:
            parse_library(make_entry(files=[{"path": "a.h"}]))
        assert exc_info.value.field == "files[0].url"

    def test_documentation_missing(self):
        with pytest.raises(CatalogError) as exc_info:
            parse_library(make_entry(documentation=None))
        assert exc_info.value.field == "documentation"

    def test_documentation_empty(self):
        with pytest.raises(CatalogError) as exc_info:
            parse_library(make_entry(documentation=[]))
        assert exc_info.value.field == "documentation"

    def test_documentation_label(self):
        with pytest.raises(CatalogError) as exc_info:
            parse_library(make_entry(documentation=[{"url": "https://e.org", "label": ""}]))
        assert exc_info.value.field == "documentation[0].label"

    def test_documentation_url(self):
        with pytest.raises(CatalogError) as exc_info:
            parse_library(make_entry(documentation=[{"label": "Docs"}]))
        assert exc_info.value.field == "documentation[0].url"


# ═══════════════════════════════════════════════════════════════════
#  parse_catalog / load_catalog
# ═══════════════════════════════════════════════════════════════════


class TestParseCatalog:
    def test_settings_and_order(self):
        settings, records = parse_catalog({
            "baseDir": "vendor",
            "defaultVersion": "2.0",
            "libraries": [
                make_entry(id="b", version=None),
                make_entry(id="a"),
            ],
        })
        assert settings.base_dir_default == "vendor"
        assert settings.default_version == "2.0"
        assert [r.id for r in records] == ["b", "a"]
        assert records[0].version == "2.0"

    def test_catalog_defaults(self):
        settings, records = parse_catalog({"libraries": []})
        assert settings.base_dir_default == DEFAULT_BASE_DIR
        assert settings.default_version == DEFAULT_VERSION
        assert records == []

    def test_every_record_has_files(self):
        _, records = parse_catalog({"libraries": [make_entry(id=f"l{i}") for i in range(3)]})
        assert all(len(r.files) > 0 for r in records)

    @pytest.mark.parametrize("raw", [None, {}, {"libraries": "nope"}, {"libraries": {"a": 1}}])
    def test_missing_root(self, raw):
        with pytest.raises(CatalogError) as exc_info:
            parse_catalog(raw)
        assert exc_info.value.field == "libraries"

    def test_missing_license_url_rejects_whole_catalog(self):
        """One bad record fails the load; nothing is returned."""
        raw = {"libraries": [
            make_entry(id="good"),
            make_entry(id="bad", licenseUrl=None),
            make_entry(id="later"),
        ]}
        with pytest.raises(CatalogError) as exc_info:
            parse_catalog(raw)
        assert exc_info.value.field == "licenseUrl"
        assert exc_info.value.library_id == "bad"
        assert "licenseUrl" in str(exc_info.value)
        assert "bad" in str(exc_info.value)

    def test_duplicate_ids(self):
        with pytest.raises(CatalogError) as exc_info:
            parse_catalog({"libraries": [make_entry(id="x"), make_entry(id="x")]})
        assert exc_info.value.field == "id"
        assert exc_info.value.library_id == "x"
        assert "Duplicate" in str(exc_info.value)

    def test_load_catalog_wraps(self):
        catalog = load_catalog({"libraries": [make_entry(id="a"), make_entry(id="b")]})
        assert len(catalog) == 2
        assert catalog.ids == ["a", "b"]
        assert catalog.get("b").id == "b"
        assert catalog.get("zzz") is None
        assert set(catalog.lookup) == {"a", "b"}
