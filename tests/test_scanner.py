"""
Tests for file and directory scanning.
"""

from pathlib import Path

import pytest

from arma_xgettext.core.catalog import Catalog
from arma_xgettext.core.errors import ScanError
from arma_xgettext.core.models import Position
from arma_xgettext.core.scanner import (
    default_options,
    extract_file,
    language_for,
    scan_paths,
)
from arma_xgettext.filters import PathspecFilter


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestLanguageFor:
    """Test recognising Arma source files."""

    @pytest.mark.parametrize("name", ["fn_init.sqf", "config.cpp", "CfgFunctions.HPP", "mission.sqm"])
    def test_known_extensions(self, name):
        assert language_for(name) == "arma"

    @pytest.mark.parametrize("name", ["README.md", "stringtable.xml", "Makefile"])
    def test_unknown_extensions(self, name):
        assert language_for(name) is None


class TestExtractFile:
    """Test extracting from a single file."""

    def test_reference_uses_logical_name(self, tmp_path):
        path = write(tmp_path / "fn_hint.sqf", 'hint localize "STR_hello";\n')
        catalog = extract_file(path, logical_filename="addons/main/fn_hint.sqf")
        assert catalog.get("STR_hello").references == [Position("addons/main/fn_hint.sqf", 1)]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ScanError, match="nope.sqf"):
            extract_file(tmp_path / "nope.sqf")

    def test_invalid_encoding(self, tmp_path):
        path = tmp_path / "bad.sqf"
        path.write_bytes(b'localize "\xff\xfe"')
        with pytest.raises(ScanError):
            extract_file(path)

    def test_other_encoding(self, tmp_path):
        path = tmp_path / "latin.sqf"
        path.write_bytes('localize "Grüße"'.encode("latin-1"))
        catalog = extract_file(path, encoding="latin-1")
        assert catalog.get("Grüße") is not None

    def test_shared_catalog(self, tmp_path):
        catalog = Catalog()
        options = default_options()
        extract_file(write(tmp_path / "a.sqf", 'localize "x"'), options, catalog)
        extract_file(write(tmp_path / "b.sqf", '\nlocalize "x"'), options, catalog)
        assert [str(p) for p in catalog.get("x").references] == [
            (tmp_path / "a.sqf").as_posix() + ":1",
            (tmp_path / "b.sqf").as_posix() + ":2",
        ]


class TestScanPaths:
    """Test scanning directories."""

    def test_directory_walk(self, tmp_path):
        write(tmp_path / "addons" / "main" / "fn_a.sqf", 'localize "a"')
        write(tmp_path / "addons" / "main" / "config.cpp", "displayName = $STR_b;")
        write(tmp_path / "addons" / "main" / "notes.txt", 'localize "ignored"')
        catalog = Catalog()
        result = scan_paths([tmp_path], catalog=catalog)
        assert [m.msgid for m in catalog] == ["str_b", "a"]
        assert len(result.files) == 2
        assert result.errors == []

    def test_gitignore_and_exclude(self, tmp_path):
        write(tmp_path / ".gitignore", "build/\n")
        write(tmp_path / "build" / "fn_a.sqf", 'localize "built"')
        write(tmp_path / "dev" / "fn_b.sqf", 'localize "dev"')
        write(tmp_path / ".hemttout" / "fn_c.sqf", 'localize "packed"')
        write(tmp_path / "fn_d.sqf", 'localize "kept"')
        catalog = Catalog()
        scan_paths([tmp_path], catalog=catalog, exclude=["dev/"])
        assert [m.msgid for m in catalog] == ["kept"]

    def test_explicit_file_is_always_scanned(self, tmp_path):
        path = write(tmp_path / "script.txt", 'localize "x"')
        catalog = Catalog()
        result = scan_paths([path], catalog=catalog)
        assert result.files == [path.as_posix()]
        assert catalog.get("x") is not None

    def test_unreadable_file_is_collected(self, tmp_path):
        good = write(tmp_path / "good.sqf", 'localize "ok"')
        missing = tmp_path / "missing.sqf"
        catalog = Catalog()
        result = scan_paths([missing, good], catalog=catalog)
        assert result.files == [good.as_posix()]
        assert len(result.errors) == 1
        assert result.errors[0].file_path == missing.as_posix()
        assert catalog.get("ok") is not None

    def test_progress_callback(self, tmp_path):
        write(tmp_path / "a.sqf", "")
        seen = []
        scan_paths([tmp_path], on_file=seen.append)
        assert seen == [(tmp_path / "a.sqf").as_posix()]

    def test_extension_is_case_insensitive(self, tmp_path):
        write(tmp_path / "FN_UPPER.SQF", 'localize "upper"')
        write(tmp_path / "readme.md", 'localize "doc"')
        catalog = Catalog()
        result = scan_paths([tmp_path], catalog=catalog)
        assert [m.msgid for m in catalog] == ["upper"]
        assert result.files == [(tmp_path / "FN_UPPER.SQF").as_posix()]


class TestPathspecFilter:
    """Test ignore rules."""

    def test_nested_gitignore(self, tmp_path):
        write(tmp_path / "addons" / ".gitignore", "*.inc\n")
        write(tmp_path / "addons" / "a.inc", "")
        write(tmp_path / "addons" / "b.sqf", "")
        path_filter = PathspecFilter(tmp_path)
        assert list(path_filter.walk()) == [
            tmp_path / "addons" / ".gitignore",
            tmp_path / "addons" / "b.sqf",
        ]

    def test_default_patterns_prune_directories(self, tmp_path):
        write(tmp_path / ".hemttout" / "a.sqf", "")
        write(tmp_path / "release" / "b.sqf", "")
        write(tmp_path / "c.pbo", "")
        write(tmp_path / "d.sqf", "")
        assert list(PathspecFilter(tmp_path).walk()) == [tmp_path / "d.sqf"]

    def test_exclude_patterns(self, tmp_path):
        path_filter = PathspecFilter(tmp_path, exclude=["tmp/"], use_defaults=False)
        assert path_filter.should_ignore(tmp_path / "tmp", is_dir=True)
        assert not path_filter.should_ignore(tmp_path / "src" / "a.sqf")
        assert not path_filter.should_ignore(tmp_path / "release", is_dir=True)
