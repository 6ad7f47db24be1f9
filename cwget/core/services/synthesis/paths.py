"""
Path resolution — base dir + suffix dir → install paths in both forms.

The POSIX form always uses ``/``. The PowerShell form is the native
Windows form: every ``/`` becomes ``\\``, in the install directory and
inside each file's relative path alike.

Pure functions; nothing here touches the filesystem.
"""

from __future__ import annotations

import re

from cwget.core.models.library import DEFAULT_BASE_DIR, LibraryRecord
from cwget.core.models.target import InstallDirs, InstallTarget

# Trailing run of slashes and blanks, e.g. the "/ /" in "ext/ /"
_TRAILING_SEPARATORS = re.compile(r"[\s/]+$")


def _clean(value: str | None) -> str:
    return _TRAILING_SEPARATORS.sub("", (value or "").strip().replace("\\", "/"))


def normalize_base_dir(value: str | None, fallback: str = DEFAULT_BASE_DIR) -> str:
    """Trim, use ``/``, drop trailing ``/``; blank results take the fallback.

    The fallback goes through the same cleanup, so the result is
    always a fixed point: ``normalize_base_dir(normalize_base_dir(x)) ==
    normalize_base_dir(x)``.
    """
    return _clean(value) or _clean(fallback) or DEFAULT_BASE_DIR


def to_native(path: str) -> str:
    """Slash form → Windows backslash form."""
    return path.replace("/", "\\")


def resolve_install_dirs(
    base_dir: str | None,
    suffix_dir: str | None,
    fallback: str = DEFAULT_BASE_DIR,
) -> InstallDirs:
    """Combine base and suffix into the install directory.

    Args:
        base_dir: User setting (may be blank, use backslashes, or end
            with a separator).
        suffix_dir: The record's fixed sub-directory; empty means the
            base directory itself.
        fallback: Used when ``base_dir`` is blank.
    """
    clean_base = normalize_base_dir(base_dir, fallback)
    clean_suffix = _clean(suffix_dir)
    combined = f"{clean_base}/{clean_suffix}" if clean_suffix else clean_base
    return InstallDirs(posix=combined, win=to_native(combined))


def posix_path(install_dir: str, relative: str) -> str:
    return f"{install_dir}/{relative}"


def win_path(install_dir: str, relative: str) -> str:
    return f"{install_dir}\\{to_native(relative)}"


def build_install_target(
    record: LibraryRecord,
    base_dir: str | None,
    fallback: str = DEFAULT_BASE_DIR,
) -> InstallTarget:
    """Resolve every path needed to download and build ``record``."""
    dirs = resolve_install_dirs(base_dir, record.suffix_dir, fallback)
    return InstallTarget(
        dirs=dirs,
        posix_library_paths=tuple(posix_path(dirs.posix, f.path) for f in record.files),
        win_library_paths=tuple(win_path(dirs.win, f.path) for f in record.files),
        posix_test_path=posix_path(dirs.posix, record.test_file),
        win_test_path=win_path(dirs.win, record.test_file),
        posix_exe_path=posix_path(dirs.posix, record.exe_name),
        win_exe_path=win_path(dirs.win, f"{record.exe_name}.exe"),
    )
