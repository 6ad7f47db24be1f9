"""
Command synthesis — one-line download and compile commands.

POSIX commands are chained with ``&&`` so the first failure stops the
line. PowerShell commands use ``;``, the dialect's plain sequential
separator.

Output is a pure function of ``(record, target)``.
"""

from __future__ import annotations

from cwget.core.models.library import LibraryFile, LibraryRecord
from cwget.core.models.target import CommandSet, InstallTarget
from cwget.core.services.synthesis.quoting import Dialect, include_flag, quote

POSIX_JOINER = " && "
PWSH_JOINER = "; "

# PowerShell download verbs; curl/wget are aliases of Invoke-WebRequest
# in Windows PowerShell, so all three take the same arguments.
PWSH_DOWNLOADERS = ("curl", "wget", "Invoke-WebRequest")


def is_c_source(path: str) -> bool:
    """True for ``.c`` files, extension compared case-insensitively."""
    return path.lower().endswith(".c")


def c_sources(files: tuple[LibraryFile, ...] | list[LibraryFile], paths: tuple[str, ...] | list[str]) -> list[str]:
    """Pick the resolved paths of the ``.c`` files, in catalog order.

    ``paths`` is parallel to ``files`` (one resolved path per file).
    Headers and anything else are never compiler inputs.
    """
    return [path for f, path in zip(files, paths) if is_c_source(f.path)]


# ── Download ────────────────────────────────────────────────────


def posix_mkdir(install_dir: str) -> str:
    return f"mkdir -p {quote(install_dir, Dialect.POSIX)}"


def pwsh_mkdir(install_dir: str) -> str:
    return (
        f"New-Item -ItemType Directory -Path {quote(install_dir, Dialect.POWERSHELL)}"
        " -Force | Out-Null"
    )


def wget_posix(record: LibraryRecord, target: InstallTarget) -> str:
    """``mkdir -p DIR && wget -O DEST URL && ...``"""
    parts = [
        f"wget -O {quote(dest, Dialect.POSIX)} {quote(f.url, Dialect.POSIX)}"
        for f, dest in zip(record.files, target.posix_library_paths)
    ]
    return POSIX_JOINER.join([posix_mkdir(target.dirs.posix), *parts])


def curl_posix(record: LibraryRecord, target: InstallTarget) -> str:
    """``mkdir -p DIR && curl -L URL -o DEST && ...``"""
    parts = [
        f"curl -L {quote(f.url, Dialect.POSIX)} -o {quote(dest, Dialect.POSIX)}"
        for f, dest in zip(record.files, target.posix_library_paths)
    ]
    return POSIX_JOINER.join([posix_mkdir(target.dirs.posix), *parts])


def pwsh_download(record: LibraryRecord, target: InstallTarget, verb: str) -> str:
    """``New-Item ... -Force | Out-Null; VERB URL -OutFile DEST; ...``

    Args:
        verb: One of ``PWSH_DOWNLOADERS``.
    """
    if verb not in PWSH_DOWNLOADERS:
        raise ValueError(f"Unknown PowerShell downloader: {verb}")
    parts = [
        f"{verb} {quote(f.url, Dialect.POWERSHELL)} -OutFile {quote(dest, Dialect.POWERSHELL)}"
        for f, dest in zip(record.files, target.win_library_paths)
    ]
    return PWSH_JOINER.join([pwsh_mkdir(target.dirs.win), *parts])


# ── Compile ─────────────────────────────────────────────────────


def compile_posix(record: LibraryRecord, target: InstallTarget) -> str:
    """``cc -Wall -Wextra -IDIR TEST [SOURCES] -o EXE``"""
    sources = [
        quote(p, Dialect.POSIX)
        for p in c_sources(record.files, target.posix_library_paths)
    ]
    args = [
        "cc -Wall -Wextra",
        include_flag("-I", target.dirs.posix, Dialect.POSIX),
        quote(target.posix_test_path, Dialect.POSIX),
        *sources,
        f"-o {quote(target.posix_exe_path, Dialect.POSIX)}",
    ]
    return " ".join(args)


def compile_win(record: LibraryRecord, target: InstallTarget) -> str:
    """``cl /W4 /IDIR TEST [SOURCES] /FeEXE``"""
    sources = [
        quote(p, Dialect.POWERSHELL)
        for p in c_sources(record.files, target.win_library_paths)
    ]
    args = [
        "cl /W4",
        include_flag("/I", target.dirs.win, Dialect.POWERSHELL),
        quote(target.win_test_path, Dialect.POWERSHELL),
        *sources,
        f"/Fe{quote(target.win_exe_path, Dialect.POWERSHELL)}",
    ]
    return " ".join(args)


def build_commands(record: LibraryRecord, target: InstallTarget) -> CommandSet:
    """All seven one-line commands for ``record`` at ``target``."""
    return CommandSet(
        wget_posix=wget_posix(record, target),
        curl_posix=curl_posix(record, target),
        curl_pwsh=pwsh_download(record, target, "curl"),
        wget_pwsh=pwsh_download(record, target, "wget"),
        iwr_pwsh=pwsh_download(record, target, "Invoke-WebRequest"),
        compile_posix=compile_posix(record, target),
        compile_win=compile_win(record, target),
    )
