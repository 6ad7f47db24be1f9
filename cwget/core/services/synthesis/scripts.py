"""
Script synthesis — complete install scripts per dialect.

Both scripts share one fixed shape:

    header / strict mode
    BASE_DIR + TEST_PATH variables
    create the install directory
    one download line per file (catalog order)
    write the sample program
    compile it
    completion message

The sample program is written verbatim (trimmed) through a quoted
heredoc (bash) or a literal here-string (PowerShell). Neither form
expands variables, so the body is never re-escaped. The delimiters are
fixed: ``CWGET_SAMPLE_END`` for bash and ``'@`` at the start of a line
for PowerShell. A well-formed C program contains neither.
"""

from __future__ import annotations

from cwget.core.models.library import LibraryRecord
from cwget.core.models.target import InstallTarget, ScriptSet
from cwget.core.services.synthesis.commands import compile_posix, compile_win
from cwget.core.services.synthesis.quoting import Dialect, quote

HEREDOC_DELIMITER = "CWGET_SAMPLE_END"
HERE_STRING_OPEN = "@'"
HERE_STRING_CLOSE = "'@"

PWSH_HEADER = "# PowerShell install and build script generated by cwget"


def build_posix_script(record: LibraryRecord, target: InstallTarget) -> str:
    """Bash script: strict mode, downloads, heredoc sample, compile."""
    lines = [
        "#!/usr/bin/env bash",
        "set -euo pipefail",
        f"BASE_DIR={quote(target.dirs.posix, Dialect.POSIX)}",
        f"TEST_PATH={quote(target.posix_test_path, Dialect.POSIX)}",
        "",
        'mkdir -p "$BASE_DIR"',
        'echo "Downloading library files..."',
        *(
            f"curl -L {quote(f.url, Dialect.POSIX)} -o {quote(dest, Dialect.POSIX)}"
            for f, dest in zip(record.files, target.posix_library_paths)
        ),
        'echo "Writing sample program..."',
        f"cat > \"$TEST_PATH\" <<'{HEREDOC_DELIMITER}'",
        record.sample_code.strip(),
        HEREDOC_DELIMITER,
        'echo "Compiling sample..."',
        compile_posix(record, target),
        'echo "Done."',
        "",
    ]
    return "\n".join(lines)


def build_powershell_script(record: LibraryRecord, target: InstallTarget) -> str:
    """PowerShell script: forced mkdir, downloads, here-string sample, compile."""
    lines = [
        PWSH_HEADER,
        f"$BaseDir = {quote(target.dirs.win, Dialect.POWERSHELL)}",
        f"$TestPath = {quote(target.win_test_path, Dialect.POWERSHELL)}",
        "",
        "New-Item -ItemType Directory -Force -Path $BaseDir | Out-Null",
        'Write-Host "Downloading library files..."',
        *(
            f"Invoke-WebRequest -Uri {quote(f.url, Dialect.POWERSHELL)}"
            f" -OutFile {quote(dest, Dialect.POWERSHELL)}"
            for f, dest in zip(record.files, target.win_library_paths)
        ),
        'Write-Host "Writing sample program..."',
        HERE_STRING_OPEN,
        record.sample_code.strip(),
        f"{HERE_STRING_CLOSE} | Set-Content -Path $TestPath",
        'Write-Host "Compiling sample..."',
        compile_win(record, target),
        'Write-Host "Done."',
        "",
    ]
    return "\n".join(lines)


def build_script(record: LibraryRecord, target: InstallTarget, dialect: Dialect | str) -> str:
    """Install script for a single dialect."""
    if Dialect(dialect) is Dialect.POWERSHELL:
        return build_powershell_script(record, target)
    return build_posix_script(record, target)


def build_scripts(record: LibraryRecord, target: InstallTarget) -> ScriptSet:
    return ScriptSet(
        posix=build_posix_script(record, target),
        powershell=build_powershell_script(record, target),
    )
