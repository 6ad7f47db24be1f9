"""
Synthesis models — derived, never persisted.

An ``InstallTarget`` holds every path derived from a
``(LibraryRecord, base_dir)`` pair; ``CommandSet`` and ``ScriptSet``
hold the text built from it. ``RenderData`` bundles all three for the
consumer (CLI, JSON output).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class InstallDirs(BaseModel):
    """Install directory in both dialect forms."""

    model_config = ConfigDict(frozen=True)

    posix: str  # slash form
    win: str    # native backslash form


class InstallTarget(BaseModel):
    """All resolved paths for one library under one base directory."""

    model_config = ConfigDict(frozen=True)

    dirs: InstallDirs
    posix_library_paths: tuple[str, ...]
    win_library_paths: tuple[str, ...]
    posix_test_path: str
    win_test_path: str
    posix_exe_path: str
    win_exe_path: str


class CommandSet(BaseModel):
    """One-line download and compile commands for both dialects."""

    model_config = ConfigDict(frozen=True)

    wget_posix: str
    curl_posix: str
    curl_pwsh: str
    wget_pwsh: str
    iwr_pwsh: str
    compile_posix: str
    compile_win: str


class ScriptSet(BaseModel):
    """Complete install scripts."""

    model_config = ConfigDict(frozen=True)

    posix: str
    powershell: str


class RenderData(BaseModel):
    """Everything the presentation layer needs for one library."""

    model_config = ConfigDict(frozen=True)

    library_id: str
    target: InstallTarget
    commands: CommandSet
    scripts: ScriptSet

    def to_dict(self) -> dict:
        return {
            "id": self.library_id,
            "dirs": self.target.dirs.model_dump(),
            "paths": {
                "posix_library_paths": list(self.target.posix_library_paths),
                "win_library_paths": list(self.target.win_library_paths),
                "posix_test_path": self.target.posix_test_path,
                "win_test_path": self.target.win_test_path,
                "posix_exe_path": self.target.posix_exe_path,
                "win_exe_path": self.target.win_exe_path,
            },
            "commands": self.commands.model_dump(),
            "scripts": self.scripts.model_dump(),
        }
