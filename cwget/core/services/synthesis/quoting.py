"""
Shell quoting — minimal double-quote literals per dialect.

Only ``"`` is escaped. This is enough for the catalog URLs and the
paths built by ``paths``; it is not a general shell-safety quoter and
must not be fed untrusted input containing ``$``, backticks and the
like.
"""

from __future__ import annotations

import re
from enum import StrEnum


class Dialect(StrEnum):
    """Supported command/script styles."""

    POSIX = "posix"
    POWERSHELL = "powershell"


# Characters that never need quoting in either dialect
_SAFE_BARE = re.compile(r"^[\w@%+=:,./\\-]+$")


def escape_quotes(value: str, dialect: Dialect | str) -> str:
    """Escape embedded double quotes for the dialect."""
    if Dialect(dialect) is Dialect.POWERSHELL:
        return value.replace('"', '""')
    return value.replace('"', '\\"')


def quote(value: str, dialect: Dialect | str) -> str:
    """Wrap ``value`` in double quotes after escaping embedded quotes.

    POSIX escapes ``"`` as ``\\"``, PowerShell doubles it.
    """
    return f'"{escape_quotes(value, dialect)}"'


def unescape(quoted: str, dialect: Dialect | str) -> str:
    """Inverse of ``quote``: strip the outer quotes and undo escaping.

    Raises:
        ValueError: If ``quoted`` is not wrapped in double quotes.
    """
    if len(quoted) < 2 or not (quoted.startswith('"') and quoted.endswith('"')):
        raise ValueError(f"Not a quoted literal: {quoted!r}")
    inner = quoted[1:-1]
    if Dialect(dialect) is Dialect.POWERSHELL:
        return inner.replace('""', '"')
    return inner.replace('\\"', '"')


def include_flag(prefix: str, path: str, dialect: Dialect | str) -> str:
    """Compiler include flag (``-I`` / ``/I``) glued to its directory.

    The directory is left bare when it only holds safe characters
    and quoted otherwise, so ``-Iexternal/net`` but
    ``-I"my libs/net"``.
    """
    if path and _SAFE_BARE.match(path):
        return f"{prefix}{path}"
    return f"{prefix}{quote(path, dialect)}"
