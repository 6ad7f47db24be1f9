"""
Synthesis — re-exports the pure path/quote/command/script functions.

No subprocess calls, no filesystem access, no network calls.
Pure input→output.
"""

from cwget.core.services.synthesis.commands import (  # noqa: F401
    build_commands,
    c_sources,
    compile_posix,
    compile_win,
    curl_posix,
    is_c_source,
    pwsh_download,
    wget_posix,
)
from cwget.core.services.synthesis.paths import (  # noqa: F401
    build_install_target,
    normalize_base_dir,
    resolve_install_dirs,
)
from cwget.core.services.synthesis.quoting import (  # noqa: F401
    Dialect,
    include_flag,
    quote,
    unescape,
)
from cwget.core.services.synthesis.render import (  # noqa: F401
    render_catalog,
    render_library,
)
from cwget.core.services.synthesis.scripts import (  # noqa: F401
    HEREDOC_DELIMITER,
    build_posix_script,
    build_powershell_script,
    build_script,
    build_scripts,
)
