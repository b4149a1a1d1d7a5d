"""Session detection: where is this process running?"""

from __future__ import annotations

import platform
from collections.abc import Mapping
from dataclasses import dataclass

_WSL_MARKERS = ("WSL_DISTRO_NAME", "WSL_INTEROP")


@dataclass(frozen=True)
class SessionContext:
    """Environment signals that decide how the clipboard is reached."""

    remote: bool = False
    wsl: bool = False

    @classmethod
    def detect(
        cls,
        environ: Mapping[str, str],
        remote_session_var: str = "SSH_CLIENT",
    ) -> SessionContext:
        """Build a context from *environ* and the running kernel."""
        wsl = any(marker in environ for marker in _WSL_MARKERS)
        if not wsl:
            wsl = "microsoft" in platform.uname().release.lower()
        return cls(remote=remote_session_var in environ, wsl=wsl)
