"""X11 fallback clipboard: pipes text into xclip or xsel.

xclip and xsel fork a background owner process that keeps serving the
selection after we exit, so the content survives this short-lived CLI.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Callable, Mapping, Sequence
from typing import Optional

from copychar.domain.errors import BackendUnavailableError, ClipboardError
from copychar.domain.ports.clipboard_port import ClipboardPort

logger = logging.getLogger(__name__)

DEFAULT_COMMANDS: list[list[str]] = [
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def _read_command(cmd: list[str]) -> list[str]:
    """Derive the read-back command from a write command."""
    if cmd[0] == "xsel":
        return [arg for arg in cmd if arg not in ("--input", "-i")] + ["--output"]
    return [*cmd, "-o"]


class X11Clipboard(ClipboardPort):
    """Clipboard adapter for an X11 desktop session.

    Parameters
    ----------
    environ : Mapping[str, str]
        Process environment; ``DISPLAY`` must be set.
    commands : Sequence[list[str]] | None
        Candidate write commands, first one found on ``PATH`` wins.
    which : Callable
        ``shutil.which`` replacement (useful for testing).

    Raises
    ------
    BackendUnavailableError
        No X display, or none of the candidate tools is installed.
    """

    def __init__(
        self,
        environ: Mapping[str, str],
        commands: Optional[Sequence[list[str]]] = None,
        which: Optional[Callable[[str], Optional[str]]] = None,
    ) -> None:
        which = which or shutil.which
        if not environ.get("DISPLAY"):
            raise BackendUnavailableError("No X11 display: DISPLAY is not set")

        for cmd in commands or DEFAULT_COMMANDS:
            if which(cmd[0]):
                self._cmd = list(cmd)
                break
        else:
            names = ", ".join(cmd[0] for cmd in commands or DEFAULT_COMMANDS)
            raise BackendUnavailableError(f"No X11 clipboard tool found. Install one of: {names}")

        logger.debug("X11 clipboard using %s", self._cmd[0])

    @property
    def command(self) -> list[str]:
        return list(self._cmd)

    def copy(self, text: str) -> None:
        try:
            subprocess.run(
                self._cmd,
                input=text.encode("utf-8"),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ClipboardError(f"Clipboard copy failed: {exc}") from exc

    def paste(self) -> str:
        try:
            proc = subprocess.run(_read_command(self._cmd), capture_output=True, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ClipboardError(f"Clipboard read failed: {exc}") from exc
        return proc.stdout.decode("utf-8", errors="replace")
