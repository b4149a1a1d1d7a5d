"""Primary clipboard backend that works locally, over SSH and under WSL.

- WSL: ``clip.exe`` to set, ``powershell.exe Get-Clipboard`` to read back.
- SSH: an OSC 52 escape sequence written to the controlling terminal. The
  terminal owns the clipboard, so reading it back is not possible.
- Local: ``pyperclip``, which picks the platform's native mechanism.
"""

from __future__ import annotations

import base64
import logging
import subprocess

import pyperclip

from copychar.domain.errors import ClipboardError
from copychar.domain.ports.clipboard_port import ClipboardPort
from copychar.infrastructure.clipboard.session import SessionContext

logger = logging.getLogger(__name__)

_WSL_SET = ["clip.exe"]
_WSL_GET = [
    "powershell.exe",
    "-NoProfile",
    "-Command",
    "[Console]::OutputEncoding = [Text.Encoding]::UTF8; Get-Clipboard",
]

# pyperclip decodes tool output strictly and shells out to tools that may vanish
_PYPERCLIP_ERRORS = (pyperclip.PyperclipException, UnicodeError, OSError)


class AnywhereClipboard(ClipboardPort):
    """Clipboard adapter that picks its mechanism from the session context."""

    def __init__(self, session: SessionContext, tty_path: str = "/dev/tty") -> None:
        self._session = session
        self._tty_path = tty_path

    @property
    def mechanism(self) -> str:
        if self._session.wsl:
            return "wsl"
        if self._session.remote:
            return "osc52"
        return "pyperclip"

    def copy(self, text: str) -> None:
        logger.debug("Setting clipboard via %s", self.mechanism)
        if self._session.wsl:
            # clip.exe reads the console code page unless given a UTF-16 BOM
            self._run(_WSL_SET, input=("\ufeff" + text).encode("utf-16-le"))
        elif self._session.remote:
            self._osc52(text)
        else:
            try:
                pyperclip.copy(text)
            except _PYPERCLIP_ERRORS as exc:
                raise ClipboardError(f"pyperclip copy failed: {exc}") from exc

    def paste(self) -> str:
        if self._session.wsl:
            out = self._run(_WSL_GET)
            return out.decode("utf-8", errors="replace").rstrip("\r\n")
        if self._session.remote:
            raise ClipboardError("Clipboard cannot be read back over a remote session")
        try:
            return pyperclip.paste()
        except _PYPERCLIP_ERRORS as exc:
            raise ClipboardError(f"pyperclip paste failed: {exc}") from exc

    # -- Internals -----------------------------------------------------------

    def _osc52(self, text: str) -> None:
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        try:
            with open(self._tty_path, "w", encoding="ascii") as tty:
                tty.write(f"\033]52;c;{encoded}\a")
                tty.flush()
        except OSError as exc:
            raise ClipboardError(f"Cannot write OSC 52 to {self._tty_path}: {exc}") from exc

    @staticmethod
    def _run(cmd: list[str], input: bytes | None = None) -> bytes:
        try:
            proc = subprocess.run(cmd, input=input, capture_output=True, check=True)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ClipboardError(f"{cmd[0]} failed: {exc}") from exc
        return proc.stdout
