"""Composition Root: Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from copychar.application.use_cases.copy_symbol import CopySymbolUseCase
from copychar.application.use_cases.deliver_content import DeliverContentUseCase
from copychar.config import CopyCharConfig, get_config
from copychar.domain.ports.clipboard_port import ClipboardPort
from copychar.infrastructure.clipboard.anywhere_clipboard import AnywhereClipboard
from copychar.infrastructure.clipboard.session import SessionContext
from copychar.infrastructure.clipboard.x11_clipboard import X11Clipboard


class Container:
    """Simple dependency injection container.

    Wires the clipboard adapters to the delivery engine and provides
    pre-configured use cases.

    Usage::

        container = Container()
        result = container.copy_symbol().execute(Symbol.MINUS)
    """

    def __init__(
        self,
        config: Optional[CopyCharConfig] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        self._config = config or get_config(self._environ)

        clip = self._config.clipboard
        self._session = SessionContext.detect(self._environ, clip.remote_session_var)
        self._primary = AnywhereClipboard(self._session, tty_path=clip.osc52_tty)

    # -- Port accessors ------------------------------------------------------

    @property
    def config(self) -> CopyCharConfig:
        return self._config

    @property
    def session(self) -> SessionContext:
        return self._session

    @property
    def primary_clipboard(self) -> ClipboardPort:
        return self._primary

    def fallback_clipboard(self) -> ClipboardPort:
        """Construct the X11 fallback; raises ``BackendUnavailableError``."""
        return X11Clipboard(self._environ, commands=self._config.clipboard.x11_commands)

    # -- Use Case factories --------------------------------------------------

    def deliver_content(self) -> DeliverContentUseCase:
        """Create the clipboard delivery engine."""
        return DeliverContentUseCase(
            primary=self._primary,
            fallback_factory=self.fallback_clipboard,
            environ=self._environ,
            remote_session_var=self._config.clipboard.remote_session_var,
        )

    def copy_symbol(self) -> CopySymbolUseCase:
        """Create a use case for copying a symbol to the clipboard."""
        return CopySymbolUseCase(engine=self.deliver_content())
