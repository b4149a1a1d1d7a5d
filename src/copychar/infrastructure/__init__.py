"""Infrastructure layer: external clipboard adapters."""

from copychar.infrastructure.clipboard.anywhere_clipboard import AnywhereClipboard
from copychar.infrastructure.clipboard.session import SessionContext
from copychar.infrastructure.clipboard.x11_clipboard import X11Clipboard

__all__ = ["AnywhereClipboard", "SessionContext", "X11Clipboard"]
