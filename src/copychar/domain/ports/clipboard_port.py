"""Port: Clipboard: set and read back the system clipboard."""

from abc import ABC, abstractmethod


class ClipboardPort(ABC):
    """Contract for clipboard operations."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Place the given text on the system clipboard.

        Raises:
            ClipboardError: If the backend could not set the clipboard.
        """
        ...

    @abstractmethod
    def paste(self) -> str:
        """Return the current clipboard contents.

        Only used as a diagnostic probe after :meth:`copy`.

        Raises:
            ClipboardError: If the backend could not read the clipboard.
        """
        ...
