"""Domain errors: custom exceptions for copychar.

These exceptions are raised by domain services and adapters and caught by
application or presentation layers. They carry no infrastructure dependencies.
"""


class CopyCharError(Exception):
    """Base exception for all copychar errors."""


class ClipboardError(CopyCharError):
    """Raised when a clipboard backend fails to set or get its contents."""


class BackendUnavailableError(ClipboardError):
    """Raised when a clipboard backend cannot be constructed in this session."""


class SymbolTableError(CopyCharError):
    """Raised when the static symbol table holds an invalid Unicode scalar value.

    This is a programming defect and is never caught at runtime.
    """


class ConfigurationError(CopyCharError):
    """Raised when configuration is invalid or missing."""
