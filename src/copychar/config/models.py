"""Pydantic models for copychar configuration.

The defaults below are the complete built-in configuration; a JSON file
only needs the keys it overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ClipboardSettings(BaseModel):
    """Which environment signals and tools the delivery engine relies on."""

    remote_session_var: str = Field(
        default="SSH_CLIENT",
        min_length=1,
        description="Environment variable whose presence marks a remote session.",
    )
    x11_commands: list[list[str]] = Field(
        default_factory=lambda: [
            ["xclip", "-selection", "clipboard"],
            ["xsel", "--clipboard", "--input"],
        ],
        min_length=1,
        description="Ordered candidate commands for the X11 fallback backend.",
    )
    osc52_tty: str = Field(
        default="/dev/tty",
        description="Terminal device that receives OSC 52 sequences over SSH.",
    )


class LoggingSettings(BaseModel):
    level: LogLevel = "ERROR"


class CopyCharConfig(BaseModel):
    """Root configuration object."""

    clipboard: ClipboardSettings = Field(default_factory=ClipboardSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
