"""
Error taxonomy for svg2unity.

Every failure aborts the batch. Each exception carries the process exit code
the CLI reports for it.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path


class ExitCode(IntEnum):
    """Process exit status, one value per error category."""

    NONE = 0
    FCREATE_FAIL = 1
    FOPEN_FAIL = 2
    UNKNOWN_EXT = 3
    UNKNOWN_SVG_CMD = 4
    MALFORMED_PATH = 5
    INVALID_CONFIG = 6

    @property
    def message(self) -> str:
        """Human-readable status line printed at the end of a run."""
        return _MESSAGES.get(self, "Unknown error encountered")


_MESSAGES = {
    ExitCode.NONE: "Output file successfully generated",
    ExitCode.FCREATE_FAIL: "Error: failure to create output file",
    ExitCode.FOPEN_FAIL: "Error: failure to open SVG file",
    ExitCode.UNKNOWN_EXT: "Error: unknown output file extension",
    ExitCode.UNKNOWN_SVG_CMD: "Error: unknown SVG command",
    ExitCode.MALFORMED_PATH: "Error: malformed SVG path data",
    ExitCode.INVALID_CONFIG: "Error: invalid configuration",
}


class ConversionError(Exception):
    """Base class for errors that abort a conversion run."""

    exit_code = ExitCode.NONE
    frame: Path | None = None


class OutputCreateError(ConversionError):
    """The output file could not be created."""

    exit_code = ExitCode.FCREATE_FAIL

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        detail = f": {reason}" if reason else ""
        super().__init__(f"Could not create output file {path}{detail}")


class SvgOpenError(ConversionError):
    """An input SVG frame could not be opened."""

    exit_code = ExitCode.FOPEN_FAIL

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        detail = f": {reason}" if reason else ""
        super().__init__(f"Could not open file {path}{detail}")


class UnknownExtensionError(ConversionError):
    """The requested output file extension has no writer."""

    exit_code = ExitCode.UNKNOWN_EXT

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Could not recognize extension {extension!r}")


class UnknownCommandError(ConversionError):
    """A path command letter other than M, m, c or l was encountered."""

    exit_code = ExitCode.UNKNOWN_SVG_CMD

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Could not recognize SVG path command '{command}'.")


class PathSyntaxError(ConversionError):
    """Path data (or the SVG document around it) could not be parsed."""

    exit_code = ExitCode.MALFORMED_PATH
