"""Error taxonomy for rwbin.

Core and adapters raise these; only the CLI catches them, turns them into a
short diagnostic and picks the exit code.
"""

from __future__ import annotations


class RwbinError(Exception):
    """Base class for every error that ends an rwbin invocation."""

    exit_code: int = 1
    show_help: bool = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInvocation(RwbinError):
    """Missing or conflicting command-line arguments."""

    show_help = True


class InvalidLiteral(RwbinError):
    """Token is not a supported literal, or its value does not fit."""

    show_help = True


class InvalidFilename(RwbinError):
    """Filename contains forbidden characters or is empty."""

    show_help = True


class FileOpenFailure(RwbinError):
    """The file could not be opened for reading or writing."""


class FileNotFound(FileOpenFailure):
    pass


class FileUnreadable(FileOpenFailure):
    pass


class FileWriteFailure(RwbinError):
    """Writing failed, or wrote fewer bytes than requested, after the open succeeded."""


class InvalidConfiguration(RwbinError):
    """An RWBIN_* setting (environment or .env) failed validation."""
