"""
Shredder Exceptions

Custom exception classes for the per-file failures the command loop reports.
"""

from pathlib import Path


class ShredderError(Exception):
    """Base exception for all Shredder errors."""

    pass


# ============================================================================
# FILE ERRORS
# ============================================================================


class FileError(ShredderError):
    """Base class for errors tied to a single target path."""

    def __init__(self, path: str | Path, message: str):
        self.path = Path(path)
        super().__init__(message)


class TargetNotFoundError(FileError):
    """Target path does not exist."""

    def __init__(self, path: str | Path):
        super().__init__(path, f"File not found: {path}")


class TargetIsDirectoryError(FileError):
    """Target path is a directory."""

    def __init__(self, path: str | Path):
        super().__init__(path, f"Skipping directory: {path}")


class FileOpenError(FileError):
    """File could not be opened for read+write."""

    def __init__(self, path: str | Path, reason: str = ""):
        self.reason = reason
        message = f"Cannot open file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(path, message)


class FileWriteError(FileError):
    """A write failed partway through zero-filling."""

    def __init__(self, path: str | Path, reason: str = ""):
        self.reason = reason
        message = f"Failed to write to file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(path, message)


class FileDeleteError(FileError):
    """File could not be removed."""

    def __init__(self, path: str | Path, reason: str = ""):
        self.reason = reason
        message = f"Error deleting file: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(path, message)
