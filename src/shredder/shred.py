"""
Shredder Core

Zero-fill a file in place, optionally delete it, and drive both over a list
of paths with interactive confirmation.

Note that a single zero pass is not a cryptographically secure erase: flash
wear-leveling and filesystem copies are out of reach of anything done
through a file handle.
"""

import os
from collections.abc import Callable, Iterable
from pathlib import Path

import click

from .constants import BUFFER_SIZE, ZERO_BYTE
from .debug import debug, time_function
from .exceptions import (
    FileDeleteError,
    FileError,
    FileOpenError,
    FileWriteError,
    TargetIsDirectoryError,
    TargetNotFoundError,
)
from .models import ShredItem, ShredResult, ShredStatus
from .prompts import confirm_delete, confirm_fill


def validate_target(path: str | Path) -> Path:
    """
    Check that a path names an existing regular file.

    Args:
        path: Path from the command line

    Returns:
        The path as a Path object

    Raises:
        TargetNotFoundError: If nothing exists at the path
        TargetIsDirectoryError: If the path is a directory
    """
    path = Path(path)
    if not path.exists():
        raise TargetNotFoundError(path)
    if path.is_dir():
        raise TargetIsDirectoryError(path)
    return path


@time_function
def zero_fill(path: str | Path, buffer_size: int = BUFFER_SIZE) -> int:
    """
    Overwrite every byte of a file with zeros, keeping its length.

    Writes happen in ``buffer_size`` chunks; the last chunk is partial when
    the length is not a multiple of it. The file is synced before closing.

    Args:
        path: File to overwrite
        buffer_size: Chunk size in bytes (default 4096)

    Returns:
        Number of bytes written (the original file length)

    Raises:
        FileOpenError: If the file cannot be opened for read+write
        FileWriteError: If a write or the final sync fails

    Example:
        >>> zero_fill("secret.txt")
        1500
    """
    debug.validate(buffer_size > 0, f"Buffer size must be positive, got {buffer_size}")

    path = Path(path)
    try:
        f = open(path, "r+b")
    except OSError as e:
        raise FileOpenError(path, e.strerror or str(e)) from e

    with f:
        length = os.fstat(f.fileno()).st_size
        debug.print(f"Zero-filling {path} ({length} bytes)")

        buffer = ZERO_BYTE * buffer_size
        try:
            for offset in range(0, length, buffer_size):
                chunk = min(buffer_size, length - offset)
                f.write(buffer[:chunk])
            f.flush()
            os.fsync(f.fileno())
        except OSError as e:
            raise FileWriteError(path, e.strerror or str(e)) from e

    debug.print(f"Zero-fill complete: {path}")
    return length


def delete_file(path: str | Path) -> None:
    """
    Remove a file.

    Raises:
        FileDeleteError: If the filesystem refuses the removal
    """
    path = Path(path)
    try:
        path.unlink()
    except OSError as e:
        raise FileDeleteError(path, e.strerror or str(e)) from e
    debug.print(f"File deleted: {path}")


class Shredder:
    """
    Runs the confirm/fill/confirm/delete sequence over a list of paths.

    Each path is handled on its own; a failure is reported and the loop
    moves on. Prompts and output are injectable so the loop can run
    without a terminal.

    Usage:
        shredder = Shredder()
        result = shredder.process(["a.txt", "b.txt"])
        print(result.deleted)
    """

    def __init__(
        self,
        confirm_fill: Callable[[], bool] = confirm_fill,
        confirm_delete: Callable[[], bool] = confirm_delete,
        echo: Callable[..., None] = click.echo,
    ):
        self.confirm_fill = confirm_fill
        self.confirm_delete = confirm_delete
        self.echo = echo

    def _error(self, item: ShredItem, error: FileError, status: ShredStatus) -> ShredItem:
        item.status = status
        item.error = str(error)
        self.echo(str(error), err=True)
        return item

    def process_one(self, path: str | Path, index: int, total: int) -> ShredItem:
        """Process a single path; ``index`` is 1-based."""
        item = ShredItem(path=Path(path))
        self.echo(f"Processing file {index} of {total}: {path}")

        try:
            validate_target(path)
        except FileError as e:
            return self._error(item, e, ShredStatus.SKIPPED)

        if not self.confirm_fill():
            item.status = ShredStatus.DECLINED
            item.message = f"The file has not been destroyed: {path}"
            self.echo(item.message)
            return item

        # A failed fill is reported but the delete question is still asked;
        # the item stays FAILED unless the removal succeeds.
        try:
            item.size = zero_fill(path)
        except FileError as e:
            debug.exception(e, "zero_fill")
            self._error(item, e, ShredStatus.FAILED)
        else:
            item.status = ShredStatus.FILLED
            item.message = f"The file has been successfully filled with zeros: {path}"
            self.echo(item.message)

        if self.confirm_delete():
            try:
                delete_file(path)
            except FileError as e:
                debug.exception(e, "delete_file")
                return self._error(item, e, ShredStatus.FAILED)
            item.status = ShredStatus.DELETED
            item.message = "File successfully deleted."
            self.echo(item.message)

        return item

    def process(self, paths: Iterable[str | Path]) -> ShredResult:
        """Process every path in order and return the collected outcomes."""
        paths = list(paths)
        result = ShredResult()
        for index, path in enumerate(paths, start=1):
            result.items.append(self.process_one(path, index, len(paths)))

        debug.print(
            f"Run complete: {result.filled} filled, {result.deleted} deleted, "
            f"{result.skipped} skipped, {result.failed} failed"
        )
        return result


def shred_files(paths: Iterable[str | Path]) -> ShredResult:
    """
    Convenience function for the interactive loop with default prompts.

    Example:
        >>> shred_files(["secret.txt"])
    """
    return Shredder().process(paths)
