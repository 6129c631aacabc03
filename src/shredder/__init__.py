"""
Shredder - Zero-fill and delete files from the command line

Overwrites files with zero bytes in place and can then delete them.

Basic Usage:
    from shredder import zero_fill, delete_file

    zero_fill("secret.txt")     # content is now all zeros, same size
    delete_file("secret.txt")

Interactive loop (what the CLI runs):
    from shredder import Shredder

    result = Shredder().process(["a.txt", "b.txt"])
    print(result.to_dict()["summary"])

Scripted loop:
    result = Shredder(confirm_fill=lambda: True, confirm_delete=lambda: False).process(paths)

Debugging:
    from shredder.debug import debug
    debug.enable(True)  # Enable debug output
"""

from .constants import BUFFER_SIZE, __version__
from .exceptions import (
    FileDeleteError,
    FileError,
    FileOpenError,
    FileWriteError,
    ShredderError,
    TargetIsDirectoryError,
    TargetNotFoundError,
)
from .models import ShredItem, ShredResult, ShredStatus
from .prompts import confirm_delete, confirm_fill, get_user_choice, wait_enter
from .shred import Shredder, delete_file, shred_files, validate_target, zero_fill

__all__ = [
    "__version__",
    "BUFFER_SIZE",
    # Core
    "zero_fill",
    "delete_file",
    "validate_target",
    "Shredder",
    "shred_files",
    # Prompts
    "get_user_choice",
    "confirm_fill",
    "confirm_delete",
    "wait_enter",
    # Models
    "ShredStatus",
    "ShredItem",
    "ShredResult",
    # Exceptions
    "ShredderError",
    "FileError",
    "TargetNotFoundError",
    "TargetIsDirectoryError",
    "FileOpenError",
    "FileWriteError",
    "FileDeleteError",
]
