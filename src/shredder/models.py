"""
Shredder Data Models

Dataclasses describing what happened to each target during a run.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class ShredStatus(Enum):
    """Outcome of processing a single target."""

    PENDING = "pending"
    SKIPPED = "skipped"
    DECLINED = "declined"
    FILLED = "filled"
    DELETED = "deleted"
    FAILED = "failed"


@dataclass
class ShredItem:
    """A single target file and its outcome."""

    path: Path
    status: ShredStatus = ShredStatus.PENDING
    size: int = 0
    error: str | None = None
    message: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": str(self.path),
            "status": self.status.value,
            "size": self.size,
            "error": self.error,
            "message": self.message,
        }


@dataclass
class ShredResult:
    """Summary of one pass over the argument list."""

    items: list[ShredItem] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.items)

    def count(self, status: ShredStatus) -> int:
        """Number of items that ended with ``status``."""
        return sum(1 for item in self.items if item.status is status)

    @property
    def filled(self) -> int:
        """Items that were zero-filled, whether or not they were deleted.

        A DELETED item that carries an error was removed after its fill
        failed, so it is not counted.
        """
        return sum(
            1
            for item in self.items
            if item.status is ShredStatus.FILLED
            or (item.status is ShredStatus.DELETED and item.error is None)
        )

    @property
    def deleted(self) -> int:
        return self.count(ShredStatus.DELETED)

    @property
    def declined(self) -> int:
        return self.count(ShredStatus.DECLINED)

    @property
    def skipped(self) -> int:
        return self.count(ShredStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self.count(ShredStatus.FAILED)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "summary": {
                "total": self.total,
                "filled": self.filled,
                "deleted": self.deleted,
                "declined": self.declined,
                "skipped": self.skipped,
                "failed": self.failed,
            },
            "items": [item.to_dict() for item in self.items],
        }
