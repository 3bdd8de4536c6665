"""Domain datatypes for scanned directory children."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryEntry:
    """One visible directory child observed during a scan.

    ``name`` is display-safe text; ``path`` keeps the raw filesystem name.
    ``file_size`` is ``None`` for directories, for files whose size could
    not be read, and when sizes were not requested.
    """

    name: str
    path: Path
    is_dir: bool
    file_size: int | None = None
    is_symlink: bool = False

    @property
    def extension(self) -> str:
        return self.path.suffix

    @property
    def can_expand(self) -> bool:
        return self.is_dir and not self.is_symlink


__all__ = [
    "DirectoryEntry",
]
