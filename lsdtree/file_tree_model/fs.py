"""Filesystem scanning for the tree walker."""

from __future__ import annotations

import os
from pathlib import Path

from ..config import is_hidden_name
from .types import DirectoryEntry


def display_text(text: str) -> str:
    """Make ``text`` encodable by replacing undecodable filename bytes.

    ``os.scandir`` surfaces non-UTF-8 name bytes as lone surrogates; those
    become U+FFFD so the text can be printed or piped anywhere.
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def is_existing_directory(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def _entry_file_size(child: os.DirEntry[str]) -> int | None:
    """Return the followed size of ``child``, or ``None`` on stat failure."""
    try:
        return int(child.stat().st_size)
    except OSError:
        return None


def list_directory_children(
    directory: Path,
    show_hidden: bool,
    include_sizes: bool = False,
) -> tuple[list[DirectoryEntry], OSError | None]:
    """List visible children of ``directory`` in filesystem order.

    Returns ``(children, scan_error)``. ``scan_error`` is set when the
    directory cannot be opened or read; children gathered before the
    failure are discarded. File sizes are read only with ``include_sizes``.
    Symlinks to directories count as directories but are flagged so callers
    can avoid recursing through them.
    """
    children: list[DirectoryEntry] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and is_hidden_name(name):
                    continue

                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                try:
                    is_symlink = child.is_symlink()
                except OSError:
                    is_symlink = False

                file_size: int | None = None
                if include_sizes and not is_dir:
                    file_size = _entry_file_size(child)

                children.append(
                    DirectoryEntry(
                        name=display_text(name),
                        path=Path(child.path),
                        is_dir=is_dir,
                        file_size=file_size,
                        is_symlink=is_symlink,
                    )
                )
    except OSError as exc:
        return [], exc

    return children, None


__all__ = [
    "display_text",
    "is_existing_directory",
    "list_directory_children",
]
