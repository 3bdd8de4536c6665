"""Render a directory as tab-indented text with optional annotations.

Children appear in the order the filesystem yields them, each parent
immediately before its own children. Expansion is gated by
``level < max_depth``: with ``max_depth == N`` directories at level ``N``
are still listed but never opened. Symlinked directories are listed as
directories and never opened.
"""

from __future__ import annotations

from pathlib import Path

from .config import INDENT, UNBOUNDED_DEPTH, TraversalConfig
from .file_tree_model import DirectoryEntry, display_text, is_existing_directory, list_directory_children
from .file_types import file_type_label
from .sizes import format_size

DIRECTORY_LABEL = "Directory"


def invalid_directory_message(path: Path) -> str:
    return f'Invalid directory path: "{display_text(str(path))}"'


def entry_annotation(entry: DirectoryEntry) -> str:
    """Return the bracketed verbose suffix for ``entry``, leading space included."""
    if entry.is_dir:
        return f" [{DIRECTORY_LABEL}]"
    return f" [{file_type_label(entry.extension)}, {format_size(entry.file_size)}]"


def _should_expand(level: int, max_depth: int) -> bool:
    return max_depth == UNBOUNDED_DEPTH or level < max_depth


def folder_structure_lines(
    root: Path,
    max_depth: int = UNBOUNDED_DEPTH,
    show_hidden: bool = False,
    verbose: bool = False,
) -> list[str]:
    """Return one report row per visible entry below ``root``.

    An invalid root produces a single diagnostic row instead of a tree.
    A subdirectory that cannot be read adds one ``<error: ...>`` row at
    its children's indentation and the walk moves on.
    """
    if not is_existing_directory(root):
        return [invalid_directory_message(root)]

    lines_out: list[str] = []

    def walk(directory: Path, level: int) -> None:
        children, scan_error = list_directory_children(directory, show_hidden, include_sizes=verbose)
        if scan_error is not None:
            reason = scan_error.strerror or str(scan_error)
            lines_out.append(f"{INDENT * level}<error: {reason}>")
            return

        for entry in children:
            annotation = entry_annotation(entry) if verbose else ""
            lines_out.append(f"{INDENT * level}{entry.name}{annotation}")
            if entry.can_expand and _should_expand(level, max_depth):
                walk(entry.path, level + 1)

    walk(root, 0)
    return lines_out


def build_folder_structure(
    root: Path,
    max_depth: int = UNBOUNDED_DEPTH,
    show_hidden: bool = False,
    verbose: bool = False,
) -> str:
    lines_out = folder_structure_lines(root, max_depth, show_hidden, verbose)
    return "".join(f"{line}\n" for line in lines_out)


def render_folder_structure(config: TraversalConfig) -> str:
    """Render the report described by ``config``."""
    return build_folder_structure(
        config.root,
        max_depth=config.max_depth,
        show_hidden=config.show_hidden,
        verbose=config.verbose,
    )


__all__ = [
    "DIRECTORY_LABEL",
    "build_folder_structure",
    "entry_annotation",
    "folder_structure_lines",
    "invalid_directory_message",
    "render_folder_structure",
]
