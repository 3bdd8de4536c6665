"""Domain model for scanned directory children.

This package contains non-rendering primitives:
- the directory-entry datatype
- filesystem scanning helpers with hidden-entry filtering
"""

from __future__ import annotations

from .types import DirectoryEntry
from .fs import display_text, is_existing_directory, list_directory_children

__all__ = [
    "DirectoryEntry",
    "display_text",
    "is_existing_directory",
    "list_directory_children",
]
