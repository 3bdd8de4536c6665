"""Traversal settings shared by the CLI parser and the tree walker.

Settings come only from command-line tokens; nothing is read from the
environment or persisted between runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

UNBOUNDED_DEPTH = -1
HIDDEN_PREFIX = "."
INDENT = "\t"


@dataclass(frozen=True)
class TraversalConfig:
    """Parsed command-line settings for one run."""

    root: Path
    max_depth: int = UNBOUNDED_DEPTH
    show_hidden: bool = False
    verbose: bool = False
    copy_to_clipboard: bool = False

    @property
    def depth_is_unbounded(self) -> bool:
        return self.max_depth == UNBOUNDED_DEPTH


def is_hidden_name(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


__all__ = [
    "HIDDEN_PREFIX",
    "INDENT",
    "UNBOUNDED_DEPTH",
    "TraversalConfig",
    "is_hidden_name",
]
