"""Command-line front door for lsdtree.

Turns single-character tokens into a ``TraversalConfig``, prints the
folder structure, and optionally copies it to the clipboard.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

from .clipboard import copy_text_to_clipboard
from .config import UNBOUNDED_DEPTH, TraversalConfig
from .file_tree_model import display_text
from .folder_structure import render_folder_structure

DEPTH_TOKENS = frozenset({"/", "--depth"})
HIDDEN_TOKENS = frozenset({"-", "--hidden"})
VERBOSE_TOKENS = frozenset({"+", "--verbose"})
CLIPBOARD_TOKENS = frozenset({"=", "--clipboard"})
HELP_TOKENS = frozenset({"h", "--help"})

USAGE = (
    "Usage: lsd [options] [directory]\n"
    "Options:\n"
    "  /, --depth <n>      Limit recursion depth\n"
    "  -, --hidden         Include hidden files\n"
    "  +, --verbose        Show detailed information\n"
    "  =, --clipboard      Copy output to clipboard\n"
    "  h, --help           Show this help message\n"
)
INVALID_DEPTH_MESSAGE = f"Invalid depth value. Using default ({UNBOUNDED_DEPTH})."
COPIED_MESSAGE = "Copied folder structure to clipboard."


def _parse_depth(value: str | None) -> int:
    """Parse a depth token, falling back to unbounded with a warning."""
    if value is not None:
        try:
            return int(value)
        except ValueError:
            pass
    sys.stderr.write(f"{INVALID_DEPTH_MESSAGE}\n")
    return UNBOUNDED_DEPTH


def _usage_error(token: str) -> SystemExit:
    sys.stderr.write(f"Unknown argument: {token}\n")
    sys.stderr.write(USAGE)
    return SystemExit(1)


def parse_arguments(tokens: Sequence[str], default_root: Path | None = None) -> TraversalConfig:
    """Build a ``TraversalConfig`` from command-line ``tokens``.

    Flags may appear in any order. The first unrecognized token is the root
    directory, even one spelled like ``--name``; any later one prints usage
    to stderr and exits with status 1. ``h`` prints usage to stdout and
    exits with status 0. A depth flag consumes the next token even when it
    is not a whole integer; ``2x`` and ``3.5`` fall back to unbounded.
    """
    root: Path | None = None
    max_depth = UNBOUNDED_DEPTH
    show_hidden = False
    verbose = False
    copy_to_clipboard = False

    idx = 0
    while idx < len(tokens):
        token = tokens[idx]
        idx += 1
        if token in DEPTH_TOKENS:
            value = tokens[idx] if idx < len(tokens) else None
            if value is not None:
                idx += 1
            max_depth = _parse_depth(value)
        elif token in VERBOSE_TOKENS:
            verbose = True
        elif token in HIDDEN_TOKENS:
            show_hidden = True
        elif token in CLIPBOARD_TOKENS:
            copy_to_clipboard = True
        elif token in HELP_TOKENS:
            sys.stdout.write(USAGE)
            raise SystemExit(0)
        elif root is None:
            root = Path(token)
        else:
            raise _usage_error(token)

    if root is None:
        root = default_root if default_root is not None else Path.cwd()
    return TraversalConfig(
        root=root,
        max_depth=max_depth,
        show_hidden=show_hidden,
        verbose=verbose,
        copy_to_clipboard=copy_to_clipboard,
    )


def main(argv: Sequence[str] | None = None, default_path: Path | None = None) -> None:
    """Parse arguments, print the folder structure, and optionally copy it.

    ``argv`` excludes the program name and defaults to ``sys.argv[1:]``;
    ``default_path`` is primarily for tests and replaces the current working
    directory when no root is given.
    """
    if argv is None:
        argv = sys.argv[1:]
    config = parse_arguments(argv, default_root=default_path)

    sys.stdout.write(f'Folder structure of: "{display_text(str(config.root))}"\n')
    report = render_folder_structure(config)
    sys.stdout.write(report)

    if config.copy_to_clipboard:
        error = copy_text_to_clipboard(report)
        if error is not None:
            sys.stderr.write(f"{error}\n")
        else:
            sys.stdout.write(f"{COPIED_MESSAGE}\n")


if __name__ == "__main__":
    main()
