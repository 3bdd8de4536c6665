"""Clipboard export through platform copy utilities.

Each platform maps to a list of candidate commands that read text on stdin.
Failures are returned as message strings so the caller can report them
without aborting the run.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from dataclasses import dataclass

UNSUPPORTED_PLATFORM_MESSAGE = "Clipboard functionality is not supported on this platform."
NO_CLIPBOARD_UTILITY_MESSAGE = "Error: Unable to access clipboard utility."


@dataclass(frozen=True)
class ClipboardCommand:
    """External command that copies its stdin to the system clipboard."""

    argv: tuple[str, ...]

    @property
    def executable(self) -> str:
        return self.argv[0]

    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None

    def copy(self, text: str) -> bool:
        try:
            proc = subprocess.run(
                list(self.argv),
                input=text,
                text=True,
                check=False,
            )
        except (OSError, UnicodeError):
            return False
        return proc.returncode == 0


def clipboard_commands(platform: str | None = None, os_name: str | None = None) -> list[ClipboardCommand]:
    """Return copy commands to try, in preference order, for a platform.

    ``platform`` and ``os_name`` default to ``sys.platform`` and ``os.name``.
    An empty list means the platform has no known clipboard utility.
    """
    platform = sys.platform if platform is None else platform
    os_name = os.name if os_name is None else os_name

    if platform == "darwin":
        return [ClipboardCommand(("pbcopy",))]
    if os_name == "nt":
        return [ClipboardCommand(("clip",))]
    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        return [
            ClipboardCommand(("wl-copy",)),
            ClipboardCommand(("xclip", "-selection", "clipboard")),
            ClipboardCommand(("xsel", "--clipboard", "--input")),
        ]
    return []


def copy_text_to_clipboard(text: str, commands: list[ClipboardCommand] | None = None) -> str | None:
    """Copy ``text`` with the first working command; return an error message on failure."""
    if commands is None:
        commands = clipboard_commands()
    if not commands:
        return UNSUPPORTED_PLATFORM_MESSAGE

    for command in commands:
        if not command.is_available():
            continue
        if command.copy(text):
            return None
    return NO_CLIPBOARD_UTILITY_MESSAGE


__all__ = [
    "NO_CLIPBOARD_UTILITY_MESSAGE",
    "UNSUPPORTED_PLATFORM_MESSAGE",
    "ClipboardCommand",
    "clipboard_commands",
    "copy_text_to_clipboard",
]
