"""Static extension-to-label table for verbose tree annotations."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

UNKNOWN_FILE_TYPE = "Unknown File Type"

FILE_TYPE_LABELS = MappingProxyType(
    {
        ".py": "Python",
        ".ts": "TypeScript",
        ".js": "JavaScript",
        ".cpp": "C++ Source File",
        ".h": "C/C++ Header File",
        ".txt": "Text File",
        ".pdf": "PDF Document",
        ".png": "PNG Image",
        ".jpg": "JPEG Image",
        ".mp3": "MP3 Audio",
        ".mp4": "MP4 Video",
        ".zip": "ZIP Archive",
        ".tar": "TAR Archive",
        ".gz": "GZIP Archive",
        ".exe": "Executable",
        ".sh": "Shell Script",
        ".md": "Markdown Document",
        ".json": "JSON File",
        ".xml": "XML File",
        ".html": "HTML Document",
        ".css": "CSS Stylesheet",
        ".scss": "SCSS Stylesheet",
        ".less": "LESS Stylesheet",
        ".java": "Java Source File",
        ".class": "Java Class File",
        ".jar": "Java Archive",
        ".rb": "Ruby Script",
        ".php": "PHP Script",
        ".sql": "SQL Script",
        ".c": "C Source File",
        ".cs": "C# Source File",
        ".swift": "Swift Source File",
        ".kt": "Kotlin Source File",
        ".go": "Go Source File",
        ".rs": "Rust Source File",
        ".lua": "Lua Script",
        ".pl": "Perl Script",
        ".r": "R Script",
        ".m": "MATLAB Script",
        ".jl": "Julia Script",
        ".ipynb": "Jupyter Notebook",
        ".yml": "YAML File",
        ".toml": "TOML File",
        ".ini": "INI File",
        ".conf": "Configuration File",
        ".log": "Log File",
        ".csv": "CSV File",
        ".tsv": "TSV File",
        ".xls": "Excel File",
        ".xlsx": "Excel File",
        ".doc": "Word Document",
        ".docx": "Word Document",
        ".ppt": "PowerPoint Document",
        ".pptx": "PowerPoint Document",
        ".key": "Keynote Document",
        ".pages": "Pages Document",
        ".numbers": "Numbers Document",
        ".svg": "SVG Image",
        ".gif": "GIF Image",
    }
)


def file_type_label(extension: str) -> str:
    """Return the label for ``extension`` (leading dot included).

    Matching ignores case, so ``.PY`` and ``.py`` share a label. Anything
    not in the table, including the empty extension, is
    ``UNKNOWN_FILE_TYPE``.
    """
    return FILE_TYPE_LABELS.get(extension.lower(), UNKNOWN_FILE_TYPE)


def file_type_for_path(path: Path) -> str:
    return file_type_label(path.suffix)


__all__ = [
    "FILE_TYPE_LABELS",
    "UNKNOWN_FILE_TYPE",
    "file_type_label",
    "file_type_for_path",
]
