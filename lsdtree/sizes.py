"""Human-readable byte counts for verbose tree annotations."""

from __future__ import annotations

UNKNOWN_SIZE = "Unknown Size"
SIZE_UNIT_STEP = 1024
_SCALED_UNITS = ("KB", "MB", "GB")


def format_size(size_bytes: int | None) -> str:
    """Format ``size_bytes`` as ``"<value> <unit>"``.

    Bytes print as an integer; KB/MB/GB always carry two decimals. A value
    of exactly 1024 in one unit rolls over to the next, and GB is the
    largest unit. ``None`` means the size could not be read and yields
    ``UNKNOWN_SIZE``.
    """
    if size_bytes is None:
        return UNKNOWN_SIZE
    if size_bytes < SIZE_UNIT_STEP:
        return f"{size_bytes} B"

    scaled = size_bytes / SIZE_UNIT_STEP
    for unit in _SCALED_UNITS[:-1]:
        if scaled < SIZE_UNIT_STEP:
            return f"{scaled:.2f} {unit}"
        scaled /= SIZE_UNIT_STEP
    return f"{scaled:.2f} {_SCALED_UNITS[-1]}"


__all__ = [
    "SIZE_UNIT_STEP",
    "UNKNOWN_SIZE",
    "format_size",
]
