"""Human-readable byte counts."""

from __future__ import annotations

import math

DECIMAL_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB")
BINARY_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def format_size(size_bytes: int, *, binary: bool = False) -> str:
    """Convert a byte count to a short label such as ``4.2 kB`` or ``42 MiB``.

    Values below ten units keep one decimal; larger values are rounded to
    whole units.
    """
    if size_bytes < 0:
        return f"-{format_size(-size_bytes, binary=binary)}"
    base = 1024 if binary else 1000
    units = BINARY_UNITS if binary else DECIMAL_UNITS
    if size_bytes < 10:
        return f"{size_bytes} B"

    exponent = 0
    while exponent < len(units) - 1 and size_bytes >= base ** (exponent + 1):
        exponent += 1
    value = math.floor(size_bytes / (base**exponent) * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {units[exponent]}"
    return f"{value:.0f} {units[exponent]}"


__all__ = ["format_size", "DECIMAL_UNITS", "BINARY_UNITS"]
