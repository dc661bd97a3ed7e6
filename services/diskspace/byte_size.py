"""Human-readable rendering of byte counts."""

from __future__ import annotations


BYTE = 1
KILOBYTE = 1024 * BYTE
MEGABYTE = 1024 * KILOBYTE
GIGABYTE = 1024 * MEGABYTE
TERABYTE = 1024 * GIGABYTE

_UNITS = (
    (TERABYTE, "TB"),
    (GIGABYTE, "GB"),
    (MEGABYTE, "MB"),
    (KILOBYTE, "KB"),
    (BYTE, "B"),
)


def format_byte_size(num_bytes: int) -> str:
    """Return a byte count as a string such as ``10MB`` or ``12.5KB``.

    The largest unit that keeps the displayed value at or above 1 is chosen.
    One decimal is kept and a trailing ``.0`` is dropped.
    """

    if num_bytes < 0:
        raise ValueError(f"Byte count must be non-negative, got {num_bytes}")
    if num_bytes == 0:
        return "0"

    unit_size, unit = next(
        (size, name) for size, name in _UNITS if num_bytes >= size
    )
    value = f"{num_bytes / unit_size:.1f}"
    if value.endswith(".0"):
        value = value[:-2]
    return f"{value}{unit}"
