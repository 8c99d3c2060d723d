# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Deterministic track colors.

Each track identifier maps to one entry of a fixed 16-color palette.
Integer identifiers index the palette directly; string identifiers go
through a 31-multiplier rolling hash over UTF-16 code units, so the same
name yields the same color in every process and in browser front ends
that hash with charCodeAt.
"""

TRAIL_COLORS: tuple[str, ...] = (
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
    "#8F4639", "#9106CD", "#CD06A4", "#CD0642", "#42CD06",
    "#06CD91",
)

_HASH_MODULUS = 2 ** 32


def string_hash(text: str) -> int:
    """Unsigned 32-bit rolling hash: h = (h * 31 + code_unit) mod 2**32."""
    encoded = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        h = (h * 31 + code_unit) % _HASH_MODULUS
    return h


def trail_color(key: int | str, palette: tuple[str, ...] = TRAIL_COLORS) -> str:
    """
    Pick the palette color for a track identifier.

    Args:
        key: Integer index or string identifier of the track.
        palette: Color sequence to index into.

    Returns:
        One entry of palette.

    Raises:
        TypeError: If key is neither int nor str (bool is rejected).
        ValueError: If palette is empty.
    """
    if not palette:
        raise ValueError("Palette must contain at least one color")
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        raise TypeError(
            f"Track key must be int or str, got {type(key).__name__}"
        )
    if isinstance(key, int):
        return palette[key % len(palette)]
    return palette[string_hash(key) % len(palette)]
