"""Right-angled ASCII triangle of a given height and base width."""

from __future__ import annotations

import math


def triangle_widths(height: int, base: int) -> list[int]:
    """Star count per row, interpolated linearly up to ``base`` on the last row."""

    if height <= 0 or base <= 0:
        raise ValueError("height and base must be positive integers")
    widths: list[int] = []
    for row in range(1, height + 1):
        # half-up rounding, not banker's rounding
        stars = math.floor(row * base / height + 0.5)
        if row == 1 and height > 1:
            stars = 1
        widths.append(max(1, min(base, stars)))
    return widths


def render_triangle(height: int, base: int, char: str = "*") -> list[str]:
    return [char * width for width in triangle_widths(height, base)]


__all__ = ["render_triangle", "triangle_widths"]
