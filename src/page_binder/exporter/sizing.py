"""
Module: exporter.sizing

Purpose:
    Page geometry: scale an image of any size to the fixed page width
    while preserving aspect ratio. The output height is the only rounded
    value, using round-half-up so results are deterministic.

Key Functions:
    - round_half_up(): Round to nearest integer, .5 rounds up
    - compute_page_size(): Output page size for one source image
"""

from __future__ import annotations

import math

from page_binder.core.models import PageSize


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves rounding up.

    Python's built-in ``round`` rounds halves to even, which would make
    297.5 and 298.5 both land on 298.

    Example:
        >>> round_half_up(297.5)
        298
        >>> round_half_up(1189.49)
        1189
    """
    return int(math.floor(value + 0.5))


def compute_page_size(width: int, height: int, target_width: int) -> PageSize:
    """
    Compute the output page size for a decoded image.

    Args:
        width: Decoded image width in pixels
        height: Decoded image height in pixels
        target_width: Fixed output page width

    Returns:
        PageSize of exactly ``target_width`` by
        ``round_half_up(height * target_width / width)``, at least 1 high

    Raises:
        ValueError: If any dimension is not positive

    Example:
        >>> compute_page_size(1000, 2000, 595)
        PageSize(width=595, height=1190)
        >>> compute_page_size(800, 400, 595)
        PageSize(width=595, height=298)
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive: {width}x{height}")
    if target_width <= 0:
        raise ValueError(f"target_width must be positive: {target_width}")

    # round_half_up(height * target_width / width) in exact integer arithmetic
    scaled_height = (2 * height * target_width + width) // (2 * width)
    return PageSize(width=target_width, height=max(1, scaled_height))
