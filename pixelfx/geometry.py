"""Pixel moves: flips and half swaps."""
from __future__ import annotations

import numpy as np

from pixelfx.pixels import _require_rgb, to_uint8


def flip_vertical(image) -> np.ndarray:
    """Mirror the image top to bottom."""
    return to_uint8(_require_rgb(image)[::-1])


def flip_horizontal(image) -> np.ndarray:
    """Mirror the image left to right."""
    return to_uint8(_require_rgb(image)[:, ::-1])


def swap_halves_vertical(image) -> np.ndarray:
    """Move the top part down and the bottom part up around row (height-1)//2.

    Rows the move never writes stay black; where the parts overlap the
    bottom part wins.
    """
    src = _require_rgb(image)
    height = src.shape[0]
    half = (height - 1) // 2
    out = np.zeros(src.shape, dtype=np.float64)
    out[half : 2 * half + 1] = src[: half + 1]
    out[1 : height - half] = src[half + 1 :]
    return to_uint8(out)


def swap_halves_horizontal(image) -> np.ndarray:
    """Move the left part right and the right part left around column (width-1)//2.

    Columns the move never writes stay black; where the parts overlap the
    right part wins.
    """
    src = _require_rgb(image)
    width = src.shape[1]
    half = (width - 1) // 2
    out = np.zeros(src.shape, dtype=np.float64)
    out[:, half : 2 * half] = src[:, :half]
    out[:, : width - half] = src[:, half:]
    return to_uint8(out)