"""Per-channel colour effects."""
from __future__ import annotations

import numpy as np

from pixelfx.pixels import _require_rgb, grey, to_uint8

_RED, _GREEN, _BLUE = 0, 1, 2
_HALF = 255 // 2
_STEP = 32


def _float(image) -> np.ndarray:
    return _require_rgb(image).astype(np.float64)


def _signed_axis(length: int) -> np.ndarray:
    """Coordinates 0..length-1 mapped onto -1..1 in single precision."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return (
            np.float32(2) * np.arange(length, dtype=np.float32) / np.float32(length - 1)
            - np.float32(1)
        )


def split_bands(image) -> np.ndarray:
    """Keep only red in the top third, blue in the middle, green at the bottom."""
    src = _float(image)
    height = src.shape[0]
    first, second = height // 3, height // 3 * 2
    out = np.zeros_like(src)
    out[:first, :, _RED] = src[:first, :, _RED]
    out[first:second, :, _BLUE] = src[first:second, :, _BLUE]
    out[second:, :, _GREEN] = src[second:, :, _GREEN]
    return to_uint8(out)


def quadrant_channels(image) -> np.ndarray:
    """Red top-left, blue bottom-left, green top-right, grey bottom-right.

    Pixels on the centre row right of the centre are black.
    """
    src = _float(image)
    height, width = src.shape[:2]
    dx = _signed_axis(width)[None, :]
    dy = _signed_axis(height)[:, None]
    red = (dx <= 0) & (dy <= 0)
    blue = (dx <= 0) & (dy >= 0) & ~red
    green = (dx > 0) & (dy < 0)
    mono = (dx > 0) & (dy > 0)
    out = np.zeros_like(src)
    out[..., _RED] = np.where(red, src[..., _RED], 0)
    out[..., _BLUE] = np.where(blue, src[..., _BLUE], 0)
    out[..., _GREEN] = np.where(green, src[..., _GREEN], 0)
    out[mono] = grey(src)[mono][:, None]
    return to_uint8(out)


def fold_intensity(image) -> np.ndarray:
    """Double dark values and mirror bright ones back down."""
    f = _float(image)
    return to_uint8(np.where(f < _HALF, 2 * f, 255 - 2 * (f - _HALF)))


def invert_fold(image) -> np.ndarray:
    """The complement of :func:`fold_intensity`: dark turns bright, bright stays bright."""
    f = _float(image)
    return to_uint8(np.where(f < _HALF, 255 - 2 * f, 2 * (f - _HALF)))


def horizontal_brighten(image) -> np.ndarray:
    """Add brightness rising from 0 at the left edge to 255 at the right."""
    src = _float(image)
    width = src.shape[1]
    with np.errstate(divide="ignore", invalid="ignore"):
        dx = np.arange(width, dtype=np.float32) / np.float32(width - 1)
    return to_uint8(src + (np.float32(255) * dx)[None, :, None])


def stepped_brighten(image) -> np.ndarray:
    """Split the image into eight horizontal bands, brightening band i by 32*i."""
    src = _float(image)
    height = src.shape[0]
    offsets = np.zeros(height, dtype=np.float64)
    for band in range(1, 8):
        offsets[band * height // 8 : (band + 1) * height // 8] = _STEP * band
    offsets[: height // 8] = 0
    return to_uint8(src + offsets[:, None, None])