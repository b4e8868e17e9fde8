"""Effects that turn part of an image grey according to a shape."""
from __future__ import annotations

import numpy as np

from pixelfx.pixels import _require_rgb, grey, to_uint8


def _centred_axis(length: int) -> np.ndarray:
    """Coordinates scaled by 2/length and shifted by -1, in single precision."""
    return (
        np.float32(2) * np.arange(length, dtype=np.float32) / np.float32(length)
        - np.float32(1)
    )


def _grey_where(src: np.ndarray, mask: np.ndarray) -> np.ndarray:
    out = src.astype(np.float64)
    out[mask] = grey(src)[mask][:, None]
    return to_uint8(out)


def grey_outside_diamond(image) -> np.ndarray:
    """Turn grey every pixel outside the diamond inscribed in the image."""
    src = _require_rgb(image)
    height, width = src.shape[:2]
    dx = np.abs(_centred_axis(width))[None, :]
    dy = np.abs(_centred_axis(height))[:, None]
    return _grey_where(src, dx + dy >= 1)


def grey_corners(image) -> np.ndarray:
    """Keep colour within one half-size of the nearest corner, grey the rest."""
    src = _require_rgb(image)
    height, width = src.shape[:2]
    ys = np.arange(height)
    xs = np.arange(width)
    y1 = np.where(ys < height // 2, ys, height - ys).astype(np.float32)
    x1 = np.where(xs < width // 2, xs, width - xs).astype(np.float32)
    with np.errstate(divide="ignore", invalid="ignore"):
        dy = (y1 / np.float32(height // 2))[:, None]
        dx = (x1 / np.float32(width // 2))[None, :]
        dist = np.sqrt(dx * dx + dy * dy)
    return _grey_where(src, dist >= 1)


def grey_outside_circle(image) -> np.ndarray:
    """Turn grey every pixel outside the ellipse inscribed in the image."""
    src = _require_rgb(image)
    height, width = src.shape[:2]
    dx = _centred_axis(width)[None, :]
    dy = _centred_axis(height)[:, None]
    return _grey_where(src, np.sqrt(dx * dx + dy * dy) >= 1)


def fade_to_grey(image) -> np.ndarray:
    """Blend from full colour at the left edge to grey at the right edge."""
    src = _require_rgb(image).astype(np.float64)
    width = src.shape[1]
    with np.errstate(divide="ignore", invalid="ignore"):
        dx = np.arange(width, dtype=np.float32) / np.float32(width - 1)
    weight = (np.float32(1) - dx)[None, :, None]
    share = dx[None, :, None]
    return to_uint8(weight * src + share * grey(src)[..., None])