"""Effects that move pixels along sine curves."""
from __future__ import annotations

import numpy as np

from pixelfx.pixels import _require_rgb

_WAVE_PI = np.float32(3.14)


def _scatter(src: np.ndarray, rows, cols) -> np.ndarray:
    """Copy each source pixel to (rows, cols) on a black canvas.

    Targets outside the image are dropped; where two pixels land on the
    same spot, the later one in row-major order wins.
    """
    height, width = src.shape[:2]
    rows = np.broadcast_to(rows, (height, width)).ravel()
    cols = np.broadcast_to(cols, (height, width)).ravel()
    valid = (rows >= 0) & (rows < height) & (cols >= 0) & (cols < width)
    sources = np.flatnonzero(valid)
    targets = rows[valid] * width + cols[valid]
    _, first_in_reverse = np.unique(targets[::-1], return_index=True)
    last = len(targets) - 1 - first_in_reverse
    out = np.zeros((height * width, 3), dtype=np.uint8)
    out[targets[last]] = src.reshape(-1, 3)[sources[last]]
    return out.reshape(src.shape)


def sine_shift_rows(image) -> np.ndarray:
    """Slide each row sideways by a quarter width times a sine of its height.

    One full period spans the image height; pixels pushed off the edge are
    lost and uncovered pixels stay black.
    """
    src = _require_rgb(image).astype(np.uint8)
    height, width = src.shape[:2]
    if src.size == 0:
        return src.copy()
    freq = np.float64(np.float32(1) / np.float32(height))
    amp = np.float64(np.float32(width) / np.float32(4))
    ys = np.arange(height, dtype=np.float64)
    xs = np.arange(width, dtype=np.float64)
    shift = amp * np.sin(2 * np.pi * ys * freq)
    cols = np.trunc(xs[None, :] + shift[:, None]).astype(np.int64)
    rows = np.arange(height, dtype=np.int64)[:, None]
    return _scatter(src, rows, cols)


def sine_shift_columns(image) -> np.ndarray:
    """Slide each column up or down by a quarter height times a sine of its position.

    One full period spans the image width; pixels pushed off the edge are
    lost and uncovered pixels stay black.
    """
    src = _require_rgb(image).astype(np.uint8)
    height, width = src.shape[:2]
    if src.size == 0:
        return src.copy()
    freq = np.float64(np.float32(1) / np.float32(width))
    amp = np.float64(np.float32(height) / np.float32(4))
    ys = np.arange(height, dtype=np.float64)
    xs = np.arange(width, dtype=np.float64)
    shift = amp * np.sin(2 * np.pi * xs * freq)
    rows = np.trunc(ys[:, None] + shift[None, :]).astype(np.int64)
    cols = np.arange(width, dtype=np.int64)[None, :]
    return _scatter(src, rows, cols)


def stepped_column_wave(image, steps=16) -> np.ndarray:
    """Shift vertical strips down by a quarter width times a stepped sine.

    The image is cut into ``steps`` strips; strip ``i`` moves by
    ``width / 4 * sin(2 * 3.14 * i / (steps - 1))`` rows.
    """
    src = _require_rgb(image).astype(np.uint8)
    if steps < 2:
        raise ValueError("steps must be at least 2")
    height, width = src.shape[:2]
    if src.size == 0:
        return src.copy()
    strip = np.float32(width) / np.float32(steps)
    index = (np.arange(width, dtype=np.float32) / strip).astype(np.int64)
    angle = (
        np.float32(2) * _WAVE_PI * index.astype(np.float32) / np.float32(steps - 1)
    )
    amp = np.float64(np.float32(width) / np.float32(4))
    shift = amp * np.sin(angle.astype(np.float64))
    ys = np.arange(height, dtype=np.float64)
    rows = np.trunc(ys[:, None] + shift[None, :]).astype(np.int64)
    cols = np.arange(width, dtype=np.int64)[None, :]
    return _scatter(src, rows, cols)