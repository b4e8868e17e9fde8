"""Tiled, ringed and striped effects driven by pixel position."""
from __future__ import annotations

import numpy as np

from pixelfx.channels import _signed_axis
from pixelfx.pixels import _require_rgb, to_uint8

_WAVE_AMPLITUDE = 0.5
_WAVE_FREQUENCY = 1.0
_RING_SCALE = np.float32(10)


def _require_size(src: np.ndarray, min_height: int, min_width: int) -> None:
    height, width = src.shape[:2]
    if height < min_height or width < min_width:
        raise ValueError(
            f"image of {width}x{height} is too small; "
            f"need at least {min_width}x{min_height}"
        )


def _keep_or_black(src: np.ndarray, keep: np.ndarray) -> np.ndarray:
    return to_uint8(np.where(keep[..., None], src, 0))


def mosaic(image, blocks=16) -> np.ndarray:
    """Replace square blocks with their mean colour.

    The block side is ``2 * (height // (2 * blocks))``, so about ``blocks``
    blocks fit down the image; blocks at the right and bottom edges are cut
    short and averaged over the pixels they hold.
    """
    src = _require_rgb(image).astype(np.float64)
    if blocks < 1:
        raise ValueError("blocks must be at least 1")
    height, width = src.shape[:2]
    step = 2 * (height // (2 * blocks))
    if step == 0:
        raise ValueError(
            f"image height {height} is too small for {blocks} blocks"
        )
    out = np.empty_like(src)
    for y in range(0, height, step):
        for x in range(0, width, step):
            block = src[y : y + step, x : x + step]
            out[y : y + step, x : x + step] = block.mean(axis=(0, 1))
    return to_uint8(out)


def checkerboard(image, cells=8) -> np.ndarray:
    """Black out alternate cells of a ``cells`` by ``cells`` board."""
    src = _require_rgb(image)
    _require_size(src, 2, 2)
    height, width = src.shape[:2]
    scale = np.float32(cells)
    column = (
        np.arange(width, dtype=np.float32) / np.float32(width - 1) * scale
    ).astype(np.int64) % 2
    row = (
        np.arange(height, dtype=np.float32) / np.float32(height - 1) * scale
    ).astype(np.int64) % 2
    keep = row[:, None] == column[None, :]
    return _keep_or_black(src, keep)


def _tile_coordinates(src: np.ndarray):
    """Distances from each pixel to its tile centre, scaled by half a tile."""
    height, width = src.shape[:2]
    cx, cy = width // 4, height // 4
    if cx == 0 or cy == 0:
        raise ValueError(
            f"image of {width}x{height} is too small; need at least 4x4"
        )
    xs = np.arange(width)
    ys = np.arange(height)
    x2 = np.abs(xs - (xs // cx) * cx - cx // 2).astype(np.float32)
    y2 = np.abs(ys - (ys // cy) * cy - cy // 2).astype(np.float32)
    a = np.float32(cx) / np.float32(2)
    b = np.float32(cy) / np.float32(2)
    limit = np.float32(height // width)
    return (x2 / a)[None, :], (y2 / b)[:, None], limit


def _keep_or_dim(src: np.ndarray, keep: np.ndarray) -> np.ndarray:
    values = src.astype(np.float64)
    return to_uint8(np.where(keep[..., None], values, values / 2))


def diamond_tiles(image) -> np.ndarray:
    """Dim everything outside a diamond in each tile of a 4 by 4 grid.

    The diamond's size is the whole-number ratio height // width, so images
    wider than tall come out dimmed everywhere.
    """
    src = _require_rgb(image)
    u, v, limit = _tile_coordinates(src)
    return _keep_or_dim(src, u + v < limit)


def oval_tiles(image) -> np.ndarray:
    """Dim everything outside an oval in each tile of a 4 by 4 grid."""
    src = _require_rgb(image)
    u, v, limit = _tile_coordinates(src)
    return _keep_or_dim(src, np.sqrt(u * u + v * v) < limit)


def _centred_grid(src: np.ndarray):
    _require_size(src, 2, 2)
    height, width = src.shape[:2]
    return _signed_axis(width)[None, :], _signed_axis(height)[:, None]


def _even_ring(distance: np.ndarray) -> np.ndarray:
    return (distance * _RING_SCALE).astype(np.int64) % 2 == 0


def circular_rings(image) -> np.ndarray:
    """Black out every other ring of concentric ellipses."""
    src = _require_rgb(image)
    dx, dy = _centred_grid(src)
    return _keep_or_black(src, _even_ring(np.sqrt(dx * dx + dy * dy)))


def diamond_rings(image) -> np.ndarray:
    """Black out every other ring of concentric diamonds."""
    src = _require_rgb(image)
    dx, dy = _centred_grid(src)
    return _keep_or_black(src, _even_ring(np.abs(dx) + np.abs(dy)))


def _wave_keep(along: np.ndarray, across: np.ndarray) -> np.ndarray:
    bend = _WAVE_AMPLITUDE * np.sin(
        _WAVE_FREQUENCY * np.pi * across.astype(np.float64)
    )
    shifted = (along.astype(np.float64) + bend).astype(np.float32)
    one = np.float32(1)
    shifted = np.where(shifted + one < 0, shifted - one, shifted)
    band = np.trunc((shifted + one) * np.float32(10) / np.float32(2))
    return band % 2 == 0


def vertical_waves(image) -> np.ndarray:
    """Black out alternate wavy stripes that run top to bottom."""
    src = _require_rgb(image)
    dx, dy = _centred_grid(src)
    return _keep_or_black(src, _wave_keep(dx, dy))


def horizontal_waves(image) -> np.ndarray:
    """Black out alternate wavy stripes that run left to right."""
    src = _require_rgb(image)
    dx, dy = _centred_grid(src)
    return _keep_or_black(src, _wave_keep(dy, dx))