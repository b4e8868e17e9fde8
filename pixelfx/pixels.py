"""Loading, saving and value conversion for RGB pixel arrays.

Images are numpy arrays of shape (height, width, 3) holding red, green
and blue values.
"""
from __future__ import annotations

import numpy as np
from PIL import Image


def _require_rgb(image) -> np.ndarray:
    """Return ``image`` as an array, checking it has shape (height, width, 3)."""
    array = np.asarray(image)
    if array.ndim != 3 or array.shape[2] != 3:
        raise ValueError(
            f"expected an array of shape (height, width, 3), got {array.shape}"
        )
    return array


def load_image(path) -> np.ndarray:
    """Read an image file into an RGB ``uint8`` array."""
    with Image.open(path) as img:
        return np.array(img.convert("RGB"), dtype=np.uint8)


def save_image(image, path) -> None:
    """Write an RGB array to ``path``; the format follows the file extension."""
    Image.fromarray(to_uint8(_require_rgb(image))).save(path)


def to_uint8(values) -> np.ndarray:
    """Round to nearest and saturate into 0..255; NaN becomes 0."""
    array = np.asarray(values, dtype=np.float64)
    array = np.nan_to_num(array, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(np.rint(array), 0, 255).astype(np.uint8)


def grey(image) -> np.ndarray:
    """Mean of the three channels of every pixel, as a float (height, width) array."""
    return _require_rgb(image).astype(np.float64).sum(axis=2) / 3