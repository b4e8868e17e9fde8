import numpy as np
import pytest

from pixelfx.geometry import (
    flip_horizontal,
    flip_vertical,
    swap_halves_horizontal,
    swap_halves_vertical,
)


def _random_image(height, width):
    return np.random.default_rng(1).integers(0, 256, (height, width, 3), dtype=np.uint8)


def test_flip_vertical_moves_last_row_first():
    image = _random_image(4, 5)
    result = flip_vertical(image)
    assert np.array_equal(result[0], image[-1])
    assert np.array_equal(result[-1], image[0])


def test_flip_vertical_twice_is_identity():
    image = _random_image(6, 3)
    assert np.array_equal(flip_vertical(flip_vertical(image)), image)


def test_flip_horizontal_moves_last_column_first():
    image = _random_image(3, 6)
    result = flip_horizontal(image)
    assert np.array_equal(result[:, 0], image[:, -1])
    assert np.array_equal(result[:, -1], image[:, 0])


def test_flip_horizontal_twice_is_identity():
    image = _random_image(5, 4)
    assert np.array_equal(flip_horizontal(flip_horizontal(image)), image)


def test_swap_halves_vertical_odd_height():
    rows = np.arange(1, 6, dtype=np.uint8)
    image = np.repeat(rows[:, None, None], 3, axis=2).repeat(2, axis=1)
    result = swap_halves_vertical(image)
    assert result.shape == image.shape
    assert result[:, 0, 0].tolist() == [0, 4, 5, 2, 3]


def test_swap_halves_horizontal_odd_width():
    cols = np.arange(1, 6, dtype=np.uint8)
    image = np.repeat(cols[None, :, None], 3, axis=2).repeat(2, axis=0)
    result = swap_halves_horizontal(image)
    assert result.shape == image.shape
    assert result[0, :, 1].tolist() == [3, 4, 5, 2, 0]


def test_swaps_keep_only_source_values():
    image = _random_image(8, 8)
    known = set(image.reshape(-1, 3).tolist() + [[0, 0, 0]].copy())
    known = {tuple(p) for p in image.reshape(-1, 3).tolist()} | {(0, 0, 0)}
    for result in (swap_halves_vertical(image), swap_halves_horizontal(image)):
        assert {tuple(p) for p in result.reshape(-1, 3).tolist()} <= known


@pytest.mark.parametrize(
    "func", [flip_vertical, flip_horizontal, swap_halves_vertical, swap_halves_horizontal]
)
def test_rejects_wrong_shape(func):
    with pytest.raises(ValueError):
        func(np.zeros((3, 3, 4)))