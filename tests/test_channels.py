import numpy as np
import pytest

from pixelfx.channels import (
    fold_intensity,
    horizontal_brighten,
    invert_fold,
    quadrant_channels,
    split_bands,
    stepped_brighten,
)


def _uniform(height, width, rgb):
    return np.tile(np.array(rgb, dtype=np.uint8), (height, width, 1))


def test_split_bands_keeps_one_channel_per_third():
    result = split_bands(_uniform(6, 2, (10, 20, 30)))
    assert np.array_equal(result[:2], _uniform(2, 2, (10, 0, 0)))
    assert np.array_equal(result[2:4], _uniform(2, 2, (0, 0, 30)))
    assert np.array_equal(result[4:], _uniform(2, 2, (0, 20, 0)))


def test_quadrant_channels_on_three_by_three():
    result = quadrant_channels(_uniform(3, 3, (30, 60, 90)))
    assert result[0, 0].tolist() == [30, 0, 0]
    assert result[1, 1].tolist() == [30, 0, 0]
    assert result[0, 2].tolist() == [0, 60, 0]
    assert result[2, 0].tolist() == [0, 0, 90]
    assert result[1, 2].tolist() == [0, 0, 0]
    assert result[2, 2].tolist() == [60, 60, 60]


def test_fold_intensity_boundaries():
    image = _uniform(1, 1, (0, 127, 255))
    assert fold_intensity(image)[0, 0].tolist() == [0, 255, 0]


def test_fold_and_invert_fold_sum_to_white():
    values = np.arange(256, dtype=np.uint8)
    image = np.repeat(values[None, :, None], 3, axis=2)
    total = fold_intensity(image).astype(int) + invert_fold(image).astype(int)
    assert np.array_equal(total, np.full(total.shape, 255, dtype=int))


def test_invert_fold_maps_black_to_white():
    result = invert_fold(_uniform(2, 2, (0, 0, 0)))
    assert np.array_equal(result, _uniform(2, 2, (255, 255, 255)))


def test_horizontal_brighten_ramps_left_to_right():
    result = horizontal_brighten(_uniform(3, 5, (0, 0, 0)))
    assert np.all(result[:, 0] == 0)
    assert np.all(result[:, -1] == 255)
    assert np.all(np.diff(result[0, :, 0].astype(int)) >= 0)
    assert np.array_equal(result[0], result[2])


def test_stepped_brighten_adds_multiples_of_32():
    result = stepped_brighten(_uniform(8, 2, (0, 0, 0)))
    assert result[:, 0, 0].tolist() == [32 * i for i in range(8)]


def test_stepped_brighten_bands_are_uniform_and_saturate():
    result = stepped_brighten(_uniform(16, 3, (250, 250, 250)))
    assert np.array_equal(result[:2], _uniform(2, 3, (250, 250, 250)))
    assert np.array_equal(result[2:], _uniform(14, 3, (255, 255, 255)))


@pytest.mark.parametrize(
    "func",
    [split_bands, quadrant_channels, fold_intensity, invert_fold, horizontal_brighten, stepped_brighten],
)
def test_rejects_wrong_shape(func):
    with pytest.raises(ValueError):
        func(np.zeros((4, 4)))