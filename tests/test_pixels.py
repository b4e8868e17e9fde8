import numpy as np
import pytest
from PIL import Image

from pixelfx.pixels import grey, load_image, save_image, to_uint8


def test_to_uint8_rounds_and_saturates():
    result = to_uint8([-5.0, 300.0, 12.4, 12.6])
    assert result.dtype == np.uint8
    assert result.tolist() == [0, 255, 12, 13]


def test_to_uint8_maps_nan_to_zero():
    assert to_uint8([float("nan"), 7.0]).tolist() == [0, 7]


def test_to_uint8_keeps_in_range_integers():
    values = np.arange(256)
    assert np.array_equal(to_uint8(values), values.astype(np.uint8))


def test_grey_of_uniform_pixels_is_that_value():
    image = np.full((2, 3, 3), 90, dtype=np.uint8)
    assert np.array_equal(grey(image), np.full((2, 3), 90.0))


def test_grey_is_channel_mean():
    assert grey(np.array([[[0, 0, 255]]], dtype=np.uint8))[0, 0] == pytest.approx(85.0)


def test_grey_rejects_wrong_shape():
    with pytest.raises(ValueError):
        grey(np.zeros((2, 2)))


def test_save_and_load_round_trip(tmp_path):
    image = np.random.default_rng(0).integers(0, 256, (5, 7, 3), dtype=np.uint8)
    path = tmp_path / "picture.png"
    save_image(image, path)
    assert np.array_equal(load_image(path), image)


def test_load_converts_greyscale_to_rgb(tmp_path):
    levels = np.arange(12, dtype=np.uint8).reshape(3, 4) * 20
    path = tmp_path / "grey.png"
    Image.fromarray(levels, mode="L").save(path)
    loaded = load_image(path)
    assert loaded.shape == (3, 4, 3)
    for channel in range(3):
        assert np.array_equal(loaded[:, :, channel], levels)


def test_save_rejects_wrong_shape(tmp_path):
    with pytest.raises(ValueError):
        save_image(np.zeros((4, 4, 2)), tmp_path / "bad.png")