import numpy as np
import pytest
from PIL import Image

from filterstorm.picture import Channel, Picture


def _constant(b, g, r, rows=4, cols=5):
    image = np.empty((rows, cols, 3), dtype=np.uint8)
    image[...] = (b, g, r)
    return image


def test_dimensions_and_copy_on_construction():
    source = _constant(1, 2, 3, rows=4, cols=5)
    picture = Picture(source)
    assert (picture.rows, picture.cols) == (4, 5)
    source[0, 0] = (9, 9, 9)
    assert picture.image[0, 0].tolist() == [1, 2, 3]


def test_copy_is_independent():
    picture = Picture(_constant(10, 20, 30))
    duplicate = picture.copy()
    duplicate.image[1, 1] = (0, 0, 0)
    assert picture.image[1, 1].tolist() == [10, 20, 30]
    assert np.array_equal(duplicate.image[0], picture.image[0])


def test_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Picture(np.zeros((3, 3), dtype=np.uint8))
    with pytest.raises(ValueError):
        Picture(np.zeros((3, 3, 4), dtype=np.uint8))


def test_convert_to_gray_truncates_mean():
    picture = Picture(np.array([[[10, 20, 31], [0, 0, 0]]], dtype=np.uint8))
    picture.convert_to_gray()
    assert picture.image[0, 0].tolist() == [20, 20, 20]
    assert picture.image[0, 1].tolist() == [0, 0, 0]


def test_convert_to_gray_channels_equal():
    rng = np.random.default_rng(3)
    picture = Picture(rng.integers(0, 256, size=(6, 7, 3), dtype=np.uint8))
    original = picture.image.copy()
    picture.convert_to_gray()
    assert np.array_equal(picture.image[..., 0], picture.image[..., 1])
    assert np.array_equal(picture.image[..., 1], picture.image[..., 2])
    assert np.all(picture.image[..., 0] <= original.max(axis=2))
    assert np.all(picture.image[..., 0] >= original.min(axis=2))


def test_make_histogram_uses_blue_channel():
    picture = Picture(_constant(7, 100, 200, rows=2, cols=3))
    hist = picture.make_histogram()
    assert picture.hist is hist
    assert [e.value for e in hist.data] == [7.0]
    assert hist.total_pixels == 6


def test_from_path_reads_bgr(tmp_path):
    path = tmp_path / "pixel.png"
    rgb = np.zeros((2, 3, 3), dtype=np.uint8)
    rgb[...] = (1, 2, 3)
    Image.fromarray(rgb).save(path)
    picture = Picture.from_path(path)
    assert (picture.rows, picture.cols) == (2, 3)
    assert picture.image[1, 2].tolist() == [3, 2, 1]


def test_from_path_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        Picture.from_path(tmp_path / "absent.png")


def test_histogram_image_shape_and_blue_peak():
    picture = Picture(_constant(100, 100, 100))
    drawing = picture.histogram_image(512, 100, Channel.B)
    assert drawing.shape == (100, 512, 3)
    assert drawing[0, 200].tolist() == [255, 0, 0]
    assert drawing[..., 1].max() == 0
    assert drawing[..., 2].max() == 0


def test_histogram_image_red_only():
    picture = Picture(_constant(100, 100, 100))
    drawing = picture.histogram_image(512, 100, Channel.R)
    assert drawing[0, 200].tolist() == [0, 0, 255]
    assert drawing[..., 0].max() == 0


def test_histogram_image_all_channels_draws_red_last():
    picture = Picture(_constant(100, 100, 100))
    drawing = picture.histogram_image(512, 100, Channel.RGB)
    assert drawing[0, 200].tolist() == [0, 0, 255]


def test_histogram_image_rejects_bad_size():
    picture = Picture(_constant(1, 1, 1))
    with pytest.raises(ValueError):
        picture.histogram_image(0, 10, Channel.RGB)