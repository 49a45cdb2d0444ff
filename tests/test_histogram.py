import numpy as np
import pytest

from filterstorm.histogram import Histogram, HistogramElement


def _image(blue, green=None, red=None):
    blue = np.asarray(blue, dtype=np.uint8)
    green = blue if green is None else np.asarray(green, dtype=np.uint8)
    red = blue if red is None else np.asarray(red, dtype=np.uint8)
    return np.stack([blue, green, red], axis=-1)


def test_counts_and_cdf_of_small_image():
    hist = Histogram.from_image(_image([[5, 5], [7, 9]]), 0)
    assert [e.value for e in hist.data] == [5.0, 7.0, 9.0]
    assert [e.frequency for e in hist.data] == [2.0, 1.0, 1.0]
    assert [e.cdf for e in hist.data] == [2.0, 3.0, 4.0]
    assert hist.total_pixels == 4


def test_invariants_on_random_image():
    rng = np.random.default_rng(7)
    image = rng.integers(0, 256, size=(13, 17, 3), dtype=np.uint8)
    hist = Histogram.from_image(image, 1)
    values = [e.value for e in hist.data]
    assert values == sorted(set(values))
    assert sum(e.frequency for e in hist.data) == hist.total_pixels == 13 * 17
    running = np.cumsum([e.frequency for e in hist.data])
    assert [e.cdf for e in hist.data] == list(running)
    assert hist.data[-1].cdf == hist.total_pixels
    assert hist.higher_frequency == max(e.frequency for e in hist.data)


def test_by_frequency_covers_every_tone_in_order():
    hist = Histogram.from_image(_image([[1, 2, 2, 3, 3, 3]]), 0)
    assert len(hist.by_frequency) == 256
    freqs = [e.frequency for e in hist.by_frequency]
    assert freqs == sorted(freqs)
    assert hist.lower_frequency == 0
    assert hist.higher_frequency == 3


def test_lower_frequency_when_every_tone_present():
    tones = np.arange(256, dtype=np.uint8).reshape(16, 16)
    hist = Histogram.from_image(_image(tones), 2)
    assert hist.lower_frequency == hist.higher_frequency == 1


def test_channel_selection():
    image = _image([[10, 10]], [[20, 30]], [[40, 40]])
    assert [e.value for e in Histogram.from_image(image, 0).data] == [10.0]
    assert [e.value for e in Histogram.from_image(image, 1).data] == [20.0, 30.0]
    assert [e.value for e in Histogram.from_image(image, 2).data] == [40.0]


def test_element_by_value_found_and_missing():
    hist = Histogram.from_image(_image([[4, 4, 8]]), 0)
    assert hist.element_by_value(4) == hist.data[0]
    assert hist.element_by_value(8).cdf == hist.total_pixels
    assert hist.element_by_value(5) == HistogramElement()


def test_empty_image():
    hist = Histogram.from_image(np.zeros((0, 0, 3), dtype=np.uint8), 0)
    assert hist.data == []
    assert hist.total_pixels == 0
    assert hist.lower_frequency == hist.higher_frequency == 0


def test_elements_order_by_frequency():
    assert HistogramElement(value=200, frequency=1) < HistogramElement(value=3, frequency=2)
    assert not HistogramElement(frequency=2) < HistogramElement(frequency=2)


@pytest.mark.parametrize("channel", [-1, 3])
def test_invalid_channel(channel):
    with pytest.raises(ValueError):
        Histogram.from_image(_image([[1]]), channel)


def test_invalid_shape():
    with pytest.raises(ValueError):
        Histogram.from_image(np.zeros((3, 3), dtype=np.uint8), 0)