# filterstorm

A library of classic image filters. Images are 3-channel `numpy` arrays of
shape `(rows, cols, 3)` and dtype `uint8`, with channels in blue, green, red
order. Images can also be loaded from files through Pillow.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Working with a filter

Every filter subclasses `filterstorm.filter.Filter` and works the same way:

1. `set_image(source)` takes a file path, a `Picture` or a BGR array. It keeps
   a copy as `base` and another as `result`.
2. `apply()` runs the filter, writes into `result.image` and returns the
   `result` picture. If no image has been set, it returns `None`.
3. Filters with settings have `modify(...)` to change them and `reset()` to
   return to the defaults. Both start `result` again from a fresh copy of
   `base`, so an image must be set first. Without one they raise
   `RuntimeError`.

Windowed filters leave a border of `msize // 2` pixels on every side as it was.
If the image is too small to hold any interior, `apply()` leaves it unchanged.
Mask sizes that are even are increased by one. Each filter class has a `name`
attribute, which is a short descriptive label.

```python
import numpy as np
from filterstorm.edges import SobelFilter
from filterstorm.factory import FilterKind, create_filter

image = np.random.default_rng(0).integers(0, 256, (64, 64, 3), dtype=np.uint8)

sobel = SobelFilter()
sobel.set_image(image)
edges = sobel.apply().image

gaussian = create_filter(FilterKind.GAUSSIAN)
gaussian.set_image("photo.png")
gaussian.modify(5, 1.5)
gaussian.apply()
```

`filterstorm.factory.create_filter(kind)` accepts a `FilterKind` member or its
integer value. It returns a new filter with default settings. An unknown kind
raises `ValueError`.

## Filters

### `filterstorm.smoothing`

| Class | Does | `modify` | Defaults |
| --- | --- | --- | --- |
| `MedianFilter` | mean of the neighbourhood (box blur), clamped to 0..255 | `modify(msize)` | 3 |
| `WeightedMedianFilter` | mean with the centre weighted `weight` | `modify(msize, weight)` | 3, 2 |
| `MinusMedianFilter` | sharpening: the centre against the mean of its neighbours | `modify(msize)` | 3 |
| `AverageFilter` | rank filter: each channel takes sorted position `msize + 1` of its neighbourhood, which is the median for 3 × 3 | `modify(msize)`, `msize` at least 3 | 3 |
| `GaussianFilter` | Gaussian blur with an integer mask whose corners weigh one | `modify(msize, sigma)` | 3, 1.0 |

### `filterstorm.edges`

All of these work on the grey level, the mean of the three channels. The
result is clamped to 0..255 and written to all three channels.

| Class | Does | `modify` | Defaults |
| --- | --- | --- | --- |
| `LaplacianFilter` | 3 × 3 Laplacian cross | `modify(weight)` | 1 |
| `MinusLaplacianFilter` | grey level minus its Laplacian | `modify(weight)` | 1 |
| `DirectionalNorthFilter` | directional mask, positive above and through the centre | `modify(msize, weight)` | 3, 1 |
| `DirectionalEastFilter` | directional mask, negative above the centre | `modify(msize, weight)` | 3, 1 |
| `SobelFilter` | gradient magnitude from a pair of Sobel masks | `modify(msize)` | 3 |

### `filterstorm.tone`

| Class | Does | `modify` | Defaults |
| --- | --- | --- | --- |
| `GrayscaleAverageFilter` | grey as the truncated mean of the three channels | — | — |
| `GrayscaleLuminosityFilter` | grey as 0.3 R + 0.59 G + 0.11 B | — | — |
| `GrayscaleLuminanceFilter` | mean of the darkest grey in the neighbourhood and the grey at sorted position `2 * msize + 2` | `modify(msize)`, `msize` at least 3 | 3 |
| `SepiaFilter` | sepia tone matrix, clamped to 0..255 | — | — |
| `HighlightFilter` | `highlight * log(grey + 1)`, wrapped to a byte | `modify(highlight)` | 30 |
| `UmbralFilter` | white where the grey level is strictly between the bounds, black elsewhere | `modify(first_umbral, last_umbral)` | 40, 190 |
| `DisplacementHistogramFilter` | adds `displacement` to every channel, clamped to 0..255 | `modify(displacement)` | 50 |

`UmbralFilter.modify` brings both bounds into 0..255 and keeps the lower one
below the upper one.

### `filterstorm.histogram_filters`

These filters subclass `HistogramLookupFilter`. When the image is set, the
result is turned grey and the histogram of that grey image is built. A table
mapping each tone present to a new tone is stored in `results` as `Result(origin,
result)` entries. `apply()` then passes every pixel through that table. Mapped
values outside 0..255 wrap around.

| Class | New tone |
| --- | --- |
| `NormalizeHistogramFilter` | frequency scaled so the most frequent tone becomes 255 |
| `EqualizationHistogramFilter` | cumulative count stretched from the darkest tone to 255 |
| `SimpleEqualizationHistogramFilter` | cumulative share of the pixels × 255 |
| `UniformEqualizationHistogramFilter` | cumulative share spread between the darkest and brightest tones present |
| `ExponentialEqualizationHistogramFilter` | `darkest - log(1 - share) / alpha`; `modify(alpha)`, default 0.01 |

`ExponentialEqualizationHistogramFilter.modify` rejects an `alpha` of zero, or
one that is not finite, with `ValueError`.

## Pictures and histograms

`filterstorm.picture.Picture(image)` holds a copy of a BGR array as `image`,
with `rows` and `cols`. `Picture.from_path(path)` loads a file. `copy()`
duplicates the picture. `convert_to_gray()` replaces every pixel with the
truncated mean of its channels. `make_histogram()` builds the histogram of the
blue channel, stores it in `hist` and returns it.

`histogram_image(width, height, channel)` draws the histogram curves on a black
canvas and returns a BGR array of shape `(height, width, 3)`. `channel` is a
`Channel` value: `RGB`, `R`, `G` or `B`.

```python
from filterstorm.picture import Channel, Picture

picture = Picture.from_path("photo.png")
plot = picture.histogram_image(512, 400, Channel.RGB)
```

`filterstorm.histogram.Histogram.from_image(image, channel)` builds the
histogram of channel 0, 1 or 2. The result has these fields:

- `data`: one `HistogramElement(value, frequency, cdf)` for each tone present, in increasing tone order.
- `by_frequency`: all 256 tones ordered by frequency, with absent tones counting zero.
- `total_pixels`, `lower_frequency` and `higher_frequency`.

`element_by_value(value)` returns the element for one tone. If that tone is
absent, it returns an all-zero element.

## What it does not do

The package has no command-line program, no viewer or window, and no video
support. It does not write images to disk. To save a result, hand the array
to Pillow, reversing the channel order:
`PIL.Image.fromarray(picture.image[..., ::-1]).save("out.png")`.

## Running the tests

```
pytest
```