"""Per-pixel tone filters: grey conversions, sepia, highlight, threshold and shift."""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .filter import Filter
from .smoothing import _odd_size


def _planes(image: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Blue, green and red planes in double precision."""
    pixels = image.astype(np.float64)
    return pixels[..., 0], pixels[..., 1], pixels[..., 2]


def _mean(image: np.ndarray) -> np.ndarray:
    """Mean of the three channels, in single precision."""
    return image.astype(np.float32).sum(axis=2) / np.float32(3)


def _spread(values: np.ndarray) -> np.ndarray:
    """Copy one value per pixel into all three channels."""
    return np.repeat(np.asarray(values, dtype=np.int64)[..., np.newaxis], 3, axis=2)


def _truncate(values: np.ndarray) -> np.ndarray:
    """Round to single precision, then cut toward zero."""
    return np.trunc(values.astype(np.float32)).astype(np.int64)


class GrayscaleAverageFilter(Filter):
    """Grey as the plain mean of blue, green and red."""

    name = "Filtro gris por promedio"

    def __init__(self) -> None:
        super().__init__()
        self.substractor = 0

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        return _spread(source.astype(np.int64).sum(axis=2) // 3)


class GrayscaleLuminosityFilter(Filter):
    """Grey as 0.3 red + 0.59 green + 0.11 blue."""

    name = "Filtro gris por luminosidad"

    def __init__(self) -> None:
        super().__init__()
        self.substractor = 0

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        b, g, r = _planes(source)
        return _spread(_truncate(r * 0.3 + g * 0.59 + b * 0.11))


class GrayscaleLuminanceFilter(Filter):
    """Grey from a neighbourhood: the mean of its darkest grey level and the one
    at sorted position ``2 * msize + 2`` (the brightest for a 3 x 3 mask)."""

    name = "Filtro gris por luminancia"

    def __init__(self) -> None:
        super().__init__()
        self._configure(3)

    def _configure(self, msize) -> None:
        size = _odd_size(msize)
        if size < 3:
            raise ValueError(f"mask size must be at least 3, got {msize!r}")
        self.msize = size
        self.substractor = size // 2

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        grey = source.astype(np.int64).sum(axis=2) // 3
        windows = sliding_window_view(grey, (self.msize, self.msize))
        ordered = np.sort(windows.reshape(*windows.shape[:2], -1), axis=-1)
        return _spread((ordered[..., 0] + ordered[..., 2 * self.msize + 2]) // 2)

    def reset(self) -> None:
        """Go back to a 3 x 3 mask."""
        self.modify(3)

    def modify(self, msize) -> None:
        """Use a mask of ``msize`` pixels a side (even sizes grow by one)."""
        self._configure(msize)
        self._refresh_result()


class SepiaFilter(Filter):
    """Classic sepia tone matrix, clamped to 0..255."""

    name = "Filtro sepia"

    def __init__(self) -> None:
        super().__init__()
        self.substractor = 0

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        b, g, r = _planes(source)
        blue = (r * 0.272) + (g * 0.534) + (b * 0.131)
        green = (r * 0.349) + (g * 0.686) + (b * 0.168)
        red = (r * 0.393) + (g * 0.769) + (b * 0.189)
        channels = [np.clip(_truncate(plane), 0, 255) for plane in (blue, green, red)]
        return np.stack(channels, axis=2)


class HighlightFilter(Filter):
    """Logarithmic brightening: ``highlight * log(grey + 1)``, wrapped to a byte."""

    name = "Filtro de realce"

    def __init__(self) -> None:
        super().__init__()
        self.substractor = 0
        self.highlight = 30

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        logs = np.log(_mean(source) + np.float32(1))
        return _spread(_truncate(np.float32(self.highlight) * logs))

    def reset(self) -> None:
        """Go back to a factor of 30."""
        self.modify(30)

    def modify(self, highlight) -> None:
        """Scale the logarithm by ``highlight``."""
        self.highlight = int(highlight)
        self._refresh_result()


def _thresholds(first: int, last: int) -> tuple[int, int]:
    """Bring a pair of thresholds into 0..255 with ``first < last``."""
    if last <= first:
        last = first + 1
    first = min(max(first, 0), 255)
    last = min(max(last, 0), 255)
    if first >= last:
        first = last - 1
    return first, last


class UmbralFilter(Filter):
    """Threshold: white where the grey level lies strictly between the bounds, else black."""

    name = "Filtro del umbral"

    def __init__(self) -> None:
        super().__init__()
        self.substractor = 0
        self.first_umbral = 40
        self.last_umbral = 190

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        grey = _mean(source)
        inside = (grey > self.first_umbral) & (grey < self.last_umbral)
        return _spread(np.where(inside, 255, 0))

    def reset(self) -> None:
        """Go back to the bounds 40 and 190."""
        self.modify(40, 190)

    def modify(self, first_umbral, last_umbral) -> None:
        """Set the bounds, adjusted into 0..255 so the lower stays below the upper."""
        self.first_umbral, self.last_umbral = _thresholds(int(first_umbral), int(last_umbral))
        self._refresh_result()


class DisplacementHistogramFilter(Filter):
    """Add ``displacement`` to every channel, clamped to 0..255."""

    name = "Filtro del histograma desplazado"

    def __init__(self) -> None:
        super().__init__()
        self.substractor = 0
        self.displacement = 50

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        return np.clip(source.astype(np.int64) + self.displacement, 0, 255)

    def reset(self) -> None:
        """Go back to a shift of 50."""
        self.modify(50)

    def modify(self, displacement) -> None:
        """Shift every channel by ``displacement``."""
        self.displacement = int(displacement)
        self._refresh_result()