"""Filters that remap grey tones through a table built from the image histogram."""

from __future__ import annotations

import math
from abc import abstractmethod

import numpy as np

from .filter import Filter, Result
from .histogram import Histogram

_INT_MIN = -(2**31)
_INT_LIMIT = 2**31


def _to_int(value) -> int:
    """Truncate toward zero as a 32-bit conversion does; out-of-range and NaN give INT_MIN."""
    number = float(value)
    if not math.isfinite(number) or not (_INT_MIN <= number < _INT_LIMIT):
        return _INT_MIN
    return int(number)


def _column(hist: Histogram, attribute: str) -> np.ndarray:
    return np.array([getattr(element, attribute) for element in hist.data], dtype=np.float32)


class HistogramLookupFilter(Filter):
    """Grey the image, build its histogram, then replace each tone by a mapped one.

    Mapped tones are stored as integers and written as bytes, so values
    outside 0..255 wrap around.
    """

    def __init__(self) -> None:
        super().__init__()
        self.need_hist = True
        self.substractor = 0

    @abstractmethod
    def _map_tones(self, hist: Histogram) -> np.ndarray:
        """Return the new tone for every element of ``hist.data``, in order."""

    def _computed_results(self) -> None:
        hist = self.result.hist if self.result is not None else Histogram()
        if not hist.data:
            self.results = []
            return
        with np.errstate(all="ignore"):
            mapped = self._map_tones(hist)
        self.results = [
            Result(_to_int(element.value), _to_int(tone)) for element, tone in zip(hist.data, mapped)
        ]

    def _recompute(self) -> None:
        """Start again from the base image and rebuild the tone table."""
        self._refresh_result()
        self.result.convert_to_gray()
        self.result.make_histogram()
        self._computed_results()

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        table = np.arange(256, dtype=np.int64)
        seen: set[int] = set()
        for entry in self.results:
            if 0 <= entry.origin < 256 and entry.origin not in seen:
                table[entry.origin] = entry.result & 0xFF
                seen.add(entry.origin)
        tones = table[target[..., 0]]
        return np.repeat(tones[..., np.newaxis], 3, axis=2)


class NormalizeHistogramFilter(HistogramLookupFilter):
    """Each tone becomes its frequency scaled so the most frequent tone is 255."""

    name = "Filtro del histograma normalizado"

    def _map_tones(self, hist: Histogram) -> np.ndarray:
        return _column(hist, "frequency") / np.float32(hist.higher_frequency) * np.float32(255)


class EqualizationHistogramFilter(HistogramLookupFilter):
    """Classic equalization: the cumulative count stretched from the darkest tone to 255."""

    name = "Filtro del histograma ecualizado"

    def _map_tones(self, hist: Histogram) -> np.ndarray:
        cdf = _column(hist, "cdf")
        first = cdf[0]
        return (cdf - first) / (np.float32(hist.total_pixels) - first) * np.float32(255)


class SimpleEqualizationHistogramFilter(HistogramLookupFilter):
    """Each tone becomes its cumulative share of the pixels times 255."""

    name = "Filtro del histograma con ecualización simple"

    def _map_tones(self, hist: Histogram) -> np.ndarray:
        cdf = _column(hist, "cdf")
        return (cdf / cdf[-1]) * np.float32(255)


class UniformEqualizationHistogramFilter(HistogramLookupFilter):
    """Cumulative share spread uniformly between the darkest and brightest tones present."""

    name = "Filtro del histograma con ecualización uniforme"

    def _map_tones(self, hist: Histogram) -> np.ndarray:
        cdf = _column(hist, "cdf")
        values = _column(hist, "value")
        low, high = values[0], values[-1]
        return (high - low) * (cdf / cdf[-1]) + low


class ExponentialEqualizationHistogramFilter(HistogramLookupFilter):
    """Exponential equalization: ``darkest - log(1 - share) / alpha``."""

    name = "Filtro del histograma con ecualización exponencial"

    def __init__(self) -> None:
        super().__init__()
        self.alpha = 0.01

    def _map_tones(self, hist: Histogram) -> np.ndarray:
        cdf = _column(hist, "cdf")
        low = _column(hist, "value")[0]
        scale = np.float32(1) / np.float32(self.alpha)
        return low - scale * np.log(np.float32(1) - (cdf / cdf[-1]))

    def reset(self) -> None:
        """Go back to alpha 0.01."""
        self.modify(0.01)

    def modify(self, alpha) -> None:
        """Use ``alpha`` as the rate of the exponential and rebuild the tone table."""
        value = float(np.float32(alpha))
        if value == 0 or not math.isfinite(value):
            raise ValueError(f"alpha must be a non-zero number, got {alpha!r}")
        self.alpha = value
        self._recompute()