"""Per-channel tone histograms of BGR images."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

TONES = 256


@dataclass(frozen=True)
class HistogramElement:
    """One tone of a histogram: its value, its count and the running count up to it."""

    value: float = 0.0
    frequency: float = 0.0
    cdf: float = 0.0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HistogramElement):
            return NotImplemented
        return self.frequency < other.frequency


@dataclass
class Histogram:
    """Histogram of one channel of an image.

    ``data`` holds one element per tone present in the image, in increasing
    tone order. ``by_frequency`` holds an element for every one of the 256
    tones, absent tones counting zero, ordered by frequency.
    """

    total_pixels: int = 0
    lower_frequency: int = 0
    higher_frequency: int = 0
    data: list[HistogramElement] = field(default_factory=list)
    by_frequency: list[HistogramElement] = field(default_factory=list)

    @classmethod
    def from_image(cls, image, channel) -> Histogram:
        """Build the histogram of channel ``channel`` (0, 1 or 2) of a rows x cols x 3 image."""
        pixels = np.asarray(image)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"expected a rows x cols x 3 image, got shape {pixels.shape}")
        if channel not in (0, 1, 2):
            raise ValueError(f"channel must be 0, 1 or 2, got {channel!r}")

        values = pixels[..., channel].astype(np.uint8).ravel()
        tones, counts = np.unique(values, return_counts=True)
        cdfs = np.cumsum(counts)
        data = [
            HistogramElement(float(tone), float(count), float(cdf))
            for tone, count, cdf in zip(tones, counts, cdfs)
        ]

        slots = [HistogramElement()] * TONES
        for element in data:
            slots[int(element.value)] = element
        slots.sort()

        return cls(
            total_pixels=int(pixels.shape[0] * pixels.shape[1]),
            lower_frequency=int(slots[0].frequency),
            higher_frequency=int(slots[-1].frequency),
            data=data,
            by_frequency=slots,
        )

    def element_by_value(self, value) -> HistogramElement:
        """Return the element for tone ``value``, or an all-zero element if it is absent."""
        return next((element for element in self.data if element.value == value), HistogramElement())