"""An image held as a BGR array, with its histogram."""

from __future__ import annotations

import enum
import os

import numpy as np
from PIL import Image, ImageDraw

from .histogram import Histogram

_BLUE = (0, 0, 255)
_GREEN = (0, 255, 0)
_RED = (255, 0, 0)


class Channel(enum.IntEnum):
    """Which channels a histogram drawing shows."""

    RGB = 0
    R = 1
    G = 2
    B = 3


_CURVES = {
    Channel.RGB: ((0, _BLUE), (1, _GREEN), (2, _RED)),
    Channel.R: ((2, _RED),),
    Channel.G: ((1, _GREEN),),
    Channel.B: ((0, _BLUE),),
}


class Picture:
    """A rows x cols x 3 image of unsigned bytes in blue, green, red order."""

    def __init__(self, image) -> None:
        pixels = np.array(image, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"expected a rows x cols x 3 image, got shape {pixels.shape}")
        self.image = pixels
        self.hist = Histogram()

    @classmethod
    def from_path(cls, path: str | os.PathLike) -> Picture:
        """Load an image file."""
        with Image.open(path) as loaded:
            rgb = np.asarray(loaded.convert("RGB"))
        return cls(rgb[..., ::-1])

    @property
    def rows(self) -> int:
        return int(self.image.shape[0])

    @property
    def cols(self) -> int:
        return int(self.image.shape[1])

    def copy(self) -> Picture:
        """Return a picture holding a copy of this image."""
        return Picture(self.image)

    def make_histogram(self) -> Histogram:
        """Compute the histogram of the first (blue) channel and keep it in ``hist``."""
        self.hist = Histogram.from_image(self.image, 0)
        return self.hist

    def convert_to_gray(self) -> None:
        """Replace every pixel by the truncated mean of its three channels."""
        gray = self.image.astype(np.uint16).sum(axis=2) // 3
        self.image[...] = gray.astype(np.uint8)[..., np.newaxis]

    def histogram_image(self, width, height, channel) -> np.ndarray:
        """Draw the channel histograms as curves on a black BGR image of the given size."""
        if width <= 0 or height <= 0:
            raise ValueError("histogram image size must be positive")
        curves = _CURVES[Channel(channel)]
        canvas = Image.new("RGB", (width, height))
        draw = ImageDraw.Draw(canvas)
        bin_width = int(np.rint(width / 256))
        for plane, colour in curves:
            counts = np.bincount(self.image[..., plane].ravel(), minlength=256).astype(float)
            low, high = counts.min(), counts.max()
            if high > low:
                scaled = (counts - low) * height / (high - low)
            else:
                scaled = np.zeros_like(counts)
            heights = height - np.rint(scaled).astype(int)
            points = [(bin_width * tone, int(y)) for tone, y in enumerate(heights)]
            draw.line(points, fill=colour, width=1)
        return np.asarray(canvas)[..., ::-1].copy()