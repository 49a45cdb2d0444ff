"""Smoothing and sharpening filters built on square neighbourhood masks."""

from __future__ import annotations

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .filter import Filter

_TWO_PI = 2 * 3.1416


def _odd_size(msize) -> int:
    """Round an even mask size up to the next odd one and check it is usable."""
    size = int(msize)
    if size % 2 == 0:
        size += 1
    if size < 1:
        raise ValueError(f"mask size must be positive, got {msize!r}")
    return size


def _windows(image: np.ndarray, size: int) -> np.ndarray:
    """View every size x size neighbourhood: shape (rows', cols', 3, size, size)."""
    return sliding_window_view(image, (size, size), axis=(0, 1))


class _MaskedMeanFilter(Filter):
    """Weighted sum of a square neighbourhood, divided and clamped to 0..255.

    Taps that fall in the last ``substractor - 1`` rows or columns of the image
    count as zero, so masks wider than three pixels darken the bottom and right
    edges of the interior.
    """

    def __init__(self, msize: int = 3) -> None:
        super().__init__()
        self._configure(msize)

    def _configure(self, msize) -> None:
        self.msize = _odd_size(msize)
        self.substractor = self.msize // 2
        self.mask = self._make_mask()

    def _make_mask(self) -> np.ndarray:
        return np.ones((self.msize, self.msize), dtype=np.int64)

    def _divisor(self) -> float:
        return float(self.msize * self.msize)

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        pixels = source.astype(np.int64)
        rows, cols = pixels.shape[:2]
        pixels[rows - margin + 1 :] = 0
        pixels[:, cols - margin + 1 :] = 0
        # Rows of the mask run along columns of the image.
        sums = np.einsum("yxcij,ij->yxc", _windows(pixels, self.msize), self.mask.T)
        return np.clip(np.trunc(sums / self._divisor()), 0, 255).astype(np.int64)


class MedianFilter(_MaskedMeanFilter):
    """Mean of the neighbourhood with every tap weighted one."""

    name = "Filtro de la media"

    def reset(self) -> None:
        """Go back to a 3 x 3 mask."""
        self.modify(3)

    def modify(self, msize) -> None:
        """Use a mask of ``msize`` pixels a side (even sizes grow by one)."""
        self._configure(msize)
        self._refresh_result()


class WeightedMedianFilter(_MaskedMeanFilter):
    """Mean of the neighbourhood with the centre tap weighted ``weight``."""

    name = "Filtro de la media ponderada"

    def __init__(self) -> None:
        self.weight = 2
        super().__init__(3)

    def _make_mask(self) -> np.ndarray:
        mask = np.ones((self.msize, self.msize), dtype=np.int64)
        mask[self.substractor, self.substractor] = self.weight
        return mask

    def _divisor(self) -> float:
        return float(self.msize * self.msize + self.weight - 1)

    def reset(self) -> None:
        """Go back to a 3 x 3 mask with centre weight 2."""
        self.modify(3, 2)

    def modify(self, msize, weight) -> None:
        """Use a mask of ``msize`` pixels a side whose centre weighs ``weight``."""
        size = _odd_size(msize)
        weight = int(weight)
        if size * size + weight - 1 == 0:
            raise ValueError("mask weights sum to zero")
        self.weight = weight
        self._configure(size)
        self._refresh_result()


class MinusMedianFilter(_MaskedMeanFilter):
    """Sharpening: the centre against the mean of its neighbours."""

    name = "Filtro menos media"

    def _make_mask(self) -> np.ndarray:
        mask = np.full((self.msize, self.msize), -1, dtype=np.int64)
        mask[self.substractor, self.substractor] = self.msize * self.msize - 1
        return mask

    def reset(self) -> None:
        """Go back to a 3 x 3 mask."""
        self.modify(3)

    def modify(self, msize) -> None:
        """Use a mask of ``msize`` pixels a side (even sizes grow by one)."""
        self._configure(msize)
        self._refresh_result()


class AverageFilter(Filter):
    """Rank filter: each channel takes the value at flat position ``msize + 1``
    of its sorted neighbourhood, the median for a 3 x 3 mask."""

    name = "Filtro por promedio"

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
        windows = _windows(source, self.msize)
        flat = windows.reshape(*windows.shape[:3], -1)
        return np.sort(flat, axis=-1)[..., self.msize + 1].astype(np.int64)

    def reset(self) -> None:
        """Go back to a 3 x 3 mask."""
        self.modify(3)

    def modify(self, msize) -> None:
        """Use a mask of ``msize`` pixels a side (even sizes grow by one)."""
        self._configure(msize)
        self._refresh_result()


def _gaussian_mask(msize: int, sigma: float) -> np.ndarray:
    half = msize // 2
    offsets = np.arange(msize) - half
    distances = (offsets[:, np.newaxis] ** 2 + offsets[np.newaxis, :] ** 2).astype(np.float32)
    spread = 2.0 * sigma**2
    with np.errstate(all="ignore"):
        weights = np.exp(-(distances / spread).astype(np.float32)).astype(np.float32)
        weights = (weights / (_TWO_PI * sigma**2)).astype(np.float32)
        ratios = weights / weights[0, 0]
    if not np.all(np.isfinite(ratios)):
        raise ValueError(f"cannot build a {msize} x {msize} gaussian mask with sigma {sigma!r}")
    return np.trunc(ratios).astype(np.int64)


class GaussianFilter(Filter):
    """Gaussian blur with an integer mask scaled so its corners weigh one."""

    name = "Filtro gaussiano"

    def __init__(self) -> None:
        super().__init__()
        self._configure(3, 1.0)

    def _configure(self, msize, sigma) -> None:
        size = _odd_size(msize)
        sigma = float(np.float32(sigma))
        if sigma == 0 or not np.isfinite(sigma):
            raise ValueError(f"sigma must be a non-zero number, got {sigma!r}")
        self.mask = _gaussian_mask(size, sigma)
        self.msize = size
        self.sigma = sigma
        self.sum_mask = int(self.mask.sum())
        self.substractor = size // 2

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        windows = _windows(source.astype(np.int64), self.msize)
        sums = np.einsum("yxcij,ij->yxc", windows, self.mask)
        return sums // self.sum_mask

    def reset(self) -> None:
        """Go back to a 3 x 3 mask with sigma 1."""
        self.modify(3, 1.0)

    def modify(self, msize, sigma) -> None:
        """Use a mask of ``msize`` pixels a side with spread ``sigma``."""
        self._configure(msize, sigma)
        self._refresh_result()