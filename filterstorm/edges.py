"""Edge-detection filters that weigh the grey level of a neighbourhood."""

from __future__ import annotations

from abc import abstractmethod

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .filter import Filter
from .smoothing import _odd_size


def _grey(image: np.ndarray) -> np.ndarray:
    """Mean of the three channels, in single precision."""
    return image.astype(np.float32).sum(axis=2) / np.float32(3)


def _accumulate(grey: np.ndarray, weights: np.ndarray) -> np.ndarray:
    """Weighted sum of every neighbourhood, truncated after each tap.

    Taps are visited row by row, and the running total is cut to an integer
    after every one of them, as an integer accumulator would.
    """
    windows = sliding_window_view(grey, weights.shape)
    total = np.zeros(windows.shape[:2], dtype=np.float32)
    for (row, col), weight in np.ndenumerate(weights):
        total = np.trunc(total + np.float32(weight) * windows[..., row, col])
    return total


def _as_grey_bgr(values: np.ndarray) -> np.ndarray:
    """Clamp to 0..255 and copy the value into all three channels."""
    clamped = np.clip(values, 0, 255).astype(np.int64)
    return np.repeat(clamped[..., np.newaxis], 3, axis=2)


class _GreyMaskFilter(Filter):
    """Weighted sum of the grey levels under a square mask, clamped to 0..255."""

    @abstractmethod
    def _weights(self) -> np.ndarray:
        """Weights laid out as the image is: first index rows, second columns."""

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        return _as_grey_bgr(_accumulate(_grey(source), self._weights()))


class LaplacianFilter(_GreyMaskFilter):
    """Laplacian of the grey level over a 3 x 3 cross."""

    name = "Filtro laplaciano"

    def __init__(self) -> None:
        super().__init__()
        self.weight = 1
        self.mask = self._make_mask()

    def _make_mask(self) -> np.ndarray:
        w = self.weight
        return np.array([[0, w, 0], [w, -4 * w, w], [0, w, 0]], dtype=np.int64)

    def _weights(self) -> np.ndarray:
        return self.mask.T

    def reset(self) -> None:
        """Go back to weight 1."""
        self.modify(1)

    def modify(self, weight) -> None:
        """Weigh the four neighbours ``weight`` and the centre minus four times it."""
        self.weight = int(weight)
        self.mask = self._make_mask()
        self._refresh_result()


class MinusLaplacianFilter(_GreyMaskFilter):
    """Sharpening: the grey level minus its Laplacian."""

    name = "Filtro menos laplaciano"

    def __init__(self) -> None:
        super().__init__()
        self.weight = 1
        self.mask = self._make_mask()

    def _make_mask(self) -> np.ndarray:
        w = self.weight
        return np.array([[0, -w, 0], [-w, 4 * w + 1, -w], [0, -w, 0]], dtype=np.int64)

    def _weights(self) -> np.ndarray:
        return self.mask.T

    def reset(self) -> None:
        """Go back to weight 1."""
        self.modify(1)

    def modify(self, weight) -> None:
        """Weigh the four neighbours minus ``weight`` and the centre four times it plus one."""
        self.weight = int(weight)
        self.mask = self._make_mask()
        self._refresh_result()


class _DirectionalFilter(_GreyMaskFilter):
    """Square mask of +/- ``weight`` split across the neighbourhood, centre minus twice it."""

    def __init__(self) -> None:
        super().__init__()
        self._configure(3, 1)

    def _configure(self, msize, weight) -> None:
        self.msize = _odd_size(msize)
        self.weight = int(weight)
        self.substractor = self.msize // 2
        self.mask = self._make_mask()

    @abstractmethod
    def _split(self, cols: np.ndarray) -> np.ndarray:
        """Return True where the mask holds +weight, given each column index."""

    def _make_mask(self) -> np.ndarray:
        cols = np.broadcast_to(np.arange(self.msize), (self.msize, self.msize))
        mask = np.where(self._split(cols), self.weight, -self.weight).astype(np.int64)
        mask[self.substractor, self.substractor] = -2 * self.weight
        return mask

    def _weights(self) -> np.ndarray:
        return self.mask.T


class DirectionalNorthFilter(_DirectionalFilter):
    """Rows above and through the centre weigh +weight, rows below -weight."""

    name = "Filtro del direccional norte"

    def _split(self, cols: np.ndarray) -> np.ndarray:
        return cols <= self.substractor

    def reset(self) -> None:
        """Go back to a 3 x 3 mask of weight 1."""
        self.modify(3, 1)

    def modify(self, msize, weight) -> None:
        """Use a mask of ``msize`` pixels a side (even sizes grow by one) of weight ``weight``."""
        self._configure(msize, weight)
        self._refresh_result()


class DirectionalEastFilter(_DirectionalFilter):
    """Rows above the centre weigh -weight, the others +weight."""

    name = "Filtro del direccional este"

    def _split(self, cols: np.ndarray) -> np.ndarray:
        return cols >= self.substractor

    def reset(self) -> None:
        """Go back to a 3 x 3 mask of weight 1."""
        self.modify(3, 1)

    def modify(self, msize, weight) -> None:
        """Use a mask of ``msize`` pixels a side (even sizes grow by one) of weight ``weight``."""
        self._configure(msize, weight)
        self._refresh_result()


def _sobel_masks(msize: int) -> tuple[np.ndarray, np.ndarray]:
    half = msize // 2
    rows = np.arange(msize)[:, np.newaxis]
    cols = np.arange(msize)[np.newaxis, :]
    k = np.where(rows <= half, half + rows, msize + half - rows - 1)
    mask_x = np.where(cols < half, cols - k, np.where(cols > half, k - (msize - cols - 1), 0))
    mask_x = mask_x.astype(np.int64)
    return mask_x, mask_x.T.copy()


class SobelFilter(Filter):
    """Gradient magnitude of the grey level from a pair of Sobel masks."""

    name = "Filtro sobel"

    def __init__(self) -> None:
        super().__init__()
        self._configure(3)

    def _configure(self, msize) -> None:
        self.msize = _odd_size(msize)
        self.substractor = self.msize // 2
        self.mask_x, self.mask_y = _sobel_masks(self.msize)

    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        grey = _grey(source)
        sum_x = _accumulate(grey, self.mask_x.T).astype(np.float64)
        sum_y = _accumulate(grey, self.mask_y.T).astype(np.float64)
        return _as_grey_bgr(np.trunc(np.sqrt(sum_x**2 + sum_y**2)))

    def reset(self) -> None:
        """Go back to a 3 x 3 mask."""
        self.modify(3)

    def modify(self, msize) -> None:
        """Use masks of ``msize`` pixels a side (even sizes grow by one)."""
        self._configure(msize)
        self._refresh_result()