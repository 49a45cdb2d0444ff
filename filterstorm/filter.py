"""Base class shared by every image filter."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from .picture import Picture


@dataclass
class Result:
    """A tone mapping: pixels of tone ``origin`` become ``result``."""

    origin: int
    result: int


class Filter(ABC):
    """A filter reads ``base`` and writes ``result``, leaving a margin of
    ``substractor`` pixels untouched on every side."""

    name: str | None = None

    def __init__(self) -> None:
        self.results: list[Result] = []
        self.need_hist = False
        self.substractor = 1
        self.base: Picture | None = None
        self.result: Picture | None = None

    def set_image(self, source) -> None:
        """Load the image to filter from a path, a Picture or a BGR array."""
        if isinstance(source, (str, os.PathLike)):
            picture = Picture.from_path(source)
        elif isinstance(source, Picture):
            picture = source.copy()
        else:
            picture = Picture(source)
        self.base = picture
        self.result = picture.copy()
        self.results = []
        if self.need_hist:
            self.result.convert_to_gray()
            self.result.make_histogram()
            self._computed_results()

    def apply(self) -> Picture | None:
        """Run the filter over the image and return the result picture."""
        if self.base is None or self.result is None:
            return None
        margin = self.substractor
        rows, cols = self.base.rows, self.base.cols
        if rows <= 2 * margin or cols <= 2 * margin:
            return self.result
        region = self._process(self.base.image, self.result.image, margin)
        self.result.image[margin : rows - margin, margin : cols - margin] = np.asarray(region).astype(
            np.uint8
        )
        return self.result

    @abstractmethod
    def _process(self, source: np.ndarray, target: np.ndarray, margin: int) -> np.ndarray:
        """Return the new interior of the result, without the margin, as integers."""

    def _computed_results(self) -> None:
        """Fill ``results`` from the result histogram; called when ``need_hist`` is set."""

    def _refresh_result(self) -> None:
        """Start the result again from a fresh copy of the base image."""
        if self.base is None:
            raise RuntimeError("no image has been set on this filter")
        self.result = self.base.copy()