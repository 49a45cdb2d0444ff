"""Create filters by kind."""

from __future__ import annotations

import enum

from .edges import (
    DirectionalEastFilter,
    DirectionalNorthFilter,
    LaplacianFilter,
    MinusLaplacianFilter,
    SobelFilter,
)
from .filter import Filter
from .histogram_filters import (
    EqualizationHistogramFilter,
    ExponentialEqualizationHistogramFilter,
    NormalizeHistogramFilter,
    SimpleEqualizationHistogramFilter,
    UniformEqualizationHistogramFilter,
)
from .smoothing import (
    AverageFilter,
    GaussianFilter,
    MedianFilter,
    MinusMedianFilter,
    WeightedMedianFilter,
)
from .tone import (
    DisplacementHistogramFilter,
    GrayscaleAverageFilter,
    GrayscaleLuminanceFilter,
    GrayscaleLuminosityFilter,
    HighlightFilter,
    SepiaFilter,
    UmbralFilter,
)


class FilterKind(enum.IntEnum):
    """Every filter that can be created."""

    MEDIAN = 0
    WEIGHTED_MEDIAN = 1
    MINUS_MEDIAN = 2
    AVERAGE = 3
    LAPLACIAN = 4
    MINUS_LAPLACIAN = 5
    DIRECTIONAL_NORTH = 6
    DIRECTIONAL_EAST = 7
    GRAYSCALE_AVERAGE = 8
    GRAYSCALE_LUMINOSITY = 9
    GRAYSCALE_LUMINANCE = 10
    SEPIA = 11
    SOBEL = 12
    GAUSSIAN = 13
    NORMALIZE_HISTOGRAM = 14
    EQUALIZATION_HISTOGRAM = 15
    SIMPLE_EQUALIZATION_HISTOGRAM = 16
    UNIFORM_EQUALIZATION_HISTOGRAM = 17
    EXPONENTIAL_EQUALIZATION_HISTOGRAM = 18
    DISPLACEMENT_HISTOGRAM = 19
    UMBRAL = 20
    HIGHLIGHT = 21


_CLASSES: dict[FilterKind, type[Filter]] = {
    FilterKind.MEDIAN: MedianFilter,
    FilterKind.WEIGHTED_MEDIAN: WeightedMedianFilter,
    FilterKind.MINUS_MEDIAN: MinusMedianFilter,
    FilterKind.AVERAGE: AverageFilter,
    FilterKind.LAPLACIAN: LaplacianFilter,
    FilterKind.MINUS_LAPLACIAN: MinusLaplacianFilter,
    FilterKind.DIRECTIONAL_NORTH: DirectionalNorthFilter,
    FilterKind.DIRECTIONAL_EAST: DirectionalEastFilter,
    FilterKind.GRAYSCALE_AVERAGE: GrayscaleAverageFilter,
    FilterKind.GRAYSCALE_LUMINOSITY: GrayscaleLuminosityFilter,
    FilterKind.GRAYSCALE_LUMINANCE: GrayscaleLuminanceFilter,
    FilterKind.SEPIA: SepiaFilter,
    FilterKind.SOBEL: SobelFilter,
    FilterKind.GAUSSIAN: GaussianFilter,
    FilterKind.NORMALIZE_HISTOGRAM: NormalizeHistogramFilter,
    FilterKind.EQUALIZATION_HISTOGRAM: EqualizationHistogramFilter,
    FilterKind.SIMPLE_EQUALIZATION_HISTOGRAM: SimpleEqualizationHistogramFilter,
    FilterKind.UNIFORM_EQUALIZATION_HISTOGRAM: UniformEqualizationHistogramFilter,
    FilterKind.EXPONENTIAL_EQUALIZATION_HISTOGRAM: ExponentialEqualizationHistogramFilter,
    FilterKind.DISPLACEMENT_HISTOGRAM: DisplacementHistogramFilter,
    FilterKind.UMBRAL: UmbralFilter,
    FilterKind.HIGHLIGHT: HighlightFilter,
}


def create_filter(kind) -> Filter:
    """Return a new filter of the given kind, with its default settings."""
    try:
        member = FilterKind(kind)
    except ValueError:
        raise ValueError(f"unknown filter kind: {kind!r}") from None
    return _CLASSES[member]()