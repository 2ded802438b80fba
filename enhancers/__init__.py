from .base import ImageTransform
from .histogram import HistogramEqualizer, HistogramChartRenderer
from .fuzzy import FuzzyEnhancer
from .viewer import ComparisonViewer

__all__ = [
    "ImageTransform",
    "HistogramEqualizer",
    "HistogramChartRenderer",
    "FuzzyEnhancer",
    "ComparisonViewer",
]
