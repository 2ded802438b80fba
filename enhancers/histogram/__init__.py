from .equalizer import HistogramEqualizer
from .chart import HistogramChartRenderer

__all__ = ["HistogramEqualizer", "HistogramChartRenderer"]
