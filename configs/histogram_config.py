from dataclasses import dataclass
from .base_config import BaseConfig


@dataclass
class HistogramConfig(BaseConfig):
    """Configuration for global histogram equalization and the histogram chart."""
    enabled: bool = True
    num_bins: int = 256

    # Luma weights for grayscale conversion
    red_weight: float = 0.299
    green_weight: float = 0.587
    blue_weight: float = 0.114

    # Chart geometry
    chart_width: int = 512
    chart_height: int = 400
    max_bar_height: int = 350
    bar_width: int = 2
    chart_filename: str = "histogram.png"

    def __post_init__(self):
        if self.chart_width <= 0 or self.chart_height <= 0:
            raise ValueError("Chart dimensions must be positive")
        if self.max_bar_height >= self.chart_height:
            raise ValueError("max_bar_height must be smaller than chart_height")
        if self.num_bins * self.bar_width > self.chart_width:
            raise ValueError("chart_width is too narrow for num_bins * bar_width")
