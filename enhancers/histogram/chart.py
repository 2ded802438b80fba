from pathlib import Path
from typing import Union
import numpy as np
from PIL import Image, ImageDraw

from configs import HistogramConfig
from utils.image_utils import ImageUtils


class HistogramChartRenderer:
    """
    Draws a histogram as black vertical bars on a white canvas.

    Each bin occupies ``bar_width`` columns. Bar heights are scaled against
    the tallest bin so that it reaches ``max_bar_height`` pixels above the
    bottom row.
    """

    BACKGROUND = (255, 255, 255)
    FOREGROUND = (0, 0, 0)

    def __init__(self, config: HistogramConfig):
        self.config = config

    def bar_heights(self, histogram: np.ndarray) -> np.ndarray:
        """Scale counts to pixel heights: floor(count / max_count * max_bar_height)."""
        histogram = np.asarray(histogram, dtype=np.float64)
        max_count = histogram.max() if histogram.size else 0
        if max_count <= 0:
            return np.zeros(histogram.shape, dtype=np.int64)
        return np.floor(histogram / max_count * self.config.max_bar_height).astype(np.int64)

    def render(self, histogram: np.ndarray) -> Image.Image:
        """Render the chart for a histogram of ``num_bins`` counts."""
        histogram = np.asarray(histogram)
        if histogram.shape != (self.config.num_bins,):
            raise ValueError(
                f"Expected a histogram of {self.config.num_bins} bins, got shape {histogram.shape}"
            )

        width, height = self.config.chart_width, self.config.chart_height
        chart = Image.new("RGB", (width, height), self.BACKGROUND)
        draw = ImageDraw.Draw(chart)

        baseline = height - 1
        for i, bar_height in enumerate(self.bar_heights(histogram)):
            x0 = i * self.config.bar_width
            x1 = x0 + self.config.bar_width - 1
            # Bounding box is inclusive, so an empty bin still marks the baseline
            draw.rectangle([x0, baseline - int(bar_height), x1, baseline], fill=self.FOREGROUND)

        return chart

    def save(self, histogram: np.ndarray, output_dir: Union[str, Path]) -> Path:
        """Render the chart and write it as PNG into ``output_dir``."""
        path = Path(output_dir) / self.config.chart_filename
        return ImageUtils.save_image(self.render(histogram), path)
