"""
Tests for the histogram chart renderer
"""

import pytest
import numpy as np
from PIL import Image

from enhancers import HistogramChartRenderer

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


class TestHistogramChartRenderer:
    """Test suite for HistogramChartRenderer."""

    @pytest.fixture
    def renderer(self, histogram_config):
        return HistogramChartRenderer(histogram_config)

    @pytest.fixture
    def histogram(self):
        counts = np.zeros(256, dtype=np.int64)
        counts[10] = 100
        counts[20] = 50
        return counts

    def test_chart_size(self, renderer, histogram):
        chart = renderer.render(histogram)
        assert chart.size == (512, 400)
        assert chart.mode == "RGB"

    def test_bar_heights_scale_to_tallest_bin(self, renderer, histogram):
        heights = renderer.bar_heights(histogram)
        assert heights[10] == 350
        assert heights[20] == 175
        assert heights[0] == 0

    def test_tallest_bar_geometry(self, renderer, histogram):
        chart = renderer.render(histogram)

        # Bin 10 covers columns 20 and 21, rows 49..399
        for x in (20, 21):
            assert chart.getpixel((x, 399)) == BLACK
            assert chart.getpixel((x, 49)) == BLACK
            assert chart.getpixel((x, 48)) == WHITE
        assert chart.getpixel((22, 100)) == WHITE

    def test_half_bar_geometry(self, renderer, histogram):
        chart = renderer.render(histogram)
        assert chart.getpixel((40, 399 - 175)) == BLACK
        assert chart.getpixel((40, 399 - 176)) == WHITE

    def test_empty_bins_mark_baseline_only(self, renderer, histogram):
        chart = renderer.render(histogram)
        assert chart.getpixel((0, 399)) == BLACK
        assert chart.getpixel((0, 398)) == WHITE

    def test_all_zero_histogram(self, renderer):
        chart = np.array(renderer.render(np.zeros(256, dtype=np.int64)))
        assert np.all(chart[399] == 0)
        assert np.all(chart[:399] == 255)

    def test_rejects_wrong_bin_count(self, renderer):
        with pytest.raises(ValueError):
            renderer.render(np.ones(128))

    def test_save_writes_png(self, renderer, histogram, tmp_path):
        path = renderer.save(histogram, tmp_path / "charts")

        assert path == tmp_path / "charts" / "histogram.png"
        with Image.open(path) as saved:
            assert saved.format == "PNG"
            assert saved.size == (512, 400)
