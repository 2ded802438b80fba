"""
Tests for configuration dataclasses
"""

import pytest

from configs import EnhancerConfig, HistogramConfig, FuzzyConfig, ViewerConfig


class TestEnhancerConfig:

    def test_defaults(self):
        config = EnhancerConfig()

        assert config.method == "histogram"
        assert config.output_dir == "output"
        assert config.enhanced_prefix == "enhanced_"
        assert isinstance(config.histogram, HistogramConfig)
        assert isinstance(config.fuzzy, FuzzyConfig)
        assert isinstance(config.viewer, ViewerConfig)

    def test_sub_configs_are_kept(self):
        fuzzy = FuzzyConfig(dark_weight=2.0)
        config = EnhancerConfig(fuzzy=fuzzy)
        assert config.fuzzy is fuzzy

    def test_invalid_method(self):
        with pytest.raises(ValueError, match="Invalid method"):
            EnhancerConfig(method="sharpen")


class TestFuzzyConfig:

    def test_default_thresholds(self):
        config = FuzzyConfig()
        assert (
            config.dark_threshold,
            config.gray_threshold_low,
            config.gray_threshold_high,
            config.bright_threshold,
        ) == (75, 75, 150, 150)
        assert (config.dark_weight, config.gray_weight, config.bright_weight) == (1.5, 1.2, 0.9)

    def test_thresholds_must_be_ordered(self):
        with pytest.raises(ValueError, match="Thresholds"):
            FuzzyConfig(gray_threshold_low=200)


class TestHistogramConfig:

    def test_default_chart_geometry(self):
        config = HistogramConfig()
        assert (config.chart_width, config.chart_height) == (512, 400)
        assert config.max_bar_height == 350
        assert config.bar_width == 2

    @pytest.mark.parametrize("kwargs", [
        {"chart_width": 0},
        {"chart_height": 300, "max_bar_height": 350},
        {"chart_width": 256},
    ])
    def test_invalid_geometry(self, kwargs):
        with pytest.raises(ValueError):
            HistogramConfig(**kwargs)
