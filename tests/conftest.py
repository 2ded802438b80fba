"""
Pytest configuration and fixtures for image enhancer tests.
"""

import matplotlib
matplotlib.use("Agg")

import pytest
import numpy as np
from PIL import Image

from configs import EnhancerConfig, HistogramConfig, FuzzyConfig, ViewerConfig
from utils.logger import Logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Give every test a fresh logger singleton."""
    Logger.reset()
    yield
    Logger.reset()


@pytest.fixture
def histogram_config():
    return HistogramConfig()


@pytest.fixture
def fuzzy_config():
    return FuzzyConfig()


@pytest.fixture
def viewer_config():
    return ViewerConfig()


@pytest.fixture
def known_rgb_array():
    """
    2x2 image with hand-computed luma:
        (10, 20, 30)    -> 18.15  -> 18
        (0, 0, 255)     -> 29.07  -> 29
        (200, 100, 50)  -> 124.2  -> 124
        (100, 150, 200) -> 140.75 -> 140
    """
    return np.array([
        [[10, 20, 30], [0, 0, 255]],
        [[200, 100, 50], [100, 150, 200]],
    ], dtype=np.uint8)


@pytest.fixture
def gradient_image():
    """64x32 RGB image with a horizontal gray ramp and a colored tint."""
    height, width = 32, 64
    ramp = np.linspace(0, 255, width, dtype=np.float64)
    array = np.zeros((height, width, 3), dtype=np.uint8)
    array[..., 0] = ramp.astype(np.uint8)
    array[..., 1] = (ramp * 0.8).astype(np.uint8)
    array[..., 2] = (255 - ramp).astype(np.uint8)
    return Image.fromarray(array)


@pytest.fixture
def sample_image_path(tmp_path, gradient_image):
    """Gradient image written as PNG into a temporary directory."""
    path = tmp_path / "inputs" / "sample.png"
    path.parent.mkdir(parents=True)
    gradient_image.save(path)
    return path


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run a test from an empty working directory."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def enhancer_config():
    return EnhancerConfig(display=False)
