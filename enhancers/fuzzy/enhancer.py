from typing import Union
from pathlib import Path
import numpy as np
from PIL import Image

from configs import FuzzyConfig
from utils.image_utils import ImageUtils
from utils.logger import get_logger


class FuzzyEnhancer:
    """
    Fuzzy-membership intensity enhancement.

    Each pixel's mean intensity is classified as dark, gray or bright by
    three overlapping membership functions. The memberships weight a blend
    factor (boost dark, lift gray, dim bright) that scales the intensity:

        f = (dark*w_dark + gray*w_gray + bright*w_bright) / (dark + gray + bright)
        v = clamp(trunc(intensity * f), 0, 255)

    Zone upper bounds are inclusive. With coincident thresholds (the default
    75/75 and 150/150 pairs) the linear transitions are empty and the
    memberships become hard steps; no division by a zero-width segment is
    ever evaluated. A zero denominator leaves the intensity unchanged.
    """

    name = "fuzzy"

    def __init__(self, config: FuzzyConfig):
        self.config = config
        self.logger = get_logger()

    @staticmethod
    def compute_intensity(image: Union[Image.Image, np.ndarray]) -> np.ndarray:
        """Integer mean of the three channels, (R + G + B) // 3."""
        rgb = ImageUtils.to_rgb_array(image).astype(np.int64)
        return rgb.sum(axis=-1) // 3

    @staticmethod
    def _rising(intensity: np.ndarray, start: float, end: float) -> np.ndarray:
        # Only evaluated inside (start, end], which is empty when start == end
        span = end - start
        if span == 0:
            return np.zeros(intensity.shape, dtype=np.float64)
        return (intensity - start) / span

    @staticmethod
    def _falling(intensity: np.ndarray, start: float, end: float) -> np.ndarray:
        span = end - start
        if span == 0:
            return np.zeros(intensity.shape, dtype=np.float64)
        return (end - intensity) / span

    def dark_membership(self, intensity) -> np.ndarray:
        i = np.asarray(intensity, dtype=np.float64)
        t1, t2 = self.config.dark_threshold, self.config.gray_threshold_low
        return np.select(
            [i <= t1, i <= t2],
            [1.0, self._falling(i, t1, t2)],
            default=0.0,
        )

    def gray_membership(self, intensity) -> np.ndarray:
        i = np.asarray(intensity, dtype=np.float64)
        t1, t2 = self.config.dark_threshold, self.config.gray_threshold_low
        t3, t4 = self.config.gray_threshold_high, self.config.bright_threshold
        return np.select(
            [i <= t1, i <= t2, i <= t3, i <= t4],
            [0.0, self._rising(i, t1, t2), 1.0, self._falling(i, t3, t4)],
            default=0.0,
        )

    def bright_membership(self, intensity) -> np.ndarray:
        i = np.asarray(intensity, dtype=np.float64)
        t3, t4 = self.config.gray_threshold_high, self.config.bright_threshold
        return np.select(
            [i <= t3, i <= t4],
            [0.0, self._rising(i, t3, t4)],
            default=1.0,
        )

    def blend_factor(self, intensity) -> np.ndarray:
        """Membership-weighted scale factor; 1.0 where no membership applies."""
        dark = self.dark_membership(intensity)
        gray = self.gray_membership(intensity)
        bright = self.bright_membership(intensity)

        numerator = (
            dark * self.config.dark_weight
            + gray * self.config.gray_weight
            + bright * self.config.bright_weight
        )
        denominator = dark + gray + bright
        safe = np.where(denominator == 0, 1.0, denominator)
        return np.where(denominator == 0, 1.0, numerator / safe)

    def enhance(
        self,
        image: Union[Image.Image, np.ndarray, str, Path]
    ) -> Image.Image:
        """
        Apply fuzzy intensity enhancement.

        Args:
            image: Input image

        Returns:
            Enhanced grayscale-valued RGB image as PIL Image
        """
        if isinstance(image, (str, Path)):
            image = ImageUtils.load_image(image)
        img = ImageUtils.to_rgb_array(image)

        intensity = self.compute_intensity(img)
        factor = self.blend_factor(intensity)
        scaled = np.trunc(intensity * factor)
        value = np.clip(scaled, 0, 255).astype(np.uint8)

        result = np.repeat(value[..., np.newaxis], 3, axis=-1)

        self.logger.debug(
            f"Applied fuzzy enhancement to {img.shape[1]}x{img.shape[0]} image "
            f"(mean intensity {intensity.mean():.1f} -> {value.mean():.1f})"
        )
        return Image.fromarray(result)

    def transform(self, image: Union[Image.Image, np.ndarray, str, Path]) -> Image.Image:
        return self.enhance(image)
