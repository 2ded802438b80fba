from typing import Union
from pathlib import Path
import cv2
import numpy as np
from PIL import Image

from configs import HistogramConfig
from utils.image_utils import ImageUtils
from utils.logger import get_logger


class HistogramEqualizer:
    """
    Global histogram equalization on luma-weighted grayscale.

    Every output pixel has R = G = B = L[gray(x, y)], where L is the lookup
    table derived from the cumulative histogram of the source image.
    """

    name = "histogram"

    def __init__(self, config: HistogramConfig):
        self.config = config
        self.logger = get_logger()

    def _to_array(self, image: Union[Image.Image, np.ndarray, str, Path]) -> np.ndarray:
        if isinstance(image, (str, Path)):
            image = ImageUtils.load_image(image)
        return ImageUtils.to_rgb_array(image)

    def compute_grayscale(self, image: Union[Image.Image, np.ndarray]) -> np.ndarray:
        """
        Convert an RGB image to truncated luma.

        gray = floor(0.299*R + 0.587*G + 0.114*B), in [0, 255].
        """
        rgb = ImageUtils.to_rgb_array(image).astype(np.float64)
        luma = (
            self.config.red_weight * rgb[..., 0]
            + self.config.green_weight * rgb[..., 1]
            + self.config.blue_weight * rgb[..., 2]
        )
        gray = np.floor(luma).astype(np.int64)
        return np.clip(gray, 0, self.config.num_bins - 1)

    def compute_histogram(self, image: Union[Image.Image, np.ndarray]) -> np.ndarray:
        """Count occurrences of each grayscale value."""
        gray = self.compute_grayscale(image)
        return np.bincount(gray.ravel(), minlength=self.config.num_bins)

    @staticmethod
    def compute_cumulative(histogram: np.ndarray) -> np.ndarray:
        """Prefix sum of the histogram: C[0] = H[0], C[i] = C[i-1] + H[i]."""
        return np.cumsum(histogram, dtype=np.int64)

    def build_lookup_table(self, cumulative: np.ndarray, total_pixels: int) -> np.ndarray:
        """
        Map each input intensity to floor(255 * C[i] / total_pixels).

        Buckets never hit by the source image get whatever value falls out of
        the cumulative sum; they are never read.
        """
        if total_pixels <= 0:
            raise ValueError("Cannot build a lookup table for an empty image")

        max_value = self.config.num_bins - 1
        table = np.floor(cumulative.astype(np.float64) / total_pixels * max_value)
        return np.clip(table, 0, max_value).astype(np.uint8)

    def equalize(
        self,
        image: Union[Image.Image, np.ndarray, str, Path]
    ) -> Image.Image:
        """
        Apply global histogram equalization.

        Args:
            image: Input image

        Returns:
            Equalized grayscale-valued RGB image as PIL Image
        """
        img = self._to_array(image)
        height, width = img.shape[:2]
        total_pixels = height * width

        gray = self.compute_grayscale(img)
        histogram = np.bincount(gray.ravel(), minlength=self.config.num_bins)
        cumulative = self.compute_cumulative(histogram)
        lookup_table = self.build_lookup_table(cumulative, total_pixels)

        equalized = cv2.LUT(gray.astype(np.uint8), lookup_table)
        result = cv2.merge([equalized, equalized, equalized])

        self.logger.debug(
            f"Applied histogram equalization to {width}x{height} image "
            f"({np.count_nonzero(histogram)} distinct gray levels)"
        )
        return Image.fromarray(result)

    def transform(self, image: Union[Image.Image, np.ndarray, str, Path]) -> Image.Image:
        return self.equalize(image)
