from pathlib import Path
from typing import Union
from PIL import Image
import numpy as np


class ImageUtils:
    """Utility functions for image handling."""

    SUPPORTED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".bmp", ".gif", ".tiff", ".tif"}

    @staticmethod
    def load_image(path: Union[str, Path]) -> Image.Image:
        """
        Load image as an RGB PIL Image.

        Raises:
            FileNotFoundError: If the path does not point to an existing file.
                Checked before any decode attempt.
            OSError: If the file cannot be decoded.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Image file not found: {path}")

        try:
            with Image.open(path) as img:
                return img.convert("RGB")
        except Image.DecompressionBombError as e:
            raise OSError(f"Image too large to decode: {e}") from e

    @staticmethod
    def save_image(
        image: Union[Image.Image, np.ndarray],
        path: Union[str, Path],
        create_dir: bool = True,
        image_format: str = "PNG"
    ) -> Path:
        """
        Save image to path, overwriting any existing file.

        The format is given explicitly so the encoded data does not depend
        on the file extension.
        """
        path = Path(path)

        if create_dir:
            path.parent.mkdir(parents=True, exist_ok=True)

        if isinstance(image, np.ndarray):
            image = Image.fromarray(image)

        with open(path, "wb") as fh:
            image.save(fh, format=image_format)
        return path

    @staticmethod
    def to_rgb_array(image: Union[Image.Image, np.ndarray]) -> np.ndarray:
        """Convert an image to an H x W x 3 uint8 array."""
        if isinstance(image, Image.Image):
            return np.array(image.convert("RGB"))

        array = np.asarray(image)
        if array.ndim == 2:
            array = np.stack([array] * 3, axis=-1)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected an RGB image, got array of shape {array.shape}")
        return array.astype(np.uint8, copy=False)

    @staticmethod
    def ensure_dir(path: Union[str, Path]) -> Path:
        """Ensure directory exists."""
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path
