"""
Shared interface for bitmap-to-bitmap enhancement transforms.
"""

from typing import Union, Protocol, runtime_checkable
from pathlib import Path

import numpy as np
from PIL import Image


ImageInput = Union[Image.Image, np.ndarray, str, Path]


@runtime_checkable
class ImageTransform(Protocol):
    """
    A stateless enhancement that maps a source image to a new image of the
    same dimensions.

    Implementations never modify their input.
    """

    name: str

    def transform(self, image: ImageInput) -> Image.Image:
        ...
