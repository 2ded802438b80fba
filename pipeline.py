from typing import Dict, Optional, Tuple, Union
from pathlib import Path
from dataclasses import dataclass
from PIL import Image

from configs import EnhancerConfig
from utils.logger import Logger
from utils.image_utils import ImageUtils
from enhancers import (
    ImageTransform,
    HistogramEqualizer,
    HistogramChartRenderer,
    FuzzyEnhancer,
    ComparisonViewer,
)


@dataclass
class EnhancementResult:
    """Result container for a single enhancement run."""
    image_path: str
    method: str
    image_size: Tuple[int, int] = (0, 0)
    enhanced_path: Optional[Path] = None
    histogram_path: Optional[Path] = None


class ImageEnhancer:
    """
    Loads one image, applies exactly one enhancement method and writes the
    results into the output directory.
    """

    METHOD_NAMES = {
        "histogram": "Histogram Equalization",
        "fuzzy": "Fuzzy Enhancement",
    }

    def __init__(self, config: EnhancerConfig, image_path: Union[str, Path, None] = None):
        self.config = config

        # Initialize logger
        Logger.reset()
        log_file = config.log_file if config.debug else None
        self.logger = Logger(debug=config.debug, log_file=log_file)

        self.output_dir = ImageUtils.ensure_dir(config.output_dir)

        self.image_path = Path(image_path or config.input_path)
        self.original_image = ImageUtils.load_image(self.image_path)
        self._enhanced_image: Optional[Image.Image] = None

        self.logger.info(
            f"Loaded {self.image_path.name} ({self.original_image.size[0]}x{self.original_image.size[1]})"
        )

        self.equalizer = HistogramEqualizer(config.histogram)
        self.transforms: Dict[str, ImageTransform] = {
            "histogram": self.equalizer,
            "fuzzy": FuzzyEnhancer(config.fuzzy),
        }
        self.chart_renderer = HistogramChartRenderer(config.histogram)
        self.viewer = ComparisonViewer(config.viewer)

    @property
    def enhanced_image(self) -> Optional[Image.Image]:
        return self._enhanced_image

    def enhance(self, method: str) -> Image.Image:
        """Run one enhancement method on the original image."""
        if method not in self.transforms:
            raise ValueError(f"Invalid method '{method}'. Available methods: {list(self.transforms)}")

        stage_name = self.METHOD_NAMES[method]
        if not getattr(self.config, method).enabled:
            raise RuntimeError(f"{stage_name} is disabled in the configuration.")

        self.logger.stage_start(stage_name)
        self._enhanced_image = self.transforms[method].transform(self.original_image)
        self.logger.stage_end(stage_name)
        return self._enhanced_image

    def equalize_histogram(self) -> Image.Image:
        return self.enhance("histogram")

    def apply_fuzzy_enhancement(self) -> Image.Image:
        return self.enhance("fuzzy")

    def save_enhanced_image(self, file_name: Optional[str] = None) -> Path:
        """
        Write the enhanced image as PNG into the output directory.

        Raises:
            RuntimeError: If no enhancement has been run yet.
        """
        if self._enhanced_image is None:
            raise RuntimeError("Run enhancement first.")

        if file_name is None:
            file_name = f"{self.config.enhanced_prefix}{self.image_path.name}"

        path = ImageUtils.save_image(self._enhanced_image, self.output_dir / file_name)
        self.logger.saved("enhanced image", path)
        return path

    def save_histogram(self) -> Path:
        """Render the grayscale histogram of the original image to histogram.png."""
        histogram = self.equalizer.compute_histogram(self.original_image)
        path = self.chart_renderer.save(histogram, self.output_dir)
        self.logger.saved("histogram chart", path)
        return path

    def show_before_after(self) -> None:
        if self._enhanced_image is None:
            raise RuntimeError("Run enhancement first.")
        self.viewer.show(self.original_image, self._enhanced_image)

    def run(self, method: Optional[str] = None, display: Optional[bool] = None) -> EnhancementResult:
        """
        Enhance, write the chart and the enhanced image, then optionally
        open the comparison window.
        """
        method = method or self.config.method
        display = self.config.display if display is None else display

        result = EnhancementResult(
            image_path=str(self.image_path),
            method=method,
            image_size=self.original_image.size,
        )

        self.enhance(method)
        result.histogram_path = self.save_histogram()
        result.enhanced_path = self.save_enhanced_image()

        if display and self.config.viewer.enabled:
            self.show_before_after()

        return result
