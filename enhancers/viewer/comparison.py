import numpy as np
import matplotlib.pyplot as plt
from PIL import Image

from configs import ViewerConfig
from utils.logger import get_logger


class ComparisonViewer:
    """Side-by-side before/after window."""

    def __init__(self, config: ViewerConfig):
        self.config = config
        self.logger = get_logger()

    def build_figure(self, original: Image.Image, enhanced: Image.Image):
        """
        Build a one-row figure with the original on the left and the
        enhanced image on the right, both at native pixel size.

        Args:
            original: Source image
            enhanced: Enhanced image

        Returns:
            matplotlib Figure
        """
        width, height = original.size
        dpi = self.config.dpi
        fig, (ax_before, ax_after) = plt.subplots(
            1, 2, figsize=(2 * width / dpi, (height + 30) / dpi), dpi=dpi
        )
        if fig.canvas.manager is not None:
            fig.canvas.manager.set_window_title(self.config.window_title)

        ax_before.imshow(np.array(original))
        ax_before.set_title(self.config.original_title)
        ax_before.axis('off')

        ax_after.imshow(np.array(enhanced))
        ax_after.set_title(self.config.enhanced_title)
        ax_after.axis('off')

        fig.tight_layout()
        return fig

    def show(self, original: Image.Image, enhanced: Image.Image) -> None:
        """Open the comparison window and block until it is closed."""
        fig = self.build_figure(original, enhanced)
        self.logger.debug("Showing before/after comparison")
        plt.show()
        plt.close(fig)
