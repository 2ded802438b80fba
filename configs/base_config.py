from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class BaseConfig:
    """Base configuration class for a stage that can be switched off."""
    enabled: bool = True  # Disabled stages are not run


@dataclass
class EnhancerConfig:
    """Main enhancer configuration."""
    # Debug settings
    debug: bool = False
    log_file: str = "output/enhancer.log"

    # Enhancement method: "histogram" or "fuzzy"
    method: str = "histogram"

    # Input/Output settings
    input_path: str = ""
    output_dir: str = "output"
    enhanced_prefix: str = "enhanced_"

    # Show the before/after window once files are written
    display: bool = True

    # Stage-specific configs (will be populated)
    histogram: Optional["HistogramConfig"] = None
    fuzzy: Optional["FuzzyConfig"] = None
    viewer: Optional["ViewerConfig"] = None

    # Supported enhancement methods
    METHODS: List[str] = field(default_factory=lambda: [
        "histogram",
        "fuzzy",
    ])

    def __post_init__(self):
        from .histogram_config import HistogramConfig
        from .fuzzy_config import FuzzyConfig
        from .viewer_config import ViewerConfig

        if self.histogram is None:
            self.histogram = HistogramConfig()
        if self.fuzzy is None:
            self.fuzzy = FuzzyConfig()
        if self.viewer is None:
            self.viewer = ViewerConfig()

        if self.method not in self.METHODS:
            raise ValueError(f"Invalid method '{self.method}'. Available methods: {self.METHODS}")
