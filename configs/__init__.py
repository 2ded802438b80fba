from .base_config import BaseConfig, EnhancerConfig
from .histogram_config import HistogramConfig
from .fuzzy_config import FuzzyConfig
from .viewer_config import ViewerConfig

__all__ = [
    "BaseConfig",
    "EnhancerConfig",
    "HistogramConfig",
    "FuzzyConfig",
    "ViewerConfig",
]
