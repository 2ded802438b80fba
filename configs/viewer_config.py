from dataclasses import dataclass
from .base_config import BaseConfig


@dataclass
class ViewerConfig(BaseConfig):
    """Configuration for the before/after comparison window."""
    enabled: bool = True
    window_title: str = "Before and After Enhancement"
    original_title: str = "Original"
    enhanced_title: str = "Enhanced"
    dpi: int = 100
