from dataclasses import dataclass
from .base_config import BaseConfig


@dataclass
class FuzzyConfig(BaseConfig):
    """Configuration for fuzzy-membership intensity enhancement."""
    enabled: bool = True

    # Membership thresholds. Coincident pairs give a hard step between zones.
    dark_threshold: float = 75
    gray_threshold_low: float = 75
    gray_threshold_high: float = 150
    bright_threshold: float = 150

    # Blend weights applied to each membership
    dark_weight: float = 1.5
    gray_weight: float = 1.2
    bright_weight: float = 0.9

    def __post_init__(self):
        thresholds = (
            self.dark_threshold,
            self.gray_threshold_low,
            self.gray_threshold_high,
            self.bright_threshold,
        )
        if any(lo > hi for lo, hi in zip(thresholds, thresholds[1:])):
            raise ValueError(
                "Thresholds must satisfy dark <= gray_low <= gray_high <= bright, "
                f"got {thresholds}"
            )
