from .comparison import ComparisonViewer

__all__ = ["ComparisonViewer"]
