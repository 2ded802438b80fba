from .enhancer import FuzzyEnhancer

__all__ = ["FuzzyEnhancer"]
