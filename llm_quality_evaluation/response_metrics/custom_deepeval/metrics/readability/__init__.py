from .readability import ReadabilityMetric

__all__ = ["ReadabilityMetric"]
