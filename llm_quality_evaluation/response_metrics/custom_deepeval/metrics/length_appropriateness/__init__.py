from .length_appropriateness import LengthAppropriatenessMetric

__all__ = ["LengthAppropriatenessMetric"]
