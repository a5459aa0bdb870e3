from .completeness import CompletenessMetric

__all__ = ["CompletenessMetric"]
