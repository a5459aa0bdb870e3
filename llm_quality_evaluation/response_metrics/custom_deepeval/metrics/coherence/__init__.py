from .coherence import CoherenceMetric

__all__ = ["CoherenceMetric"]
