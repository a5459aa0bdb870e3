from .structural_quality import StructuralQualityMetric

__all__ = ["StructuralQualityMetric"]
