from .base import HeuristicQualityMetric, QUALITY_THRESHOLD
from .coherence import CoherenceMetric
from .completeness import CompletenessMetric
from .readability import ReadabilityMetric
from .length_appropriateness import LengthAppropriatenessMetric
from .structural_quality import StructuralQualityMetric

__all__ = [
    "HeuristicQualityMetric",
    "QUALITY_THRESHOLD",
    "CoherenceMetric",
    "CompletenessMetric",
    "ReadabilityMetric",
    "LengthAppropriatenessMetric",
    "StructuralQualityMetric",
]
