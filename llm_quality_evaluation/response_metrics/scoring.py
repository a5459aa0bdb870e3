import logging

from .custom_deepeval.metrics.coherence.scoring import score_coherence
from .custom_deepeval.metrics.coherence.template import CoherenceTemplate
from .custom_deepeval.metrics.completeness.scoring import score_completeness
from .custom_deepeval.metrics.completeness.template import CompletenessTemplate
from .custom_deepeval.metrics.length_appropriateness.scoring import (
    score_length_appropriateness,
)
from .custom_deepeval.metrics.length_appropriateness.template import (
    LengthAppropriatenessTemplate,
)
from .custom_deepeval.metrics.readability.scoring import score_readability
from .custom_deepeval.metrics.readability.template import ReadabilityTemplate
from .custom_deepeval.metrics.structural_quality.scoring import (
    score_structural_quality,
)
from .custom_deepeval.metrics.structural_quality.template import (
    StructuralQualityTemplate,
)
from .data_models.scores import MetricExplanation, ScoreSet

logger = logging.getLogger(__name__)

EXPLANATION_TEMPLATES = {
    "coherence": CoherenceTemplate,
    "completeness": CompletenessTemplate,
    "readability": ReadabilityTemplate,
    "length_appropriateness": LengthAppropriatenessTemplate,
    "structural_quality": StructuralQualityTemplate,
}


def evaluate(prompt: str, response: str) -> ScoreSet:
    """Score a response to a prompt on every quality metric.

    Each metric is computed independently of the others, and any pair of
    strings, empty ones included, produces a complete ScoreSet.

    The ScoreSet keeps the unrounded scores so that `overall` is the rounded
    mean of exact values. Use `ScoreSet.rounded()` for the integer display
    values of every metric and `explain()` for the tiered descriptions.
    """
    score_set = ScoreSet(
        coherence=score_coherence(response),
        completeness=score_completeness(prompt, response),
        readability=score_readability(response),
        length_appropriateness=score_length_appropriateness(prompt, response),
        structural_quality=score_structural_quality(response),
    )
    logger.debug("Evaluated response quality: %s", score_set.rounded())
    return score_set


def explain(score_set: ScoreSet) -> list[MetricExplanation]:
    """Return a display record for each metric, in a fixed order."""
    rounded = score_set.rounded()
    return [
        MetricExplanation(
            name=template.name,
            score=rounded[field],
            description=template.description,
            details=template.detail_for(rounded[field]),
        )
        for field, template in EXPLANATION_TEMPLATES.items()
    ]
