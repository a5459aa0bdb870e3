from deepeval.test_case import LLMTestCaseParams

from ..base import HeuristicQualityMetric
from .scoring import score_structural_quality
from .template import StructuralQualityTemplate


class StructuralQualityMetric(HeuristicQualityMetric):
    _required_params: list[LLMTestCaseParams] = [
        LLMTestCaseParams.ACTUAL_OUTPUT,
    ]
    explanation_template = StructuralQualityTemplate

    def score_text(self, prompt: str, response: str) -> float:
        return score_structural_quality(response)
