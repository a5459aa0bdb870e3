from deepeval.test_case import LLMTestCaseParams

from ..base import HeuristicQualityMetric
from .scoring import score_coherence
from .template import CoherenceTemplate


class CoherenceMetric(HeuristicQualityMetric):
    _required_params: list[LLMTestCaseParams] = [
        LLMTestCaseParams.ACTUAL_OUTPUT,
    ]
    explanation_template = CoherenceTemplate

    def score_text(self, prompt: str, response: str) -> float:
        return score_coherence(response)
