from deepeval.test_case import LLMTestCaseParams

from ..base import HeuristicQualityMetric
from .scoring import score_length_appropriateness
from .template import LengthAppropriatenessTemplate


class LengthAppropriatenessMetric(HeuristicQualityMetric):
    _required_params: list[LLMTestCaseParams] = [
        LLMTestCaseParams.INPUT,
        LLMTestCaseParams.ACTUAL_OUTPUT,
    ]
    explanation_template = LengthAppropriatenessTemplate

    def score_text(self, prompt: str, response: str) -> float:
        return score_length_appropriateness(prompt, response)
