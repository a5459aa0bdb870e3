from deepeval.test_case import LLMTestCaseParams

from ..base import HeuristicQualityMetric
from .scoring import score_completeness
from .template import CompletenessTemplate


class CompletenessMetric(HeuristicQualityMetric):
    _required_params: list[LLMTestCaseParams] = [
        LLMTestCaseParams.INPUT,
        LLMTestCaseParams.ACTUAL_OUTPUT,
    ]
    explanation_template = CompletenessTemplate

    def score_text(self, prompt: str, response: str) -> float:
        return score_completeness(prompt, response)
