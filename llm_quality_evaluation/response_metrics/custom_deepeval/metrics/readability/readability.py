from deepeval.test_case import LLMTestCaseParams

from ..base import HeuristicQualityMetric
from .scoring import score_readability
from .template import ReadabilityTemplate


class ReadabilityMetric(HeuristicQualityMetric):
    _required_params: list[LLMTestCaseParams] = [
        LLMTestCaseParams.ACTUAL_OUTPUT,
    ]
    explanation_template = ReadabilityTemplate

    def score_text(self, prompt: str, response: str) -> float:
        return score_readability(response)
