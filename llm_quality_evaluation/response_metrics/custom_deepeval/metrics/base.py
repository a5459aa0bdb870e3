from typing import Type

from deepeval.metrics import BaseMetric
from deepeval.metrics.indicator import metric_progress_indicator
from deepeval.metrics.utils import check_llm_test_case_params, construct_verbose_logs
from deepeval.test_case import LLMTestCase, LLMTestCaseParams

from ...text_analysis import round_half_up
from .template import ExplanationTemplate

QUALITY_THRESHOLD: float = 0.6  # 0.6 → "good" tier and above passes


class HeuristicQualityMetric(BaseMetric):
    """Base for metrics scored by text heuristics rather than an LLM judge.

    Subclasses supply `score_text`, returning a 0-100 quality score for the
    prompt and response. The score is rounded and normalised to 0-1 so that
    thresholds and rollups line up with other deepeval metrics.
    """

    _required_params: list[LLMTestCaseParams] = [
        LLMTestCaseParams.INPUT,
        LLMTestCaseParams.ACTUAL_OUTPUT,
    ]
    explanation_template: Type[ExplanationTemplate]

    def __init__(
        self,
        threshold: float = QUALITY_THRESHOLD,
        include_reason: bool = True,
        strict_mode: bool = False,
        verbose_mode: bool = False,
    ):
        self.threshold = 1.0 if strict_mode else threshold
        self.include_reason = include_reason
        self.strict_mode = strict_mode
        self.verbose_mode = verbose_mode

        self.evaluation_model = None
        self.evaluation_cost = None
        self.quality_score: int | None = None

    def score_text(self, prompt: str, response: str) -> float:
        raise NotImplementedError

    def measure(
        self,
        test_case: LLMTestCase,
        _show_indicator: bool = True,
        _in_component: bool = False,
    ) -> float:
        check_llm_test_case_params(test_case, self._required_params, self)

        with metric_progress_indicator(
            self,
            async_mode=False,
            _show_indicator=_show_indicator,
            _in_component=_in_component,
        ):
            return self._score_test_case(test_case)

    async def a_measure(
        self,
        test_case: LLMTestCase,
        _show_indicator: bool = True,
        _in_component: bool = False,
    ) -> float:
        check_llm_test_case_params(test_case, self._required_params, self)

        with metric_progress_indicator(
            self,
            async_mode=True,
            _show_indicator=_show_indicator,
            _in_component=_in_component,
        ):
            return self._score_test_case(test_case)

    def _score_test_case(self, test_case: LLMTestCase) -> float:
        self.quality_score = round_half_up(
            self.score_text(test_case.input or "", test_case.actual_output or "")
        )
        self.score = self._normalise_score(self.quality_score)
        details = self.explanation_template.detail_for(self.quality_score)
        self.reason = details if self.include_reason else None
        self.success = self.is_successful()

        verbose_reason = details if self.include_reason else "Reason omitted"
        self.verbose_logs = construct_verbose_logs(
            self,
            steps=[
                f"Quality Score: {self.quality_score}",
                f"Score: {self.score}",
                f"Reason: {verbose_reason}",
            ],
        )

        return self.score

    def _normalise_score(self, quality_score: int) -> float:
        return quality_score / 100

    def is_successful(self) -> bool:
        if self.score is None:
            return False
        return self.score >= self.threshold

    @property
    def __name__(self):  # type: ignore[override]
        return self.explanation_template.name
