import pytest
from pydantic import ValidationError

from llm_quality_evaluation.response_metrics import (
    MetricExplanation,
    ScoreSet,
    evaluate,
    explain,
)

PROMPT = "Explain machine learning"
RESPONSE = "Machine learning is a field of AI."

TEXTS = [
    "",
    "   \n\n\n\n   ",
    "?!?!...",
    "(((((",
    "Hi",
    RESPONSE,
    "# Title\n\nSteps:\n- one\n- two\n\n```code```\n\nDone (really).",
    " ".join(["supercalifragilisticexpialidocious"] * 500),
    "word " * 5000,
]


class TestEvaluate:
    def test_end_to_end_example(self):
        score_set = evaluate(PROMPT, RESPONSE)

        assert score_set.coherence == 85.0
        assert score_set.completeness == pytest.approx(40.0)
        assert score_set.readability == pytest.approx(
            206.835 - 1.015 * 7 - 84.6 * 9 / 7
        )
        assert score_set.length_appropriateness == pytest.approx(27.0)
        assert score_set.structural_quality == 75.0
        assert score_set.rounded() == {
            "coherence": 85,
            "completeness": 40,
            "readability": 91,
            "length_appropriateness": 27,
            "structural_quality": 75,
            "overall": 64,
        }

    def test_empty_strings(self):
        assert evaluate("", "").rounded() == {
            "coherence": 0,
            "completeness": 75,
            "readability": 0,
            "length_appropriateness": 20,
            "structural_quality": 65,
            "overall": 32,
        }

    @pytest.mark.parametrize("prompt", ["", "Is it", PROMPT])
    @pytest.mark.parametrize("response", TEXTS)
    def test_every_score_is_in_range(self, prompt, response):
        score_set = evaluate(prompt, response)

        for value in score_set.rounded().values():
            assert 0 <= value <= 100

        unrounded = [
            score_set.coherence,
            score_set.completeness,
            score_set.readability,
            score_set.length_appropriateness,
            score_set.structural_quality,
        ]
        assert abs(score_set.overall - sum(unrounded) / 5) <= 0.5

    def test_is_deterministic(self):
        response = "First, gather data. Then, train a model.\n\n- one\n- two"
        assert evaluate(PROMPT, response) == evaluate(PROMPT, response)
        assert evaluate(PROMPT, response).rounded() == evaluate(
            PROMPT, response
        ).rounded()

    def test_logs_scores_at_debug(self, caplog):
        caplog.set_level("DEBUG", logger="llm_quality_evaluation")

        evaluate(PROMPT, RESPONSE)

        assert "Evaluated response quality" in caplog.text


class TestScoreSet:
    @pytest.fixture
    def scores(self):
        return {
            "coherence": 62.5,
            "completeness": 62.5,
            "readability": 62.5,
            "length_appropriateness": 62.5,
            "structural_quality": 62.5,
        }

    def test_overall_rounds_half_up(self, scores):
        assert ScoreSet(**scores).overall == 63

    def test_overall_uses_unrounded_scores(self, scores):
        # rounded scores would average to 61.8, unrounded ones to 61.3
        scores.update(coherence=60.5, completeness=60.5, readability=60.5)
        score_set = ScoreSet(**scores)

        assert score_set.overall == 61
        assert score_set.rounded()["coherence"] == 61

    def test_overall_is_serialised(self, scores):
        assert ScoreSet(**scores).model_dump()["overall"] == 63

    @pytest.mark.parametrize("value", [-0.1, 100.1])
    def test_rejects_out_of_range_scores(self, scores, value):
        scores["readability"] = value
        with pytest.raises(ValidationError):
            ScoreSet(**scores)

    def test_is_immutable(self, scores):
        score_set = ScoreSet(**scores)
        with pytest.raises(ValidationError):
            score_set.coherence = 10.0


class TestExplain:
    def test_explains_each_metric_in_order(self):
        explanations = explain(evaluate(PROMPT, RESPONSE))

        assert explanations == [
            MetricExplanation(
                name="Coherence",
                score=85,
                description="Measures logical flow and topic consistency",
                details="Excellent logical flow with strong connections between ideas.",
            ),
            MetricExplanation(
                name="Completeness",
                score=40,
                description="How well the response addresses the prompt",
                details="Addresses some aspects but misses key points.",
            ),
            MetricExplanation(
                name="Readability",
                score=91,
                description="How easy the text is to read and understand",
                details="Very easy to read and understand.",
            ),
            MetricExplanation(
                name="Length Appropriateness",
                score=27,
                description="Whether the response length matches the prompt",
                details="Significantly too short or excessively verbose.",
            ),
            MetricExplanation(
                name="Structural Quality",
                score=75,
                description="Formatting and organization quality",
                details="Good structure with minor formatting issues.",
            ),
        ]

    def test_tier_uses_rounded_score(self):
        score_set = ScoreSet(
            coherence=79.5,
            completeness=59.4,
            readability=0,
            length_appropriateness=100,
            structural_quality=40,
        )

        details = {item.name: item.details for item in explain(score_set)}

        assert details["Coherence"].startswith("Excellent")
        assert details["Completeness"] == "Addresses some aspects but misses key points."
        assert details["Readability"].startswith("Hard to read")
        assert details["Length Appropriateness"].startswith("Optimal")
        assert details["Structural Quality"].startswith("Basic structure")
