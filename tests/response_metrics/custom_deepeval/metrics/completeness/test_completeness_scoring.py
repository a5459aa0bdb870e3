import pytest

from llm_quality_evaluation.response_metrics.custom_deepeval.metrics.completeness.scoring import (
    extract_key_terms,
    has_structured_content,
    score_completeness,
)

PROMPT = "Explain machine learning"
BASE_RESPONSE = "Machine learning is a field of AI."


class TestExtractKeyTerms:
    def test_drops_short_and_stop_words(self):
        assert extract_key_terms("The Quick brown foxes jumped over this") == [
            "quick",
            "brown",
            "foxes",
            "jumped",
            "over",
        ]

    def test_keeps_duplicates_and_punctuation(self):
        assert extract_key_terms("Python, python and more python?") == [
            "python,",
            "python",
            "more",
            "python?",
        ]


class TestHasStructuredContent:
    @pytest.mark.parametrize(
        "response",
        [
            "Steps:\n- collect data",
            "Steps:\n  1. collect data",
            "Steps:\n• collect data",
            "Firstly, collect data",
            "and FINALLY train",
        ],
    )
    def test_detects_lists_and_ordinals(self, response):
        assert has_structured_content(response) is True

    def test_list_marker_on_first_line_does_not_count(self):
        assert has_structured_content("- collect data") is False


class TestScoreCompleteness:
    @pytest.mark.parametrize(
        "prompt", ["Is it", "Hi", "", "What would there their", "a an the"]
    )
    def test_prompt_without_key_terms_scores_fixed_value(self, prompt):
        assert score_completeness(prompt, "anything at all") == 75.0

    def test_term_coverage(self):
        # "machine" and "learning" are covered, "explain" is not
        assert score_completeness(PROMPT, BASE_RESPONSE) == pytest.approx(40.0)

    def test_duplicate_terms_are_counted_each_time(self):
        assert score_completeness("python python java", "python") == pytest.approx(
            40.0
        )

    def test_terms_keep_trailing_punctuation(self):
        assert score_completeness("What is recursion?", "Recursion repeats.") == 0.0

    def test_example_bonus(self):
        response = "Machine learning powers things such as spam filters."
        assert score_completeness(PROMPT, response) == pytest.approx(55.0)

    def test_list_bonus(self):
        response = "Machine learning steps:\n- collect data\n- train"
        assert score_completeness(PROMPT, response) == pytest.approx(55.0)

    def test_elaboration_bonus(self):
        response = "Machine learning is useful. " * 8
        assert len(response) > 200
        assert score_completeness(PROMPT, response) == pytest.approx(50.0)

    def test_long_response_without_sentences_gets_no_elaboration_bonus(self):
        response = "machine learning " * 20
        assert score_completeness(PROMPT, response) == pytest.approx(40.0)

    def test_score_is_clamped(self):
        response = (
            "To explain machine learning: for example, spam filters.\n"
            "- First, gather data.\n- Then train a model.\n"
        ) * 3
        assert score_completeness(PROMPT, response) == 100.0
