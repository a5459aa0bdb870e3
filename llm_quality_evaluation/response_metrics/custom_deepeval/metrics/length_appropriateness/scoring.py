import re

from ....text_analysis import clamp, split_words

SHORTFALL_WEIGHT = 80.0
EXCESS_WEIGHT = 50.0

# Checked in order; a later match replaces an earlier one.
PROMPT_TYPE_RANGES: tuple[tuple[re.Pattern[str], tuple[int, int]], ...] = (
    (re.compile(r"list|enumerate|steps|how to", re.IGNORECASE), (50, 600)),
    (re.compile(r"explain|describe|discuss|analyze", re.IGNORECASE), (80, 500)),
    (re.compile(r"yes|no|true|false|choose|select", re.IGNORECASE), (20, 150)),
)


def expected_length_range(prompt: str) -> tuple[int, int]:
    """Return the (min, max) response word count expected for a prompt."""
    prompt_words = len(split_words(prompt))

    if prompt_words < 10:
        expected = (30, 200)
    elif prompt_words < 30:
        expected = (50, 400)
    else:
        expected = (100, 800)

    for pattern, prompt_type_range in PROMPT_TYPE_RANGES:
        if pattern.search(prompt):
            expected = prompt_type_range

    return expected


def score_length_appropriateness(prompt: str, response: str) -> float:
    expected_min, expected_max = expected_length_range(prompt)
    response_words = len(split_words(response))

    if response_words < expected_min:
        shortfall = expected_min - response_words
        score = max(0.0, 100 - shortfall / expected_min * SHORTFALL_WEIGHT)
    elif response_words > expected_max:
        excess = response_words - expected_max
        score = max(0.0, 100 - excess / expected_max * EXCESS_WEIGHT)
    else:
        score = 100.0

    return clamp(score)
