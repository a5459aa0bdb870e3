import re

from ....text_analysis import clamp, split_words

NO_KEY_TERMS_SCORE = 75.0
TERM_COVERAGE_WEIGHT = 60.0
EXAMPLE_BONUS = 15.0
STRUCTURE_BONUS = 15.0
ELABORATION_BONUS = 10.0
ELABORATION_MIN_CHARS = 200
ELABORATION_MIN_SEGMENTS = 3
MIN_TERM_LENGTH = 4

STOP_WORDS = frozenset(
    {
        "the",
        "be",
        "to",
        "of",
        "and",
        "a",
        "in",
        "that",
        "have",
        "i",
        "it",
        "for",
        "not",
        "on",
        "with",
        "he",
        "as",
        "you",
        "do",
        "at",
        "this",
        "but",
        "his",
        "by",
        "from",
        "they",
        "we",
        "say",
        "her",
        "she",
        "or",
        "an",
        "will",
        "my",
        "one",
        "all",
        "would",
        "there",
        "their",
        "what",
    }
)

EXAMPLE_PATTERN = re.compile(
    r"for example|such as|e\.g\.|i\.e\.|specifically|instance", re.IGNORECASE
)
LIST_LINE_PATTERN = re.compile(r"\n\s*[-•*\d]+\.?\s")
ORDINAL_PATTERN = re.compile(r"first|second|third|finally", re.IGNORECASE)
ELABORATION_SPLIT = re.compile(r"\.\s+")


def extract_key_terms(prompt: str) -> list[str]:
    """Return the significant prompt words, lower-cased, duplicates kept."""
    return [
        word
        for word in split_words(prompt.lower())
        if len(word) >= MIN_TERM_LENGTH and word not in STOP_WORDS
    ]


def has_structured_content(response: str) -> bool:
    return bool(
        LIST_LINE_PATTERN.search(response) or ORDINAL_PATTERN.search(response)
    )


def score_completeness(prompt: str, response: str) -> float:
    key_terms = extract_key_terms(prompt)

    if not key_terms:
        return NO_KEY_TERMS_SCORE

    response_lower = response.lower()
    addressed = sum(1 for term in key_terms if term in response_lower)
    term_coverage = addressed / len(key_terms) * TERM_COVERAGE_WEIGHT

    pattern_score = 0.0
    if EXAMPLE_PATTERN.search(response):
        pattern_score += EXAMPLE_BONUS
    if has_structured_content(response):
        pattern_score += STRUCTURE_BONUS
    if (
        len(response) > ELABORATION_MIN_CHARS
        and len(ELABORATION_SPLIT.split(response)) >= ELABORATION_MIN_SEGMENTS
    ):
        pattern_score += ELABORATION_BONUS

    return clamp(term_coverage + pattern_score)
