import re

from ....text_analysis import (
    SENTENCE_TERMINATORS,
    clamp,
    split_paragraphs,
    split_terminated_segments,
)
from ..completeness.scoring import LIST_LINE_PATTERN

BASE_SCORE = 60.0
PARAGRAPH_POINTS = 3
MAX_PARAGRAPH_BONUS = 15
LIST_BONUS = 10.0
MIN_LIST_LINES = 2
CODE_BONUS = 5.0
HEADER_BONUS = 5.0
PUNCTUATION_WEIGHT = 10.0
EXCESSIVE_BREAK_PENALTY = 5.0
BALANCED_PARENTHESES_BONUS = 5.0

CODE_PATTERN = re.compile(r"```[\s\S]*```|`[^`]+`")
MARKDOWN_HEADER_PATTERN = re.compile(r"^#{1,6}[ \t]+.+$", re.MULTILINE)
SECTION_LABEL_PATTERN = re.compile(r"^[A-Z][^.!?\n]+:$", re.MULTILINE)
EXCESSIVE_BREAK_PATTERN = re.compile(r"\n{4,}")


def has_header(text: str) -> bool:
    return bool(
        MARKDOWN_HEADER_PATTERN.search(text) or SECTION_LABEL_PATTERN.search(text)
    )


def terminated_ratio(text: str) -> float | None:
    """Share of sentences ending in a terminator, None when there are none."""
    segments = split_terminated_segments(text)
    if not segments:
        return None
    properly_ended = sum(
        1 for segment in segments if segment.endswith(SENTENCE_TERMINATORS)
    )
    return properly_ended / len(segments)


def score_structural_quality(text: str) -> float:
    """Score formatting quality, 0-100, starting from a base of 60."""
    score = BASE_SCORE

    paragraphs = split_paragraphs(text)
    if len(paragraphs) > 1:
        score += min(len(paragraphs) * PARAGRAPH_POINTS, MAX_PARAGRAPH_BONUS)

    if len(LIST_LINE_PATTERN.findall(text)) >= MIN_LIST_LINES:
        score += LIST_BONUS

    if CODE_PATTERN.search(text):
        score += CODE_BONUS

    if has_header(text):
        score += HEADER_BONUS

    ratio = terminated_ratio(text)
    if ratio is not None:
        score += ratio * PUNCTUATION_WEIGHT

    score -= len(EXCESSIVE_BREAK_PATTERN.findall(text)) * EXCESSIVE_BREAK_PENALTY

    if text.count("(") == text.count(")"):
        score += BALANCED_PARENTHESES_BONUS

    return clamp(score)
