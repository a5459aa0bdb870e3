import math
import re

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
TERMINATED_SEGMENT = re.compile(r"[^.!?]+[.!?]*")
PARAGRAPH_BREAK = re.compile(r"\n\n+")
NON_LETTERS = re.compile(r"[^a-z]")

VOWELS = frozenset("aeiouy")
SENTENCE_TERMINATORS = (".", "!", "?")


def split_sentences(text: str) -> list[str]:
    """Split text on runs of sentence terminators, dropping empty pieces."""
    sentences = (sentence.strip() for sentence in SENTENCE_BOUNDARY.split(text))
    return [sentence for sentence in sentences if sentence]


def split_terminated_segments(text: str) -> list[str]:
    """Return the same sentences as `split_sentences`, terminators included.

    A trailing sentence with no terminator is returned as-is, which lets
    callers tell properly ended sentences from unfinished ones.
    """
    return [
        segment.strip()
        for segment in TERMINATED_SEGMENT.findall(text)
        if segment.rstrip(".!?").strip()
    ]


def split_words(text: str) -> list[str]:
    return text.split()


def split_paragraphs(text: str) -> list[str]:
    # Empty pieces are kept: any text, even "", counts as one paragraph.
    return PARAGRAPH_BREAK.split(text)


def count_syllables(word: str) -> int:
    """Estimate syllables by counting vowel groups.

    A trailing "e" is treated as silent. Words with at least one letter
    always count as one syllable or more, words with none count as zero.
    """
    letters = NON_LETTERS.sub("", word.lower())
    if not letters:
        return 0

    count = 0
    previous_was_vowel = False
    for char in letters:
        is_vowel = char in VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if letters.endswith("e"):
        count -= 1

    return max(1, count)


def count_total_syllables(text: str) -> int:
    return sum(count_syllables(word) for word in split_words(text.lower()))


def clamp(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)
