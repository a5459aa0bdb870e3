from ....text_analysis import (
    clamp,
    count_total_syllables,
    split_paragraphs,
    split_sentences,
    split_words,
)

LONG_SENTENCE_WORDS = 40
LONG_SENTENCE_PENALTY = 20.0
PARAGRAPH_BONUS = 5.0


def flesch_reading_ease(words: int, sentences: int, syllables: int) -> float:
    return 206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)


def score_readability(text: str) -> float:
    """Score ease of reading, 0-100.

    Starts from the Flesch Reading Ease score, penalises the share of
    sentences longer than 40 words and rewards splitting into paragraphs.
    """
    sentences = split_sentences(text)
    words = split_words(text)

    if not words or not sentences:
        return 0.0

    readability = clamp(
        flesch_reading_ease(len(words), len(sentences), count_total_syllables(text))
    )

    long_sentences = sum(
        1 for sentence in sentences if len(split_words(sentence)) > LONG_SENTENCE_WORDS
    )
    readability -= long_sentences / len(sentences) * LONG_SENTENCE_PENALTY

    if len(split_paragraphs(text)) > 1:
        readability += PARAGRAPH_BONUS

    return clamp(readability)
