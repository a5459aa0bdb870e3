from ....text_analysis import clamp, split_paragraphs, split_sentences, split_words

SINGLE_SENTENCE_SCORE = 85.0
OVERLAP_WEIGHT = 70.0
TRANSITION_BONUS = 30.0
MIN_OVERLAP_WORD_LENGTH = 4

TRANSITION_WORDS = frozenset(
    {
        "however",
        "therefore",
        "furthermore",
        "moreover",
        "additionally",
        "consequently",
        "nevertheless",
        "meanwhile",
        "similarly",
        "likewise",
        "thus",
        "hence",
        "accordingly",
        "besides",
        "also",
        "then",
        "next",
        "finally",
        "first",
        "second",
        "third",
        "lastly",
        "indeed",
        "certainly",
    }
)


def _content_words(sentence: str) -> set[str]:
    return {
        word
        for word in split_words(sentence.lower())
        if len(word) >= MIN_OVERLAP_WORD_LENGTH
    }


def _has_transition(sentence: str) -> bool:
    lowered = sentence.lower()
    return any(word in lowered for word in TRANSITION_WORDS)


def score_sentence_pair(current: str, following: str) -> float:
    """Score how well `following` flows on from `current`, 0-100."""
    current_words = _content_words(current)
    following_words = _content_words(following)

    overlap_ratio = len(current_words & following_words) / max(len(current_words), 1)

    pair_score = overlap_ratio * OVERLAP_WEIGHT
    if _has_transition(following):
        pair_score += TRANSITION_BONUS

    return clamp(pair_score)


def score_coherence(text: str) -> float:
    """Score logical flow between consecutive sentences, 0-100.

    Each pair of neighbouring sentences earns up to 70 points for word
    overlap and 30 for opening with a transition word. The pair average
    gets a small bonus for paragraph structure.
    """
    sentences = split_sentences(text)

    if not sentences:
        return 0.0
    if len(sentences) == 1:
        return SINGLE_SENTENCE_SCORE

    pair_scores = [
        score_sentence_pair(current, following)
        for current, following in zip(sentences, sentences[1:])
    ]
    average = sum(pair_scores) / len(pair_scores)

    structure_bonus = min(len(split_paragraphs(text)) * 2, 10)

    return clamp(average + structure_bonus)
