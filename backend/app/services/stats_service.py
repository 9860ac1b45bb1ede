import logging
from typing import Dict, List, Optional, Tuple
from app.core.errors import InvalidInputError
from app.schemas.analysis import TextAnalysisResult, WordFrequency, WordLength
from app.services.tokenizer_service import (
    split_words,
    strip_punctuation,
    strip_whitespace_and_punctuation,
)

logger = logging.getLogger(__name__)

SENTENCE_TERMINATOR = "."


def calculate_stats(text: Optional[str]) -> TextAnalysisResult:
    """Generates descriptive statistics for a text.

    Args:
        text (Optional[str]): The text to analyze.

    Returns:
        TextAnalysisResult: Character, word and sentence counts together with
            the most frequent and the longest word.

    Raises:
        InvalidInputError: If the text is None or empty.
    """
    if not text:
        raise InvalidInputError("Input text is required.")

    words = split_words(text)

    result = TextAnalysisResult(
        char_count=_get_char_count(text),
        word_count=len(words),
        sentence_count=_get_sentence_count(text),
        most_frequent_word=_get_most_frequent_word(words),
        longest_word=_get_longest_word(words),
    )

    logger.debug(
        "Analyzed text of %d chars: %d words, %d sentences",
        len(text),
        result.word_count,
        result.sentence_count,
    )
    return result


def _get_char_count(text: str) -> int:
    """Counts characters left after removing whitespace and punctuation.

    Periods are not punctuation for this purpose and are counted.
    """
    return len(strip_whitespace_and_punctuation(text))


def _get_sentence_count(text: str) -> int:
    # Splitting on "." yields one more segment than there are periods
    return len(text.split(SENTENCE_TERMINATOR)) - 1


def _get_most_frequent_word(words: List[str]) -> Optional[WordFrequency]:
    """Finds the word with the highest case-insensitive frequency.

    Counts are keyed on the case-folded word, while the casing shown is the
    one seen first. Ties go to the word encountered first.

    Args:
        words (List[str]): Unstripped tokens from ``split_words``.

    Returns:
        Optional[WordFrequency]: The most frequent word, or None if there are
            no words.
    """
    # case-folded word -> (first-seen casing, count); dicts keep insertion order
    frequencies: Dict[str, Tuple[str, int]] = {}

    for word in words:
        cleaned = strip_punctuation(word)
        key = cleaned.casefold()
        display, count = frequencies.get(key, (cleaned, 0))
        frequencies[key] = (display, count + 1)

    best: Optional[Tuple[str, int]] = None
    for display, count in frequencies.values():
        if best is None or count > best[1]:
            best = (display, count)

    if best is None:
        return None

    return WordFrequency(word=best[0], frequency=best[1])


def _get_longest_word(words: List[str]) -> Optional[WordLength]:
    """Finds the word whose punctuation-stripped form is longest.

    The reported word keeps its original punctuation. Ties go to the first
    occurrence.
    """
    best_word = None
    best_length = -1

    for word in words:
        length = len(strip_punctuation(word))
        if length > best_length:
            best_word, best_length = word, length

    if best_word is None:
        return None

    return WordLength(word=best_word, length=best_length)
