import logging
from typing import List, Optional
from app.core.errors import DegenerateInputError, InvalidInputError
from app.schemas.analysis import SimilarityResult
from app.services.tokenizer_service import split_non_empty_words, strip_punctuation

logger = logging.getLogger(__name__)


def calculate_similarity(
    text1: Optional[str], text2: Optional[str]
) -> SimilarityResult:
    """Scores how much vocabulary two texts share.

    Each direction is scored as the percentage of one text's words that also
    occur in the other text. The two percentages are averaged, so the score is
    symmetric even though each direction uses its own word count as the
    denominator.

    Args:
        text1 (Optional[str]): The first text.
        text2 (Optional[str]): The second text.

    Returns:
        SimilarityResult: The average overlap percentage, rounded to 2 places.

    Raises:
        InvalidInputError: If either text is None or empty.
        DegenerateInputError: If either text has no words once punctuation
            and extra spaces are removed.
    """
    if not text1 or not text2:
        raise InvalidInputError("Both text1 and text2 must be provided.")

    words1 = get_similarity_words(text1)
    words2 = get_similarity_words(text2)

    if not words1:
        raise DegenerateInputError("text1")
    if not words2:
        raise DegenerateInputError("text2")

    common1 = count_common_words(words1, words2)
    common2 = count_common_words(words2, words1)

    pct1 = common1 * 100.0 / len(words1)
    pct2 = common2 * 100.0 / len(words2)
    similarity = round((pct1 + pct2) / 2, 2)

    logger.debug(
        "Similarity over %d and %d words: %d/%d common -> %.2f",
        len(words1),
        len(words2),
        common1,
        common2,
        similarity,
    )
    return SimilarityResult(similarity=similarity)


def get_similarity_words(text: str) -> List[str]:
    """Lower-cases text, strips punctuation and splits it into non-empty words.

    Unlike the word count of ``calculate_stats``, empty tokens caused by
    repeated or boundary spaces are dropped here.
    """
    return split_non_empty_words(strip_punctuation(text.lower()))


def count_common_words(words: List[str], other_words: List[str]) -> int:
    """Counts words that appear at least once in another word list.

    Repeated words in ``words`` each count. A single match in ``other_words``
    may satisfy any number of words.

    Args:
        words (List[str]): Words to check.
        other_words (List[str]): Words to look them up in.

    Returns:
        int: Number of entries in ``words`` with a case-insensitive match.
    """
    vocabulary = {word.casefold() for word in other_words}
    return sum(1 for word in words if word.casefold() in vocabulary)
