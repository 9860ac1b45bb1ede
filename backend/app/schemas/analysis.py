"""
Pydantic schemas for text analysis results.

Fields serialize with camelCase aliases (``charCount``, ``mostFrequentWord``)
and accept either snake_case or camelCase on input.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    """Base model emitting camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WordFrequency(CamelModel):
    """The most frequent word of a text.

    Attributes:
        word (str): First-seen casing of the punctuation-stripped word.
        frequency (int): Case-insensitive occurrence count.
    """

    word: str
    frequency: int


class WordLength(CamelModel):
    """The longest word of a text.

    Attributes:
        word (str): The word as it appeared in the text, punctuation included.
        length (int): Length of the word with punctuation stripped.
    """

    word: str
    length: int


class TextAnalysisResult(CamelModel):
    """Descriptive statistics for a single text."""

    char_count: int
    word_count: int
    sentence_count: int
    most_frequent_word: Optional[WordFrequency] = None
    longest_word: Optional[WordLength] = None


class SimilarityResult(CamelModel):
    """Vocabulary overlap between two texts, as a percentage."""

    similarity: float = Field(ge=0.0, le=100.0)
