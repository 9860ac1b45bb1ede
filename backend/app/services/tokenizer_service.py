import re
import unicodedata
from typing import List

# Unicode general categories that make up the punctuation class
PUNCTUATION_CATEGORIES = {"Pc", "Pd", "Ps", "Pe", "Pi", "Pf", "Po"}

# Periods are kept so sentence structure survives in counts and word lengths
KEPT_PUNCTUATION = "."

# Information separators \x1c-\x1f pass str.isspace() but are not word whitespace
WHITESPACE_REGEX = re.compile(r"[^\S\x1c-\x1f]+")


def is_stripped_punctuation(char: str) -> bool:
    """Checks whether a character is removed by punctuation stripping.

    Args:
        char (str): A single character.

    Returns:
        bool: True for any Unicode punctuation character other than the period.
    """
    if char == KEPT_PUNCTUATION:
        return False
    return unicodedata.category(char) in PUNCTUATION_CATEGORIES


def strip_punctuation(token: str) -> str:
    """Removes every punctuation character except the period.

    All remaining characters keep their original order. A token made only of
    punctuation strips to an empty string.

    Args:
        token (str): The token (or whole text) to clean.

    Returns:
        str: The token without punctuation.
    """
    return "".join(c for c in token if not is_stripped_punctuation(c))


def strip_whitespace_and_punctuation(text: str) -> str:
    """Deletes all whitespace runs and all non-period punctuation from text."""
    return strip_punctuation(WHITESPACE_REGEX.sub("", text))


def split_words(text: str) -> List[str]:
    """Splits text on the space character only.

    Empty elements produced by leading, trailing or consecutive spaces are
    kept, so the result always has ``text.count(" ") + 1`` elements. Tabs and
    newlines do not separate words.

    Args:
        text (str): The raw text.

    Returns:
        List[str]: The unstripped tokens in order of appearance.
    """
    return text.split(" ")


def split_non_empty_words(text: str) -> List[str]:
    """Splits text on the space character, discarding empty elements."""
    return [word for word in text.split(" ") if word]
