from app.services.tokenizer_service import (
    is_stripped_punctuation,
    split_non_empty_words,
    split_words,
    strip_punctuation,
    strip_whitespace_and_punctuation,
)


def test_strip_punctuation_keeps_periods():
    """Test that every punctuation mark except the period is removed."""
    assert strip_punctuation("Hello,") == "Hello"
    assert strip_punctuation("end.") == "end."
    assert strip_punctuation("don't") == "dont"
    assert strip_punctuation("(well-known)") == "wellknown"
    assert strip_punctuation("¿qué?") == "qué"
    assert strip_punctuation("«quoted»") == "quoted"


def test_strip_punctuation_keeps_symbols_and_digits():
    """Symbols are not punctuation and survive stripping."""
    assert strip_punctuation("$100+") == "$100+"
    assert strip_punctuation("a=b") == "a=b"


def test_strip_punctuation_only_punctuation():
    """A token of pure punctuation strips to the empty string."""
    assert strip_punctuation("!?,;") == ""
    assert strip_punctuation("...") == "..."


def test_is_stripped_punctuation():
    assert is_stripped_punctuation(",") is True
    assert is_stripped_punctuation("—") is True
    assert is_stripped_punctuation(".") is False
    assert is_stripped_punctuation("a") is False
    assert is_stripped_punctuation(" ") is False


def test_split_words_keeps_empty_tokens():
    """Test space-only splitting with boundary and repeated spaces."""
    assert split_words("a b") == ["a", "b"]
    assert split_words(" a  b ") == ["", "a", "", "b", ""]
    assert split_words("a\tb\nc") == ["a\tb\nc"]

    text = "  one two   three "
    assert len(split_words(text)) == text.count(" ") + 1


def test_split_non_empty_words():
    assert split_non_empty_words(" a  b ") == ["a", "b"]
    assert split_non_empty_words("   ") == []


def test_strip_whitespace_and_punctuation():
    assert strip_whitespace_and_punctuation("a b,\tc.\n") == "abc."


def test_information_separators_are_not_whitespace():
    """Control separators \\x1c-\\x1f are counted like ordinary characters."""
    assert strip_whitespace_and_punctuation("a\x1cb\x1f c") == "a\x1cb\x1fc"
