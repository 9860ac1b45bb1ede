"""
Error types raised by the text analysis services.
"""


class TextAnalysisError(ValueError):
    """Base class for inputs the analysis services refuse to process."""


class InvalidInputError(TextAnalysisError):
    """A required text is missing or empty."""


class DegenerateInputError(TextAnalysisError):
    """A text reduces to zero words after tokenization.

    Attributes:
        field (str): Name of the offending input field.
    """

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} contains no words after removing punctuation.")
