import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.core.config import MAX_TEXT_LENGTH
from app.core.errors import TextAnalysisError
from app.schemas.analysis import SimilarityResult, TextAnalysisResult
from app.services.similarity_service import calculate_similarity
from app.services.stats_service import calculate_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/TextAnalyzer", tags=["Text Analyzer"])


class TextAnalysisInput(BaseModel):
    """Request body for single-text analysis."""

    # Optional so a missing field gets the service's own 400 message
    text: Optional[str] = None


class TextSimilarityInput(BaseModel):
    """Request body for comparing two texts."""

    text1: Optional[str] = None
    text2: Optional[str] = None


def _check_length(*texts: Optional[str]) -> None:
    """Rejects texts longer than the configured limit.

    Raises:
        HTTPException: 413 if any text exceeds ``MAX_TEXT_LENGTH``.
    """
    for text in texts:
        if text and len(text) > MAX_TEXT_LENGTH:
            logger.warning("Rejected text of %d chars", len(text))
            raise HTTPException(
                status_code=413,
                detail=f"Text must be at most {MAX_TEXT_LENGTH} characters.",
            )


@router.post("/analyze", response_model=TextAnalysisResult)
def analyze_text(request: TextAnalysisInput) -> TextAnalysisResult:
    """Computes character, word and sentence counts plus the most frequent
    and longest word of a text.

    Args:
        request (TextAnalysisInput): The request body containing the text.

    Returns:
        TextAnalysisResult: The text statistics.

    Raises:
        HTTPException: If the text is missing, empty or too long.
    """
    _check_length(request.text)

    try:
        return calculate_stats(request.text)
    except TextAnalysisError as e:
        logger.info("Analyze request rejected: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/similarities", response_model=SimilarityResult)
def text_similarity(request: TextSimilarityInput) -> SimilarityResult:
    """Scores the vocabulary overlap between two texts.

    Args:
        request (TextSimilarityInput): The request body containing both texts.

    Returns:
        SimilarityResult: The similarity percentage.

    Raises:
        HTTPException: If either text is missing, empty, too long, or has no
            words after punctuation is removed.
    """
    _check_length(request.text1, request.text2)

    try:
        return calculate_similarity(request.text1, request.text2)
    except TextAnalysisError as e:
        logger.info("Similarity request rejected: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
