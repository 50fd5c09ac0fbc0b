"""Word check endpoint.

Endpoints:
- GET /words/{word}: Report whether a word is in the configured word list
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_word_list
from api.models import WordCheckResponse
from domain.model.query import QueryState
from domain.model.word_list import WordList, normalize_word
from services.word_check_service import check_word

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["words"])


@router.get("/{word}", response_model=WordCheckResponse)
async def check(
    word: str,
    word_list: WordList = Depends(get_word_list),
) -> WordCheckResponse:
    """Check a word against the word list (case-insensitive)."""
    valid = check_word(word_list, word) is QueryState.GOOD
    normalized = normalize_word(word)

    logger.info("Word checked", extra={"word": normalized, "valid": valid, "word_list": word_list.name})
    return WordCheckResponse(
        word=normalized,
        valid=valid,
        verdict="GOOD" if valid else "BAD",
        word_list=word_list.name,
    )
