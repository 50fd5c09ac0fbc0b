"""Health check endpoint."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_settings, get_word_list
from domain.model.definition import Provider
from domain.model.word_list import WordList
from utils.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(
    word_list: WordList = Depends(get_word_list),
    settings: Settings = Depends(get_settings),
):
    """Health check with word list and provider status.

    An empty word list makes every word BAD, so it reports degraded (503).
    Missing provider credentials only affect definitions and are reported
    without changing the overall status.
    """
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {},
    }

    if len(word_list) > 0:
        health_status["services"]["word_list"] = {
            "status": "healthy",
            "name": word_list.name,
            "word_count": len(word_list),
        }
    else:
        health_status["services"]["word_list"] = {
            "status": "unhealthy",
            "name": word_list.name,
            "message": "Word list is empty or failed to load",
        }
        health_status["status"] = "degraded"

    health_status["services"]["definitions"] = {
        "default_provider": settings.provider.value,
        "configured": [p.value for p in Provider if settings.is_configured(p)],
    }

    status_code = (
        status.HTTP_200_OK if health_status["status"] == "healthy"
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return JSONResponse(content=health_status, status_code=status_code)
