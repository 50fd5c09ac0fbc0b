"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before settings are read
load_dotenv()

# main.py is at <root>/src/api/main.py, src is two levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.dependencies import get_settings, get_word_list_source
from api.routes import definitions, health, words
from domain.model.definition import Provider
from utils.logging import setup_structured_logging

setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Word Check API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the word list once; it is read-only for the life of the app."""
    settings = get_settings()
    app.state.word_list = get_word_list_source(settings).load(settings.word_list)
    if len(app.state.word_list) == 0:
        logger.warning(
            "Word list is empty, every word will be reported BAD",
            extra={"word_list": settings.word_list},
        )

    missing = [p.value for p in Provider if not settings.is_configured(p)]
    if missing:
        logger.warning("Definition providers without credentials", extra={"providers": missing})

    yield


app = FastAPI(
    title=SERVICE_NAME,
    description="Checks words against a Scrabble word list and looks up their definitions",
    version=VERSION,
    lifespan=lifespan,
)

app.include_router(words.router)
app.include_router(definitions.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False  # structured application logs are enough
    )
