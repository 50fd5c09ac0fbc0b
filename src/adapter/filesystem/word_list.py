"""Filesystem adapter for word lists.

Reads "<directory>/<name>.txt" (UTF-8, one word per line).
"""

import logging
from pathlib import Path

from domain.model.word_list import WordList

logger = logging.getLogger(__name__)


class FileWordListSource:
    """Loads bundled word list text files from a directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def path_for(self, name: str) -> Path:
        return self.directory / f"{name}.txt"

    def load(self, name: str) -> WordList:
        """Load a word list by name, returning an empty list if unavailable."""
        path = self.path_for(name)

        if not path.is_file():
            logger.warning("Word list file not found", extra={"word_list": name, "path": str(path)})
            return WordList(name=name)

        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "Error loading word list",
                extra={"word_list": name, "path": str(path), "error": str(e)},
            )
            return WordList(name=name)

        word_list = WordList.load(contents, name=name)
        logger.info(
            f"Using {name.upper()} dictionary: {len(word_list)} allowed words",
            extra={"word_list": name, "word_count": len(word_list)},
        )
        return word_list
