"""Application settings read from the environment.

Provider credentials are never compiled in; they come from environment
variables (or a .env file loaded by the API entry point) and are passed
explicitly into the definition layer.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from domain.model.definition import Provider

# src/utils/settings.py -> repository root
_PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_WORD_LIST_DIR = _PROJECT_ROOT / "data" / "word_lists"
DEFAULT_WORD_LIST = "enable"
DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class Settings:
    """Configuration for the word list and the definition providers."""
    word_list: str = DEFAULT_WORD_LIST
    word_list_dir: Path = DEFAULT_WORD_LIST_DIR
    provider: Provider = Provider.WORDNIK
    wordnik_api_key: str = ""
    oxford_app_id: str = ""
    oxford_app_key: str = ""
    wordsapi_key: str = ""
    wordsapi_host: str = "wordsapiv1.p.mashape.com"
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def is_configured(self, provider: Provider) -> bool:
        """Whether credentials for provider are present."""
        if provider is Provider.WORDNIK:
            return bool(self.wordnik_api_key)
        if provider is Provider.OXFORD:
            return bool(self.oxford_app_id and self.oxford_app_key)
        return bool(self.wordsapi_key)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Raises:
        ValidationError: If DEFINITION_PROVIDER names an unknown provider.
        ValueError: If DEFINITION_TIMEOUT_SECONDS is not a number.
    """
    env = os.environ if environ is None else environ
    return Settings(
        word_list=env.get("WORD_LIST", DEFAULT_WORD_LIST).strip().lower() or DEFAULT_WORD_LIST,
        word_list_dir=Path(env.get("WORD_LIST_DIR") or DEFAULT_WORD_LIST_DIR),
        provider=Provider.parse(env.get("DEFINITION_PROVIDER")),
        wordnik_api_key=env.get("WORDNIK_API_KEY", ""),
        oxford_app_id=env.get("OXFORD_APP_ID", ""),
        oxford_app_key=env.get("OXFORD_APP_KEY", ""),
        wordsapi_key=env.get("WORDSAPI_KEY", ""),
        wordsapi_host=env.get("WORDSAPI_HOST") or "wordsapiv1.p.mashape.com",
        timeout_seconds=float(env.get("DEFINITION_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)),
    )
