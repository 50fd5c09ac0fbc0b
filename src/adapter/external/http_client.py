"""Shared HTTP helper for the definition provider adapters.

Maps httpx outcomes onto the DefinitionLookupError taxonomy so each adapter
only deals with its provider's JSON shape.
"""

import logging
from typing import Any

import httpx

from domain.model.errors import HttpStatusError, MalformedResponseError, NetworkFailureError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


async def get_json(
    provider: str,
    url: str,
    headers: dict[str, str],
    params: dict[str, Any] | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    not_found_ok: bool = False,
) -> Any:
    """GET a URL and decode its JSON body.

    Args:
        provider: Provider tag, used for logging and error context.
        url: Fully built request URL.
        headers: Provider credentials and content negotiation headers.
        params: Optional query string parameters.
        timeout: Request timeout in seconds.
        not_found_ok: Treat a 404 as "no data" instead of an HTTP error.

    Returns:
        Decoded JSON, or None for an empty body (or a tolerated 404).

    Raises:
        NetworkFailureError: On transport errors and timeouts.
        HttpStatusError: On a non-success status.
        MalformedResponseError: If the body is not valid JSON.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(url, headers=headers, params=params)

            if response.status_code == 404 and not_found_ok:
                logger.debug(
                    "Word not found by definition provider",
                    extra={"provider": provider, "url": url},
                )
                return None

            response.raise_for_status()

            if not response.content:
                return None

            return response.json()

    except httpx.HTTPStatusError as e:
        raise HttpStatusError(provider, e.response.status_code) from e
    except httpx.RequestError as e:
        raise NetworkFailureError(provider, f"{type(e).__name__}: {e}") from e
    except ValueError as e:
        raise MalformedResponseError(provider, f"Invalid JSON body: {e}") from e
