"""Shared HTTP helpers for PokeAPI access."""

from __future__ import annotations

import logging
from typing import Dict, Optional
from urllib.parse import quote

import requests

from . import config

logger = logging.getLogger(__name__)


class PokemonNotFoundError(ValueError):
    """Raised when a lookup cannot produce a complete profile.

    Network failures, HTTP errors, malformed payloads, and identifiers that do
    not exist all surface as this one error.
    """

    def __init__(self, message: str, query: Optional[str] = None) -> None:
        super().__init__(message)
        self.query = query


def pokemon_url(name_or_dex: str) -> str:
    """Build the PokeAPI pokemon resource URL for an identifier.

    Args:
        name_or_dex: Normalized Pokemon name or dex number.

    Returns:
        Absolute URL of the pokemon resource.
    """
    base_url = config.settings.pokeapi_base_url.rstrip("/")
    # Encode the whole identifier so "/", "?" and "#" cannot leave the path segment.
    return f"{base_url}/pokemon/{quote(name_or_dex, safe='')}"


def _get(url: str) -> Dict:
    """Fetch JSON data from a URL.

    Every call goes to the network; responses are not cached.

    Args:
        url: PokeAPI URL to request.

    Returns:
        Parsed JSON response data.

    Raises:
        requests.RequestException: If the HTTP request fails.
        ValueError: If the response cannot be decoded as JSON.
    """
    logger.debug("GET %s", url)
    response = requests.get(url, timeout=config.settings.pokeapi_timeout)
    response.raise_for_status()
    return response.json()


def _fetch_json(url: str, context: str) -> Dict:
    """Fetch JSON data and wrap errors with context.

    Args:
        url: PokeAPI URL to request.
        context: Description used for error messages.

    Returns:
        Parsed JSON response data.

    Raises:
        PokemonNotFoundError: If the request fails or JSON decoding fails.
    """
    # Wrap lower-level exceptions in a consistent, user-facing error.
    try:
        return _get(url)
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Failed to fetch %s from %s: %s", context, url, exc)
        raise PokemonNotFoundError(f"Failed to fetch {context}: {exc}") from exc
