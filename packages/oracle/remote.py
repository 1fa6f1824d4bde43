"""
Remote dictionary oracle.

Asks a public dictionary HTTP API whether a word exists:
  - HTTP 200        -> real word
  - HTTP 404        -> not a word
  - anything else   -> OracleError (service down, rate limited, bad URL, ...)

Answers are cached per (language, word) for the life of the oracle, so
re-submitting a word never costs a second round trip.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple
from urllib.parse import quote

import requests

from .base import BaseOracle, OracleError, register

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/{language}/{word}"


@register
class RemoteOracle(BaseOracle):
    id = "remote"
    name = "Remote Dictionary API"

    def __init__(self, *, api_url: str = DEFAULT_API_URL, timeout: float = 10.0,
                 session: requests.Session | None = None):
        self.api_url = api_url
        self.timeout = float(timeout)
        self.http = session or requests.Session()
        self._cache: Dict[Tuple[str, str], bool] = {}

    def is_real_word(self, word: str, language: str) -> bool:
        key = (language, word.strip().lower())
        if key in self._cache:
            return self._cache[key]

        url = self.api_url.format(language=quote(key[0]), word=quote(key[1]))
        try:
            r = self.http.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise OracleError(f"Dictionary lookup failed for '{key[1]}': {e}") from e

        if r.status_code == 200:
            real = True
        elif r.status_code == 404:
            real = False
        else:
            raise OracleError(
                f"Dictionary lookup for '{key[1]}' returned HTTP {r.status_code}")

        logger.debug("Remote lookup %s -> %s", url, real)
        self._cache[key] = real
        return real
