# movieSearch/metadata/api_clients/omdb_client.py
from __future__ import annotations

import functools
from typing import Any, Dict, List, Optional

import requests

from movieSearch.settings import OMDB_API_KEY, OMDB_URL, OMDB_TIMEOUT, OMDB_MIN_DELAY
from movieSearch.utils import log_debug, throttle
from movieSearch.metadata.core.models import Movie, SearchResult


class OMDBClient:
    """
    Detail fetcher backed by omdbapi.com.

    Each answered query (a match or a "not found") is cached, so selecting
    the same favorite twice never hits OMDb twice. Transport and HTTP errors
    are not cached; the next call retries. Every failure (HTTP, transport,
    bad JSON, ``"Response": "False"``) is logged and reported as *absence*.
    """

    # ────────────────────────────────────────────────────────────────
    # Construction
    # ────────────────────────────────────────────────────────────────
    def __init__(self, api_key: str | None = None, base_url: str = OMDB_URL):
        self.api_key = api_key or OMDB_API_KEY
        if not self.api_key:
            raise RuntimeError("OMDB_API_KEY not set and no api_key passed")
        self.base_url = base_url

    # ────────────────────────────────────────────────────────────────
    # Internal – one cached JSON payload per query
    # ────────────────────────────────────────────────────────────────
    @functools.lru_cache(maxsize=512)
    @throttle(min_delay=OMDB_MIN_DELAY)
    def _fetch(self, **query: str) -> Dict[str, Any]:
        # raises on transport / HTTP / JSON errors, which lru_cache never stores
        params = {"apikey": self.api_key, **query}
        resp = requests.get(self.base_url, params=params, timeout=OMDB_TIMEOUT)
        resp.raise_for_status()
        return resp.json()

    def _payload(self, **query: str) -> Optional[Dict[str, Any]]:
        try:
            data = self._fetch(**query)
        except (requests.RequestException, ValueError) as exc:
            log_debug(f"OMDb fetch error {query}: {exc}")
            return None
        if data.get("Response") != "True":
            log_debug(f"OMDb no match {query}: {data.get('Error', 'unknown error')}")
            return None
        return data

    # ────────────────────────────────────────────────────────────────
    # Public
    # ────────────────────────────────────────────────────────────────
    def resolve(self, title: str, year: str | None) -> Optional[Movie]:
        """Full details for *title* / *year*, or **None** if OMDb has no match.

        Series years look like ``2019–2021``; OMDb's ``y`` filter only
        understands the start year.
        """
        query = {"t": title, "plot": "full"}
        start_year = (year or "").strip()[:4]
        if start_year.isdigit():
            query["y"] = start_year
        data = self._payload(**query)
        return Movie.from_omdb(data) if data else None

    def search(self, text: str, page: int = 1) -> List[SearchResult]:
        """Title search; one OMDb page (10 hits) at a time."""
        text = text.strip()
        if not text:
            return []
        data = self._payload(s=text, page=str(page))
        if not data:
            return []
        return [SearchResult.from_omdb(d) for d in data.get("Search", [])]
