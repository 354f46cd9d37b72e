"""
HTTP client for the Challonge v1 API.

Retries transient failures (connection errors, timeouts, 429 and 5xx) with
exponential backoff. Every other failure surfaces as ChallongeAPIError.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

import requests

from src import config

logger = logging.getLogger(__name__)

RETRY_STATUSES = (429, 500, 502, 503, 504)


class ChallongeAPIError(RuntimeError):
    """Raised when the Challonge API cannot deliver a usable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ChallongeClient:
    """
    Thin wrapper around requests.Session for the Challonge v1 endpoints.

    Usage:
        client = ChallongeClient(api_key)
        payload = client.get_tournament("my_tourney")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = config.BASE_URL,
        timeout: float = config.REQUEST_TIMEOUT,
        retries: int = config.MAX_RETRIES,
        backoff: float = config.BACKOFF,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Args:
            api_key: Challonge v1 API key
            base_url: API root, without trailing slash
            timeout: Per-request timeout in seconds
            retries: Total attempts for transient failures
            backoff: Base sleep in seconds, doubled on every retry
            session: Optional pre-configured session (tests inject a mock)
        """
        if not api_key:
            raise ValueError("API key is required")

        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = max(1, retries)
        self.backoff = backoff
        self.session = session or requests.Session()
        self.session.headers.update(self.headers)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": self.api_key,
            "Authorization-Type": "v1",
            "User-Agent": config.USER_AGENT,
        }

    def _get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}/{endpoint}"
        params = dict(params or {})
        params["api_key"] = self.api_key

        last_error: Optional[ChallongeAPIError] = None
        for attempt in range(self.retries):
            try:
                resp = self.session.get(url, params=params, timeout=self.timeout)
            except requests.RequestException as e:
                last_error = ChallongeAPIError(f"Challonge API request failed: {e}")
            else:
                if resp.ok:
                    return resp.json()
                error = ChallongeAPIError(
                    f"Challonge API error: {resp.status_code} {resp.text}",
                    status_code=resp.status_code
                )
                if resp.status_code not in RETRY_STATUSES:
                    raise error
                last_error = error

            if attempt + 1 < self.retries:
                delay = self.backoff * (2 ** attempt)
                logger.warning("GET %s failed (attempt %d/%d): %s; retrying in %.1fs",
                               endpoint, attempt + 1, self.retries, last_error, delay)
                time.sleep(delay)

        raise last_error

    def get_tournament(self, tournament_id: str) -> Dict[str, Any]:
        """
        Fetch a tournament with participants and matches in one request.

        Args:
            tournament_id: Tournament id or URL slug

        Returns:
            Parsed JSON body ({"tournament": {...}})
        """
        logger.info("Fetching tournament %s", tournament_id)
        return self._get(
            f"tournaments/{tournament_id}.json",
            {"include_participants": 1, "include_matches": 1}
        )

    def get_community_tournament(self, tournament_id: str, community_id: str) -> Dict[str, Any]:
        """Fetch a community tournament using the '<subdomain>-<url>' id form."""
        return self.get_tournament(f"{community_id}-{tournament_id}")

    def get_participants(self, tournament_id: str) -> List[Dict[str, Any]]:
        """
        Fetch the participant list of a tournament.

        Access errors (e.g. 403 on private tournaments) degrade to an empty list.
        """
        try:
            data = self._get(f"tournaments/{tournament_id}/participants.json")
        except ChallongeAPIError as e:
            logger.info("[skip] participants for %s unavailable (%s), using empty list", tournament_id, e)
            return []
        if isinstance(data, dict):
            return data.get("participants") or []
        return data or []
