#!/usr/bin/env python3
"""
FILE: backend_client.py
VERSION: 1.0
LAST UPDATED: 2026-10-19
PURPOSE:
One-request client for the collaboration-matching backend.

Contract:
- GET  <base>/               health check, must return 2xx
- POST <base>/chat           JSON body {"query": <str>}
- GET  <base>/chat?query=... only when the POST fails at the connection level
- Response must be a JSON object with a truthy "output"; that value is returned
  untouched as the raw payload.

Every failure mode surfaces as BackendError. Callers decide on demo fallback.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from config import Settings, load_settings
from schema_names import K

logger = logging.getLogger(__name__)

_HEADERS = {"Content-Type": "application/json"}


class BackendError(RuntimeError):
    pass


class BackendClient:
    """Fetch one raw payload per query from the backend."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or load_settings()
        self.session = session or requests.Session()

    @property
    def chat_url(self) -> str:
        return f"{self.settings.backend_url}/{K.CHAT_ROUTE}"

    def check_health(self) -> None:
        try:
            resp = self.session.get(
                f"{self.settings.backend_url}/",
                headers=_HEADERS,
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as e:
            raise BackendError(f"Backend service is not available: {e}") from e
        if not resp.ok:
            raise BackendError(f"Backend service is not available (HTTP {resp.status_code})")

    def _post_or_get(self, query: str) -> requests.Response:
        timeout = self.settings.request_timeout
        try:
            return self.session.post(self.chat_url, json={K.QUERY: query}, headers=_HEADERS, timeout=timeout)
        except requests.ConnectionError as e:
            logger.warning("POST %s failed (%s); retrying as GET", self.chat_url, e)
        try:
            return self.session.get(self.chat_url, params={K.QUERY: query}, headers=_HEADERS, timeout=timeout)
        except requests.RequestException as e:
            raise BackendError(f"Backend request failed: {e}") from e

    def fetch_output(self, query: str) -> Any:
        if not query or not query.strip():
            raise BackendError("Query is empty")

        self.check_health()
        try:
            resp = self._post_or_get(query)
        except requests.RequestException as e:
            raise BackendError(f"Backend request failed: {e}") from e

        if not resp.ok:
            raise BackendError(f"API returned {resp.status_code}: {resp.reason}")

        try:
            data = resp.json()
        except ValueError as e:
            raise BackendError("API returned a non-JSON response") from e

        output = data.get(K.OUTPUT) if isinstance(data, dict) else None
        if not output:
            raise BackendError("No output received from API")

        logger.info("Received %s payload from backend", type(output).__name__)
        return output


def fetch_output(query: str, settings: Optional[Settings] = None) -> Any:
    return BackendClient(settings).fetch_output(query)
