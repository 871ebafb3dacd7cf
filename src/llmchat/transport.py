from __future__ import annotations

"""HTTP delegate used by the clients.

Anything that implements ``post(url, headers, body, timeout_ms)`` and returns an
`HttpResponse` can stand in for `HttpTransport` (tests pass a fake).
"""

import logging
from dataclasses import dataclass
from typing import Dict

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: bytes


class HttpTransport:
    """Blocking POST over `requests`."""

    def __init__(self, session: requests.Session | None = None):
        self.session = session

    def post(self, url: str, headers: Dict[str, str], body: bytes, timeout_ms: int) -> HttpResponse:
        poster = self.session.post if self.session is not None else requests.post
        try:
            resp = poster(url, data=body, headers=headers, timeout=timeout_ms / 1000.0)
        except requests.Timeout as exc:
            logger.error("HTTP request to %s timed out after %sms", url, timeout_ms)
            raise TransportError(f"HTTP request timed out after {timeout_ms}ms: {exc}") from exc
        except requests.RequestException as exc:
            logger.error("HTTP request to %s failed: %s", url, exc)
            raise TransportError(f"HTTP request failed: {exc}") from exc
        return HttpResponse(status_code=resp.status_code, body=resp.content)
