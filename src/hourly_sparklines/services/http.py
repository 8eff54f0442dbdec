"""
Shared HTTP client for the Open-Meteo forecast request.

One ``requests.Session`` with a ``ForecastAdapter`` mounted: the adapter
retries transient failures (timeouts, connection resets, 429/502/503/504)
with exponential backoff and applies a default timeout to any request that
doesn't set its own.  Retrying lives here, never in the forecast engine.

Usage::

    from hourly_sparklines.services.http import session

    resp = session.get(OPEN_METEO_API, params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from hourly_sparklines import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"hourly-sparklines/{__version__}"

#: Open-Meteo rarely fails for long; three quick retries are enough.
FORECAST_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 1s, 2s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

DEFAULT_TIMEOUT = 15  # seconds


class ForecastAdapter(HTTPAdapter):
    """HTTPAdapter with the forecast retry policy and a default timeout."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout
        super().__init__(max_retries=FORECAST_RETRY)

    def send(
        self, request: requests.PreparedRequest, timeout: Any = None, **kwargs: Any
    ) -> requests.Response:
        if timeout is None:
            timeout = self.timeout
        logger.debug("%s %s (timeout=%s)", request.method, request.url, timeout)
        return super().send(request, timeout=timeout, **kwargs)


def create_session(timeout: float = DEFAULT_TIMEOUT) -> requests.Session:
    """Build a session that sends every request through ``ForecastAdapter``."""
    s = requests.Session()
    s.mount("https://", ForecastAdapter(timeout))
    s.mount("http://", ForecastAdapter(timeout))
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()
