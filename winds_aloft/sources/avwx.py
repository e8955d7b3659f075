"""Aviation Weather (aviationweather.gov) source for the FB winds aloft bulletin."""

import logging
from typing import Optional

import requests

from winds_aloft import config

logger = logging.getLogger(__name__)


class WindsAloftSource:
    """
    Fetch the raw FB winds aloft bulletin from aviationweather.gov.

    Only transport is handled here; the text is parsed by WindsAloftParser.

    Example:
        source = WindsAloftSource()
        body = source.fetch_report()
        if body is not None:
            forecasts = WindsAloftParser.parse(body)
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: int = config.WINDS_ALOFT_TIMEOUT,
        url: str = config.WINDS_ALOFT_URL,
    ):
        """
        Args:
            session: Optional requests.Session for dependency injection (testing).
            timeout: HTTP request timeout in seconds.
            url: Bulletin URL.
        """
        self._session = session or requests.Session()
        self._timeout = timeout
        self._url = url
        self._session.headers.setdefault("User-Agent", config.WINDS_ALOFT_USER_AGENT)

    @property
    def url(self) -> str:
        return self._url

    def fetch_report(self) -> Optional[str]:
        """
        Download the bulletin.

        Returns:
            Bulletin text, or None if the request failed or returned no data
        """
        try:
            response = self._session.get(self._url, timeout=self._timeout)
            if response.status_code == 204:
                logger.warning("Winds aloft fetch returned no content: %s", self._url)
                return None
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Winds aloft fetch failed for %s: %s", self._url, e)
            return None

        if not response.text:
            logger.warning("Winds aloft fetch returned an empty body: %s", self._url)
            return None
        return response.text
