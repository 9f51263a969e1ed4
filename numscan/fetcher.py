"""
HTTP access to the number listing service.
"""

from typing import Optional

import requests

from .config import FetchConfig


class ListingFetcher:
    """Fetches the listing page for an area code."""

    def __init__(self, config: Optional[FetchConfig] = None, session: Optional[requests.Session] = None):
        """
        Args:
            config: FetchConfig instance, uses defaults if None
            session: Session to reuse; one is created if None
        """
        self.config = config or FetchConfig()
        self.session = session or requests.Session()
        self.session.headers.setdefault('User-Agent', self.config.user_agent)

    def url_for(self, code: str) -> str:
        return self.config.url_template.format(code=code)

    def fetch(self, code: str) -> bytes:
        """
        Fetch the raw listing page for a code.

        Args:
            code: Area code to search for

        Returns:
            Response body

        Raises:
            requests.RequestException: On connection errors, timeouts or
                non-2xx responses
        """
        response = self.session.get(self.url_for(code), timeout=self.config.timeout)
        try:
            response.raise_for_status()
            return response.content
        finally:
            response.close()

    def close(self):
        self.session.close()
