"""
Tests for the listing fetcher.
"""

import pytest
import requests

from numscan.config import FetchConfig
from numscan.fetcher import ListingFetcher


class FakeResponse:

    def __init__(self, status_code=200, content=b""):
        self.status_code = status_code
        self.content = content
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def close(self):
        self.closed = True


class FakeSession:

    def __init__(self, response):
        self.headers = {}
        self.response = response
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        return self.response

    def close(self):
        pass


class TestListingFetcher:
    """Test request construction and failure surfacing."""

    def test_fetch_uses_template_and_timeout(self):
        session = FakeSession(FakeResponse(content=b"<html></html>"))
        fetcher = ListingFetcher(session=session)

        body = fetcher.fetch("212")

        assert body == b"<html></html>"
        assert session.calls == [("https://jmp.chat/tels?q=212", 10.0)]
        assert session.headers["User-Agent"] == "numscan/1.0"
        assert session.response.closed

    def test_custom_template(self):
        session = FakeSession(FakeResponse())
        fetcher = ListingFetcher(FetchConfig(url_template="http://localhost/{code}", timeout=2.0), session)

        fetcher.fetch("415")

        assert session.calls == [("http://localhost/415", 2.0)]

    def test_http_error_raises(self):
        session = FakeSession(FakeResponse(status_code=503))
        fetcher = ListingFetcher(session=session)

        with pytest.raises(requests.RequestException):
            fetcher.fetch("212")
        assert session.response.closed
