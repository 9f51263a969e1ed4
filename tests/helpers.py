"""
Test doubles and page builders.
"""


def listing_page(*hrefs: str) -> str:
    """Minimal listing page with one link per href."""
    links = "\n".join(f'<li><a href="{href}">{href[-10:]}</a></li>' for href in hrefs)
    return f"<html><body><ul>{links}</ul></body></html>"


class FakeFetcher:
    """In-memory stand-in for ListingFetcher."""

    def __init__(self, responses: dict):
        self.responses = responses
        self.requested = []

    def fetch(self, code: str):
        self.requested.append(code)
        response = self.responses[code]
        if isinstance(response, Exception):
            raise response
        return response
