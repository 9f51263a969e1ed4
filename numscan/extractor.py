"""
Candidate number extraction from listing pages.
"""

from typing import List, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup


CANDIDATE_LENGTH = 10


def _keep_all_values(attrs, key, value):
    """Collect repeated attributes into a list instead of keeping the last one."""
    existing = attrs[key]
    if isinstance(existing, list):
        existing.append(value)
    else:
        attrs[key] = [existing, value]


class ExtractionError(Exception):
    """Raised when a listing page cannot be parsed."""
    pass


def extract_numbers(document: Union[str, bytes]) -> List[str]:
    """
    Extract candidate numbers from the links on a listing page.

    Every href on an <a> that is at least 10 characters long contributes the last
    10 characters of the href, verbatim. Candidates are returned in document
    order and are not deduplicated.

    Args:
        document: Raw HTML body

    Returns:
        List of candidate strings

    Raises:
        ExtractionError: If the markup cannot be parsed
    """
    try:
        soup = BeautifulSoup(
            document, 'html.parser', on_duplicate_attribute=_keep_all_values
        )
    except (ParserRejectedMarkup, TypeError) as e:
        raise ExtractionError(f"unparsable markup: {e}") from e

    candidates = []
    for link in soup.find_all('a', href=True):
        for href in link.get_attribute_list('href'):
            if len(href) >= CANDIDATE_LENGTH:
                candidates.append(href[-CANDIDATE_LENGTH:])
    return candidates
