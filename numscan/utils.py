"""
Shared utility functions for the scanner.
"""

import re
from typing import List


ANSI_PATTERN = re.compile(r'\x1b\[[0-9;]*[a-zA-Z]')


def strip_ansi(text: str) -> str:
    """
    Remove ANSI color and cursor sequences from a string.

    Args:
        text: String possibly containing escape sequences

    Returns:
        The visible text only
    """
    return ANSI_PATTERN.sub('', text)


def split_list(value: str) -> List[str]:
    """
    Split a comma or space separated list.

    Args:
        value: Raw value (e.g., "212,415 808")

    Returns:
        List of items (e.g., ["212", "415", "808"]), empty for blank input
    """
    if not value or not value.strip():
        return []
    return value.replace(',', ' ').split()
