"""
Tier classification of candidate numbers against compiled pattern sets.
"""

import re
from typing import Dict, Iterable, List

from .config import PatternConfig
from .models import Tier


def matches_any(candidate: str, patterns: Iterable[re.Pattern]) -> bool:
    """
    Check if a candidate matches any pattern in a set.

    Patterns use re.search semantics, so anchoring is up to the pattern.
    """
    return any(pattern.search(candidate) for pattern in patterns)


class PatternClassifier:
    """Tests candidates against each tier's patterns independently."""

    def __init__(self, patterns: Dict[Tier, List[re.Pattern]]):
        self.patterns = patterns

    @classmethod
    def from_config(cls, config: PatternConfig) -> "PatternClassifier":
        return cls({tier: config.patterns_for(tier) for tier in Tier})

    def classify(self, candidate: str, tier: Tier) -> bool:
        """
        Check whether a candidate belongs to a tier.

        Args:
            candidate: 10-character candidate string
            tier: Tier to test against

        Returns:
            True if any of the tier's patterns match
        """
        return matches_any(candidate, self.patterns.get(tier, []))

    def tiers_for(self, candidate: str) -> List[Tier]:
        """Every tier the candidate matches, in report order."""
        return [tier for tier in Tier if self.classify(candidate, tier)]
