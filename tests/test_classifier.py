"""
Tests for tier classification.
"""

import re

from numscan.classifier import PatternClassifier, matches_any
from numscan.config import compile_patterns
from numscan.models import Tier


class TestMatchesAny:
    """Test OR semantics across a pattern set."""

    def test_empty_set_never_matches(self):
        assert not matches_any("2128675309", [])

    def test_any_pattern_is_enough(self):
        patterns = [re.compile(r'^999'), re.compile(r'5309$')]
        assert matches_any("2128675309", patterns)

    def test_no_pattern_matches(self):
        patterns = [re.compile(r'^999'), re.compile(r'0000$')]
        assert not matches_any("2128675309", patterns)

    def test_patterns_are_unanchored_by_default(self):
        assert matches_any("2128675309", [re.compile(r'867')])


class TestBacktrackingConstructs:
    """Test that patterns relying on backreferences and lookaround work."""

    def test_repeated_five_digit_block(self):
        classifier = PatternClassifier(compile_patterns({'vip': [r'^(\d{5})\1$']}))
        assert classifier.classify("2128621286", Tier.VIP)
        assert not classifier.classify("2128621287", Tier.VIP)

    def test_negative_lookahead_alternating_pair(self):
        classifier = PatternClassifier(
            compile_patterns({'platinum': [r'^\d{6}(\d)(?!\1)(\d)\1\2$']})
        )
        assert classifier.classify("2128674545", Tier.PLATINUM)
        # Same digit four times is not an alternating pair
        assert not classifier.classify("2128674444", Tier.PLATINUM)


class TestPatternClassifier:
    """Test per-tier classification."""

    def test_tiers_are_independent(self, pattern_config):
        classifier = PatternClassifier.from_config(pattern_config)
        # Ends in 8675309 (VIP) and has 867 as exchange (Notable)
        assert classifier.tiers_for("2128675309") == [Tier.VIP, Tier.NOTABLE]

    def test_no_tiers(self, pattern_config):
        classifier = PatternClassifier.from_config(pattern_config)
        assert classifier.tiers_for("3105551234") == []

    def test_missing_tier_matches_nothing(self):
        classifier = PatternClassifier({Tier.VIP: [re.compile(r'.*')]})
        assert classifier.classify("2128675309", Tier.VIP)
        assert not classifier.classify("2128675309", Tier.PLATINUM)

    def test_non_digit_candidates_are_classified_as_text(self):
        classifier = PatternClassifier(compile_patterns({'notable': [r'^tel']}))
        assert classifier.classify("tel:555123", Tier.NOTABLE)
