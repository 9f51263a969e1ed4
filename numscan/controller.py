"""
Main orchestrator for a scan.
Fetches each area code in order, extracts and classifies candidate numbers,
and keeps the progress line current.
"""

import time
from typing import Callable, Iterable, List, Optional

import requests

from .aggregator import ResultAggregator, resolve_tiers
from .classifier import PatternClassifier
from .config import PatternConfig, ScannerConfig, load_pattern_config
from .extractor import ExtractionError, extract_numbers
from .fetcher import ListingFetcher
from .models import CodeResult, CodeStatus, ScanReport, ScanState
from .renderer import ProgressRenderer


class ScanController:
    """Coordinates fetcher, extractor, classifier, aggregator and renderer."""

    def __init__(
        self,
        config: Optional[ScannerConfig] = None,
        patterns: Optional[PatternConfig] = None,
        fetcher=None,
        renderer: Optional[ProgressRenderer] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize controller with configuration.

        Args:
            config: ScannerConfig instance, uses defaults if None
            patterns: Compiled tier patterns, loaded from the default
                locations if None
            fetcher: Object with fetch(code) -> body; a ListingFetcher is
                created if None
            renderer: Progress renderer, created from config if None
            sleep: Pacing function
        """
        self.config = config or ScannerConfig()
        self.patterns = patterns or load_pattern_config()
        self.classifier = PatternClassifier.from_config(self.patterns)

        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher or ListingFetcher(self.config.fetch)
        self.renderer = renderer or ProgressRenderer(color=self.config.color)
        self._sleep = sleep

    def run(self, codes: Iterable[str], requested_tiers: Optional[Iterable[str]] = None) -> ScanReport:
        """
        Scan every code in the given order.

        Args:
            codes: Area codes to scan
            requested_tiers: Tier filter names; empty or None keeps every tier

        Returns:
            ScanReport with per-tier results and one status per code
        """
        state = ScanState(codes=list(codes))
        aggregator = ResultAggregator(
            resolve_tiers(requested_tiers, self.config.tier_aliases)
        )

        self.renderer.start()
        try:
            for index, code in enumerate(state.codes):
                state.begin(index)
                self.renderer.render(state)
                self._pause(self.config.pacing.pre_fetch_delay)

                state.finish(self._scan_code(code, aggregator))
                self.renderer.render(state)
                self._pause(self.config.pacing.post_update_delay)
        finally:
            if self._owns_fetcher:
                self.fetcher.close()
        self.renderer.finish()

        return ScanReport(results=aggregator.finalize(), statuses=state.results)

    def _scan_code(self, code: str, aggregator: ResultAggregator) -> CodeResult:
        """Fetch, extract and classify one code. Failures stay local to the code."""
        try:
            body = self.fetcher.fetch(code)
            candidates = extract_numbers(body)
        except (requests.RequestException, ExtractionError) as e:
            return CodeResult(code=code, status=CodeStatus.FAILURE, reason=str(e))

        return CodeResult(
            code=code,
            status=CodeStatus.SUCCESS,
            numbers_found=self._route(candidates, aggregator)
        )

    def _route(self, candidates: List[str], aggregator: ResultAggregator) -> int:
        """Classify candidates and hand matches to the aggregator."""
        routed = 0
        for candidate in candidates:
            tiers = self.classifier.tiers_for(candidate)
            if tiers and aggregator.add(candidate, tiers):
                routed += 1
        return routed

    def _pause(self, seconds: float):
        if seconds > 0:
            self._sleep(seconds)
