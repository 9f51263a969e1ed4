"""
Area code scanner for memorable phone numbers.
"""

from .aggregator import ResultAggregator
from .classifier import PatternClassifier
from .config import FetchConfig, PacingConfig, PatternConfig, ScannerConfig, load_pattern_config
from .controller import ScanController
from .extractor import ExtractionError, extract_numbers
from .fetcher import ListingFetcher
from .models import CodeResult, CodeStatus, ScanReport, ScanState, Tier
from .renderer import ProgressRenderer
from .report import format_report

__version__ = "1.0.0"

__all__ = [
    'ResultAggregator',
    'PatternClassifier',
    'FetchConfig',
    'PacingConfig',
    'PatternConfig',
    'ScannerConfig',
    'load_pattern_config',
    'ScanController',
    'ExtractionError',
    'extract_numbers',
    'ListingFetcher',
    'CodeResult',
    'CodeStatus',
    'ScanReport',
    'ScanState',
    'Tier',
    'ProgressRenderer',
    'format_report'
]
