"""
Shared fixtures for the scanner tests.
"""

import io

import pytest

from numscan.config import PacingConfig, PatternConfig, ScannerConfig, compile_patterns
from numscan.renderer import ProgressRenderer


@pytest.fixture
def pattern_config():
    return PatternConfig(
        patterns=compile_patterns({
            'vip': [r'8675309$', r'^(\d{5})\1$'],
            'platinum': [r'^\d{6}(\d)\1{3}$'],
            'notable': [r'^\d{6}(\d)\1\1\d$', r'^\d{3}867'],
        }),
        regions={'default': ['212', '415']}
    )

@pytest.fixture
def scanner_config():
    return ScannerConfig(
        pacing=PacingConfig(pre_fetch_delay=0.0, post_update_delay=0.0),
        color=False
    )

@pytest.fixture
def output():
    return io.StringIO()

@pytest.fixture
def renderer(output):
    return ProgressRenderer(stream=output, color=False)
