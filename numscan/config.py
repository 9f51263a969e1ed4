"""
Configuration dataclasses and pattern/region loading for the number scanner.
"""

import os
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from .models import Tier


BUNDLED_CONFIG_DIR = Path(__file__).parent / "data"
PATTERNS_FILE = "patterns.yaml"
REGIONS_FILE = "regions.yaml"


def _default_tier_aliases() -> Dict[str, Tuple[Tier, ...]]:
    # "all" only feeds the Notable bucket
    return {
        "vip": (Tier.VIP,),
        "platinum": (Tier.PLATINUM,),
        "notable": (Tier.NOTABLE,),
        "all": (Tier.NOTABLE,),
    }


@dataclass
class FetchConfig:
    """Configuration for the listing service requests."""
    url_template: str = "https://jmp.chat/tels?q={code}"
    timeout: float = 10.0
    user_agent: str = "numscan/1.0"


@dataclass
class PacingConfig:
    """Delays that keep the progress line readable. Not a rate limit."""
    pre_fetch_delay: float = 0.5
    post_update_delay: float = 0.2


@dataclass
class ScannerConfig:
    """Main configuration for a scan."""
    fetch: FetchConfig = field(default_factory=FetchConfig)
    pacing: PacingConfig = field(default_factory=PacingConfig)

    # Lower-case filter name -> tiers it routes into
    tier_aliases: Dict[str, Tuple[Tier, ...]] = field(default_factory=_default_tier_aliases)

    color: bool = field(default_factory=lambda: sys.stdout.isatty())


@dataclass
class PatternConfig:
    """Compiled tier patterns plus the region -> area code table."""
    patterns: Dict[Tier, List[re.Pattern]] = field(default_factory=dict)
    regions: Dict[str, List[str]] = field(default_factory=dict)

    def patterns_for(self, tier: Tier) -> List[re.Pattern]:
        return self.patterns.get(tier, [])

    def region_codes(self, region: str) -> Optional[List[str]]:
        """
        Look up the area codes for a region.

        Args:
            region: Region name exactly as it appears in regions.yaml

        Returns:
            List of codes, or None if the region is unknown
        """
        codes = self.regions.get(region)
        if codes is None:
            return None
        return [str(c) for c in codes]


def compile_patterns(raw: Dict[str, List[str]]) -> Dict[Tier, List[re.Pattern]]:
    """
    Compile the raw pattern lists for every tier.

    Python's re engine backtracks, so backreferences (\\1) and lookaround
    such as (?!...) are available to the pattern files.

    Args:
        raw: Mapping of tier key (vip/platinum/notable) to pattern strings

    Returns:
        Mapping of Tier to compiled patterns, in file order

    Raises:
        ValueError: If a pattern does not compile
    """
    compiled: Dict[Tier, List[re.Pattern]] = {}
    for tier in Tier:
        compiled[tier] = []
        for pattern in raw.get(tier.key) or []:
            try:
                compiled[tier].append(re.compile(str(pattern)))
            except re.error as e:
                raise ValueError(
                    f"failed to compile {tier.value} pattern '{pattern}': {e}"
                ) from e
    return compiled


def _read_yaml(path: Path, section: str) -> dict:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ValueError(f"failed to read {path.name}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"failed to parse {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"failed to parse {path.name}: expected a mapping")
    return data.get(section) or {}


def candidate_config_dirs() -> List[Path]:
    """Directories searched for configuration, most specific first."""
    dirs = []
    env_dir = os.getenv('NUMSCAN_CONFIG_DIR')
    if env_dir:
        dirs.append(Path(env_dir))
    dirs.append(Path.cwd() / "config")
    dirs.append(BUNDLED_CONFIG_DIR)
    return dirs


def load_pattern_config(config_dir: Optional[str] = None) -> PatternConfig:
    """
    Load and compile patterns.yaml and regions.yaml.

    Args:
        config_dir: Directory holding both files. If None, the locations from
            candidate_config_dirs() are tried in order.

    Returns:
        PatternConfig with compiled patterns

    Raises:
        ValueError: If no usable configuration is found or a pattern is invalid
    """
    if config_dir is not None:
        directory = Path(config_dir)
    else:
        directory = None
        for candidate in candidate_config_dirs():
            if (candidate / PATTERNS_FILE).is_file() and (candidate / REGIONS_FILE).is_file():
                directory = candidate
                break
        if directory is None:
            raise ValueError("failed to load configuration from any location")

    raw_patterns = _read_yaml(directory / PATTERNS_FILE, "patterns")
    raw_regions = _read_yaml(directory / REGIONS_FILE, "regions")

    return PatternConfig(
        patterns=compile_patterns(raw_patterns),
        regions={str(name): list(codes or []) for name, codes in raw_regions.items()}
    )
