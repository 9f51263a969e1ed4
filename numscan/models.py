"""
Data models for the number scanner.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Tier(Enum):
    """Desirability tiers, in report order."""
    VIP = "VIP"
    PLATINUM = "Platinum"
    NOTABLE = "Notable"

    @property
    def key(self) -> str:
        """Lower-case name used in patterns.yaml and on the command line."""
        return self.name.lower()


class CodeStatus(Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class CodeResult:
    """Outcome of scanning a single area code."""
    code: str
    status: CodeStatus = CodeStatus.PENDING
    reason: Optional[str] = None
    numbers_found: int = 0


@dataclass
class ScanState:
    """Transient state for one scan, owned by the controller."""
    codes: List[str]
    current_index: int = -1
    results: List[CodeResult] = field(default_factory=list)

    @property
    def current_code(self) -> Optional[str]:
        if 0 <= self.current_index < len(self.codes):
            return self.codes[self.current_index]
        return None

    @property
    def in_flight(self) -> bool:
        """True while the current code has started but has no final status."""
        return self.current_code is not None and len(self.results) == self.current_index

    @property
    def remaining(self) -> List[str]:
        """Codes not yet started."""
        return self.codes[self.current_index + 1:]

    def begin(self, index: int):
        self.current_index = index

    def finish(self, result: CodeResult):
        self.results.append(result)


@dataclass
class ScanReport:
    """Result of a complete scan."""
    results: Dict[Tier, List[str]] = field(default_factory=dict)
    statuses: List[CodeResult] = field(default_factory=list)

    @property
    def succeeded(self) -> List[str]:
        return [r.code for r in self.statuses if r.status == CodeStatus.SUCCESS]

    @property
    def failed(self) -> List[CodeResult]:
        return [r for r in self.statuses if r.status == CodeStatus.FAILURE]
