"""
Accumulates classified numbers per tier across a scan.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from .models import Tier


def resolve_tiers(
    requested: Optional[Iterable[str]],
    aliases: Mapping[str, Tuple[Tier, ...]]
) -> Optional[Set[Tier]]:
    """
    Turn tier filter names into the set of tiers that may receive numbers.

    Args:
        requested: Filter names as typed by the user (case-insensitive)
        aliases: Lower-case name -> tiers mapping

    Returns:
        None when no filter was requested (every tier is allowed),
        otherwise the allowed tiers. Unknown names contribute nothing.
    """
    names = [name for name in (requested or []) if name]
    if not names:
        return None

    allowed: Set[Tier] = set()
    for name in names:
        allowed.update(aliases.get(name.lower(), ()))
    return allowed


class ResultAggregator:
    """Per-tier result buckets with filtering, deduplication and sorting."""

    def __init__(self, allowed_tiers: Optional[Set[Tier]] = None):
        """
        Args:
            allowed_tiers: Tiers that accept numbers; None accepts all
        """
        self.allowed_tiers = allowed_tiers
        self._buckets: Dict[Tier, List[str]] = {tier: [] for tier in Tier}

    def accepts(self, tier: Tier) -> bool:
        return self.allowed_tiers is None or tier in self.allowed_tiers

    def add(self, number: str, tiers: Iterable[Tier]) -> int:
        """
        Route a classified number into the buckets of its matched tiers.

        Returns:
            Number of buckets the number was added to
        """
        added = 0
        for tier in tiers:
            if self.accepts(tier):
                self._buckets[tier].append(number)
                added += 1
        return added

    def finalize(self) -> Dict[Tier, List[str]]:
        """
        Deduplicate and sort every bucket.

        Returns:
            Tier -> sorted unique numbers, in report order. Empty tiers are omitted.
        """
        results = {}
        for tier in Tier:
            numbers = sorted(set(self._buckets[tier]))
            if numbers:
                results[tier] = numbers
        return results
