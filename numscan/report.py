"""
Plain-text formatting of scan results.
"""

from typing import Dict, List

from .models import Tier


SECTION_TITLES = {
    Tier.VIP: "VIP Numbers found:",
    Tier.PLATINUM: "Platinum Numbers found:",
    Tier.NOTABLE: "Notable pattern matches found:",
}


def format_number(number: str) -> str:
    """
    Format a 10-character number in its three report representations.

    Args:
        number: e.g. 2128675309

    Returns:
        e.g. "  +1 (212) 867-5309 ///// +1-212-867-5309 ///// 2128675309"
    """
    area, exchange, line = number[:3], number[3:6], number[6:10]
    return f"  +1 ({area}) {exchange}-{line} ///// +1-{area}-{exchange}-{line} ///// {number[:10]}"


def format_section(title: str, numbers: List[str]) -> List[str]:
    """Title plus one line per number; empty if there is nothing to show."""
    lines = [format_number(n) for n in numbers if len(n) >= 10]
    if not lines:
        return []
    return [title] + lines


def format_report(results: Dict[Tier, List[str]]) -> str:
    """
    Render the final report.

    Sections follow tier order; tiers without numbers get no section at all.
    """
    sections = []
    for tier in Tier:
        section = format_section(SECTION_TITLES[tier], results.get(tier, []))
        if section:
            sections.append("\n".join(section))
    return "\n\n".join(sections)
