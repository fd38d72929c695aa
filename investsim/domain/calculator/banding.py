"""Severity banding for ROI and break-even cells.

Pure functions of a single value; presentation layers map bands to colours.
"""

from __future__ import annotations

from enum import Enum

from investsim.domain.models.results import NEVER, BreakEvenCell


class Band(str, Enum):
    """Ordered from most to least favourable."""

    BEST = "best"
    STRONG = "strong"
    GOOD = "good"
    FAIR = "fair"
    WEAK = "weak"
    POOR = "poor"
    WORST = "worst"


def roi_band(roi: float) -> Band:
    """Band for a total ROI percentage."""
    if roi >= 100:
        return Band.BEST
    if roi >= 50:
        return Band.STRONG
    if roi >= 25:
        return Band.GOOD
    if roi >= 0:
        return Band.WEAK
    if roi >= -25:
        return Band.POOR
    return Band.WORST


def break_even_band(years: BreakEvenCell) -> Band:
    """Band for a break-even year, or NEVER."""
    if years == NEVER:
        return Band.WORST
    if years <= 3:
        return Band.BEST
    if years <= 7:
        return Band.GOOD
    if years <= 10:
        return Band.FAIR
    if years <= 15:
        return Band.POOR
    return Band.WORST
