"""
Fixed weight, lookup and threshold tables for investor scoring.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

WEIGHTS: Mapping[str, float] = MappingProxyType(
    {
        "accreditation": 0.20,
        "check_size_fit": 0.25,
        "asset_alignment": 0.15,
        "engagement": 0.15,
        "behavioral": 0.10,
        "relationship": 0.10,
        "urgency": 0.05,
    }
)

ACCREDITATION_SCORES: Mapping[str, int] = MappingProxyType(
    {
        "THIRD_PARTY_VERIFIED": 100,
        "INSTITUTIONAL": 100,
        "SELF_CERTIFIED": 70,
        "UNVERIFIED": 30,
        "NOT_ACCREDITED": 0,
    }
)

EXPERIENCE_SCORES: Mapping[str, int] = MappingProxyType(
    {
        "DEVELOPER": 30,
        "OPERATOR": 28,
        "ACTIVE_LP": 25,
        "PASSIVE_LP": 20,
        "NONE": 5,
    }
)

# (minimum prior hotel deals, points), highest first
PRIOR_HOTEL_TIERS: Tuple[Tuple[int, int], ...] = ((5, 30), (2, 25), (1, 15))

# (days remaining at most, bonus), tightest first
DEADLINE_BONUSES: Tuple[Tuple[int, int], ...] = ((30, 40), (90, 25), (180, 10))

# (minimum total, tier), highest first; anything below the last bound is "D"
TIER_THRESHOLDS: Tuple[Tuple[int, str], ...] = ((85, "A+"), (70, "A"), (50, "B"), (30, "C"))
FALLBACK_TIER = "D"

__all__ = [
    "WEIGHTS",
    "ACCREDITATION_SCORES",
    "EXPERIENCE_SCORES",
    "PRIOR_HOTEL_TIERS",
    "DEADLINE_BONUSES",
    "TIER_THRESHOLDS",
    "FALLBACK_TIER",
]
