"""
Investor scoring engine.

Composite score (0-100) over seven weighted dimensions:
    accreditation (20%) + check size fit (25%) + asset alignment (15%) +
    engagement (15%) + behavioral (10%) + relationship (10%) + urgency (5%)
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Optional

from hotel_capital.services.types import InvestorScoreInput, ScoreBreakdown, Tier

from .weights import (
    ACCREDITATION_SCORES,
    DEADLINE_BONUSES,
    EXPERIENCE_SCORES,
    FALLBACK_TIER,
    PRIOR_HOTEL_TIERS,
    TIER_THRESHOLDS,
    WEIGHTS,
)

logger = logging.getLogger("hotel_capital.scoring.engine")


def _clamp(value: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, value)))


def score_accreditation(status: str) -> int:
    return _clamp(ACCREDITATION_SCORES[status])


def check_size_midpoint(check_min: Optional[float], check_max: Optional[float]) -> Optional[float]:
    """Midpoint of the investor's check range, or the single bound given."""
    if not check_min and not check_max:
        return None
    if check_min and check_max:
        return (check_min + check_max) / 2
    return check_min or check_max


def score_check_size_fit(
    check_min: Optional[float],
    check_max: Optional[float],
    deal_minimum: float,
    deal_target: float,
) -> int:
    midpoint = check_size_midpoint(check_min, check_max)
    if midpoint is None:
        return 20  # missing data is penalised

    if midpoint >= deal_target:
        return 100
    if midpoint >= deal_minimum * 2:
        return 85
    if midpoint >= deal_minimum:
        return 65
    if midpoint >= deal_minimum * 0.5:
        return 35
    return 10


def score_asset_alignment(prefs: Iterable[str], prior_hotel: int, experience: str) -> int:
    prefs = list(prefs)
    score = 0

    if any("hotel" in pref.lower() or "hospitality" in pref.lower() for pref in prefs):
        score += 40
    elif not prefs:
        score += 15  # open-minded
    else:
        score += 5

    for threshold, points in PRIOR_HOTEL_TIERS:
        if prior_hotel >= threshold:
            score += points
            break

    score += EXPERIENCE_SCORES[experience]
    return _clamp(score)


def score_engagement(data: InvestorScoreInput) -> int:
    # Replies are the strongest buying signal.
    score = (
        min(data.email_replies_30d * 30, 40)
        + min(data.email_clicks_30d * 10, 25)
        + min(data.email_opens_30d * 3, 15)
        + min(data.voice_calls_completed_30d * 15, 20)
    )
    return _clamp(score)


def score_behavioral(data: InvestorScoreInput) -> int:
    score = min(data.website_visits_30d * 8, 40) + min(data.doc_downloads_30d * 20, 60)
    return _clamp(score)


def score_relationship(is_prior: bool, is_referral: bool) -> int:
    if is_prior and is_referral:
        return 100
    if is_prior:
        return 90
    if is_referral:
        return 75
    return 15


def score_urgency(has_1031: bool, deadline_days: Optional[int]) -> int:
    score = 60 if has_1031 else 0
    if deadline_days is not None:
        for limit, bonus in DEADLINE_BONUSES:
            if deadline_days <= limit:
                score += bonus
                break
    return _clamp(score)


def tier_for(total: int) -> Tier:
    for threshold, tier in TIER_THRESHOLDS:
        if total >= threshold:
            return tier  # type: ignore[return-value]
    return FALLBACK_TIER  # type: ignore[return-value]


def weighted_total(dimensions: Dict[str, int]) -> int:
    """Round-half-up weighted sum of the sub-scores, computed in Decimal so 84.5 rounds to 85."""

    raw = sum(
        (Decimal(dimensions[name]) * Decimal(str(weight)) for name, weight in WEIGHTS.items()),
        Decimal(0),
    )
    return _clamp(int(raw.quantize(Decimal(1), rounding=ROUND_HALF_UP)))


def calculate_investor_score(data: InvestorScoreInput) -> ScoreBreakdown:
    """Score an investor snapshot; pure and deterministic."""

    dimensions = {
        "accreditation": score_accreditation(data.accredited_status),
        "check_size_fit": score_check_size_fit(
            data.check_size_min,
            data.check_size_max,
            data.deal_minimum,
            data.deal_target,
        ),
        "asset_alignment": score_asset_alignment(
            data.asset_class_prefs,
            data.prior_hotel_investments,
            data.hospitality_experience,
        ),
        "engagement": score_engagement(data),
        "behavioral": score_behavioral(data),
        "relationship": score_relationship(data.is_prior_investor, data.is_referral),
        "urgency": score_urgency(data.has_1031_exchange, data.deployment_deadline_days),
    }
    total = weighted_total(dimensions)
    breakdown = ScoreBreakdown(total=total, tier=tier_for(total), **dimensions)
    logger.debug("Investor scored", extra={"total": total, "tier": breakdown.tier})
    return breakdown


__all__ = [
    "calculate_investor_score",
    "check_size_midpoint",
    "score_accreditation",
    "score_check_size_fit",
    "score_asset_alignment",
    "score_engagement",
    "score_behavioral",
    "score_relationship",
    "score_urgency",
    "tier_for",
    "weighted_total",
]
