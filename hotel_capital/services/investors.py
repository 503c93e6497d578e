"""
Builders that turn stored investor/deal snapshots into engine inputs.

Storage lookups stay with the caller; these helpers only encode how CRM
fields map onto the scoring and compliance inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

from hotel_capital.config.settings import Settings
from hotel_capital.services.types import (
    ComplianceCheckInput,
    InvestorScoreInput,
    OfferingType,
    ScoreBreakdown,
)

K = TypeVar("K")

PRIOR_INVESTOR_SOURCE = "PRIOR_INVESTOR"
REFERRAL_SOURCE = "REFERRAL"
EXCHANGE_1031_TAG = "1031_exchange"


@dataclass(slots=True)
class InvestorProfile:
    """Investor record fields the engines care about."""

    accredited_status: str = "UNVERIFIED"
    check_size_min: Optional[float] = None
    check_size_max: Optional[float] = None
    asset_class_prefs: List[str] = field(default_factory=list)
    prior_hotel_investments: int = 0
    hospitality_experience: str = "NONE"
    source: str = "OTHER"
    tags: List[str] = field(default_factory=list)
    prior_relationship: bool = False
    opted_out: bool = False
    do_not_contact: bool = False
    deployment_deadline_days: Optional[int] = None


@dataclass(slots=True)
class DealTerms:
    minimum_investment: float
    total_raise: float
    offering_type: OfferingType = "REG_D_506B"


@dataclass(slots=True)
class EngagementCounts:
    """Rolling 30-day engagement counters."""

    email_opens: int = 0
    email_clicks: int = 0
    email_replies: int = 0
    voice_calls_completed: int = 0
    # No analytics feed populates these yet.
    website_visits: int = 0
    doc_downloads: int = 0


def build_score_input(
    profile: InvestorProfile,
    deal: Optional[DealTerms] = None,
    engagement: Optional[EngagementCounts] = None,
    *,
    settings: Optional[Settings] = None,
) -> InvestorScoreInput:
    """
    Map an investor profile and optional deal onto an `InvestorScoreInput`.

    Without a deal the configured default minimum/target are used; with one,
    the target allocation is `total_raise / target_raise_divisor`.
    """

    settings = settings or Settings()
    engagement = engagement or EngagementCounts()

    if deal is not None:
        deal_minimum = deal.minimum_investment
        deal_target = settings.deal_target_for(deal.total_raise)
    else:
        deal_minimum = settings.default_deal_minimum
        deal_target = settings.default_deal_target

    return InvestorScoreInput(
        accredited_status=profile.accredited_status,  # type: ignore[arg-type]
        check_size_min=profile.check_size_min,
        check_size_max=profile.check_size_max,
        deal_minimum=deal_minimum,
        deal_target=deal_target,
        asset_class_prefs=tuple(profile.asset_class_prefs),
        prior_hotel_investments=profile.prior_hotel_investments,
        hospitality_experience=profile.hospitality_experience,  # type: ignore[arg-type]
        email_opens_30d=engagement.email_opens,
        email_clicks_30d=engagement.email_clicks,
        email_replies_30d=engagement.email_replies,
        voice_calls_completed_30d=engagement.voice_calls_completed,
        website_visits_30d=engagement.website_visits,
        doc_downloads_30d=engagement.doc_downloads,
        is_prior_investor=profile.source == PRIOR_INVESTOR_SOURCE,
        is_referral=profile.source == REFERRAL_SOURCE,
        has_1031_exchange=EXCHANGE_1031_TAG in profile.tags,
        deployment_deadline_days=profile.deployment_deadline_days,
    )


def build_compliance_input(
    content: str,
    *,
    subject: Optional[str] = None,
    offering_type: Optional[OfferingType] = None,
    profile: Optional[InvestorProfile] = None,
) -> ComplianceCheckInput:
    """Pre-send check input; an unknown recipient is treated as a cold, unverified contact."""

    return ComplianceCheckInput(
        content=content,
        subject=subject,
        offering_type=offering_type or "REG_D_506B",
        investor_has_prior_relationship=profile.prior_relationship if profile else False,
        investor_opted_out=profile.opted_out if profile else False,
        investor_accredited_status=profile.accredited_status if profile else "UNVERIFIED",
    )


def rank_investors(scored: Iterable[Tuple[K, ScoreBreakdown]]) -> Sequence[Tuple[K, ScoreBreakdown]]:
    """Order (key, breakdown) pairs by total, highest first; ties keep input order."""
    return sorted(scored, key=lambda item: item[1].total, reverse=True)


__all__ = [
    "DealTerms",
    "EngagementCounts",
    "InvestorProfile",
    "build_compliance_input",
    "build_score_input",
    "rank_investors",
]
