"""
Dataclasses describing the inputs and results of the decision engines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple

OfferingType = Literal["REG_D_506B", "REG_D_506C"]
AccreditedStatus = Literal[
    "THIRD_PARTY_VERIFIED",
    "INSTITUTIONAL",
    "SELF_CERTIFIED",
    "UNVERIFIED",
    "NOT_ACCREDITED",
]
HospitalityExperience = Literal["DEVELOPER", "OPERATOR", "ACTIVE_LP", "PASSIVE_LP", "NONE"]
Severity = Literal["CRITICAL", "HIGH"]
Tier = Literal["A+", "A", "B", "C", "D"]

OFFERING_TYPES: Tuple[str, ...] = ("REG_D_506B", "REG_D_506C")
ACCREDITED_STATUSES: Tuple[str, ...] = (
    "THIRD_PARTY_VERIFIED",
    "INSTITUTIONAL",
    "SELF_CERTIFIED",
    "UNVERIFIED",
    "NOT_ACCREDITED",
)
HOSPITALITY_EXPERIENCE_LEVELS: Tuple[str, ...] = ("DEVELOPER", "OPERATOR", "ACTIVE_LP", "PASSIVE_LP", "NONE")


@dataclass(frozen=True, slots=True)
class ComplianceCheckInput:
    """Outbound content plus the investor/offering context it is sent under."""

    content: str
    offering_type: OfferingType
    investor_has_prior_relationship: bool
    investor_opted_out: bool
    investor_accredited_status: str
    subject: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ComplianceViolation:
    """Blocking finding; severity is fixed per rule."""

    rule: str
    severity: Severity
    message: str
    matched_text: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ComplianceWarning:
    """Non-blocking finding (e.g., a missing disclaimer)."""

    rule: str
    message: str


@dataclass(slots=True)
class ComplianceCheckResult:
    """Outcome of a compliance check. Warnings never affect `passed`."""

    violations: List[ComplianceViolation] = field(default_factory=list)
    warnings: List[ComplianceWarning] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return len(self.violations) == 0

    def rule_ids(self) -> List[str]:
        return [violation.rule for violation in self.violations]


@dataclass(frozen=True, slots=True)
class InvestorScoreInput:
    """Snapshot of investor attributes, deal context and 30-day engagement."""

    accredited_status: AccreditedStatus
    check_size_min: Optional[float]
    check_size_max: Optional[float]
    deal_minimum: float
    deal_target: float
    asset_class_prefs: Tuple[str, ...] = ()
    prior_hotel_investments: int = 0
    hospitality_experience: HospitalityExperience = "NONE"
    email_opens_30d: int = 0
    email_clicks_30d: int = 0
    email_replies_30d: int = 0
    voice_calls_completed_30d: int = 0
    website_visits_30d: int = 0
    doc_downloads_30d: int = 0
    is_prior_investor: bool = False
    is_referral: bool = False
    has_1031_exchange: bool = False
    deployment_deadline_days: Optional[int] = None


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Composite investor score with its per-dimension sub-scores."""

    total: int
    accreditation: int
    check_size_fit: int
    asset_alignment: int
    engagement: int
    behavioral: int
    relationship: int
    urgency: int
    tier: Tier

    def dimensions(self) -> Dict[str, int]:
        return {
            "accreditation": self.accreditation,
            "check_size_fit": self.check_size_fit,
            "asset_alignment": self.asset_alignment,
            "engagement": self.engagement,
            "behavioral": self.behavioral,
            "relationship": self.relationship,
            "urgency": self.urgency,
        }

    def as_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {"total": self.total, "tier": self.tier}
        payload.update(self.dimensions())
        return payload


__all__ = [
    "OfferingType",
    "AccreditedStatus",
    "HospitalityExperience",
    "Severity",
    "Tier",
    "OFFERING_TYPES",
    "ACCREDITED_STATUSES",
    "HOSPITALITY_EXPERIENCE_LEVELS",
    "ComplianceCheckInput",
    "ComplianceViolation",
    "ComplianceWarning",
    "ComplianceCheckResult",
    "InvestorScoreInput",
    "ScoreBreakdown",
]
