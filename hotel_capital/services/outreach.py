"""
Outreach gate coordinating enrollment checks, compliance review and footers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from hotel_capital.compliance.disclaimers import append_compliance_footer
from hotel_capital.compliance.rules import check_compliance
from hotel_capital.config.settings import Settings
from hotel_capital.services.investors import InvestorProfile, build_compliance_input
from hotel_capital.services.types import ComplianceCheckResult, OfferingType

logger = logging.getLogger("hotel_capital.services.outreach")

OPTED_OUT_REASON = "Investor opted out or DNC"
PRIOR_RELATIONSHIP_REASON = "506(b) requires prior relationship"


@dataclass(frozen=True, slots=True)
class EnrollmentDecision:
    enrolled: bool
    reason: Optional[str] = None


@dataclass(slots=True)
class OutboundReview:
    """Result of reviewing one outbound email."""

    sendable: bool
    result: ComplianceCheckResult
    final_text: Optional[str] = None


def check_enrollment(
    profile: InvestorProfile,
    offering_type: OfferingType,
    active_enrollments: int,
    *,
    max_active: int = 2,
) -> EnrollmentDecision:
    """Structural pre-checks before enrolling an investor in a sequence."""

    if profile.opted_out or profile.do_not_contact:
        return EnrollmentDecision(enrolled=False, reason=OPTED_OUT_REASON)
    if offering_type == "REG_D_506B" and not profile.prior_relationship:
        return EnrollmentDecision(enrolled=False, reason=PRIOR_RELATIONSHIP_REASON)
    if active_enrollments >= max_active:
        return EnrollmentDecision(enrolled=False, reason=f"Max active sequences reached ({max_active})")
    return EnrollmentDecision(enrolled=True)


@dataclass(slots=True)
class OutreachGate:
    """Facade that reviews outbound messages for a configured firm."""

    settings: Settings = field(default_factory=Settings)

    def check_enrollment(
        self,
        profile: InvestorProfile,
        offering_type: OfferingType,
        active_enrollments: int,
    ) -> EnrollmentDecision:
        return check_enrollment(
            profile,
            offering_type,
            active_enrollments,
            max_active=self.settings.max_active_sequences,
        )

    def review_email(
        self,
        content: str,
        unsubscribe_link: str,
        *,
        subject: Optional[str] = None,
        offering_type: Optional[OfferingType] = None,
        profile: Optional[InvestorProfile] = None,
    ) -> OutboundReview:
        """
        Run the compliance check and, if it passes, append the email footer.

        The check sees the body as written; the footer is added afterwards,
        so missing-disclaimer warnings still reflect the author's draft.
        """

        check = build_compliance_input(content, subject=subject, offering_type=offering_type, profile=profile)
        result = check_compliance(check)
        if not result.passed:
            logger.warning(
                "Outbound email blocked",
                extra={"rules": result.rule_ids(), "offering_type": check.offering_type},
            )
            return OutboundReview(sendable=False, result=result)

        final_text = append_compliance_footer(content, unsubscribe_link, templates=self.settings.disclaimers())
        return OutboundReview(sendable=True, result=result, final_text=final_text)


__all__ = ["EnrollmentDecision", "OutboundReview", "OutreachGate", "check_enrollment"]
