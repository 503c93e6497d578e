"""
Rule-based compliance filter for investor-facing communications.

Every outbound message is checked against Reg D 506(b)/506(c) solicitation
rules, investor opt-out status and FINRA-safe language before it is sent.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from hotel_capital.services.types import (
    ComplianceCheckInput,
    ComplianceCheckResult,
    ComplianceViolation,
    ComplianceWarning,
    Severity,
)

logger = logging.getLogger("hotel_capital.compliance.rules")


@dataclass(frozen=True, slots=True)
class ComplianceRule:
    """Pattern-based compliance rule."""

    rule_id: str
    pattern: re.Pattern[str]
    message: str
    severity: Severity = "HIGH"

    def search(self, text: str) -> Optional[str]:
        """Return the first matched substring, or None."""
        match = self.pattern.search(text)
        return match.group(0) if match else None


def _rule(rule_id: str, pattern: str, message: str) -> ComplianceRule:
    return ComplianceRule(rule_id=rule_id, pattern=re.compile(pattern, re.IGNORECASE), message=message)


# Order matters: violations are reported in table order.
PROHIBITED_PATTERNS: Tuple[ComplianceRule, ...] = (
    _rule(
        "NO_PERFORMANCE_GUARANTEE",
        r"guarante(?:e|ed|es|ing)\s+(?:return|profit|income|yield)",
        "Contains performance guarantee language",
    ),
    _rule("NO_RISK_FREE", r"risk[- ]?free", "Claims risk-free investment"),
    _rule(
        "NO_INVESTMENT_ADVICE",
        r"you\s+(?:should|must|need\s+to)\s+invest",
        "Contains investment advice/recommendation language",
    ),
    _rule("NO_LOSS_PREVENTION", r"(?:can't|cannot|won't)\s+lose", "Implies principal protection"),
    _rule("NO_HYPE", r"once[- ]?in[- ]?a[- ]?lifetime", "Uses hype language"),
    _rule(
        "NO_PRESSURE",
        r"(?:exclusive|limited)\s+(?:time\s+)?(?:offer|opportunity)",
        "Creates artificial urgency/pressure",
    ),
    _rule("NO_RISK_FREE", r"no[- ]?risk", "Claims no risk"),
    _rule("NO_CERTAINTY", r"(?:sure|certain)\s+(?:thing|bet|win)", "Implies certainty of returns"),
    _rule("NO_RECOMMENDATION", r"we\s+recommend\s+(?:you\s+)?invest", "Makes investment recommendation"),
)

REQUIRED_ELEMENTS: Tuple[ComplianceRule, ...] = (
    _rule(
        "PAST_PERFORMANCE_DISCLAIMER",
        r"past\s+performance\s+(?:does\s+not|is\s+no)\s+(?:guarantee|indicator)",
        "Missing past performance disclaimer",
    ),
    _rule(
        "BROKER_DEALER_DISCLAIMER",
        r"(?:not\s+a?\s*(?:registered\s+)?broker[- ]?dealer|not\s+acting\s+as\s+a?\s*broker)",
        "Missing broker-dealer disclaimer",
    ),
)

RETURN_MENTION_PATTERN = re.compile(r"(\d+\.?\d*)\s*%\s*(return|irr|yield|cash[- ]on[- ]cash)", re.IGNORECASE)
RETURN_QUALIFIER_PATTERN = re.compile(r"(?:projected|targeted|estimated|anticipated)", re.IGNORECASE)

QUALIFY_RETURNS_MESSAGE = 'Return references must be qualified as "projected" or "targeted"'


def build_searchable_text(content: str, subject: Optional[str] = None) -> str:
    """Join subject and body the way every scan sees them."""
    return f"{subject or ''} {content}"


def _gate_violations(check: ComplianceCheckInput) -> List[ComplianceViolation]:
    violations: List[ComplianceViolation] = []

    if check.investor_opted_out:
        violations.append(
            ComplianceViolation(
                rule="OPT_OUT_RESPECTED",
                severity="CRITICAL",
                message="Investor has opted out of communications",
            )
        )

    if check.offering_type == "REG_D_506B" and not check.investor_has_prior_relationship:
        violations.append(
            ComplianceViolation(
                rule="506B_PRIOR_RELATIONSHIP",
                severity="CRITICAL",
                message="Reg D 506(b) requires substantive pre-existing relationship",
            )
        )

    if check.offering_type == "REG_D_506C" and check.investor_accredited_status == "NOT_ACCREDITED":
        violations.append(
            ComplianceViolation(
                rule="506C_ACCREDITED_ONLY",
                severity="CRITICAL",
                message="Reg D 506(c) requires verified accredited investor status",
            )
        )

    return violations


def _log_outcome(result: ComplianceCheckResult, offering_type: str) -> None:
    try:
        logger.info(
            "Compliance check completed",
            extra={
                "passed": result.passed,
                "violation_count": len(result.violations),
                "warning_count": len(result.warnings),
                "offering_type": offering_type,
            },
        )
    except Exception:  # pragma: no cover - logging must never change the outcome
        pass


def check_compliance(
    check: ComplianceCheckInput,
    *,
    prohibited: Iterable[ComplianceRule] = PROHIBITED_PATTERNS,
    required: Iterable[ComplianceRule] = REQUIRED_ELEMENTS,
) -> ComplianceCheckResult:
    """
    Evaluate a single outbound message against the full rule set.

    Structural gates (opt-out, 506(b) relationship, 506(c) accreditation) run
    first, then the language scans. Nothing short-circuits: every applicable
    violation and warning is collected.

    Args:
        check: Content plus investor/offering context.
        prohibited: Prohibited-language rules; each match is a violation.
        required: Required-element rules; each absence is a warning.

    Returns:
        ComplianceCheckResult whose `passed` is True iff no violations.
    """

    text = build_searchable_text(check.content, check.subject)
    violations = _gate_violations(check)
    warnings: List[ComplianceWarning] = []

    for rule in prohibited:
        matched = rule.search(text)
        if matched is not None:
            violations.append(
                ComplianceViolation(
                    rule=rule.rule_id,
                    severity=rule.severity,
                    message=rule.message,
                    matched_text=matched,
                )
            )

    for rule in required:
        if rule.search(text) is None:
            warnings.append(ComplianceWarning(rule=rule.rule_id, message=rule.message))

    return_mention = RETURN_MENTION_PATTERN.search(text)
    if return_mention and not RETURN_QUALIFIER_PATTERN.search(text):
        violations.append(
            ComplianceViolation(
                rule="QUALIFY_RETURN_PROJECTIONS",
                severity="HIGH",
                message=QUALIFY_RETURNS_MESSAGE,
                matched_text=return_mention.group(0),
            )
        )

    result = ComplianceCheckResult(violations=violations, warnings=warnings)
    _log_outcome(result, check.offering_type)
    return result


__all__ = [
    "ComplianceRule",
    "PROHIBITED_PATTERNS",
    "REQUIRED_ELEMENTS",
    "RETURN_MENTION_PATTERN",
    "RETURN_QUALIFIER_PATTERN",
    "build_searchable_text",
    "check_compliance",
]
