"""
Service layer: engine input/result types and caller-side helpers.

This package exposes the primary classes via lazy imports to avoid circular
dependencies (e.g., compliance rules importing `hotel_capital.services.types`).
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict

__all__ = [
    "ComplianceCheckInput",
    "ComplianceCheckResult",
    "ComplianceViolation",
    "ComplianceWarning",
    "InvestorScoreInput",
    "ScoreBreakdown",
    "InvestorProfile",
    "DealTerms",
    "EngagementCounts",
    "build_score_input",
    "build_compliance_input",
    "rank_investors",
    "EnrollmentDecision",
    "OutboundReview",
    "OutreachGate",
    "check_enrollment",
]

_MODULE_ATTRS: Dict[str, str] = {
    "ComplianceCheckInput": "hotel_capital.services.types",
    "ComplianceCheckResult": "hotel_capital.services.types",
    "ComplianceViolation": "hotel_capital.services.types",
    "ComplianceWarning": "hotel_capital.services.types",
    "InvestorScoreInput": "hotel_capital.services.types",
    "ScoreBreakdown": "hotel_capital.services.types",
    "InvestorProfile": "hotel_capital.services.investors",
    "DealTerms": "hotel_capital.services.investors",
    "EngagementCounts": "hotel_capital.services.investors",
    "build_score_input": "hotel_capital.services.investors",
    "build_compliance_input": "hotel_capital.services.investors",
    "rank_investors": "hotel_capital.services.investors",
    "EnrollmentDecision": "hotel_capital.services.outreach",
    "OutboundReview": "hotel_capital.services.outreach",
    "OutreachGate": "hotel_capital.services.outreach",
    "check_enrollment": "hotel_capital.services.outreach",
}


def __getattr__(name: str) -> Any:
    module_path = _MODULE_ATTRS.get(name)
    if not module_path:
        raise AttributeError(f"module 'hotel_capital.services' has no attribute '{name}'")  # pragma: no cover
    module = import_module(module_path)
    return getattr(module, name)


def __dir__() -> list[str]:  # pragma: no cover - convenience helper
    return sorted(__all__)
