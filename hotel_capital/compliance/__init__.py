"""
Compliance rule definitions and evaluators.

Modules under this package gate every investor-facing communication and
render the disclaimers that must accompany it.
"""

from .disclaimers import (
    BROKER_DEALER_PROHIBITED_ACTIONS,
    DisclaimerTemplates,
    append_compliance_footer,
    is_broker_dealer_safe,
)
from .rules import PROHIBITED_PATTERNS, REQUIRED_ELEMENTS, ComplianceRule, check_compliance

__all__ = [
    "BROKER_DEALER_PROHIBITED_ACTIONS",
    "ComplianceRule",
    "DisclaimerTemplates",
    "PROHIBITED_PATTERNS",
    "REQUIRED_ELEMENTS",
    "append_compliance_footer",
    "check_compliance",
    "is_broker_dealer_safe",
]
