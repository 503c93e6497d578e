"""
Disclaimer templates and broker-dealer boundary checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

UNSUBSCRIBE_PLACEHOLDER = "{{unsubscribe_link}}"
DEFAULT_FIRM_NAME = "[FIRM]"

CHANNELS = ("email_footer", "voice_opening", "voice_closing", "sms")

# Actions reserved to registered broker-dealers; the platform must never perform them.
BROKER_DEALER_PROHIBITED_ACTIONS: FrozenSet[str] = frozenset(
    {
        "negotiate_terms",
        "handle_funds",
        "make_recommendation",
        "provide_valuation",
        "receive_commission",
        "execute_transaction",
    }
)


@dataclass(frozen=True, slots=True)
class DisclaimerTemplates:
    """Channel disclaimers rendered for a given firm."""

    firm_name: str = DEFAULT_FIRM_NAME

    @property
    def email_footer(self) -> str:
        return (
            "---\n"
            "This communication is for informational purposes only and does not constitute an offer to sell "
            "or a solicitation of an offer to buy any security. Securities are offered only to qualified "
            f"investors through official offering documents. {self.firm_name} is not a registered "
            "broker-dealer. Past performance does not guarantee future results. All investments carry risk "
            "including the potential loss of principal.\n"
            "\n"
            f"To opt out of future communications, click here: {UNSUBSCRIBE_PLACEHOLDER}"
        )

    @property
    def voice_opening(self) -> str:
        return (
            "This call is being recorded for quality and compliance purposes. I'm reaching out on behalf of "
            f"{self.firm_name} regarding a hospitality investment opportunity. This is not a solicitation to "
            "buy securities, and any investment decision should be made only after reviewing the full "
            "offering documents with your own advisors. May I continue?"
        )

    @property
    def voice_closing(self) -> str:
        return (
            f"Thank you for your time. As a reminder, {self.firm_name} is not a registered broker-dealer, "
            "and nothing discussed today constitutes investment advice or a solicitation. Any investment is "
            "subject to the terms in the private placement memorandum."
        )

    @property
    def sms(self) -> str:
        return f"Msg from {self.firm_name}. Not investment advice. Reply STOP to opt out."

    def for_channel(self, channel: str) -> str:
        if channel not in CHANNELS:
            raise KeyError(f"Unknown disclaimer channel '{channel}'.")
        return getattr(self, channel)

    def as_dict(self) -> Dict[str, str]:
        return {channel: self.for_channel(channel) for channel in CHANNELS}


def append_compliance_footer(
    content: str,
    unsubscribe_link: str,
    *,
    templates: Optional[DisclaimerTemplates] = None,
) -> str:
    """Append the email footer, with the unsubscribe link filled in, to `content`."""

    footer = (templates or DisclaimerTemplates()).email_footer.replace(UNSUBSCRIBE_PLACEHOLDER, unsubscribe_link, 1)
    return f"{content}\n\n{footer}"


def is_broker_dealer_safe(action: str) -> bool:
    """Return True if `action` stays outside broker-dealer-exclusive functions."""
    return action not in BROKER_DEALER_PROHIBITED_ACTIONS


__all__ = [
    "BROKER_DEALER_PROHIBITED_ACTIONS",
    "CHANNELS",
    "DEFAULT_FIRM_NAME",
    "DisclaimerTemplates",
    "UNSUBSCRIBE_PLACEHOLDER",
    "append_compliance_footer",
    "is_broker_dealer_safe",
]
