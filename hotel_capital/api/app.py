"""
FastAPI application exposing the compliance and scoring engines.

The service is stateless: callers supply investor/deal context in the
request body and persist whatever they need from the response.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

load_dotenv()

logger = logging.getLogger("hotel_capital.api.app")
if not logging.getLogger().handlers:
    logging.basicConfig(level=logging.INFO)

from hotel_capital import get_version
from hotel_capital.compliance.disclaimers import CHANNELS, append_compliance_footer, is_broker_dealer_safe
from hotel_capital.compliance.rules import check_compliance
from hotel_capital.config.settings import Settings, load_settings
from hotel_capital.scoring.engine import calculate_investor_score
from hotel_capital.services.investors import InvestorProfile
from hotel_capital.services.outreach import check_enrollment
from hotel_capital.services.types import (
    AccreditedStatus,
    ComplianceCheckInput,
    HospitalityExperience,
    InvestorScoreInput,
    OfferingType,
)

from .schema import serialize, serialize_compliance_result, serialize_score


class ComplianceCheckRequest(BaseModel):
    content: str
    subject: Optional[str] = None
    offering_type: OfferingType = "REG_D_506B"
    investor_has_prior_relationship: bool = False
    investor_opted_out: bool = False
    investor_accredited_status: AccreditedStatus = "UNVERIFIED"


class FooterRequest(BaseModel):
    content: str
    unsubscribe_link: str


class ScoreRequest(BaseModel):
    accredited_status: AccreditedStatus
    check_size_min: Optional[float] = Field(None, ge=0)
    check_size_max: Optional[float] = Field(None, ge=0)
    deal_minimum: Optional[float] = Field(None, gt=0)
    deal_target: Optional[float] = Field(None, gt=0)
    asset_class_prefs: List[str] = Field(default_factory=list)
    prior_hotel_investments: int = Field(0, ge=0)
    hospitality_experience: HospitalityExperience = "NONE"
    email_opens_30d: int = Field(0, ge=0)
    email_clicks_30d: int = Field(0, ge=0)
    email_replies_30d: int = Field(0, ge=0)
    voice_calls_completed_30d: int = Field(0, ge=0)
    website_visits_30d: int = Field(0, ge=0)
    doc_downloads_30d: int = Field(0, ge=0)
    is_prior_investor: bool = False
    is_referral: bool = False
    has_1031_exchange: bool = False
    deployment_deadline_days: Optional[int] = None


class EligibilityRequest(BaseModel):
    offering_type: OfferingType
    prior_relationship: bool = False
    opted_out: bool = False
    do_not_contact: bool = False
    active_enrollments: int = Field(0, ge=0)


def _score_input(request: ScoreRequest, settings: Settings) -> InvestorScoreInput:
    return InvestorScoreInput(
        accredited_status=request.accredited_status,
        check_size_min=request.check_size_min,
        check_size_max=request.check_size_max,
        deal_minimum=request.deal_minimum or settings.default_deal_minimum,
        deal_target=request.deal_target or settings.default_deal_target,
        asset_class_prefs=tuple(request.asset_class_prefs),
        prior_hotel_investments=request.prior_hotel_investments,
        hospitality_experience=request.hospitality_experience,
        email_opens_30d=request.email_opens_30d,
        email_clicks_30d=request.email_clicks_30d,
        email_replies_30d=request.email_replies_30d,
        voice_calls_completed_30d=request.voice_calls_completed_30d,
        website_visits_30d=request.website_visits_30d,
        doc_downloads_30d=request.doc_downloads_30d,
        is_prior_investor=request.is_prior_investor,
        is_referral=request.is_referral,
        has_1031_exchange=request.has_1031_exchange,
        deployment_deadline_days=request.deployment_deadline_days,
    )


def create_api(settings: Settings | None = None) -> FastAPI:
    """
    Build a FastAPI app exposing the decision engines.

    Args:
        settings: Optional pre-built settings (useful for tests).

    Returns:
        FastAPI instance with routes registered.
    """

    settings = settings or load_settings()
    templates = settings.disclaimers()

    app = FastAPI(title="Hotel Capital Decision Engines", version=get_version())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def root() -> dict:
        """Health endpoint for quick status checks."""

        return {"status": "ok", "version": get_version()}

    @app.post("/compliance/check")
    def compliance_check(request: ComplianceCheckRequest) -> Dict[str, Any]:
        result = check_compliance(
            ComplianceCheckInput(
                content=request.content,
                subject=request.subject,
                offering_type=request.offering_type,
                investor_has_prior_relationship=request.investor_has_prior_relationship,
                investor_opted_out=request.investor_opted_out,
                investor_accredited_status=request.investor_accredited_status,
            )
        )
        return serialize_compliance_result(result)

    @app.get("/compliance/disclaimers")
    def list_disclaimers() -> Dict[str, str]:
        return templates.as_dict()

    @app.get("/compliance/disclaimers/{channel}")
    def get_disclaimer(channel: str) -> Dict[str, str]:
        if channel not in CHANNELS:
            raise HTTPException(status_code=404, detail=f"Unknown disclaimer channel '{channel}'")
        return {"channel": channel, "text": templates.for_channel(channel)}

    @app.post("/compliance/footer")
    def append_footer(request: FooterRequest) -> Dict[str, str]:
        return {"content": append_compliance_footer(request.content, request.unsubscribe_link, templates=templates)}

    @app.get("/compliance/broker-dealer/{action}")
    def broker_dealer_check(action: str) -> Dict[str, Any]:
        safe = is_broker_dealer_safe(action)
        if not safe:
            logger.warning("Broker-dealer restricted action requested", extra={"action": action})
        return {"action": action, "safe": safe}

    @app.post("/scoring/score")
    def score_investor(request: ScoreRequest) -> Dict[str, Any]:
        return serialize_score(calculate_investor_score(_score_input(request, settings)))

    @app.post("/outreach/eligibility")
    def enrollment_eligibility(request: EligibilityRequest) -> Dict[str, Any]:
        profile = InvestorProfile(
            prior_relationship=request.prior_relationship,
            opted_out=request.opted_out,
            do_not_contact=request.do_not_contact,
        )
        decision = check_enrollment(
            profile,
            request.offering_type,
            request.active_enrollments,
            max_active=settings.max_active_sequences,
        )
        return serialize(decision)

    return app


app = create_api()

__all__ = ["create_api", "app"]
