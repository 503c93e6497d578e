from hotel_capital.compliance.rules import check_compliance
from hotel_capital.config.settings import Settings
from hotel_capital.scoring.engine import calculate_investor_score
from hotel_capital.services.investors import (
    DealTerms,
    EngagementCounts,
    InvestorProfile,
    build_compliance_input,
    build_score_input,
    rank_investors,
)


def make_profile(**overrides) -> InvestorProfile:
    profile = InvestorProfile(
        accredited_status="SELF_CERTIFIED",
        check_size_min=250_000,
        check_size_max=750_000,
        asset_class_prefs=["Hospitality"],
        prior_hotel_investments=2,
        hospitality_experience="ACTIVE_LP",
    )
    for key, value in overrides.items():
        setattr(profile, key, value)
    return profile


def test_deal_target_is_share_of_raise():
    deal = DealTerms(minimum_investment=50_000, total_raise=12_000_000)
    data = build_score_input(make_profile(), deal)
    assert data.deal_minimum == 50_000
    assert data.deal_target == 600_000


def test_defaults_without_deal():
    data = build_score_input(make_profile())
    assert data.deal_minimum == 100_000
    assert data.deal_target == 500_000


def test_custom_divisor_from_settings():
    deal = DealTerms(minimum_investment=50_000, total_raise=12_000_000)
    data = build_score_input(make_profile(), deal, settings=Settings(target_raise_divisor=10))
    assert data.deal_target == 1_200_000


def test_source_and_tags_map_to_flags():
    data = build_score_input(make_profile(source="PRIOR_INVESTOR", tags=["1031_exchange", "texas"]))
    assert data.is_prior_investor
    assert not data.is_referral
    assert data.has_1031_exchange

    referral = build_score_input(make_profile(source="REFERRAL"))
    assert referral.is_referral
    assert not referral.is_prior_investor
    assert not referral.has_1031_exchange


def test_engagement_counts_flow_through():
    engagement = EngagementCounts(email_opens=4, email_clicks=1, email_replies=1, voice_calls_completed=1)
    data = build_score_input(make_profile(), engagement=engagement)
    assert (data.email_opens_30d, data.email_clicks_30d, data.email_replies_30d) == (4, 1, 1)
    assert data.voice_calls_completed_30d == 1
    assert data.website_visits_30d == 0
    assert data.doc_downloads_30d == 0
    assert calculate_investor_score(data).engagement == 67


def test_compliance_input_for_unknown_recipient():
    check = build_compliance_input("Hello", subject="Update")
    assert check.offering_type == "REG_D_506B"
    assert check.investor_has_prior_relationship is False
    assert check.investor_opted_out is False
    assert check.investor_accredited_status == "UNVERIFIED"
    assert "506B_PRIOR_RELATIONSHIP" in check_compliance(check).rule_ids()


def test_compliance_input_uses_profile():
    profile = make_profile(prior_relationship=True, opted_out=True, accredited_status="NOT_ACCREDITED")
    check = build_compliance_input("Hello", offering_type="REG_D_506C", profile=profile)
    assert check.investor_has_prior_relationship
    assert check.investor_opted_out
    assert check_compliance(check).rule_ids() == ["OPT_OUT_RESPECTED", "506C_ACCREDITED_ONLY"]


def test_rank_investors_orders_by_total_and_keeps_ties_stable():
    profiles = {
        "cold": make_profile(accredited_status="NOT_ACCREDITED", check_size_min=None, check_size_max=None),
        "warm": make_profile(),
        "warm-twin": make_profile(),
        "hot": make_profile(accredited_status="INSTITUTIONAL", source="REFERRAL"),
    }
    scored = [(key, calculate_investor_score(build_score_input(profile))) for key, profile in profiles.items()]
    ranked = [key for key, _ in rank_investors(scored)]
    assert ranked == ["hot", "warm", "warm-twin", "cold"]
