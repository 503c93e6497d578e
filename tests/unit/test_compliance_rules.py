import logging

import pytest

from hotel_capital.compliance import rules
from hotel_capital.compliance.disclaimers import DisclaimerTemplates, append_compliance_footer
from hotel_capital.compliance.rules import build_searchable_text, check_compliance
from hotel_capital.services.types import ComplianceCheckInput

CLEAN_BODY = (
    "Sharing an update on the Austin select-service hotel offering. "
    "Past performance does not guarantee future results. "
    "Acme Hotel Partners is not a registered broker-dealer."
)


def make_check(
    content: str = CLEAN_BODY,
    *,
    subject: str | None = None,
    offering_type: str = "REG_D_506B",
    prior_relationship: bool = True,
    opted_out: bool = False,
    accredited_status: str = "THIRD_PARTY_VERIFIED",
) -> ComplianceCheckInput:
    return ComplianceCheckInput(
        content=content,
        subject=subject,
        offering_type=offering_type,
        investor_has_prior_relationship=prior_relationship,
        investor_opted_out=opted_out,
        investor_accredited_status=accredited_status,
    )


def violation(result, rule_id):
    matches = [v for v in result.violations if v.rule == rule_id]
    assert matches, f"expected violation {rule_id}, got {result.rule_ids()}"
    return matches[0]


def test_clean_content_passes_without_warnings():
    result = check_compliance(make_check())
    assert result.passed
    assert result.violations == []
    assert result.warnings == []


def test_opted_out_investor_always_blocked():
    result = check_compliance(make_check(opted_out=True))
    assert not result.passed
    found = violation(result, "OPT_OUT_RESPECTED")
    assert found.severity == "CRITICAL"
    assert found.matched_text is None


def test_opt_out_blocks_even_empty_content():
    result = check_compliance(make_check("", opted_out=True, offering_type="REG_D_506C"))
    assert result.rule_ids() == ["OPT_OUT_RESPECTED"]


def test_506b_requires_prior_relationship():
    result = check_compliance(make_check(prior_relationship=False))
    assert violation(result, "506B_PRIOR_RELATIONSHIP").severity == "CRITICAL"

    related = check_compliance(make_check(prior_relationship=True))
    assert "506B_PRIOR_RELATIONSHIP" not in related.rule_ids()


def test_506c_blocks_non_accredited_only():
    result = check_compliance(make_check(offering_type="REG_D_506C", accredited_status="NOT_ACCREDITED"))
    assert violation(result, "506C_ACCREDITED_ONLY").severity == "CRITICAL"

    unverified = check_compliance(make_check(offering_type="REG_D_506C", accredited_status="UNVERIFIED"))
    assert unverified.passed

    # 506(c) allows general solicitation, so no relationship is needed.
    cold = check_compliance(
        make_check(offering_type="REG_D_506C", prior_relationship=False, accredited_status="SELF_CERTIFIED")
    )
    assert cold.passed


def test_non_accredited_is_not_a_506b_violation():
    result = check_compliance(make_check(accredited_status="NOT_ACCREDITED"))
    assert "506C_ACCREDITED_ONLY" not in result.rule_ids()


def test_gates_are_reported_in_order_and_do_not_short_circuit():
    result = check_compliance(make_check("This is risk-free.", opted_out=True, prior_relationship=False))
    assert result.rule_ids() == ["OPT_OUT_RESPECTED", "506B_PRIOR_RELATIONSHIP", "NO_RISK_FREE"]


def test_guaranteed_returns_flagged_with_matched_text():
    result = check_compliance(make_check("We offer guaranteed returns on every unit. " + CLEAN_BODY))
    found = violation(result, "NO_PERFORMANCE_GUARANTEE")
    assert found.severity == "HIGH"
    assert found.matched_text == "guaranteed return"


def test_multiple_prohibited_patterns_all_reported():
    body = "This risk-free, once-in-a-lifetime hotel is a sure bet. " + CLEAN_BODY
    result = check_compliance(make_check(body))
    assert result.rule_ids() == ["NO_RISK_FREE", "NO_HYPE", "NO_CERTAINTY"]
    assert [v.matched_text for v in result.violations] == ["risk-free", "once-in-a-lifetime", "sure bet"]


def test_both_risk_free_descriptors_fire_independently():
    result = check_compliance(make_check("A risk-free and no-risk position. " + CLEAN_BODY))
    risk = [v for v in result.violations if v.rule == "NO_RISK_FREE"]
    assert [v.matched_text for v in risk] == ["risk-free", "no-risk"]
    assert [v.message for v in risk] == ["Claims risk-free investment", "Claims no risk"]


def test_language_scan_is_case_insensitive_and_keeps_original_case():
    result = check_compliance(make_check("YOU SHOULD INVEST now. " + CLEAN_BODY))
    assert violation(result, "NO_INVESTMENT_ADVICE").matched_text == "YOU SHOULD INVEST"


@pytest.mark.parametrize(
    "phrase, rule_id",
    [
        ("You can't lose with this asset.", "NO_LOSS_PREVENTION"),
        ("This is an exclusive opportunity for our partners.", "NO_PRESSURE"),
        ("A limited time offer for the Miami property.", "NO_PRESSURE"),
        ("We recommend you invest before closing.", "NO_RECOMMENDATION"),
        ("It is a certain win for the portfolio.", "NO_CERTAINTY"),
    ],
)
def test_prohibited_phrases(phrase, rule_id):
    result = check_compliance(make_check(f"{phrase} {CLEAN_BODY}"))
    assert rule_id in result.rule_ids()
    assert not result.passed


def test_subject_is_scanned_first():
    result = check_compliance(make_check("Our limited time offer closes Friday. " + CLEAN_BODY, subject="Limited offer"))
    assert violation(result, "NO_PRESSURE").matched_text == "Limited offer"


def test_searchable_text_joins_subject_then_content():
    assert build_searchable_text("body", "Subject") == "Subject body"
    assert build_searchable_text("body") == " body"


def test_unqualified_return_figure_is_flagged():
    result = check_compliance(make_check("This deal delivers a 12% IRR. " + CLEAN_BODY))
    found = violation(result, "QUALIFY_RETURN_PROJECTIONS")
    assert found.severity == "HIGH"
    assert found.matched_text == "12% IRR"


def test_qualified_return_figure_passes():
    result = check_compliance(make_check("This deal delivers a projected 12% IRR. " + CLEAN_BODY))
    assert "QUALIFY_RETURN_PROJECTIONS" not in result.rule_ids()
    assert result.passed


def test_return_qualifier_may_appear_anywhere():
    result = check_compliance(make_check("9% yield in year three.", subject="Estimated figures inside"))
    assert "QUALIFY_RETURN_PROJECTIONS" not in result.rule_ids()


def test_return_match_covers_decimal_and_cash_on_cash():
    result = check_compliance(make_check("Expect 8.5 % cash-on-cash from stabilisation. " + CLEAN_BODY))
    assert violation(result, "QUALIFY_RETURN_PROJECTIONS").matched_text == "8.5 % cash-on-cash"


def test_missing_disclaimers_are_warnings_only():
    result = check_compliance(make_check("Quick note about the Denver hotel."))
    assert result.passed
    assert result.violations == []
    assert [w.rule for w in result.warnings] == ["PAST_PERFORMANCE_DISCLAIMER", "BROKER_DEALER_DISCLAIMER"]


def test_alternate_disclaimer_wording_is_accepted():
    body = "Past performance is no indicator of future results. We are not acting as a broker."
    result = check_compliance(make_check(body))
    assert result.warnings == []


def test_email_footer_satisfies_required_elements():
    content = append_compliance_footer("Quick note about the Denver hotel.", "https://example.com/u/1",
                                       templates=DisclaimerTemplates(firm_name="Acme Hotel Partners"))
    result = check_compliance(make_check(content))
    assert result.passed
    assert result.warnings == []


def test_passed_matches_violation_count():
    checks = [
        make_check(),
        make_check(opted_out=True),
        make_check("Quick note."),
        make_check("Guaranteed income, risk free!", prior_relationship=False),
        make_check("15% return", offering_type="REG_D_506C", accredited_status="NOT_ACCREDITED"),
    ]
    for check in checks:
        result = check_compliance(check)
        assert result.passed == (len(result.violations) == 0)


def test_repeated_checks_are_identical():
    check = make_check("Risk-free 10% yield!", subject="Limited opportunity", prior_relationship=False)
    first = check_compliance(check)
    second = check_compliance(check)
    assert first == second


def test_custom_rule_tables_replace_defaults():
    result = check_compliance(make_check("This is risk-free."), prohibited=(), required=())
    assert result.passed
    assert result.warnings == []


def test_outcome_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="hotel_capital.compliance.rules")
    check_compliance(make_check(offering_type="REG_D_506C", opted_out=True))
    record = next(r for r in caplog.records if r.getMessage() == "Compliance check completed")
    assert record.passed is False
    assert record.violation_count == 1
    assert record.offering_type == "REG_D_506C"


def test_logging_failure_does_not_change_result(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("log sink down")

    monkeypatch.setattr(rules.logger, "info", boom)
    result = check_compliance(make_check(opted_out=True))
    assert result.rule_ids() == ["OPT_OUT_RESPECTED"]
