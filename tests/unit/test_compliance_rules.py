import dataclasses

import pytest

from promopack.compliance.rules import RULES, check_project_compliance, evaluate_claim, score_issues, suggestion_for
from promopack.services.types import ClaimInput, ComplianceIssue


def categories(result):
    return [issue.category for issue in result.issues]


def matched(result, category=None):
    return [issue.matched_text for issue in result.issues if category is None or issue.category == category]


def make_issue(kind: str) -> ComplianceIssue:
    return ComplianceIssue(kind=kind, category="Test", message="test", matched_text="x")


def test_rule_table_order_and_kinds():
    assert [(rule.category, rule.kind) for rule in RULES] == [
        ("Absolute Claims", "error"),
        ("Superlative Claims", "error"),
        ("Off-Label Promotion", "error"),
        ("Missing Qualifiers", "warning"),
        ("Outcome Promises", "error"),
        ("Emotional Appeals", "warning"),
        ("Safety Balance", "error"),
        ("Statistics Without Context", "warning"),
        ("Missing Reference", "info"),
    ]


def test_clean_claim_is_compliant_with_full_score():
    result = evaluate_claim("Drug X is indicated for adults with hypertension.", "c1")
    assert result.claim_id == "c1"
    assert result.issues == ()
    assert result.risk_level == "compliant"
    assert result.compliance_score == 100


def test_empty_and_non_english_text_are_compliant():
    for text in ("", "Toujours efficace chez l'adulte"):
        result = evaluate_claim(text, "c-empty")
        assert result.risk_level == "compliant"
        assert result.compliance_score == 100


def test_single_error_is_medium_risk():
    result = evaluate_claim("Drug X is the best option for adults.", "c2")
    assert categories(result) == ["Superlative Claims"]
    assert result.risk_level == "medium"
    assert result.compliance_score == 60
    assert result.issues[0].suggestion == (
        'Replace "best" with evidence-based language supported by comparative data'
    )


def test_three_distinct_errors_are_high_risk():
    result = evaluate_claim("Drug X is the safest and best choice, better than placebo.", "c3")
    assert matched(result) == ["safest", "best", "better than"]
    assert result.risk_level == "high"
    assert result.compliance_score == 10


def test_duplicate_matches_within_pattern_collapse():
    result = evaluate_claim("always always improves", "c4")
    assert matched(result, "Absolute Claims") == ["always"]
    assert matched(result, "Missing Qualifiers") == ["improves"]
    assert result.risk_level == "medium"
    assert result.compliance_score == 55


def test_dedup_is_case_sensitive():
    result = evaluate_claim("Always and always", "c5")
    assert matched(result) == ["Always", "always"]


def test_score_clamped_at_zero():
    result = evaluate_claim("always never completely totally perfect", "c6")
    assert result.error_count == 5
    assert result.risk_level == "high"
    assert result.compliance_score == 0


def test_absolute_claim_scenario_counts_every_match():
    result = evaluate_claim("Drug X always cures all patients with no side effects", "c7")
    assert [(issue.category, issue.matched_text) for issue in result.issues] == [
        ("Absolute Claims", "always"),
        ("Absolute Claims", "cures"),
        ("Absolute Claims", "all patients"),
        ("Absolute Claims", "no side effects"),
        ("Safety Balance", "no side effects"),
    ]
    assert result.risk_level == "high"
    assert result.compliance_score == 0


def test_qualifier_after_verb_suppresses_warning():
    result = evaluate_claim("This treatment may reduce symptoms in clinical studies", "c8")
    assert result.issues == ()
    assert result.compliance_score == 100


def test_qualifier_before_verb_does_not_suppress_warning():
    # Suppression only looks forward from the flagged verb.
    result = evaluate_claim("In clinical studies, Drug X reduces pain", "c9")
    assert categories(result) == ["Missing Qualifiers"]
    assert result.risk_level == "low"
    assert result.compliance_score == 85


def test_qualifier_on_following_line_does_not_suppress_warning():
    result = evaluate_claim("Drug X reduces pain\nMay cause drowsiness", "c10")
    assert matched(result) == ["reduces"]


def test_info_only_claim_scores_95():
    result = evaluate_claim("Studies show Drug X is well tolerated", "c11")
    assert categories(result) == ["Missing Reference"]
    assert result.issues[0].kind == "info"
    assert result.issues[0].suggestion is None
    assert result.risk_level == "compliant"
    assert result.compliance_score == 95


def test_two_warnings_are_medium_risk():
    result = evaluate_claim("A breakthrough therapy. Act now.", "c12")
    assert matched(result) == ["breakthrough", "Act now"]
    assert result.risk_level == "medium"
    assert result.compliance_score == 65


def test_percentage_needs_context():
    flagged = evaluate_claim("Drug X lowered LDL by 45%.", "c13")
    assert matched(flagged) == ["45%"]
    assert flagged.compliance_score == 85

    with_context = evaluate_claim("45% of patients responded to Drug X", "c14")
    assert with_context.issues == ()

    before_context = evaluate_claim("In the study, 45% responded", "c15")
    assert matched(before_context) == ["45%"]


def test_hundred_percent_is_absolute_and_statistic():
    result = evaluate_claim("100% effective", "c16")
    assert categories(result) == ["Absolute Claims", "Statistics Without Context"]
    assert result.risk_level == "medium"
    assert result.compliance_score == 55


def test_number_one_symbol_is_superlative():
    result = evaluate_claim("The #1 prescribed brand", "c17")
    assert matched(result, "Superlative Claims") == ["#1"]
    assert result.compliance_score == 60


def test_off_label_language_flagged():
    result = evaluate_claim("Used off-label for migraine", "c18")
    assert categories(result) == ["Off-Label Promotion"]


def test_issues_follow_rule_order_and_overlapping_rules_both_fire():
    result = evaluate_claim("Guaranteed to work, a miracle", "c19")
    assert categories(result) == ["Absolute Claims", "Outcome Promises", "Emotional Appeals"]
    assert result.risk_level == "high"
    assert result.compliance_score == 20


def test_result_is_immutable():
    result = evaluate_claim("always", "c20")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.compliance_score = 100


def test_custom_rule_set():
    result = evaluate_claim("always", "c21", rules=())
    assert result.compliance_score == 100


@pytest.mark.parametrize(
    "kinds, expected",
    [
        (["error", "warning", "warning", "warning"], ("medium", 45)),
        (["warning"] * 4, ("medium", 55)),
        (["warning", "info"], ("low", 85)),
        (["info", "info"], ("compliant", 95)),
        ([], ("compliant", 100)),
        (["error"] * 3 + ["warning"] * 2, ("high", 10)),
    ],
)
def test_score_issues_decision_table(kinds, expected):
    assert score_issues(make_issue(kind) for kind in kinds) == expected


def test_suggestions_only_for_selected_categories():
    assert suggestion_for("Outcome Promises", "ensures") == (
        'Replace "ensures" with "may" or "can help" to avoid promising outcomes'
    )
    assert suggestion_for("Emotional Appeals", "miracle") is None
    assert suggestion_for("Off-Label Promotion", "off-label") is None


def test_check_project_compliance_preserves_order():
    results = check_project_compliance(
        [
            ClaimInput(id="a", text="Drug X is the best option"),
            {"id": "b", "text": "Drug X is indicated for adults"},
        ]
    )
    assert [result.claim_id for result in results] == ["a", "b"]
    assert [result.risk_level for result in results] == ["medium", "compliant"]


def test_word_boundaries_use_ascii_rules():
    assert matched(evaluate_claim("本品always有效", "c22")) == ["always"]
    assert matched(evaluate_claim("这是best选择", "c23")) == ["best"]


def test_non_ascii_digits_are_not_percentages():
    result = evaluate_claim("٤٥%x", "c24")
    assert result.issues == ()
    assert result.compliance_score == 100


@pytest.mark.parametrize("separator", ["\r", "\u2028", "\u2029"])
def test_line_separators_end_qualifier_lookahead(separator):
    assert matched(evaluate_claim(f"Drug X reduces pain{separator}may be used", "c25")) == ["reduces"]
    assert matched(evaluate_claim(f"Lowered by 45%{separator}of patients", "c26")) == ["45%"]
