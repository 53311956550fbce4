"""
Rule-based regulatory compliance engine for promotional claims.

Each rule carries one or more case-insensitive patterns drawn from PMCPA and
FDA/OPDP guidance on promotional language. A claim is scanned against every
rule in table order and the resulting issues are reduced to a risk tier and a
0-100 score.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from promopack.services.types import ClaimInput, ComplianceIssue, ComplianceResult, IssueKind, RiskLevel


# Any character except a line terminator (\n, \r, U+2028, U+2029).
_LINE_CHAR = r"[^\n\r\u2028\u2029]"


def _compile(*patterns: str) -> Tuple[re.Pattern[str], ...]:
    return tuple(re.compile(pattern, re.IGNORECASE | re.ASCII) for pattern in patterns)


@dataclass(frozen=True, slots=True)
class ComplianceRule:
    """Pattern-based rule flagging risky promotional language."""

    rule_id: str
    category: str
    kind: IssueKind
    message: str
    patterns: Tuple[re.Pattern[str], ...]

    def find_matches(self, text: str) -> List[str]:
        """Return unique matched substrings, per pattern, in match order."""
        found: List[str] = []
        for pattern in self.patterns:
            # Deduplicate within a pattern only; other patterns may repeat a match.
            found.extend(dict.fromkeys(match.group(0) for match in pattern.finditer(text)))
        return found


RULES: Tuple[ComplianceRule, ...] = (
    ComplianceRule(
        rule_id="claims.absolute",
        category="Absolute Claims",
        kind="error",
        message='Absolute claims are prohibited - use qualified language (e.g., "may help", "in clinical studies")',
        patterns=_compile(
            r"\b(?:always|never|completely|totally|absolutely|guaranteed?|perfect|cure[ds]?|eliminates?)\b|\b100%",
            r"\b(?:all patients?|every patient|everyone)\b",
            r"\bno (?:side effects?|risks?|adverse events?)\b",
        ),
    ),
    ComplianceRule(
        rule_id="claims.superlative",
        category="Superlative Claims",
        kind="error",
        message="Superlative claims require head-to-head comparative data",
        patterns=_compile(
            r"\b(?:best|greatest|most effective|superior|fastest|strongest|safest)\b",
            r"\b(?:better than|more effective than|safer than)\b",
            r"\b(?:number one|leading)\b|#1\b",
        ),
    ),
    ComplianceRule(
        rule_id="claims.off_label",
        category="Off-Label Promotion",
        kind="error",
        message="Possible off-label promotion - ensure claim aligns with approved indications",
        patterns=_compile(
            r"\b(?:unapproved use|off-label|investigational|not (?:yet )?approved)\b",
            r"\bindication not established\b",
        ),
    ),
    ComplianceRule(
        rule_id="claims.missing_qualifier",
        category="Missing Qualifiers",
        kind="warning",
        message='Consider adding qualifiers like "may", "can", or "in clinical studies"',
        # The qualifier must follow the verb; one placed earlier does not count.
        patterns=_compile(
            r"\b(?:reduces?|improves?|increases?|decreases?|prevents?|treats?|helps?)\b"
            rf"(?!{_LINE_CHAR}*\b(?:may|can|might|in clinical (?:studies?|trials?))\b)",
        ),
    ),
    ComplianceRule(
        rule_id="claims.outcome_promise",
        category="Outcome Promises",
        kind="error",
        message="Cannot promise specific outcomes - use evidence-based language",
        patterns=_compile(
            r"\b(?:you will|patients? will|guaranteed to|ensures?|promises?)\b",
            r"\b(?:no more|get rid of|solve)\b",
        ),
    ),
    ComplianceRule(
        rule_id="claims.emotional_appeal",
        category="Emotional Appeals",
        kind="warning",
        message="Avoid overly emotional or urgent language in promotional materials",
        patterns=_compile(
            r"\b(?:breakthrough|revolutionary|miracle|life-changing)\b",
            r"\b(?:don't (?:wait|delay)|act now|limited time)\b",
        ),
    ),
    ComplianceRule(
        rule_id="claims.safety_balance",
        category="Safety Balance",
        kind="error",
        message="All claims must include balanced risk information",
        patterns=_compile(r"\b(?:no (?:risks?|side effects?)|perfectly safe|harmless)\b"),
    ),
    ComplianceRule(
        rule_id="claims.statistics_context",
        category="Statistics Without Context",
        kind="warning",
        message="Provide context for statistical claims (study population, comparator, etc.)",
        patterns=_compile(
            r"\b\d+\.?\d*%"
            rf"(?!{_LINE_CHAR}*\b(?:of patients?|in (?:the )?(?:study|trial|clinical trial)|vs\.?|compared to)\b)",
        ),
    ),
    ComplianceRule(
        rule_id="claims.missing_reference",
        category="Missing Reference",
        kind="info",
        message="Ensure this claim has a clear reference citation",
        patterns=_compile(
            r"\b(?:studies? (?:show|demonstrate|prove)|research (?:shows?|indicates?)|clinical (?:data|evidence))\b",
        ),
    ),
)


def suggestion_for(category: str, matched: str) -> Optional[str]:
    """Return remediation text for a category, if one is defined."""
    suggestions = {
        "Absolute Claims": f'Replace "{matched}" with qualified language like "may help" or "in clinical studies"',
        "Superlative Claims": f'Replace "{matched}" with evidence-based language supported by comparative data',
        "Outcome Promises": f'Replace "{matched}" with "may" or "can help" to avoid promising outcomes',
        "Missing Qualifiers": 'Add qualifiers like "may", "can", or "in clinical studies" before the claim',
        "Safety Balance": "Include balanced risk information and avoid suggesting zero risk",
    }
    return suggestions.get(category)


def score_issues(issues: Iterable[ComplianceIssue]) -> Tuple[RiskLevel, int]:
    """Map issue counts to a risk tier and a clamped 0-100 score."""

    issues = list(issues)
    error_count = sum(1 for issue in issues if issue.kind == "error")
    warning_count = sum(1 for issue in issues if issue.kind == "warning")

    risk_level: RiskLevel
    if error_count >= 2:
        risk_level = "high"
        score = max(0, 40 - error_count * 10)
    elif error_count == 1:
        risk_level = "medium"
        score = 60 - warning_count * 5
    elif warning_count >= 2:
        risk_level = "medium"
        score = 75 - warning_count * 5
    elif warning_count == 1:
        risk_level = "low"
        score = 85
    else:
        risk_level = "compliant"
        # Info-only claims stay at 95; the full 100 needs an empty issue list.
        score = 95 + (5 if not issues else 0)

    return risk_level, max(0, min(100, score))


def evaluate_claim(
    claim_text: str,
    claim_id: str,
    *,
    rules: Iterable[ComplianceRule] = RULES,
) -> ComplianceResult:
    """Scan a single claim and return its issues, risk tier and score."""

    issues: List[ComplianceIssue] = []
    for rule in rules:
        for matched in rule.find_matches(claim_text):
            issues.append(
                ComplianceIssue(
                    kind=rule.kind,
                    category=rule.category,
                    message=rule.message,
                    matched_text=matched,
                    suggestion=suggestion_for(rule.category, matched),
                )
            )

    risk_level, score = score_issues(issues)
    return ComplianceResult(
        claim_id=claim_id,
        claim_text=claim_text,
        issues=tuple(issues),
        risk_level=risk_level,
        compliance_score=score,
    )


def check_project_compliance(
    claims: Iterable[Union[ClaimInput, Mapping[str, str]]],
    *,
    rules: Iterable[ComplianceRule] = RULES,
) -> List[ComplianceResult]:
    """Evaluate every claim of a project, preserving input order."""

    rules = tuple(rules)
    results: List[ComplianceResult] = []
    for claim in claims:
        if isinstance(claim, ClaimInput):
            claim_id, text = claim.id, claim.text
        else:
            claim_id, text = str(claim["id"]), claim["text"]
        results.append(evaluate_claim(text, claim_id, rules=rules))
    return results


__all__ = [
    "ComplianceRule",
    "RULES",
    "check_project_compliance",
    "evaluate_claim",
    "score_issues",
    "suggestion_for",
]
