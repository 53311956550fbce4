"""
JSON serialisation helpers for compliance payloads.

The dataclasses in `promopack.services.types` use Python naming; the wire
format uses the camelCase field names the dashboard consumes. Unset
suggestions are omitted rather than sent as null.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict

from promopack.compliance.rules import ComplianceRule, suggestion_for
from promopack.services.types import (
    ComplianceIssue,
    ComplianceResult,
    ComplianceSummary,
    ProjectComplianceReport,
)


def _to_isoformat(value: datetime) -> str:
    """Return an ISO 8601 string (UTC) for the given datetime."""
    if value.tzinfo:
        return value.isoformat()
    return value.isoformat() + "Z"


def serialize_issue(issue: ComplianceIssue) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "kind": issue.kind,
        "category": issue.category,
        "message": issue.message,
        "matchedText": issue.matched_text,
    }
    if issue.suggestion is not None:
        payload["suggestion"] = issue.suggestion
    return payload


def serialize_result(result: ComplianceResult) -> Dict[str, Any]:
    return {
        "claimId": result.claim_id,
        "claimText": result.claim_text,
        "issues": [serialize_issue(issue) for issue in result.issues],
        "riskLevel": result.risk_level,
        "complianceScore": result.compliance_score,
    }


def serialize_summary(summary: ComplianceSummary) -> Dict[str, Any]:
    return {
        "totalClaims": summary.total_claims,
        "compliantClaims": summary.compliant_claims,
        "highRiskClaims": summary.high_risk_claims,
        "mediumRiskClaims": summary.medium_risk_claims,
        "lowRiskClaims": summary.low_risk_claims,
        "averageComplianceScore": summary.average_compliance_score,
        "totalIssues": summary.total_issues,
        "criticalIssues": summary.critical_issues,
    }


def serialize_report(report: ProjectComplianceReport) -> Dict[str, Any]:
    """
    Convert a project report into the payload returned by the check endpoint.

    Args:
        report: ProjectComplianceReport produced by `ComplianceChecker`.

    Returns:
        dict: Payload ready for JSON encoding.
    """

    return {
        "projectId": report.project_id,
        "checkedAt": _to_isoformat(report.checked_at),
        "results": [serialize_result(result) for result in report.results],
        "summary": serialize_summary(report.summary),
    }


def serialize_rule(rule: ComplianceRule) -> Dict[str, Any]:
    """Describe a rule table entry, including its raw pattern sources."""

    return {
        "ruleId": rule.rule_id,
        "category": rule.category,
        "kind": rule.kind,
        "message": rule.message,
        "patterns": [pattern.pattern for pattern in rule.patterns],
        "hasSuggestion": suggestion_for(rule.category, "") is not None,
    }


__all__ = [
    "serialize_issue",
    "serialize_result",
    "serialize_summary",
    "serialize_report",
    "serialize_rule",
]
