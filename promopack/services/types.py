"""
Dataclasses describing claims and their compliance evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Literal, Optional, Tuple

IssueKind = Literal["error", "warning", "info"]
RiskLevel = Literal["high", "medium", "low", "compliant"]

RISK_LEVELS: Tuple[RiskLevel, ...] = ("high", "medium", "low", "compliant")


@dataclass(slots=True)
class ClaimInput:
    """Claim text as persisted by extraction or manual entry."""

    id: str
    text: str


@dataclass(frozen=True, slots=True)
class ComplianceIssue:
    """Single pattern match flagged within a claim."""

    kind: IssueKind
    category: str
    message: str
    matched_text: str
    suggestion: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ComplianceResult:
    """Outcome of evaluating one claim against the rule table."""

    claim_id: str
    claim_text: str
    issues: Tuple[ComplianceIssue, ...]
    risk_level: RiskLevel
    compliance_score: int

    @property
    def error_count(self) -> int:
        return sum(1 for issue in self.issues if issue.kind == "error")

    @property
    def warning_count(self) -> int:
        return sum(1 for issue in self.issues if issue.kind == "warning")


@dataclass(frozen=True, slots=True)
class ComplianceSummary:
    """Portfolio-level statistics over a set of claim results."""

    total_claims: int
    compliant_claims: int
    high_risk_claims: int
    medium_risk_claims: int
    low_risk_claims: int
    average_compliance_score: int
    total_issues: int
    critical_issues: int


@dataclass(slots=True)
class ProjectComplianceReport:
    """Results and summary returned for a project-wide check."""

    project_id: str
    results: List[ComplianceResult]
    summary: ComplianceSummary
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


__all__ = [
    "IssueKind",
    "RiskLevel",
    "RISK_LEVELS",
    "ClaimInput",
    "ComplianceIssue",
    "ComplianceResult",
    "ComplianceSummary",
    "ProjectComplianceReport",
]
