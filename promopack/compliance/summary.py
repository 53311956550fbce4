"""
Portfolio statistics over per-claim compliance results.
"""

from __future__ import annotations

import math
from typing import Iterable

from promopack.services.types import ComplianceResult, ComplianceSummary


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def summarize(results: Iterable[ComplianceResult]) -> ComplianceSummary:
    """Reduce claim results to tier counts, average score and issue totals."""

    results = list(results)
    total_claims = len(results)
    average = sum(result.compliance_score for result in results) / (total_claims or 1)
    return ComplianceSummary(
        total_claims=total_claims,
        compliant_claims=sum(1 for result in results if result.risk_level == "compliant"),
        high_risk_claims=sum(1 for result in results if result.risk_level == "high"),
        medium_risk_claims=sum(1 for result in results if result.risk_level == "medium"),
        low_risk_claims=sum(1 for result in results if result.risk_level == "low"),
        average_compliance_score=_round_half_up(average),
        total_issues=sum(len(result.issues) for result in results),
        critical_issues=sum(result.error_count for result in results),
    )


__all__ = ["summarize"]
