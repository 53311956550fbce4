"""
Project-level compliance workflow.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from promopack.compliance.rules import check_project_compliance
from promopack.compliance.summary import summarize
from promopack.services.types import ClaimInput, ProjectComplianceReport
from promopack.storage.audit import JsonlAuditLogger

logger = logging.getLogger("promopack.services.checker")

NO_CLAIMS_MESSAGE = "No claims to check. Please extract claims first."


class NoClaimsError(ValueError):
    """Raised when a project check is requested without any claims."""


@dataclass(slots=True)
class ComplianceChecker:
    """Runs the rule engine over a project's claims and records the outcome."""

    audit_logger: Optional[JsonlAuditLogger] = None

    def check_project(
        self,
        project_id: str,
        claims: Iterable[Union[ClaimInput, Mapping[str, str]]],
        metadata: Dict[str, Any] | None = None,
    ) -> ProjectComplianceReport:
        claims = list(claims)
        if not claims:
            raise NoClaimsError(NO_CLAIMS_MESSAGE)

        logger.info(
            "Running compliance check on %d claims",
            len(claims),
            extra={"project_id": project_id},
        )
        results = check_project_compliance(claims)
        summary = summarize(results)
        logger.info(
            "Compliance check summary: avg=%d high=%d medium=%d low=%d compliant=%d critical=%d",
            summary.average_compliance_score,
            summary.high_risk_claims,
            summary.medium_risk_claims,
            summary.low_risk_claims,
            summary.compliant_claims,
            summary.critical_issues,
            extra={"project_id": project_id},
        )

        report = ProjectComplianceReport(project_id=project_id, results=results, summary=summary)
        if self.audit_logger is not None:
            self.audit_logger.log(report, metadata=metadata)
        return report


__all__ = ["ComplianceChecker", "NoClaimsError", "NO_CLAIMS_MESSAGE"]
