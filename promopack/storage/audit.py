"""
Audit logging utilities for project compliance checks.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from promopack.services.types import ProjectComplianceReport

logger = logging.getLogger("promopack.storage.audit")


@dataclass(slots=True)
class AuditRecord:
    """Structured log entry for one project compliance check."""

    timestamp: str
    project_id: str
    event_type: str
    total_claims: int
    average_compliance_score: int
    critical_issues: int
    total_issues: int
    risk_counts: Dict[str, int]
    flagged_claims: List[Dict[str, Any]]
    metadata: Dict[str, Any]


class JsonlAuditLogger:
    """Append-only JSONL logger for compliance checks."""

    def __init__(self, path: Path):
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def log(self, report: ProjectComplianceReport, metadata: Dict[str, Any] | None = None) -> None:
        summary = report.summary
        record = AuditRecord(
            timestamp=report.checked_at.astimezone(timezone.utc).isoformat().replace("+00:00", "Z"),
            project_id=report.project_id,
            event_type="compliance_check",
            total_claims=summary.total_claims,
            average_compliance_score=summary.average_compliance_score,
            critical_issues=summary.critical_issues,
            total_issues=summary.total_issues,
            risk_counts={
                "high": summary.high_risk_claims,
                "medium": summary.medium_risk_claims,
                "low": summary.low_risk_claims,
                "compliant": summary.compliant_claims,
            },
            flagged_claims=[
                {
                    "claim_id": result.claim_id,
                    "risk_level": result.risk_level,
                    "compliance_score": result.compliance_score,
                    "categories": sorted({issue.category for issue in result.issues}),
                }
                for result in report.results
                if result.risk_level != "compliant"
            ],
            metadata=dict(metadata or {}),
        )
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(asdict(record), ensure_ascii=False) + "\n")

    def iter_records(self, project_id: Optional[str] = None) -> Iterator[Dict[str, Any]]:
        """Yield stored records in file order, optionally for one project."""

        if not self.path.exists():
            return
        with self.path.open("r", encoding="utf-8") as handle:
            for line_no, line in enumerate(handle, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError:
                    logger.warning("Skipping malformed audit line", extra={"line": line_no, "path": str(self.path)})
                    continue
                if project_id is not None and record.get("project_id") != project_id:
                    continue
                yield record

    def history(self, project_id: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Return a project's records, newest first."""

        records = list(self.iter_records(project_id))
        records.reverse()
        return records[:limit] if limit is not None else records


__all__ = ["AuditRecord", "JsonlAuditLogger"]
