import json

import pytest

from promopack.services.checker import NO_CLAIMS_MESSAGE, ComplianceChecker, NoClaimsError
from promopack.services.types import ClaimInput
from promopack.storage.audit import JsonlAuditLogger


def sample_claims():
    return [
        ClaimInput(id="c1", text="Drug X always cures all patients with no side effects"),
        ClaimInput(id="c2", text="Drug X is indicated for adults."),
    ]


def test_check_project_requires_claims():
    with pytest.raises(NoClaimsError, match="No claims to check"):
        ComplianceChecker().check_project("p1", [])
    assert NO_CLAIMS_MESSAGE.startswith("No claims to check")


def test_check_project_returns_results_and_summary():
    report = ComplianceChecker().check_project("p1", sample_claims())
    assert report.project_id == "p1"
    assert [result.claim_id for result in report.results] == ["c1", "c2"]
    assert report.summary.total_claims == 2
    assert report.summary.high_risk_claims == 1
    assert report.summary.average_compliance_score == 50


def test_check_project_writes_audit_record(tmp_path):
    audit_path = tmp_path / "logs" / "audit.jsonl"
    checker = ComplianceChecker(audit_logger=JsonlAuditLogger(audit_path))
    checker.check_project("p1", sample_claims(), metadata={"requested_by": "reviewer"})

    lines = audit_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["project_id"] == "p1"
    assert record["event_type"] == "compliance_check"
    assert record["risk_counts"] == {"high": 1, "medium": 0, "low": 0, "compliant": 1}
    assert record["flagged_claims"] == [
        {
            "claim_id": "c1",
            "risk_level": "high",
            "compliance_score": 0,
            "categories": ["Absolute Claims", "Safety Balance"],
        }
    ]
    assert record["metadata"] == {"requested_by": "reviewer"}
    assert record["timestamp"].endswith("Z")


def test_history_is_newest_first_and_filtered(tmp_path):
    audit_path = tmp_path / "audit.jsonl"
    logger = JsonlAuditLogger(audit_path)
    checker = ComplianceChecker(audit_logger=logger)
    checker.check_project("p1", sample_claims(), metadata={"run": 1})
    checker.check_project("p2", sample_claims())
    checker.check_project("p1", sample_claims(), metadata={"run": 2})
    with audit_path.open("a", encoding="utf-8") as handle:
        handle.write("not json\n\n")

    history = logger.history("p1")
    assert [record["metadata"]["run"] for record in history] == [2, 1]
    assert len(logger.history("p1", limit=1)) == 1
    assert len(list(logger.iter_records())) == 3


def test_history_without_log_file(tmp_path):
    logger = JsonlAuditLogger(tmp_path / "missing.jsonl")
    assert logger.history("p1") == []
