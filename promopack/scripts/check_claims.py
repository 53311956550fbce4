"""
CLI to run the compliance check over a file of claims.

Usage:
    python -m promopack.scripts.check_claims --claims-file claims.json --project-id demo
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from promopack.config.settings import load_settings
from promopack.reporting.report import write_report
from promopack.services.checker import ComplianceChecker, NoClaimsError
from promopack.services.types import RISK_LEVELS, ClaimInput
from promopack.storage.audit import JsonlAuditLogger

# Tiers ordered from most to least severe; "--fail-on medium" also fails on high.
FAIL_TIERS = ("high", "medium", "low")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scan promotional claims for regulatory red flags.")
    parser.add_argument(
        "--claims-file",
        type=Path,
        required=True,
        help="Claims as a JSON list, JSONL objects ({id, text}) or plain text (one per line).",
    )
    parser.add_argument("--project-id", default="local", help="Project identifier echoed in reports.")
    parser.add_argument("--json-out", type=Path, default=None, help="Optional JSON report path.")
    parser.add_argument("--html-out", type=Path, default=None, help="Optional HTML report path.")
    parser.add_argument("--audit-log", type=Path, default=None, help="Append a record to this JSONL audit log.")
    parser.add_argument(
        "--fail-on",
        choices=FAIL_TIERS,
        default=None,
        help="Exit with status 2 when any claim is at or above this risk tier.",
    )
    return parser.parse_args(argv)


def print_step(message: str) -> None:
    print(f"[check] {message}")


def _claim_from_item(item: dict) -> ClaimInput:
    text = item["text"]
    if not isinstance(text, str):
        raise TypeError(f"claim {item['id']!r} has non-string text: {text!r}")
    return ClaimInput(id=str(item["id"]), text=text)


def load_claims(path: Path) -> List[ClaimInput]:
    """Read claims from JSON, JSONL or plain text."""

    raw = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return [_claim_from_item(item) for item in json.loads(raw)]
    if path.suffix == ".jsonl":
        # Split on newlines only; JSON strings may carry other line separators.
        return [_claim_from_item(json.loads(line)) for line in raw.split("\n") if line.strip()]
    lines = [line.strip() for line in raw.splitlines() if line.strip()]
    return [ClaimInput(id=f"claim-{index}", text=text) for index, text in enumerate(lines, start=1)]


def exceeds_threshold(risk_level: str, fail_on: str) -> bool:
    return RISK_LEVELS.index(risk_level) <= RISK_LEVELS.index(fail_on)


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=load_settings().log_level)

    try:
        claims = load_claims(args.claims_file)
    except FileNotFoundError:
        print_step(f"ERROR: claims file not found at {args.claims_file}")
        sys.exit(1)
    except (json.JSONDecodeError, KeyError, TypeError) as exc:
        print_step(f"ERROR: could not parse claims file: {exc}")
        sys.exit(1)

    audit_logger = JsonlAuditLogger(args.audit_log) if args.audit_log else None
    checker = ComplianceChecker(audit_logger=audit_logger)
    try:
        report = checker.check_project(args.project_id, claims, metadata={"source": str(args.claims_file)})
    except NoClaimsError as exc:
        print_step(f"ERROR: {exc}")
        sys.exit(1)

    summary = report.summary
    print_step(f"Checked {summary.total_claims} claims for project {report.project_id}")
    print_step(
        f"Average score {summary.average_compliance_score}% · "
        f"high={summary.high_risk_claims} medium={summary.medium_risk_claims} "
        f"low={summary.low_risk_claims} compliant={summary.compliant_claims}"
    )
    print_step(f"{summary.total_issues} issues found ({summary.critical_issues} critical)")

    write_report(report, html_path=args.html_out, json_path=args.json_out)
    if args.html_out:
        print_step(f"HTML report written to {args.html_out}")
    if args.json_out:
        print_step(f"JSON report written to {args.json_out}")
    if audit_logger:
        print_step(f"Audit log appended at {args.audit_log}")

    if args.fail_on:
        failing = [result for result in report.results if exceeds_threshold(result.risk_level, args.fail_on)]
        if failing:
            print_step(f"{len(failing)} claim(s) at or above '{args.fail_on}' risk")
            sys.exit(2)


if __name__ == "__main__":
    main()
