"""
JSON and HTML writers for project compliance reports.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from jinja2 import Template

from promopack.api.schema import serialize_report
from promopack.services.types import ProjectComplianceReport

REPORT_TEMPLATE = Template(
    r"""
<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <title>Regulatory Compliance Check · {{ report.projectId }}</title>
  <style>
    body { font-family: ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto; margin:24px; line-height:1.45; }
    h2 { margin-top: 2rem; border-bottom: 1px solid #e5e7eb; padding-bottom: 0.25rem; }
    .meta { color: #475569; font-size: 12px; }
    .tiles { display: grid; grid-template-columns: repeat(auto-fit, minmax(160px, 1fr)); gap: 12px; }
    .tile { background: #f8fafc; border: 1px solid #e2e8f0; border-radius: 12px; padding: 12px; }
    .tile strong { display: block; font-size: 24px; }
    .claim { margin: 18px 0; padding: 16px; border-radius: 12px; border: 1px solid #e2e8f0; }
    .high { background: #fef2f2; } .medium { background: #fff7ed; }
    .low { background: #fefce8; } .compliant { background: #f0fdf4; }
    .issue { margin: 8px 0; font-size: 13px; }
    .suggestion { color: #1d4ed8; }
    code { background:#e2e8f0; padding: 2px 4px; border-radius: 4px; }
  </style>
</head>
<body>
  <h1>Regulatory Compliance Check</h1>
  <p class="meta">Project {{ report.projectId }} · checked {{ report.checkedAt }}</p>
  {% set summary = report.summary %}
  <div class="tiles">
    <div class="tile"><strong>{{ summary.averageComplianceScore }}%</strong>Average score</div>
    <div class="tile"><strong>{{ summary.highRiskClaims }}</strong>High risk</div>
    <div class="tile"><strong>{{ summary.mediumRiskClaims }}</strong>Medium risk</div>
    <div class="tile"><strong>{{ summary.lowRiskClaims }}</strong>Low risk</div>
    <div class="tile"><strong>{{ summary.compliantClaims }}</strong>Compliant</div>
    <div class="tile"><strong>{{ summary.criticalIssues }}</strong>Critical issues</div>
  </div>
  <p class="meta">{{ summary.totalClaims }} total claims · {{ summary.totalIssues }} total issues found</p>

  <h2>Claims</h2>
  {% for result in report.results %}
    <div class="claim {{ result.riskLevel }}">
      <p><strong>{{ result.riskLevel | upper }}</strong> · {{ result.complianceScore }}% · <span class="meta">{{ result.claimId }}</span></p>
      <p>{{ result.claimText }}</p>
      {% for issue in result.issues %}
        <div class="issue">
          <strong>{{ issue.category }}</strong> ({{ issue.kind }}) · matched <code>{{ issue.matchedText }}</code><br/>
          {{ issue.message }}
          {% if issue.suggestion %}<br/><span class="suggestion">{{ issue.suggestion }}</span>{% endif %}
        </div>
      {% else %}
        <p class="meta">No compliance issues detected</p>
      {% endfor %}
    </div>
  {% endfor %}
</body>
</html>
""",
    autoescape=True,
)


def _backup_existing(path: Optional[Path]) -> None:
    if not path or not path.exists():
        return
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    backup = path.with_name(f"{path.stem}_{timestamp}{path.suffix}")
    path.replace(backup)


def render_html(report: ProjectComplianceReport) -> str:
    return REPORT_TEMPLATE.render(report=serialize_report(report))


def write_report(
    report: ProjectComplianceReport,
    *,
    html_path: Optional[Path] = None,
    json_path: Optional[Path] = None,
) -> None:
    """Write the report to disk, moving any previous output aside first."""

    _backup_existing(html_path)
    _backup_existing(json_path)
    if html_path:
        html_path.parent.mkdir(parents=True, exist_ok=True)
        html_path.write_text(render_html(report), encoding="utf-8")
    if json_path:
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(
            json.dumps(serialize_report(report), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


__all__ = ["REPORT_TEMPLATE", "render_html", "write_report"]
