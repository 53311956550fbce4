"""
Compliance rule definitions and evaluators.

The rule engine scores promotional claims against regulatory language rules
and the summary module rolls per-claim results up to project level.
"""

from .rules import RULES, ComplianceRule, check_project_compliance, evaluate_claim, score_issues, suggestion_for
from .summary import summarize

__all__ = [
    "ComplianceRule",
    "RULES",
    "check_project_compliance",
    "evaluate_claim",
    "score_issues",
    "suggestion_for",
    "summarize",
]
