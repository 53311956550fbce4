"""
HTTP surface for the compliance engine.
"""

from .app import create_app
from .schema import serialize_issue, serialize_report, serialize_result, serialize_rule, serialize_summary

__all__ = [
    "create_app",
    "serialize_issue",
    "serialize_report",
    "serialize_result",
    "serialize_rule",
    "serialize_summary",
]
