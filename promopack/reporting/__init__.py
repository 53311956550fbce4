"""Report writers for project compliance checks."""

from .report import render_html, write_report

__all__ = ["render_html", "write_report"]
