"""Output backends for validation reports (plain text; JSON/YAML live in serialization)."""

from .text_report import render_issue, render_report, render_reports, render_summary

__all__ = ["render_issue", "render_report", "render_reports", "render_summary"]
