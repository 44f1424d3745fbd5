"""
Plain-text report renderer.

One line per issue, then a per-file pass/fail line and an overall
summary. Output is deterministic for a given list of reports.
"""

from typing import List

from transcheck.model import Issue, IssueKind, ValidationReport


_KIND_LABELS = {
    IssueKind.MISSING_LOCALE: "Missing locale",
    IssueKind.HTML_IN_VALUE: "HTML in value",
    IssueKind.EMPTY_FALLBACK: "Empty fallback",
    IssueKind.FORBIDDEN_LOCALE: "Forbidden locale",
}


def render_issue(issue: Issue) -> str:
    """
    Render a single issue.

    Example:
        Missing locale [es-CO] at pages.0.title (available keys: default, es)
    """
    label = _KIND_LABELS.get(issue.kind, issue.kind.value)
    keys = ", ".join(issue.keys)
    line = f"{label} [{keys}] at {issue.path or '<root>'}"
    if issue.detail:
        line += f" ({issue.detail})"
    return line


def render_report(report: ValidationReport) -> str:
    """Render one document's findings and its pass/fail line."""
    name = report.source or "<document>"
    lines = []

    if report.passed:
        lines.append(f"✅ {name}: OK ({report.translation_maps} translation maps checked)")
    else:
        lines.append(f"❌ {name}: {len(report.issues)} issues")
        counts = ", ".join(f"{kind}={n}" for kind, n in report.counts_by_kind().items())
        lines.append(f"   Breakdown: {counts}")
        for issue in report.issues:
            lines.append(f"   - {render_issue(issue)}")

    for warning in report.schema_warnings:
        lines.append(f"   ⚠️  {warning}")

    return "\n".join(lines)


def render_summary(reports: List[ValidationReport]) -> str:
    total = sum(len(r.issues) for r in reports)
    if total:
        failed = sum(1 for r in reports if not r.passed)
        return f"❌ {total} total issues in {failed} of {len(reports)} files"
    return f"✅ No issues in {len(reports)} files"


def render_reports(reports: List[ValidationReport]) -> str:
    """Render every report followed by the overall summary."""
    parts = [render_report(r) for r in reports]
    parts.append("")
    parts.append(render_summary(reports))
    return "\n".join(parts)


__all__ = ["render_issue", "render_report", "render_summary", "render_reports"]
