"""
Serialization helpers for issues and validation reports.

Provides JSON/YAML export via an intermediate dict representation.
Field order is fixed so exported reports diff cleanly between runs.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from transcheck.model import Issue, IssueKind, ValidationReport


def issue_to_dict(issue: Issue) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "path": issue.path,
        "kind": issue.kind.value,
        "keys": list(issue.keys),
    }
    if issue.detail is not None:
        d["detail"] = issue.detail
    return d


def issue_from_dict(d: Dict[str, Any]) -> Issue:
    keys = d.get("keys", d.get("key", []))
    if isinstance(keys, str):
        keys = [keys]
    return Issue(
        path=d.get("path", ""),
        kind=IssueKind(d["kind"]),
        keys=tuple(keys),
        detail=d.get("detail"),
    )


def report_to_dict(r: ValidationReport) -> Dict[str, Any]:
    return {
        "source": r.source,
        "passed": r.passed,
        "nodes_visited": r.nodes_visited,
        "translation_maps": r.translation_maps,
        "counts": r.counts_by_kind(),
        "issues": [issue_to_dict(i) for i in r.issues],
        "schema_warnings": list(r.schema_warnings),
    }


def report_from_dict(d: Dict[str, Any]) -> ValidationReport:
    return ValidationReport(
        source=d.get("source"),
        issues=[issue_from_dict(i) for i in d.get("issues", [])],
        nodes_visited=d.get("nodes_visited", 0),
        translation_maps=d.get("translation_maps", 0),
        schema_warnings=list(d.get("schema_warnings", [])),
    )


def reports_to_json(reports: List[ValidationReport]) -> str:
    return json.dumps([report_to_dict(r) for r in reports], indent=2, ensure_ascii=False)


def reports_from_json(s: str) -> List[ValidationReport]:
    return [report_from_dict(d) for d in json.loads(s)]


def reports_to_yaml(reports: List[ValidationReport]) -> str:
    return yaml.safe_dump(
        [report_to_dict(r) for r in reports],
        sort_keys=False,
        allow_unicode=True,
    )


def reports_from_yaml(s: str) -> List[ValidationReport]:
    return [report_from_dict(d) for d in (yaml.safe_load(s) or [])]
