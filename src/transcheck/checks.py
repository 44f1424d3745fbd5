"""
Checks run against a single translation map.

Each check takes a TranslationMap (a raw mapping is accepted and
classified on the fly) and returns issues. Checks never look at parent
or child nodes; the validator supplies the path.

String-specific checks (markup, empty fallback) only ever look at
string values. Non-string values under a locale key are skipped here;
the validator reports them as schema warnings.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from transcheck.classifier import to_node
from transcheck.config import ValidatorConfig
from transcheck.locales import DEFAULT_ALIASES, locale_spellings
from transcheck.model import Issue, IssueKind, TranslationMap


_HTML_TAG_RE = re.compile(r"<[^>]+>")


def _as_translation_map(node: Any) -> Optional[TranslationMap]:
    if isinstance(node, TranslationMap):
        return node
    wrapped = to_node(node)
    return wrapped if isinstance(wrapped, TranslationMap) else None


def preview(value: str, limit: int = 120) -> str:
    """Truncate ``value`` to ``limit`` characters, marking the cut with an ellipsis."""
    if len(value) <= limit:
        return value
    return value[:limit] + "…"


def check_missing_locale(
    node: Any,
    target_locale: str,
    fallback_locales: Sequence[str],
    aliases: Mapping[str, str] = DEFAULT_ALIASES,
    path: str = "",
) -> Optional[Issue]:
    """
    Flag a map that was translated but lacks ``target_locale``.

    The target counts as present under any of its spellings (``es-CO``,
    ``es_co``). Only maps carrying at least one of ``fallback_locales``
    (the trigger locales) are expected to have the target; a map with
    none of them, such as an English-only map, is left alone.

    Presence means the key exists, whatever its value.
    """
    tmap = _as_translation_map(node)
    if tmap is None:
        return None

    if any(tmap.has_key(spelling) for spelling in locale_spellings(target_locale, aliases)):
        return None
    if not any(tmap.has_key(trigger) for trigger in fallback_locales):
        return None

    return Issue(
        path=path,
        kind=IssueKind.MISSING_LOCALE,
        keys=(target_locale,),
        detail=f"available keys: {', '.join(str(k) for k in tmap.raw.keys())}",
    )


def check_disallowed_markup(node: Any, preview_length: int = 120, path: str = "") -> List[Issue]:
    """One issue per locale key whose string value contains an HTML-like tag."""
    tmap = _as_translation_map(node)
    if tmap is None:
        return []

    issues = []
    for key in tmap.locale_keys:
        text = tmap.texts.get(key)
        if text is None:
            continue
        if _HTML_TAG_RE.search(text):
            issues.append(Issue(
                path=path,
                kind=IssueKind.HTML_IN_VALUE,
                keys=(key,),
                detail=preview(text, preview_length),
            ))
    return issues


def check_empty_fallback(node: Any, fallback_locales: Sequence[str], path: str = "") -> Optional[Issue]:
    """
    Flag a map whose fallback text is empty.

    Only fallback keys that are present with a string value are
    considered. If there are none, the check does not apply. Otherwise
    an issue is raised when all of them are empty after trimming.
    """
    tmap = _as_translation_map(node)
    if tmap is None:
        return None

    considered = [k for k in fallback_locales if k in tmap.texts]
    if not considered:
        return None
    if any(tmap.texts[k].strip() for k in considered):
        return None

    return Issue(
        path=path,
        kind=IssueKind.EMPTY_FALLBACK,
        keys=tuple(considered),
        detail=f"no non-empty text in: {', '.join(fallback_locales)}",
    )


def check_forbidden_locale(node: Any, forbidden_locales: Sequence[str], path: str = "") -> List[Issue]:
    """One issue per forbidden locale key present in the map."""
    tmap = _as_translation_map(node)
    if tmap is None:
        return []
    return [
        Issue(path=path, kind=IssueKind.FORBIDDEN_LOCALE, keys=(key,))
        for key in tmap.locale_keys
        if key in forbidden_locales
    ]


def _run_missing_locale(tmap: TranslationMap, config: ValidatorConfig, path: str) -> List[Issue]:
    if config.target_locale is None:
        return []
    issue = check_missing_locale(
        tmap,
        config.target_locale,
        config.fallback_trigger_locales,
        aliases=config.allowed_locale_aliases,
        path=path,
    )
    return [issue] if issue else []


def _run_html(tmap: TranslationMap, config: ValidatorConfig, path: str) -> List[Issue]:
    return check_disallowed_markup(tmap, preview_length=config.value_preview_length, path=path)


def _run_empty_fallback(tmap: TranslationMap, config: ValidatorConfig, path: str) -> List[Issue]:
    issue = check_empty_fallback(tmap, config.fallback_locales, path=path)
    return [issue] if issue else []


def _run_forbidden(tmap: TranslationMap, config: ValidatorConfig, path: str) -> List[Issue]:
    if not config.forbidden_locales:
        return []
    return check_forbidden_locale(tmap, config.forbidden_locales, path=path)


CHECK_RUNNERS: Dict[IssueKind, Callable[[TranslationMap, ValidatorConfig, str], List[Issue]]] = {
    IssueKind.MISSING_LOCALE: _run_missing_locale,
    IssueKind.HTML_IN_VALUE: _run_html,
    IssueKind.EMPTY_FALLBACK: _run_empty_fallback,
    IssueKind.FORBIDDEN_LOCALE: _run_forbidden,
}


def run_checks(tmap: TranslationMap, config: ValidatorConfig, path: str = "") -> List[Issue]:
    """Run the configured checks on one map, in configured order."""
    issues: List[Issue] = []
    for kind in config.checks:
        issues.extend(CHECK_RUNNERS[kind](tmap, config, path))
    return issues


__all__ = [
    "preview",
    "check_missing_locale",
    "check_disallowed_markup",
    "check_empty_fallback",
    "check_forbidden_locale",
    "run_checks",
    "CHECK_RUNNERS",
]
