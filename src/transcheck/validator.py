"""
Translation Validator: walks a whole survey document.

Pre-order depth-first traversal over every object and array:
    - each node is classified once
    - translation maps get the configured checks, tagged with their path
    - every child object/array is recursed into, including children of
      translation maps (no schema depth is assumed)
    - scalars end recursion

Object keys are visited in declaration order and arrays in index order,
so repeated runs over the same document yield identical issue lists.

IMPORTANT: This is read-only. The document is never modified.
"""
from __future__ import annotations

import warnings
from collections import OrderedDict
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from transcheck.checks import run_checks
from transcheck.classifier import to_node
from transcheck.config import ValidatorConfig
from transcheck.model import ArrayNode, Node, StructuralObject, TranslationMap, ValidationReport


_CONTAINER_TYPES = (Mapping, list, tuple)


class SchemaWarning(UserWarning):
    """A node partially matches the expected shape (e.g. a locale key holding a non-string)."""
    pass


def child_path(path: str, key: Any) -> str:
    """Dot-join ``key`` onto ``path``. Array indices are used as-is."""
    return f"{path}.{key}" if path else str(key)


def walk(document: Any, config: Optional[ValidatorConfig] = None) -> Iterator[Tuple[str, Node]]:
    """
    Yield ``(path, node)`` for every object and array, pre-order.

    The root is yielded with path ``""``. Scalars are not yielded.
    """
    config = config or ValidatorConfig()

    def _visit(value: Any, path: str) -> Iterator[Tuple[str, Node]]:
        node = to_node(value, config)
        if isinstance(node, (TranslationMap, StructuralObject)):
            yield path, node
            for key, child in node.raw.items():
                if isinstance(child, _CONTAINER_TYPES):
                    yield from _visit(child, child_path(path, key))
        elif isinstance(node, ArrayNode):
            yield path, node
            for index, child in enumerate(node.raw):
                if isinstance(child, _CONTAINER_TYPES):
                    yield from _visit(child, child_path(path, index))

    yield from _visit(document, "")


def iter_translation_maps(document: Any, config: Optional[ValidatorConfig] = None) -> Iterator[Tuple[str, TranslationMap]]:
    """Yield ``(path, TranslationMap)`` for every translation map in the document."""
    for path, node in walk(document, config):
        if isinstance(node, TranslationMap):
            yield path, node


def validate_document(
    document: Any,
    config: Optional[ValidatorConfig] = None,
    source: Optional[str] = None,
) -> ValidationReport:
    """
    Run the configured checks over every translation map in ``document``.

    Args:
        document: Parsed JSON value
        config: Validator settings (defaults if omitted)
        source: Optional label (usually the file path) stored on the report

    Returns:
        ValidationReport with issues in traversal order

    Warns:
        SchemaWarning: once per locale key holding a non-string value
    """
    config = config or ValidatorConfig()
    report = ValidationReport(source=source)

    for path, node in walk(document, config):
        report.nodes_visited += 1
        if not isinstance(node, TranslationMap):
            continue

        report.translation_maps += 1
        for key in node.malformed_keys:
            value = node.raw[key]
            msg = (
                f"{path or '<root>'}: locale key '{key}' holds "
                f"{type(value).__name__}, not a string"
            )
            report.schema_warnings.append(msg)
            warnings.warn(f"{source}: {msg}" if source else msg, SchemaWarning)

        report.issues.extend(run_checks(node, config, path))

    return report


def collect_locale_keys(document: Any, config: Optional[ValidatorConfig] = None) -> Dict[str, int]:
    """
    Count locale keys used by translation maps, in first-seen order.

    Example:
        {"title": {"default": "Hi", "es-CO": "Hola"}}  ->  {"default": 1, "es-CO": 1}
    """
    counts: Dict[str, int] = OrderedDict()
    for _, tmap in iter_translation_maps(document, config):
        for key in tmap.locale_keys:
            counts[key] = counts.get(key, 0) + 1
    return dict(counts)


__all__ = [
    "SchemaWarning",
    "child_path",
    "walk",
    "iter_translation_maps",
    "validate_document",
    "collect_locale_keys",
]
