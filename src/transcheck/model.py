"""
Core Data Model

Defines the typed view of a survey document and the findings produced
while validating it.

A raw survey document is untyped JSON. Every node is classified once
into exactly one of:
    - Scalar            (string, number, boolean, null)
    - TranslationMap    (object with at least one locale key)
    - StructuralObject  (any other object)
    - ArrayNode         (JSON array)

Checks then operate on TranslationMap instead of re-sniffing raw dicts.

ARCHITECTURAL RULE:
    These objects:
        - Wrap the raw document, never copy or mutate it
        - Know nothing about files, CLI or output formats
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class Classification:
    """
    Result of classifying a single node.

    Properties:
        is_translation_map: True iff the node is a non-array object with
            at least one locale key among its own keys
        locale_keys: The subset of the node's keys recognized as locale keys
    """

    is_translation_map: bool
    locale_keys: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class Scalar:
    """A terminal JSON value. Recursion stops here."""

    value: Union[str, int, float, bool, None]


@dataclass(frozen=True)
class TranslationMap:
    """
    An object whose keys include locale codes.

    Example:
        {"default": "How old are you?", "es-CO": "¿Cuántos años tienes?"}

    Properties:
        raw:
            The original mapping (not copied)

        locale_keys:
            Locale keys in declaration order

        texts:
            Locale key -> value, for locale keys whose value is a string

        malformed_keys:
            Locale keys whose value is not a string. String-specific checks
            skip these keys.
    """

    raw: Mapping[str, Any]
    locale_keys: Tuple[str, ...]
    texts: Dict[str, str] = field(default_factory=dict)
    malformed_keys: Tuple[str, ...] = ()

    def has_key(self, key: str) -> bool:
        return key in self.raw


@dataclass(frozen=True)
class StructuralObject:
    """An object with no locale keys. It is only recursed into."""

    raw: Mapping[str, Any]


@dataclass(frozen=True)
class ArrayNode:
    """A JSON array. Children are addressed by index."""

    raw: Sequence[Any]


Node = Union[Scalar, TranslationMap, StructuralObject, ArrayNode]


class IssueKind(Enum):
    """
    Kinds of findings.

    Keep these stable: they appear in exported reports and in configuration.
    """

    MISSING_LOCALE = "missing_locale"
    HTML_IN_VALUE = "html_in_value"
    EMPTY_FALLBACK = "empty_fallback"
    FORBIDDEN_LOCALE = "forbidden_locale"


@dataclass(frozen=True)
class Issue:
    """
    A single finding tied to a document path.

    Properties:
        path:
            Dot-joined chain of keys from the document root to the
            translation map. Array positions appear as their index
            (``pages.0.elements.2.title``). The root itself is ``""``.

        kind:
            IssueKind

        keys:
            Offending locale key(s)

        detail:
            Optional context to locate and fix the source, e.g. a
            truncated value or the keys that were available
    """

    path: str
    kind: IssueKind
    keys: Tuple[str, ...]
    detail: Optional[str] = None


@dataclass
class ValidationReport:
    """Ordered findings for one document."""

    source: Optional[str] = None
    issues: List[Issue] = field(default_factory=list)
    nodes_visited: int = 0
    translation_maps: int = 0
    schema_warnings: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.issues

    def counts_by_kind(self) -> Dict[str, int]:
        """Issue counts keyed by kind value, in first-seen order."""
        counts: Dict[str, int] = {}
        for issue in self.issues:
            counts[issue.kind.value] = counts.get(issue.kind.value, 0) + 1
        return counts


__all__ = [
    "Classification",
    "Scalar",
    "TranslationMap",
    "StructuralObject",
    "ArrayNode",
    "Node",
    "IssueKind",
    "Issue",
    "ValidationReport",
]
