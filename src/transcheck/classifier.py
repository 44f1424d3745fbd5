"""
Translation-node classifier.

The only place that decides whether a raw JSON node "looks like" a
translation map. Classification depends on the node's own keys only,
never on its ancestors or descendants.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from transcheck.config import ValidatorConfig
from transcheck.locales import is_locale_key
from transcheck.model import (
    ArrayNode,
    Classification,
    Node,
    Scalar,
    StructuralObject,
    TranslationMap,
)


def classify(node: Any, config: Optional[ValidatorConfig] = None) -> Classification:
    """
    Decide whether ``node`` is a translation map.

    Args:
        node: Any JSON value
        config: Supplies the locale allow-list (defaults if omitted)

    Returns:
        Classification with is_translation_map True iff node is a
        non-array object with at least one locale key
    """
    config = config or ValidatorConfig()
    if not isinstance(node, Mapping):
        return Classification(is_translation_map=False)

    matched = frozenset(k for k in node.keys() if is_locale_key(k, config.locale_allow_list))
    return Classification(is_translation_map=bool(matched), locale_keys=matched)


def to_node(value: Any, config: Optional[ValidatorConfig] = None) -> Node:
    """Wrap a raw JSON value in its typed node variant."""
    config = config or ValidatorConfig()

    if isinstance(value, Mapping):
        classification = classify(value, config)
        if not classification.is_translation_map:
            return StructuralObject(raw=value)

        # Declaration order, not set order
        locale_keys = tuple(k for k in value.keys() if k in classification.locale_keys)
        texts = {k: value[k] for k in locale_keys if isinstance(value[k], str)}
        malformed = tuple(k for k in locale_keys if k not in texts)
        return TranslationMap(raw=value, locale_keys=locale_keys, texts=texts, malformed_keys=malformed)

    if isinstance(value, (list, tuple)):
        return ArrayNode(raw=value)

    return Scalar(value=value)


__all__ = ["classify", "to_node"]
