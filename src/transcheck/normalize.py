"""
Default-text normalization (mutating pass).

Choice-like objects carry a machine ``value`` and a localized ``text``.
When the text is missing or has no ``default`` entry, the value is the
best available fallback:

    {"value": "yes"}                      -> {"value": "yes", "text": {"default": "yes"}}
    {"value": "yes", "text": {"es-CO": "sí"}} -> text gains "default": "yes"

This is deliberately separate from validation: the validator never
mutates, this pass always does.
"""

import json
import logging
import os
from typing import Any, Optional

from transcheck.backups import backup_and_prune
from transcheck.loader import load_document


logger = logging.getLogger(__name__)


def normalize_defaults_from_values(root: Any) -> int:
    """
    Fill missing ``text.default`` from string ``value`` fields, in place.

    Returns:
        Number of objects updated
    """
    updated = 0

    def _visit(node: Any) -> None:
        nonlocal updated
        if isinstance(node, list):
            for item in node:
                _visit(item)
            return
        if not isinstance(node, dict):
            return

        value = node.get("value")
        if "value" in node and isinstance(value, str):
            text = node.get("text")
            if text is None:
                node["text"] = {"default": value}
                updated += 1
            elif isinstance(text, dict) and "default" not in text:
                text["default"] = value
                updated += 1

        for child in list(node.values()):
            if isinstance(child, (dict, list)):
                _visit(child)

    _visit(root)
    return updated


def updated_path(filepath: str) -> str:
    """``surveys/child.json`` -> ``surveys/child_updated.json``"""
    stem, ext = os.path.splitext(filepath)
    return f"{stem}_updated{ext or '.json'}"


def write_document(document: Any, filepath: str) -> None:
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)
        f.write("\n")


def normalize_file(
    filepath: str,
    in_place: bool = False,
    backups_dir: Optional[str] = None,
    keep: int = 3,
    base_dir: Optional[str] = None,
) -> int:
    """
    Normalize one survey file.

    Writes ``<name>_updated.json`` next to the input, or, with
    ``in_place``, backs up the original (into ``backups_dir``, default
    ``<dir>/backups``) and overwrites it. Backup names are relative to
    ``base_dir`` (default: the file's own directory); pass one shared
    ``base_dir`` when same-named files from different folders share a
    backups directory. Nothing is written when no
    object needed updating.

    Returns:
        Number of objects updated

    Raises:
        FileNotFoundError: If file doesn't exist
        ParseError: If the file is not valid JSON
    """
    document = load_document(filepath)
    count = normalize_defaults_from_values(document)

    if count == 0:
        logger.info("%s: no changes", filepath)
        return 0

    if in_place:
        backups_dir = backups_dir or os.path.join(os.path.dirname(os.path.abspath(filepath)), "backups")
        backup_and_prune(filepath, backups_dir, keep=keep, base_dir=base_dir)
        target = filepath
    else:
        target = updated_path(filepath)

    write_document(document, target)
    logger.info("%s: normalized %d items -> %s", filepath, count, target)
    return count


__all__ = ["normalize_defaults_from_values", "updated_path", "write_document", "normalize_file"]
