"""
Survey document loading (raw files → parsed JSON).

Documents are read fully into memory before any analysis starts.
"""

import json
import logging
import os
from typing import Any, Iterable, List


logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when a survey file is not valid JSON."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


def load_document(filepath: str) -> Any:
    """
    Read and parse a JSON survey file.

    Args:
        filepath: Path to a .json file

    Returns:
        Parsed JSON value (object key order preserved)

    Raises:
        FileNotFoundError: If file doesn't exist
        ParseError: If the content is not valid UTF-8 JSON
    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"Survey file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(filepath, f"not valid UTF-8 at byte {e.start}") from e

    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(filepath, f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}") from e

    logger.debug("Loaded %s (%d bytes)", filepath, len(content))
    return document


def discover_survey_files(paths: Iterable[str]) -> List[str]:
    """
    Expand CLI path arguments into a list of JSON files.

    Directories expand to their ``*.json`` files in sorted name order
    (non-recursive). Files are kept as given, in argument order.

    Raises:
        FileNotFoundError: If a path does not exist
    """
    files: List[str] = []
    for path in paths:
        if os.path.isdir(path):
            names = sorted(n for n in os.listdir(path) if n.endswith(".json"))
            if not names:
                logger.warning("No .json files in %s", path)
            files.extend(os.path.join(path, n) for n in names)
        elif os.path.exists(path):
            files.append(path)
        else:
            raise FileNotFoundError(f"Path not found: {path}")
    return files


__all__ = ["ParseError", "load_document", "discover_survey_files"]
