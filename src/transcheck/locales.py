"""
Locale key vocabulary.

A locale key is either the literal ``default`` or a language code:
two letters, optionally followed by ``-`` and a two-letter region
(``en``, ``es-CO``). Letter case is not significant for recognition.

Some surveys also carry legacy spellings (``es_co``) that do not match
the pattern; those are recognized through an explicit allow-list and
treated as aliases of their canonical spelling.
"""

import re
from typing import Dict, Iterable, List, Mapping, Tuple


DEFAULT_KEY = "default"

LOCALE_KEY_RE = re.compile(r"^[a-z]{2}(-[a-z]{2})?$", re.IGNORECASE)

DEFAULT_ALLOW_LIST: Tuple[str, ...] = (
    "default",
    "es",
    "de",
    "fr",
    "nl",
    "es-CO",
    "es_co",
    "en",
    "en-US",
)

DEFAULT_ALIASES: Dict[str, str] = {"es-CO": "es_co"}


def is_locale_key(key: object, allow_list: Iterable[str] = DEFAULT_ALLOW_LIST) -> bool:
    """Return True if ``key`` is ``default``, allow-listed, or matches the locale pattern."""
    if not isinstance(key, str):
        return False
    if key == DEFAULT_KEY or key in allow_list:
        return True
    return LOCALE_KEY_RE.fullmatch(key) is not None


def locale_spellings(locale: str, aliases: Mapping[str, str] = DEFAULT_ALIASES) -> Tuple[str, ...]:
    """
    All accepted spellings of ``locale``, canonical spelling first.

    Aliases are symmetric: ``{"es-CO": "es_co"}`` makes each spelling
    satisfy the other. The plain hyphen/underscore swap (``es_CO``) is
    always accepted as well.

    Example:
        >>> locale_spellings("es-CO")
        ('es-CO', 'es_CO', 'es_co')
    """
    spellings: List[str] = [locale]

    def _add(candidate: str) -> None:
        if candidate not in spellings:
            spellings.append(candidate)

    if "-" in locale:
        _add(locale.replace("-", "_"))
    elif "_" in locale:
        _add(locale.replace("_", "-"))

    for canonical, alias in aliases.items():
        if canonical == locale:
            _add(alias)
        elif alias == locale:
            _add(canonical)

    return tuple(spellings)


__all__ = [
    "DEFAULT_KEY",
    "LOCALE_KEY_RE",
    "DEFAULT_ALLOW_LIST",
    "DEFAULT_ALIASES",
    "is_locale_key",
    "locale_spellings",
]
