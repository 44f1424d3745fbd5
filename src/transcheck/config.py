"""
Validator configuration.

A single explicit ValidatorConfig is passed into the classifier and the
validator. Nothing is read from the environment; every default lives here.

Configuration files are YAML mappings overlaid on the defaults:

    target_locale: es-CO
    fallback_trigger_locales: [default, es]
    fallback_locales: [default, en, en-US]
    allowed_locale_aliases:
      es-CO: es_co
    checks: [missing_locale, html_in_value, empty_fallback]
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from transcheck.locales import DEFAULT_ALIASES, DEFAULT_ALLOW_LIST
from transcheck.model import IssueKind


class ConfigError(ValueError):
    """Raised when a configuration mapping or file is invalid."""
    pass


DEFAULT_CHECKS: Tuple[IssueKind, ...] = (
    IssueKind.MISSING_LOCALE,
    IssueKind.HTML_IN_VALUE,
    IssueKind.EMPTY_FALLBACK,
)


@dataclass(frozen=True)
class ValidatorConfig:
    """
    Settings for classification and checks.

    Properties:
        target_locale:
            Locale every translated map is expected to carry.
            None disables the missing-locale check.

        fallback_trigger_locales:
            Presence of any of these implies the target should exist.

        fallback_locales:
            Baseline locales whose text must not be empty.

        allowed_locale_aliases:
            Canonical spelling -> alternate spelling (symmetric).

        locale_allow_list:
            Keys always recognized as locale keys, even when they do not
            match the locale pattern (``es_co``).

        checks:
            Enabled checks, in the order they run on each map.

        forbidden_locales:
            Locale keys that must not appear at all.

        value_preview_length:
            Maximum characters of a value quoted in an issue detail.

    DESIGN NOTE:
        fallback_trigger_locales and fallback_locales are independent on
        purpose. The first is about the target locale, the second about
        English fallback text.
    """

    target_locale: Optional[str] = "es-CO"
    fallback_trigger_locales: Tuple[str, ...] = ("default", "es")
    fallback_locales: Tuple[str, ...] = ("default", "en", "en-US")
    allowed_locale_aliases: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ALIASES))
    locale_allow_list: Tuple[str, ...] = DEFAULT_ALLOW_LIST
    checks: Tuple[IssueKind, ...] = DEFAULT_CHECKS
    forbidden_locales: Tuple[str, ...] = ()
    value_preview_length: int = 120


_CAMEL_CASE_KEYS = {
    "targetLocale": "target_locale",
    "fallbackTriggerLocales": "fallback_trigger_locales",
    "fallbackLocales": "fallback_locales",
    "allowedLocaleAliases": "allowed_locale_aliases",
    "localeAllowList": "locale_allow_list",
    "forbiddenLocales": "forbidden_locales",
    "valuePreviewLength": "value_preview_length",
}

_LIST_FIELDS = {
    "fallback_trigger_locales",
    "fallback_locales",
    "locale_allow_list",
    "forbidden_locales",
}


def _string_tuple(name: str, value: Any) -> Tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ConfigError(f"'{name}' must be a list of strings, got {type(value).__name__}")
    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"'{name}' must contain only strings, got {item!r}")
    return tuple(value)


def _checks_tuple(value: Any) -> Tuple[IssueKind, ...]:
    names = _string_tuple("checks", value)
    kinds = []
    for name in names:
        try:
            kinds.append(IssueKind(name))
        except ValueError:
            valid = ", ".join(k.value for k in IssueKind)
            raise ConfigError(f"Unknown check '{name}' (expected one of: {valid})")
    return tuple(kinds)


def config_from_dict(d: Mapping[str, Any] | None, base: ValidatorConfig | None = None) -> ValidatorConfig:
    """
    Overlay a plain mapping on ``base`` (defaults if omitted).

    Keys may use snake_case or camelCase.

    Raises:
        ConfigError: unknown key or wrongly-typed value
    """
    base = base or ValidatorConfig()
    if d is None:
        return base
    if not isinstance(d, Mapping):
        raise ConfigError(f"Configuration must be a mapping, got {type(d).__name__}")

    known = {f.name for f in fields(ValidatorConfig)}
    changes: Dict[str, Any] = {}

    for raw_key, value in d.items():
        key = _CAMEL_CASE_KEYS.get(raw_key, raw_key)
        if key not in known:
            raise ConfigError(f"Unknown configuration key: {raw_key}")

        if key == "target_locale":
            if value is not None and not isinstance(value, str):
                raise ConfigError("'target_locale' must be a string or null")
            changes[key] = value
        elif key in _LIST_FIELDS:
            changes[key] = _string_tuple(key, value)
        elif key == "allowed_locale_aliases":
            if not isinstance(value, Mapping):
                raise ConfigError("'allowed_locale_aliases' must be a mapping")
            for k, v in value.items():
                if not isinstance(k, str) or not isinstance(v, str):
                    raise ConfigError("'allowed_locale_aliases' must map strings to strings")
            changes[key] = dict(value)
        elif key == "checks":
            changes[key] = _checks_tuple(value)
        elif key == "value_preview_length":
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError("'value_preview_length' must be a positive integer")
            changes[key] = value

    return replace(base, **changes)


def load_config(path: str) -> ValidatorConfig:
    """
    Load a YAML configuration file.

    An empty file yields the defaults.

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigError: If the file is not valid YAML or has invalid settings
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}")
    return config_from_dict(data)


__all__ = [
    "ConfigError",
    "DEFAULT_CHECKS",
    "ValidatorConfig",
    "config_from_dict",
    "load_config",
]
