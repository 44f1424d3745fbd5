"""
Tests for document traversal and validation.

Tests verify that the validator:
    - Visits every object/array exactly once, pre-order
    - Names paths by key, numbering array positions
    - Recurses into translation maps too
    - Produces identical ordered issues across runs
    - Warns (without failing) on non-string locale values
    - Never mutates the document
"""

import copy
import warnings

import pytest
from transcheck.config import ValidatorConfig
from transcheck.model import IssueKind, StructuralObject, TranslationMap
from transcheck.validator import (
    SchemaWarning,
    child_path,
    collect_locale_keys,
    iter_translation_maps,
    validate_document,
    walk,
)


def test_child_path():
    assert child_path("", "title") == "title"
    assert child_path("pages", 0) == "pages.0"
    assert child_path("pages.0", "elements") == "pages.0.elements"


def test_walk_is_preorder_with_indexed_paths():
    doc = {"a": {"b": [{"c": 1}, 2, [3]]}, "d": "x"}
    paths = [path for path, _ in walk(doc)]
    assert paths == ["", "a", "a.b", "a.b.0", "a.b.2"]


def test_walk_visits_each_node_once():
    doc = {"x": [{"y": {}}, {"z": []}]}
    paths = [path for path, _ in walk(doc)]
    assert len(paths) == len(set(paths)) == 6


def test_scalar_document():
    report = validate_document("just a string")
    assert report.nodes_visited == 0
    assert report.passed


def test_root_translation_map():
    report = validate_document({"default": "Hello", "es": "Hola"})
    assert len(report.issues) == 1
    assert report.issues[0].path == ""


def test_missing_locale_path_points_at_map():
    doc = {"title": {"default": "hello", "es": "hola"}}
    report = validate_document(doc)
    assert len(report.issues) == 1
    issue = report.issues[0]
    assert issue.kind == IssueKind.MISSING_LOCALE
    assert issue.path == "title"


def test_deeply_nested_map_inside_list_is_visited():
    doc = {
        "pages": [
            {"elements": [
                {"choices": [
                    {"text": {"default": "Hi <b>there</b>", "es-CO": "Hola"}},
                ]},
            ]},
        ],
    }
    report = validate_document(doc)
    assert [i.path for i in report.issues] == ["pages.0.elements.0.choices.0.text"]
    assert report.translation_maps == 1


def test_translation_maps_are_not_leaves():
    doc = {"default": "Outer", "es-CO": "Exterior", "meta": {"default": "<i>inner</i>", "es-CO": "x"}}
    report = validate_document(doc)
    assert report.translation_maps == 2
    assert [(i.path, i.kind) for i in report.issues] == [("meta", IssueKind.HTML_IN_VALUE)]


def test_issue_order_follows_document_order():
    doc = {
        "b": {"default": "x", "es": "y"},
        "a": [{"default": "<p>z</p>", "es-CO": "z"}],
        "c": {"default": "", "es-CO": "w"},
    }
    report = validate_document(doc)
    assert [(i.path, i.kind.value) for i in report.issues] == [
        ("b", "missing_locale"),
        ("a.0", "html_in_value"),
        ("c", "empty_fallback"),
    ]


def test_repeated_runs_are_identical():
    doc = {
        "pages": [
            {"title": {"default": "A", "es": "B"}},
            {"title": {"default": "<b>A</b>", "en": ""}},
        ]
    }
    first = validate_document(doc)
    second = validate_document(doc)
    assert first.issues == second.issues
    assert repr(first.issues) == repr(second.issues)


def test_document_is_not_mutated():
    doc = {"pages": [{"title": {"default": "", "es": "x", "en": None}}]}
    before = copy.deepcopy(doc)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", SchemaWarning)
        validate_document(doc)
    assert doc == before


def test_non_string_locale_value_warns_and_continues():
    doc = {
        "title": {"default": None, "es-CO": "x"},
        "next": {"default": "<b>still checked</b>", "es-CO": "y"},
    }
    with pytest.warns(SchemaWarning, match="title: locale key 'default' holds NoneType"):
        report = validate_document(doc)
    assert report.schema_warnings == ["title: locale key 'default' holds NoneType, not a string"]
    assert [i.path for i in report.issues] == ["next"]


def test_nested_object_under_locale_key_is_walked():
    doc = {"title": {"default": {"en": "<b>x</b>"}}}
    with pytest.warns(SchemaWarning):
        report = validate_document(doc)
    assert [(i.path, i.kind) for i in report.issues] == [
        ("title", IssueKind.MISSING_LOCALE),
        ("title.default", IssueKind.HTML_IN_VALUE),
    ]


def test_config_changes_checks_not_traversal():
    doc = {"t": {"default": "x", "es": "y"}}
    config = ValidatorConfig(checks=(IssueKind.HTML_IN_VALUE,))
    report = validate_document(doc, config)
    assert report.passed
    assert report.translation_maps == 1


def test_source_label_is_kept():
    assert validate_document({}, source="surveys/a.json").source == "surveys/a.json"


def test_iter_translation_maps():
    doc = {"a": {"en": "x"}, "b": [{"name": "q"}, {"de": "y"}]}
    found = [(path, type(node)) for path, node in iter_translation_maps(doc)]
    assert found == [("a", TranslationMap), ("b.1", TranslationMap)]


def test_walk_yields_structural_objects():
    nodes = dict(walk({"a": {"name": "q"}}))
    assert isinstance(nodes["a"], StructuralObject)


def test_collect_locale_keys_first_seen_order():
    doc = {
        "a": {"default": "x", "es-CO": "y"},
        "b": [{"en": "z", "default": "w"}],
    }
    counts = collect_locale_keys(doc)
    assert list(counts.items()) == [("default", 2), ("es-CO", 1), ("en", 1)]


def test_schema_warning_names_the_source():
    doc = {"title": {"default": 1, "es-CO": "x"}}
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("default", SchemaWarning)
        validate_document(doc, source="a.json")
        validate_document(doc, source="b.json")
    messages = [str(w.message) for w in caught if issubclass(w.category, SchemaWarning)]
    assert messages == [
        "a.json: title: locale key 'default' holds int, not a string",
        "b.json: title: locale key 'default' holds int, not a string",
    ]


def test_walk_recurses_into_any_mapping_or_tuple():
    from types import MappingProxyType

    doc = {"a": MappingProxyType({"t": {"default": "<b>x</b>", "es-CO": "x"}}), "b": ({"en": "<i>y</i>"},)}
    report = validate_document(doc)
    assert [i.path for i in report.issues] == ["a.t", "b.0"]
