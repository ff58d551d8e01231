"""Tests for expression resolution."""

import pytest

from widgetlink.engine import referenced_ids, split_reference, to_text


@pytest.mark.unit
def test_unresolved_reference_is_empty(resolver):
    """Unknown ids never leak 'None' into the output."""
    assert resolver.resolve("${x.y}") == ""
    assert resolver.resolve("before ${x} after") == "before  after"


@pytest.mark.unit
def test_plain_text_passes_through(resolver):
    assert resolver.resolve("no tokens here") == "no tokens here"
    assert resolver.resolve("$ {not} ${") == "$ {not} ${"


@pytest.mark.unit
def test_non_strings_pass_through(resolver):
    """Non-string arguments are returned unexpanded."""
    payload = {"nested": "${x.y}"}
    assert resolver.resolve(42) == 42
    assert resolver.resolve(payload) is payload
    assert resolver.resolve(None) is None


@pytest.mark.unit
def test_store_fallback(resolver, store):
    store.set("dropdown-1", {"value": "a", "selected_value": "grape"})
    assert resolver.resolve("${dropdown-1.selected_value}") == "grape"
    assert resolver.resolve("${dropdown-1.value}") == "a"


@pytest.mark.unit
def test_canonical_alias_on_scalar(resolver, store):
    store.set("calendar-1", "2024-05-01")
    assert resolver.resolve("${calendar-1.value}") == "2024-05-01"
    assert resolver.resolve("${calendar-1.text}") == "2024-05-01"
    assert resolver.resolve("${calendar-1.other}") == ""


@pytest.mark.unit
def test_context_overrides_store(resolver, store):
    """Immediate context wins over stale store values."""
    store.set("dropdown-1", {"selected_value": "stale"})
    context = {"dropdown-1": {"selected_value": "fresh"}}
    assert resolver.resolve("${dropdown-1.selected_value}", context) == "fresh"


@pytest.mark.unit
def test_context_missing_property_falls_back_to_store(resolver, store):
    store.set("dropdown-1", {"selected_text": "Grape"})
    context = {"dropdown-1": {"value": "grape"}}
    assert resolver.resolve("${dropdown-1.selected_text}", context) == "Grape"


@pytest.mark.unit
def test_none_context_entry_ignored(resolver, store):
    store.set("w", "stored")
    assert resolver.resolve("${w.value}", {"w": None}) == "stored"


@pytest.mark.unit
def test_scalar_context_entry(resolver):
    """Scalar context entries honour canonical aliases too."""
    assert resolver.resolve("${textbox-1.text}", {"textbox-1": "hi"}) == "hi"


@pytest.mark.unit
def test_whole_value_tokens(resolver, store):
    """Tokens without a property, or with an empty one, read the whole value."""
    store.set("w", "abc")
    assert resolver.resolve("${w}") == "abc"
    assert resolver.resolve("${w.}") == "abc"


@pytest.mark.unit
def test_extra_segments_ignored(resolver, store):
    store.set("w", {"a": "first"})
    assert resolver.resolve("${w.a.b.c}") == "first"


@pytest.mark.unit
def test_multiple_tokens(resolver, store):
    store.set("a", "1")
    store.set("b", {"text": "two"})
    assert resolver.resolve("${a.value}-${b.text}-${c.value}") == "1-two-"


@pytest.mark.unit
def test_resolve_args(resolver, store):
    """Every argument is expanded into a fresh dict."""
    store.set("a", "x")
    args = {"value": "${a.value}", "count": 3}
    resolved = resolver.resolve_args(args)

    assert resolved == {"value": "x", "count": 3}
    assert args == {"value": "${a.value}", "count": 3}
    assert resolver.resolve_args(None) == {}


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        (None, ""),
        (True, "true"),
        (False, "false"),
        (3.0, "3"),
        (2.5, "2.5"),
        (7, "7"),
        ("s", "s"),
        ({"a": 1}, '{"a":1}'),
        ([{"name": "A", "value": 1}], '[{"name":"A","value":1}]'),
    ],
)
def test_to_text(value, expected):
    assert to_text(value) == expected


@pytest.mark.unit
def test_structured_values_stringified(resolver, store):
    store.set("chart-1", [{"name": "A", "value": 1}])
    assert resolver.resolve("${chart-1}") == '[{"name":"A","value":1}]'


@pytest.mark.unit
def test_unresolved_counted(resolver, metric):
    before = metric("widgetlink_unresolved_references_total")
    resolver.resolve("${ghost.value} ${ghost2}")
    assert metric("widgetlink_unresolved_references_total") == before + 2


@pytest.mark.unit
def test_split_reference():
    assert split_reference("a.b") == ("a", "b")
    assert split_reference("a") == ("a", None)
    assert split_reference("a.b.c") == ("a", "b")


@pytest.mark.unit
def test_referenced_ids():
    assert referenced_ids("${dropdown-2.selected_value} and ${calendar-1}") == [
        "dropdown-2",
        "calendar-1",
    ]
    assert referenced_ids("plain") == []
    assert referenced_ids(5) == []
