"""Tests for the binding compiler."""

import pytest
from hypothesis import given, strategies as st
from returns.result import Failure, Success
from structlog.testing import capture_logs

from widgetlink.bindings import (
    Action,
    BindingCompiler,
    BindingDescriptor,
    BindingMode,
    Rule,
    compile_bindings,
    validate_bindings,
)
from widgetlink.core import ValidationError

ids = st.text(alphabet="abcdefghijklmnopqrstuvwxyz-0123456789", min_size=1, max_size=12)
props = st.one_of(st.none(), st.sampled_from(["value", "text", "selected_value", "selected_text", " text ", ""]))


@st.composite
def descriptors(draw):
    mode = draw(st.sampled_from(list(BindingMode)))
    return BindingDescriptor(
        source=draw(ids),
        target=draw(ids),
        mode=mode,
        via=draw(ids) if mode is BindingMode.INDIRECT else None,
        source_property=draw(props),
        target_property=draw(props),
    )


def _binding(**kwargs):
    return BindingDescriptor(**kwargs)


@pytest.mark.unit
def test_direct_trigger():
    """Direct bindings fire on the source's onChange."""
    [rule] = BindingCompiler().compile([_binding(source="a", target="b", mode="direct")])
    assert rule.trigger == "a.onChange"


@pytest.mark.unit
def test_indirect_trigger():
    """Indirect bindings fire on the via widget's onClick."""
    [rule] = BindingCompiler().compile(
        [_binding(source="a", target="b", mode="indirect", via="button-1")]
    )
    assert rule.trigger == "button-1.onClick"


@pytest.mark.unit
def test_defaults_to_value():
    """Missing properties default to value / setValue."""
    [rule] = BindingCompiler().compile([_binding(source="a", target="b", mode="direct")])
    assert rule.actions == (Action(type="setValue", target="b", args={"value": "${a.value}"}),)


@pytest.mark.unit
def test_text_target_uses_set_text():
    [rule] = BindingCompiler().compile(
        [
            _binding(
                source="dropdown-1",
                target="textbox-1",
                mode="direct",
                source_property="selected_value",
                target_property="text",
            )
        ]
    )
    [action] = rule.actions
    assert action.type == "setText"
    assert action.args == {"text": "${dropdown-1.selected_value}"}


@pytest.mark.unit
def test_non_text_target_property_uses_set_value():
    [rule] = BindingCompiler().compile(
        [_binding(source="a", target="b", mode="direct", target_property="selected_value")]
    )
    assert rule.actions[0].type == "setValue"
    assert rule.actions[0].args == {"value": "${a.value}"}


@pytest.mark.unit
def test_properties_are_trimmed():
    """Whitespace around property names is ignored; blank means value."""
    [rule] = BindingCompiler().compile(
        [
            _binding(
                source="a", target="b", mode="direct",
                source_property="  selected_text ", target_property=" text",
            ),
        ]
    )
    assert rule.actions[0].type == "setText"
    assert rule.actions[0].args == {"text": "${a.selected_text}"}

    [rule] = BindingCompiler().compile(
        [_binding(source="a", target="b", mode="direct", source_property="   ")]
    )
    assert rule.actions[0].args == {"value": "${a.value}"}


@pytest.mark.unit
def test_hyphenated_aliases_accepted():
    descriptor = BindingDescriptor.model_validate(
        {"source": "a", "target": "b", "mode": "direct", "source-property": "text"}
    )
    assert descriptor.source_property == "text"


@pytest.mark.unit
def test_missing_via_compiles_dead_rule():
    """Indirect without via is tolerated and can never fire."""
    with capture_logs() as logs:
        [rule] = BindingCompiler().compile([_binding(source="a", target="b", mode="indirect")])

    assert rule.trigger == "None.onClick"
    assert any(log["event"] == "dead_rule" for log in logs)


@pytest.mark.unit
def test_dead_rule_metric(metric):
    before = metric("widgetlink_dead_rules_total")
    BindingCompiler().compile([_binding(source="a", target="b", mode="indirect")])
    assert metric("widgetlink_dead_rules_total") == before + 1


@pytest.mark.unit
def test_strict_mode_rejects_missing_via():
    with pytest.raises(ValidationError):
        BindingCompiler(strict=True).compile(
            [
                _binding(source="a", target="b", mode="direct"),
                _binding(source="a", target="c", mode="indirect", via="  "),
            ]
        )


@pytest.mark.unit
def test_validate_bindings_result():
    good = _binding(source="a", target="b", mode="direct")
    bad = _binding(source="a", target="c", mode="indirect")

    assert isinstance(validate_bindings([good]), Success)

    result = validate_bindings([good, bad])
    assert isinstance(result, Failure)
    assert result.failure().field == "bindings[1].via"


@pytest.mark.unit
def test_compile_bindings_accepts_mappings():
    rules = compile_bindings(
        [
            {"source": "a", "target": "b", "mode": "direct", "target-property": "text"},
            _binding(source="c", target="d", mode="indirect", via="btn"),
        ]
    )
    assert [r.trigger for r in rules] == ["a.onChange", "btn.onClick"]


@pytest.mark.unit
def test_compile_bindings_rejects_bad_mapping():
    with pytest.raises(ValidationError):
        compile_bindings([{"source": "a", "mode": "sideways"}])


@pytest.mark.unit
def test_rules_are_immutable():
    [rule] = BindingCompiler().compile([_binding(source="a", target="b", mode="direct")])
    with pytest.raises(Exception):
        rule.trigger = "other"
    assert isinstance(rule.actions, tuple)


@pytest.mark.unit
@given(st.lists(descriptors(), max_size=10))
def test_one_rule_per_descriptor_in_order(items):
    """Descriptors are never merged or reordered."""
    rules = BindingCompiler().compile(items)

    assert len(rules) == len(items)
    for descriptor, rule in zip(items, rules):
        assert isinstance(rule, Rule)
        assert len(rule.actions) == 1
        assert rule.actions[0].target == descriptor.target
        expected = (
            f"{descriptor.source}.onChange"
            if descriptor.mode is BindingMode.DIRECT
            else f"{descriptor.via}.onClick"
        )
        assert rule.trigger == expected


@pytest.mark.unit
@given(descriptors())
def test_action_type_matches_argument(descriptor):
    [rule] = BindingCompiler().compile([descriptor])
    [action] = rule.actions
    target_prop = (descriptor.target_property or "").strip() or "value"

    if target_prop == "text":
        assert action.type == "setText" and list(action.args) == ["text"]
    else:
        assert action.type == "setValue" and list(action.args) == ["value"]
    assert next(iter(action.args.values())).startswith("${" + descriptor.source + ".")
