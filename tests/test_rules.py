"""Testy bezpieczeństwa reguł (range restriction)."""

import pytest

from ontology import (
    Rule,
    SafetyError,
    Var,
    atom,
    format_rule,
    make_safe_rule,
    reads_authorised_by,
    unbound_head_variables,
)


def test_safe_rule_is_built():
    rule = make_safe_rule(atom("p", "?X"), [atom("q", "?X")])
    assert rule.head == atom("p", "?X")
    assert rule.body == (atom("q", "?X"),)
    assert not rule.is_fact


def test_ground_fact_with_empty_body_is_safe():
    rule = make_safe_rule(atom("task_of", "data1", "analysis"))
    assert rule.is_fact
    assert rule.body == ()


def test_unsafe_rule_reports_all_unbound_variables():
    with pytest.raises(SafetyError) as exc_info:
        make_safe_rule(atom("p", "?X", "?Y", "?Z"), [atom("q", "?Y")])
    assert exc_info.value.unbound == {Var("X"), Var("Z")}
    assert exc_info.value.head == atom("p", "?X", "?Y", "?Z")


def test_fact_with_variable_is_unsafe():
    with pytest.raises(SafetyError):
        make_safe_rule(atom("p", "?X"))


def test_direct_construction_is_checked_too():
    with pytest.raises(SafetyError):
        Rule(head=atom("p", "?X"), body=(atom("q", "?Y"),))


def test_safety_error_is_value_error():
    with pytest.raises(ValueError):
        make_safe_rule(atom("p", "?X"))


def test_body_variables_not_in_head_are_allowed():
    rule = make_safe_rule(atom("p"), [atom("q", "?X", "?Y")])
    assert rule.body == (atom("q", "?X", "?Y"),)


def test_unbound_head_variables():
    assert unbound_head_variables(atom("p", "?X"), [atom("q", "?X")]) == frozenset()
    assert unbound_head_variables(atom("p", "?X", "?Y"), []) == {Var("X"), Var("Y")}


def test_rules_compare_structurally():
    a = make_safe_rule(atom("p", "?X"), [atom("q", "?X")])
    b = make_safe_rule(atom("p", "?X"), (atom("q", "?X"),))
    assert a == b
    assert hash(a) == hash(b)


def test_format_rule():
    rule = make_safe_rule(atom("p", "?X"), [atom("q", "?X"), atom("r", "?X")])
    assert format_rule(rule) == "(p ?X) :- (q ?X), (r ?X)."
    assert str(make_safe_rule(atom("p", "a"))) == "(p a)."


def test_reads_authorised_by_is_safe():
    rule = reads_authorised_by("Bob")
    assert rule.head == atom("reads", "?A", "?D", "?T")
    assert rule.body == (
        atom("authorises", "Bob", "?A", "?T"),
        atom("task_of", "?D", "?T"),
    )
