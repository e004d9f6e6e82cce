"""Testy ładowania ewaluatora polityki."""

import sys
import types

import pytest

from audit import Judgement, PolicyEvaluator, load_evaluator


class _Evaluator:
    def judge(self, policy):
        return Judgement(is_valid=len(policy) > 0)


@pytest.fixture
def fake_module(monkeypatch):
    module = types.ModuleType("fake_solver")
    module.Evaluator = _Evaluator
    module.instance = _Evaluator()
    module.not_an_evaluator = object()
    monkeypatch.setitem(sys.modules, "fake_solver", module)
    return module


def test_class_is_instantiated(fake_module):
    evaluator = load_evaluator("fake_solver:Evaluator")
    assert isinstance(evaluator, _Evaluator)
    assert isinstance(evaluator, PolicyEvaluator)


def test_instance_is_returned_as_is(fake_module):
    assert load_evaluator("fake_solver:instance") is fake_module.instance


@pytest.mark.parametrize("target", ["fake_solver", "fake_solver:", ":Evaluator", ""])
def test_bad_target_format(target):
    with pytest.raises(ValueError):
        load_evaluator(target)


def test_missing_attribute(fake_module):
    with pytest.raises(AttributeError):
        load_evaluator("fake_solver:Missing")


def test_missing_module():
    with pytest.raises(ImportError):
        load_evaluator("no_such_module_for_justact:Evaluator")


def test_object_without_judge(fake_module):
    with pytest.raises(TypeError):
        load_evaluator("fake_solver:not_an_evaluator")
