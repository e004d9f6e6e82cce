"""Wspólne fiksury: wiadomości i akcja scenariusza Alice/Bob/konsorcjum."""

import json

import pytest

from ledger import reset_shared_agreements
from ontology import Action, Message, atom, authorises, make_safe_rule, reads_authorised_by, task_of


@pytest.fixture
def alice_reads_rule():
    # reads(Alice, ?D) :- authorises(Bob, Alice, ?T), task_of(?D, ?T)
    return make_safe_rule(
        atom("reads", "Alice", "?D"),
        [authorises("Bob", "Alice", "?T"), task_of("?D", "?T")],
    )


@pytest.fixture
def alice_msg(alice_reads_rule):
    return Message(author="Alice", content=(alice_reads_rule,))


@pytest.fixture
def consortium_msg():
    return Message(
        author="consortium",
        content=(reads_authorised_by("Bob"), make_safe_rule(task_of("data1", "analysis"))),
    )


@pytest.fixture
def bob_msg():
    return Message(author="Bob", content=(make_safe_rule(authorises("Bob", "Alice", "analysis")),))


@pytest.fixture
def action(consortium_msg, bob_msg):
    return Action(actor="Alice", basis=consortium_msg, extra=(bob_msg,))


@pytest.fixture(autouse=True)
def _fresh_shared_agreements():
    reset_shared_agreements()
    yield
    reset_shared_agreements()


@pytest.fixture
def write_json(tmp_path):
    """Zapisuje obiekt jako plik JSON w tmp_path i zwraca ścieżkę."""
    def _write(name, obj):
        path = tmp_path / name
        path.write_text(json.dumps(obj, ensure_ascii=False), encoding="utf-8")
        return path
    return _write
