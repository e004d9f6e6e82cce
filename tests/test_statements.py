"""Testy lokalnych widoków stwierdzeń."""

import threading

from ledger import Statements
from ontology import Message, atom, make_safe_rule


def _msg(i):
    return Message(author=f"agent{i}", content=(make_safe_rule(atom("n", str(i))),))


def test_state_is_idempotent(alice_msg):
    stmts = Statements()
    assert stmts.of("Alice").state(alice_msg) is True
    assert stmts.of("Alice").state(alice_msg) is False
    assert stmts.view("Alice").messages == {alice_msg}


def test_enact_is_idempotent(action):
    view = Statements().of("Bob")
    assert view.enact(action) is True
    assert view.enact(action) is False
    assert view.view().actions == {action}


def test_views_do_not_interfere(alice_msg, bob_msg):
    stmts = Statements()
    stmts.of("Alice").state(alice_msg)
    stmts.of("Bob").state(bob_msg)
    assert stmts.view("Alice").knows(alice_msg)
    assert not stmts.view("Alice").knows(bob_msg)
    assert stmts.view("Bob").messages == {bob_msg}


def test_views_created_lazily():
    stmts = Statements()
    assert stmts.view_ids() == ()
    assert stmts.of("Carol") is stmts.of("Carol")
    assert stmts.view_ids() == ("Carol",)


def test_reading_unknown_view_does_not_register_it(alice_msg):
    stmts = Statements()
    stmts.of("Alice").state(alice_msg)
    view = stmts.view("Typo")
    assert view.messages == frozenset()
    assert view.actions == frozenset()
    assert stmts.view_ids() == ("Alice",)


def test_snapshot_is_stable(alice_msg, bob_msg):
    view = Statements().of("Alice")
    view.state(alice_msg)
    snapshot = view.view()
    view.state(bob_msg)
    assert snapshot.messages == {alice_msg}


def test_concurrent_writers_lose_nothing():
    stmts = Statements()
    n_threads, per_thread = 8, 50

    def writer(t):
        for i in range(per_thread):
            stmts.of("shared").state(_msg(t * per_thread + i))
            stmts.of(f"own{t}").state(_msg(i))

    threads = [threading.Thread(target=writer, args=(t,)) for t in range(n_threads)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert len(stmts.view("shared").messages) == n_threads * per_thread
    for t in range(n_threads):
        assert len(stmts.view(f"own{t}").messages) == per_thread
