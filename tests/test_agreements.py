"""Testy zsynchronizowanego zbioru uzgodnień."""

import logging
import threading

from ledger import Agreements, ReplaceAgreements, reset_shared_agreements, shared_agreements
from ontology import Message, atom, make_safe_rule


def _msg(name):
    return Message(author=name, content=(make_safe_rule(atom("m", name)),))


def test_starts_empty():
    assert Agreements().current() == frozenset()


def test_replace_discards_previous_set():
    m1, m2, m3 = _msg("m1"), _msg("m2"), _msg("m3")
    agreements = Agreements()
    agreements.replace({m1, m2})
    agreements.replace({m3})
    assert agreements.current() == {m3}
    assert m1 not in agreements
    assert len(agreements) == 1


def test_replace_with_empty_set():
    agreements = Agreements([_msg("a")])
    agreements.replace([])
    assert agreements.current() == frozenset()


def test_apply_command():
    m1, m2 = _msg("m1"), _msg("m2")
    agreements = Agreements([m1])
    agreements.apply(ReplaceAgreements([m2]))
    assert agreements.current() == {m2}
    assert set(agreements) == {m2}


def test_command_coerces_to_frozenset():
    cmd = ReplaceAgreements([_msg("a"), _msg("a")])
    assert isinstance(cmd.messages, frozenset)
    assert len(cmd.messages) == 1


def test_current_snapshot_unaffected_by_replace():
    m1, m2 = _msg("m1"), _msg("m2")
    agreements = Agreements([m1])
    snapshot = agreements.current()
    agreements.replace([m2])
    assert snapshot == {m1}


def test_replace_logs_sizes(caplog):
    agreements = Agreements([_msg("a")])
    with caplog.at_level(logging.INFO, logger="justact.ledger"):
        agreements.replace([_msg("b"), _msg("c")])
    assert "1 → 2" in caplog.text


def test_readers_see_only_whole_sets():
    sets = [frozenset(_msg(f"{k}-{i}") for i in range(20)) for k in range(4)]
    agreements = Agreements(sets[0])
    stop = threading.Event()
    seen_bad = []

    def writer():
        k = 0
        while not stop.is_set():
            k = (k + 1) % len(sets)
            agreements.replace(sets[k])

    def reader():
        for _ in range(2000):
            current = agreements.current()
            if current not in sets:
                seen_bad.append(current)

    w = threading.Thread(target=writer)
    readers = [threading.Thread(target=reader) for _ in range(4)]
    w.start()
    for r in readers:
        r.start()
    for r in readers:
        r.join()
    stop.set()
    w.join()

    assert seen_bad == []


def test_shared_agreements_is_process_wide():
    assert shared_agreements() is shared_agreements()
    shared_agreements().replace([_msg("x")])
    assert len(shared_agreements()) == 1


def test_reset_shared_agreements():
    first = shared_agreements()
    first.replace([_msg("x")])
    reset_shared_agreements()
    assert shared_agreements() is not first
    assert shared_agreements().current() == frozenset()
