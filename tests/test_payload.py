"""Testy payloadu akcji."""

from justification import ACTOR, extract, payload, reflect_actorship
from ontology import Action, Lit, Message, Node, atom


def test_payload_order(action, consortium_msg, bob_msg):
    messages = payload(action)
    assert messages[0] == consortium_msg
    assert messages[1] == reflect_actorship(action)
    assert messages[2:] == (bob_msg,)


def test_payload_length(consortium_msg, bob_msg, alice_msg):
    for extra in [(), (bob_msg,), (bob_msg, alice_msg, bob_msg)]:
        act = Action(actor="Alice", basis=consortium_msg, extra=extra)
        assert len(payload(act)) == 2 + len(extra)


def test_actorship_authored_by_actor(action):
    msg = reflect_actorship(action)
    assert msg.author == "Alice"
    assert len(msg.content) == 1
    assert msg.content[0].head == Node((Lit(ACTOR), Lit("Alice")))
    assert msg.content[0].is_fact


def test_actorship_is_deterministic(action):
    assert reflect_actorship(action) == reflect_actorship(action)


def test_payload_policy_contains_attributed_actorship(action):
    policy = extract(payload(action))
    heads = {str(rule.head) for rule in policy}
    assert "(Alice says (actor Alice))" in heads
    assert "(consortium says (task_of data1 analysis))" in heads


def test_extra_may_be_list():
    act = Action(actor="Bob", basis=Message(author="c"), extra=[Message(author="x")])
    assert act.extra == (Message(author="x"),)
    assert payload(act)[2] == Message(author="x")
    assert atom(ACTOR, "Bob") == payload(act)[1].content[0].head
