"""
justification/payload.py — kanoniczny ciąg uzasadnienia akcji.

  reflect_actorship(action) -> Message   autor: sam aktor; treść: fakt actor(<aktor>)
  payload(action)           -> (basis, actorship, *extra)

Kolejność jest stała (podstawa, aktorstwo, extra) — konsumenci mogą
traktować pozycję jako znaczącą.
"""

from __future__ import annotations

from ontology.facts import Lit, Node
from ontology.messages import Action, Message
from ontology.rules import Rule

ACTOR = "actor"


def reflect_actorship(action: Action) -> Message:
    """
    Wiadomość stwierdzająca, że aktor wykonał akcję.

    Autorem jest aktor — po ekstrakcji powstaje "<aktor> says actor(<aktor>)",
    więc łańcuchy atrybucji faktów wynikających z akcji wskazują na aktora.
    """
    fact = Node((Lit(ACTOR), Lit(action.actor)))
    return Message(author=action.actor, content=(Rule(head=fact),))


def payload(action: Action) -> tuple[Message, ...]:
    return (action.basis, reflect_actorship(action), *action.extra)
