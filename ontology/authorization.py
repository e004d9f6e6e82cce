"""
ontology/authorization.py — relacja autoryzacji jako zwykłe atomy i reguły.

"Checker authorises Agent reads Data for Task":
  authorises(Checker, Agent, Task)   roszczenie sprawdzającego
  task_of(Data, Task)                dane wyznaczają swoje zadanie
  reads(Agent, Data, Task)           fakt pochodny: odczyt autoryzowany

Dane są zapisywane co najwyżej raz i wyznaczają zadanie, dlatego zapis nie
ma osobnej relacji. Nie istnieje specjalny typ autoryzacji — to zwykłe
reguły, traktowane przez ekstrakcję jak każde inne.
"""

from __future__ import annotations

from .facts import Atom, Node, Leaf, atom
from .messages import Agent
from .rules import SafeRule, make_safe_rule

AUTHORISES = "authorises"
READS      = "reads"
TASK_OF    = "task_of"


def authorises(checker: Agent, agent: Agent, task: str) -> Node[Leaf]:
    return atom(AUTHORISES, checker, agent, task)


def reads(agent: Agent, data: str, task: str) -> Node[Leaf]:
    return atom(READS, agent, data, task)


def task_of(data: str, task: str) -> Node[Leaf]:
    return atom(TASK_OF, data, task)


def reads_authorised_by(checker: Agent) -> SafeRule:
    """
    Reguła: reads(?A, ?D, ?T) :- authorises(checker, ?A, ?T), task_of(?D, ?T).

    Agent może czytać dane, jeśli checker autoryzował go do zadania,
    z którym te dane są związane.
    """
    body: list[Atom] = [authorises(checker, "?A", "?T"), task_of("?D", "?T")]
    return make_safe_rule(reads("?A", "?D", "?T"), body)
