"""
justification/says.py — przypisanie autorstwa regule (says-rewriting).

  to_says_atom(author, atom)   -> Node[Lit(author), Lit("says"), atom]
  to_says_rule(author, rule)   -> Rule  (głowa owinięta, ciało bez zmian)
  add_says_head(author, rule)  -> (rule, to_says_rule(author, rule))
  split_says_atom(atom)        -> (author, inner) | None
  attribution_chain(atom)      -> ([B, A], X) dla "B says (A says X)"

Owinięcie głowy nie dodaje ani nie usuwa zmiennych, więc
vars(nowa głowa) == vars(stara głowa): bezpieczna reguła pozostaje bezpieczna.
"""

from __future__ import annotations

from ontology.facts import Atom, Leaf, Lit, Node
from ontology.messages import Agent
from ontology.rules import Rule

SAYS = Lit("says")


def to_says_atom(author: Agent, atom: Atom) -> Node[Leaf]:
    """Atom "author says atom" — stały węzeł trzyelementowy."""
    return Node((Lit(author), SAYS, atom))


def to_says_rule(author: Agent, rule: Rule) -> Rule:
    return Rule(head=to_says_atom(author, rule.head), body=rule.body)


def add_says_head(author: Agent, rule: Rule) -> tuple[Rule, Rule]:
    """
    Zwraca parę (reguła goła, reguła z autorstwem).

    Forma goła pozwala innym agentom zobaczyć surowe roszczenie, forma "says"
    pozwala ewaluatorowi śledzić autorstwo przechodnio.
    """
    return rule, to_says_rule(author, rule)


def split_says_atom(atom: Atom) -> tuple[Agent, Atom] | None:
    """Rozkłada "author says inner" na (author, inner); None dla innych atomów."""
    match atom:
        case Node(children=(Lit(name=author), Lit(name="says"), inner)):
            return author, inner
    return None


def attribution_chain(atom: Atom) -> tuple[list[Agent], Atom]:
    """
    Zdejmuje kolejne warstwy "says".

    "(Bob says (Alice says X))" → (["Bob", "Alice"], X)
    """
    authors: list[Agent] = []
    parts = split_says_atom(atom)
    while parts is not None:
        author, atom = parts
        authors.append(author)
        parts = split_says_atom(atom)
    return authors, atom
