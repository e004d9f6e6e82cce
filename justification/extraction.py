"""
justification/extraction.py — ekstrakcja polityki ze zbioru wiadomości.

  extract1(message)   -> Policy   dla każdej reguły: (goła, says); |wynik| = 2k
  extract(messages)   -> Policy   konkatenacja extract1 w kolejności wiadomości

Ekstrakcja jest czysta, totalna i deterministyczna dla uporządkowanego
wejścia. Duplikaty między wiadomościami są zachowane — deduplikacja należy
do ewaluatora. To jedyna droga, którą powstają reguły z atrybucją "says".
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable

from ontology.messages import Message, Policy

from .says import add_says_head


def extract1(message: Message) -> Policy:
    return tuple(itertools.chain.from_iterable(
        add_says_head(message.author, rule) for rule in message.content
    ))


def extract(messages: Iterable[Message]) -> Policy:
    """
    Spłaszcza extract1 po wszystkich wiadomościach.

    Dla zbiorów (set/frozenset) kolejność reguł wynika z kolejności iteracji
    zbioru; multizbiór reguł jest ten sam.
    """
    return tuple(itertools.chain.from_iterable(extract1(m) for m in messages))
