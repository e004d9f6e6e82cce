"""
ontology/messages.py — agenci, wiadomości i akcje.

  Agent    nieprzezroczysty identyfikator (str)
  Policy   krotka reguł; kolejność zachowana, duplikaty dozwolone
  Message  roszczenie agenta: autor + zbiór reguł (być może pusty)
  Action   aktor + wiadomość-podstawa (basis) + dowolne wiadomości extra

Wszystkie typy są niemutowalne i porównywane strukturalnie.
"""

from __future__ import annotations

from dataclasses import dataclass

from .rules import Rule

type Agent  = str
type Policy = tuple[Rule, ...]


@dataclass(frozen=True)
class Message:
    """
    Wiadomość: agent author twierdzi reguły z content.

    Autor jest niezbędny — bez niego ekstrakcja nie przypisze autorstwa.
    """
    author: Agent
    content: Policy = ()

    def __post_init__(self) -> None:
        if not isinstance(self.content, tuple):
            object.__setattr__(self, "content", tuple(self.content))

    def __str__(self) -> str:
        return f"{self.author}: {len(self.content)} reguł(a)"


@dataclass(frozen=True)
class Action:
    """
    Akcja agenta.

    - actor: agent wykonujący akcję
    - basis: wiadomość, na której akcja się opiera (powinna być uzgodniona)
    - extra: wiadomości dobrane przez aktora; same w sobie nic nie znaczą
    """
    actor: Agent
    basis: Message
    extra: tuple[Message, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.extra, tuple):
            object.__setattr__(self, "extra", tuple(self.extra))
