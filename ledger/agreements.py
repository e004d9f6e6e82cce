"""
ledger/agreements.py — zsynchronizowany zbiór uzgodnień.

Zbiór uzgodnień jest jeden i w danej chwili identyczny u wszystkich agentów.
Jedyną mutacją jest wymiana całości:

  replace(new_set)   atomowo odrzuca poprzedni zbiór i instaluje new_set
  current()          -> frozenset[Message]

Brak dodawania, usuwania pojedynczych elementów i indeksu czasowego —
aktywne uzgodnienia to po prostu aktualnie zainstalowany zbiór.

Stan trzymany jest w jednej komórce z niemutowalnym frozenset; zamiana
referencji jest atomowa, więc czytelnik widzi albo stary, albo nowy zbiór,
nigdy mieszankę. Rozgłoszenie ReplaceAgreements do innych procesów jest
zadaniem zewnętrznego transportu.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from threading import Lock

from ontology.messages import Message

logger = logging.getLogger("justact.ledger")


@dataclass(frozen=True)
class ReplaceAgreements:
    """Komenda: zastąp całą treść uzgodnień podanym zbiorem."""
    messages: frozenset[Message] = frozenset()

    def __post_init__(self) -> None:
        if not isinstance(self.messages, frozenset):
            object.__setattr__(self, "messages", frozenset(self.messages))


class Agreements:
    """Uzgodnienia lokalnego agenta; mutowalne wyłącznie przez replace()."""

    def __init__(self, initial: Iterable[Message] = ()) -> None:
        self._current: frozenset[Message] = frozenset(initial)
        self._lock = Lock()

    def replace(self, new_set: Iterable[Message]) -> None:
        installed = frozenset(new_set)
        with self._lock:
            previous, self._current = self._current, installed
        logger.info(
            "Uzgodnienia zastąpione: %d → %d wiadomości", len(previous), len(installed)
        )

    def apply(self, command: ReplaceAgreements) -> None:
        """Wejście kanału komend (dostarczane przez transport)."""
        self.replace(command.messages)

    def current(self) -> frozenset[Message]:
        return self._current

    def __contains__(self, message: object) -> bool:
        return message in self._current

    def __iter__(self) -> Iterator[Message]:
        return iter(self._current)

    def __len__(self) -> int:
        return len(self._current)


# ---------------------------------------------------------------------------
# Instancja procesu
# ---------------------------------------------------------------------------

_shared: Agreements | None = None
_shared_lock = Lock()


def shared_agreements() -> Agreements:
    """Uzgodnienia współdzielone w procesie; tworzone puste przy pierwszym użyciu."""
    global _shared
    with _shared_lock:
        if _shared is None:
            _shared = Agreements()
        return _shared


def reset_shared_agreements() -> None:
    """Koniec sesji: następne shared_agreements() zwróci nowy, pusty zbiór."""
    global _shared
    with _shared_lock:
        _shared = None
