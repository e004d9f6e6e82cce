"""
ledger/statements.py — asynchroniczny, lokalny rejestr stwierdzeń i akcji.

Każdy agent ma własny widok (AgentStatements): zbiór wiadomości, o których
wie, że zostały stwierdzone, i akcji, o których wie, że zostały wykonane.
Widoki różnych agentów mogą się rozjeżdżać — nic ich tu nie synchronizuje.

Współbieżność: mutacje w obrębie jednego widoku są serializowane jego
własnym zamkiem; widoki nie współdzielą stanu.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock

from ontology.messages import Action, Agent, Message

logger = logging.getLogger("justact.ledger")


@dataclass(frozen=True, slots=True)
class StatementsView:
    """Migawka widoku: (wiadomości znane, akcje znane)."""
    messages: frozenset[Message]
    actions: frozenset[Action]

    def knows(self, message: Message) -> bool:
        return message in self.messages


class AgentStatements:
    """Widok jednego agenta. state/enact są idempotentne."""

    def __init__(self, view_id: Agent) -> None:
        self.view_id = view_id
        self._messages: set[Message] = set()
        self._actions: set[Action] = set()
        self._lock = Lock()

    def state(self, message: Message) -> bool:
        """Dodaje wiadomość do widoku. Zwraca True, gdy była nowa."""
        with self._lock:
            if message in self._messages:
                return False
            self._messages.add(message)
        logger.debug("Widok %s: stwierdzono wiadomość od %s", self.view_id, message.author)
        return True

    def enact(self, action: Action) -> bool:
        """Dodaje akcję do widoku. Zwraca True, gdy była nowa."""
        with self._lock:
            if action in self._actions:
                return False
            self._actions.add(action)
        logger.debug("Widok %s: wykonano akcję aktora %s", self.view_id, action.actor)
        return True

    def view(self) -> StatementsView:
        with self._lock:
            return StatementsView(frozenset(self._messages), frozenset(self._actions))


class Statements:
    """
    Rejestr widoków, tworzonych leniwie przy pierwszym odwołaniu.

    Użycie:
        stmts = Statements()
        stmts.of("Alice").state(msg)
        stmts.view("Bob")             # nie widzi msg
    """

    def __init__(self) -> None:
        self._views: dict[Agent, AgentStatements] = {}
        self._lock = Lock()

    def of(self, view_id: Agent) -> AgentStatements:
        with self._lock:
            view = self._views.get(view_id)
            if view is None:
                view = self._views[view_id] = AgentStatements(view_id)
            return view

    def view(self, view_id: Agent) -> StatementsView:
        """Migawka widoku; nieznany widok jest pusty i nie zostaje zarejestrowany."""
        with self._lock:
            view = self._views.get(view_id)
        if view is None:
            return StatementsView(frozenset(), frozenset())
        return view.view()

    def view_ids(self) -> tuple[Agent, ...]:
        with self._lock:
            return tuple(self._views)
