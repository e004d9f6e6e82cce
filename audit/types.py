"""
audit/types.py — kody błędów i struktury raportu audytu akcji.

AuditError  — pojedynczy błąd z kodem, ścieżką (JSON Pointer w akcji),
    komunikatem i instrukcją naprawy.
AuditReport — wynik audytu: is_valid, errors, warnings oraz polityka
    wyekstrahowana z payloadu akcji.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from ontology.messages import Policy


class ErrorCode(StrEnum):
    """Stałe kody błędów audytu (etapy A–C)."""

    # A — podstawa jest uzgodniona
    BASIS_NOT_AGREED   = "E_BASIS_NOT_AGREED"

    # B — wiadomości extra są stwierdzone lub uzgodnione
    MESSAGE_NOT_STATED = "E_MESSAGE_NOT_STATED"

    # C — polityka z payloadu jest ważna
    POLICY_INVALID     = "E_POLICY_INVALID"


@dataclass(slots=True)
class AuditError:
    """
    Pojedynczy błąd audytu.

    - code:         stały identyfikator klasy błędu (ErrorCode)
    - path:         JSON Pointer w akcji, np. "/extra/1"
    - message:      czytelny opis błędu
    - expected_fix: krótka instrukcja, co musi się stać, by akcja przeszła
    - details:      opcjonalny słownik z dodatkowymi danymi
    """

    code: ErrorCode
    path: str
    message: str
    expected_fix: str
    details: dict[str, Any] | None = None


@dataclass(slots=True)
class AuditReport:
    """
    Wynik audytu akcji.

    - is_valid: True gdy brak błędów (warnings nie wpływają)
    - errors:   lista błędów (AuditError)
    - warnings: komunikaty ostrzegawcze (np. pominięty etap C)
    - policy:   extract(payload(action)) — polityka przekazana ewaluatorowi
    """

    is_valid: bool
    errors: list[AuditError] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    policy: Policy = ()
