"""
audit/auditor.py — audyt akcji względem zbiorów widzianych przez audytora.

ActionAuditor.audit(action) -> AuditReport

Etapy:
  A — podstawa        (basis należy do aktualnych uzgodnień)
  B — stwierdzenia    (każda wiadomość extra jest stwierdzona w widoku
                       audytora lub uzgodniona; wiadomość aktorstwa powstaje
                       z samej akcji i jest zwolniona z tego wymogu)
  C — ważność         (extract(payload(action)) oceniony przez ewaluator;
                       pominięty z ostrzeżeniem, gdy ewaluatora brak)

Audyt nie mutuje żadnego zbioru: uzgodnienia czytane są jedną migawką
current(), stwierdzenia — migawką StatementsView.
"""

from __future__ import annotations

import logging

from justification import extract, payload
from ledger import Agreements, StatementsView
from ontology.messages import Action, Message, Policy

from .evaluator import PolicyEvaluator
from .types import AuditError, AuditReport, ErrorCode

logger = logging.getLogger("justact.audit")


class ActionAuditor:
    """
    Audytor akcji.

    Użycie:
        auditor = ActionAuditor(agreements, statements.view("Bob"), evaluator)
        report  = auditor.audit(action)
        if not report.is_valid:
            for e in report.errors:
                print(e.code, e.path, e.message)
    """

    def __init__(
        self,
        agreements: Agreements,
        statements: StatementsView,
        evaluator: PolicyEvaluator | None = None,
    ) -> None:
        self._agreements = agreements
        self._statements = statements
        self._evaluator  = evaluator

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def audit(self, action: Action) -> AuditReport:
        errors: list[AuditError] = []
        warnings: list[str] = []
        agreed = self._agreements.current()

        # A — podstawa
        self._stage_based(action, agreed, errors)

        # B — stwierdzenia
        self._stage_stated(action, agreed, errors)

        # C — ważność polityki
        policy = extract(payload(action))
        self._stage_valid(policy, errors, warnings)

        report = AuditReport(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            policy=policy,
        )
        logger.info(
            "Audyt akcji aktora %s: %s (%d błąd(ów))",
            action.actor, "OK" if report.is_valid else "BŁĄD", len(errors),
        )
        return report

    # ------------------------------------------------------------------
    # Stage A — podstawa jest uzgodniona
    # ------------------------------------------------------------------

    def _stage_based(self, action: Action, agreed: frozenset[Message], errors: list[AuditError]) -> None:
        if action.basis not in agreed:
            errors.append(AuditError(
                code=ErrorCode.BASIS_NOT_AGREED,
                path="/basis",
                message=(
                    f"Podstawa akcji (wiadomość od '{action.basis.author}') "
                    f"nie należy do aktualnych uzgodnień."
                ),
                expected_fix=(
                    "Oprzyj akcję na wiadomości z aktualnego zbioru uzgodnień "
                    "albo doprowadź do jego wymiany (ReplaceAgreements)."
                ),
                details={"author": action.basis.author, "agreed": len(agreed)},
            ))

    # ------------------------------------------------------------------
    # Stage B — wiadomości extra są stwierdzone
    # ------------------------------------------------------------------

    def _stage_stated(self, action: Action, agreed: frozenset[Message], errors: list[AuditError]) -> None:
        for i, message in enumerate(action.extra):
            if message in agreed or self._statements.knows(message):
                continue
            errors.append(AuditError(
                code=ErrorCode.MESSAGE_NOT_STATED,
                path=f"/extra/{i}",
                message=(
                    f"Wiadomość extra[{i}] od '{message.author}' nie jest "
                    f"stwierdzona w widoku audytora ani uzgodniona."
                ),
                expected_fix=(
                    f"Autor '{message.author}' musi najpierw stwierdzić tę wiadomość."
                ),
                details={"author": message.author, "index": i},
            ))

    # ------------------------------------------------------------------
    # Stage C — polityka jest ważna
    # ------------------------------------------------------------------

    def _stage_valid(self, policy: Policy, errors: list[AuditError], warnings: list[str]) -> None:
        if self._evaluator is None:
            warnings.append("Brak ewaluatora — etap C (ważność polityki) pominięty.")
            return

        judgement = self._evaluator.judge(policy)
        if not judgement.is_valid:
            errors.append(AuditError(
                code=ErrorCode.POLICY_INVALID,
                path="/",
                message=(
                    "Polityka wyekstrahowana z payloadu akcji jest nieważna"
                    + (f": {judgement.explanation}" if judgement.explanation else ".")
                ),
                expected_fix=(
                    "Dołącz do extra wiadomości, które uzasadniają akcję, "
                    "lub usuń te, które czynią politykę sprzeczną."
                ),
                details={"rules": len(policy)},
            ))
