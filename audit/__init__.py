"""
audit — audyt akcji: podstawa, stwierdzenia, ważność polityki.

Interfejs publiczny:
    ActionAuditor    — audytor (etapy A–C)
    AuditReport, AuditError, ErrorCode — typy raportu
    PolicyEvaluator, Judgement, load_evaluator — interfejs ewaluatora

Typowe użycie:
    from audit import ActionAuditor, load_evaluator

    auditor = ActionAuditor(agreements, statements.view("Bob"),
                            load_evaluator("my_solver:Evaluator"))
    report  = auditor.audit(action)
"""

from .types import AuditError, AuditReport, ErrorCode
from .evaluator import Judgement, PolicyEvaluator, load_evaluator
from .auditor import ActionAuditor

__all__ = [
    "AuditError",
    "AuditReport",
    "ErrorCode",
    "Judgement",
    "PolicyEvaluator",
    "load_evaluator",
    "ActionAuditor",
]
